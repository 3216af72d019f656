import sys

from brainfoam.cli import main

sys.exit(main())
