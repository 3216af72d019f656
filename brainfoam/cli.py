"""Command-line interface: run, debug and check programs."""

import argparse
import os
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from brainfoam.config import EofPolicy, TapePolicy, load_settings
from brainfoam.debugger import Debugger
from brainfoam.devices import BufferedIO, StreamIO
from brainfoam.errors import ConfigError, MalformedProgram, PointerOutOfBounds, StepLimitExceeded
from brainfoam.machine import VirtualMachine
from brainfoam.program import Program
from brainfoam.runner import drive

EXIT_OK = 0
EXIT_MALFORMED = 3
EXIT_OUT_OF_BOUNDS = 4
EXIT_STEP_LIMIT = 5


def _error(message: str) -> None:
    print(f"❌ {message}", file=sys.stderr)


def _load_program(path: str) -> Program:
    # Only the ASCII commands matter; latin-1 decodes any comment bytes
    return Program.from_source(Path(path).read_bytes().decode("latin-1"))


def _input_bytes(text: str) -> bytes:
    return os.fsencode(text)


def positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {n}")
    return n


def non_negative_int(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be at least 0, got {n}")
    return n


def cmd_run(args: argparse.Namespace) -> int:
    settings = load_settings()
    overrides = {}
    if args.tape_size is not None:
        overrides["tape_size"] = args.tape_size
    if args.step_limit is not None:
        overrides["step_limit"] = args.step_limit or None
    if args.wrap:
        overrides["tape_policy"] = TapePolicy.WRAP
    if args.eof is not None:
        overrides["eof_policy"] = EofPolicy(args.eof)
    settings = replace(settings, **overrides)

    program = _load_program(args.file)

    buffer = None
    if args.input is not None:
        buffer = BufferedIO(_input_bytes(args.input))
        device = buffer
    else:
        device = StreamIO(sys.stdin.buffer, sys.stdout.buffer)

    machine = VirtualMachine.from_settings(settings, device)
    machine.load(program)
    try:
        drive(machine, step_limit=settings.step_limit, strict_limit=True)
    finally:
        if buffer is not None:
            sys.stdout.buffer.write(buffer.output_bytes)
            sys.stdout.buffer.flush()
    return EXIT_OK


def cmd_debug(args: argparse.Namespace) -> int:
    debugger = Debugger(memory_size=args.memory_size, show_memory_range=args.window, max_steps=args.max_steps)
    result = debugger.debug_run(_load_program(args.file), _input_bytes(args.input or ""))
    print(f"\n✅ Execution complete. Final output: {result!r}")
    return EXIT_OK


def cmd_check(args: argparse.Namespace) -> int:
    program = _load_program(args.file)
    print(f"✅ {args.file}: {program.length()} instructions, {program.loop_count()} loops")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="brainfoam", description="Brainfuck tape machine interpreter")
    sub = ap.add_subparsers(dest="command", required=True)

    run = sub.add_parser("run", help="Run a program to completion")
    run.add_argument("file")
    run.add_argument("--input", default=None, help="Input text (default: read stdin)")
    run.add_argument("--tape-size", type=positive_int, default=None)
    run.add_argument("--step-limit", type=non_negative_int, default=None, help="0 means unlimited")
    run.add_argument("--wrap", action="store_true", help="Use a circular tape")
    run.add_argument("--eof", choices=[p.value for p in EofPolicy], default=None)
    run.set_defaults(func=cmd_run)

    debug = sub.add_parser("debug", help="Step through a program, showing machine state")
    debug.add_argument("file")
    debug.add_argument("--input", default=None)
    debug.add_argument("--memory-size", type=positive_int, default=30)
    debug.add_argument("--window", type=positive_int, default=10)
    debug.add_argument("--max-steps", type=non_negative_int, default=100)
    debug.set_defaults(func=cmd_debug)

    check = sub.add_parser("check", help="Check that a program's brackets balance")
    check.add_argument("file")
    check.set_defaults(func=cmd_check)
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except MalformedProgram as e:
        _error(f"Malformed program: {e}")
        return EXIT_MALFORMED
    except PointerOutOfBounds as e:
        _error(str(e))
        return EXIT_OUT_OF_BOUNDS
    except StepLimitExceeded as e:
        print(f"⚠️ {e}", file=sys.stderr)
        return EXIT_STEP_LIMIT
    except ConfigError as e:
        _error(f"Configuration error: {e}")
        return 2
    except OSError as e:
        _error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
