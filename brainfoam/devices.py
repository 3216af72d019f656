"""
I/O devices the machine talks to on '.' and ','.

Any object with read_byte() and write_byte() will do; these are the two
the project ships: an in-memory buffer for tests and programmatic use, and
a wrapper over binary streams for terminals and files.
"""

from typing import BinaryIO, List, Optional, Protocol, Union


class IODevice(Protocol):
    def read_byte(self) -> Optional[int]:
        """Return the next input byte, or None at end of input."""

    def write_byte(self, value: int) -> None:
        """Accept one output byte."""


class BufferedIO:
    """Reads from a fixed input buffer and collects output in memory."""

    def __init__(self, input_data: Union[bytes, str] = b""):
        if isinstance(input_data, str):
            input_data = input_data.encode("latin-1")
        self.input_data = bytes(input_data)
        self.input_index = 0
        self.output: List[int] = []
        self.input_reads = 0
        self.output_writes = 0

    def read_byte(self) -> Optional[int]:
        if self.input_index >= len(self.input_data):
            return None
        value = self.input_data[self.input_index]
        self.input_index += 1
        self.input_reads += 1
        return value

    def write_byte(self, value: int) -> None:
        self.output.append(value & 0xFF)
        self.output_writes += 1

    @property
    def output_bytes(self) -> bytes:
        return bytes(self.output)

    @property
    def output_text(self) -> str:
        return self.output_bytes.decode("latin-1")


class StreamIO:
    """Byte-at-a-time I/O over binary streams such as stdin/stdout buffers."""

    def __init__(self, input_stream: Optional[BinaryIO] = None, output_stream: Optional[BinaryIO] = None):
        self.input_stream = input_stream
        self.output_stream = output_stream

    def read_byte(self) -> Optional[int]:
        if self.input_stream is None:
            return None
        data = self.input_stream.read(1)
        if not data:
            return None
        return data[0]

    def write_byte(self, value: int) -> None:
        if self.output_stream is None:
            return
        self.output_stream.write(bytes([value & 0xFF]))
        self.output_stream.flush()
