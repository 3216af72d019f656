"""
Bit-composed memory cells.

A tape cell is a Byte, built from two Nybbles, each of which is four Bits.
Storage is a plain fixed-width integer; the Bit view is produced lazily by
iteration and is never kept around as a list of objects.

Bit order is most-significant first everywhere: index 0 of a Nybble is its
bit 3, and iterating a Byte yields the high nybble's bits before the low's.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator

NYBBLE_WIDTH = 4
NYBBLE_MASK = 0x0F
BYTE_WIDTH = 8
BYTE_MASK = 0xFF


@dataclass(frozen=True)
class Bit:
    """A single binary digit."""
    value: int = 0

    def __post_init__(self):
        try:
            value = int(self.value)
        except (TypeError, ValueError):
            raise ValueError(f"Bit value must be 0 or 1, got {self.value!r}") from None
        if value != self.value or value not in (0, 1):
            raise ValueError(f"Bit value must be 0 or 1, got {self.value!r}")
        # Store a plain int so True and 1.0 behave like 1
        object.__setattr__(self, "value", value)

    @classmethod
    def zero(cls) -> 'Bit':
        return cls(0)

    @classmethod
    def one(cls) -> 'Bit':
        return cls(1)

    def is_set(self) -> bool:
        return self.value == 1

    def __bool__(self) -> bool:
        return self.is_set()

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


def _bit_offset(index: int, width: int) -> int:
    """Translate an MSB-first index (negative allowed) into a shift amount."""
    if index < 0:
        index += width
    if not 0 <= index < width:
        raise IndexError(f"bit index out of range for width {width}")
    return width - 1 - index


class Nybble:
    """Four bits with wraparound arithmetic."""

    def __init__(self, value: int = 0):
        self._value = int(value) & NYBBLE_MASK

    @classmethod
    def from_integer(cls, value: int) -> 'Nybble':
        """Build from the lower four bits of value."""
        return cls(value)

    @classmethod
    def from_bits(cls, bits: Iterable[Bit]) -> 'Nybble':
        """Build from exactly four Bits, most significant first."""
        bits = list(bits)
        if len(bits) != NYBBLE_WIDTH:
            raise ValueError(f"a Nybble needs exactly {NYBBLE_WIDTH} bits, got {len(bits)}")
        value = 0
        for bit in bits:
            value = (value << 1) | int(bit)
        return cls(value)

    def to_integer(self) -> int:
        return self._value

    def copy(self) -> 'Nybble':
        return Nybble(self._value)

    def increment(self) -> bool:
        """Add one in place. Returns True when the value wrapped 1111 -> 0000."""
        self._value = (self._value + 1) & NYBBLE_MASK
        return self._value == 0

    def decrement(self) -> bool:
        """Subtract one in place. Returns True when the value wrapped 0000 -> 1111."""
        self._value = (self._value - 1) & NYBBLE_MASK
        return self._value == NYBBLE_MASK

    def get_bit(self, index: int) -> Bit:
        return Bit((self._value >> _bit_offset(index, NYBBLE_WIDTH)) & 1)

    def set_bit(self, index: int) -> None:
        self._value |= 1 << _bit_offset(index, NYBBLE_WIDTH)

    def clear_bit(self, index: int) -> None:
        self._value &= ~(1 << _bit_offset(index, NYBBLE_WIDTH)) & NYBBLE_MASK

    def flip_bit(self, index: int) -> None:
        self._value ^= 1 << _bit_offset(index, NYBBLE_WIDTH)

    def __getitem__(self, index: int) -> Bit:
        return self.get_bit(index)

    def __iter__(self) -> Iterator[Bit]:
        for shift in range(NYBBLE_WIDTH - 1, -1, -1):
            yield Bit((self._value >> shift) & 1)

    def __len__(self) -> int:
        return NYBBLE_WIDTH

    def __int__(self) -> int:
        return self._value

    def __eq__(self, other):
        if not isinstance(other, Nybble):
            return NotImplemented
        return self._value == other._value

    def __repr__(self) -> str:
        return f"Nybble(0b{self._value:04b})"


class Byte:
    """
    An 8-bit tape cell made of a high and a low Nybble.

    Increment and decrement mutate in place, carrying between the nybbles,
    so the value wraps 255 -> 0 and 0 -> 255. Byte is a value type: callers
    that keep a cell outside the tape should hold a copy().
    """

    def __init__(self, value: int = 0):
        value = int(value) & BYTE_MASK
        self._high = Nybble(value >> NYBBLE_WIDTH)
        self._low = Nybble(value)

    @classmethod
    def from_integer(cls, value: int) -> 'Byte':
        return cls(value)

    @classmethod
    def from_nybbles(cls, high: Nybble, low: Nybble) -> 'Byte':
        byte = cls()
        byte._high = high.copy()
        byte._low = low.copy()
        return byte

    @property
    def high(self) -> Nybble:
        return self._high.copy()

    @property
    def low(self) -> Nybble:
        return self._low.copy()

    def to_integer(self) -> int:
        return self._high.to_integer() * 16 + self._low.to_integer()

    def copy(self) -> 'Byte':
        return Byte.from_nybbles(self._high, self._low)

    def is_zero(self) -> bool:
        return self.to_integer() == 0

    def increment(self) -> None:
        if self._low.increment():
            self._high.increment()

    def decrement(self) -> None:
        if self._low.decrement():
            self._high.decrement()

    def bits(self) -> Iterator[Bit]:
        """Yield all eight bits, most significant first."""
        yield from self._high
        yield from self._low

    def __iter__(self) -> Iterator[Bit]:
        return self.bits()

    def __len__(self) -> int:
        return BYTE_WIDTH

    def __int__(self) -> int:
        return self.to_integer()

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __eq__(self, other):
        if not isinstance(other, Byte):
            return NotImplemented
        return self._high == other._high and self._low == other._low

    def __repr__(self) -> str:
        return f"Byte({self.to_integer()})"
