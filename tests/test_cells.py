from __future__ import annotations

import pytest

from brainfoam.cells import Bit, Byte, Nybble


def test_bit_rejects_other_values():
    with pytest.raises(ValueError):
        Bit(2)
    assert bool(Bit.one()) is True
    assert bool(Bit.zero()) is False
    assert int(Bit(1)) == 1


def test_bit_is_immutable():
    bit = Bit.one()
    with pytest.raises(AttributeError):
        bit.value = 0


def test_nybble_iterates_msb_first():
    nybble = Nybble.from_integer(0b1010)
    assert [int(b) for b in nybble] == [1, 0, 1, 0]
    assert len(list(nybble)) == 4


def test_nybble_iteration_is_restartable():
    nybble = Nybble(0b0110)
    assert list(nybble) == list(nybble)


def test_nybble_bits_read_as_binary_equal_value():
    for n in range(16):
        bits = list(Nybble(n))
        assert int("".join(str(b) for b in bits), 2) == n


def test_nybble_masks_to_lower_four_bits():
    assert Nybble.from_integer(0xAB).to_integer() == 0xB


def test_nybble_wraparound():
    n = Nybble(15)
    assert n.increment() is True
    assert n.to_integer() == 0
    assert n.decrement() is True
    assert n.to_integer() == 15
    assert n.decrement() is False
    assert n.to_integer() == 14


def test_nybble_indexing_and_bit_ops():
    n = Nybble(0)
    n.set_bit(0)
    assert n.to_integer() == 0b1000
    n.flip_bit(3)
    assert n.to_integer() == 0b1001
    n.clear_bit(0)
    assert n.to_integer() == 0b0001
    assert n[3] == Bit.one()
    assert n[-1] == Bit.one()
    with pytest.raises(IndexError):
        n[4]


def test_nybble_from_bits():
    bits = [Bit.one(), Bit.zero(), Bit.zero(), Bit.one()]
    assert Nybble.from_bits(bits) == Nybble(9)
    with pytest.raises(ValueError):
        Nybble.from_bits(bits[:3])


def test_byte_round_trip():
    for n in range(256):
        assert Byte.from_integer(n).to_integer() == n


def test_byte_inverse_laws():
    for n in range(256):
        b = Byte(n)
        b.increment()
        b.decrement()
        assert b == Byte(n)
        b.decrement()
        b.increment()
        assert b == Byte(n)


def test_byte_wraparound_at_boundaries():
    b = Byte.from_integer(255)
    b.increment()
    assert b == Byte.from_integer(0)
    b.decrement()
    assert b == Byte.from_integer(255)


def test_byte_carries_between_nybbles():
    b = Byte(0x0F)
    b.increment()
    assert b.high.to_integer() == 1
    assert b.low.to_integer() == 0
    b.decrement()
    assert int(b) == 0x0F


def test_byte_composition():
    for n in (0, 1, 16, 17, 100, 200, 255):
        b = Byte(n)
        assert b.to_integer() == b.high.to_integer() * 16 + b.low.to_integer()
    b = Byte.from_nybbles(Nybble(0xA), Nybble(0x5))
    assert b.to_integer() == 0xA5


def test_byte_copy_is_detached():
    b = Byte(7)
    c = b.copy()
    c.increment()
    assert b.to_integer() == 7
    assert c.to_integer() == 8


def test_byte_nybble_accessors_do_not_alias():
    b = Byte(0x12)
    high = b.high
    high.increment()
    assert b.to_integer() == 0x12


def test_byte_bits():
    assert [int(bit) for bit in Byte(0b10000001)] == [1, 0, 0, 0, 0, 0, 0, 1]
    assert len(Byte()) == 8


def test_bit_normalises_integral_values():
    assert int(Bit(True)) == 1
    assert type(Bit(1.0).value) is int
    assert Bit(1.0) == Bit.one()
    assert Bit(False).is_set() is False
    for bad in (0.5, 2.0, "1", None):
        with pytest.raises(ValueError):
            Bit(bad)
