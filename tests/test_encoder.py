"""Tests for PCM sample encoding."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from forge.encoder import SampleEncoder, decode_sample
from forge.errors import SampleOverflowError

BIT_DEPTHS = [8, 16, 24, 32]


@pytest.mark.parametrize("bits", BIT_DEPTHS)
def test_round_trip_in_range(bits):
    """decode(encode(a)) == a across the unsigned range, including both ends."""
    encoder = SampleEncoder(bits)
    top = 2 ** bits - 1
    for value in (0, 1, 255, 256, top // 3, top // 2, top - 256, top):
        if not 0 <= value <= top:
            continue
        assert decode_sample(encoder.encode(value)) == value


def test_round_trip_every_8bit_value():
    encoder = SampleEncoder(8)
    assert [decode_sample(encoder.encode(v)) for v in range(256)] == list(range(256))


@pytest.mark.parametrize("bits", BIT_DEPTHS)
def test_encoded_width(bits):
    """Every encoding is ceil(bits/8) bytes, zero included."""
    encoder = SampleEncoder(bits)
    assert encoder.encode(0) == bytes(bits // 8)
    assert len(encoder.encode(1)) == bits // 8
    assert len(encoder.encode(2 ** bits - 1)) == bits // 8


def test_little_endian_order():
    encoder = SampleEncoder(16)
    assert encoder.encode(0x1234) == b"\x34\x12"
    assert SampleEncoder(24).encode(0x010203) == b"\x03\x02\x01"


@pytest.mark.parametrize("bits", BIT_DEPTHS)
def test_full_range_wraps_to_zero(bits):
    """encode(2**b) == encode(0)."""
    encoder = SampleEncoder(bits)
    assert encoder.encode(2 ** bits) == encoder.encode(0)


@pytest.mark.parametrize("bits", BIT_DEPTHS)
def test_negative_wraps_like_twos_complement(bits):
    """encode(-x) == encode(2**b - x) for 0 < x <= 2**b."""
    encoder = SampleEncoder(bits)
    top = 2 ** bits
    for x in (1, 2, 255, top // 2, top - 1, top):
        assert encoder.encode(-x) == encoder.encode(top - x)


def test_negative_one_is_all_ones():
    assert SampleEncoder(16).encode(-1) == b"\xff\xff"
    assert SampleEncoder(8).encode(-128) == b"\x80"


def test_fractional_amplitudes_floor():
    """Real-valued amplitudes are floored before packing."""
    encoder = SampleEncoder(16)
    assert encoder.encode(300.9) == encoder.encode(300)
    # -0.5 wraps to 65535.5 -> 65535, the int16 pattern of -1
    assert encoder.encode(-0.5) == b"\xff\xff"


@pytest.mark.parametrize("bits", BIT_DEPTHS)
def test_overflow_above_range(bits):
    """Amplitudes strictly above 2**b raise SampleOverflowError."""
    encoder = SampleEncoder(bits)
    top = 2 ** bits
    for value in (top + 1, top + 0.5, top * 2):
        with pytest.raises(SampleOverflowError) as exc_info:
            encoder.encode(value)
        assert exc_info.value.value == value
        assert exc_info.value.bits_per_sample == bits


def test_overflow_below_negative_range():
    """Negative values that stay negative after wrapping are out of range."""
    with pytest.raises(SampleOverflowError, match="16-bit"):
        SampleEncoder(16).encode(-65537)


def test_overflow_error_is_builtin_overflow():
    with pytest.raises(OverflowError):
        SampleEncoder(8).encode(1000)


def test_silence_matches_zero():
    encoder = SampleEncoder(24)
    assert encoder.silence == encoder.encode(0) == b"\x00\x00\x00"
    assert encoder.width == 3
