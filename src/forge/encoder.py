"""Amplitude to little-endian PCM sample encoding."""

import math

from forge.errors import SampleOverflowError


class SampleEncoder:
    """Encodes one real-valued amplitude at a fixed bit depth.

    Negative amplitudes are wrapped into the unsigned range by adding
    2**bits_per_sample (two's-complement style), so a 16-bit -1 becomes
    b"\\xff\\xff". Exactly 2**bits_per_sample wraps to zero; anything
    beyond the range raises SampleOverflowError.
    """

    def __init__(self, bits_per_sample: int):
        self._bits_per_sample = bits_per_sample
        self._max = 2 ** bits_per_sample
        self._width = -(-bits_per_sample // 8)

    @property
    def bits_per_sample(self) -> int:
        return self._bits_per_sample

    @property
    def width(self) -> int:
        """Encoded sample length in bytes."""
        return self._width

    @property
    def silence(self) -> bytes:
        return bytes(self._width)

    def encode(self, amplitude: float) -> bytes:
        """Encode an amplitude as ceil(bits/8) little-endian bytes.

        Raises:
            SampleOverflowError: the wrapped value falls outside [0, 2**bits].
        """
        number = amplitude
        if number < 0:
            number += self._max
        if number == self._max:
            number = 0
        elif not 0 <= number < self._max:
            raise SampleOverflowError(amplitude, self._bits_per_sample)

        return math.floor(number).to_bytes(self._width, "little")


def decode_sample(data: bytes) -> int:
    """Inverse of SampleEncoder.encode for in-range values."""
    return int.from_bytes(data, "little")
