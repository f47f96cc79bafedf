"""Immutable audio format shared by every stage of the forge."""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass

from forge.errors import ConfigError

DEFAULT_CHANNELS = 2
DEFAULT_SAMPLE_RATE = 44100.0
DEFAULT_BITS_PER_SAMPLE = 16

# NumChannels and BlockAlign are 16-bit header fields; SampleRate and ByteRate 32-bit
_MAX_U16 = 0xFFFF
_MAX_U32 = 0xFFFFFFFF
# Deepest supported sample; larger depths overflow float sample math
MAX_BITS_PER_SAMPLE = 64


@dataclass(frozen=True)
class AudioConfig:
    """Channel count, sample rate and bit depth of the generated PCM.

    Validated on construction; use replace() to derive a modified copy.
    """

    channels: int = DEFAULT_CHANNELS
    sample_rate: float = DEFAULT_SAMPLE_RATE
    bits_per_sample: int = DEFAULT_BITS_PER_SAMPLE

    def __post_init__(self):
        if not _is_int(self.channels) or not 1 <= self.channels <= _MAX_U16:
            raise ConfigError(f"channels must be an integer in [1, {_MAX_U16}], got {self.channels!r}")
        if (
            isinstance(self.sample_rate, bool)
            or not isinstance(self.sample_rate, (int, float))
            or not math.isfinite(self.sample_rate)
            or self.sample_rate <= 0
        ):
            raise ConfigError(f"sample_rate must be a positive number, got {self.sample_rate!r}")
        if (
            not _is_int(self.bits_per_sample)
            or self.bits_per_sample <= 0
            or self.bits_per_sample % 8
            or self.bits_per_sample > MAX_BITS_PER_SAMPLE
        ):
            raise ConfigError(
                f"bits_per_sample must be a multiple of 8 in [8, {MAX_BITS_PER_SAMPLE}], "
                f"got {self.bits_per_sample!r}"
            )
        if self.block_align > _MAX_U16:
            raise ConfigError(f"block align {self.block_align} exceeds the 16-bit header field")
        if self.byte_rate > _MAX_U32:
            raise ConfigError(
                f"byte rate {self.byte_rate} (sample_rate {self.sample_rate!r}) "
                "exceeds the 32-bit header field"
            )

    @property
    def bytes_per_sample(self) -> int:
        return -(-self.bits_per_sample // 8)

    @property
    def block_align(self) -> int:
        """Bytes per multi-channel frame."""
        return self.channels * self.bytes_per_sample

    @property
    def byte_rate(self) -> int:
        return int(self.sample_rate) * self.block_align

    def replace(self, **changes) -> AudioConfig:
        """Return a validated copy with the given fields overridden (None = keep)."""
        changes = {k: v for k, v in changes.items() if v is not None}
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_config(cls, config: dict) -> AudioConfig:
        """Build from a load_config() dict; values may still be env strings."""
        try:
            return cls(
                channels=int(config.get("channels", DEFAULT_CHANNELS)),
                sample_rate=float(config.get("sample_rate", DEFAULT_SAMPLE_RATE)),
                bits_per_sample=int(config.get("bits_per_sample", DEFAULT_BITS_PER_SAMPLE)),
            )
        except ConfigError:
            raise
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid audio configuration: {e}") from e


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
