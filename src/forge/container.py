"""Canonical 44-byte RIFF/WAVE header for linear PCM."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from forge.audio_config import AudioConfig

HEADER_SIZE = 44
PCM_FORMAT = 1
FMT_CHUNK_SIZE = 16

# RIFF, size, WAVE, "fmt ", fmt size, format, channels, rate,
# byte rate, block align, bits, "data", data size
_HEADER_STRUCT = struct.Struct("<4sI4s4sIHHIIHH4sI")


@dataclass(frozen=True)
class WaveHeader:
    """Field values of the RIFF/WAVE header, packed on demand."""

    channels: int
    sample_rate: int
    byte_rate: int
    block_align: int
    bits_per_sample: int
    data_size: int

    @property
    def chunk_size(self) -> int:
        return 36 + self.data_size

    def to_bytes(self) -> bytes:
        return _HEADER_STRUCT.pack(
            b"RIFF",
            self.chunk_size,
            b"WAVE",
            b"fmt ",
            FMT_CHUNK_SIZE,
            PCM_FORMAT,
            self.channels,
            self.sample_rate,
            self.byte_rate,
            self.block_align,
            self.bits_per_sample,
            b"data",
            self.data_size,
        )

    @classmethod
    def for_frames(cls, config: AudioConfig, total_frames: int) -> WaveHeader:
        return cls(
            channels=config.channels,
            sample_rate=int(config.sample_rate),
            byte_rate=config.byte_rate,
            block_align=config.block_align,
            bits_per_sample=config.bits_per_sample,
            data_size=total_frames * config.block_align,
        )


def build_header(config: AudioConfig, total_frames: int) -> bytes:
    """Return the 44 header bytes for `total_frames` frames of `config` audio."""
    return WaveHeader.for_frames(config, total_frames).to_bytes()


def assemble(header: bytes, body: bytes) -> bytes:
    """Prefix the PCM body with its header."""
    if len(header) != HEADER_SIZE:
        raise ValueError(f"WAVE header must be {HEADER_SIZE} bytes, got {len(header)}")
    return header + body
