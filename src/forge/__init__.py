"""Tone forge: turns a short code into an FSK tone sequence in a PCM WAVE file.

Pipeline, leaf first:
- SampleEncoder: amplitude -> little-endian sample bytes
- ToneSynthesizer: one faded sine tone -> interleaved frames
- SequenceGenerator: code -> carrier/data tone pairs
- container: 44-byte RIFF/WAVE header
"""

from forge.audio_config import AudioConfig
from forge.errors import ConfigError, InvalidCharacterError, SampleOverflowError, WavForgeError
from forge.wav_forge import WavForge

__all__ = [
    "AudioConfig",
    "ConfigError",
    "InvalidCharacterError",
    "SampleOverflowError",
    "WavForge",
    "WavForgeError",
    "get_forge",
]


def get_forge(config: dict) -> WavForge:
    """Factory: return a WavForge for the audio format in config."""
    return WavForge(AudioConfig.from_config(config))
