"""Code-to-tone mapping: each symbol becomes a carrier tone plus a data tone.

Symbols are spaced 64 Hz apart starting at 18 kHz, just above a fixed
17.8 kHz carrier, so a simple Goertzel detector can tell them apart.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from forge.audio_config import AudioConfig
from forge.errors import InvalidCharacterError
from forge.synth import ToneSynthesizer
from utils.tone import frame_count as tone_frame_count

log = logging.getLogger(__name__)

ALPHABET = "0123456789abcdefghijklmnopqrstuv"
BASE_FREQUENCY = 18000
FREQUENCY_STEP = 64
FREQUENCIES = tuple(float(BASE_FREQUENCY + p * FREQUENCY_STEP) for p in range(len(ALPHABET)))

CARRIER_FREQUENCY = 17800.0
PERIOD = 0.0872  # seconds per symbol
VOLUME = 0.6
CARRIER_SECONDS = PERIOD / 2.0 * 1.4
DATA_SECONDS = PERIOD / 2.0 * 0.6


class TonePair(NamedTuple):
    carrier: float
    data: float


def symbol_position(char: str, index: int = 0) -> int:
    """Position of `char` in ALPHABET (case-sensitive)."""
    pos = ALPHABET.find(char) if len(char) == 1 else -1
    if pos < 0:
        raise InvalidCharacterError(char, index)
    return pos


def tone_pairs(code: str) -> list[TonePair]:
    """Validate the whole code and map each symbol to its tone pair."""
    return [
        TonePair(CARRIER_FREQUENCY, FREQUENCIES[symbol_position(char, i)])
        for i, char in enumerate(code)
    ]


def frame_count(code: str, config: AudioConfig) -> int:
    """Frames generate() will emit for `code`, without synthesizing anything."""
    per_symbol = tone_frame_count(config.sample_rate, CARRIER_SECONDS) + tone_frame_count(
        config.sample_rate, DATA_SECONDS
    )
    return len(tone_pairs(code)) * per_symbol


class SequenceGenerator:
    """Drives a ToneSynthesizer through the tone pairs of a code."""

    def __init__(self, synthesizer: ToneSynthesizer):
        self._synth = synthesizer

    def generate(self, code: str) -> bytes:
        """Synthesize `code` and return the accumulated PCM body.

        The code is validated up front, so an invalid character raises
        InvalidCharacterError before any tone is written.
        """
        pairs = tone_pairs(code)
        log.info("Generating %d symbol(s) for code %r", len(pairs), code)

        for pair in pairs:
            self._synth.synthesize(pair.carrier, VOLUME, CARRIER_SECONDS)
            self._synth.synthesize(pair.data, VOLUME, DATA_SECONDS)

        return bytes(self._synth.state.output)
