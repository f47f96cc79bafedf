"""Envelope-shaped sine synthesis into an interleaved PCM buffer."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from forge.audio_config import AudioConfig
from forge.encoder import SampleEncoder
from forge.errors import SampleOverflowError
from utils.tone import sine_samples

log = logging.getLogger("wavforge.synth")


@dataclass
class SynthesisState:
    """Frames emitted so far and the bytes that hold them."""

    sample_count: int = 0
    output: bytearray = field(default_factory=bytearray)


class ToneSynthesizer:
    """Appends one tone at a time to a shared SynthesisState.

    Every frame is encoded once and written once per channel, so the
    buffer always holds sample_count * config.block_align bytes. Frames
    that overflow the bit depth are written as silence and counted in
    `overflow_count` (the first error is kept in `first_overflow`) instead
    of aborting the tone.
    """

    def __init__(self, config: AudioConfig, state: SynthesisState | None = None):
        self._config = config
        self._encoder = SampleEncoder(config.bits_per_sample)
        self._state = state if state is not None else SynthesisState()
        self._overflow_count = 0
        self._first_overflow: SampleOverflowError | None = None

    @property
    def config(self) -> AudioConfig:
        return self._config

    @property
    def state(self) -> SynthesisState:
        return self._state

    @property
    def overflow_count(self) -> int:
        """Frames written as silence because they overflowed."""
        return self._overflow_count

    @property
    def first_overflow(self) -> SampleOverflowError | None:
        return self._first_overflow

    def synthesize(self, frequency: float, volume: float, seconds: float) -> int:
        """Append a sine tone and return the number of frames written."""
        if not 0.0 <= volume <= 1.0:
            log.warning("Volume %.3f outside [0, 1]; samples may overflow", volume)

        samples = sine_samples(
            frequency,
            seconds,
            self._config.sample_rate,
            self._config.bits_per_sample,
            volume=volume,
        )
        channels = self._config.channels
        state = self._state
        overflowed = 0

        for i, value in enumerate(samples.tolist()):
            try:
                encoded = self._encoder.encode(value)
            except SampleOverflowError as e:
                log.debug("Frame %d of %.1f Hz tone: %s", i, frequency, e)
                if self._first_overflow is None:
                    self._first_overflow = e
                overflowed += 1
                encoded = self._encoder.silence
            state.output += encoded * channels
            state.sample_count += 1

        self._overflow_count += overflowed
        if overflowed:
            log.warning(
                "%d of %d frames of %.1f Hz tone overflowed %d-bit range; wrote silence",
                overflowed, len(samples), frequency, self._config.bits_per_sample,
            )
        log.debug("Synthesized %.1f Hz for %.4fs (%d frames)", frequency, seconds, len(samples))
        return len(samples)
