"""WavForge: one configured forge producing one tone-sequence WAVE file."""

from __future__ import annotations

import logging

from forge.audio_config import AudioConfig
from forge.container import assemble, build_header
from forge.errors import ConfigError, SampleOverflowError
from forge.sequence import SequenceGenerator
from forge.synth import SynthesisState, ToneSynthesizer

log = logging.getLogger("wavforge.forge")


class WavForge:
    """Turns a code into a complete PCM WAVE byte string.

    Not thread-safe. Configure once, call generate_from_code() once, then
    read the result; state accumulates and is never reset.
    """

    def __init__(self, config: AudioConfig | None = None):
        self._config = config or AudioConfig()
        self._state = SynthesisState()
        self._synth = ToneSynthesizer(self._config, self._state)

    def configure(
        self,
        channels: int | None = None,
        sample_rate: float | None = None,
        bits_per_sample: int | None = None,
    ) -> AudioConfig:
        """Replace the audio format. Only allowed before any synthesis."""
        if self._state.sample_count or self._state.output:
            raise ConfigError("Cannot reconfigure after synthesis has started")
        self._config = self._config.replace(
            channels=channels,
            sample_rate=sample_rate,
            bits_per_sample=bits_per_sample,
        )
        self._synth = ToneSynthesizer(self._config, self._state)
        log.debug("Configured %s", self._config)
        return self._config

    @property
    def config(self) -> AudioConfig:
        return self._config

    @property
    def channels(self) -> int:
        return self._config.channels

    @property
    def sample_rate(self) -> float:
        return self._config.sample_rate

    @property
    def bits_per_sample(self) -> int:
        return self._config.bits_per_sample

    @property
    def sample_count(self) -> int:
        return self._state.sample_count

    @property
    def overflow_count(self) -> int:
        return self._synth.overflow_count

    @property
    def first_overflow(self) -> SampleOverflowError | None:
        return self._synth.first_overflow

    def wav_header(self) -> bytes:
        return build_header(self._config, self._state.sample_count)

    def wav_data(self) -> bytes:
        """Header plus every sample synthesized so far."""
        return assemble(self.wav_header(), bytes(self._state.output))

    def generate_from_code(self, code: str) -> bytes:
        """Synthesize the tone sequence for `code` and return the WAVE bytes."""
        SequenceGenerator(self._synth).generate(code)
        data = self.wav_data()
        log.info(
            "Generated %d frames (%d bytes, %d overflowed) for %d symbol(s)",
            self.sample_count, len(data), self._synth.overflow_count, len(code),
        )
        return data
