"""Exceptions raised by the tone forge."""


class WavForgeError(Exception):
    """Base class for all forge errors."""


class ConfigError(WavForgeError, ValueError):
    """Invalid audio configuration, or reconfiguration after synthesis started."""


class SampleOverflowError(WavForgeError, OverflowError):
    """An amplitude does not fit into the configured bit depth."""

    def __init__(self, value: float, bits_per_sample: int):
        self.value = value
        self.bits_per_sample = bits_per_sample
        super().__init__(
            f"Overflow ({value!r} won't fit into a {bits_per_sample}-bit integer)"
        )


class InvalidCharacterError(WavForgeError, ValueError):
    """A code contains a character outside the tone alphabet."""

    def __init__(self, char: str, index: int):
        self.char = char
        self.index = index
        super().__init__(f"Invalid character {char!r} at position {index}")
