"""Configuration management for WavForge."""

from __future__ import annotations

import os
from pathlib import Path

# Code the tool emits when none is given
DEFAULT_CODE = "uv8e463l175lsiijdq4t"


def load_config(env_file: Path | None = None) -> dict:
    """Load configuration from environment variables and .env file.

    Relative defaults (.env, output/, logs/) resolve against the current
    working directory, so an installed `wavforge` writes where it is run.

    Audio values are returned as read; AudioConfig.from_config() converts
    and validates them.
    """
    workdir = Path.cwd()
    if env_file is None:
        env_file = workdir / ".env"

    # Load .env file if it exists (don't override existing env vars)
    if env_file.exists():
        with open(env_file) as f:
            for line in f:
                line = line.strip()
                if not line or line.startswith("#"):
                    continue
                key, _, value = line.partition("=")
                key, value = key.strip(), value.strip().strip("\"'")
                if key not in os.environ:
                    os.environ[key] = value

    return {
        # Audio format
        "channels": os.getenv("WAVFORGE_CHANNELS", "2"),
        "sample_rate": os.getenv("WAVFORGE_SAMPLE_RATE", "44100"),
        "bits_per_sample": os.getenv("WAVFORGE_BITS_PER_SAMPLE", "16"),

        # Input code and where the WAVE file goes
        "code": os.getenv("WAVFORGE_CODE", DEFAULT_CODE),
        "output_path": os.getenv("WAVFORGE_OUTPUT", str(workdir / "output" / "tones.wav")),

        # Logging
        "log_level": os.getenv("WAVFORGE_LOG_LEVEL", "INFO"),
        "log_dir": os.getenv("WAVFORGE_LOG_DIR", str(workdir / "logs")),
    }
