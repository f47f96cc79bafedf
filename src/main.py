"""WavForge - write the tone sequence for a code to a WAVE file."""

import logging
import logging.handlers
import sys
from pathlib import Path

from config import load_config
from forge import WavForgeError, get_forge

log = logging.getLogger("wavforge")


def setup_logging(config: dict) -> None:
    """Configure root logger with console and rotating file handlers."""
    fmt = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    level = getattr(logging, config["log_level"].upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)

    console = logging.StreamHandler()
    console.setFormatter(fmt)
    root.addHandler(console)

    # Rotating file handler
    log_dir = Path(config["log_dir"])
    log_dir.mkdir(parents=True, exist_ok=True)
    file_handler = logging.handlers.RotatingFileHandler(
        log_dir / "wavforge.log",
        maxBytes=1_000_000,
        backupCount=3,
    )
    file_handler.setFormatter(fmt)
    root.addHandler(file_handler)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    config = load_config()
    setup_logging(config)

    code = args[0] if args else config["code"]
    output_path = Path(config["output_path"])

    try:
        forge = get_forge(config)
        data = forge.generate_from_code(code)
    except WavForgeError as e:
        log.error(f"Could not generate tones for {code!r}: {e}")
        return 1

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(data)
    log.info(f"Wrote {len(data)} bytes ({forge.sample_count} frames) to {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
