"""Sine tone kernels: fade envelope and raw (unencoded) sample values."""

import math

import numpy as np

# Fraction of the tone spent fading in, and again fading out
WING_FRACTION = 0.25


def frame_count(sample_rate: float, seconds: float) -> int:
    """Number of frames a tone of the given duration occupies."""
    return max(0, math.floor(sample_rate * seconds))


def envelope(total: int) -> np.ndarray:
    """Linear fade-in/out ratios for a tone of `total` frames.

    Ramps up over the first quarter, holds 1.0, and ramps down over the
    last quarter. A zero-length wing is skipped rather than divided by.
    """
    i = np.arange(total, dtype=np.float64)
    raise_wing = total * WING_FRACTION
    drop_wing = total * WING_FRACTION
    ratio = np.ones(total, dtype=np.float64)

    if drop_wing > 0:
        tail = drop_wing >= (total - i)
        ratio[tail] = (total - i[tail]) / drop_wing
    # Fade-in wins where the wings overlap
    if raise_wing > 0:
        head = i < raise_wing
        ratio[head] = i[head] / raise_wing

    return ratio


def sine_samples(
    freq: float,
    seconds: float,
    sample_rate: float,
    bits_per_sample: int,
    volume: float = 0.6,
) -> np.ndarray:
    """Generate envelope-shaped sine sample values, one per frame.

    Values are scaled to the signed range of the bit depth but not yet
    clipped or encoded, so out-of-range volumes surface as overflow later.

    Args:
        freq: Tone frequency in Hz.
        seconds: Tone duration in seconds.
        sample_rate: Audio sample rate in Hz.
        bits_per_sample: Target bit depth (sets the half-range scale).
        volume: Peak volume, nominally 0.0–1.0.

    Returns:
        float64 array of length frame_count(sample_rate, seconds).
    """
    total = frame_count(sample_rate, seconds)
    i = np.arange(total, dtype=np.float64)
    half_range = 2 ** bits_per_sample / 2
    wave = np.sin(2 * np.pi * i * freq / sample_rate)
    return volume * half_range * envelope(total) * wave
