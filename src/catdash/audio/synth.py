"""
Oscillator and envelope generation for sound effects.

Each tone is a single oscillator with a gain that starts at ``volume``
and decays exponentially to silence over the tone's duration.
"""

from enum import Enum

import numpy as np
from numpy.typing import NDArray

SAMPLE_RATE = 44100
SILENCE = 0.001  # gain the envelope decays to


class WaveType(Enum):
    """Oscillator waveform types."""
    SINE = "sine"
    SQUARE = "square"
    SAWTOOTH = "sawtooth"
    TRIANGLE = "triangle"


def oscillator(wave: WaveType, frequency: float, t: NDArray[np.float64]) -> NDArray[np.float64]:
    """Evaluate a unit-amplitude waveform at times ``t`` (seconds)."""
    phase = (t * frequency) % 1.0

    if wave == WaveType.SINE:
        return np.sin(2 * np.pi * phase)
    if wave == WaveType.SQUARE:
        return np.where(phase < 0.5, 1.0, -1.0)
    if wave == WaveType.SAWTOOTH:
        return 2.0 * phase - 1.0
    if wave == WaveType.TRIANGLE:
        return 4.0 * np.abs(phase - 0.5) - 1.0

    raise ValueError(f"Unknown wave type: {wave}")


def decay_envelope(volume: float, duration: float, t: NDArray[np.float64]) -> NDArray[np.float64]:
    """Exponential ramp from ``volume`` down to ``SILENCE``."""
    floor = min(SILENCE, volume)
    return volume * (floor / volume) ** (t / duration)


def generate_tone(
    frequency: float,
    wave: WaveType,
    duration: float,
    sample_rate: int = SAMPLE_RATE,
    volume: float = 0.05,
) -> NDArray[np.int16]:
    """Render a mono tone as signed 16-bit samples."""
    num_samples = max(1, int(sample_rate * duration))
    t = np.arange(num_samples, dtype=np.float64) / sample_rate

    samples = oscillator(wave, frequency, t) * decay_envelope(volume, duration, t)
    return np.clip(samples * 32767, -32767, 32767).astype(np.int16)
