from __future__ import annotations

from dataclasses import dataclass, replace

import numpy as np

from ..errors import InvalidParameter


@dataclass(frozen=True)
class SimpleWave:
    """
    A single sinusoidal harmonic:

      y(t) = amplitude * sin(2π f t + phase)

    Only frequency is stored; period and angular frequency are derived from it,
    so the three can never disagree.
    """
    amplitude: float
    frequency: float
    phase: float = 0.0

    def __post_init__(self) -> None:
        if not (np.isfinite(self.frequency) and self.frequency > 0):
            raise InvalidParameter(f"frequency must be a finite value > 0 Hz, got {self.frequency}")

    @property
    def period(self) -> float:
        return 1.0 / self.frequency

    @property
    def angular_frequency(self) -> float:
        return 2.0 * np.pi * self.frequency

    @classmethod
    def from_period(cls, amplitude: float, period: float, phase: float = 0.0) -> "SimpleWave":
        if not (np.isfinite(period) and period > 0):
            raise InvalidParameter(f"period must be a finite value > 0 s, got {period}")
        return cls(amplitude=float(amplitude), frequency=1.0 / float(period), phase=float(phase))

    @classmethod
    def from_freq(cls, amplitude: float, frequency: float, phase: float = 0.0) -> "SimpleWave":
        return cls(amplitude=float(amplitude), frequency=float(frequency), phase=float(phase))

    @classmethod
    def default(cls) -> "SimpleWave":
        """Concert A: 440 Hz, amplitude 4."""
        return cls.from_freq(4.0, 440.0, 0.0)

    @classmethod
    def sine_wave(cls, amplitude: float, phase: float = 0.0) -> "SimpleWave":
        """Plain sin(t): period 2π, so angular frequency is 1 rad/s."""
        return cls.from_period(amplitude, 2.0 * np.pi, phase)

    def with_amplitude(self, amplitude: float) -> "SimpleWave":
        return replace(self, amplitude=float(amplitude))

    def displace(self, samples: np.ndarray) -> np.ndarray:
        """Displacement at each time in samples (index-aligned)."""
        t = np.asarray(samples, float)
        return self.amplitude * np.sin(2.0 * np.pi * self.frequency * t + self.phase)
