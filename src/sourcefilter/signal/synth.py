from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

from ..errors import EmptyInput, InvalidParameter
from ..waves import SimpleWave


@dataclass
class SynthesisResult:
    t: np.ndarray
    amplitude: np.ndarray
    # waves that were summed (filtered harmonics, or the raw source)
    waves: Tuple[SimpleWave, ...]

    def pairs(self) -> List[Tuple[float, float]]:
        return list(zip(self.t.tolist(), self.amplitude.tolist()))


def superpose(samples: np.ndarray, waves: Sequence[SimpleWave]) -> np.ndarray:
    """
    Linear superposition of waves over samples:

      y[j] = Σ_i waves[i].displace(samples)[j]

    Any number of waves (>= 1) is accepted.
    """
    t = np.asarray(samples, float)
    if t.ndim != 1:
        raise InvalidParameter(f"samples must be one-dimensional, got shape {t.shape}")

    waves = list(waves)
    if not waves:
        raise EmptyInput("Fourier synthesis needs at least one wave")

    out = np.zeros_like(t)
    for wave in waves:
        out += wave.displace(t)
    return out


def synthesize_waves(samples: np.ndarray, waves: Sequence[SimpleWave]) -> SynthesisResult:
    waves = tuple(waves)
    t = np.asarray(samples, float)
    return SynthesisResult(t=t, amplitude=superpose(t, waves), waves=waves)


def synthesize(samples: np.ndarray, waves: Sequence[SimpleWave]) -> List[Tuple[float, float]]:
    """Composite waveform as (time, amplitude) pairs, in sample order."""
    return synthesize_waves(samples, waves).pairs()
