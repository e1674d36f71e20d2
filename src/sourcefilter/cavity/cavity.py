from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

import numpy as np

from ..constants import V_SOUND_M_S
from ..errors import InvalidParameter
from ..waves import SimpleWave


@dataclass(frozen=True)
class Offset:
    """An explicit cavity phase offset (radians)."""
    value: float

    def interference(self, phase: float) -> float:
        return float(np.cos(phase - self.value / 2.0))


@dataclass(frozen=True)
class NoOffset:
    """No cavity phase offset."""

    def interference(self, phase: float) -> float:
        return float(np.cos(phase / 2.0))


NO_OFFSET = NoOffset()

CavityPhase = Union[Offset, NoOffset]


@dataclass(frozen=True)
class Cavity:
    """
    One resonant stage of the vocal tract (pharynx, oral cavity, lips).

    Applying a cavity to a harmonic scales its amplitude by the boundary
    interference factor

      Offset(p): 2 cos(φ - p/2)
      NoOffset:  2 cos(φ/2)

    where φ is the harmonic phase. resonance_freq is carried as metadata and
    does not enter the amplitude factor.
    """
    resonance_freq: float = 0.0
    phase: CavityPhase = NO_OFFSET

    def __post_init__(self) -> None:
        if not self.resonance_freq >= 0:
            raise InvalidParameter(f"resonance_freq must be >= 0 Hz, got {self.resonance_freq}")

    @property
    def offset(self) -> Optional[float]:
        if isinstance(self.phase, Offset):
            return self.phase.value
        return None

    @classmethod
    def from_dimensions(cls, area: float, volume: float, length: float, phase: float = 0.0) -> "Cavity":
        """
        Helmholtz-style resonance from cavity geometry (SI units):

          f = v / (2π) * sqrt(area / volume * length)

        A phase of exactly 0.0 is stored as NO_OFFSET, so an explicit zero offset
        cannot be expressed through this constructor.
        """
        for label, value in (("area", area), ("volume", volume), ("length", length)):
            if not value > 0:
                raise InvalidParameter(f"cavity {label} must be > 0, got {value}")

        f_res = V_SOUND_M_S / (2.0 * np.pi) * np.sqrt(area / volume * length)
        cavity_phase: CavityPhase = NO_OFFSET if phase == 0.0 else Offset(float(phase))
        return cls(resonance_freq=float(f_res), phase=cavity_phase)

    @classmethod
    def from_resonance(cls, resonance_freq: float, phase: Optional[float] = None) -> "Cavity":
        cavity_phase: CavityPhase = NO_OFFSET if phase is None else Offset(float(phase))
        return cls(resonance_freq=float(resonance_freq), phase=cavity_phase)

    def gain(self, harmonic: SimpleWave) -> float:
        return 2.0 * self.phase.interference(harmonic.phase)

    def apply(self, harmonic: SimpleWave) -> SimpleWave:
        """New harmonic with the amplitude scaled by gain(); the input is untouched."""
        return harmonic.with_amplitude(self.gain(harmonic) * harmonic.amplitude)
