from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

from ..errors import InvalidParameter
from .simple_wave import SimpleWave


@dataclass(frozen=True)
class Source:
    """Unfiltered glottal excitation: a named, ordered set of harmonics."""
    name: str
    harmonics: Tuple[SimpleWave, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "harmonics", tuple(self.harmonics))

    def __iter__(self) -> Iterator[SimpleWave]:
        return iter(self.harmonics)

    def __len__(self) -> int:
        return len(self.harmonics)

    @classmethod
    def from_waves(cls, name: str, waves: Iterable[SimpleWave]) -> "Source":
        return cls(name=name, harmonics=tuple(waves))

    @classmethod
    def harmonic_series(
        cls,
        name: str,
        fundamental_hz: float,
        n_harmonics: int,
        amplitude: float = 1.0,
        spectral_tilt: float = 1.0,
        phase: float = 0.0,
    ) -> "Source":
        """
        Harmonics k = 1..n at k*f0 with amplitude / k**spectral_tilt.

        spectral_tilt=1 gives the 1/k sawtooth-like roll-off, 2 the steeper
        glottal-pulse slope (-12 dB/octave).
        """
        if int(n_harmonics) < 1:
            raise InvalidParameter(f"n_harmonics must be >= 1, got {n_harmonics}")
        if not fundamental_hz > 0:
            raise InvalidParameter(f"fundamental_hz must be > 0, got {fundamental_hz}")

        waves = [
            SimpleWave.from_freq(amplitude / k**spectral_tilt, k * fundamental_hz, phase)
            for k in range(1, int(n_harmonics) + 1)
        ]
        return cls(name=name, harmonics=tuple(waves))
