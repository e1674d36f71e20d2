from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from ..waves import SimpleWave
from .cavity import Cavity


@dataclass(frozen=True)
class Filter:
    """Vocal tract filter: pharynx -> oral cavity -> lip rounding."""
    pharynx: Cavity
    oral: Cavity
    lip_rounding: Cavity

    @property
    def cavities(self) -> Tuple[Cavity, Cavity, Cavity]:
        return (self.pharynx, self.oral, self.lip_rounding)

    @classmethod
    def neutral(cls) -> "Filter":
        return cls(
            pharynx=Cavity.from_resonance(0.0),
            oral=Cavity.from_resonance(0.0),
            lip_rounding=Cavity.from_resonance(0.0),
        )

    def apply_harmonic(self, harmonic: SimpleWave) -> SimpleWave:
        for cavity in self.cavities:
            harmonic = cavity.apply(harmonic)
        return harmonic

    def apply_chain(self, source: Iterable[SimpleWave]) -> List[SimpleWave]:
        """
        Run every harmonic of source through the cavity chain.

        Harmonics are independent; output order matches input order. Accepts a
        Source or any iterable of SimpleWave.
        """
        return [self.apply_harmonic(h) for h in source]
