from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict

from ..config import MainConfig, SourceConfig
from ..waves import SimpleWave, Source

logger = logging.getLogger(__name__)


def build_source(src: SourceConfig) -> Source:
    if src.series is not None:
        s = src.series
        return Source.harmonic_series(
            src.name,
            fundamental_hz=s.fundamental_hz,
            n_harmonics=s.n_harmonics,
            amplitude=s.amplitude,
            spectral_tilt=s.spectral_tilt,
            phase=s.phase_rad,
        )

    waves = []
    for h in src.harmonics:
        if h.period_s is not None:
            waves.append(SimpleWave.from_period(h.amplitude, h.period_s, h.phase_rad))
        else:
            waves.append(SimpleWave.from_freq(h.amplitude, h.frequency_hz, h.phase_rad))
    return Source.from_waves(src.name, waves)


@dataclass
class SourceNode:
    cfg: MainConfig
    name: str = "source"

    def run(self, ctx: Dict[str, Any]) -> Dict[str, Any]:
        source = build_source(self.cfg.source)
        logger.info("source %r: %d harmonic(s)", source.name, len(source))

        ctx = dict(ctx)
        ctx["source"] = source
        return ctx
