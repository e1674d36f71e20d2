from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict

from ..cavity import Cavity, Filter
from ..config import CavityConfig, FilterConfig, MainConfig

logger = logging.getLogger(__name__)


def build_cavity(c: CavityConfig) -> Cavity:
    if c.has_dimensions:
        phase = 0.0 if c.phase_rad is None else c.phase_rad
        return Cavity.from_dimensions(c.area_m2, c.volume_m3, c.length_m, phase)
    return Cavity.from_resonance(c.resonance_hz, c.phase_rad)


def build_filter(f: FilterConfig) -> Filter:
    return Filter(
        pharynx=build_cavity(f.pharynx),
        oral=build_cavity(f.oral),
        lip_rounding=build_cavity(f.lip_rounding),
    )


@dataclass
class FilterNode:
    cfg: MainConfig
    name: str = "filter"

    def run(self, ctx: Dict[str, Any]) -> Dict[str, Any]:
        source = ctx["source"]
        ctx = dict(ctx)

        if not self.cfg.filter.enabled:
            logger.info("filter disabled, passing %d raw harmonic(s)", len(source))
            ctx["filter"] = None
            ctx["waves"] = list(source)
            return ctx

        flt = build_filter(self.cfg.filter)
        for label, cavity in zip(("pharynx", "oral", "lip_rounding"), flt.cavities):
            logger.debug("%s: resonance %.3f Hz, offset %s", label, cavity.resonance_freq, cavity.offset)

        ctx["filter"] = flt
        ctx["waves"] = flt.apply_chain(source)
        return ctx
