from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict

from ..config import MainConfig
from ..signal.sampler import generate_range

logger = logging.getLogger(__name__)


@dataclass
class SamplingNode:
    cfg: MainConfig
    name: str = "sampling"

    def run(self, ctx: Dict[str, Any]) -> Dict[str, Any]:
        s = self.cfg.sampling
        samples = generate_range(s.init_time_s, s.fin_time_s, s.step_s)
        logger.debug("time grid [%g, %g] step %g -> %d samples", s.init_time_s, s.fin_time_s, s.step_s, samples.size)

        ctx = dict(ctx)
        ctx["samples"] = samples
        return ctx
