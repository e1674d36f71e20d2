from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict

from ..config import MainConfig
from ..signal.synth import synthesize_waves

logger = logging.getLogger(__name__)


@dataclass
class SignalNode:
    cfg: MainConfig
    name: str = "signal"

    def run(self, ctx: Dict[str, Any]) -> Dict[str, Any]:
        sig_res = synthesize_waves(ctx["samples"], ctx["waves"])
        logger.info("synthesized %d samples from %d wave(s)", sig_res.t.size, len(sig_res.waves))

        ctx = dict(ctx)
        ctx["signal_result"] = sig_res
        return ctx
