from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from ..config import MainConfig
from ..io.npz_io import write_samples_npz

logger = logging.getLogger(__name__)


@dataclass
class OutputNode:
    cfg: MainConfig
    name: str = "output"

    def run(self, ctx: Dict[str, Any]) -> Dict[str, Any]:
        out_cfg = self.cfg.output
        if not out_cfg.write_npz:
            return ctx

        sig_res = ctx["signal_result"]
        sampling = self.cfg.sampling

        npz_path = Path(out_cfg.out_dir) / f"{out_cfg.basename}_wave.npz"
        meta = {
            "source": ctx["source"].name,
            "filtered": ctx.get("filter") is not None,
            "n_waves": len(sig_res.waves),
            "init_time_s": float(sampling.init_time_s),
            "fin_time_s": float(sampling.fin_time_s),
            "step_s": float(sampling.step_s),
        }
        write_samples_npz(npz_path, sig_res.t, sig_res.amplitude, meta=meta)
        logger.info("wrote %s", npz_path)

        ctx = dict(ctx)
        ctx["npz_path"] = str(npz_path)
        return ctx
