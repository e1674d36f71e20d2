"""Pipeline nodes wiring config -> source -> filter -> synthesis -> output."""
from __future__ import annotations

from .pipeline import run_from_config, run_pipeline

__all__ = ["run_pipeline", "run_from_config"]
