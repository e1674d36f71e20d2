"""Resonant cavities and the vocal tract filter chain."""
from __future__ import annotations

from .cavity import NO_OFFSET, Cavity, CavityPhase, NoOffset, Offset
from .filter import Filter

__all__ = ["Cavity", "CavityPhase", "Offset", "NoOffset", "NO_OFFSET", "Filter"]
