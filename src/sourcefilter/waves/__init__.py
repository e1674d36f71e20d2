"""Sinusoidal harmonics and the glottal source built from them."""
from __future__ import annotations

from .simple_wave import SimpleWave
from .source import Source

__all__ = ["SimpleWave", "Source"]
