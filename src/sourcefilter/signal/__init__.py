"""Time grids and Fourier synthesis by superposition."""
from __future__ import annotations

from .sampler import TimeGrid, generate_range
from .synth import SynthesisResult, superpose, synthesize, synthesize_waves

__all__ = ["TimeGrid", "generate_range", "SynthesisResult", "superpose", "synthesize", "synthesize_waves"]
