"""Hand-off files for external renderers."""
from __future__ import annotations

from .npz_io import write_samples_npz

__all__ = ["write_samples_npz"]
