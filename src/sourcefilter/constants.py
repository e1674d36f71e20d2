"""Physical constants used across the model (SI units)."""
from __future__ import annotations

V_SOUND_M_S: float = 343.0
