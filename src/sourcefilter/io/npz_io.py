from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

import numpy as np


def write_samples_npz(
    path: str | Path,
    t_s: np.ndarray,
    amplitude: np.ndarray,
    meta: Optional[Dict[str, Any]] = None,
) -> None:
    """
    Write a compressed NPZ file with the synthesized waveform.

    Stored keys:
      - t_s: time array [s]
      - amplitude: composite displacement, index-aligned with t_s
      - meta_json: JSON-encoded metadata (optional)
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    t = np.asarray(t_s, float)
    y = np.asarray(amplitude, float)
    if t.shape != y.shape:
        raise ValueError(f"t_s and amplitude shape mismatch: {t.shape} vs {y.shape}")

    out = {"t_s": t, "amplitude": y}
    if meta is not None:
        out["meta_json"] = json.dumps(meta, sort_keys=True)

    np.savez_compressed(path, **out)
