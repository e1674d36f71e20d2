"""
sourcefilter

Source-filter model of speech production: a glottal source made of harmonic
sinusoids, shaped by a pharynx -> oral -> lip cavity chain and summed back into
a composite waveform by Fourier synthesis.

Primary entry points:
- sourcefilter.nodes.pipeline.run_from_config
- CLI: `sourcefilter-synth <config.yaml>`
"""
from __future__ import annotations

import os
from importlib import metadata

from .cavity import Cavity, Filter
from .errors import ConfigError, EmptyInput, InvalidParameter, SourceFilterError
from .nodes.pipeline import run_from_config
from .signal import generate_range, synthesize
from .waves import SimpleWave, Source

try:
    __version__ = metadata.version("sourcefilter")
except metadata.PackageNotFoundError:  # pragma: no cover - local editable import
    __version__ = "0.1.0"

__build__ = os.environ.get("SOURCEFILTER_BUILD_VERSION", "dev")
__version_info__ = f"{__version__}+{__build__}"

__all__ = [
    "__version__",
    "__build__",
    "__version_info__",
    "run_from_config",
    "SimpleWave",
    "Source",
    "Cavity",
    "Filter",
    "generate_range",
    "synthesize",
    "SourceFilterError",
    "InvalidParameter",
    "EmptyInput",
    "ConfigError",
]
