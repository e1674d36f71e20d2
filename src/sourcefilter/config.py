"""
Configuration models + YAML loader.

Time values are seconds, frequencies Hz, phases radians, cavity dimensions SI
(m^2, m^3, m).
"""
from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .errors import ConfigError


@dataclass
class SamplingConfig:
    init_time_s: float = 0.0
    fin_time_s: float = 10.0
    step_s: float = 0.003


@dataclass
class HarmonicConfig:
    amplitude: float = 1.0
    # exactly one of frequency_hz / period_s
    frequency_hz: Optional[float] = None
    period_s: Optional[float] = None
    phase_rad: float = 0.0


@dataclass
class SeriesConfig:
    fundamental_hz: float = 120.0
    n_harmonics: int = 10
    amplitude: float = 1.0
    spectral_tilt: float = 1.0
    phase_rad: float = 0.0


def _default_harmonics() -> List[HarmonicConfig]:
    # sin(t) at amplitude 10
    return [HarmonicConfig(amplitude=10.0, period_s=2.0 * math.pi)]


@dataclass
class SourceConfig:
    name: str = "glottal"
    harmonics: List[HarmonicConfig] = field(default_factory=_default_harmonics)
    series: Optional[SeriesConfig] = None


@dataclass
class CavityConfig:
    resonance_hz: float = 0.0
    # all three set -> resonance derived from geometry (overrides resonance_hz)
    area_m2: Optional[float] = None
    volume_m3: Optional[float] = None
    length_m: Optional[float] = None
    phase_rad: Optional[float] = None

    @property
    def has_dimensions(self) -> bool:
        return all(d is not None for d in (self.area_m2, self.volume_m3, self.length_m))


@dataclass
class FilterConfig:
    enabled: bool = True
    pharynx: CavityConfig = field(default_factory=CavityConfig)
    oral: CavityConfig = field(default_factory=CavityConfig)
    lip_rounding: CavityConfig = field(default_factory=CavityConfig)


@dataclass
class OutputConfig:
    out_dir: str = "outputs"
    basename: str = "source_filter"
    write_npz: bool = True


@dataclass
class MainConfig:
    sampling: SamplingConfig = field(default_factory=SamplingConfig)
    source: SourceConfig = field(default_factory=SourceConfig)
    filter: FilterConfig = field(default_factory=FilterConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


def _deep_update(base: Dict[str, Any], update: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(base)
    for k, v in update.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_update(out[k], v)
        else:
            out[k] = v
    return out


def _asdict_dc(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj):
        return {f.name: _asdict_dc(getattr(obj, f.name)) for f in dataclasses.fields(obj)}
    if isinstance(obj, (list, tuple)):
        return [_asdict_dc(x) for x in obj]
    return obj


def _validate_keys(defaults: Dict[str, Any], user: Dict[str, Any], prefix: str = "") -> None:
    for k in user.keys():
        if k not in defaults:
            raise ConfigError(f"Unknown config key: {prefix}{k}")
        if isinstance(user[k], dict) and isinstance(defaults[k], dict):
            _validate_keys(defaults[k], user[k], prefix=f"{prefix}{k}.")


def _coerce(value: Any, annotation: str, key: str) -> Any:
    """Check/convert a scalar config value against its field annotation (a string here)."""
    if annotation.startswith("Optional["):
        if value is None:
            return None
        annotation = annotation[len("Optional["):-1]

    if annotation == "bool":
        if not isinstance(value, bool):
            raise ConfigError(f"{key} must be true or false, got {value!r}")
        return value
    if annotation in ("float", "int"):
        if isinstance(value, bool):
            raise ConfigError(f"{key} must be a number, got {value!r}")
        try:
            out = float(value)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"{key} must be a number, got {value!r}") from e
        if annotation == "int":
            if not out.is_integer():
                raise ConfigError(f"{key} must be an integer, got {value!r}")
            return int(out)
        return out
    if annotation == "str":
        if not isinstance(value, str):
            raise ConfigError(f"{key} must be a string, got {value!r}")
        return value
    return value


def _build(cls: Any, data: Any, prefix: str) -> Any:
    if not isinstance(data, dict):
        raise ConfigError(f"{prefix} must be a mapping, got {type(data).__name__}")
    types = {f.name: f.type for f in dataclasses.fields(cls)}
    for k in data:
        if k not in types:
            raise ConfigError(f"Unknown config key: {prefix}.{k}")
    return cls(**{k: _coerce(v, str(types[k]), f"{prefix}.{k}") for k, v in data.items()})


def _validate_cavity(c: CavityConfig, prefix: str) -> None:
    given = [d is not None for d in (c.area_m2, c.volume_m3, c.length_m)]
    if any(given) and not all(given):
        raise ConfigError(f"{prefix} needs all of area_m2, volume_m3, length_m or none of them")


def _build_harmonic(data: Any, prefix: str) -> HarmonicConfig:
    h = _build(HarmonicConfig, data, prefix)
    if (h.frequency_hz is None) == (h.period_s is None):
        raise ConfigError(f"{prefix} needs exactly one of frequency_hz or period_s")
    return h


def config_from_dict(data: Dict[str, Any]) -> MainConfig:
    defaults_dict = _asdict_dc(MainConfig())
    _validate_keys(defaults_dict, data)

    # a user-supplied series replaces the default harmonic list
    user_source = data.get("source") or {}
    if isinstance(user_source, dict) and user_source.get("series") is not None and "harmonics" not in user_source:
        data = _deep_update(data, {"source": {"harmonics": []}})

    cfg_dict = _deep_update(defaults_dict, data)

    for section in ("sampling", "source", "filter", "output"):
        if not isinstance(cfg_dict[section], dict):
            raise ConfigError(f"{section} must be a mapping")

    src = cfg_dict["source"]
    harmonics_raw = src.get("harmonics") or []
    if not isinstance(harmonics_raw, list):
        raise ConfigError("source.harmonics must be a list")
    harmonics = [_build_harmonic(h, f"source.harmonics[{i}]") for i, h in enumerate(harmonics_raw)]
    series = None if src.get("series") is None else _build(SeriesConfig, src["series"], "source.series")
    if series is not None and harmonics:
        raise ConfigError("source takes either harmonics or series, not both")
    source = SourceConfig(name=_coerce(src["name"], "str", "source.name"), harmonics=harmonics, series=series)

    flt = cfg_dict["filter"]
    filter_cfg = FilterConfig(
        enabled=_coerce(flt["enabled"], "bool", "filter.enabled"),
        pharynx=_build(CavityConfig, flt["pharynx"], "filter.pharynx"),
        oral=_build(CavityConfig, flt["oral"], "filter.oral"),
        lip_rounding=_build(CavityConfig, flt["lip_rounding"], "filter.lip_rounding"),
    )
    _validate_cavity(filter_cfg.pharynx, "filter.pharynx")
    _validate_cavity(filter_cfg.oral, "filter.oral")
    _validate_cavity(filter_cfg.lip_rounding, "filter.lip_rounding")

    return MainConfig(
        sampling=_build(SamplingConfig, cfg_dict["sampling"], "sampling"),
        source=source,
        filter=filter_cfg,
        output=_build(OutputConfig, cfg_dict["output"], "output"),
    )


def load_config(path: str | Path) -> MainConfig:
    path = Path(path)
    with path.open("r") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must parse to a dict")
    return config_from_dict(data)
