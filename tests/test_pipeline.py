import json
import math

import numpy as np
import pytest

from sourcefilter.cli.run_synth import main
from sourcefilter.config import config_from_dict
from sourcefilter.errors import EmptyInput, InvalidParameter
from sourcefilter.nodes.filter_node import build_cavity
from sourcefilter.nodes.pipeline import run_from_config, run_pipeline
from sourcefilter.signal import synthesize
from sourcefilter.waves import SimpleWave


def _cfg(tmp_path, **overrides):
    data = {
        "sampling": {"init_time_s": 0.0, "fin_time_s": 0.5, "step_s": 0.25},
        "source": {
            "harmonics": [
                {"amplitude": 1.0, "frequency_hz": 1.0},
                {"amplitude": 0.5, "frequency_hz": 2.0},
            ]
        },
        "output": {"out_dir": str(tmp_path / "out"), "basename": "run"},
    }
    data.update(overrides)
    return config_from_dict(data)


def test_pipeline_filters_and_synthesizes(tmp_path):
    ctx = run_pipeline(_cfg(tmp_path))

    res = ctx["signal_result"]
    np.testing.assert_allclose(res.t, [0.0, 0.25, 0.5])
    raw = [SimpleWave.from_freq(1.0, 1.0), SimpleWave.from_freq(0.5, 2.0)]
    expected = synthesize(res.t, [w.with_amplitude(8.0 * w.amplitude) for w in raw])
    np.testing.assert_allclose(res.amplitude, [y for _, y in expected], atol=1e-12)

    with np.load(ctx["npz_path"]) as z:
        np.testing.assert_array_equal(z["t_s"], res.t)
        np.testing.assert_array_equal(z["amplitude"], res.amplitude)
        meta = json.loads(str(z["meta_json"]))
    assert meta["filtered"] is True
    assert meta["n_waves"] == 2


def test_pipeline_without_filter_uses_raw_harmonics(tmp_path):
    cfg = _cfg(tmp_path, filter={"enabled": False}, output={"write_npz": False})
    ctx = run_pipeline(cfg)
    assert ctx["filter"] is None
    assert "npz_path" not in ctx
    assert ctx["waves"] == list(ctx["source"])


def test_empty_source_raises(tmp_path):
    cfg = _cfg(tmp_path, source={"harmonics": []})
    with pytest.raises(EmptyInput):
        run_pipeline(cfg)


def test_bad_step_raises(tmp_path):
    cfg = _cfg(tmp_path, sampling={"step_s": 0.0})
    with pytest.raises(InvalidParameter):
        run_pipeline(cfg)


def test_cavity_from_dimensions_config(tmp_path):
    cfg = _cfg(tmp_path, filter={"oral": {"area_m2": 2.0, "volume_m3": 8.0, "length_m": 4.0}})
    cavity = build_cavity(cfg.filter.oral)
    assert cavity.resonance_freq == pytest.approx(343.0 / (2.0 * math.pi))
    assert cavity.offset is None


def test_run_from_config_with_series(tmp_path):
    p = tmp_path / "cfg.yaml"
    p.write_text(
        "sampling: {fin_time_s: 0.01, step_s: 0.0001}\n"
        "source:\n  series: {fundamental_hz: 120.0, n_harmonics: 6, spectral_tilt: 2.0}\n"
        "filter:\n  pharynx: {resonance_hz: 700.0, phase_rad: 0.3}\n"
        f"output: {{out_dir: '{tmp_path / 'out'}', write_npz: false}}\n"
    )
    ctx = run_from_config(p)
    assert len(ctx["waves"]) == 6
    assert ctx["signal_result"].amplitude.shape == ctx["samples"].shape


def test_cli_writes_npz(tmp_path, capsys):
    p = tmp_path / "cfg.yaml"
    p.write_text(f"sampling: {{fin_time_s: 1.0, step_s: 0.1}}\noutput: {{out_dir: '{tmp_path}', basename: cli}}\n")
    assert main([str(p)]) == 0
    assert (tmp_path / "cli_wave.npz").exists()
    assert "Wrote NPZ" in capsys.readouterr().out


def test_cli_reports_errors(tmp_path, capsys):
    p = tmp_path / "cfg.yaml"
    p.write_text("sampling: {step_s: -1.0}\n")
    assert main([str(p)]) == 2
    assert "step" in capsys.readouterr().err


@pytest.mark.parametrize(
    "text",
    [
        "sampling: {step_s: abc}\n",
        "source:\n  harmonics: [{amplitude: 1.0, frequency_hz: high}]\n",
        "filter: {enabled: maybe}\n",
    ],
)
def test_cli_reports_wrongly_typed_config(tmp_path, capsys, text):
    p = tmp_path / "cfg.yaml"
    p.write_text(text)
    assert main([str(p)]) == 2
    assert "error:" in capsys.readouterr().err
