"""Tests for configuration handling."""

import pytest

from diffviz.config import BridgeConfig, SDEConfig, build_config, load_config


def test_defaults():
    cfg = SDEConfig()
    assert cfg.steps == 200
    assert cfg.paths == 20
    assert cfg.T == 4.0
    assert cfg.dt == pytest.approx(0.02)
    bridge = BridgeConfig()
    assert bridge.T == 1.0
    assert bridge.sigma_max == 0.8
    assert bridge.model_type == "dbim"


def test_dt_follows_steps_and_T():
    cfg = BridgeConfig()
    assert cfg.dt == pytest.approx(0.005)
    assert cfg.update("steps", 100)
    assert cfg.dt == pytest.approx(0.01)
    assert cfg.update("T", 2.0)
    assert cfg.dt == pytest.approx(0.02)


def test_unknown_key_rejected():
    cfg = SDEConfig()
    before = cfg.as_dict()
    assert cfg.update("bogus", 1) is False
    assert cfg.as_dict() == before


def test_dt_cannot_be_set():
    cfg = SDEConfig()
    assert cfg.update("dt", 0.5) is False
    assert cfg.get("dt") == pytest.approx(0.02)


def test_string_values_are_converted():
    cfg = BridgeConfig()
    cfg.update("steps", "50")
    cfg.update("sigma_max", "1.2")
    cfg.update("x_range", "-3,3")
    cfg.update("seed", "7")
    assert cfg.steps == 50
    assert cfg.sigma_max == pytest.approx(1.2)
    assert cfg.x_range == (-3.0, 3.0)
    assert cfg.seed == 7
    cfg.update("seed", "none")
    assert cfg.seed is None


def test_get_unknown_raises():
    with pytest.raises(KeyError):
        SDEConfig().get("bogus")


def test_copy_is_independent():
    cfg = SDEConfig()
    snapshot = cfg.copy()
    cfg.update("steps", 10)
    assert snapshot.steps == 200


def test_overrides_with_sections():
    cfg = BridgeConfig()
    rejected = cfg.update_from_overrides({"bridge.sigma_max": "1.5", "sde.sde_type": "ve", "nope": 1, "paths": "5"})
    assert cfg.sigma_max == pytest.approx(1.5)
    assert cfg.paths == 5
    assert sorted(rejected) == ["nope", "sde.sde_type"]


def test_build_config():
    assert isinstance(build_config("sde"), SDEConfig)
    assert isinstance(build_config("Bridge"), BridgeConfig)
    with pytest.raises(ValueError):
        build_config("unknown")


def test_load_config(tmp_path):
    path = tmp_path / "bridge.yaml"
    path.write_text("demo: bridge\nsteps: 50\nx_range: [-3.0, 3.0]\nmodel_type: ddib\nseed: 0\n")
    cfg = load_config(str(path))
    assert isinstance(cfg, BridgeConfig)
    assert cfg.steps == 50
    assert cfg.x_range == (-3.0, 3.0)
    assert cfg.model_type == "ddib"
    assert cfg.seed == 0


def test_load_config_rejects_non_mapping(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError):
        load_config(str(path))
