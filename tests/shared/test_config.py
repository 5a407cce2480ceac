"""Tests for configuration schema and YAML loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from cribbage.shared.config import Config, SolverConfig
from cribbage.shared.config_loader import available_configs, load_config
from cribbage.shared.config import deep_merge_dicts

CONFIG_DIR = Path(__file__).resolve().parents[2] / "config"


class TestConfig:
    """Tests for the Config model."""

    def test_defaults(self):
        config = Config.default()

        assert config.solver.top_n == 3
        assert config.solver.best_starters == 3
        assert config.solver.num_workers == 1
        assert config.solver.reject_duplicates is True
        assert config.practice.seed is None
        assert config.system.log_level == "WARNING"

    def test_frozen(self):
        config = Config.default()
        with pytest.raises(ValidationError):
            config.solver.top_n = 5  # type: ignore[misc]

    def test_extra_keys_forbidden(self):
        with pytest.raises(ValidationError):
            Config.from_dict({"solver": {"unknown": 1}})

    def test_positive_constraints(self):
        with pytest.raises(ValidationError):
            SolverConfig(top_n=0)
        with pytest.raises(ValidationError):
            SolverConfig(num_workers=-2)

    def test_log_level_choices(self):
        with pytest.raises(ValidationError):
            Config.from_dict({"system": {"log_level": "TRACE"}})

    def test_merge_returns_new_config(self):
        base = Config.default()
        merged = base.merge({"solver": {"top_n": 5}})

        assert merged.solver.top_n == 5
        assert merged.solver.best_starters == 3
        assert base.solver.top_n == 3

    def test_to_dict(self):
        data = Config.default().to_dict()
        assert data["solver"]["top_n"] == 3
        assert set(data) == {"solver", "practice", "system"}


class TestLoadConfig:
    """Tests for load_config()."""

    def test_no_file(self):
        assert load_config() == Config.default()

    def test_keyword_overrides(self):
        config = load_config(solver__top_n=4, practice__seed=11)
        assert config.solver.top_n == 4
        assert config.practice.seed == 11

    def test_yaml_extends_chain(self, tmp_path):
        (tmp_path / "base.yaml").write_text("solver:\n  top_n: 5\n  best_starters: 2\n")
        (tmp_path / "child.yaml").write_text(
            "extends: base.yaml\nsolver:\n  top_n: 7\nsystem:\n  config_name: child\n"
        )

        config = load_config(tmp_path / "child.yaml")

        assert config.solver.top_n == 7
        assert config.solver.best_starters == 2
        assert config.system.config_name == "child"

    def test_keyword_beats_yaml(self, tmp_path):
        path = tmp_path / "c.yaml"
        path.write_text("solver:\n  top_n: 5\n")
        assert load_config(path, solver__top_n=2).solver.top_n == 2

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == Config.default()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    @pytest.mark.parametrize("name", ["default", "fast", "practice"])
    def test_shipped_configs_load(self, name):
        config = load_config(CONFIG_DIR / f"{name}.yaml")
        assert config.system.config_name == name


def test_deep_merge_dicts():
    base = {"a": 1, "b": {"x": 10, "y": 20}}
    merged = deep_merge_dicts(base, {"b": {"y": 21}, "c": 3})

    assert merged == {"a": 1, "b": {"x": 10, "y": 21}, "c": 3}
    assert base["b"]["y"] == 20


def test_available_configs(tmp_path):
    (tmp_path / "b.yaml").write_text("")
    (tmp_path / "a.yaml").write_text("")
    (tmp_path / "notes.txt").write_text("")

    assert available_configs(tmp_path) == ["a", "b"]
    assert "default" in available_configs(CONFIG_DIR)
