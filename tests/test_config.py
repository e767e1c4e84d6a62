"""Tests for RunnerConfig and YAML loading."""

import pytest

from cubepack.config import RunnerConfig, load_config
from cubepack.runner.cubes import SortOrder


class TestRunnerConfig:
    def test_defaults(self):
        config = RunnerConfig()
        assert config.order is SortOrder.DESC
        assert not config.report_volumes
        assert not config.validate
        assert config.prompt == "Give me a box challenge"

    def test_dict_round_trip(self):
        config = RunnerConfig(order=SortOrder.ASC, validate=True, results_dir="out")
        d = config.to_dict()
        assert d["order"] == "asc"
        assert RunnerConfig.from_dict(d) == config

    def test_unknown_key_rejected(self):
        with pytest.raises(ValueError, match="Unknown config keys"):
            RunnerConfig.from_dict({"colour": "blue"})

    def test_unknown_order_rejected(self):
        with pytest.raises(ValueError):
            RunnerConfig.from_dict({"order": "random"})

    @pytest.mark.parametrize("key", ["report_volumes", "validate", "verbose"])
    @pytest.mark.parametrize("value", ["no", "false", 0, 1, None])
    def test_flags_must_be_bool(self, key, value):
        with pytest.raises(ValueError, match=key):
            RunnerConfig.from_dict({key: value})

    def test_quoted_flag_in_yaml_rejected(self, tmp_path):
        path = tmp_path / "cubepack.yaml"
        path.write_text('validate: "no"\n')
        with pytest.raises(ValueError, match="validate"):
            load_config(path)


class TestLoadConfig:
    def test_load_yaml(self, tmp_path):
        path = tmp_path / "cubepack.yaml"
        path.write_text("order: asc\nvalidate: true\nresults_dir: out\n")
        config = load_config(path)
        assert config.order is SortOrder.ASC
        assert config.validate
        assert config.results_dir == "out"

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == RunnerConfig()

    def test_non_mapping_rejected(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- asc\n- desc\n")
        with pytest.raises(ValueError, match="mapping"):
            load_config(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")
