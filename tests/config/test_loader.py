"""Tests for YAML configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from genomic.config.loader import ConfigError, load_config, save_config
from genomic.config.schemas import CrossoverConfig, ReproductionConfig
from genomic.traverse import CrossoverMethod


@pytest.fixture
def reproduction_file(tmp_path: Path) -> Path:
    path = tmp_path / "reproduction.yaml"
    path.write_text(
        yaml.safe_dump({"crossover": {"method": "k-point", "k": 2}, "mutation_rate": 0.05, "seed": 7}),
        encoding="utf-8",
    )
    return path


def test_load_config_validates_yaml(reproduction_file: Path) -> None:
    config = load_config(reproduction_file, ReproductionConfig)
    assert config.crossover.method == "k_point"
    assert config.crossover.to_method() == CrossoverMethod.k_point(2)
    assert config.mutation_rate == 0.05
    assert config.seed == 7


def test_relative_paths_resolve_against_configs_dir(tmp_path: Path) -> None:
    configs_dir = tmp_path / "configs"
    configs_dir.mkdir()
    (configs_dir / "uniform.yaml").write_text("crossover:\n  rate: 0.5\n", encoding="utf-8")

    config = load_config("uniform.yaml", ReproductionConfig, configs_dir=configs_dir)
    assert config.crossover.to_method() == CrossoverMethod.uniform(0.5)


def test_invalid_values_raise_in_strict_mode(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("mutation_rate: 3.0\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path, ReproductionConfig)


def test_lenient_mode_falls_back_to_defaults(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("crossover:\n  method: two_point\n", encoding="utf-8")
    config = load_config(path, ReproductionConfig, strict=False)
    assert config == ReproductionConfig()
    assert any("validation failed" in r.getMessage() for r in caplog.records)

    missing = load_config(tmp_path / "missing.yaml", ReproductionConfig, strict=False)
    assert missing == ReproductionConfig()


@pytest.mark.parametrize("content", ["", "crossover: [unclosed\n"])
def test_empty_or_broken_yaml(tmp_path: Path, content: str) -> None:
    path = tmp_path / "broken.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path, ReproductionConfig)
    assert load_config(path, ReproductionConfig, strict=False) == ReproductionConfig()


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(tmp_path / "nope.yaml", ReproductionConfig)


def test_save_then_load(tmp_path: Path) -> None:
    config = ReproductionConfig(crossover=CrossoverConfig(method="uniform", rate=0.3), seed=11)
    path = save_config(config, "nested/out.yaml", configs_dir=tmp_path)
    assert path == tmp_path / "nested" / "out.yaml"
    assert load_config(path, ReproductionConfig) == config


def test_schema_bounds() -> None:
    with pytest.raises(ValueError):
        CrossoverConfig(rate=-0.1)
    with pytest.raises(ValueError):
        CrossoverConfig(method="k_point", k=-1)
    assert CrossoverConfig(method="KPoint").method == "k_point"
