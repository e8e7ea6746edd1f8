"""Load and save YAML configuration files validated by pydantic schemas.

Example
-------
>>> from genomic.config.loader import load_config
>>> from genomic.config.schemas import ReproductionConfig
>>>
>>> config = load_config("reproduction.yaml", ReproductionConfig)
>>> config.crossover.to_method()
CrossoverMethod(method='uniform', rate=1.0, k=0)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Type, TypeVar, Union

import yaml
from pydantic import BaseModel, ValidationError

from .settings import get_settings

__all__ = ["load_config", "save_config", "ConfigError"]

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class ConfigError(Exception):
    """Raised when configuration loading or validation fails."""


def _resolve_config_path(file_path: Union[str, Path], configs_dir: Optional[Path] = None) -> Path:
    """Resolve ``file_path`` as absolute, then under ``configs_dir``, then under the cwd.

    Raises
    ------
    FileNotFoundError
        If none of the candidates exists
    """
    path = Path(file_path).expanduser()

    if path.is_absolute():
        if path.exists():
            return path
        raise FileNotFoundError(f"Config file not found: {file_path}")

    if configs_dir is None:
        configs_dir = get_settings().configs_dir

    resolved = configs_dir / path
    if resolved.exists():
        return resolved

    if path.exists():
        return path.resolve()

    raise FileNotFoundError(f"Config file not found: {file_path}")


def load_config(
    file_path: Union[str, Path],
    schema: Type[T],
    *,
    configs_dir: Optional[Path] = None,
    strict: bool = True,
) -> T:
    """Load and validate a YAML configuration file.

    Parameters
    ----------
    file_path : str or Path
        Path to the YAML file
    schema : Type[BaseModel]
        Pydantic model class to validate against
    configs_dir : Path, optional
        Directory searched for relative paths; ``Settings.configs_dir`` by default
    strict : bool, default=True
        If True, raise :class:`ConfigError` on any failure.
        If False, log a warning and return the schema's defaults.

    Raises
    ------
    ConfigError
        If the file is missing, empty, not YAML, or fails validation (strict only)
    """
    try:
        resolved_path = _resolve_config_path(file_path, configs_dir)

        logger.debug("Loading config from: %s", resolved_path)
        with open(resolved_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if data is None:
            raise ConfigError(f"Empty configuration file: {file_path}")

        try:
            config = schema.model_validate(data)
        except ValidationError as e:
            error_msg = f"Configuration validation failed for {file_path}:\n{e}"
            if strict:
                raise ConfigError(error_msg) from e
            logger.warning(error_msg)
            logger.warning("Returning default configuration")
            return schema()

        logger.info("Loaded config: %s", resolved_path.name)
        return config

    except FileNotFoundError as e:
        if strict:
            raise ConfigError(f"Configuration file not found: {file_path}") from e
        logger.warning("Config file not found: %s, using defaults", file_path)
        return schema()
    except yaml.YAMLError as e:
        error_msg = f"Invalid YAML syntax in {file_path}: {e}"
        if strict:
            raise ConfigError(error_msg) from e
        logger.warning(error_msg)
        return schema()
    except ConfigError:
        if strict:
            raise
        logger.warning("Empty config file: %s, using defaults", file_path)
        return schema()


def save_config(
    config: BaseModel, file_path: Union[str, Path], *, configs_dir: Optional[Path] = None
) -> Path:
    """Write ``config`` to YAML and return the path written.

    Relative paths are placed under ``configs_dir`` (``Settings.configs_dir``
    by default); parent directories are created.
    """
    path = Path(file_path).expanduser()

    if not path.is_absolute():
        if configs_dir is None:
            configs_dir = get_settings().configs_dir
        path = configs_dir / path

    path.parent.mkdir(parents=True, exist_ok=True)

    data = config.model_dump(mode="python", exclude_none=True)

    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(
            data,
            f,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
            indent=2,
        )

    logger.info("Saved configuration to: %s", path)
    return path
