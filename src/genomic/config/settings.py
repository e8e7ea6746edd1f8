"""Process-wide settings for logging and seeding.

Settings merge, in increasing precedence, built-in defaults, a ``.env`` file,
``GENOMIC_*`` environment variables and explicit overrides. Primitive values
are parsed from their string form.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, MutableMapping

from .constants import DEFAULT_RANDOM_SEED

__all__ = [
    "ENV_PREFIX",
    "Settings",
    "get_settings",
    "load_env_file",
    "reset_settings_cache",
]


ENV_PREFIX = "GENOMIC_"
"""Prefix shared by every environment variable read by the project."""

_BOOL_TRUE = {"1", "true", "yes", "on"}
_BOOL_FALSE = {"0", "false", "no", "off"}


def _coerce_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _BOOL_TRUE:
        return True
    if lowered in _BOOL_FALSE:
        return False
    raise ValueError(f"Cannot interpret '{value}' as boolean")


def _parse_value(value: str, *, target: type) -> Any:
    if target is bool:
        return _coerce_bool(value)
    if target is int:
        return int(value)
    return value


def _expand_path(path_str: str, *, base: Path) -> Path:
    candidate = Path(path_str).expanduser()
    if not candidate.is_absolute():
        candidate = base / candidate
    return candidate


def load_env_file(path: Path) -> Mapping[str, str]:
    """Parse a ``.env`` style file into a mapping.

    Blank lines and ``#`` comments are ignored; only the first ``=`` of a line
    separates key from value. A missing file yields an empty mapping.
    """

    entries: MutableMapping[str, str] = {}
    if not path.exists():
        return entries

    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        entries[key.strip()] = value.strip().strip('"').strip("'")
    return entries


def _project_root() -> Path:
    return Path.cwd()


@dataclass(slots=True, frozen=True)
class Settings:
    """Immutable settings snapshot.

    ``random_seed`` seeds :func:`genomic.reproduce_from_config` when a
    configuration carries no seed of its own. ``structured_logging`` selects
    the JSON formatter in :func:`genomic.config.configure_logging`.
    """

    project_root: Path
    configs_dir: Path
    logs_dir: Path
    environment: str
    random_seed: int
    structured_logging: bool
    log_level: str

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    def to_dict(self) -> dict[str, Any]:
        return {
            "project_root": str(self.project_root),
            "configs_dir": str(self.configs_dir),
            "logs_dir": str(self.logs_dir),
            "environment": self.environment,
            "random_seed": self.random_seed,
            "structured_logging": self.structured_logging,
            "log_level": self.log_level,
        }

    @classmethod
    def from_env(
        cls,
        *,
        overrides: Mapping[str, Any] | None = None,
        env_file: str | Path | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> "Settings":
        """Create :class:`Settings` merging defaults, env file, env vars and overrides."""

        overrides = {str(key).upper(): value for key, value in dict(overrides or {}).items()}

        env_mapping: MutableMapping[str, str] = {}
        if env_file is not None:
            env_mapping.update(load_env_file(Path(env_file).expanduser()))

        system_environ = dict(os.environ if environ is None else environ)

        project_root_value = overrides.pop("PROJECT_ROOT", None)
        if project_root_value is None:
            project_root_value = env_mapping.get(f"{ENV_PREFIX}PROJECT_ROOT")
        if project_root_value is None:
            project_root_value = system_environ.get(f"{ENV_PREFIX}PROJECT_ROOT")

        if project_root_value is None:
            project_root = _project_root()
        else:
            project_root = Path(str(project_root_value)).expanduser().resolve()

        default_env_path = project_root / ".env"
        if env_file is None and default_env_path.exists():
            env_mapping.update(load_env_file(default_env_path))

        # System environment wins over any file.
        env_mapping.update(system_environ)

        def pull(name: str, *, default: Any, target: type) -> Any:
            key = f"{ENV_PREFIX}{name}"
            if name in overrides:
                value = overrides.pop(name)
                if target is Path:
                    return _expand_path(str(value), base=project_root)
                if isinstance(value, str):
                    return _parse_value(value, target=target)
                return value
            if key in env_mapping:
                raw = env_mapping[key]
                if target is Path:
                    return _expand_path(raw, base=project_root)
                return _parse_value(raw, target=target)
            if target is Path:
                return _expand_path(str(default), base=project_root)
            return default

        configs_dir = pull("CONFIGS_DIR", default="configs", target=Path)
        logs_dir = pull("LOGS_DIR", default="logs", target=Path)
        environment = pull("ENVIRONMENT", default="development", target=str)
        random_seed = pull("RANDOM_SEED", default=DEFAULT_RANDOM_SEED, target=int)
        structured_logging = pull("STRUCTURED_LOGGING", default=False, target=bool)
        log_level = pull("LOG_LEVEL", default="INFO", target=str)

        if overrides:
            unknown = ", ".join(sorted(name.lower() for name in overrides))
            raise KeyError(f"Unknown override(s): {unknown}")

        return cls(
            project_root=project_root,
            configs_dir=configs_dir,
            logs_dir=logs_dir,
            environment=str(environment),
            random_seed=int(random_seed),
            structured_logging=bool(structured_logging),
            log_level=str(log_level).upper(),
        )


_SETTINGS_CACHE: Settings | None = None


def get_settings(**kwargs: Any) -> Settings:
    """Return cached settings, building them on the first call.

    Keyword arguments bypass the cache and are forwarded to
    :meth:`Settings.from_env`.
    """

    global _SETTINGS_CACHE
    if kwargs:
        return Settings.from_env(**kwargs)
    if _SETTINGS_CACHE is None:
        _SETTINGS_CACHE = Settings.from_env()
    return _SETTINGS_CACHE


def reset_settings_cache() -> None:
    global _SETTINGS_CACHE
    _SETTINGS_CACHE = None
