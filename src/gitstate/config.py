"""Configuration data structures and loading.

Configuration is immutable and loaded once at the entry point:
defaults, then ~/.gitstate/config.toml, then GITSTATE_* environment
variables.
"""

import os
import tomllib
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

DEFAULT_TAG_TTL_SECONDS = 120.0
DEFAULT_STASH_TTL_SECONDS = 30.0


@dataclass(frozen=True)
class GitStateConfig:
    """Immutable configuration.

    Tags change rarely, so they are cached longer than stashes, whose
    staleness is both more likely and more visible.
    """

    git_binary: str = "git"
    tag_ttl_seconds: float = DEFAULT_TAG_TTL_SECONDS
    stash_ttl_seconds: float = DEFAULT_STASH_TTL_SECONDS
    debug: bool = False


def _positive_float(value: Any, source: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Expected a number for {source}, got {value!r}") from None
    if number <= 0:
        raise ValueError(f"Expected a positive number for {source}, got {value!r}")
    return number


def _bool(value: Any, source: str) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in ("1", "true", "yes", "on"):
        return True
    if text in ("0", "false", "no", "off", ""):
        return False
    raise ValueError(f"Expected a boolean for {source}, got {value!r}")


def apply_env_overrides(config: GitStateConfig, environ: Mapping[str, str]) -> GitStateConfig:
    """Layer GITSTATE_* environment variables over config."""
    updates: dict[str, Any] = {}
    if "GITSTATE_GIT" in environ:
        updates["git_binary"] = environ["GITSTATE_GIT"]
    if "GITSTATE_TAG_TTL" in environ:
        updates["tag_ttl_seconds"] = _positive_float(
            environ["GITSTATE_TAG_TTL"], "GITSTATE_TAG_TTL"
        )
    if "GITSTATE_STASH_TTL" in environ:
        updates["stash_ttl_seconds"] = _positive_float(
            environ["GITSTATE_STASH_TTL"], "GITSTATE_STASH_TTL"
        )
    if "GITSTATE_DEBUG" in environ:
        updates["debug"] = _bool(environ["GITSTATE_DEBUG"], "GITSTATE_DEBUG")
    return replace(config, **updates)


def config_from_toml(data: Mapping[str, Any], source: Path) -> GitStateConfig:
    """Build a config from parsed TOML, falling back to defaults per key."""
    config = GitStateConfig()
    git_binary = data.get("git_binary", config.git_binary)
    if not isinstance(git_binary, str) or not git_binary:
        raise ValueError(f"Invalid 'git_binary' in {source}")

    cache = data.get("cache", {})
    if not isinstance(cache, dict):
        raise ValueError(f"Expected a [cache] table in {source}")

    return GitStateConfig(
        git_binary=git_binary,
        tag_ttl_seconds=_positive_float(
            cache.get("tag_ttl_seconds", config.tag_ttl_seconds),
            f"cache.tag_ttl_seconds in {source}",
        ),
        stash_ttl_seconds=_positive_float(
            cache.get("stash_ttl_seconds", config.stash_ttl_seconds),
            f"cache.stash_ttl_seconds in {source}",
        ),
        debug=_bool(data.get("debug", config.debug), f"debug in {source}"),
    )


class ConfigOps(ABC):
    """Abstract interface for loading configuration.

    Enables in-memory implementations for tests without touching the
    filesystem or the environment.
    """

    @abstractmethod
    def exists(self) -> bool:
        """Check if a config file exists."""
        ...

    @abstractmethod
    def load(self) -> GitStateConfig:
        """Load configuration.

        Raises:
            ValueError: If a value is malformed
        """
        ...

    @abstractmethod
    def path(self) -> Path:
        """Path to the config file (for error messages and debugging)."""
        ...


class FilesystemConfigOps(ConfigOps):
    """Production implementation reading ~/.gitstate/config.toml and the environment."""

    def __init__(
        self,
        config_path: Path | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        """Create FilesystemConfigOps.

        Args:
            config_path: Override for the config file location
            environ: Environment to read overrides from (defaults to os.environ)
        """
        self._config_path = config_path
        self._environ = os.environ if environ is None else environ

    def exists(self) -> bool:
        return self.path().exists()

    def load(self) -> GitStateConfig:
        """Load defaults, then the config file if present, then env overrides."""
        config_path = self.path()
        if config_path.exists():
            try:
                data = tomllib.loads(config_path.read_text(encoding="utf-8"))
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Malformed config file {config_path}: {e}") from e
            config = config_from_toml(data, config_path)
        else:
            config = GitStateConfig()
        return apply_env_overrides(config, self._environ)

    def path(self) -> Path:
        if self._config_path is not None:
            return self._config_path
        return Path.home() / ".gitstate" / "config.toml"


class InMemoryConfigOps(ConfigOps):
    """Test implementation that holds config in memory."""

    def __init__(self, config: GitStateConfig | None = None) -> None:
        """Create InMemoryConfigOps.

        Args:
            config: Config to return (None = no config file, defaults apply)
        """
        self._config = config

    def exists(self) -> bool:
        return self._config is not None

    def load(self) -> GitStateConfig:
        return self._config if self._config is not None else GitStateConfig()

    def path(self) -> Path:
        return Path("/test/gitstate/config.toml")
