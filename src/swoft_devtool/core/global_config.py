"""Global configuration data structures and loading.

Provides immutable global config data loaded from ~/.swoft-devtool/config.toml.
Loaded once at the CLI entry point and stored in DevtoolContext.

Example config file:

    cache_root = "/var/cache/swoft-app-demos"
    installer = "composer"
"""

import os
import tomllib
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from swoft_devtool.core.project_creator import default_cache_root

CONFIG_PATH_ENV_VAR = "SWOFT_DEVTOOL_CONFIG"
DEFAULT_INSTALLER = "composer"


@dataclass(frozen=True)
class GlobalConfig:
    """Immutable global configuration data.

    All fields are read-only after construction.
    """

    cache_root: Path
    installer: str

    @staticmethod
    def defaults() -> "GlobalConfig":
        return GlobalConfig(cache_root=default_cache_root(), installer=DEFAULT_INSTALLER)


class ConfigStore(ABC):
    """Abstract interface for global config access.

    Provides dependency injection for config loading, enabling in-memory
    implementations for tests without touching the filesystem.
    """

    @abstractmethod
    def exists(self) -> bool:
        """Check if global config exists."""
        ...

    @abstractmethod
    def load(self) -> GlobalConfig:
        """Load global config, falling back to defaults for missing keys.

        Returns:
            GlobalConfig instance with loaded values

        Raises:
            ValueError: If config is malformed or has wrongly typed values
        """
        ...

    @abstractmethod
    def path(self) -> Path:
        """Get the path to the global config file (for messages and debugging)."""
        ...


def parse_config(data: dict[str, object], config_path: Path) -> GlobalConfig:
    """Build a GlobalConfig from parsed TOML data."""
    defaults = GlobalConfig.defaults()

    cache_root = data.get("cache_root", str(defaults.cache_root))
    if not isinstance(cache_root, str) or not cache_root.strip():
        raise ValueError(f"'cache_root' must be a non-empty string in {config_path}")

    installer = data.get("installer", defaults.installer)
    if not isinstance(installer, str) or not installer.strip():
        raise ValueError(f"'installer' must be a non-empty string in {config_path}")

    return GlobalConfig(
        cache_root=Path(cache_root).expanduser(),
        installer=installer.strip(),
    )


class FilesystemConfigStore(ConfigStore):
    """Production implementation that reads ~/.swoft-devtool/config.toml."""

    def exists(self) -> bool:
        return self.path().exists()

    def load(self) -> GlobalConfig:
        """Load global config from disk, or defaults if the file is absent."""
        config_path = self.path()
        if not config_path.exists():
            return GlobalConfig.defaults()

        try:
            data = tomllib.loads(config_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in {config_path}: {e}") from e

        return parse_config(data, config_path)

    def path(self) -> Path:
        """Get the path to the global config file.

        Returns:
            $SWOFT_DEVTOOL_CONFIG if set, otherwise ~/.swoft-devtool/config.toml
        """
        override = os.environ.get(CONFIG_PATH_ENV_VAR)
        if override:
            return Path(override).expanduser()
        return Path.home() / ".swoft-devtool" / "config.toml"


class InMemoryConfigStore(ConfigStore):
    """Test implementation that stores config in memory without touching filesystem."""

    def __init__(self, config: GlobalConfig | None = None) -> None:
        """Initialize in-memory config store.

        Args:
            config: Initial config state (None = config doesn't exist, defaults apply)
        """
        self._config = config

    def exists(self) -> bool:
        return self._config is not None

    def load(self) -> GlobalConfig:
        if self._config is None:
            return GlobalConfig.defaults()
        return self._config

    def path(self) -> Path:
        return Path("/fake/swoft-devtool/config.toml")
