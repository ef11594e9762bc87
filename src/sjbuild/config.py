"""
sjbuild Configuration

Loads configuration from YAML file or environment variables.
Holds the flag prefix and diagnostic marker the scanners look for,
plus the defaults used when a server option string leaves a setting out.
"""

import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)


# Default configuration file locations (checked in order)
CONFIG_SEARCH_PATHS = [
    Path.home() / ".sjbuild" / "config.yaml",
    Path(__file__).parent / "config.yaml",
]


DEFAULT_CONFIG: Dict[str, Any] = {
    # Argument that carries the server sub-options
    "server_flag_prefix": "--server:",

    # Leading token of a zip-index classfile location
    "archive_marker": "ZipFileIndexFileObject[",

    "log_level": "WARNING",

    # Server defaults, used when the option string leaves a key out
    "server": {
        "sjavac": "sjavac",
        "keepalive": 120,           # Seconds before an idle server exits
        "background": True,
        "poolsize": None,           # None means one worker per CPU
    },
}


class SjbuildConfigError(Exception):
    """Explicitly requested config file could not be loaded."""
    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load config from {path}: {reason}")


_STRING_KEYS = ("server_flag_prefix", "archive_marker", "log_level")


def _is_int(value: Any) -> bool:
    # YAML booleans are ints to Python
    return isinstance(value, int) and not isinstance(value, bool)


def _check_server(path: Path, server: Dict[str, Any]) -> None:
    """Reject server defaults that would fail later."""
    if "sjavac" in server and not isinstance(server["sjavac"], str):
        raise SjbuildConfigError(path, "'server.sjavac' must be a string")
    if "keepalive" in server and not _is_int(server["keepalive"]):
        raise SjbuildConfigError(path, "'server.keepalive' must be an integer")
    if server.get("poolsize") is not None and not _is_int(server["poolsize"]):
        raise SjbuildConfigError(path, "'server.poolsize' must be an integer")
    if "background" in server and not isinstance(server["background"], bool):
        raise SjbuildConfigError(path, "'server.background' must be true or false")


class SjbuildConfig:
    """Configuration for the option and identifier helpers."""

    def __init__(self, config_path: Optional[Path] = None):
        self._config: Dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)
        self._config_path: Optional[Path] = None

        # Load from file if found
        self._load_config(config_path)

        # Override with environment variables
        self._apply_env_overrides()

    def _load_config(self, explicit_path: Optional[Path] = None) -> None:
        """Load configuration from YAML file."""
        if explicit_path is not None:
            self._merge(self._read(explicit_path))
            self._config_path = explicit_path
            return

        for config_path in CONFIG_SEARCH_PATHS:
            if config_path.exists():
                try:
                    user_config = self._read(config_path)
                except SjbuildConfigError as e:
                    logger.warning(f"{e}, using defaults")
                    continue
                self._merge(user_config)
                self._config_path = config_path
                return

    @staticmethod
    def _read(path: Path) -> Dict[str, Any]:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise SjbuildConfigError(path, str(e)) from e
        if not isinstance(data, dict):
            raise SjbuildConfigError(path, "top level must be a mapping")
        for key in _STRING_KEYS:
            if key in data and not isinstance(data[key], str):
                raise SjbuildConfigError(path, f"'{key}' must be a string")
        server = data.get("server") or {}
        if not isinstance(server, dict):
            raise SjbuildConfigError(path, "'server' must be a mapping")
        _check_server(path, server)
        return data

    def _merge(self, user_config: Dict[str, Any]) -> None:
        server = user_config.pop("server", None) or {}
        self._config.update(user_config)
        self._config["server"].update(server)

    def _apply_env_overrides(self) -> None:
        """Apply environment variable overrides."""
        env_mappings = {
            "SJBUILD_SERVER_FLAG_PREFIX": "server_flag_prefix",
            "SJBUILD_ARCHIVE_MARKER": "archive_marker",
            "SJBUILD_LOG_LEVEL": "log_level",
        }

        for env_var, config_key in env_mappings.items():
            if env_var in os.environ:
                self._config[config_key] = os.environ[env_var]

        if "SJBUILD_SJAVAC" in os.environ:
            self._config["server"]["sjavac"] = os.environ["SJBUILD_SJAVAC"]

    @property
    def config_path(self) -> Optional[Path]:
        """Path to loaded config file, or None if using defaults."""
        return self._config_path

    @property
    def server_flag_prefix(self) -> str:
        return self._config["server_flag_prefix"]

    @property
    def archive_marker(self) -> str:
        return self._config["archive_marker"]

    @property
    def log_level(self) -> str:
        return str(self._config.get("log_level", "WARNING")).upper()

    @property
    def sjavac(self) -> str:
        """Command used to fork a background server."""
        return self._config["server"]["sjavac"]

    @property
    def keepalive(self) -> int:
        return int(self._config["server"]["keepalive"])

    @property
    def background(self) -> bool:
        return bool(self._config["server"]["background"])

    @property
    def poolsize(self) -> int:
        """Compiler worker count, falling back to the CPU count."""
        configured = self._config["server"].get("poolsize")
        if configured is None:
            return os.cpu_count() or 1
        return int(configured)

    def to_dict(self) -> Dict[str, Any]:
        """Export current configuration as dict."""
        return {
            "server_flag_prefix": self.server_flag_prefix,
            "archive_marker": self.archive_marker,
            "log_level": self.log_level,
            "server": {
                "sjavac": self.sjavac,
                "keepalive": self.keepalive,
                "background": self.background,
                "poolsize": self.poolsize,
            },
            "config_file": str(self._config_path) if self._config_path else None,
        }


# Global config instance (lazy-loaded)
_config: Optional[SjbuildConfig] = None


def get_config(config_path: Optional[Path] = None) -> SjbuildConfig:
    """Get the global config instance, loading if needed."""
    global _config
    if _config is None or config_path is not None:
        _config = SjbuildConfig(config_path)
    return _config


def reset_config() -> None:
    """Forget the loaded config so the next get_config() reloads it."""
    global _config
    _config = None


def write_default_config(path: Optional[Path] = None) -> Path:
    """
    Write a default configuration file.

    Returns the path where config was written.
    """
    if path is None:
        path = Path.home() / ".sjbuild" / "config.yaml"

    path.parent.mkdir(parents=True, exist_ok=True)

    config_content = """# sjbuild configuration
#
# Every setting can also be overridden via environment variables
# (SJBUILD_SERVER_FLAG_PREFIX, SJBUILD_ARCHIVE_MARKER, SJBUILD_LOG_LEVEL,
# SJBUILD_SJAVAC).

# Argument that carries the server sub-options
server_flag_prefix: "--server:"

# Leading token of a zip-index classfile location
archive_marker: "ZipFileIndexFileObject["

log_level: WARNING

# Defaults for sub-options missing from --server:
server:
  sjavac: sjavac
  keepalive: 120
  background: true
  # poolsize: 4      # Defaults to the CPU count
"""

    with open(path, 'w', encoding='utf-8') as f:
        f.write(config_content)

    return path
