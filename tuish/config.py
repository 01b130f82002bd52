"""Config file handling: load on start, save after every alias mutation"""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from tuish.models import Alias

logger = logging.getLogger(__name__)

APP_NAME = "tuish"
CONFIG_FILENAME = "cnfg.json"
CONFIG_ENV_VAR = "TUISH_CONFIG"
FALLBACK_SHELL = "/bin/sh"


def default_shell() -> str:
    """The user's login shell, or a POSIX shell when $SHELL is unset"""
    return os.environ.get("SHELL") or FALLBACK_SHELL


def config_path() -> Path:
    """Resolve the config file location.

    $TUISH_CONFIG wins; otherwise the file lives in the platform's user
    config directory.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path(platformdirs.user_config_dir(APP_NAME)) / CONFIG_FILENAME


@dataclass
class Config:
    """On-disk configuration: aliases keyed by name plus the default shell"""
    aliases: Dict[str, Alias] = field(default_factory=dict)
    default_shell: str = field(default_factory=default_shell)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "aliases": {name: alias.to_dict() for name, alias in self.aliases.items()},
            "default-shell": self.default_shell,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Config":
        """Build a Config from parsed JSON, raising ValueError on a bad shape"""
        if not isinstance(data, dict):
            raise ValueError("config root must be an object")
        raw_aliases = data["aliases"]
        shell = data["default-shell"]
        if not isinstance(raw_aliases, dict):
            raise ValueError("'aliases' must be an object")
        if not isinstance(shell, str):
            raise ValueError("'default-shell' must be a string")
        aliases = {}
        for name, entry in raw_aliases.items():
            if not isinstance(entry, dict):
                raise ValueError(f"alias '{name}' must be an object")
            aliases[name] = Alias.from_dict(name, entry)
        return cls(aliases=aliases, default_shell=shell)


def dumps(config: Config) -> str:
    """Serialize a config to the stable, human-readable file format"""
    return json.dumps(config.to_dict(), indent=2, ensure_ascii=False) + "\n"


def save(path: Path, config: Config) -> bool:
    """Write the config to path. Failures are logged, never raised."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(dumps(config))
    except OSError as e:
        logger.warning("Could not save config to %s: %s", path, e)
        return False
    logger.debug("Saved %d aliases to %s", len(config.aliases), path)
    return True


def load(path: Path) -> Config:
    """Load the config at path.

    A missing file is created with defaults. A file that cannot be read or
    parsed yields an empty default config, so startup is never blocked.
    """
    if not path.exists():
        config = Config()
        logger.info("No config at %s, creating default", path)
        save(path, config)
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            config = Config.from_dict(json.load(f))
    except (OSError, ValueError, KeyError, TypeError) as e:
        # json.JSONDecodeError and UnicodeDecodeError are ValueErrors
        logger.warning("Ignoring unreadable config %s: %s", path, e)
        return Config()

    logger.debug("Loaded %d aliases from %s", len(config.aliases), path)
    return config


class ConfigStore:
    """Binds a config file path to load/save, for callers that hold one path"""

    def __init__(self, path: Optional[Path] = None):
        self.path = path or config_path()

    def load(self) -> Config:
        return load(self.path)

    def save(self, config: Config) -> bool:
        return save(self.path, config)
