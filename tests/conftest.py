from typing import Dict
from unittest.mock import MagicMock

import pytest

from tuish.config import Config, ConfigStore
from tuish.launcher import ShellLauncher
from tuish.machine import MenuStateMachine
from tuish.models import Alias


@pytest.fixture
def alias() -> Alias:
    return Alias(name="build", command="cargo build", keybind="b")


@pytest.fixture
def alias_map() -> Dict[str, Alias]:
    return {
        "build": Alias(name="build", command="cargo build", keybind="b"),
        "test": Alias(name="test", command="cargo test", keybind="t"),
        "logs": Alias(name="logs", command="tail -f /var/log/syslog"),
    }


@pytest.fixture
def config_file(tmp_path):
    return tmp_path / "tuish" / "cnfg.json"


@pytest.fixture
def config_store(config_file) -> ConfigStore:
    return ConfigStore(config_file)


@pytest.fixture
def launcher() -> MagicMock:
    return MagicMock(spec=ShellLauncher)


@pytest.fixture
def make_machine(config_store, launcher):
    """Build a machine over the given aliases, persisting to a temp file"""

    def _make(aliases=None, shell="/bin/bash") -> MenuStateMachine:
        config = Config(aliases=dict(aliases or {}), default_shell=shell)
        config_store.save(config)
        machine = MenuStateMachine(config_store.load(), config_store, launcher)
        machine.resize(80, 24)
        return machine

    return _make
