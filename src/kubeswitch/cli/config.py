import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..errors import PersistenceError, wrap

DEFAULT_CONFIG_DIR = Path.home() / ".config" / "kubeswitch"
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "config.yml"
DEFAULT_CONFIG: Dict[str, Any] = {
    "kubeconfig": "",
    "state-dir": "~/.kube",
    "picker": {
        "command": "fzf",
        "enabled": True,
    },
    "namespace-check-timeout": 10,
    "log-level": "WARNING",
}


class Configuration:
    def __init__(self, config_data: Dict[str, Any]):
        self._config = config_data

    def _section(self, name: str) -> Dict[str, Any]:
        section = self._config.get(name) or {}
        if not isinstance(section, dict):
            raise PersistenceError(f"invalid config: '{name}' must be a mapping")
        return section

    def _string(self, value: Any, key: str) -> str:
        if not isinstance(value, str):
            raise PersistenceError(f"invalid config: '{key}' must be a string, got {value!r}")
        return value

    @property
    def kubeconfig(self) -> Optional[str]:
        value = self._config.get("kubeconfig")
        if not value:
            return None
        return self._string(value, "kubeconfig")

    @property
    def state_dir(self) -> Path:
        value = self._config.get("state-dir") or "~/.kube"
        return Path(self._string(value, "state-dir")).expanduser()

    @property
    def picker_command(self) -> str:
        value = self._section("picker").get("command") or "fzf"
        return self._string(value, "picker.command")

    @property
    def picker_enabled(self) -> bool:
        if os.environ.get("KUBECTX_IGNORE_FZF"):
            return False
        value = self._section("picker").get("enabled", True)
        if value is None:
            return True
        if not isinstance(value, bool):
            raise PersistenceError(f"invalid config: 'picker.enabled' must be true or false, got {value!r}")
        return value

    @property
    def namespace_check_timeout(self) -> float:
        value = self._config.get("namespace-check-timeout")
        if value is None:
            return 10.0
        try:
            timeout = float(value)
        except (TypeError, ValueError) as e:
            raise PersistenceError(
                f"invalid config: 'namespace-check-timeout' must be a number of seconds, got {value!r}"
            ) from e
        if timeout <= 0:
            raise PersistenceError(
                f"invalid config: 'namespace-check-timeout' must be positive, got {value!r}"
            )
        return timeout

    @property
    def log_level(self) -> str:
        value = os.environ.get("KUBESWITCH_LOG_LEVEL") or self._config.get("log-level") or "WARNING"
        level = str(value).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise PersistenceError(f"invalid config: unknown log level {value!r}")
        return level


def get_default_config_path() -> Path:
    env = os.environ.get("KUBESWITCH_CONFIG")
    if env:
        return Path(env).expanduser()
    return DEFAULT_CONFIG_PATH


def deep_merge(source, destination):
    for key, value in source.items():
        if isinstance(value, dict):
            node = destination.setdefault(key, {})
            deep_merge(value, node)
        else:
            destination[key] = value
    return destination


def load_config(config_path: Optional[Path]) -> Configuration:
    config_data = copy.deepcopy(DEFAULT_CONFIG)
    if config_path and config_path.exists():
        try:
            with open(config_path, "r") as f:
                user_config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise PersistenceError(wrap(f"failed to read config file {config_path}", e)) from e
        if user_config:
            config_data = deep_merge(user_config, config_data)
    return Configuration(config_data)
