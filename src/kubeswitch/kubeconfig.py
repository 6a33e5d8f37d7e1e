"""
Reading and writing the kubeconfig file.

Only the ``contexts`` list and ``current-context`` are interpreted; every
other key is carried through a load/save cycle untouched.
"""
import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from .errors import ContextNotFoundError, PersistenceError, wrap

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "default"
DEFAULT_KUBECONFIG_PATH = Path.home() / ".kube" / "config"


def get_kubeconfig_path(override: Optional[str] = None) -> Path:
    """Returns the kubeconfig file to operate on.

    An explicit override wins, then the first entry of ``$KUBECONFIG``, then
    ``~/.kube/config``.
    """
    if override:
        return Path(override).expanduser()
    env = os.environ.get("KUBECONFIG", "")
    for entry in env.split(os.pathsep):
        if entry:
            return Path(entry).expanduser()
    return DEFAULT_KUBECONFIG_PATH


class KubeConfig:
    def __init__(self, path: Path, config_data: Optional[Dict[str, Any]] = None):
        self.path = Path(path)
        self._config: Dict[str, Any] = config_data if config_data is not None else {}
        self._config.setdefault("contexts", [])

    @classmethod
    def load(cls, path: Path) -> "KubeConfig":
        path = Path(path)
        logger.debug(f"Loading kubeconfig from {path}.")
        try:
            with open(path, "r") as f:
                data = yaml.safe_load(f)
        except FileNotFoundError as e:
            raise PersistenceError(f"kubeconfig file not found: {path}") from e
        except (OSError, yaml.YAMLError) as e:
            raise PersistenceError(wrap(f"failed to read kubeconfig {path}", e)) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise PersistenceError(f"kubeconfig {path} is not a mapping")
        if data.get("contexts") is None:
            data["contexts"] = []
        return cls(path, data)

    def save(self) -> None:
        logger.debug(f"Saving kubeconfig to {self.path}.")
        try:
            with open(self.path, "w") as f:
                yaml.safe_dump(self._config, f, default_flow_style=False, sort_keys=False)
        except (OSError, yaml.YAMLError) as e:
            raise PersistenceError(wrap(f"failed to save kubeconfig {self.path}", e)) from e

    def to_dict(self) -> Dict[str, Any]:
        return copy.deepcopy(self._config)

    def to_bytes(self) -> bytes:
        return yaml.safe_dump(self._config, default_flow_style=False, sort_keys=False).encode("utf-8")

    def _contexts(self) -> List[Dict[str, Any]]:
        return self._config["contexts"]

    def _find(self, name: str) -> Optional[Dict[str, Any]]:
        for entry in self._contexts():
            if entry.get("name") == name:
                return entry
        return None

    @property
    def current_context(self) -> str:
        return self._config.get("current-context") or ""

    def context_names(self) -> List[str]:
        return [entry["name"] for entry in self._contexts() if entry.get("name")]

    def context_exists(self, name: str) -> bool:
        return self._find(name) is not None

    def set_current_context(self, name: str) -> None:
        self._config["current-context"] = name

    def unset_current_context(self) -> None:
        self._config["current-context"] = ""

    def namespace_of_context(self, name: str) -> str:
        entry = self._find(name)
        if entry is None:
            raise ContextNotFoundError(f'context "{name}" not found')
        return (entry.get("context") or {}).get("namespace") or DEFAULT_NAMESPACE

    def set_namespace(self, name: str, namespace: str) -> None:
        entry = self._find(name)
        if entry is None:
            raise ContextNotFoundError(f'context "{name}" not found')
        if not entry.get("context"):
            entry["context"] = {}
        entry["context"]["namespace"] = namespace

    def delete_context(self, name: str) -> Tuple[int, Dict[str, Any]]:
        """Removes the context entry and returns its position and the entry.

        Referenced cluster and user entries are kept.
        """
        entry = self._find(name)
        if entry is None:
            raise ContextNotFoundError(f'context "{name}" not found')
        contexts = self._contexts()
        index = contexts.index(entry)
        del contexts[index]
        return index, entry

    def insert_context(self, index: int, entry: Dict[str, Any]) -> None:
        self._contexts().insert(index, entry)

    def rename_context(self, old: str, new: str) -> None:
        entry = self._find(old)
        if entry is None:
            raise ContextNotFoundError(f'context "{old}" not found')
        entry["name"] = new
