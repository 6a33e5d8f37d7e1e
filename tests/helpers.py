import io
from pathlib import Path
from typing import Dict, Iterable, Optional

import yaml
from rich.console import Console


def make_kubeconfig(
    contexts: Iterable[str],
    current: str = "",
    namespaces: Optional[Dict[str, str]] = None,
) -> dict:
    """Builds a minimal kubeconfig dict with one cluster/user per context."""
    namespaces = namespaces or {}
    entries = []
    for name in contexts:
        context = {"cluster": f"cluster-{name}", "user": f"user-{name}"}
        if name in namespaces:
            context["namespace"] = namespaces[name]
        entries.append({"name": name, "context": context})
    return {
        "apiVersion": "v1",
        "kind": "Config",
        "clusters": [
            {"name": f"cluster-{e['name']}", "cluster": {"server": "https://127.0.0.1:6443"}}
            for e in entries
        ],
        "users": [{"name": f"user-{e['name']}", "user": {"token": "t"}} for e in entries],
        "contexts": entries,
        "current-context": current,
    }


def write_kubeconfig(path: Path, contexts: Iterable[str], current: str = "", **kwargs) -> Path:
    path.write_text(yaml.safe_dump(make_kubeconfig(contexts, current, **kwargs)))
    return path


def read_kubeconfig(path: Path) -> dict:
    return yaml.safe_load(path.read_text())


def buffer_console() -> Console:
    return Console(file=io.StringIO(), highlight=False, soft_wrap=True, emoji=False)


def console_output(console: Console) -> str:
    return console.file.getvalue()


class FakeNamespaceChecker:
    """Stands in for the cluster: knows a fixed set of namespaces."""

    def __init__(self, namespaces=("default", "ns1", "ns2"), error: Optional[Exception] = None):
        self.namespaces = set(namespaces)
        self.error = error
        self.calls = []

    def __call__(self, kubeconfig_bytes: bytes, namespace: str) -> bool:
        self.calls.append(namespace)
        if self.error is not None:
            raise self.error
        return namespace in self.namespaces
