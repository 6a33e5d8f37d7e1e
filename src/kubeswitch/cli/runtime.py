"""
Everything an operation handler needs: configuration, collaborators and output.
"""
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console

from ..cluster import ClusterNamespaceChecker
from ..kubeconfig import KubeConfig, get_kubeconfig_path
from ..state import FileStateStore, StateStore
from ..switcher import ContextSwitcher, NamespaceChecker, NamespaceSwitcher
from .config import Configuration
from .picker import Picker


@dataclass
class Runtime:
    configuration: Configuration
    kubeconfig_path: Path
    state: StateStore
    namespace_exists: NamespaceChecker
    picker: Picker
    out: Console
    err: Console
    prog: str = "kubeswitch"

    @classmethod
    def from_configuration(cls, configuration: Configuration, prog: str = "kubeswitch") -> "Runtime":
        return cls(
            configuration=configuration,
            kubeconfig_path=get_kubeconfig_path(configuration.kubeconfig),
            state=FileStateStore(configuration.state_dir),
            namespace_exists=ClusterNamespaceChecker(configuration.namespace_check_timeout),
            picker=Picker(configuration.picker_command),
            out=Console(highlight=False, soft_wrap=True, emoji=False),
            err=Console(stderr=True, highlight=False, soft_wrap=True, emoji=False),
            prog=prog,
        )

    def load_kubeconfig(self) -> KubeConfig:
        return KubeConfig.load(self.kubeconfig_path)

    def context_switcher(self, kubeconfig: KubeConfig) -> ContextSwitcher:
        return ContextSwitcher(kubeconfig, self.state)

    def namespace_switcher(self, kubeconfig: KubeConfig) -> NamespaceSwitcher:
        return NamespaceSwitcher(kubeconfig, self.state, self.namespace_exists)
