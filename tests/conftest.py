"""
This file contains shared fixtures for all tests.
"""
import copy
from unittest.mock import MagicMock

import pytest

from kubeswitch.cli.config import DEFAULT_CONFIG, Configuration
from kubeswitch.cli.runtime import Runtime
from kubeswitch.state import InMemoryStateStore
from tests.helpers import FakeNamespaceChecker, buffer_console, write_kubeconfig


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keeps tests away from the real kubeconfig, config file and fzf."""
    monkeypatch.setenv("KUBECONFIG", str(tmp_path / "kubeconfig"))
    monkeypatch.setenv("KUBESWITCH_CONFIG", str(tmp_path / "kubeswitch.yml"))
    monkeypatch.setenv("KUBECTX_IGNORE_FZF", "1")
    monkeypatch.delenv("KUBESWITCH_LOG_LEVEL", raising=False)


@pytest.fixture
def kubeconfig_path(tmp_path):
    return write_kubeconfig(tmp_path / "kubeconfig", ["a", "b", "c"], current="a")


@pytest.fixture
def configuration(tmp_path) -> Configuration:
    config_data = copy.deepcopy(DEFAULT_CONFIG)
    config_data["state-dir"] = str(tmp_path / "state")
    return Configuration(config_data)


@pytest.fixture
def namespace_checker() -> FakeNamespaceChecker:
    return FakeNamespaceChecker()


@pytest.fixture
def runtime(configuration, kubeconfig_path, namespace_checker) -> Runtime:
    return Runtime(
        configuration=configuration,
        kubeconfig_path=kubeconfig_path,
        state=InMemoryStateStore(),
        namespace_exists=namespace_checker,
        picker=MagicMock(),
        out=buffer_console(),
        err=buffer_console(),
    )
