import os

import pytest
import yaml

from kubeswitch.errors import ContextNotFoundError, PersistenceError
from kubeswitch.kubeconfig import DEFAULT_KUBECONFIG_PATH, KubeConfig, get_kubeconfig_path
from tests.helpers import read_kubeconfig, write_kubeconfig


@pytest.fixture
def kubeconfig(tmp_path):
    path = write_kubeconfig(
        tmp_path / "config", ["a", "b"], current="a", namespaces={"b": "ns1"}
    )
    return KubeConfig.load(path)


def test_get_kubeconfig_path(monkeypatch, tmp_path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    monkeypatch.setenv("KUBECONFIG", os.pathsep.join(["", str(first), str(second)]))
    assert get_kubeconfig_path() == first
    assert get_kubeconfig_path(str(second)) == second

    monkeypatch.delenv("KUBECONFIG")
    assert get_kubeconfig_path() == DEFAULT_KUBECONFIG_PATH


def test_load_missing_file(tmp_path):
    with pytest.raises(PersistenceError, match="kubeconfig file not found"):
        KubeConfig.load(tmp_path / "missing")


def test_load_invalid_yaml(tmp_path):
    path = tmp_path / "config"
    path.write_text("contexts: [unterminated")
    with pytest.raises(PersistenceError):
        KubeConfig.load(path)


def test_load_empty_file(tmp_path):
    path = tmp_path / "config"
    path.write_text("")
    kubeconfig = KubeConfig.load(path)
    assert kubeconfig.context_names() == []
    assert kubeconfig.current_context == ""


def test_inspect(kubeconfig):
    assert kubeconfig.current_context == "a"
    assert kubeconfig.context_names() == ["a", "b"]
    assert kubeconfig.context_exists("b")
    assert not kubeconfig.context_exists("z")
    assert kubeconfig.namespace_of_context("a") == "default"
    assert kubeconfig.namespace_of_context("b") == "ns1"
    with pytest.raises(ContextNotFoundError):
        kubeconfig.namespace_of_context("z")


def test_mutate_and_save(kubeconfig):
    kubeconfig.set_current_context("b")
    kubeconfig.set_namespace("a", "ns2")
    kubeconfig.rename_context("b", "bee")
    kubeconfig.save()

    data = read_kubeconfig(kubeconfig.path)
    assert data["current-context"] == "b"
    assert [c["name"] for c in data["contexts"]] == ["a", "bee"]
    assert data["contexts"][0]["context"]["namespace"] == "ns2"
    # Unrelated sections survive.
    assert len(data["clusters"]) == 2
    assert len(data["users"]) == 2


def test_delete_keeps_cluster_and_user(kubeconfig):
    kubeconfig.delete_context("a")
    kubeconfig.save()
    data = read_kubeconfig(kubeconfig.path)
    assert [c["name"] for c in data["contexts"]] == ["b"]
    assert "cluster-a" in [c["name"] for c in data["clusters"]]
    with pytest.raises(ContextNotFoundError):
        kubeconfig.delete_context("a")


def test_unset_current_context(kubeconfig):
    kubeconfig.unset_current_context()
    assert kubeconfig.current_context == ""


def test_to_bytes_round_trips(kubeconfig):
    assert yaml.safe_load(kubeconfig.to_bytes()) == kubeconfig.to_dict()


def test_save_failure_is_persistence_error(kubeconfig, tmp_path):
    kubeconfig.path = tmp_path / "no-such-dir" / "config"
    with pytest.raises(PersistenceError):
        kubeconfig.save()


def test_deleted_context_can_be_put_back(kubeconfig):
    index, entry = kubeconfig.delete_context("a")
    assert index == 0
    assert kubeconfig.context_names() == ["b"]
    kubeconfig.insert_context(index, entry)
    assert kubeconfig.context_names() == ["a", "b"]
