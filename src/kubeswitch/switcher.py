"""
Context and namespace switching.

Both switchers record what was active before a change so it can be swapped
back to later. Switching to the value that is already active leaves that
record untouched, otherwise a repeated switch would erase the real history.
"""
import logging
from typing import Callable

from .errors import (
    ContextNotFoundError,
    NamespaceNotFoundError,
    NoHistoryError,
    PersistenceError,
    QueryError,
    wrap,
)
from .kubeconfig import KubeConfig
from .state import StateStore

logger = logging.getLogger(__name__)

NamespaceChecker = Callable[[bytes, str], bool]


class ContextSwitcher:
    def __init__(self, kubeconfig: KubeConfig, state: StateStore):
        self.kubeconfig = kubeconfig
        self.state = state

    def switch_to(self, name: str) -> str:
        """Makes ``name`` the active context and returns it."""
        prev = self.kubeconfig.current_context
        if not self.kubeconfig.context_exists(name):
            raise ContextNotFoundError(f'no context exists with the name: "{name}"')

        self.kubeconfig.set_current_context(name)
        self.kubeconfig.save()

        if prev != name:
            try:
                self.state.set_previous_context(prev)
            except PersistenceError as e:
                raise PersistenceError(wrap("failed to save previous context name", e)) from e
        logger.debug(f"Switched context from {prev!r} to {name!r}.")
        return name

    def swap_back(self) -> str:
        """Switches to the context that was active before the last switch."""
        try:
            prev = self.state.previous_context()
        except PersistenceError as e:
            raise PersistenceError(wrap("failed to read previous context file", e)) from e
        if not prev:
            raise NoHistoryError("no previous context found")
        return self.switch_to(prev)


class NamespaceSwitcher:
    def __init__(self, kubeconfig: KubeConfig, state: StateStore, namespace_exists: NamespaceChecker):
        self.kubeconfig = kubeconfig
        self.state = state
        self.namespace_exists = namespace_exists

    def switch(self, context: str, namespace: str, force: bool = False) -> str:
        """Sets the namespace of ``context`` and returns it.

        Unless ``force`` is set, the namespace must exist in the cluster.
        """
        current_ns = self.kubeconfig.namespace_of_context(context)

        if not force:
            try:
                found = self.namespace_exists(self.kubeconfig.to_bytes(), namespace)
            except QueryError as e:
                raise QueryError(
                    wrap("failed to query if namespace exists (is cluster accessible?)", e)
                ) from e
            if not found:
                raise NamespaceNotFoundError(f'no namespace exists with name "{namespace}"')

        self.kubeconfig.set_namespace(context, namespace)
        self.kubeconfig.save()

        if current_ns != namespace:
            try:
                self.state.set_previous_namespace(context, current_ns)
            except PersistenceError as e:
                raise PersistenceError(wrap("failed to save the previous namespace to file", e)) from e
        logger.debug(f"Switched namespace of {context!r} from {current_ns!r} to {namespace!r}.")
        return namespace
