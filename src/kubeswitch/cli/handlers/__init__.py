"""
This module contains the handler functions for each operation, and the
dispatcher that runs a resolved operation.
"""
from ...errors import ParseError
from ...ops import (
    Current,
    Delete,
    Help,
    InteractiveDelete,
    InteractiveSwitch,
    ListContexts,
    Operation,
    PREVIOUS_CONTEXT,
    Rename,
    SwapBack,
    Switch,
    Unset,
    Unsupported,
    Version,
)
from ..runtime import Runtime
from .delete import delete_contexts, interactive_delete
from .info import current_context, list_contexts, show_help, show_version, unset_context
from .rename import rename_context
from .switch import interactive_switch, switch_context

__all__ = [
    "execute",
    "current_context",
    "delete_contexts",
    "interactive_delete",
    "interactive_switch",
    "list_contexts",
    "rename_context",
    "show_help",
    "show_version",
    "switch_context",
    "unset_context",
]


def execute(op: Operation, runtime: Runtime) -> None:
    """Run a resolved operation. Every Operation subclass must be handled here."""
    if isinstance(op, ListContexts):
        list_contexts(runtime)
    elif isinstance(op, InteractiveSwitch):
        interactive_switch(runtime)
    elif isinstance(op, InteractiveDelete):
        interactive_delete(runtime)
    elif isinstance(op, Switch):
        switch_context(runtime, op.target, op.namespace)
    elif isinstance(op, SwapBack):
        switch_context(runtime, PREVIOUS_CONTEXT, op.namespace)
    elif isinstance(op, Delete):
        delete_contexts(runtime, op.names)
    elif isinstance(op, Rename):
        rename_context(runtime, op.new, op.old)
    elif isinstance(op, Current):
        current_context(runtime)
    elif isinstance(op, Unset):
        unset_context(runtime)
    elif isinstance(op, Help):
        show_help(runtime)
    elif isinstance(op, Version):
        show_version(runtime)
    elif isinstance(op, Unsupported):
        raise ParseError(op.reason)
    else:
        raise TypeError(f"unhandled operation: {op!r}")
