"""
Operations and the resolver that maps raw command-line tokens onto them.

Every token sequence maps to exactly one operation. Malformed input maps to
``Unsupported`` instead of raising, so the caller decides how to report it.
"""
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple

# Marker for "whatever context is active when the operation runs".
CURRENT_CONTEXT = "."
# Switch target that means "the previously active context".
PREVIOUS_CONTEXT = "-"

DELETE_FLAG = "-d"
NAMESPACE_FLAGS = ("-n", "--namespace")
HELP_FLAGS = ("-h", "--help")
VERSION_FLAGS = ("-V", "--version")
CURRENT_FLAGS = ("-c", "--current")
UNSET_FLAGS = ("-u", "--unset")


class Operation:
    """Base class for everything the resolver can produce."""


@dataclass(frozen=True)
class ListContexts(Operation):
    pass


@dataclass(frozen=True)
class InteractiveSwitch(Operation):
    pass


@dataclass(frozen=True)
class InteractiveDelete(Operation):
    pass


@dataclass(frozen=True)
class Switch(Operation):
    target: str
    namespace: str = ""


@dataclass(frozen=True)
class SwapBack(Operation):
    namespace: str = ""


@dataclass(frozen=True)
class Delete(Operation):
    names: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Rename(Operation):
    new: str
    old: str


@dataclass(frozen=True)
class Current(Operation):
    pass


@dataclass(frozen=True)
class Unset(Operation):
    pass


@dataclass(frozen=True)
class Help(Operation):
    pass


@dataclass(frozen=True)
class Version(Operation):
    pass


@dataclass(frozen=True)
class Unsupported(Operation):
    reason: str


def parse_rename(token: str) -> Optional[Tuple[str, str]]:
    """Split ``NEW=OLD`` into ``(new, old)``, or return None if it isn't one."""
    parts = token.split("=")
    if len(parts) != 2:
        return None
    new, old = parts
    if not new or not old:
        return None
    return new, old


def _extract_namespace(tokens: List[str]) -> Tuple[List[str], Optional[str], Optional[Operation]]:
    """Remove the first ``-n NS`` pair from tokens.

    Returns the remaining tokens, the namespace (or None) and an Unsupported
    operation when the flag has no value.
    """
    for i, token in enumerate(tokens):
        if token in NAMESPACE_FLAGS:
            if i + 1 >= len(tokens):
                return tokens, None, Unsupported(f"'{token}' requires a namespace argument")
            return tokens[:i] + tokens[i + 2 :], tokens[i + 1], None
    return tokens, None, None


def _classify(token: str, namespace: str) -> Operation:
    if token in HELP_FLAGS:
        return Help()
    if token in VERSION_FLAGS:
        return Version()
    if token in CURRENT_FLAGS:
        return Current()
    if token in UNSET_FLAGS:
        return Unset()

    rename = parse_rename(token)
    if rename:
        return Rename(new=rename[0], old=rename[1])

    if token == PREVIOUS_CONTEXT:
        return SwapBack(namespace=namespace)
    if token.startswith("-"):
        return Unsupported(f"unsupported option '{token}'")
    return Switch(target=token, namespace=namespace)


def resolve_args(argv: Sequence[str], is_interactive: Callable[[], bool]) -> Operation:
    """Decide which operation a list of arguments (without the program name) asks for.

    ``is_interactive`` is only called when the answer matters, i.e. when no
    other token selects an operation.
    """
    tokens = list(argv)

    if not tokens:
        return InteractiveSwitch() if is_interactive() else ListContexts()

    if tokens[0] == DELETE_FLAG:
        if len(tokens) == 1:
            if is_interactive():
                return InteractiveDelete()
            return Unsupported(f"'{DELETE_FLAG}' needs arguments")
        return Delete(names=tuple(tokens[1:]))

    tokens, namespace, unsupported = _extract_namespace(tokens)
    if unsupported is not None:
        return unsupported

    if not tokens:
        if namespace:
            return Unsupported("context name is required when using -n flag")
        return InteractiveSwitch() if is_interactive() else ListContexts()

    if len(tokens) == 1:
        return _classify(tokens[0], namespace or "")

    return Unsupported("too many arguments")
