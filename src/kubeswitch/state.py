"""
Persistence for the "previous context" and "previous namespace" records.

Both records are small text files under a state directory. A missing file
means there is no history yet and reads back as an empty string.
"""
import logging
import re
import sys
from pathlib import Path
from typing import Dict, Optional

from .errors import PersistenceError, wrap

logger = logging.getLogger(__name__)

PREVIOUS_CONTEXT_FILE = "kubectx"
NAMESPACE_DIR = "kubens"

# Characters that cannot appear in a file name on Windows.
_WINDOWS_ILLEGAL = '<>:"\\|?*'
_ALWAYS_ESCAPED = "%/"
_ESCAPED = re.compile(r"%([0-9A-F]{2})")
_EMPTY_NAME = "%"


def _is_windows(windows: Optional[bool]) -> bool:
    if windows is not None:
        return windows
    return sys.platform.startswith("win")


def escape_filename(name: str, windows: Optional[bool] = None) -> str:
    """Percent-encode characters of a context name that are not valid in a file name.

    A leading dot is encoded too, so "", "." and ".." never name the
    directory itself or its parent. The empty name becomes a lone "%".
    """
    if not name:
        return _EMPTY_NAME
    illegal = _ALWAYS_ESCAPED
    if _is_windows(windows):
        illegal += _WINDOWS_ILLEGAL
    escaped = "".join(f"%{ord(c):02X}" if c in illegal else c for c in name)
    if escaped.startswith("."):
        escaped = "%2E" + escaped[1:]
    return escaped


def unescape_filename(filename: str) -> str:
    """Reverse escape_filename."""
    if filename == _EMPTY_NAME:
        return ""
    return _ESCAPED.sub(lambda m: chr(int(m.group(1), 16)), filename)


class StateStore:
    """Key/value store for switch history. Last writer wins."""

    def previous_context(self) -> str:
        raise NotImplementedError

    def set_previous_context(self, name: str) -> None:
        raise NotImplementedError

    def previous_namespace(self, context: str) -> str:
        raise NotImplementedError

    def set_previous_namespace(self, context: str, namespace: str) -> None:
        raise NotImplementedError


class FileStateStore(StateStore):
    def __init__(self, state_dir: Path, windows: Optional[bool] = None):
        self.state_dir = Path(state_dir).expanduser()
        self._windows = windows

    @property
    def previous_context_path(self) -> Path:
        return self.state_dir / PREVIOUS_CONTEXT_FILE

    def namespace_path(self, context: str) -> Path:
        return self.state_dir / NAMESPACE_DIR / escape_filename(context, self._windows)

    def _read(self, path: Path) -> str:
        try:
            value = path.read_text().strip()
        except FileNotFoundError:
            logger.debug(f"State file {path} does not exist yet.")
            return ""
        except OSError as e:
            raise PersistenceError(wrap(f"failed to read state file {path}", e)) from e
        logger.debug(f"Read {value!r} from {path}.")
        return value

    def _write(self, path: Path, value: str) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(value)
        except OSError as e:
            raise PersistenceError(wrap(f"failed to write state file {path}", e)) from e
        logger.debug(f"Wrote {value!r} to {path}.")

    def previous_context(self) -> str:
        return self._read(self.previous_context_path)

    def set_previous_context(self, name: str) -> None:
        self._write(self.previous_context_path, name)

    def previous_namespace(self, context: str) -> str:
        return self._read(self.namespace_path(context))

    def set_previous_namespace(self, context: str, namespace: str) -> None:
        self._write(self.namespace_path(context), namespace)


class InMemoryStateStore(StateStore):
    """A StateStore that keeps everything in a dict, for tests and dry runs."""

    def __init__(self, previous_context: str = "", namespaces: Optional[Dict[str, str]] = None):
        self._previous_context = previous_context
        self.namespaces: Dict[str, str] = dict(namespaces or {})

    def previous_context(self) -> str:
        return self._previous_context

    def set_previous_context(self, name: str) -> None:
        self._previous_context = name

    def previous_namespace(self, context: str) -> str:
        return self.namespaces.get(context, "")

    def set_previous_namespace(self, context: str, namespace: str) -> None:
        self.namespaces[context] = namespace
