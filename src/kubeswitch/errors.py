"""
Custom exception types for kubeswitch.
"""


class KubeswitchError(Exception):
    """Base exception for all kubeswitch errors."""

    def wrapped(self, message: str) -> "KubeswitchError":
        """Returns an error of the same kind, prefixed with what was being attempted."""
        return type(self)(wrap(message, self))


class ParseError(KubeswitchError):
    """Raised when the command line does not map to a supported operation."""
    pass


class NotFoundError(KubeswitchError):
    """Raised when a context or namespace does not exist."""
    pass


class ContextNotFoundError(NotFoundError):
    pass


class NamespaceNotFoundError(NotFoundError):
    pass


class NoHistoryError(KubeswitchError):
    """Raised when swapping back without a recorded previous context."""
    pass


class QueryError(KubeswitchError):
    """Raised when the cluster could not be asked whether a namespace exists."""
    pass


class PersistenceError(KubeswitchError):
    """Raised when the kubeconfig or a state file cannot be read or written."""
    pass


class PartialFailureError(KubeswitchError):
    """Raised when some, but not necessarily all, items of a batch failed."""

    def __init__(self, message: str, failures=None):
        super().__init__(message)
        self.failures = list(failures or [])


class NoSelectionError(KubeswitchError):
    """Raised when the interactive picker returns nothing."""
    pass


def wrap(message: str, err: object) -> str:
    """Prefix an underlying error with what was being attempted."""
    return f"{message}: {err}"
