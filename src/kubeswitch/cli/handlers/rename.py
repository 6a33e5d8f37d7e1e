from ...errors import ContextNotFoundError
from ...ops import CURRENT_CONTEXT
from ..runtime import Runtime
from ..utils import print_success, print_warning, quoted


def rename_context(runtime: Runtime, new: str, old: str) -> str:
    """Rename context ``old`` (``.`` for the active one) to ``new``."""
    kubeconfig = runtime.load_kubeconfig()
    current = kubeconfig.current_context

    # "." is resolved here, against the kubeconfig as it is now.
    if old == CURRENT_CONTEXT:
        if not current:
            raise ContextNotFoundError("can't use '.' as no active context is set")
        old = current

    if not kubeconfig.context_exists(old):
        raise ContextNotFoundError(f'context "{old}" not found, can\'t rename it')

    if new != old:
        if kubeconfig.context_exists(new):
            print_warning(runtime.err, f"context {quoted(new)} exists, overwriting it.")
            kubeconfig.delete_context(new)

        kubeconfig.rename_context(old, new)
        if old == current:
            kubeconfig.set_current_context(new)
        kubeconfig.save()

    print_success(runtime.err, f"Context {quoted(old)} renamed to {quoted(new)}.")
    return new
