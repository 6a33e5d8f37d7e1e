from typing import List, Sequence, Tuple

from ...errors import ContextNotFoundError, KubeswitchError, PartialFailureError, PersistenceError
from ...kubeconfig import KubeConfig
from ...ops import CURRENT_CONTEXT
from ..runtime import Runtime
from ..utils import natural_sorted, print_error, print_success, print_warning, quoted


def _delete_context(kubeconfig: KubeConfig, name: str) -> Tuple[str, bool]:
    current = kubeconfig.current_context
    if name == CURRENT_CONTEXT:
        if not current:
            raise ContextNotFoundError("can't use '.' as no active context is set")
        name = current

    if not kubeconfig.context_exists(name):
        raise ContextNotFoundError(f'context "{name}" not found, can\'t delete it')

    index, entry = kubeconfig.delete_context(name)
    try:
        kubeconfig.save()
    except PersistenceError:
        # Keep the in-memory config in step with the file.
        kubeconfig.insert_context(index, entry)
        raise
    return name, name == current


def delete_contexts(runtime: Runtime, names: Sequence[str]) -> List[str]:
    """Delete each named context, carrying on past the ones that fail.

    Every context that exists is deleted; if any name failed the whole
    operation fails afterwards.
    """
    kubeconfig = runtime.load_kubeconfig()
    deleted: List[str] = []
    failures: List[KubeswitchError] = []

    for name in names:
        try:
            deleted_name, was_active = _delete_context(kubeconfig, name)
        except KubeswitchError as e:
            failures.append(e)
            print_error(runtime.err, str(e))
            continue

        if was_active:
            print_warning(
                runtime.err,
                f'You deleted the current context. Use "{runtime.prog}" to select a new context.',
            )
        print_success(runtime.err, f"Deleted context {quoted(deleted_name)}.")
        deleted.append(deleted_name)

    if failures:
        raise PartialFailureError("failed to delete some contexts", failures)
    return deleted


def interactive_delete(runtime: Runtime) -> List[str]:
    kubeconfig = runtime.load_kubeconfig()
    names = natural_sorted(kubeconfig.context_names())
    if not names:
        raise KubeswitchError("no contexts found in the kubeconfig file")
    choices = runtime.picker.pick_contexts_to_delete(names)
    return delete_contexts(runtime, choices)
