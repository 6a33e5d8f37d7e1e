from ...errors import KubeswitchError
from ...ops import PREVIOUS_CONTEXT
from ..runtime import Runtime
from ..utils import natural_sorted, print_success, quoted


def switch_context(runtime: Runtime, target: str, namespace: str = "") -> str:
    """Switch to a context (``-`` for the previous one), then optionally to a namespace."""
    kubeconfig = runtime.load_kubeconfig()
    switcher = runtime.context_switcher(kubeconfig)

    try:
        if target == PREVIOUS_CONTEXT:
            new_context = switcher.swap_back()
        else:
            new_context = switcher.switch_to(target)
    except KubeswitchError as e:
        raise e.wrapped("failed to switch context") from e

    if namespace:
        try:
            new_namespace = runtime.namespace_switcher(kubeconfig).switch(new_context, namespace)
        except KubeswitchError as e:
            raise e.wrapped("failed to switch namespace") from e
        print_success(
            runtime.err,
            f"Switched to context {quoted(new_context)} and namespace {quoted(new_namespace)}.",
        )
        return new_context

    print_success(runtime.err, f"Switched to context {quoted(new_context)}.")
    return new_context


def interactive_switch(runtime: Runtime) -> str:
    kubeconfig = runtime.load_kubeconfig()
    names = natural_sorted(kubeconfig.context_names())
    if not names:
        raise KubeswitchError("no contexts found in the kubeconfig file")
    choice = runtime.picker.pick_context(names)
    return switch_context(runtime, choice)
