from importlib import metadata

from rich.markup import escape

from ... import __version__
from ...errors import NotFoundError
from ..runtime import Runtime
from ..utils import natural_sorted, print_success

HELP_TEMPLATE = """USAGE:
  {prog}                       : list the contexts
  {prog} <NAME>                : switch to context <NAME>
  {prog} -                     : switch to the previous context
  {prog} <NAME> -n <NS>        : switch to context <NAME> and namespace <NS>
  {prog} -c, --current         : show the current context name
  {prog} <NEW_NAME>=<NAME>     : rename context <NAME> to <NEW_NAME>
  {prog} <NEW_NAME>=.          : rename current-context to <NEW_NAME>
  {prog} -u, --unset           : unset the current context
  {prog} -d <NAME> [<NAME...>] : delete context <NAME> ('.' for current-context)
  {pad}                         (this command won't delete the user/cluster entry
  {pad}                          referenced by the context entry)
  {prog} -h,--help             : show this message
  {prog} -V,--version          : show version"""


def list_contexts(runtime: Runtime) -> None:
    """Print every context, highlighting the active one."""
    kubeconfig = runtime.load_kubeconfig()
    current = kubeconfig.current_context
    for name in natural_sorted(kubeconfig.context_names()):
        if name == current:
            runtime.out.print(f"[bold green]{escape(name)}[/bold green]")
        else:
            runtime.out.print(escape(name))


def current_context(runtime: Runtime) -> str:
    current = runtime.load_kubeconfig().current_context
    if not current:
        raise NotFoundError("current-context is not set")
    runtime.out.print(escape(current))
    return current


def unset_context(runtime: Runtime) -> None:
    kubeconfig = runtime.load_kubeconfig()
    kubeconfig.unset_current_context()
    kubeconfig.save()
    print_success(runtime.err, "Active context unset for kubectl.")


def show_help(runtime: Runtime) -> None:
    text = HELP_TEMPLATE.format(prog=runtime.prog, pad=" " * len(runtime.prog))
    runtime.out.print(escape(text))


def get_version() -> str:
    try:
        return metadata.version("kubeswitch")
    except metadata.PackageNotFoundError:
        return __version__


def show_version(runtime: Runtime) -> None:
    runtime.out.print(get_version())
