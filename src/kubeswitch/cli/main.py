import copy
import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler

from ..errors import KubeswitchError
from ..ops import Help, Version, resolve_args
from . import handlers
from .config import DEFAULT_CONFIG, Configuration, get_default_config_path, load_config
from .picker import is_interactive_output
from .runtime import Runtime
from .utils import print_error


class PassthroughCommand(click.Command):
    """A command whose callback receives every token as ``argv``, ``--`` included.

    Flags are interpreted by resolve_args, not by click.
    """

    def parse_args(self, ctx: click.Context, args: list) -> list:
        ctx.params["argv"] = tuple(args)
        ctx.args = []
        return ctx.args


def setup_logging(level: str) -> None:
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    logging.basicConfig(level=level, format="%(message)s", handlers=[handler], force=True)


@click.command(cls=PassthroughCommand)
@click.pass_context
def main(ctx, argv: tuple[str, ...]) -> None:
    """Switch between kubeconfig contexts and remember the previous one."""
    loaded = {}

    def configuration() -> Configuration:
        if "config" not in loaded:
            loaded["config"] = load_config(get_default_config_path())
        return loaded["config"]

    try:
        op = resolve_args(argv, lambda: is_interactive_output(configuration(), sys.stdout))
        if isinstance(op, (Help, Version)):
            # Informational output never depends on the config file.
            handlers.execute(op, Runtime.from_configuration(Configuration(copy.deepcopy(DEFAULT_CONFIG))))
            return

        setup_logging(configuration().log_level)
        logging.getLogger(__name__).debug(f"Resolved {list(argv)} to {op!r}.")

        handlers.execute(op, Runtime.from_configuration(configuration()))
    except KubeswitchError as e:
        print_error(Console(stderr=True, highlight=False, soft_wrap=True, emoji=False), str(e))
        ctx.exit(1)


if __name__ == "__main__":
    main()
