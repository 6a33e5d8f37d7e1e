"""
Interactive context selection through an external fuzzy finder (fzf).
"""
import logging
import shutil
import subprocess
import sys
from typing import List, Optional, TextIO

from ..errors import KubeswitchError, NoSelectionError
from .config import Configuration

logger = logging.getLogger(__name__)


def is_interactive_output(configuration: Configuration, stream: Optional[TextIO] = None) -> bool:
    """True when output goes to a terminal and the picker can be used."""
    stream = stream or sys.stdout
    if not configuration.picker_enabled:
        return False
    if not stream.isatty():
        return False
    return shutil.which(configuration.picker_command) is not None


class Picker:
    def __init__(self, command: str = "fzf"):
        self.command = command

    def _run(self, choices: List[str], multi: bool) -> List[str]:
        args = [self.command, "--ansi", "--no-preview"]
        if multi:
            args.append("--multi")
        logger.debug(f"Launching picker: {' '.join(args)}")
        try:
            result = subprocess.run(
                args,
                input="\n".join(choices),
                stdout=subprocess.PIPE,
                text=True,
            )
        except OSError as e:
            raise KubeswitchError(f"failed to run {self.command}: {e}") from e

        selected = [line.strip() for line in result.stdout.splitlines() if line.strip()]
        # fzf exits 1 for "no match" and 130 when cancelled.
        if result.returncode not in (0, 1, 130):
            raise KubeswitchError(f"{self.command} exited with status {result.returncode}")
        if not selected:
            raise NoSelectionError("you did not choose any of the options")
        return selected

    def pick_context(self, names: List[str]) -> str:
        return self._run(names, multi=False)[0]

    def pick_contexts_to_delete(self, names: List[str]) -> List[str]:
        return self._run(names, multi=True)
