"""Hand the terminal to an external process and take it back afterwards"""

import contextlib
import logging
import subprocess
from typing import Callable, ContextManager, Optional

import click
from rich.console import Console

logger = logging.getLogger(__name__)

RETURN_PROMPT = "Press any key to return to the menu..."


class ShellLauncher:
    """Run commands with the UI suspended.

    `suspend` is a context manager factory that releases the terminal on
    enter and restores the UI on exit (Textual's App.suspend). Exit happens
    however the command ends, including spawn failures.
    """

    def __init__(
        self,
        suspend: Optional[Callable[[], ContextManager]] = None,
        console: Optional[Console] = None,
    ):
        self.suspend = suspend or contextlib.nullcontext
        self.console = console or Console(highlight=False)

    def run_interactive(self, command: Optional[str], shell: str) -> Optional[int]:
        """Run command through shell, or an interactive shell when command is None.

        Returns the exit code, or None if the process could not be started.
        """
        with self.suspend():
            if command is None:
                return self._spawn_shell(shell)
            return self.run_command(command, shell, wait_for_key=True)

    def run_command(self, command: str, shell: str, wait_for_key: bool = False) -> Optional[int]:
        """Run `shell -c command` and report its exit status"""
        logger.info("Running %r with %s", command, shell)
        try:
            result = subprocess.run([shell, "-c", command])
        except OSError as e:
            logger.error("Failed to run %r: %s", command, e)
            self.console.print(f"Failed to run command: {e}")
            returncode = None
        else:
            returncode = result.returncode
            logger.info("Command %r exited with %d", command, returncode)
            self.console.print(f"Command exited with: {returncode}")

        if wait_for_key:
            self.console.print(RETURN_PROMPT)
            click.getchar()
        return returncode

    def _spawn_shell(self, shell: str) -> Optional[int]:
        logger.info("Spawning interactive shell %s", shell)
        try:
            result = subprocess.run([shell])
        except OSError as e:
            logger.error("Failed to spawn %s: %s", shell, e)
            self.console.print(f"Failed to spawn shell: {e}")
            return None
        return result.returncode
