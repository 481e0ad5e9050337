"""Run cargo subcommands and turn their exit status into a grumpy exit code."""

import signal
import subprocess
import sys
from typing import List

from grumpy.config import DEFAULT_CARGO
from grumpy.exit_codes import ExitCode


class CargoCommand:
    """Builds and runs ``<cargo> <command> [args...]``.

    The child inherits stdin/stdout/stderr so cargo's own output reaches the
    user. There is no timeout and no retry.
    """

    def __init__(self, command: str, cargo: str = DEFAULT_CARGO):
        self.command = command
        self.cargo = cargo
        self.args: List[str] = []

    def add_arg(self, arg: str) -> "CargoCommand":
        self.args.append(arg)
        return self

    def argv(self) -> List[str]:
        return [self.cargo, self.command] + self.args

    def run(self) -> int:
        """Run cargo and wait for it to exit.

        Returns:
            0 on success, cargo's own exit code on failure, or
            ExitCode.UNEXPECTED_TERMINATION when cargo was killed by a signal.

        Raises:
            OSError: If cargo cannot be launched at all.
        """
        result = subprocess.run(self.argv())
        returncode = result.returncode

        if returncode >= 0:
            return returncode

        print(
            f"Unexpected exit status {_describe_status(returncode)} "
            f"from cargo {self.command}",
            file=sys.stderr,
        )
        return ExitCode.UNEXPECTED_TERMINATION


class Cargo:
    """Factory for CargoCommand bound to one cargo executable."""

    def __init__(self, executable: str = DEFAULT_CARGO):
        self.executable = executable

    def command(self, command: str) -> CargoCommand:
        return CargoCommand(command, cargo=self.executable)

    def run(self, command: str, *args: str) -> int:
        cargo_command = self.command(command)
        for arg in args:
            cargo_command.add_arg(arg)
        return cargo_command.run()


def _describe_status(returncode):
    # subprocess reports death by signal N as returncode -N
    signum = -returncode
    try:
        return f"Signaled({signal.Signals(signum).name})"
    except ValueError:
        return f"Signaled({signum})"
