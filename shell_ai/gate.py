"""
Confirm-before-execute gate.

In unsafe mode the command runs straight away. Otherwise the operator
picks Run or Cancel first. Either way the gate ends in TERMINAL after
one pass, and a failing command is reported rather than raised.
"""

import logging
import subprocess
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

import click

logger = logging.getLogger(__name__)


class Decision(str, Enum):
    RUN = "Run"
    CANCEL = "Cancel"


class GateState(str, Enum):
    AWAITING_DECISION = "awaiting_decision"
    TERMINAL = "terminal"


@dataclass(frozen=True)
class GateResult:
    decision: Decision
    executed: bool
    error: Optional[str] = None


def run_in_shell(command: str) -> None:
    """Run through the user's shell with inherited stdin/stdout/stderr."""
    subprocess.run(command, shell=True, check=True)


def report_error(message: str) -> None:
    click.echo(click.style(message, fg="bright_red"), err=True)


class ExecutionGate:
    """
    One-shot gate around a synthesized command.

    Args:
        choose: Asks the operator, gets the command, returns a Decision
        runner: Executes the command; raises on failure
        report: Prints cancellation and failure messages
    """

    def __init__(
        self,
        choose: Callable[[str], Decision],
        runner: Callable[[str], None] = run_in_shell,
        report: Callable[[str], None] = report_error,
    ):
        self.choose = choose
        self.runner = runner
        self.report = report
        self.state = GateState.AWAITING_DECISION

    def process(self, command: str, unsafe: bool = False) -> GateResult:
        if self.state is GateState.TERMINAL:
            raise RuntimeError("Execution gate already used")

        decision = Decision.RUN if unsafe else Decision(self.choose(command))

        if decision is Decision.CANCEL:
            self.report("Command canceled")
            self.state = GateState.TERMINAL
            return GateResult(decision, executed=False)

        error = self._execute(command)
        self.state = GateState.TERMINAL
        return GateResult(decision, executed=True, error=error)

    def _execute(self, command: str) -> Optional[str]:
        logger.debug(f"Executing: {command}")
        try:
            self.runner(command)
        except subprocess.CalledProcessError as e:
            message = f"Command failed: {command} (exit status {e.returncode})"
        except (subprocess.SubprocessError, OSError, ValueError) as e:
            # ValueError: subprocess rejects commands containing NUL bytes
            message = f"Command failed: {e}"
        else:
            return None
        self.report(message)
        return message
