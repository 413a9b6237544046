"""
EKS Login Shared Utility Functions.

This module wraps subprocess execution, dependency lookup and numbered-choice
prompting so the AWS and kubectl helpers stay thin.
"""

import logging
import os
import re
import shutil
import subprocess
from typing import Sequence, TypeVar

import typer

from ekslogin.config import REQUIRED_TOOLS
from ekslogin.exceptions import CommandFailedError, ExecutableNotFoundError, SelectionRequiredError
from ekslogin.ui import render_choices, render_status

logger = logging.getLogger(__name__)

T = TypeVar("T")


def get_app_path(exe_name: str) -> str:
    """Find the full path to an executable in a cross-platform way.

    On Windows, prefers .cmd and .exe versions when multiple variants exist.

    Args:
        exe_name: Name of the executable to find

    Returns:
        Full path to the executable

    Raises:
        ExecutableNotFoundError: If executable is not found in PATH
        ValueError: If executable name is invalid
    """
    if not exe_name or not exe_name.strip():
        raise ValueError(f'Invalid executable name provided: {exe_name!r}')

    app_path = shutil.which(exe_name)
    if app_path is None:
        raise ExecutableNotFoundError(f"required dependency '{exe_name}' not found in PATH")

    if os.name == 'nt':
        for ext in ('.cmd', '.exe'):
            if not exe_name.lower().endswith(ext):
                preferred_path = shutil.which(exe_name + ext)
                if preferred_path:
                    return preferred_path

    return app_path


def check_dependencies(tools: Sequence[str] = REQUIRED_TOOLS) -> dict[str, str]:
    """Verify every required tool is on PATH, failing on the first missing one.

    Returns:
        Mapping of tool name to resolved path
    """
    render_status("Checking dependencies...")
    found = {}
    for tool in tools:
        found[tool] = get_app_path(tool)
        logger.debug("Resolved %s to %s", tool, found[tool])
        render_status(f"{tool} found", level="success")
    return found


def run_command(args: Sequence[str]) -> str:
    """Run a command with captured output and return its stripped stdout.

    Raises:
        CommandFailedError: If the command cannot be started or exits non-zero
    """
    logger.debug("Running: %s", " ".join(args))
    try:
        result = subprocess.run(list(args), capture_output=True, text=True, errors="replace", check=False)
    except OSError as e:
        raise CommandFailedError(f"could not run {args[0]}: {e}", command=args) from e

    logger.debug("Exit code %s from %s", result.returncode, args[0])
    if result.returncode != 0:
        raise CommandFailedError(
            f"command failed: {' '.join(args)} (exit code {result.returncode})",
            command=args,
            returncode=result.returncode,
            stderr=result.stderr,
        )
    return result.stdout.strip()


def run_interactive(args: Sequence[str], error_message: str) -> None:
    """Run a command attached to the current terminal's stdin, stdout and stderr.

    Raises:
        CommandFailedError: With error_message if the command fails
    """
    logger.debug("Running interactively: %s", " ".join(args))
    try:
        result = subprocess.run(list(args), check=False)
    except OSError as e:
        raise CommandFailedError(f"{error_message}: {e}", command=args) from e

    logger.debug("Exit code %s from %s", result.returncode, args[0])
    if result.returncode != 0:
        raise CommandFailedError(
            f"{error_message}: exit code {result.returncode}",
            command=args,
            returncode=result.returncode,
        )


def parse_choice(raw: str, count: int) -> int:
    """Return the 0-based index for a 1-based numeric answer, or -1 if invalid."""
    raw = raw.strip()
    if not re.fullmatch(r"[+-]?[0-9]+", raw):
        return -1
    choice = int(raw)
    if choice < 1 or choice > count:
        return -1
    return choice - 1


def prompt_for_choice(kind: str, heading: str, choices: Sequence[T], interactive: bool = True) -> T:
    """
    Pick one item from choices.

    A single choice is returned without prompting. Otherwise a numbered list
    is shown and the user is asked until a number in range is entered.

    Args:
        kind: What is being selected, used in prompts (e.g. "profile")
        heading: Title printed above the numbered list
        choices: Non-empty sequence of options
        interactive: When False, refuse to prompt for multiple choices

    Raises:
        SelectionRequiredError: If several choices exist and interactive is False
    """
    if len(choices) == 1:
        return choices[0]

    if not interactive:
        raise SelectionRequiredError(
            f"{len(choices)} {kind}s found; pass --{kind} or enable --interactive"
        )

    render_choices(heading, choices)
    count = len(choices)
    while True:
        raw = typer.prompt(f"Select {kind} (1-{count})", prompt_suffix=": ")
        index = parse_choice(raw, count)
        if index >= 0:
            return choices[index]
        render_status(f"Invalid selection. Please choose a number between 1 and {count}.", level="error")
