"""
kubectl utilities for eks-login.

Post-update checks against the cluster that was just written into the
kubeconfig. These are best effort and never abort a run.
"""

import logging
from typing import Optional

from ekslogin.exceptions import CommandFailedError
from ekslogin.helpers import run_command
from ekslogin.ui import console, render_status

logger = logging.getLogger(__name__)


def current_context() -> Optional[str]:
    """Return the active kubeconfig context, or None if it cannot be read."""
    try:
        return run_command(["kubectl", "config", "current-context"])
    except CommandFailedError as e:
        logger.debug("Could not read current context: %s", e)
        return None


def verify_connection() -> bool:
    """
    Check that kubectl can reach the cluster in the current context.

    A failure only prints a warning since the kubeconfig has already been
    written by then.

    Returns:
        bool: True if `kubectl cluster-info` succeeded, False otherwise
    """
    render_status("Verifying cluster connection...")
    try:
        output = run_command(["kubectl", "cluster-info"])
    except CommandFailedError as e:
        logger.debug("Connection check failed: %s", e)
        render_status("Kubeconfig updated but unable to verify connection", level="warning")
        return False

    render_status("Successfully connected to cluster!", level="success")

    context = current_context()
    if context:
        render_status(f"Current context: {context}")

    if output:
        console.print()
        console.print(output, markup=False, highlight=False)
    return True
