# Copyright (c) 2025 Mahmood Khordoo
#
# This software is licensed under the MIT License.
# See the LICENSE file in the root directory for details.

"""
AWS utilities for eks-login.

This module drives the AWS CLI for everything the login flow needs: profile
discovery, SSO session checks and login, EKS cluster discovery and kubeconfig
updates. Nothing here talks to AWS directly; each function is a thin wrapper
around one `aws` invocation.

Functions:
    list_profiles: Discover configured profiles and their regions
    session_is_valid: Check if the SSO session for a profile is usable
    sso_login: Run the interactive AWS SSO login
    list_clusters: Discover EKS clusters in a region
    update_kubeconfig: Merge a cluster into the local kubeconfig
"""

import json
import logging
import subprocess

from ekslogin.config import DEFAULT_REGION
from ekslogin.exceptions import CommandFailedError, OutputParseError
from ekslogin.helpers import run_command, run_interactive
from ekslogin.models import ProfileInfo

logger = logging.getLogger(__name__)


def get_profile_region(profile: str, default: str = DEFAULT_REGION) -> str:
    """Return the region configured for a profile, or default if none is set."""
    try:
        region = run_command(["aws", "configure", "get", "region", "--profile", profile])
    except CommandFailedError:
        logger.debug("No region configured for profile %s", profile)
        return default
    return region or default


def list_profiles() -> list[ProfileInfo]:
    """
    List AWS CLI profiles along with their configured regions.

    Returns:
        Profiles in the order reported by `aws configure list-profiles`

    Raises:
        CommandFailedError: If the profiles cannot be listed
    """
    try:
        output = run_command(["aws", "configure", "list-profiles"])
    except CommandFailedError as e:
        raise CommandFailedError(
            f"failed to list AWS profiles: {e}", command=e.command, returncode=e.returncode
        ) from e

    names = [line.strip() for line in output.splitlines() if line.strip()]
    return [ProfileInfo(name=name, region=get_profile_region(name)) for name in names]


def session_is_valid(profile: str) -> bool:
    """Check if the cached session for a profile can call STS.

    Only the exit code matters; any failure, including not being able to
    start the AWS CLI, means the session is not valid.
    """
    try:
        result = subprocess.run(
            ["aws", "sts", "get-caller-identity", "--profile", profile],
            capture_output=True, text=True, errors="replace", check=False
        )
    except OSError as e:
        logger.debug("Session check could not run: %s", e)
        return False
    logger.debug("Session check for %s exited with %s", profile, result.returncode)
    return result.returncode == 0


def sso_login(profile: str) -> None:
    """Run `aws sso login` attached to the terminal so device-code prompts work.

    Raises:
        CommandFailedError: If the login command fails
    """
    run_interactive(["aws", "sso", "login", "--profile", profile], "SSO login failed")


def parse_cluster_list(output: str) -> list[str]:
    """Decode the JSON document printed by `aws eks list-clusters`."""
    try:
        data = json.loads(output)
    except json.JSONDecodeError as e:
        raise OutputParseError(f"failed to parse cluster list: {e}") from e

    clusters = data.get("clusters", []) if isinstance(data, dict) else None
    if not isinstance(clusters, list) or not all(isinstance(c, str) for c in clusters):
        raise OutputParseError("failed to parse cluster list: expected a 'clusters' array of names")
    return clusters


def list_clusters(profile: str, region: str) -> list[str]:
    """
    List EKS clusters visible to a profile in one region.

    Raises:
        CommandFailedError: If the AWS CLI call fails
        OutputParseError: If the response is not the expected JSON
    """
    try:
        output = run_command([
            "aws", "eks", "list-clusters",
            "--profile", profile,
            "--region", region,
            "--output", "json",
        ])
    except CommandFailedError as e:
        raise CommandFailedError(
            f"failed to list EKS clusters: {e}", command=e.command, returncode=e.returncode
        ) from e
    return parse_cluster_list(output)


def update_kubeconfig(profile: str, region: str, cluster: str) -> None:
    """Write cluster credentials into the kubeconfig via `aws eks update-kubeconfig`.

    Raises:
        CommandFailedError: If the update fails
    """
    run_interactive(
        [
            "aws", "eks", "update-kubeconfig",
            "--region", region,
            "--name", cluster,
            "--profile", profile,
        ],
        "failed to update kubeconfig",
    )
