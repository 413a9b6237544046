"""
EKS Login Command.

This module provides the default eks-login command: it checks dependencies,
resolves a profile, makes sure the SSO session is usable, resolves a cluster,
updates the kubeconfig and verifies the connection.
"""

import typer

from ekslogin.aws_utils import list_clusters, list_profiles, session_is_valid, sso_login, update_kubeconfig
from ekslogin.config import DEFAULT_REGION, RunConfig
from ekslogin.exceptions import EKSLoginError, NoClustersError, NoProfilesError
from ekslogin.helpers import check_dependencies, prompt_for_choice
from ekslogin.kube_utils import verify_connection
from ekslogin.ui import render_banner, render_status, render_summary, setup_logging


def resolve_profile(config: RunConfig) -> RunConfig:
    """Fill in config.profile (and config.region if unset) from the AWS CLI profiles."""
    if not config.profile:
        profiles = list_profiles()
        if not profiles:
            raise NoProfilesError("No AWS profiles found. Please configure AWS CLI first")

        selected = prompt_for_choice("profile", "Available AWS Profiles:", profiles, config.interactive)
        config.profile = selected.name
        if not config.region:
            config.region = selected.region
        render_status(f"Using profile: {config.profile} (region: {config.effective_region})")

    config.region = config.effective_region
    return config


def ensure_session(config: RunConfig) -> bool:
    """
    Make sure the SSO session for config.profile is usable.

    Returns:
        bool: True if an SSO login was performed
    """
    if session_is_valid(config.profile):
        render_status("SSO session is valid", level="success")
        return False

    if config.skip_sso:
        render_status("SSO session could not be verified, skipping login (--skip-sso)", level="warning")
        return False

    render_status("Logging in to AWS SSO...")
    sso_login(config.profile)
    render_status("SSO login successful", level="success")
    return True


def resolve_cluster(config: RunConfig) -> RunConfig:
    """Fill in config.cluster from the EKS clusters visible to the profile."""
    if config.cluster:
        return config

    render_status("Fetching EKS clusters...")
    clusters = list_clusters(config.profile, config.effective_region)
    if not clusters:
        raise NoClustersError(
            f"No EKS clusters found in region {config.effective_region} with profile {config.profile}"
        )

    config.cluster = prompt_for_choice(
        "cluster", f"Available EKS Clusters in {config.effective_region}:", clusters, config.interactive
    )
    render_status(f"Using cluster: {config.cluster}")
    return config


def write_kubeconfig(config: RunConfig) -> None:
    render_status(f"Updating kubeconfig for cluster: {config.cluster}")
    update_kubeconfig(config.profile, config.effective_region, config.cluster)
    render_status("Kubeconfig updated successfully!", level="success")


def show_summary(config: RunConfig) -> None:
    """Print the resolved profile, region and cluster."""
    render_summary(
        "EKS Login Complete!",
        [
            ("Profile", config.profile),
            ("Region", config.effective_region),
            ("Cluster", config.cluster),
        ],
        footer="You can now use kubectl to interact with your cluster.",
    )


def run_login(config: RunConfig) -> RunConfig:
    """Run every login step in order. Fatal steps raise EKSLoginError."""
    check_dependencies()
    resolve_profile(config)
    ensure_session(config)
    resolve_cluster(config)
    write_kubeconfig(config)
    verify_connection()
    show_summary(config)
    return config


def login(
    ctx: typer.Context,
    profile: str = typer.Option(None, "--profile", "-p", envvar="EKS_LOGIN_PROFILE", help="AWS profile to use"),
    region: str = typer.Option(
        None, "--region", "-r", envvar="EKS_LOGIN_REGION", show_default=DEFAULT_REGION, help="AWS region"
    ),
    cluster: str = typer.Option(None, "--cluster", "-c", envvar="EKS_LOGIN_CLUSTER", help="EKS cluster name"),
    skip_sso: bool = typer.Option(False, "--skip-sso", help="Skip SSO login (assume already logged in)"),
    interactive: bool = typer.Option(True, "--interactive/--no-interactive", help="Enable interactive mode"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every command that is run"),
):
    """
    Log in to AWS SSO, pick an EKS cluster and update your kubeconfig.

    Examples:

        eks-login

        eks-login --profile my-profile

        eks-login --profile my-profile --region us-east-1 --cluster my-cluster
    """
    if ctx.invoked_subcommand is not None:
        return

    setup_logging(verbose)
    config = RunConfig(
        profile=profile,
        region=region,
        cluster=cluster,
        skip_sso=skip_sso,
        interactive=interactive,
    )

    render_banner("EKS Login Helper", "Streamline your AWS EKS authentication")
    try:
        run_login(config)
    except EKSLoginError as e:
        render_status(f"Error: {e}", level="error")
        raise typer.Exit(1)
