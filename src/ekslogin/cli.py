# Copyright (c) 2025 Mahmood Khordoo
#
# This software is licensed under the MIT License.
# See the LICENSE file in the root directory for details.

"""
EKS Login Helper Command Line Interface.

This module provides the main CLI interface for eks-login, a tool that
streamlines AWS EKS authentication. It handles AWS SSO login, profile and
cluster discovery, kubeconfig updates and a final connection check.

Main Commands:
    (default): Run the login flow
    version: Print the version number
"""

import typer
from ekslogin.commands import login, version


app = typer.Typer(
    help="EKS Login Helper - Streamline your AWS EKS authentication",
    add_completion=False,
)


# Register commands from modules
app.callback(invoke_without_command=True)(login)
app.command()(version)


if __name__ == "__main__":
    app()
