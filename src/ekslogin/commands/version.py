import typer

from ekslogin import __version__


def version():
    """Print the version number."""
    typer.echo(f"EKS Login Helper v{__version__}")
