"""
eks-login Commands Package.

This package contains the eks-login CLI commands organized as separate modules.
"""

from .login import login
from .version import version

__all__ = ["login", "version"]
