"""UI helper exports for the eks-login CLI."""

from .components import console, render_banner, render_summary, render_status, render_choices, setup_logging
from .theme import THEME, style

__all__ = [
    "console",
    "render_banner",
    "render_summary",
    "render_status",
    "render_choices",
    "setup_logging",
    "THEME",
    "style",
]
