"""Reusable Rich components for the eks-login CLI."""

import logging
from typing import Optional, Sequence

from rich import box
from rich.align import Align
from rich.console import Console, Group
from rich.logging import RichHandler
from rich.panel import Panel
from rich.text import Text

from .theme import style


console = Console()


def _compute_width(padding: int = 4) -> int:
    """Return a width that keeps layouts readable in narrow terminals."""
    return max(40, min(console.size.width - padding, 78))


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Attach a Rich log handler to the package logger. Verbose enables DEBUG."""
    logger = logging.getLogger("ekslogin")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=console, show_path=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        logger.addHandler(handler)
    logger.propagate = False
    return logger


def render_banner(title: str, subtitle: Optional[str] = None) -> Panel:
    """Render a welcome banner."""
    pieces: list[Text] = [Text(title, style=f"bold {style('accent')}")]

    if subtitle:
        pieces.append(Text(subtitle, style=style("text_primary")))

    panel = Panel(
        Align.left(Group(*pieces)),
        box=box.ROUNDED,
        border_style=style("accent"),
        padding=(0, 2),
        width=_compute_width(),
    )
    console.print(panel)
    return panel


def render_summary(
    title: str,
    rows: Sequence[tuple[str, str]],
    footer: Optional[str] = None,
) -> None:
    """Render a heading followed by unwrapped `label: value` lines."""
    console.print()
    console.print(Text(f"✔ {title}", style=f"bold {style('success')}"))
    for label, value in rows:
        line = Text(f"{label}: ", style=style("text_muted"))
        line.append(value, style=style("text_primary"))
        console.print(line, soft_wrap=True)

    if footer:
        console.print()
        console.print(Text(footer, style=style("text_muted")), soft_wrap=True)


def render_status(message: str, level: str = "info") -> Text:
    """Render a status line with semantic coloring."""
    icons = {
        "success": "✔",
        "warning": "!",
        "error": "✖",
        "info": "•",
    }
    styles = {
        "success": style("success"),
        "warning": style("warning"),
        "error": style("error"),
        "info": style("accent_alt"),
    }

    icon = icons.get(level, icons["info"])
    status_text = Text(f"{icon} {message}", style=styles.get(level, styles["info"]))
    console.print(status_text, soft_wrap=True)
    return status_text


def render_choices(heading: str, choices: Sequence[object]) -> None:
    """Print a 1-based numbered list under a heading."""
    console.print()
    console.print(Text(heading, style=f"bold {style('accent_alt')}"))
    for index, choice in enumerate(choices, start=1):
        console.print(Text(f"  {index}. {choice}", style=style("text_primary")), soft_wrap=True)
