"""Color theme for the eks-login console output."""

THEME = {
    "accent": "bright_cyan",
    "accent_alt": "blue",
    "text_primary": "white",
    "text_muted": "grey62",
    "border": "cyan",
    "success": "green",
    "warning": "yellow",
    "error": "red",
}


def style(name: str) -> str:
    """Return the Rich style registered for a theme key."""
    return THEME.get(name, THEME["text_primary"])
