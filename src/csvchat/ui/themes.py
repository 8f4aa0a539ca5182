"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, etc.)

To add a new theme, define it here and register in the app.
"""

from textual.theme import Theme

from .config import THEME_NAME

# Dark slate palette; the secondary color matches the chart accent
CSVCHAT_DARK = Theme(
    name=THEME_NAME,
    primary="#60a5fa",      # Blue - main accent
    secondary="#8884d8",    # Indigo - assistant messages and charts
    accent="#fbbf24",       # Amber - highlights
    foreground="#e2e8f0",   # Light text
    background="#0f172a",   # Deepest background
    success="#4ade80",      # Green - user messages, send button
    warning="#fb923c",      # Orange - warnings
    error="#f87171",        # Red - errors
    surface="#1e293b",      # Main surface
    panel="#172033",        # Panel backgrounds
    dark=True,
    variables={
        "block-cursor-foreground": "#0f172a",
        "block-cursor-background": "#e2e8f0",
        "block-cursor-text-style": "bold",
        "input-cursor-background": "#e2e8f0",
        "input-cursor-foreground": "#0f172a",
        "input-selection-background": "#60a5fa 30%",
        "border": "#334155",
        "border-blurred": "#1e293b",
        "scrollbar": "#334155",
        "scrollbar-hover": "#475569",
        "scrollbar-active": "#60a5fa",
        "scrollbar-background": "#172033",
        "scrollbar-corner-color": "#172033",
        "footer-foreground": "#cbd5e1",
        "footer-background": "#0f172a",
        "footer-key-foreground": "#fbbf24",
        "footer-key-background": "#1e293b",
        "footer-description-foreground": "#94a3b8",
        "text-muted": "#64748b",
        "text-disabled": "#334155",
        "link-color": "#60a5fa",
        "link-style": "underline",
        "link-color-hover": "#93c5fd",
        "link-style-hover": "bold",
        "button-foreground": "#e2e8f0",
        "button-color-foreground": "#0f172a",
        "button-focus-text-style": "bold reverse",
    },
)
