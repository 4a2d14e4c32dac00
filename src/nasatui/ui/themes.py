"""Custom themes for NASA TUI."""

from textual.theme import Theme

deep_space_theme = Theme(
    name="Deep Space",
    primary="#5bc0be",
    secondary="#3a506b",
    accent="#f4d35e",
    foreground="#ffffff",
    background="#0b132b",
    surface="#1c2541",
    panel="#3a506b",
    success="#6fffe9",
    warning="#f4d35e",
    error="#ff5c5c",
    dark=True,
)

nebula_theme = Theme(
    name="Nebula",
    primary="#c77dff",
    secondary="#7b2cbf",
    accent="#ff9e00",
    foreground="#f1e9ff",
    background="#10002b",
    surface="#240046",
    panel="#3c096c",
    success="#80ffdb",
    warning="#ff9e00",
    error="#ff4d6d",
    dark=True,
)

mission_control_theme = Theme(
    name="Mission Control",
    primary="#0b3d91",
    secondary="#fc3d21",
    accent="#fc3d21",
    foreground="#1b1b1b",
    background="#f5f5f5",
    surface="#ffffff",
    panel="#e0e0e0",
    success="#2e7d32",
    warning="#ed6c02",
    error="#fc3d21",
    dark=False,
)

CUSTOM_THEMES = [deep_space_theme, nebula_theme, mission_control_theme]
