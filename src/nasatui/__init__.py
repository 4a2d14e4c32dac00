"""NASA TUI - browse the NASA image library from the terminal."""

__version__ = "0.1.0"
