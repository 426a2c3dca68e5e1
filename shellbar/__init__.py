"""Configuration, icon glyphs, three-slot layout and menu state for a desktop status bar."""

__version__ = "0.1.0"
__all__ = ["centerbox", "config", "icons", "menu"]