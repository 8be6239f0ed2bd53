"""Colours, geometry, dashes, text layout, styles and metadata for Publisher documents."""

__version__ = "0.1.5"

__all__ = ["color", "dash", "geometry", "metadata", "styles", "textlayout"]