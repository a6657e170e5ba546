"""Building blocks for tiling window managers: regions, layouts, hooks and process helpers."""

__version__ = "0.1.0"

__all__ = ["data_types", "helpers", "layout", "hooks"]