"""Per-editor metadata store for Vim emulation layers on host editors."""

__all__ = [
    "data",
    "editor_data",
    "host",
    "lifecycle",
    "runtime",
    "visual",
]

__version__ = "0.1.0"
