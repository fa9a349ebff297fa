"""Status monitor that joins system information components into one status line."""

__version__ = "1.0.0"

__all__ = [
    "battery",
    "config",
    "cpu",
    "disk",
    "files",
    "keyboard",
    "memory",
    "network",
    "status",
    "system",
    "util",
    "volume",
]