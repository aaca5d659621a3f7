"""locker: lint a flake.lock for inputs pinned to the same source."""

__version__ = "0.1.0"
