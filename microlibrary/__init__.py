"""Error codes, precondition/postcondition checks and output streams driven by pluggable I/O drivers."""

__version__ = "0.1.0"

__all__ = ["error", "assertion", "stream"]