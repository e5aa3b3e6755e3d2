"""Building blocks for a remote build cache: verification, temp files, idle timers, validation and request parsing."""

__version__ = "0.1.0"