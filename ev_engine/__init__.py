"""EV Drive Buddy: trip efficiency scoring engine."""

__version__ = "0.1.0"
