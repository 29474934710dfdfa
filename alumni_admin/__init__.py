"""Administrative backend for the alumni network."""

__version__ = "1.0.0"
