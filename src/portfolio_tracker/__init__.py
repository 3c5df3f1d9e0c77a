"""Personal investment-portfolio tracker: REST backend and client session layer."""

__version__ = "0.1.0"
