"""REST API for generating guest responsibility declarations."""

__version__ = "0.1.0"
