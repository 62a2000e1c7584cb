"""A Flask JSON API for creating and reading tasks held in memory."""

__version__ = "0.1.0"