"""Minimal social networking backend: accounts, posts, comments and likes."""

__version__ = "0.1.0"
