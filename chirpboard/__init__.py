"""A small text-mode social network of users, pages, posts and comments."""

__version__ = "0.1.0"

__all__ = ["__version__"]