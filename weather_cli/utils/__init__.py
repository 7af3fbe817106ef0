"""
utils package – small, pure-function helpers.
"""

from .text import center  # noqa: F401

__all__ = [
    "center",
]
