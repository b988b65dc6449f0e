"""Slink Exceptions Module.

This module contains exception classes used throughout the slink library.
"""

from slink.exceptions.core import (
    InvalidInputError,
    InvalidModelError,
    NotFittedError,
    SlinkError,
    UnknownObjectError,
)

__all__ = [
    "InvalidInputError",
    "InvalidModelError",
    "NotFittedError",
    "SlinkError",
    "UnknownObjectError",
]
