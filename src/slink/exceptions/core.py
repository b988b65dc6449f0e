"""Custom exceptions for the slink library.

This module defines a hierarchy of exceptions specific to single-link
clustering, so callers can catch library errors without matching on messages.
Each leaf also derives from the matching builtin, which keeps ``except
ValueError`` style handling in caller code working.
"""

from __future__ import annotations


class SlinkError(Exception):
    """Base exception for all slink operations.

    This is the root exception that all other slink exceptions inherit from.
    """


class InvalidInputError(SlinkError, ValueError):
    """Raised when a caller violates an input contract.

    This exception is raised when:
    - The same object identifier is added to a pointer model twice
    - A metric returns a negative, NaN or non-numeric distance
    - A threshold is NaN, boolean or cannot be parsed
    - A distance function name is unknown or vectors differ in dimensionality
    """


class InvalidModelError(SlinkError):
    """Raised when pointer representation data violates its invariants.

    This exception is raised when:
    - A pointer refers to an index outside the model
    - A pointer goes backwards in addition order
    - Merge levels decrease along a pointer chain
    - Persisted data has arrays of mismatched length
    """


class NotFittedError(SlinkError, RuntimeError):
    """Raised when clusterer results are requested before fit()."""


class UnknownObjectError(SlinkError, KeyError):
    """Raised when an object identifier is not part of the pointer model."""
