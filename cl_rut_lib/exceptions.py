"""
Custom exception hierarchy for the cl‑rut library.

All public exceptions inherit from :class:`RutError`, allowing callers to
catch a single base class for any RUT‑related failure.  Validation itself never
raises: :func:`~cl_rut_lib.utils.validators.validate_rut` simply returns
``False``.  Exceptions are reserved for calls that break a function contract,
e.g. formatting a string whose correlative is not numeric.
"""


class RutError(Exception):
    """Base exception for all cl‑rut specific errors."""

    pass


class RutFormatError(RutError, ValueError):
    """Raised when a string cannot be interpreted as a sanitised RUT."""

    pass
