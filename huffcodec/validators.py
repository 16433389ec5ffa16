"""
validators.py

Shared codes for input validation in huffcodec.
"""


from typing import Any

from .exceptions import MalformedStreamError


def validate_type(variable: Any, name: str, expected_type: Any) -> None:
    """Validate that variable is of the expected type (or tuple of types)."""
    if not isinstance(variable, expected_type):
        if isinstance(expected_type, tuple):
            type_name = " or ".join(t.__name__ for t in expected_type)
        else:
            type_name = expected_type.__name__
        raise ValueError(f"{name} must be of type {type_name}")


def validate_bits(bits: str) -> None:
    """Validate that an encoded stream holds only '0' and '1' characters."""
    validate_type(bits, "Encoded stream", str)
    for position, bit in enumerate(bits):
        if bit != "0" and bit != "1":
            raise MalformedStreamError(f"Invalid bit {bit!r} at position {position}", position)
