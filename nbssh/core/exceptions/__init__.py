"""Core domain exceptions"""

from .validation_exceptions import (
    AddressError,
    InvalidFormatError,
    InvalidPortError,
    TargetNotFoundError,
    ValidationError,
)

__all__ = [
    'ValidationError',
    'AddressError',
    'InvalidFormatError',
    'InvalidPortError',
    'TargetNotFoundError'
]
