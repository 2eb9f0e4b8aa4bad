"""Domain validation exceptions"""

from typing import Any, Dict, Optional


class ValidationError(ValueError):
    """Base validation exception"""

    def __init__(self, message: str, field: Optional[str] = None, value: Optional[Any] = None):
        super().__init__(message)
        self.field = field
        self.value = value

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization"""
        return {
            'error_type': self.__class__.__name__,
            'message': str(self),
            'field': self.field,
            'value': self.value
        }


class AddressError(ValidationError):
    """Raised when a host[:port] address cannot be parsed.

    Only ``InvalidFormatError`` and ``InvalidPortError`` are ever raised;
    catch this base class to handle both.
    """

    message = "invalid address"

    def __init__(self, address: Optional[str] = None):
        super().__init__(self.message, 'address', address)
        self.address = address

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))


class InvalidFormatError(AddressError):
    """The address is empty or contains more than one colon"""

    message = "invalid address format"


class InvalidPortError(AddressError):
    """The port number is not a valid unsigned 16-bit integer"""

    message = "invalid address port"


class TargetNotFoundError(ValidationError):
    """Raised when a named target is missing from an inventory"""

    def __init__(self, name: str):
        super().__init__(f"Target '{name}' not found", 'target', name)
        self.name = name
