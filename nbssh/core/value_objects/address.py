"""Address value object"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import PydanticCustomError, core_schema

from ..exceptions.validation_exceptions import AddressError, InvalidFormatError, InvalidPortError
from ..result import Result, collect_results

logger = logging.getLogger(__name__)

DEFAULT_SSH_PORT = 22
MAX_PORT = 65535

_PORT_RE = re.compile(r'\+?[0-9]+')


@dataclass(frozen=True)
class Address:
    """Immutable host and optional port number.

    ``host`` is opaque: host names, IP literals and ``user@host`` strings are
    all kept verbatim. A ``port`` of ``None`` leaves the choice to the SSH
    client. Equality is structural, so ``Address("h", 22)`` and
    ``Address("h")`` differ even though both render as ``"h"``; use
    :meth:`normalized` when that distinction does not matter.
    """

    host: str
    port: Optional[int] = None

    def __post_init__(self):
        if self.port is None:
            return
        if isinstance(self.port, bool) or not isinstance(self.port, int):
            raise InvalidPortError(str(self.port))
        if not (0 <= self.port <= MAX_PORT):
            raise InvalidPortError(str(self.port))

    @classmethod
    def from_host(cls, host: str) -> 'Address':
        """Create an address with no port number set"""
        return cls(host)

    @classmethod
    def parse(cls, address: str) -> Result['Address', AddressError]:
        """Parse an address in ``host[:port]`` format.

        Returns a failed result holding ``InvalidFormatError`` for empty input
        or more than one colon, and ``InvalidPortError`` when the part after
        the colon is not an unsigned 16-bit decimal number.
        """
        if not address:
            return cls._reject(InvalidFormatError(address))

        parts = address.split(':')
        if len(parts) == 1:
            return Result.success(cls(address))
        if len(parts) != 2:
            return cls._reject(InvalidFormatError(address))

        host, port_text = parts
        if not _PORT_RE.fullmatch(port_text) or int(port_text) > MAX_PORT:
            return cls._reject(InvalidPortError(address))
        return Result.success(cls(host, int(port_text)))

    @classmethod
    def from_string(cls, address: str) -> 'Address':
        """Parse an address, raising ``AddressError`` on failure"""
        return cls.parse(address).unwrap()

    @staticmethod
    def _reject(error: AddressError) -> Result['Address', AddressError]:
        logger.debug(f"Rejected address: {error}", extra={'address': error.address})
        return Result.failure(error)

    def port_str(self) -> str:
        """Get the port number as a string, empty when unset"""
        if self.port is None:
            return ""
        return str(self.port)

    def normalized(self) -> 'Address':
        """Drop an explicit default port so equal-looking addresses compare equal"""
        if self.port == DEFAULT_SSH_PORT:
            return Address(self.host)
        return self

    def to_string(self) -> str:
        if self.port is None or self.port == DEFAULT_SSH_PORT:
            return self.host
        return f"{self.host}:{self.port}"

    def __str__(self) -> str:
        return self.to_string()

    @classmethod
    def _validate(cls, value: Any) -> 'Address':
        if isinstance(value, Address):
            return value
        if not isinstance(value, str):
            raise PydanticCustomError('address_type', 'expected host[:port]')

        result = cls.parse(value)
        if result.is_success:
            return result.value
        if isinstance(result.error, InvalidFormatError):
            raise PydanticCustomError('address_format', 'invalid address format')
        raise PydanticCustomError('address_port', 'invalid port number')

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda address: address.to_string()
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {'type': 'string', 'format': 'host[:port]'}


def parse_addresses(addresses: Iterable[str]) -> Result[list[Address], AddressError]:
    """Parse several addresses, stopping at the first invalid one"""
    return collect_results(Address.parse(address) for address in addresses)
