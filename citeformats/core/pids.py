"""Persistent identifiers for datasets and files.

A persistent identifier (PID) is a ``protocol:authority/identifier`` triple
such as ``doi:10.18150/ZENON``. The authority ends at the first slash after
the protocol; everything after it belongs to the identifier, so shouldered
DOIs like ``doi:10.5072/FK2/ABCDEF`` keep ``FK2/ABCDEF`` as the identifier.
"""

import msgspec

from .exceptions import InvalidIdentifierError

RESOLVER_URLS = {
    "doi": "https://doi.org/",
    "hdl": "https://hdl.handle.net/",
}


class GlobalId(msgspec.Struct, frozen=True, kw_only=True):
    """Immutable persistent identifier."""

    protocol: str
    authority: str
    identifier: str

    @classmethod
    def parse(cls, value: str) -> "GlobalId":
        """Parse a ``protocol:authority/identifier`` string.

        Args:
            value: Identifier string, e.g. ``doi:10.18150/ZENON``.

        Returns:
            Parsed identifier.

        Raises:
            InvalidIdentifierError: If any of the three parts is missing.
        """
        if not value or ":" not in value:
            raise InvalidIdentifierError(value, "missing protocol")

        protocol, rest = value.strip().split(":", 1)
        if "/" not in rest:
            raise InvalidIdentifierError(value, "missing authority separator")

        authority, identifier = rest.split("/", 1)
        if not protocol or not authority or not identifier:
            raise InvalidIdentifierError(value)

        return cls(
            protocol=protocol.lower(), authority=authority, identifier=identifier
        )

    def as_string(self) -> str:
        """Return the identifier in ``protocol:authority/identifier`` form."""
        return f"{self.protocol}:{self.authority}/{self.identifier}"

    def to_url(self) -> str | None:
        """Return the resolver URL, or None for an unknown protocol."""
        base = RESOLVER_URLS.get(self.protocol)
        if base is None:
            return None
        return f"{base}{self.authority}/{self.identifier}"

    def __str__(self) -> str:
        return self.as_string()
