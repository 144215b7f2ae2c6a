"""Namespace-qualified attribute lookups on Yahoo! Weather XML responses."""
import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Dict, NamedTuple, Optional

from weather_provider import FormatError

YWEATHER_NAMESPACE = "http://xml.weather.yahoo.com/ns/rss/1.0"
YWEATHER_PREFIX = "yweather"

UNEXPECTED_DATA_MESSAGE = "Yahoo! Weather responded with unexpected data."

# Document root is <query>; these paths are relative to it
_SCOPE_PATHS = {
    "channel": "results/channel",
    "item": "results/channel/item",
}


@dataclass(frozen=True)
class ParsedResponse:
    """A parsed response document together with its namespace bindings."""
    root: ET.Element
    namespaces: Dict[str, str] = field(
        default_factory=lambda: {YWEATHER_PREFIX: YWEATHER_NAMESPACE}
    )


class FieldLookup(NamedTuple):
    """Where one raw value lives in the document, and what to use if it doesn't."""
    scope: str  # "channel" or "item"
    tag: str
    attribute: str
    fallback: str

    @property
    def path(self) -> str:
        return f"{_SCOPE_PATHS[self.scope]}/{YWEATHER_PREFIX}:{self.tag}"


def parse_response(body: bytes) -> ParsedResponse:
    """
    Parse a response body into a ParsedResponse.

    Raises:
        FormatError: If the body is not well-formed XML
    """
    try:
        root = ET.fromstring(body)
    except ET.ParseError as e:
        logging.error(f"Failed to parse response as XML: {e}")
        raise FormatError(UNEXPECTED_DATA_MESSAGE) from e
    return ParsedResponse(root=root)


def find_attribute(parsed: ParsedResponse, lookup: FieldLookup) -> Optional[str]:
    """Return the attribute value, or None if the element or attribute is missing."""
    if parsed.root.tag != "query":
        return None
    node = parsed.root.find(lookup.path, parsed.namespaces)
    if node is None:
        return None
    return node.get(lookup.attribute)


class AttributeReader:
    """
    Reads attributes from one ParsedResponse, substituting fallbacks.

    Every fallback substitution marks the reader incomplete; nothing ever
    marks it complete again.
    """

    def __init__(self, parsed: ParsedResponse):
        self.parsed = parsed
        self._complete = True

    @property
    def is_complete(self) -> bool:
        return self._complete

    def read(self, lookup: FieldLookup) -> str:
        value = find_attribute(self.parsed, lookup)
        if value is not None:
            return value
        logging.debug(f"Missing {lookup.tag}/@{lookup.attribute}, using fallback '{lookup.fallback}'")
        self._complete = False
        return lookup.fallback

    def read_all(self, table: Dict[str, FieldLookup]) -> Dict[str, str]:
        """Read every entry of a lookup table, keyed the same way."""
        return {key: self.read(lookup) for key, lookup in table.items()}
