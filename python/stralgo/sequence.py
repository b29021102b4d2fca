"""Sequence adapters: turn input text into comparable units.

Every metric in stralgo is written once, against the small capability set
defined by :class:`SequenceAdapter` (indexing, length and unit equality of the
sequence it returns, plus a few per-unit primitives). Two adapters supply that
capability:

- :data:`BYTES` views the UTF-8 encoding. Indexing is O(1) on the raw buffer
  and the length is known up front, which suits text that is known to be
  single-byte per character.
- :data:`CODEPOINTS` views decoded Unicode codepoints, so that one unit is one
  character for Hamming, Dice or Levenshtein purposes. Bytes input has to be
  decoded (O(n)) before its length is known.

Example:
    >>> from stralgo.sequence import get_adapter
    >>> len(get_adapter("byte").units("日本"))
    6
    >>> len(get_adapter("codepoint").units("日本"))
    2
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any, NamedTuple, Union

from stralgo._utils import normalize_granularity
from stralgo.enums import Granularity

Text = Union[str, bytes, bytearray, memoryview]

# ASCII whitespace; 0x85 and 0xA0 are UTF-8 continuation bytes, never spaces
_SPACE_BYTES = frozenset(b"\t\n\v\f\r ")


class Bigram(NamedTuple):
    """An ordered pair of adjacent units."""

    first: Any
    second: Any


class SequenceAdapter:
    """Base class for the byte and codepoint views."""

    granularity: Granularity

    def units(self, text: Text) -> Sequence[Any]:
        raise NotImplementedError

    def ordinal(self, unit: Any) -> int:
        """Integer value of a unit."""
        raise NotImplementedError

    def is_space(self, unit: Any) -> bool:
        raise NotImplementedError

    def upper(self, unit: Any) -> Any:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(granularity={self.granularity.value!r})"


class ByteAdapter(SequenceAdapter):
    """Units are the bytes of the UTF-8 encoding (``int`` values 0-255)."""

    granularity = Granularity.BYTE

    def units(self, text: Text) -> bytes:
        if isinstance(text, str):
            return text.encode("utf-8", errors="surrogatepass")
        if isinstance(text, bytes):
            return text
        if isinstance(text, (bytearray, memoryview)):
            return bytes(text)
        raise TypeError(f"expected str or bytes-like input, got {type(text).__name__}")

    def ordinal(self, unit: int) -> int:
        return unit

    def is_space(self, unit: int) -> bool:
        return unit in _SPACE_BYTES

    def upper(self, unit: int) -> int:
        # ASCII only; bytes of multi-byte characters pass through
        if 0x61 <= unit <= 0x7A:
            return unit - 0x20
        return unit


class CodepointAdapter(SequenceAdapter):
    """Units are decoded codepoints (one-character ``str`` values)."""

    granularity = Granularity.CODEPOINT

    def units(self, text: Text) -> str:
        if isinstance(text, str):
            return text
        if isinstance(text, (bytes, bytearray, memoryview)):
            return bytes(text).decode("utf-8", errors="replace")
        raise TypeError(f"expected str or bytes-like input, got {type(text).__name__}")

    def ordinal(self, unit: str) -> int:
        return ord(unit)

    def is_space(self, unit: str) -> bool:
        return unit.isspace()

    def upper(self, unit: str) -> str:
        upper = unit.upper()
        # Expansions such as "ß" -> "SS" would change the unit count
        if len(upper) != 1:
            return unit
        return upper


BYTES = ByteAdapter()
CODEPOINTS = CodepointAdapter()

_ADAPTERS = {
    Granularity.BYTE.value: BYTES,
    Granularity.CODEPOINT.value: CODEPOINTS,
}


def get_adapter(granularity: Union[str, Granularity]) -> SequenceAdapter:
    """Return the adapter for a granularity name or enum."""
    return _ADAPTERS[normalize_granularity(granularity)]


def bigrams(units: Sequence[Any]) -> Iterator[Bigram]:
    """Yield every pair of adjacent units, in order."""
    for i in range(len(units) - 1):
        yield Bigram(units[i], units[i + 1])


__all__ = [
    "Text",
    "Bigram",
    "SequenceAdapter",
    "ByteAdapter",
    "CodepointAdapter",
    "BYTES",
    "CODEPOINTS",
    "get_adapter",
    "bigrams",
]
