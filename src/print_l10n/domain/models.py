import dataclasses
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple, Union

TERM_PREFIX = "-"


class MissingKeyPolicy(str, Enum):
    """What a lookup miss produces"""
    RAISE = "raise"
    SHOW_IDENTIFIER = "show_identifier"


@dataclasses.dataclass(frozen=True)
class Reference:
    """
    Placeholder pointing at another entry of the same table,
    e.g. `{ -app-name }` or `{ common-menu-file-menu }`.
    """
    identifier: str

    @property
    def is_term(self) -> bool:
        return self.identifier.startswith(TERM_PREFIX)


Element = Union[str, Reference]


@dataclasses.dataclass(frozen=True)
class MessageEntry:
    """
    One `identifier = text` line of a table.
    `elements` holds literal text and references in source order.
    """
    identifier: str
    elements: Tuple[Element, ...]
    comment: Optional[str] = None
    group: Optional[str] = None

    @property
    def is_term(self) -> bool:
        return self.identifier.startswith(TERM_PREFIX)

    @property
    def references(self) -> List[str]:
        return [e.identifier for e in self.elements if isinstance(e, Reference)]


class MessageTable:
    """
    Static identifier -> entry mapping for a single locale.
    Never mutated after the parser builds it.
    """

    def __init__(self, locale: str, entries: Dict[str, MessageEntry]):
        self._locale = locale
        self._entries = dict(entries)

    @property
    def locale(self) -> str:
        return self._locale

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MessageTable):
            return NotImplemented
        return self._locale == other._locale and self._entries == other._entries

    def __repr__(self) -> str:
        return f"MessageTable(locale={self._locale!r}, entries={len(self._entries)})"

    def get(self, identifier: str) -> Optional[MessageEntry]:
        return self._entries.get(identifier)

    def entries(self) -> Iterator[MessageEntry]:
        return iter(self._entries.values())

    def messages(self) -> Iterator[MessageEntry]:
        """Entries shown directly in the UI (everything but terms)."""
        return (e for e in self._entries.values() if not e.is_term)

    def terms(self) -> Iterator[MessageEntry]:
        return (e for e in self._entries.values() if e.is_term)

    def groups(self) -> Dict[Optional[str], List[str]]:
        """
        Message identifiers keyed by the comment heading they were declared under.
        Keeps declaration order; purely organizational.
        """
        grouped: Dict[Optional[str], List[str]] = {}
        for entry in self.messages():
            grouped.setdefault(entry.group, []).append(entry.identifier)
        return grouped
