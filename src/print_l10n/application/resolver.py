from typing import List, Optional
from ..domain.models import MessageEntry, MessageTable, Reference
from ..domain.errors import CyclicReferenceError, DanglingReferenceError, MissingKeyError


def resolve(table: MessageTable, identifier: str) -> str:
    """
    Resolve a message to display text, substituting every placeholder.

    Raises:
        MissingKeyError: identifier is not a message of the table (terms included).
        DanglingReferenceError: a placeholder names an unknown entry.
        CyclicReferenceError: placeholders refer back to an entry being resolved.
    """
    entry = table.get(identifier)
    if entry is None or entry.is_term:
        raise MissingKeyError(identifier, [table.locale])
    return _resolve_entry(table, entry, [])


def resolve_term(table: MessageTable, identifier: str) -> str:
    """Resolve a term directly. Used by tooling, never by the UI."""
    entry = table.get(identifier)
    if entry is None or not entry.is_term:
        raise MissingKeyError(identifier, [table.locale])
    return _resolve_entry(table, entry, [])


def _resolve_entry(table: MessageTable, entry: MessageEntry, chain: List[str]) -> str:
    if entry.identifier in chain:
        raise CyclicReferenceError(chain[chain.index(entry.identifier):] + [entry.identifier])

    chain = chain + [entry.identifier]
    parts = []
    for element in entry.elements:
        if isinstance(element, Reference):
            target: Optional[MessageEntry] = table.get(element.identifier)
            if target is None:
                raise DanglingReferenceError(entry.identifier, element.identifier)
            parts.append(_resolve_entry(table, target, chain))
        else:
            parts.append(element)
    return "".join(parts)
