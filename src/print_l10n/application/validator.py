import dataclasses
from typing import List
from ..domain.models import MessageTable
from ..domain.errors import CyclicReferenceError, DanglingReferenceError
from .resolver import _resolve_entry


@dataclasses.dataclass(frozen=True)
class CoverageReport:
    """
    Differences between a table and the reference (default locale) table.
    """
    locale: str
    reference_locale: str
    missing: List[str]
    extra: List[str]
    untranslated: List[str]

    @property
    def is_complete(self) -> bool:
        return not self.missing


def validate_table(table: MessageTable) -> List[str]:
    """
    Checks that every placeholder resolves and that no entry resolves to empty text.

    Returns:
        List[str]: One message per problem. Empty list if the table is valid.
    """
    errors = []
    seen_cycles = set()

    for entry in table.entries():
        for reference in entry.references:
            if reference not in table:
                errors.append(str(DanglingReferenceError(entry.identifier, reference)))

        try:
            if not _resolve_entry(table, entry, []):
                errors.append(f"'{entry.identifier}' resolves to empty text")
        except CyclicReferenceError as e:
            # Report each cycle once, whichever member it was reached from
            key = frozenset(e.chain)
            if key not in seen_cycles:
                seen_cycles.add(key)
                errors.append(str(e))
        except DanglingReferenceError:
            # Already reported above for the entry that owns the placeholder
            pass

    return errors


def compare_tables(table: MessageTable, reference: MessageTable) -> CoverageReport:
    """
    Compare message coverage against the reference locale.
    Entries whose text equals the reference text are listed as untranslated,
    which is informational: the table is still usable.
    """
    own = {e.identifier: e for e in table.messages()}
    ref = {e.identifier: e for e in reference.messages()}

    missing = [identifier for identifier in ref if identifier not in own]
    extra = [identifier for identifier in own if identifier not in ref]
    untranslated = [
        identifier for identifier, entry in own.items()
        if identifier in ref and entry.elements == ref[identifier].elements
    ]

    return CoverageReport(
        locale=table.locale,
        reference_locale=reference.locale,
        missing=missing,
        extra=extra,
        untranslated=untranslated,
    )
