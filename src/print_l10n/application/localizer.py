import structlog
from typing import Dict, List, Optional, Sequence
from ..domain.models import MessageEntry, MessageTable, MissingKeyPolicy
from ..domain.errors import MissingKeyError
from ..domain.interfaces import IResourceLoader
from .locale_negotiation import fallback_chain, negotiate_locale
from .resolver import resolve, resolve_term

logger = structlog.get_logger()


class Localizer:
    """
    Looks identifiers up along a chain of tables (requested locale first,
    default locale last) and returns display text.
    """

    def __init__(self, tables: Sequence[MessageTable], policy: MissingKeyPolicy = MissingKeyPolicy.RAISE):
        if not tables:
            raise ValueError("Localizer needs at least one table")
        self._tables: List[MessageTable] = list(tables)
        self._policy = policy
        self._cache: Dict[str, str] = {}

    @classmethod
    def for_locale(
        cls,
        loader: IResourceLoader,
        requested: Optional[str],
        default_locale: str,
        policy: MissingKeyPolicy = MissingKeyPolicy.RAISE,
    ) -> "Localizer":
        """
        Negotiate `requested` against the loader's locales and build the fallback chain.
        """
        selected = negotiate_locale(requested, loader.available_locales(), default_locale)
        chain = fallback_chain(selected, default_locale)
        logger.info("l10n_locale_selected", requested=requested, selected=selected, chain=chain)
        return cls([loader.load(code) for code in chain], policy)

    @property
    def locale(self) -> str:
        return self._tables[0].locale

    @property
    def locales(self) -> List[str]:
        return [t.locale for t in self._tables]

    @property
    def policy(self) -> MissingKeyPolicy:
        return self._policy

    def has_message(self, identifier: str) -> bool:
        return any(self._is_message(t, identifier) for t in self._tables)

    def identifiers(self) -> List[str]:
        """Every message identifier reachable through the chain, first-seen order."""
        seen: Dict[str, None] = {}
        for table in self._tables:
            for entry in table.messages():
                seen.setdefault(entry.identifier, None)
        return list(seen)

    def entry(self, identifier: str) -> Optional[MessageEntry]:
        """The message entry `format` would use, from the first table holding it."""
        for table in self._tables:
            if self._is_message(table, identifier):
                return table.get(identifier)
        return None

    def term(self, identifier: str) -> str:
        """
        Resolve a term (e.g. `-app-name`) along the chain.

        Raises:
            MissingKeyError: no table defines the term, whatever the policy.
        """
        for table in self._tables:
            entry = table.get(identifier)
            if entry is not None and entry.is_term:
                return resolve_term(table, identifier)
        raise MissingKeyError(identifier, self.locales)

    def format(self, identifier: str, default: Optional[str] = None) -> str:
        """
        Display text for `identifier`.
        `default` is returned when no table has the message, before the policy applies.

        Raises:
            MissingKeyError: not found in any table, no default, and policy is RAISE.
        """
        cached = self._cache.get(identifier)
        if cached is not None:
            return cached

        for index, table in enumerate(self._tables):
            if not self._is_message(table, identifier):
                continue
            text = resolve(table, identifier)
            if index > 0:
                logger.warning("l10n_fallback_used", identifier=identifier, locale=self.locale, used=table.locale)
            self._cache[identifier] = text
            return text

        if default is not None:
            logger.info("l10n_default_used", identifier=identifier, locales=self.locales)
            return default

        if self._policy is MissingKeyPolicy.SHOW_IDENTIFIER:
            logger.warning("l10n_missing_key", identifier=identifier, locales=self.locales)
            return identifier

        raise MissingKeyError(identifier, self.locales)

    @staticmethod
    def _is_message(table: MessageTable, identifier: str) -> bool:
        entry = table.get(identifier)
        return entry is not None and not entry.is_term
