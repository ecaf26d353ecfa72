"""Card store: ordered term -> definition pairs with a reverse index.

``add`` keeps both sides unique. ``upsert`` (used by import) skips those
checks, so the reverse index maps a definition to every term that currently
holds it, in card order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from itertools import islice
from typing import Dict, Iterator, List, Optional, Tuple

from .errors import DuplicateDefinition, DuplicateTerm, UnknownTerm
from .stats import StatsLedger

log = logging.getLogger(__name__)


@dataclass
class CardStore:
    ledger: StatsLedger = field(default_factory=StatsLedger)
    _cards: Dict[str, str] = field(default_factory=dict, init=False, repr=False)
    _by_definition: Dict[str, List[str]] = field(default_factory=dict, init=False, repr=False)

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------
    def require_new_term(self, term: str) -> None:
        if term in self._cards:
            raise DuplicateTerm(term)

    def add(self, term: str, definition: str) -> None:
        """Append a new card.

        Raises:
            DuplicateTerm: If *term* is already in the store
            DuplicateDefinition: If another card already has *definition*
        """
        self.require_new_term(term)
        if definition in self._by_definition:
            raise DuplicateDefinition(definition)
        self._cards[term] = definition
        self._by_definition[definition] = [term]
        log.info("Added card %r", term)

    def upsert(self, term: str, definition: str) -> None:
        """Insert or overwrite a card without uniqueness checks."""
        old = self._cards.get(term)
        if old == definition:
            return
        if old is not None:
            self._unindex(term, old)
        self._cards[term] = definition
        self._index(term, definition)

    def remove(self, term: str) -> None:
        """Delete *term* and its stats entry.

        Raises:
            UnknownTerm: If *term* is not in the store
        """
        if term not in self._cards:
            raise UnknownTerm(term)
        definition = self._cards.pop(term)
        self._unindex(term, definition)
        self.ledger.clear_for(term)
        log.info("Removed card %r", term)

    def _index(self, term: str, definition: str) -> None:
        # Holders stay in card order so lookups name the earliest card.
        holders = self._by_definition.setdefault(definition, [])
        if not holders:
            holders.append(term)
            return
        order = {t: i for i, t in enumerate(self._cards)}
        pos = order[term]
        at = next((i for i, t in enumerate(holders) if order[t] > pos), len(holders))
        holders.insert(at, term)

    def _unindex(self, term: str, definition: str) -> None:
        holders = self._by_definition[definition]
        holders.remove(term)
        if not holders:
            del self._by_definition[definition]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def lookup_term_by_definition(self, definition: str) -> Optional[str]:
        holders = self._by_definition.get(definition)
        return holders[0] if holders else None

    def definition_of(self, term: str) -> Optional[str]:
        return self._cards.get(term)

    def contains_term(self, term: str) -> bool:
        return term in self._cards

    def contains_definition(self, definition: str) -> bool:
        return definition in self._by_definition

    def items(self) -> List[Tuple[str, str]]:
        return list(self._cards.items())

    def card_at(self, index: int) -> Tuple[str, str]:
        """Return the (term, definition) pair at *index* in enumeration order."""
        if not 0 <= index < len(self._cards):
            raise IndexError(f"card index {index} out of range for {len(self._cards)} cards")
        return next(islice(self._cards.items(), index, None))

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[str]:
        return iter(self._cards)
