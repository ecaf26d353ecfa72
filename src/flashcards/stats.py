"""Per-term mistake counts.

Only terms with at least one error are stored; a missing term means zero.
Insertion order is kept so ties in ``hardest`` come out in the order the
terms first went wrong.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List

from .errors import NoErrors

log = logging.getLogger(__name__)


@dataclass
class StatsLedger:
    errors: Dict[str, int] = field(default_factory=dict)

    def record_error(self, term: str) -> int:
        """Add one mistake for *term* and return the new count."""
        count = self.errors.get(term, 0) + 1
        self.errors[term] = count
        log.debug("Error recorded for %r (now %d)", term, count)
        return count

    def set_count(self, term: str, count: int) -> None:
        """Overwrite the count for *term*; zero removes the entry."""
        if count < 0:
            raise ValueError(f"error count must be >= 0, got {count}")
        if count == 0:
            self.clear_for(term)
        else:
            self.errors[term] = count

    def clear_for(self, term: str) -> None:
        self.errors.pop(term, None)

    def reset(self) -> None:
        log.info("Resetting stats for %d terms", len(self.errors))
        self.errors.clear()

    def count(self, term: str) -> int:
        return self.errors.get(term, 0)

    def max_errors(self) -> int:
        if not self.errors:
            raise NoErrors()
        return max(self.errors.values())

    def hardest(self) -> List[str]:
        """Return every term tied at the highest error count.

        Raises:
            NoErrors: If no term has any recorded mistake
        """
        top = self.max_errors()
        return [term for term, n in self.errors.items() if n == top]

    def as_dict(self) -> Dict[str, int]:
        return dict(self.errors)

    def __len__(self) -> int:
        return len(self.errors)

    def __contains__(self, term: object) -> bool:
        return term in self.errors
