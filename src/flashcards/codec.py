"""Line-based card file format.

Each card is three lines: term, definition, error count. Cards appear in
store order; the error count is 0 for terms without mistakes.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Sequence

from .card_store import CardStore
from .errors import FileAccessError, FileNotFound, MalformedRecord
from .stats import StatsLedger

log = logging.getLogger(__name__)

LINES_PER_CARD = 3
_COUNT_RE = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class CardRecord:
    term: str
    definition: str
    errors: int


def encode(store: CardStore, ledger: StatsLedger) -> List[str]:
    lines: List[str] = []
    for term, definition in store.items():
        lines.extend((term, definition, str(ledger.count(term))))
    return lines


def decode(lines: Sequence[str]) -> List[CardRecord]:
    """Parse card lines into records.

    The whole input is validated before anything is returned, so callers
    never see a partial result.

    Raises:
        MalformedRecord: If the line count is not a multiple of three or an
            error count is not a non-negative integer
    """
    if len(lines) % LINES_PER_CARD:
        raise MalformedRecord(
            f"expected a multiple of {LINES_PER_CARD} lines, got {len(lines)}"
        )
    records: List[CardRecord] = []
    for i in range(0, len(lines), LINES_PER_CARD):
        term, definition, raw_count = lines[i : i + LINES_PER_CARD]
        if not _COUNT_RE.fullmatch(raw_count):
            raise MalformedRecord(f"invalid error count {raw_count!r}", line_no=i + 3)
        records.append(CardRecord(term, definition, int(raw_count)))
    return records


def apply_records(records: Iterable[CardRecord], store: CardStore, ledger: StatsLedger) -> int:
    """Upsert records in order (last one wins) and return how many were applied."""
    applied = 0
    for rec in records:
        store.upsert(rec.term, rec.definition)
        ledger.set_count(rec.term, rec.errors)
        applied += 1
    return applied


def read_lines(path: str | Path) -> List[str]:
    path = Path(path)
    if not path.is_file():
        raise FileNotFound(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileAccessError(path, str(e)) from e
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    log.debug("Read %d lines from %s", len(lines), path)
    return lines


def write_lines(path: str | Path, lines: Iterable[str]) -> None:
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="\n") as f:
            for line in lines:
                f.write(line)
                f.write("\n")
    except OSError as e:
        raise FileAccessError(path, e.strerror or str(e)) from e
