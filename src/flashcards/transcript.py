"""Session transcript: every line shown to or typed by the user."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from .errors import FileAccessError


@dataclass
class Transcript:
    lines: List[str] = field(default_factory=list)

    def record(self, line: str) -> None:
        self.lines.append(line)

    def text(self) -> str:
        return "\n".join(self.lines)

    def save(self, path: str | Path) -> None:
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(self.text(), encoding="utf-8")
        except OSError as e:
            raise FileAccessError(path, e.strerror or str(e)) from e

    def __len__(self) -> int:
        return len(self.lines)
