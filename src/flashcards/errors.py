"""Error kinds raised by the flashcard core.

Every error carries the message shown to the user as ``str(exc)``; the shell
prints it and keeps the menu loop running.
"""

from __future__ import annotations


class FlashcardError(Exception):
    """Base class for recoverable flashcard errors."""


class DuplicateTerm(FlashcardError):
    def __init__(self, term: str) -> None:
        self.term = term
        super().__init__(f'The card "{term}" already exists.')


class DuplicateDefinition(FlashcardError):
    def __init__(self, definition: str) -> None:
        self.definition = definition
        super().__init__(f'The definition "{definition}" already exists.')


class UnknownTerm(FlashcardError):
    def __init__(self, term: str) -> None:
        self.term = term
        super().__init__(f'Can\'t remove "{term}": there is no such card.')


class EmptyStore(FlashcardError):
    def __init__(self) -> None:
        super().__init__("There are no cards.")


class NoErrors(FlashcardError):
    def __init__(self) -> None:
        super().__init__("There are no cards with errors.")


class MalformedRecord(FlashcardError):
    """Card file content that does not follow the three-line record format."""

    def __init__(self, reason: str, line_no: int | None = None) -> None:
        self.reason = reason
        self.line_no = line_no
        where = f" (line {line_no})" if line_no is not None else ""
        super().__init__(f"Malformed card file{where}: {reason}")


class FileAccessError(FlashcardError):
    """A card or log file could not be read or written."""

    def __init__(self, path, reason: str) -> None:
        self.path = str(path)
        super().__init__(f'Cannot access "{path}": {reason}')


class FileNotFound(FileAccessError):
    def __init__(self, path) -> None:
        self.path = str(path)
        FlashcardError.__init__(self, "File not found.")


class InvalidRounds(FlashcardError):
    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(f'Invalid number of rounds: "{raw}".')
