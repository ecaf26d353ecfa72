"""Flashcards trainer package.

Core: card store with per-term error stats, quiz rounds and the three-line
card file format. The shell and CLI are thin layers on top.
"""

__all__ = [
    "errors",
    "stats",
    "card_store",
    "quiz",
    "codec",
    "transcript",
    "report",
    "session",
    "shell",
    "cli",
]
