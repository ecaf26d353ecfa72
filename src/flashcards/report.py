"""User-facing messages for card operations and quiz results."""

from __future__ import annotations

from typing import Sequence

from .quiz import Outcome, QuizResult


def card_added(term: str, definition: str) -> str:
    return f'The pair ("{term}":"{definition}") has been added.'


def card_removed() -> str:
    return "The card has been removed."


def cards_loaded(count: int) -> str:
    return f"{count} cards have been loaded."


def cards_saved(count: int) -> str:
    return f"{count} cards have been saved."


def question(term: str) -> str:
    return f'Print the definition of "{term}":'


def quiz_verdict(result: QuizResult) -> str:
    if result.outcome is Outcome.CORRECT:
        return "Correct!"
    if result.outcome is Outcome.WRONG_OTHER_TERM:
        return (
            f'Wrong. The right answer is "{result.correct_definition}", '
            f'but your definition is correct for "{result.other_term}".'
        )
    return f'Wrong. The right answer is "{result.correct_definition}".'


def hardest_cards(terms: Sequence[str], errors: int) -> str:
    """Describe the hardest card(s); *terms* must not be empty."""
    if len(terms) == 1:
        return f'The hardest card is "{terms[0]}". You have "{errors}" errors answering it.'
    joined = '", "'.join(terms)
    return f'The hardest cards are "{joined}". You have "{errors}" errors answering them.'


def stats_reset() -> str:
    return "Card statistics have been reset."


def log_saved() -> str:
    return "The log has been saved."
