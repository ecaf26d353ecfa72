"""Interactive menu loop.

All console traffic goes through ``Console`` so it ends up in the session
transcript. Errors from the core are shown as their message and the loop
continues with the next action.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Dict, Optional

from . import report
from .errors import EmptyStore, FlashcardError, InvalidRounds
from .session import StudySession
from .transcript import Transcript

log = logging.getLogger(__name__)

_ROUNDS_RE = re.compile(r"[0-9]+")


class Console:
    def __init__(
        self,
        transcript: Transcript,
        input_fn: Callable[[], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self.transcript = transcript
        self._input = input_fn
        self._output = output_fn

    def say(self, line: str) -> None:
        self.transcript.record(line)
        self._output(line)

    def read(self) -> str:
        line = self._input()
        self.transcript.record(line)
        return line

    def ask(self, prompt: str) -> str:
        self.say(prompt)
        return self.read()


class Shell:
    def __init__(self, session: StudySession, console: Console) -> None:
        self.session = session
        self.console = console
        self.running = False
        self.actions: Dict[str, Callable[[], None]] = {
            "add": self.add,
            "remove": self.remove,
            "import": self.import_cards,
            "export": self.export_cards,
            "ask": self.ask,
            "exit": self.exit,
            "log": self.save_log,
            "hardest card": self.hardest_card,
            "reset stats": self.reset_stats,
        }

    @property
    def menu_prompt(self) -> str:
        return f"Input the action ({', '.join(self.actions)}):"

    def run(self) -> None:
        self.running = True
        while self.running:
            try:
                choice = self.console.ask(self.menu_prompt)
            except EOFError:
                log.debug("Input closed; leaving menu")
                break
            action = self.actions.get(choice)
            try:
                if action is None:
                    raise FlashcardError("Unknown action.")
                action()
            except FlashcardError as e:
                self.console.say(str(e))
            except EOFError:
                log.debug("Input closed during %r; leaving menu", choice)
                break
        self.running = False
        self.console.say("Bye bye!")

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------
    def add(self) -> None:
        store = self.session.store
        term = self.console.ask("The card:")
        store.require_new_term(term)
        definition = self.console.ask("The definition of the card:")
        store.add(term, definition)
        self.console.say(report.card_added(term, definition))

    def remove(self) -> None:
        term = self.console.ask("Which card?")
        self.session.store.remove(term)
        self.console.say(report.card_removed())

    def import_cards(self, path: Optional[str] = None) -> None:
        count = self.session.import_cards(path or self._ask_file_name())
        self.console.say(report.cards_loaded(count))

    def export_cards(self, path: Optional[str] = None) -> None:
        count = self.session.export_cards(path or self._ask_file_name())
        self.console.say(report.cards_saved(count))

    def ask(self) -> None:
        if len(self.session.store) == 0:
            raise EmptyStore()
        raw = self.console.ask("How many times to ask?")
        if not _ROUNDS_RE.fullmatch(raw):
            raise InvalidRounds(raw)

        def answer_for(term: str) -> str:
            return self.console.ask(report.question(term))

        for result in self.session.quiz(int(raw), answer_for):
            self.console.say(report.quiz_verdict(result))

    def exit(self) -> None:
        self.running = False

    def save_log(self) -> None:
        path = self._ask_file_name()
        self.session.save_log(path)
        self.console.say(report.log_saved())

    def hardest_card(self) -> None:
        terms, errors = self.session.hardest()
        self.console.say(report.hardest_cards(terms, errors))

    def reset_stats(self) -> None:
        self.session.reset_stats()
        self.console.say(report.stats_reset())

    def _ask_file_name(self) -> str:
        return self.console.ask("File name:")
