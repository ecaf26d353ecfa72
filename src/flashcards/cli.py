"""CLI entrypoint for the flashcards trainer.

Usage:
  python -m flashcards.cli [-import cards.txt] [-export cards.txt] [--seed 42]

Cards from ``-import`` are loaded before the menu starts; ``-export`` saves
them after ``exit``.
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Callable, List

from .errors import FlashcardError
from .session import StudySession
from .shell import Console, Shell

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

DEFAULT_CONFIG = {
    "import_path": None,
    "export_path": None,
    "log_level": "WARNING",
    "seed": None,
}


def load_config(path: str | Path) -> dict:
    path = Path(path)
    cfg = dict(DEFAULT_CONFIG)
    if not path.exists():
        return cfg
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a JSON object: {path}")
    cfg.update(data)
    if cfg["log_level"] not in LOG_LEVELS:
        raise ValueError(
            f"log_level must be one of {', '.join(LOG_LEVELS)}, got {cfg['log_level']!r}"
        )
    return cfg


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="flashcards", description="Flashcard trainer")
    p.add_argument("-import", dest="import_path", help="Card file to load at startup")
    p.add_argument("-export", dest="export_path", help="Card file to save on exit")
    p.add_argument(
        "--config",
        default="flashcards.json",
        help="Path to config JSON (optional; defaults will be used if missing)",
    )
    p.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        help="Diagnostic log level (logs go to stderr)",
    )
    p.add_argument("--seed", type=int, help="Seed for card selection (reproducible quizzes)")
    return p


def main(
    argv: List[str] | None = None,
    input_fn: Callable[[], str] = input,
    output_fn: Callable[[str], None] = print,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        cfg = load_config(args.config)
    except (json.JSONDecodeError, ValueError) as e:
        output_fn(f"Error: invalid config {args.config}: {e}")
        return 1

    logging.basicConfig(
        level=args.log_level or cfg["log_level"],
        format="%(levelname)s %(name)s: %(message)s",
    )
    import_path = args.import_path or cfg.get("import_path")
    export_path = args.export_path or cfg.get("export_path")
    seed = args.seed if args.seed is not None else cfg.get("seed")

    session = StudySession.seeded(seed)
    shell = Shell(session, Console(session.transcript, input_fn=input_fn, output_fn=output_fn))

    if import_path:
        try:
            shell.import_cards(import_path)
        except FlashcardError as e:
            shell.console.say(str(e))

    shell.run()

    if export_path:
        try:
            shell.export_cards(export_path)
        except FlashcardError as e:
            shell.console.say(str(e))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
