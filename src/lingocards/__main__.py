"""Main entry point for LingoCards."""
import argparse
import logging
import sys
from typing import List, Optional

from lingocards import __version__
from lingocards.app import LingoCards
from lingocards.exceptions import LingoCardsError
from lingocards.logging_config import setup_logging
from lingocards.models.session_models import SessionMode

logger = logging.getLogger("lingocards")


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(prog="lingocards", description="Vocabulary flashcards")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("languages", help="Show due words per language")

    due_parser = subparsers.add_parser("due", help="List the words due for review")
    due_parser.add_argument("language", help="Language code, e.g. es")

    session_parser = subparsers.add_parser("session", help="Run a lesson in the terminal")
    session_parser.add_argument("language", help="Language code, e.g. es")
    session_parser.add_argument(
        "--mode",
        choices=[mode.value for mode in SessionMode],
        default=SessionMode.REVIEW.value,
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command line interface."""
    args = build_parser().parse_args(argv)
    setup_logging(f"Starting LingoCards v{__version__} ...", args.log_level)

    app = LingoCards()
    app.start_monitoring()
    try:
        if args.command == "languages":
            app.show_dashboard()
        elif args.command == "due":
            app.show_due_words(args.language)
        else:
            app.run_session(args.language, SessionMode(args.mode))
    except LingoCardsError as e:
        logger.error(str(e))
        return 1
    except (KeyboardInterrupt, EOFError):
        logger.info("Interrupted, shutting down...")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
