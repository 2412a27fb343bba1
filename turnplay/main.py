from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from dotenv import load_dotenv

from turnplay import __version__
from turnplay.blackjack.models import BlackjackStatus
from turnplay.blackjack.session import play_blackjack
from turnplay.config import Settings, load_settings
from turnplay.console import ConsoleDecisionProvider, ConsoleRenderer
from turnplay.hunter.models import HuntStatus
from turnplay.hunter.session import run_hunt
from turnplay.rng import SeededRandomSource

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_INTERRUPTED = 130


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="turnplay", description="Console Blackjack and Monster Hunter.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="game", required=True)

    bj = sub.add_parser("blackjack", help="Play one round of Blackjack.")
    bj.add_argument("--seed", type=int, default=None, help="Seed for a reproducible game.")

    hunter = sub.add_parser("hunter", help="Fight monsters until you die or reach level 20.")
    hunter.add_argument("--name", default=None, help="Player name (prompted when omitted).")
    hunter.add_argument("--seed", type=int, default=None, help="Seed for a reproducible game.")
    return parser


def _setup_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def main(
    argv: Sequence[str] | None = None,
    *,
    input_fn: Callable[[str], str] = input,
    out: Callable[[str], None] = print,
) -> int:
    args = _build_parser().parse_args(argv)

    # Real environment wins over .env.
    env_path = Path.cwd() / ".env"
    if env_path.exists():
        load_dotenv(dotenv_path=env_path, override=False)

    settings = load_settings()
    _setup_logging(settings)

    seed = args.seed if args.seed is not None else settings.seed
    rng = SeededRandomSource(seed)
    logger.info("Starting %s with seed %s", args.game, rng.seed)

    decisions = ConsoleDecisionProvider(input_fn=input_fn)
    renderer = ConsoleRenderer(out=out)

    try:
        if args.game == "blackjack":
            report = play_blackjack(
                rng=rng,
                decisions=decisions,
                sink=renderer,
                max_decision_attempts=settings.max_decision_attempts,
            )
            return EXIT_FAILED if report.status == BlackjackStatus.failed else EXIT_OK

        name = args.name if args.name else input_fn("Enter your name: ").strip()
        out(f"Welcome, {name}.")
        hunt = run_hunt(
            player_name=name,
            rng=rng,
            decisions=decisions,
            sink=renderer,
            max_decision_attempts=settings.max_decision_attempts,
        )
        return EXIT_FAILED if hunt.status == HuntStatus.failed else EXIT_OK
    except (KeyboardInterrupt, EOFError):
        out("")
        logger.info("Interrupted")
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
