#!/usr/bin/env python3
"""Waiting tile calculator - Terminal CLI"""

import argparse
import sys
from typing import List, Optional

from rich.console import Console

from machi.core.tile import CHAR_TO_SUIT
from machi.engine.config import LANGUAGES, EvalConfig
from machi.engine.event import EventBus
from machi.engine.evaluator import Evaluator
from machi.engine.session_logger import SessionLogger
from machi.ui.i18n import set_language, t
from machi.ui.input_handler import CommandType, read_command
from machi.ui.renderer import Renderer

console = Console()


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Find the waiting tiles of a 13-tile hand (e.g. 1112345678999m).")
    ap.add_argument("hand", nargs="?", help="hand notation; omit for interactive mode")
    ap.add_argument("--lang", choices=LANGUAGES, default="ja")
    ap.add_argument("--parallel", action="store_true",
                    help="evaluate candidate tiles on a thread pool")
    ap.add_argument("--workers", type=int, default=None)
    ap.add_argument("--no-seven-pairs", action="store_true",
                    help="do not recognise the seven pairs shape")
    ap.add_argument("--ignore-copy-limit", action="store_true",
                    help="also try tiles already held four times")
    ap.add_argument("--suit", action="append", choices=sorted(CHAR_TO_SUIT),
                    help="suit(s) used for random hands (repeatable)")
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--log", action="store_true", help="save a JSON session log")
    ap.add_argument("--log-dir", default=None)
    return ap


def config_from_args(args) -> EvalConfig:
    return EvalConfig(
        allow_seven_pairs=not args.no_seven_pairs,
        respect_copy_limit=not args.ignore_copy_limit,
        parallel=args.parallel,
        max_workers=args.workers,
        language=args.lang,
        save_log=args.log,
        log_dir=args.log_dir,
        random_suits=[CHAR_TO_SUIT[s] for s in args.suit] if args.suit else None,
        seed=args.seed,
    )


def run_once(evaluator: Evaluator, text: str) -> int:
    """Evaluate a single hand. Returns the process exit status."""
    try:
        evaluator.submit(text)
    except ValueError:
        return 2
    return 0


def run_interactive(evaluator: Evaluator, renderer: Renderer):
    """Read hands until the user quits."""
    renderer.render_title()
    while True:
        command = read_command(console)
        if command.command_type == CommandType.QUIT:
            break
        elif command.command_type == CommandType.RANDOM:
            evaluator.random_hand()
        elif command.command_type == CommandType.EMPTY:
            evaluator.submit("")
        else:
            try:
                evaluator.submit(command.text)
            except ValueError:
                # Already reported by the renderer
                continue


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    config = config_from_args(args)
    set_language(config.language)

    event_bus = EventBus()
    renderer = Renderer(console, event_bus)
    evaluator = Evaluator(config, event_bus)

    logger = None
    if config.save_log:
        logger = SessionLogger(config.log_dir, config.config_info())
        logger.subscribe_events(event_bus)

    status = 0
    try:
        if args.hand is not None:
            status = run_once(evaluator, args.hand)
        else:
            run_interactive(evaluator, renderer)
            console.print(f"\n  {t('msg.goodbye')}\n")
    except (KeyboardInterrupt, EOFError):
        console.print(f"\n\n  [dim]{t('msg.goodbye')}[/dim]\n")
    finally:
        evaluator.close()
        if logger is not None:
            path = logger.save()
            console.print(f"  [dim]{t('msg.log_saved', path=path)}[/dim]")

    return status


if __name__ == "__main__":
    sys.exit(main())
