"""Command-line speed reader."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from speedreader.config import get_settings
from speedreader.logging_config import setup_logging
from speedreader.services.controller import ReadingController
from speedreader.services.settings_store import SettingsStore
from speedreader.terminal import TerminalView

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="speedreader",
        description="Read text one word at a time (RSVP) in the terminal",
    )
    parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="Text file to read (default: stdin)",
    )
    parser.add_argument(
        "--wpm",
        type=int,
        default=None,
        help="Reading speed in words per minute (default: saved setting)",
    )
    parser.add_argument(
        "--no-highlight",
        action="store_true",
        help="Do not mark the recognition point character",
    )
    parser.add_argument(
        "--fixation",
        action="store_true",
        help="Show a fixation marker above the recognition point",
    )
    parser.add_argument(
        "--settings-path",
        type=Path,
        default=None,
        help="Settings file (default: from config)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (default: from config)",
    )
    return parser


def read_text(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


async def run_reader(controller: ReadingController, view: TerminalView, text: str) -> int:
    """Play text through the controller until playback completes."""
    if not controller.start_reading(text):
        print("No text to read.", file=sys.stderr)
        return 1

    view.show_fixation()
    controller.toggle_play_pause()
    await view.finished.wait()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Run the terminal reader."""
    args = build_parser().parse_args(argv)
    settings = get_settings()

    setup_logging(args.log_level or settings.log_level, settings.log_file)

    try:
        text = read_text(args.file)
    except OSError as e:
        print(f"Failed to read {args.file}: {e}", file=sys.stderr)
        return 1

    view = TerminalView()
    controller = ReadingController(
        SettingsStore(args.settings_path or settings.settings_path),
        view=view,
        app_settings=settings,
    )

    if args.wpm is not None:
        controller.update_wpm(args.wpm, persist=False)
    if args.no_highlight:
        controller.settings.highlight_focus = False
    if args.fixation:
        controller.settings.fixation_point = True
    view.apply_settings(controller.settings)

    try:
        return asyncio.run(run_reader(controller, view, text))
    except KeyboardInterrupt:
        controller.back()
        print(file=sys.stderr)
        logger.info("Reading interrupted")
        return 130


if __name__ == "__main__":
    sys.exit(main())
