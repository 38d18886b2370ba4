"""
Main entry point for CATDASH.

Builds the settings, audio engine and session, then hands them
to the pygame window.
"""

import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence

from catdash.settings import Settings


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Jump the cat over the dogs.")
    parser.add_argument("--debug", action="store_true", help="Verbose logging.")
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for obstacle and scenery spawning.",
    )
    parser.add_argument("--mute", action="store_true", help="Disable sound effects.")
    parser.add_argument(
        "--policy",
        choices=("gap", "distance"),
        help="Obstacle spawn policy (default: from settings).",
    )
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    """Settings from the environment, overridden by command line flags."""
    settings = Settings()
    if args.debug:
        settings.debug = True
    if args.seed is not None:
        settings.seed = args.seed
    if args.mute:
        settings.audio.enabled = False
    if args.policy:
        settings.spawn.policy = args.policy
    return settings


async def run_game(settings: Settings) -> None:
    """Run the desktop version."""
    from catdash.audio import get_audio_engine
    from catdash.core.events import EventBus
    from catdash.desktop.window import GameWindow
    from catdash.game.session import Session

    audio = get_audio_engine(settings.audio)
    if settings.audio.enabled:
        audio.init()

    session = Session(settings=settings, audio=audio, event_bus=EventBus())
    window = GameWindow(session)

    try:
        await window.run()
    finally:
        audio.cleanup()


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point."""
    from dotenv import load_dotenv

    # Load environment variables
    load_dotenv()

    args = parse_args(argv)
    settings = build_settings(args)
    setup_logging(settings.debug)

    logger = logging.getLogger(__name__)
    logger.info("CATDASH starting...")

    try:
        asyncio.run(run_game(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)

    logger.info("CATDASH stopped")


if __name__ == "__main__":
    main()
