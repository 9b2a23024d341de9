"""Command line entry point: announce a finished release on Slack.

Reads SLACK_TOKEN / SLACK_CHANNEL from the environment (or .env) and the
publisher settings from a YAML file.

Usage:
    release-announcer --version 1.2.0 --notes-file CHANGELOG.md --commit "$(git log -1 --format=%B)"
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from .config import get_settings, load_publisher_config, require_slack_target
from .log import setup_logging, get_logger
from .pipeline.publish import ReleasePublisher
from .schemas.release import Branch, Commit, ReleaseContext
from .slack.client import SlackClientWrapper

logger = get_logger("main")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Post a release announcement with build artifacts to Slack")
    p.add_argument("--version", required=True, help="Released version, e.g. 1.2.0")
    notes = p.add_mutually_exclusive_group()
    notes.add_argument("--notes", help="Release notes text")
    notes.add_argument("--notes-file", help="Read release notes from this file")
    p.add_argument("--commit", action="append", default=[], help="Commit message, newest first (repeatable)")
    p.add_argument("--branch", default="main", help="Release branch name")
    p.add_argument(
        "--prerelease",
        nargs="?",
        const=True,
        default=False,
        help="Mark the branch as a prerelease channel (optionally named, e.g. beta)",
    )
    p.add_argument("--config", help="Publisher YAML config (defaults to RELEASE_CONFIG_PATH)")
    p.add_argument("--log-level", help="Override LOG_LEVEL (DEBUG, INFO, ...)")
    return p.parse_args(argv)


def build_release_context(args: argparse.Namespace) -> ReleaseContext:
    notes = args.notes
    if args.notes_file:
        notes = Path(args.notes_file).read_text(encoding="utf-8")
    return ReleaseContext(
        version=args.version,
        notes=notes,
        commits=[Commit(message=m) for m in args.commit],
        branch=Branch(name=args.branch, prerelease=args.prerelease),
    )


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = parse_args(argv)
    setup_logging(args.log_level)

    try:
        settings = get_settings()
        token, channel = require_slack_target(settings)
        config = load_publisher_config(args.config or settings.RELEASE_CONFIG_PATH)
        release = build_release_context(args)

        publisher = ReleasePublisher(SlackClientWrapper(token), channel, config)
        result = publisher.publish(release)
    except Exception:
        logger.exception("Release announcement failed")
        return 1

    logger.info(f"Release announcement finished: {result.phase.value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
