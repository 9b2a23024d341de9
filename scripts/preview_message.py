#!/usr/bin/env python3
"""
Utility: print the release announcement the publisher would post.

Usage:
  python scripts/preview_message.py --version 1.2.0 --notes "fix bug" --config .release-announcer.yaml

Nothing is sent to Slack and no assets are resolved.
"""
from __future__ import annotations
import os
import sys

# Add project src to path if not already available
ROOT = os.path.dirname(os.path.dirname(__file__))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from release_announcer.config import get_settings, load_publisher_config
from release_announcer.main_publish import build_release_context, parse_args
from release_announcer.rendering.slack_format import compose_message, extract_last_commit_body
from release_announcer.schemas.plugin_config import resolve_effective_config


def main():
    args = parse_args()
    config = load_publisher_config(args.config or get_settings().RELEASE_CONFIG_PATH)
    release = build_release_context(args)
    effective = resolve_effective_config(config, release)

    if release.branch.is_prerelease and not effective.prerelease_enabled:
        print(f"Prerelease announcements are disabled; {release.branch.name} would be skipped.")
        return

    commit_body = extract_last_commit_body(release.commits) if effective.include_last_commit_text else ""
    print(compose_message(effective, release, commit_body))
    if effective.assets:
        print("Declared assets:")
        for pattern, label in effective.assets.items():
            print(f"  {pattern} -> {label}")


if __name__ == '__main__':
    main()
