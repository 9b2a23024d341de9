"""Slack mrkdwn formatting for release announcements.

Builds the announcement body (template, description, changelog), the version
with download links, and the texts posted when a release run fails.
"""

from __future__ import annotations

from typing import List, Sequence

from release_announcer.rendering.interpolate import interpolate
from release_announcer.schemas.plugin_config import EffectiveConfig
from release_announcer.schemas.release import Commit, ReleaseContext

_TRAILER_PREFIXES = ("signed-off-by:", "co-authored-by:")

CAUTION_SUFFIX = "\n\n:x: *An issue occurred with this release. Users are advised NOT to use this version.*"


def extract_last_commit_body(commits: Sequence[Commit]) -> str:
    """
    Body of the newest commit: subject line, blank lines and
    Signed-off-by / Co-authored-by trailers removed.
    """
    if not commits:
        return ""
    lines = commits[0].message.split("\n")[1:]
    kept: List[str] = [
        line for line in lines
        if line.strip() and not line.strip().lower().startswith(_TRAILER_PREFIXES)
    ]
    return "\n".join(kept).strip()


def compose_message(config: EffectiveConfig, release: ReleaseContext, commit_body: str = "") -> str:
    """
    Announcement body, sections in fixed order:
      - interpolated template
      - Description (last commit body), if enabled and non-empty
      - Changelog (release notes), if enabled and non-empty
    Every section ends with a blank line.
    """
    message = interpolate(config.message_template, release) + "\n\n"

    if config.include_last_commit_text and commit_body:
        message += f"📖 Description:\n{commit_body}\n\n"

    if config.include_changelog and release.notes:
        message += f"📝 Changelog:\n{release.notes}\n\n"

    return message


def format_download_link(label: str, url: str) -> str:
    return f"• *{label}*: <{url}|Download>"


def render_updated_message(body: str, download_links: List[str], last_line: str = "") -> str:
    message = body + "📥 Download Links:\n" + "\n".join(download_links)
    if last_line:
        message += f"\n\n{last_line}"
    return message


def render_error_reply(error: BaseException) -> str:
    return f":x: An error occurred during the release process:\n`{error}`"


def append_caution(text: str) -> str:
    return text + CAUTION_SUFFIX
