"""Release publishing pipeline.

Runs one release announcement end to end:
  resolve assets -> post announcement -> upload assets in thread -> update announcement

Any failure after the announcement exists is reported in the thread and on the
announcement itself before the original error is re-raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Protocol

from pydantic import BaseModel

from ..assets.resolve import resolve_assets
from ..errors import ResolvedFileMissingError
from ..log import get_logger
from ..rendering.slack_format import (
    append_caution,
    compose_message,
    extract_last_commit_body,
    format_download_link,
    render_error_reply,
    render_updated_message,
)
from ..schemas.plugin_config import PublisherConfig, resolve_effective_config
from ..schemas.release import PostedMessage, ReleaseContext, UploadedFile


class ChatTransport(Protocol):
    def post_message(self, channel: str, text: str, thread_ts: Optional[str] = None) -> PostedMessage:
        ...

    def update_message(self, channel: str, ts: str, text: str) -> None:
        ...

    def upload_file(
        self,
        channel: str,
        thread_ts: str,
        path: str,
        title: str,
        initial_comment: str,
    ) -> Optional[UploadedFile]:
        ...


class PublishPhase(str, Enum):
    IDLE = "idle"
    RESOLVING = "resolving"
    POSTED = "posted"
    UPLOADING = "uploading"
    UPDATED = "updated"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class PublishState:
    phase: PublishPhase = PublishPhase.IDLE
    message: Optional[PostedMessage] = None
    message_text: str = ""  # last text known to be on the announcement
    download_links: List[str] = field(default_factory=list)
    uploaded_any: bool = False

    @property
    def thread_ts(self) -> Optional[str]:
        return self.message.ts if self.message else None


class PublishResult(BaseModel):
    phase: PublishPhase
    thread_ts: Optional[str] = None
    download_links: List[str] = []
    updated: bool = False


class ReleasePublisher:
    def __init__(
        self,
        transport: ChatTransport,
        channel: str,
        config: PublisherConfig,
        logger: Optional[logging.Logger] = None,
    ):
        self.transport = transport
        self.channel = channel
        self.config = config
        self.logger = logger or get_logger("publisher")

    def publish(self, release: ReleaseContext) -> PublishResult:
        effective = resolve_effective_config(self.config, release)

        if release.branch.is_prerelease and not effective.prerelease_enabled:
            self.logger.info(f"Skipping release for prerelease branch: {release.branch.name}")
            return PublishResult(phase=PublishPhase.SKIPPED)

        state = PublishState()
        try:
            # 1. Resolve assets before anything is posted
            state.phase = PublishPhase.RESOLVING
            assets = resolve_assets(effective.assets, release)

            commit_body = ""
            if effective.include_last_commit_text:
                commit_body = extract_last_commit_body(release.commits)
            body = compose_message(effective, release, commit_body)

            # 2. Initial announcement
            state.phase = PublishPhase.POSTED
            state.message = self.transport.post_message(self.channel, body)
            state.message_text = state.message.text
            self.logger.info(f":rocket: Initial release message sent: {state.thread_ts}")

            # 3. Upload assets as thread replies, in resolution order
            state.phase = PublishPhase.UPLOADING
            for file_path, label in assets.items():
                self._upload(state, file_path, label)

            # 4. Rewrite the announcement with the download links
            if state.uploaded_any:
                text = render_updated_message(body, state.download_links, effective.last_line)
                self.transport.update_message(state.message.channel, state.message.ts, text)
                state.message_text = text
                state.phase = PublishPhase.UPDATED
                self.logger.info("Release message updated with download links and last line.")
            else:
                self.logger.warning("No files uploaded. The initial message was not updated.")
        except Exception as e:
            failed_in = state.phase
            state.phase = PublishPhase.FAILED
            self.logger.error(f"Error during release publishing ({failed_in.value}): {e}")
            self._report_failure(state, e)
            raise

        return PublishResult(
            phase=state.phase,
            thread_ts=state.thread_ts,
            download_links=list(state.download_links),
            updated=state.phase == PublishPhase.UPDATED,
        )

    def _upload(self, state: PublishState, file_path: str, label: str) -> None:
        resolved_path = Path(file_path).resolve()
        if not resolved_path.exists():
            raise ResolvedFileMissingError(str(resolved_path))

        self.logger.info(f"Uploading {label}...")
        uploaded = self.transport.upload_file(
            channel=state.message.channel,
            thread_ts=state.message.ts,
            path=str(resolved_path),
            title=label,
            initial_comment=f"📎 {label}",
        )
        if uploaded is None:
            self.logger.error(f"Failed to upload {label}.")
            return

        self.logger.info(f"Uploaded {label}: {uploaded.file_id}")
        state.download_links.append(format_download_link(label, uploaded.download_url))
        state.uploaded_any = True

    def _report_failure(self, state: PublishState, error: Exception) -> None:
        """
        Best effort: reply in the thread and flag the announcement.
        Failures here are logged; the caller still receives the original error.
        """
        if state.thread_ts:
            try:
                self.transport.post_message(
                    state.message.channel, render_error_reply(error), thread_ts=state.thread_ts
                )
            except Exception:
                self.logger.exception("Could not post the error reply in the release thread")

        if state.message:
            try:
                self.transport.update_message(
                    state.message.channel, state.message.ts, append_caution(state.message_text)
                )
            except Exception:
                self.logger.exception("Could not flag the release message as unusable")
