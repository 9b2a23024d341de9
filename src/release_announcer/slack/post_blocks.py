"""Slack message payload builders.

Provides functions to build chat.postMessage, chat.update and files_upload_v2
payloads with mrkdwn formatting.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional


def build_post_payload(
    channel: str,
    text: str,
    thread_ts: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Payload for chat.postMessage.
    Posts as plain text with mrkdwn enabled (no blocks) to avoid 3000-char block limit.
    """
    payload: Dict[str, Any] = {
        "channel": channel,
        "text": text,
        "mrkdwn": True,  # Enable mrkdwn formatting in text field
        "unfurl_links": False,
        "unfurl_media": False,
    }
    if thread_ts:
        payload["thread_ts"] = thread_ts
    return payload


def build_update_payload(channel: str, ts: str, text: str) -> Dict[str, Any]:
    """
    Payload for chat.update. Rewrites the message `ts` in place.
    """
    return {
        "channel": channel,
        "ts": ts,
        "text": text,
        "mrkdwn": True,
    }


def build_upload_payload(
    channel: str,
    thread_ts: str,
    path: str,
    title: str,
    initial_comment: str,
) -> Dict[str, Any]:
    """
    Payload for files_upload_v2, without the file handle itself.
    """
    return {
        "channel": channel,
        "thread_ts": thread_ts,
        "filename": Path(path).name,
        "title": title,
        "initial_comment": initial_comment,
    }
