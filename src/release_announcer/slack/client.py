from typing import Optional

from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception

from ..log import get_logger
from ..schemas.release import PostedMessage, UploadedFile
from .post_blocks import build_post_payload, build_update_payload, build_upload_payload

logger = get_logger("slack_client")

def _is_rate_limited(exc: BaseException) -> bool:
    if not isinstance(exc, SlackApiError):
        return False
    if exc.response.get("error") == "ratelimited":
        logger.warning("Slack rate limited, retrying...")
        return True
    return False

rate_limit_retry = retry(
    retry=retry_if_exception(_is_rate_limited),
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=2, max=10),
    reraise=True,
)

class SlackClientWrapper:
    def __init__(self, token: str, client: Optional[WebClient] = None):
        self.client = client or WebClient(token=token)

    @rate_limit_retry
    def post_message(self, channel: str, text: str, thread_ts: Optional[str] = None) -> PostedMessage:
        """
        Posts a message (threaded when thread_ts is given) with mrkdwn enabled.
        Returns the handle of the posted message; the channel is the id Slack reports.
        """
        payload = build_post_payload(channel=channel, text=text, thread_ts=thread_ts)
        try:
            response = self.client.chat_postMessage(**payload)
        except SlackApiError as e:
            logger.error(f"Slack API error: {e.response['error']}")
            raise
        message = response.get("message") or {}
        return PostedMessage(
            channel=response.get("channel") or channel,
            ts=response["ts"],
            text=message.get("text", text),
        )

    @rate_limit_retry
    def update_message(self, channel: str, ts: str, text: str) -> None:
        try:
            self.client.chat_update(**build_update_payload(channel=channel, ts=ts, text=text))
        except SlackApiError as e:
            logger.error(f"Slack API error: {e.response['error']}")
            raise

    @rate_limit_retry
    def upload_file(
        self,
        channel: str,
        thread_ts: str,
        path: str,
        title: str,
        initial_comment: str,
    ) -> Optional[UploadedFile]:
        """
        Uploads a local file as a reply in the given thread.
        Returns None when Slack answers without usable file metadata.
        """
        payload = build_upload_payload(
            channel=channel,
            thread_ts=thread_ts,
            path=path,
            title=title,
            initial_comment=initial_comment,
        )
        try:
            with open(path, "rb") as fh:
                response = self.client.files_upload_v2(file=fh, **payload)
        except SlackApiError as e:
            logger.error(f"Slack API error: {e.response['error']}")
            raise

        files = response.get("files") or []
        if not response.get("ok") or not files:
            return None
        uploaded = files[0]
        if not uploaded.get("id") or not uploaded.get("url_private_download"):
            return None
        return UploadedFile(file_id=uploaded["id"], download_url=uploaded["url_private_download"])
