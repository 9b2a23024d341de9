import pytest
from pathlib import Path
from typing import Dict, List, Optional

from release_announcer.schemas.release import Branch, Commit, PostedMessage, ReleaseContext, UploadedFile


class FakeTransport:
    """
    In-memory chat transport. Records every call in order.
    `errors` maps a method name ("post", "update", "upload") to exceptions raised
    by successive calls; once the list is empty the call succeeds.
    `anomalous` holds file names whose upload returns no file metadata.
    """

    def __init__(self):
        self.calls: List[tuple] = []
        self.errors: Dict[str, List[Exception]] = {}
        self.anomalous: set = set()
        self._counter = 0

    def _maybe_fail(self, name: str):
        pending = self.errors.get(name)
        if pending:
            raise pending.pop(0)

    def post_message(self, channel: str, text: str, thread_ts: Optional[str] = None) -> PostedMessage:
        self.calls.append(("post", channel, text, thread_ts))
        self._maybe_fail("post")
        self._counter += 1
        return PostedMessage(channel="C_RELEASES", ts=f"1700000000.00000{self._counter}", text=text)

    def update_message(self, channel: str, ts: str, text: str) -> None:
        self.calls.append(("update", channel, ts, text))
        self._maybe_fail("update")

    def upload_file(self, channel, thread_ts, path, title, initial_comment) -> Optional[UploadedFile]:
        self.calls.append(("upload", channel, thread_ts, path, title, initial_comment))
        self._maybe_fail("upload")
        name = Path(path).name
        if name in self.anomalous:
            return None
        return UploadedFile(file_id=f"F_{name}", download_url=f"https://files.slack.com/{name}")

    def calls_named(self, name: str) -> List[tuple]:
        return [c for c in self.calls if c[0] == name]


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def workdir(tmp_path, monkeypatch) -> Path:
    """
    Runs the test inside an empty temporary working directory,
    so asset patterns resolve against files the test creates.
    """
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def release() -> ReleaseContext:
    return ReleaseContext(
        version="1.2.0",
        notes="fix bug",
        commits=[Commit(message="fix: bug\n\nDetails here\nSigned-off-by: X")],
        branch=Branch(name="main"),
    )


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    from release_announcer.config import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
