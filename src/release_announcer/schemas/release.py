"""Pydantic schemas for release data.

Defines the release context handed to the publisher (ReleaseContext, Commit,
Branch) and the handles returned by the Slack transport (PostedMessage,
UploadedFile).
"""

from pydantic import BaseModel
from typing import List, Optional, Union

class Commit(BaseModel):
    message: str

class Branch(BaseModel):
    name: str
    prerelease: Union[bool, str] = False # a channel name such as "beta" also marks a prerelease

    @property
    def is_prerelease(self) -> bool:
        return bool(self.prerelease)

class ReleaseContext(BaseModel):
    version: str
    notes: Optional[str] = None
    commits: List[Commit] = []  # newest first
    branch: Branch = Branch(name="main")

class PostedMessage(BaseModel):
    channel: str
    ts: str
    text: str

class UploadedFile(BaseModel):
    file_id: str
    download_url: str
