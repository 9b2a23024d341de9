"""Error types raised by the release publisher.

Slack transport failures are not wrapped: they surface as
``slack_sdk.errors.SlackApiError``.
"""

from typing import List


class ReleaseAnnouncerError(Exception):
    pass


class ConfigurationError(ReleaseAnnouncerError):
    """Slack credentials or target channel are missing."""


class AssetError(ReleaseAnnouncerError):
    pass


class AssetResolutionError(AssetError):
    """One or more declared asset patterns matched no file."""

    def __init__(self, missing_patterns: List[str]):
        self.missing_patterns = list(missing_patterns)
        super().__init__(
            "The following required assets were not found:\n" + "\n".join(self.missing_patterns)
        )


class ResolvedFileMissingError(AssetError):
    """A resolved asset path disappeared before it could be uploaded."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Resolved file not found: {path}")
