"""Publisher configuration models.

PublisherConfig mirrors the YAML config file (camelCase keys are accepted).
EffectiveConfig is the single view used for one publish run, selected from the
base settings or the prerelease overrides depending on the release branch.
"""

from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from .release import ReleaseContext

DEFAULT_RELEASE_MESSAGE = "New release: ${nextRelease.version}"
DEFAULT_PRERELEASE_MESSAGE = "Prerelease: ${nextRelease.version}"


class PrereleaseConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    enabled: bool = False
    message: Optional[str] = None
    changelog: bool = False
    last_commit_text: bool = Field(False, alias="lastCommitText")
    last_line: Optional[str] = Field(None, alias="lastLine")


class PublisherConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: Optional[str] = None
    changelog: bool = False
    last_commit_text: bool = Field(False, alias="lastCommitText")
    last_line: Optional[str] = Field(None, alias="lastLine")
    assets: Dict[str, str] = Field(default_factory=dict)
    prerelease: PrereleaseConfig = Field(default_factory=PrereleaseConfig)


class EffectiveConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    message_template: str
    include_changelog: bool
    include_last_commit_text: bool
    last_line: str
    assets: Dict[str, str]
    prerelease_enabled: bool


def resolve_effective_config(config: PublisherConfig, release: ReleaseContext) -> EffectiveConfig:
    """
    Pick base or prerelease settings for this release.
    Asset declarations always come from the base config.
    """
    pre = config.prerelease
    if release.branch.is_prerelease:
        return EffectiveConfig(
            message_template=pre.message or DEFAULT_PRERELEASE_MESSAGE,
            include_changelog=pre.changelog,
            include_last_commit_text=pre.last_commit_text,
            last_line=pre.last_line or "",
            assets=dict(config.assets),
            prerelease_enabled=pre.enabled,
        )
    return EffectiveConfig(
        message_template=config.message or DEFAULT_RELEASE_MESSAGE,
        include_changelog=config.changelog,
        include_last_commit_text=config.last_commit_text,
        last_line=config.last_line or "",
        assets=dict(config.assets),
        prerelease_enabled=pre.enabled,
    )
