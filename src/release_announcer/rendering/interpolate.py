from ..schemas.release import ReleaseContext

VERSION_PLACEHOLDER = "${nextRelease.version}"
NOTES_PLACEHOLDER = "${nextRelease.notes}"

def interpolate(template: str, release: ReleaseContext) -> str:
    """
    Replace every release placeholder in `template`.
    Missing values become empty strings; any other text is left as is.
    """
    return (
        template
        .replace(VERSION_PLACEHOLDER, release.version or "")
        .replace(NOTES_PLACEHOLDER, release.notes or "")
    )
