"""Asset resolution for release uploads.

Expands the declared path patterns (after placeholder interpolation) against
the working directory. Resolution is all-or-nothing: every pattern has to
match at least one file.
"""

import glob
import os
from typing import Dict, List

from ..errors import AssetResolutionError
from ..log import get_logger
from ..rendering.interpolate import interpolate
from ..schemas.release import ReleaseContext

logger = get_logger("assets")

def expand_pattern(pattern: str) -> List[str]:
    """
    Files matching `pattern`, sorted. Directories are skipped.
    """
    return sorted(p for p in glob.glob(pattern, recursive=True) if os.path.isfile(p))

def resolve_assets(declarations: Dict[str, str], release: ReleaseContext) -> Dict[str, str]:
    """
    Map every matched file path to its label.
    A pattern matching several files attaches the same label to each of them.
    Raises AssetResolutionError listing every pattern that matched nothing.
    """
    resolved: Dict[str, str] = {}
    missing: List[str] = []

    for raw_pattern, label in declarations.items():
        pattern = interpolate(raw_pattern, release)
        matches = expand_pattern(pattern)

        if not matches:
            missing.append(pattern)
            continue

        logger.debug(f"{pattern} -> {len(matches)} file(s)")
        for path in matches:
            resolved[path] = label

    if missing:
        raise AssetResolutionError(missing)

    return resolved
