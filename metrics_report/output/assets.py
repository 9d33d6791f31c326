"""Static asset publishing for the HTML report."""

from __future__ import annotations

import os
import shutil
from typing import List

from ..errors import AssetError


ASSET_BUNDLES = ("js", "css", "images", "fonts")


def publish_assets(template_dir: str, destination: str) -> List[str]:
    """Copy the static bundles of *template_dir* into *destination*.

    Existing files are overwritten; files that only exist in the
    destination (history records, for instance) are left alone.

    Returns the list of written bundle directories.
    """
    for bundle in ASSET_BUNDLES:
        src = os.path.join(template_dir, bundle)
        if not os.path.isdir(src):
            raise AssetError(src, "source bundle not found")

    os.makedirs(destination, exist_ok=True)
    if not os.access(destination, os.W_OK):
        raise AssetError(destination, "destination not writable")

    written = []
    for bundle in ASSET_BUNDLES:
        target = os.path.join(destination, bundle)
        try:
            shutil.copytree(os.path.join(template_dir, bundle), target, dirs_exist_ok=True)
        except (OSError, shutil.Error) as e:
            raise AssetError(target, str(e)) from e
        written.append(target)
    return written
