import os
from typing import List

from letterbox.config import SUPPORTED_EXTENSIONS
from letterbox.errors import DiscoveryError


def list_images(directory: str) -> List[str]:
    """
    Return the JPEG files directly inside ``directory`` (non-recursive).

    Paths are joined onto ``directory`` and normalised, so scanning "."
    yields "a.jpg". Order is whatever the filesystem lists.
    """
    images = []
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                if not entry.is_file():
                    continue
                if os.path.splitext(entry.name)[1].lower() in SUPPORTED_EXTENSIONS:
                    images.append(os.path.normpath(os.path.join(directory, entry.name)))
    except OSError as e:
        raise DiscoveryError(f"listing {directory!r}: {e}") from e

    return images
