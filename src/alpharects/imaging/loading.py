from __future__ import annotations

from pathlib import Path

from PIL import Image, UnidentifiedImageError

from ..logging import get_logger
from ..regions.mask import BinaryMask

logger = get_logger(__name__)


class ImageLoadError(Exception):
    """Raised when an image cannot be found or decoded."""


def load_mask(path: Path | str) -> BinaryMask:
    """
    Decode an image file and threshold its alpha channel into a mask.

    Args:
        path: Image in any format Pillow can read

    Returns:
        BinaryMask that is True wherever alpha > 0

    Raises:
        ImageLoadError: If the file is missing or cannot be decoded
    """
    path = Path(path)
    if not path.exists():
        raise ImageLoadError(f"Image file does not exist: {path}")

    try:
        with Image.open(path) as img:
            img.load()
            mask = BinaryMask.from_image(img)
    except (UnidentifiedImageError, OSError, ValueError) as exc:
        raise ImageLoadError(f"Could not parse image format of {path}: {exc}") from exc

    logger.debug(f"Loaded {path} as {mask!r}")
    return mask
