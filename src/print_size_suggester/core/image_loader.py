# core/image_loader.py
from ..i18n import _
import os
from dataclasses import dataclass

from PIL import Image, UnidentifiedImageError

from ..config import SUPPORTED_EXTENSIONS


@dataclass
class ImageLoadResult:
    width: int | None
    height: int | None
    error: str | None = None


def load_image_size(file_path: str) -> ImageLoadResult:
    """
    Reads the pixel width and height of an image.
    Supported formats: JPG, JPEG, PNG, WebP.

    Only the image header is read, pixel data is never decoded.
    Errors are returned in the result, logging is left to the caller.

    Args:
        file_path: Path to the image file.

    Returns:
        ImageLoadResult: fields (width, height, error)
    """
    if not os.path.exists(file_path):
        return ImageLoadResult(None, None, f"{_('File not found')}: {file_path}")

    ext = os.path.splitext(file_path)[1].lower()
    if ext not in SUPPORTED_EXTENSIONS:
        msg = f"{_('Unsupported file format')}: {file_path}"
        return ImageLoadResult(None, None, msg)

    try:
        with Image.open(file_path) as img:
            width, height = img.size
            return ImageLoadResult(width, height)

    except UnidentifiedImageError:
        return ImageLoadResult(None, None, f"{_('Cannot identify image file')}: {file_path}")
    except OSError as e:
        return ImageLoadResult(None, None, str(e))
