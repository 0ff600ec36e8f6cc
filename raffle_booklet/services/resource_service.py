"""
Resource Service - Loads the background image and the font face.

The two resources fail differently: a background is requested explicitly
by path, so a missing or unreadable one aborts the run; a font that cannot
be loaded is replaced by the built-in fallback face with a warning.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from PIL import Image, UnidentifiedImageError

from ..exceptions import ResourceError
from ..fonts import FallbackFace, FontFace, TrueTypeFace

logger = logging.getLogger(__name__)


class ResourceService:
    """Loads input resources for a booklet run."""

    def load_background(self, path: Union[str, Path, None]) -> Optional[Image.Image]:
        """
        Load and decode the background image.

        Args:
            path: Image file (PNG, JPEG or anything Pillow decodes); empty for none

        Returns:
            Decoded RGBA image, or None when no path is configured

        Raises:
            ResourceError: If the file is missing or cannot be decoded
        """
        if not path:
            return None

        path = Path(path)
        if not path.exists():
            raise ResourceError(f"Background image not found: {path}")

        try:
            with Image.open(path) as img:
                background = img.convert('RGBA')
        except (UnidentifiedImageError, OSError) as e:
            raise ResourceError(f"Error loading background image {path}: {e}") from e

        logger.debug("Loaded background %s (%dx%d)", path, *background.size)
        return background

    def load_font(self, path: Union[str, Path, None], size: float) -> FontFace:
        """
        Load a TrueType font, falling back to the built-in face.

        Args:
            path: Font file; empty to use the built-in face
            size: Font size in pixels

        Returns:
            The loaded face, or FallbackFace if none was given or loading failed
        """
        if not path:
            return FallbackFace()

        path = Path(path)
        if not path.exists():
            logger.warning(
                "Warning: Font file does not exist: %s, using default font", path
            )
            return FallbackFace()

        try:
            face = TrueTypeFace.from_file(path, size)
        except (OSError, ValueError) as e:
            logger.warning(
                "Warning: Could not load custom font %s (%s), using default font", path, e
            )
            return FallbackFace()

        logger.info("Custom font loaded: %s (size: %.1f)", path, size)
        return face
