"""
Output Service - Writes finished booklet pages to disk.

This service owns the output folder: it creates it, names page files,
encodes canvases as PNG and keeps track of what it wrote.
"""

import logging
from pathlib import Path
from typing import List, Union

from PIL import Image

from ..config import OUTPUT_NAME_TEMPLATE
from ..exceptions import OutputError

logger = logging.getLogger(__name__)


class OutputService:
    """
    Writes page images into an output folder.

    Any failure to create the folder or write a page raises OutputError;
    nothing is retried.
    """

    def __init__(self, output_folder: Union[str, Path], name_template: str = OUTPUT_NAME_TEMPLATE):
        self.output_folder = Path(output_folder)
        self.name_template = name_template
        self._written: List[Path] = []

    def ensure_folder(self) -> Path:
        """
        Create the output folder (and parents) if it does not exist.

        Returns:
            Path to the output folder

        Raises:
            OutputError: If the folder cannot be created
        """
        try:
            self.output_folder.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputError(f"Could not create output folder {self.output_folder}: {e}") from e
        return self.output_folder

    def page_path(self, index: int) -> Path:
        """
        Get the file path for a page.

        Example:
            >>> OutputService('out').page_path(7).name
            'talonario_007.png'
        """
        return self.output_folder / self.name_template.format(index=index)

    def write_page(self, canvas: Image.Image, index: int) -> Path:
        """
        Encode a page canvas as PNG.

        Args:
            canvas: Rendered page
            index: 1-based page index, used in the file name

        Returns:
            Path of the written file

        Raises:
            OutputError: If the file cannot be written
        """
        path = self.page_path(index)
        try:
            canvas.save(path, 'PNG')
        except (OSError, ValueError) as e:
            raise OutputError(f"Error saving booklet {index} to {path}: {e}") from e

        self._written.append(path)
        logger.debug("Created: %s", path.name)
        return path

    def get_written_files(self) -> List[Path]:
        """
        Get list of page files written so far.

        Returns:
            Copy of the written file paths, in write order
        """
        return self._written.copy()
