"""
Font loading and caching for text drawing.

A FontCache belongs to one invocation and is handed to every operation that
draws text. Font files are loaded once per path; further sizes are derived
from the loaded handle instead of re-reading the file through the cache.

Classes:
    FontHandle: A loaded font file
    FontCache: Path-keyed cache of FontHandles plus system font lookup
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List
import logging

from IC_Libs.constants import FONT_FILE_EXTENSIONS
from IC_Libs.pillow_compat import ImageFont

logger = logging.getLogger(__name__)


@dataclass
class FontHandle:
    """A font file loaded through the cache.

    Attributes:
        path: Font file path as given in the operation token
        font: The loaded Pillow FreeTypeFont
    """
    path: str
    font: Any

    def at_size(self, size: float) -> Any:
        """Return the font at ``size`` pixels, reusing the loaded face when it matches."""
        if self.font.size == size:
            return self.font
        return self.font.font_variant(size=size)


class FontCache:
    """Invocation-scoped font cache keyed by font file path."""

    def __init__(self):
        self._handles: Dict[str, FontHandle] = {}

    def __contains__(self, path: str) -> bool:
        return path in self._handles

    def __len__(self) -> int:
        return len(self._handles)

    def load_file(self, path: str, size: float) -> FontHandle:
        """
        Load a font file, or return the handle loaded earlier for the same path.

        Args:
            path: Path to a TrueType/OpenType font file
            size: Size in pixels used when the file is first loaded

        Returns:
            The cached FontHandle

        Raises:
            OSError: If the font file cannot be read
        """
        handle = self._handles.get(path)
        if handle is None:
            try:
                font = ImageFont.truetype(path, size)
            except OSError as e:
                raise OSError(f"Failed to load font file {path}: {e}") from e
            handle = FontHandle(path=path, font=font)
            self._handles[path] = handle
            logger.debug(f"Loaded font file: {path}")
        return handle

    def file_font(self, path: str, size: float) -> Any:
        """Font from a file path at the requested pixel size."""
        return self.load_file(path, size).at_size(size)

    def system_font(self, family: str, size: float) -> Any:
        """
        Look up an installed font by family or file name.

        Pillow searches the platform font directories by file name, so the
        family name is tried as given, then with font file extensions, in
        original and lower case. When nothing matches, Pillow's bundled
        default font is used.
        """
        for candidate in _family_candidates(family):
            try:
                return ImageFont.truetype(candidate, size)
            except OSError:
                continue

        logger.warning(f"Font family '{family}' not found, using default font")
        return ImageFont.load_default(size)


def _family_candidates(family: str) -> Iterable[str]:
    names: List[str] = [family]
    if family.lower() != family:
        names.append(family.lower())

    candidates: List[str] = []
    for name in names:
        candidates.append(name)
        if not name.lower().endswith(FONT_FILE_EXTENSIONS):
            candidates.extend(name + extension for extension in FONT_FILE_EXTENSIONS)
    return candidates
