"""
Archive locations embedded in classfile diagnostics.

The compiler's file manager describes a class read from an archive as:

    ZipFileIndexFileObject[/opt/jdk/lib/ct.sym(META-INF/sym/rt.jar/java/lang/Runnable.class)]

Only the archive path between the marker and the first '(' is wanted.
The format is owned by the compiler, so everything about it lives in
ArchiveLocationFormat. If the text drifts, extraction returns None.
"""

import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ArchiveLocationFormat:
    """Marker-prefixed '<marker><archive>(<entry>)]' text."""
    marker: str
    entry_open: str = "("

    def extract(self, text: str) -> Optional[str]:
        """Return the archive path, or None if text does not match."""
        if not text.startswith(self.marker):
            return None
        start = len(self.marker)
        end = text.find(self.entry_open, start)
        if end == -1:
            logger.debug(f"Archive marker without entry in {text!r}")
            return None
        return text[start:end]


ZIP_FILE_INDEX_FORMAT = ArchiveLocationFormat(marker="ZipFileIndexFileObject[")


def extract_archive_location(
    text: str,
    location_format: ArchiveLocationFormat = ZIP_FILE_INDEX_FORMAT,
) -> Optional[str]:
    """Extract the jar/zip/ct.sym archive name from a classfile description."""
    return location_format.extract(text)
