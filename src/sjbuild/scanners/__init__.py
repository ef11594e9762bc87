"""
sjbuild.scanners - Argument and diagnostic scanners
"""

from sjbuild.scanners.args import find_flag_with_prefix, find_server_settings
from sjbuild.scanners.diagnostics import (
    ArchiveLocationFormat,
    ZIP_FILE_INDEX_FORMAT,
    extract_archive_location,
)

__all__ = [
    "find_flag_with_prefix",
    "find_server_settings",
    "ArchiveLocationFormat",
    "ZIP_FILE_INDEX_FORMAT",
    "extract_archive_location",
]
