"""
sjbuild.naming - Identifier and path normalization

Turns module:package identifiers into directory paths and
normalizes drive letters for string comparison.
"""

from sjbuild.naming.identifiers import (
    MODULE_SEPARATOR,
    InvalidIdentifierError,
    to_file_system_path,
    just_package_name,
)
from sjbuild.naming.drive import normalize_drive_letter_case

__all__ = [
    "MODULE_SEPARATOR",
    "InvalidIdentifierError",
    "to_file_system_path",
    "just_package_name",
    "normalize_drive_letter_case",
]
