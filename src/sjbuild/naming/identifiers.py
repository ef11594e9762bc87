"""
Module-qualified package identifiers.

An identifier names a package inside a module:

    jdk.base:java.foo.bar    package java.foo.bar in module jdk.base
    :java.foo.bar            package java.foo.bar in the unnamed module
"""

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

MODULE_SEPARATOR = ":"


class InvalidIdentifierError(ValueError):
    """Identifier has no module separator."""
    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Expected '{MODULE_SEPARATOR}' in package name ({identifier})")


def to_file_system_path(identifier: Optional[str], sep: str = os.sep) -> Optional[str]:
    """
    Convert an identifier into a relative directory path.

        jdk.base:java.foo.bar  ->  jdk.base/java/foo/bar
        :java.foo.bar          ->  java/foo/bar

    The module name is kept verbatim, only the package dots become
    separators. An identifier without ':' is treated as a bare package.

    Returns None for None or empty input.
    """
    if not identifier:
        return None

    if identifier.startswith(MODULE_SEPARATOR):
        # Unnamed module: no module directory to prepend
        return identifier[1:].replace(".", sep)

    module, found, package = identifier.partition(MODULE_SEPARATOR)
    if not found:
        logger.debug(f"Identifier {identifier!r} has no module part")
        return identifier.replace(".", sep)
    return module + sep + package.replace(".", sep)


def just_package_name(identifier: str) -> str:
    """Return the package part of 'module:package'."""
    _, found, package = identifier.partition(MODULE_SEPARATOR)
    if not found:
        raise InvalidIdentifierError(identifier)
    return package
