"""Locating flags in an argument vector."""

from typing import Iterable, Optional

from sjbuild.config import get_config


def find_flag_with_prefix(args: Iterable[str], prefix: str) -> Optional[str]:
    """Return the first argument starting with prefix, or None."""
    for arg in args:
        if arg.startswith(prefix):
            return arg
    return None


def find_server_settings(args: Iterable[str], prefix: Optional[str] = None) -> Optional[str]:
    """Locate the setting for the server properties (--server:... by default)."""
    if prefix is None:
        prefix = get_config().server_flag_prefix
    return find_flag_with_prefix(args, prefix)
