"""
sjbuild.options - Compound option strings

Extractors and allow-list filtering for 'key=value,...' sub-options,
and the typed server settings built on top of them.
"""

from sjbuild.options.suboptions import (
    extract_string_option,
    extract_int_option,
    extract_boolean_option,
    clean_sub_options,
)
from sjbuild.options.server import (
    SERVER_SUB_OPTIONS,
    ServerSettings,
    strip_flag_prefix,
)

__all__ = [
    # Sub-options
    "extract_string_option",
    "extract_int_option",
    "extract_boolean_option",
    "clean_sub_options",
    # Server
    "SERVER_SUB_OPTIONS",
    "ServerSettings",
    "strip_flag_prefix",
]
