"""
sjbuild - Build front end helpers

Parses compound option strings (--server:id=foo,portfile=bar) and
module-qualified package identifiers (jdk.base:java.foo.bar) for a
javac build front end.
"""

__version__ = "0.1.0"
__author__ = "sjbuild contributors"

from sjbuild.options import (
    extract_string_option,
    extract_int_option,
    extract_boolean_option,
    clean_sub_options,
    ServerSettings,
)
from sjbuild.naming import (
    InvalidIdentifierError,
    to_file_system_path,
    just_package_name,
    normalize_drive_letter_case,
)
from sjbuild.accumulators import add_to_map_of_sets, add_to_map_of_lists
from sjbuild.scanners import (
    find_flag_with_prefix,
    find_server_settings,
    extract_archive_location,
)
