"""
CLI entry point for sjbuild.

Usage:
    sjbuild get <key> <options>          Extract one sub-option value
    sjbuild clean <options> --allow K    Keep only allowed sub-options
    sjbuild pkg-path <id>                Identifier to directory path
    sjbuild pkg-name <id>                Package part of an identifier
    sjbuild drive <path>                 Upper-case the drive letter
    sjbuild archive <text>               Archive path from a classfile description
    sjbuild server <args...>             Show parsed --server: settings
    sjbuild init-config [path]           Write a default config file
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from sjbuild import __version__
from sjbuild.config import SjbuildConfigError, get_config

logger = logging.getLogger(__name__)


def _print_optional(value):
    """Print value, or report that nothing was found."""
    if value is None:
        print("(none)", file=sys.stderr)
        return 1
    print(value)
    return 0


def cmd_get(args):
    """Extract one sub-option value."""
    from .options import extract_string_option, extract_int_option, extract_boolean_option

    if args.type == "int":
        try:
            default = int(args.default) if args.default is not None else 0
        except ValueError:
            print(f"Error: --default must be an integer, got {args.default!r}", file=sys.stderr)
            return 2
        print(extract_int_option(args.key, args.options, default))
        return 0

    if args.type == "bool":
        default = args.default == "true"
        print("true" if extract_boolean_option(args.key, args.options, default) else "false")
        return 0

    return _print_optional(extract_string_option(args.key, args.options, args.default))


def cmd_clean(args):
    """Keep only allowed sub-options."""
    from .options import clean_sub_options

    print(clean_sub_options(set(args.allow), args.options))
    return 0


def cmd_pkg_path(args):
    """Convert an identifier into a directory path."""
    from .naming import to_file_system_path

    return _print_optional(to_file_system_path(args.id))


def cmd_pkg_name(args):
    """Print the package part of an identifier."""
    from .naming import just_package_name, InvalidIdentifierError

    try:
        print(just_package_name(args.id))
    except InvalidIdentifierError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def cmd_drive(args):
    """Upper-case the drive letter of a path."""
    from .naming import normalize_drive_letter_case

    print(normalize_drive_letter_case(args.path))
    return 0


def cmd_archive(args):
    """Extract the archive path from a classfile description."""
    from .scanners import ArchiveLocationFormat, extract_archive_location

    location_format = ArchiveLocationFormat(marker=get_config().archive_marker)
    return _print_optional(extract_archive_location(args.text, location_format))


def cmd_server(args):
    """Locate the --server: argument and show its settings."""
    from .options import ServerSettings
    from .scanners import find_server_settings

    flag = find_server_settings(args.args)
    if flag is None:
        print(f"No {get_config().server_flag_prefix} argument found", file=sys.stderr)
        return 1

    settings = ServerSettings.from_option_string(flag)
    if args.json:
        print(json.dumps(settings.to_dict(), indent=2))
    else:
        print(settings.to_option_string())
    return 0


def cmd_init_config(args):
    """Write a default config file."""
    from .config import write_default_config

    target = args.path or Path.home() / ".sjbuild" / "config.yaml"
    if target.exists() and not args.force:
        print(f"Error: {target} already exists (use --force)", file=sys.stderr)
        return 1
    path = write_default_config(target)
    print(f"Wrote: {path}")
    return 0


def build_parser():
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="sjbuild",
        description="Build front end option and identifier helpers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    sjbuild get portfile "id=foo,portfile=/tmp/port"
    sjbuild clean "id=foo,portfile=bar" --allow portfile
    sjbuild pkg-path jdk.base:java.foo.bar
    sjbuild server -- -d out --server:portfile=/tmp/port,poolsize=4
"""
    )

    parser.add_argument('--version', action='version', version=f'sjbuild {__version__}')
    parser.add_argument('-c', '--config', type=Path, help='Config file (YAML)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # get
    get_p = subparsers.add_parser('get', help='Extract a sub-option')
    get_p.add_argument('key', help='Sub-option name')
    get_p.add_argument('options', help='Compound option string')
    get_p.add_argument('-t', '--type', choices=['str', 'int', 'bool'], default='str')
    get_p.add_argument('-d', '--default', help='Value when the key is absent')
    get_p.set_defaults(func=cmd_get)

    # clean
    clean_p = subparsers.add_parser('clean', help='Filter sub-options by key')
    clean_p.add_argument('options', help='Compound option string')
    clean_p.add_argument('-a', '--allow', action='append', default=[], help='Allowed key (repeatable)')
    clean_p.set_defaults(func=cmd_clean)

    # pkg-path
    pkg_path_p = subparsers.add_parser('pkg-path', help='Identifier to directory path')
    pkg_path_p.add_argument('id', help='module:package identifier')
    pkg_path_p.set_defaults(func=cmd_pkg_path)

    # pkg-name
    pkg_name_p = subparsers.add_parser('pkg-name', help='Package part of an identifier')
    pkg_name_p.add_argument('id', help='module:package identifier')
    pkg_name_p.set_defaults(func=cmd_pkg_name)

    # drive
    drive_p = subparsers.add_parser('drive', help='Normalize drive letter case')
    drive_p.add_argument('path', help='Path string')
    drive_p.set_defaults(func=cmd_drive)

    # archive
    archive_p = subparsers.add_parser('archive', help='Archive from a classfile description')
    archive_p.add_argument('text', help='Classfile description')
    archive_p.set_defaults(func=cmd_archive)

    # server
    server_p = subparsers.add_parser('server', help='Show --server: settings')
    server_p.add_argument('args', nargs='*', help='Compiler arguments')
    server_p.add_argument('--json', action='store_true', help='Print as JSON')
    server_p.set_defaults(func=cmd_server)

    # init-config
    init_p = subparsers.add_parser('init-config', help='Write a default config file')
    init_p.add_argument('path', nargs='?', type=Path, help='Target (default ~/.sjbuild/config.yaml)')
    init_p.add_argument('-f', '--force', action='store_true', help='Overwrite an existing file')
    init_p.set_defaults(func=cmd_init_config)

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = get_config(args.config)
    except SjbuildConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    level = logging.DEBUG if args.verbose else getattr(logging, config.log_level, logging.WARNING)
    logging.basicConfig(level=level, format='%(levelname)s %(name)s: %(message)s')

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
