#!/usr/bin/env python3
"""
Print a configuration setting, parsed the way the application would read it.

**Conceptual**: Handy for checking a deployment's environment or a local .env
file before starting the application: if this script can read and parse a
setting, so can the code that uses SettingsAccessor.

**Usage**:
    # Raw string value from the environment (+ project .env)
    python actions/show_setting.py DATABASE_HOST

    # Parse as int, falling back to 8080 when unset
    python actions/show_setting.py PORT --type int --default 8080

    # Comma-separated list / key:value map
    python actions/show_setting.py ALLOWED_HOSTS --type list
    python actions/show_setting.py ROUTE_WEIGHTS --type map

    # Read from a specific .env file (its values override the environment)
    python actions/show_setting.py DATABASE_URL --type connection --env-file deploy/.env.staging

**Exit codes**:
    - 0: Setting found and parsed
    - 1: Setting missing or malformed
    - 2: Bad arguments (e.g. --env-file does not exist)
"""

import argparse
import datetime as dt
import sys
from pathlib import Path

# Add project root to Python path so we can import configutils modules
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from configutils.config.accessor import SettingsAccessor
from configutils.config.errors import ParseError, SettingsError
from configutils.config.settings import get_settings
from configutils.config.stores import ChainStore, DotenvStore, EnvironmentStore


SCALAR_TYPES = {
    "str": str,
    "int": int,
    "float": float,
    "bool": bool,
    "timedelta": dt.timedelta,
}

COMPOSITE_TYPES = ("list", "map", "connection")


def build_accessor(env_file):
    """Accessor over the env file (if given) layered on top of the environment."""
    if env_file is None:
        return get_settings()
    return SettingsAccessor(ChainStore(DotenvStore(env_file), EnvironmentStore()))


def format_setting(settings: SettingsAccessor, key: str, kind: str, default=None) -> str:
    """
    Read key as kind and render it for display.

    Args:
        settings: Accessor to read from.
        key: Setting name.
        kind: One of SCALAR_TYPES or COMPOSITE_TYPES.
        default: Typed value used when the key is unset (scalar kinds only).
                None means a missing key is an error.

    Raises:
        SettingsError: If the setting is missing or malformed.
    """
    if kind == "list":
        return "\n".join(settings.get_list(key))

    if kind == "map":
        return "\n".join(f"{k}={v}" for k, v in settings.get_map(key).items())

    if kind == "connection":
        connection = settings.get_required_connection(key)
        if connection.provider_name:
            return f"{connection} (provider: {connection.provider_name})"
        return str(connection)

    type_ = SCALAR_TYPES[kind]
    if default is None:
        # No fallback: a missing key is an error, same as get_required()
        settings.get_required(key)
        value = settings.get_typed(key, None, type_)
    else:
        value = settings.get_typed(key, default, type_)
    return str(value)


def main(argv=None) -> int:
    """
    Main entry point for the show-setting script.

    Returns:
        Process exit code (see module docstring).
    """
    parser = argparse.ArgumentParser(
        description="Print a configuration setting parsed as a given type",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument("key", help="Setting name, e.g. PORT")

    parser.add_argument(
        "--type",
        dest="kind",
        choices=list(SCALAR_TYPES) + list(COMPOSITE_TYPES),
        default="str",
        help="How to parse the value. Default: str.",
    )

    parser.add_argument(
        "--default",
        type=str,
        default=None,
        help="Fallback text when the setting is unset (scalar types only).",
    )

    parser.add_argument(
        "--env-file",
        type=str,
        default=None,
        help="Read this .env file instead of the project .env. Default: project .env.",
    )

    args = parser.parse_args(argv)

    if args.default is not None and args.kind in COMPOSITE_TYPES:
        print(f"ERROR: --default is not supported for --type {args.kind}.")
        return 2

    try:
        settings = build_accessor(args.env_file)
    except FileNotFoundError as e:
        print(f"ERROR: {e}")
        return 2

    default = None
    if args.default is not None:
        try:
            default = settings.registry.parse(SCALAR_TYPES[args.kind], args.default)
        except ParseError as e:
            print(f"ERROR: invalid --default: {e}")
            return 2

    try:
        print(format_setting(settings, args.key, args.kind, default))
    except SettingsError as e:
        print(f"ERROR: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
