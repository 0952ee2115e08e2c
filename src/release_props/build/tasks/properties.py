"""Property file tasks.

Inspect the local property files without printing secret values unless asked."""

import sys
from pathlib import Path
from invoke import task

from release_props.build.config.exceptions import ConfigException
from release_props.build.config.logging import bootstrap_logging
from release_props.build.config.properties import read_property_file


@task(help={
    'file': 'Property file, relative to root (e.g. key.properties)',
    'root': 'Android project directory (default: current directory)',
    'strict': 'Fail on malformed lines instead of skipping them',
    'debug': 'Enable debug logging'
})
def list_properties(ctx, file, root=".", strict=False, debug=False):
    """
    List the keys defined in a property file.

    Examples:
        invoke list-properties key.properties
        invoke list-properties keys.properties --strict
    """
    bootstrap_logging(debug)
    try:
        props = read_property_file(Path(root) / file, strict=strict)
    except ConfigException as e:
        print(e.guidance, file=sys.stderr)
        sys.exit(1)

    if not props.exists:
        print(f"⚠️  {props.path} not found (treated as empty)", file=sys.stderr)
    for issue in props.issues:
        print(f"⚠️  line {issue.line_number} skipped: {issue.reason}", file=sys.stderr)

    for key in props.as_dict():
        print(key)


@task(help={
    'key': 'Property name',
    'file': 'Property file, relative to root (e.g. keys.properties)',
    'default': 'Value to print when the property is absent',
    'root': 'Android project directory (default: current directory)',
    'debug': 'Enable debug logging'
})
def get_property(ctx, key, file, default=None, root=".", debug=False):
    """
    Print a single property value.

    Exits non-zero when the property is absent and no default is given.
    """
    bootstrap_logging(debug)
    try:
        props = read_property_file(Path(root) / file)
    except ConfigException as e:
        print(e.guidance, file=sys.stderr)
        sys.exit(1)

    value = props.get(key, default)
    if value is None:
        print(f"❌ '{key}' is not set in {props.path}", file=sys.stderr)
        sys.exit(1)
    print(value)
