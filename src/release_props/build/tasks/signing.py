"""Release signing tasks."""

import sys
from pathlib import Path
from invoke import task

from release_props.build.config.app_config import layout_for, load_app_settings
from release_props.build.config.assembly import assemble_build_config
from release_props.build.config.exceptions import ConfigException
from release_props.build.config.logging import bootstrap_logging
from release_props.build.config.signing import require_signing


@task(help={
    'root': 'Android project directory holding the property files (default: current directory)',
    'source': 'Flutter source directory holding pubspec.yaml (default: parent of root)',
    'debug': 'Enable debug logging'
})
def check_signing(ctx, root=".", source=None, debug=False):
    """
    Check that the release build will be signed.

    Exits non-zero when signing is disabled, the keystore is missing or
    credentials are incomplete.
    """
    bootstrap_logging(debug)
    try:
        settings = load_app_settings(Path(root))
        layout = layout_for(Path(root), settings, Path(source) if source is not None else None)
        config = assemble_build_config(layout, settings=settings)
        signing = require_signing(config.signing, key_file=str(layout.key_path))
    except ConfigException as e:
        print(e.guidance, file=sys.stderr)
        sys.exit(1)

    problems = []
    if not signing.store_file.is_file():
        problems.append(f"keystore not found at {signing.store_file}")
    for name, value in [('keyAlias', signing.key_alias),
                        ('keyPassword', signing.key_password),
                        ('storePassword', signing.store_password)]:
        if value is None:
            problems.append(f"'{name}' is not set")

    if problems:
        print("❌ Release signing is incomplete:", file=sys.stderr)
        for problem in problems:
            print(f"   • {problem}", file=sys.stderr)
        sys.exit(1)

    print(f"✅ Release signing enabled with keystore {signing.store_file} (alias: {signing.key_alias})")
