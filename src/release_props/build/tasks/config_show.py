"""
Configuration Display Task

Shows the assembled release configuration with diagnostic information.
"""

import hashlib
import logging
import sys
from typing import Any, Dict

import yaml
from invoke import task

from release_props.build.config.assembly import assemble_project
from release_props.build.config.exceptions import ConfigException
from release_props.build.config.logging import bootstrap_logging
from release_props.build.config.models import BuildVariantConfig

logger = logging.getLogger(__name__)

SECRET_FIELDS = ['key_password', 'store_password']


def fingerprint(value: str) -> str:
    """Short SHA-256 fingerprint used in place of a secret value."""
    return hashlib.sha256(value.encode()).hexdigest()[:16]


def _mask(value):
    if value is None:
        return None
    return f"sha256:{fingerprint(value)}"


def config_to_dict(config: BuildVariantConfig, show_secrets: bool = False) -> Dict[str, Any]:
    """Convert the config to plain YAML-friendly data, masking secrets unless asked."""
    data = config.model_dump(mode='json')
    if not show_secrets:
        signing = data['signing']['config']
        for field in SECRET_FIELDS:
            signing[field] = _mask(signing[field])
        data['manifest_placeholders'] = {
            name: _mask(value) if value else value
            for name, value in data['manifest_placeholders'].items()
        }
    return data


@task(help={
    'root': 'Android project directory holding the property files (default: current directory)',
    'source': 'Flutter source directory holding pubspec.yaml (default: parent of root)',
    'show_secrets': 'Print passwords and API keys instead of fingerprints',
    'debug': 'Enable debug logging'
})
def show_config(ctx, root=".", source=None, show_secrets=False, debug=False):
    """
    Show the assembled release configuration.

    Outputs:
        stdout: YAML configuration (parseable)
        stderr: Diagnostic information
    """
    bootstrap_logging(debug)
    try:
        config = assemble_project(root, source)
    except ConfigException as e:
        print(e.guidance, file=sys.stderr)
        sys.exit(1)

    print(f"🔍 Configuration for {config.namespace} ({config.build_type})", file=sys.stderr)
    print(f"📦 Version: {config.version_name} ({config.version_code})", file=sys.stderr)
    print(f"📱 SDK: min {config.min_sdk}, target {config.target_sdk}, compile {config.compile_sdk}",
          file=sys.stderr)
    if config.signing.enabled:
        print(f"🔐 Signing: enabled ({config.signing.config.store_file})", file=sys.stderr)
    else:
        print(f"⚠️  Signing: disabled ('{config.signing.reason}' not set)", file=sys.stderr)
    if not config.manifest_placeholders.get('MAPS_API_KEY'):
        print("⚠️  MAPS_API_KEY is empty", file=sys.stderr)

    yaml.dump(config_to_dict(config, show_secrets), sys.stdout, default_flow_style=False, sort_keys=True)
