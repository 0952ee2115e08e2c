"""
Release configuration loading.
"""

from .assembly import assemble_build_config, assemble_project
from .exceptions import (
    ConfigException,
    PropertyParseException,
    SigningDisabledException,
    AppConfigException
)
from .models import (
    BuildVariantConfig,
    ProjectLayout,
    PropertyFile,
    SigningConfig,
    SigningDisabled,
    SigningEnabled,
    ToolchainValues
)
from .properties import get, load, load_all, read_property_file
from .signing import require_signing, signing_from_properties

__all__ = [
    'assemble_build_config',
    'assemble_project',
    'ConfigException',
    'PropertyParseException',
    'SigningDisabledException',
    'AppConfigException',
    'BuildVariantConfig',
    'ProjectLayout',
    'PropertyFile',
    'SigningConfig',
    'SigningDisabled',
    'SigningEnabled',
    'ToolchainValues',
    'get',
    'load',
    'load_all',
    'read_property_file',
    'require_signing',
    'signing_from_properties'
]
