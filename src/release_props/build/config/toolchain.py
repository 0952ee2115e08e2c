"""
Values supplied by the application framework's build toolchain.

The framework plugin provides SDK bounds and the version code/name. The
version comes from ``pubspec.yaml`` (``version: 1.2.3+4``) in the Flutter
source directory. ``flutter.versionCode``/``flutter.versionName`` in the
Android project's ``local.properties``, which the framework's tool writes
before each build, override it.
"""
import logging
import re
from pathlib import Path
from typing import Optional, Tuple

import yaml

from .app_config import read_yaml
from .exceptions import AppConfigException
from .models import AppSettings, ProjectLayout, ToolchainValues
from .properties import get, load

logger = logging.getLogger(__name__)

DEFAULT_COMPILE_SDK = 35
DEFAULT_MIN_SDK = 21
DEFAULT_TARGET_SDK = 35
DEFAULT_VERSION_CODE = 1
DEFAULT_VERSION_NAME = "1.0"

LOCAL_PROPERTIES = "local.properties"

_VERSION = re.compile(r"^(?P<name>[^+\s]+)(?:\+(?P<code>\S+))?$")


def parse_version(version: str, source: str = "pubspec.yaml") -> Tuple[str, Optional[int]]:
    """
    Split a pubspec version into name and code.

    Args:
        version: Version string such as '1.2.3+4'
        source: Name used in error messages

    Returns:
        Tuple of (version name, version code or None if there is no build number)

    Raises:
        AppConfigException: If the string is empty or the build number is not an integer
    """
    match = _VERSION.match(version.strip())
    if not match:
        raise AppConfigException(f"Invalid version '{version}' in {source}", path=source)
    code = match.group("code")
    if code is None:
        return match.group("name"), None
    if not code.isdigit():
        raise AppConfigException(
            f"Invalid build number '{code}' in {source}: must be a non-negative integer",
            path=source
        )
    return match.group("name"), int(code)


def _as_int(value: str, key: str, path: Path) -> int:
    try:
        return int(value)
    except ValueError:
        raise AppConfigException(f"'{key}' in {path} must be an integer, got '{value}'", path=str(path))


def load_toolchain_values(layout: ProjectLayout, settings: AppSettings = None) -> ToolchainValues:
    """
    Resolve toolchain values for the project.

    Precedence, lowest to highest: framework defaults, pubspec.yaml,
    local.properties, then SDK overrides from app settings.
    """
    settings = settings or AppSettings()
    version_name = DEFAULT_VERSION_NAME
    version_code = DEFAULT_VERSION_CODE

    # BaseLoader keeps "1.10" as text instead of the float 1.1
    pubspec = read_yaml(layout.pubspec_path, loader=yaml.BaseLoader)
    version = pubspec.get("version")
    if version is not None and not isinstance(version, str):
        raise AppConfigException(f"'version' in {layout.pubspec_path} must be a string",
                                 path=str(layout.pubspec_path))
    if version:
        name, code = parse_version(version, str(layout.pubspec_path))
        version_name = name
        if code is not None:
            version_code = code
        logger.debug(f"Version from pubspec: {version_name} ({version_code})")

    local_path = layout.root / LOCAL_PROPERTIES
    local = load(local_path)
    if get(local, "flutter.versionName") is not None:
        version_name = local["flutter.versionName"]
    if get(local, "flutter.versionCode") is not None:
        version_code = _as_int(local["flutter.versionCode"], "flutter.versionCode", local_path)

    return ToolchainValues(
        compile_sdk=settings.compile_sdk or DEFAULT_COMPILE_SDK,
        min_sdk=settings.min_sdk or DEFAULT_MIN_SDK,
        target_sdk=settings.target_sdk or DEFAULT_TARGET_SDK,
        version_code=version_code,
        version_name=version_name
    )
