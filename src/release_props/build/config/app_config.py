"""
App configuration loading utilities.
"""
import logging
from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import ValidationError

from .exceptions import AppConfigException
from .models import AppSettings, ProjectLayout

logger = logging.getLogger(__name__)


def read_yaml(path: Path, loader=yaml.SafeLoader) -> Dict[str, Any]:
    """
    Read a YAML mapping from disk.

    Args:
        path: File to read
        loader: PyYAML loader class; yaml.BaseLoader keeps every scalar as text

    Returns:
        Parsed mapping, or {} if the file is missing or empty

    Raises:
        AppConfigException: If the file is not valid YAML or not a mapping
    """
    if not path.exists():
        logger.debug(f"Config file not found: {path}")
        return {}

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.load(f, Loader=loader)
    except yaml.YAMLError as e:
        raise AppConfigException(f"Invalid YAML in {path}: {e}", path=str(path))

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise AppConfigException(f"{path} must contain a mapping", path=str(path))
    return data


def load_app_settings(root: Path) -> AppSettings:
    """
    Load project settings from config/app.yaml under root.

    Missing file means defaults.

    Raises:
        AppConfigException: If the file holds invalid values
    """
    path = ProjectLayout(root=root).app_config_path
    data = read_yaml(path)
    try:
        settings = AppSettings(**data)
    except ValidationError as e:
        raise AppConfigException(f"Invalid settings in {path}: {e}", path=str(path))
    logger.debug(f"App settings: namespace={settings.namespace}, build_type={settings.build_type}")
    return settings


def layout_for(root: Path, settings: AppSettings, source: Path = None) -> ProjectLayout:
    """
    Build the project layout using the file names from settings.

    The Flutter source directory is source if given, else flutter_source
    from settings resolved against root.
    """
    if source is None:
        source = (root / settings.flutter_source).absolute()
    return ProjectLayout(root=root, source=source, keys_file=settings.keys_file,
                         key_file=settings.key_file)
