"""
Assemble the release build configuration.

Reads the keys file (mapping-service API key) and the key file (signing
credentials) from the Android project root and combines them with the toolchain
values. Everything is passed in explicitly; nothing is cached between calls.
"""
import logging
from pathlib import Path
from typing import Union

from .app_config import layout_for, load_app_settings
from .models import AppSettings, BuildVariantConfig, ProjectLayout, ToolchainValues
from .properties import get, load
from .signing import signing_from_properties
from .toolchain import load_toolchain_values

logger = logging.getLogger(__name__)

MAPS_API_KEY = "MAPS_API_KEY"


def assemble_build_config(layout: ProjectLayout, toolchain: ToolchainValues = None,
                          settings: AppSettings = None) -> BuildVariantConfig:
    """
    Build the configuration for the release build type.

    Args:
        layout: Project root and property file names
        toolchain: Values from the build toolchain; resolved from the project if None
        settings: Project settings; defaults if None

    Returns:
        BuildVariantConfig with signing state and manifest placeholders
    """
    settings = settings or AppSettings()
    if toolchain is None:
        toolchain = load_toolchain_values(layout, settings)

    keys = load(layout.keys_path)
    key = load(layout.key_path)
    logger.debug(f"Read {len(keys)} keys from {layout.keys_path}, {len(key)} from {layout.key_path}")

    java_version = str(settings.java_version)
    config = BuildVariantConfig(
        namespace=settings.namespace,
        ndk_version=settings.ndk_version,
        build_type=settings.build_type,
        compile_sdk=toolchain.compile_sdk,
        min_sdk=toolchain.min_sdk,
        target_sdk=toolchain.target_sdk,
        version_code=toolchain.version_code,
        version_name=toolchain.version_name,
        source_compatibility=java_version,
        target_compatibility=java_version,
        jvm_target=java_version,
        manifest_placeholders={MAPS_API_KEY: get(keys, MAPS_API_KEY, "")},
        signing=signing_from_properties(key, layout)
    )
    logger.info(f"Assembled {config.build_type} config for {config.namespace} "
                f"{config.version_name} ({config.version_code}), signing "
                f"{'enabled' if config.signing.enabled else 'disabled'}")
    return config


def assemble_project(root: Union[str, Path], source: Union[str, Path] = None) -> BuildVariantConfig:
    """
    Load settings from config/app.yaml under root and assemble the config.

    Args:
        root: Android project directory holding the property files
        source: Flutter source directory holding pubspec.yaml; from settings if None
    """
    root = Path(root)
    settings = load_app_settings(root)
    layout = layout_for(root, settings, Path(source) if source is not None else None)
    return assemble_build_config(layout, settings=settings)
