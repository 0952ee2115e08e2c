"""
Release signing derived from the key file.
"""
import logging
from typing import Dict

from .exceptions import SigningDisabledException
from .models import ProjectLayout, SigningConfig, SigningDisabled, SigningEnabled, SigningState
from .properties import get

logger = logging.getLogger(__name__)

STORE_FILE = "storeFile"
STORE_PASSWORD = "storePassword"
KEY_ALIAS = "keyAlias"
KEY_PASSWORD = "keyPassword"


def signing_from_properties(props: Dict[str, str], layout: ProjectLayout) -> SigningState:
    """
    Derive the signing state from key file properties.

    Signing is enabled only when ``storeFile`` is present; the store file is
    resolved against the project root. Missing passwords or alias stay None
    and are left for the signing step to report.
    """
    store_file = get(props, STORE_FILE)
    config = SigningConfig(
        key_alias=get(props, KEY_ALIAS),
        key_password=get(props, KEY_PASSWORD),
        store_file=layout.resolve(store_file) if store_file is not None else None,
        store_password=get(props, STORE_PASSWORD)
    )

    if config.store_file is None:
        logger.info(f"Release signing disabled: '{STORE_FILE}' not set in {layout.key_path}")
        return SigningDisabled(config=config, reason=STORE_FILE)

    missing = [name for name, value in [
        (KEY_ALIAS, config.key_alias),
        (KEY_PASSWORD, config.key_password),
        (STORE_PASSWORD, config.store_password)
    ] if value is None]
    if missing:
        logger.warning(f"Signing credentials missing from {layout.key_path}: {', '.join(missing)}")

    logger.debug(f"Release signing enabled with keystore {config.store_file}")
    return SigningEnabled(config=config)


def require_signing(state: SigningState, key_file: str = None) -> SigningConfig:
    """Return the signing config, or raise if signing is disabled."""
    if isinstance(state, SigningDisabled):
        raise SigningDisabledException(
            f"Release signing is disabled: '{state.reason}' is not set",
            key_file=key_file,
            missing=state.reason
        )
    return state.config
