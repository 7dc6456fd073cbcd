"""One-time platform configuration bootstrap"""
import logging

from quiz_state.config import Settings
from quiz_state.models.quiz import PlatformConfig, PlatformStats
from quiz_state.services.storage import StateStore

logger = logging.getLogger(__name__)

def initialize_platform_config(store: StateStore, settings: Settings) -> bool:
    """
    Write the default platform config and zeroed platform stats.

    Does nothing when a config already exists, so an admin-modified
    configuration is never overwritten.

    Returns:
        bool: True if the defaults were written by this call
    """
    if store.get_platform_config() is not None:
        logger.info("Platform config already initialized")
        return False

    defaults = settings.platform_defaults
    store.put_platform_config(PlatformConfig(
        fee_percentage=defaults.fee_percentage,
        treasury_address=defaults.treasury_address,
        min_fee_threshold=defaults.min_fee_threshold,
        max_fee_cap=defaults.max_fee_cap,
        fees_enabled=defaults.fees_enabled
    ))
    store.put_platform_stats(PlatformStats())
    logger.info(f"Platform config initialized with {defaults.fee_percentage}% fee")
    return True
