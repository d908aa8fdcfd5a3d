"""Storage strategy bootstrap for taskpad.

Usage Pattern:
    from taskpad.services.context_manager import get_strategy_context

    strategy = get_strategy_context()
    tasks = await strategy.task_repository.list_all()

The strategy is built once per process from the active configuration and
cached; ``get_strategy_context.cache_clear()`` is the explicit reset hook.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from taskpad.config import get_config_manager
from taskpad.models.storage_strategy import (
    JsonFileStorageStrategy,
    MemoryStorageStrategy,
    StorageStrategy,
)
from taskpad.utils.clock import make_clock

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_strategy_context(profile: str = "default") -> StorageStrategy:
    """Get a cached StorageStrategy for the active configuration.

    Returns:
        StorageStrategy: Configured strategy with both repositories
    """
    manager = get_config_manager(profile)
    config = manager.config
    clock = make_clock(config.ui.timezone)
    storage = config.storage

    if storage.backend == "memory":
        strategy: StorageStrategy = MemoryStorageStrategy(
            seed=storage.seed, latency=storage.latency, clock=clock
        )
    else:
        strategy = JsonFileStorageStrategy(
            manager.data_file, seed=storage.seed, latency=storage.latency, clock=clock
        )

    logger.info("storage ready: %s (profile=%s)", strategy.storage_type, profile)
    return strategy
