# ==============================================
# Model Store Factory
# ==============================================
#
# PURPOSE:
#   Build the configured ModelStore backend so callers don't
#   depend on a concrete class.
#
# USAGE:
# ------
#   from modelstore.persistence import create_model_store
#   store = create_model_store()              # from get_config()
#   store = create_model_store(my_config)     # explicit ModelStoreConfig
#
# ==============================================

from enum import Enum
from typing import Optional

from modelstore.config import ModelStoreConfig, get_config
from .model_store import ModelStore
from .file_model_store import FileModelStore
from .memory_model_store import InMemoryModelStore


class StoreBackend(Enum):
    """Supported model store backends."""
    FILE = "file"
    MEMORY = "memory"


def create_model_store(config: Optional[ModelStoreConfig] = None) -> ModelStore:
    """
    Create a model store from configuration.

    Args:
        config: Store configuration. If None, loads from environment.

    Returns:
        A ModelStore for the configured backend

    Raises:
        ValueError: If the backend name is not supported
    """
    config = config or get_config().store

    try:
        backend = StoreBackend(config.backend.strip().lower())
    except ValueError:
        raise ValueError(f"Unsupported model store backend: {config.backend}")

    if backend == StoreBackend.FILE:
        return FileModelStore(
            config.location,
            indent=config.indent,
            atomic_writes=config.atomic_writes
        )

    return InMemoryModelStore(indent=config.indent)
