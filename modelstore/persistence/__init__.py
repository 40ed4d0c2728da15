# ==============================================
# PERSISTENCE (Compiled model cache)
# ==============================================
#
# This package persists metadata models so that process startup
# can reload them instead of rebuilding.
#
# Modules:
# --------
# - model_store.py         → ModelStore contract + DEFAULT_SCHEMA
# - file_model_store.py    → One .edmx file per consumer type
# - memory_model_store.py  → In-process alternative backend
# - factory.py             → Build the configured backend
#
# ==============================================

from .model_store import ModelStore, DEFAULT_SCHEMA
from .file_model_store import FileModelStore, FILE_EXTENSION
from .memory_model_store import InMemoryModelStore
from .factory import StoreBackend, create_model_store

__all__ = [
    "ModelStore",
    "DEFAULT_SCHEMA",
    "FileModelStore",
    "FILE_EXTENSION",
    "InMemoryModelStore",
    "StoreBackend",
    "create_model_store",
]
