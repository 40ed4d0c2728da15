# ==============================================
# InMemoryModelStore
# ==============================================
#
# PURPOSE:
#   A ModelStore that keeps serialized .edmx bytes in a dict.
#   Useful for tests and for processes that only want to skip
#   rebuilding within their own lifetime.
#
# NOTES:
# ------
# - Models go through the same writer/reader as FileModelStore,
#   so a load returns exactly what the file backend would.
# - Nothing survives the process.
#
# ==============================================

import io
from typing import Dict, List, Optional

from modelstore.metadata import CompiledModel, ModelDescriptor, compile_model
from modelstore.serialization import read_edmx, to_edmx_bytes
from modelstore.type_identity import ConsumerType, type_key
from .model_store import ModelStore


class InMemoryModelStore(ModelStore):
    """Keeps persisted models in process memory, keyed by type identity."""

    def __init__(self, indent: int = 2):
        """
        Initialize an empty in-memory store.

        Args:
            indent: Spaces per XML indentation level
        """
        self._indent = indent
        self._entries: Dict[str, bytes] = {}

    def try_load(self, consumer_type: ConsumerType) -> Optional[CompiledModel]:
        """Load the model stored for a consumer type, or None on a miss."""
        key = type_key(consumer_type)
        data = self._entries.get(key)
        if data is None:
            return None

        with io.BytesIO(data) as stream:
            stream.name = key
            return read_edmx(stream, self.get_default_schema(consumer_type))

    def save(self, consumer_type: ConsumerType, descriptor: ModelDescriptor) -> None:
        """Validate and store a model, replacing any previous entry."""
        if descriptor is None:
            raise ValueError("descriptor must not be None")

        key = type_key(consumer_type)
        compile_model(descriptor, self.get_default_schema(consumer_type))
        self._entries[key] = to_edmx_bytes(descriptor, indent=self._indent)

    def get_raw(self, consumer_type: ConsumerType) -> Optional[bytes]:
        """Return the stored bytes for a consumer type, or None."""
        return self._entries.get(type_key(consumer_type))

    def keys(self) -> List[str]:
        """Return the stored keys, sorted."""
        return sorted(self._entries)

    def __len__(self) -> int:
        """Number of stored models."""
        return len(self._entries)
