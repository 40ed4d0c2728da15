# ==============================================
# ModelCache — Load-or-build orchestrator
# ==============================================
#
# PURPOSE:
#   The caller side of a ModelStore. Before running the expensive
#   model build for a consumer type, ask the store for a persisted
#   copy. On a miss, build it, save it, and hand it out.
#
# FLOW:
# -----
#   get_model(consumer_type)
#     1. store.try_load(consumer_type)
#          hit  → return it, builder is never called
#          miss → continue
#     2. descriptor = builder(consumer_type)
#     3. store.save(consumer_type, descriptor)
#     4. return compile_model(descriptor, store default schema)
#
#   A corrupt persisted model raises ModelDeserializationError.
#   With rebuild_on_corruption=True it is reported and overwritten
#   instead.
#
# CLASS: ModelCache
# -----------------
#   Attributes:
#   -----------
#   - _store: ModelStore
#   - _builder: Callable[[consumer_type], ModelDescriptor]
#   - _rebuild_on_corruption: bool
#   - _hits / _misses / _rebuilds: int
#
# ==============================================

from typing import Any, Callable, Dict

from modelstore.errors import ModelDeserializationError
from modelstore.metadata import CompiledModel, ModelDescriptor, compile_model
from modelstore.persistence import ModelStore
from modelstore.type_identity import ConsumerType, type_key

ModelBuilder = Callable[[ConsumerType], ModelDescriptor]


class ModelCache:
    """
    Hands out compiled models, reloading persisted ones when available.
    """

    def __init__(
        self,
        store: ModelStore,
        builder: ModelBuilder,
        rebuild_on_corruption: bool = False
    ):
        """
        Initialize the cache.

        Args:
            store: Where compiled models are persisted
            builder: Produces a ModelDescriptor for a consumer type (expensive)
            rebuild_on_corruption: Rebuild instead of raising when a stored
                model cannot be read
        """
        if store is None:
            raise ValueError("store must not be None")
        if builder is None:
            raise ValueError("builder must not be None")

        self._store = store
        self._builder = builder
        self._rebuild_on_corruption = rebuild_on_corruption

        self._hits = 0
        self._misses = 0
        self._rebuilds = 0

    @property
    def store(self) -> ModelStore:
        return self._store

    def get_model(self, consumer_type: ConsumerType) -> CompiledModel:
        """
        Return the compiled model for a consumer type.

        Args:
            consumer_type: A class or qualified name

        Returns:
            The persisted model if one exists, else a freshly built one

        Raises:
            ModelDeserializationError: If the stored model is corrupt and
                rebuild_on_corruption is off
        """
        key = type_key(consumer_type)

        try:
            model = self._store.try_load(consumer_type)
        except ModelDeserializationError as e:
            if not self._rebuild_on_corruption:
                raise
            print(f"⚠ Stored model for '{key}' is unreadable, rebuilding: {e}")
            self._rebuilds += 1
            return self._build_and_save(consumer_type)

        if model is not None:
            self._hits += 1
            print(f"✓ Loaded model for '{key}' from store")
            return model

        self._misses += 1
        print(f"✓ No stored model for '{key}', building")
        return self._build_and_save(consumer_type)

    def _build_and_save(self, consumer_type: ConsumerType) -> CompiledModel:
        descriptor = self._builder(consumer_type)
        if descriptor is None:
            raise ValueError(f"Builder returned no model for '{type_key(consumer_type)}'")

        self._store.save(consumer_type, descriptor)
        print(f"✓ Saved model for '{type_key(consumer_type)}' "
              f"({len(descriptor.entities)} entities)")

        return compile_model(descriptor, self._store.get_default_schema(consumer_type))

    def get_stats(self) -> Dict[str, Any]:
        """
        Return hit/miss counters.

        Returns:
            Dictionary with hits, misses, rebuilds and the store repr
        """
        return {
            "hits": self._hits,
            "misses": self._misses,
            "rebuilds": self._rebuilds,
            "store": repr(self._store),
        }
