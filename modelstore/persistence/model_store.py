# ==============================================
# ModelStore (contract)
# ==============================================
#
# PURPOSE:
#   The minimal surface any persisted-model cache backend exposes,
#   so callers do not depend on the storage medium.
#
# CLASS: ModelStore (ABC)
# -----------------------
#   Stateless — defines capabilities only.
#
#   Methods:
#   --------
#   - try_load(consumer_type) -> CompiledModel | None   (abstract)
#       None is a cache miss, not a failure. Corrupt content raises
#       ModelDeserializationError.
#
#   - save(consumer_type, descriptor) -> None            (abstract)
#       Overwrites whatever was stored for the key.
#
#   - get_default_schema(consumer_type) -> str           (hook)
#       Schema applied to loaded models that carry none.
#       Returns DEFAULT_SCHEMA unless overridden.
#
# ==============================================

from abc import ABC, abstractmethod
from typing import Optional

from modelstore.metadata import CompiledModel, ModelDescriptor
from modelstore.type_identity import ConsumerType

# Process-wide default database schema
DEFAULT_SCHEMA = "dbo"


class ModelStore(ABC):
    """Abstract base class for persisted model caches."""

    @abstractmethod
    def try_load(self, consumer_type: ConsumerType) -> Optional[CompiledModel]:
        """
        Load the model persisted for a consumer type.

        Args:
            consumer_type: The type (or qualified name) owning the model

        Returns:
            The compiled model, or None if nothing is stored for the type
        """
        pass

    @abstractmethod
    def save(self, consumer_type: ConsumerType, descriptor: ModelDescriptor) -> None:
        """
        Persist a model for a consumer type, replacing any previous one.

        Args:
            consumer_type: The type (or qualified name) owning the model
            descriptor: The model to persist
        """
        pass

    def get_default_schema(self, consumer_type: ConsumerType) -> str:
        """
        Get the default database schema used by a consumer type's model.

        Override to derive a context-specific default.
        """
        return DEFAULT_SCHEMA
