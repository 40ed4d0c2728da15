# ==============================================
# METADATA MODEL
# ==============================================
#
# This package holds the two shapes a metadata model takes:
#
#   ModelDescriptor  → mutable, serializable, pre-compilation form (save input)
#   CompiledModel    → frozen, fully resolved form (load result)
#
# Modules:
# --------
# - descriptor.py  → Property, EntityType, Relationship, ModelDescriptor
# - compiled.py    → Compiled* dataclasses and compile_model()
#
# ==============================================

from .descriptor import (
    Property,
    EntityType,
    Relationship,
    ModelDescriptor,
    MULTIPLICITIES,
)
from .compiled import (
    CompiledProperty,
    CompiledEntity,
    CompiledRelationship,
    CompiledModel,
    compile_model,
)

__all__ = [
    "Property",
    "EntityType",
    "Relationship",
    "ModelDescriptor",
    "MULTIPLICITIES",
    "CompiledProperty",
    "CompiledEntity",
    "CompiledRelationship",
    "CompiledModel",
    "compile_model",
]
