# ==============================================
# ModelDescriptor (Data Classes)
# ==============================================
#
# PURPOSE:
#   The intermediate, serializable description of a metadata model.
#   This is what a model builder produces and what a ModelStore saves.
#
# CLASSES:
# --------
# - Property (dataclass)
#     - name: str                → Property name (e.g., "Title")
#     - type_name: str           → Primitive type (e.g., "Int32", "String")
#     - nullable: bool           → Can the column be NULL?
#     - max_length: int | None   → Optional length facet
#
# - EntityType (dataclass)
#     - name: str                → Entity name (e.g., "Blog")
#     - properties: list[Property]
#     - key: list[str]           → Names of the key properties
#     - table: str | None        → Table name, defaults to the entity name
#     - schema: str | None       → Explicit schema, else the model default
#
# - Relationship (dataclass)
#     - name: str                → Association name (e.g., "Blog_Posts")
#     - principal / dependent    → Entity names at each end
#     - principal_multiplicity / dependent_multiplicity → "0..1", "1" or "*"
#     - foreign_key: list[str]   → Dependent properties holding the key
#
# - ModelDescriptor (dataclass)
#     - namespace: str
#     - entities: list[EntityType]
#     - relationships: list[Relationship]
#     - default_schema: str | None → None means "let the store decide"
#
# ==============================================

from dataclasses import dataclass, field
from typing import List, Optional

# Valid association end multiplicities
MULTIPLICITIES = ("0..1", "1", "*")


@dataclass
class Property:
    """A scalar property of an entity type."""
    name: str
    type_name: str
    nullable: bool = True
    max_length: Optional[int] = None


@dataclass
class EntityType:
    """An entity type and the table it maps to."""
    name: str
    properties: List[Property] = field(default_factory=list)
    key: List[str] = field(default_factory=list)
    table: Optional[str] = None
    schema: Optional[str] = None

    def add_property(
        self,
        name: str,
        type_name: str,
        nullable: bool = True,
        max_length: Optional[int] = None,
        is_key: bool = False
    ) -> "EntityType":
        """
        Append a property, optionally marking it as part of the key.

        Returns:
            self, so calls can be chained
        """
        self.properties.append(Property(name, type_name, nullable, max_length))
        if is_key:
            self.key.append(name)
        return self


@dataclass
class Relationship:
    """An association between two entity types."""
    name: str
    principal: str
    dependent: str
    principal_multiplicity: str = "1"
    dependent_multiplicity: str = "*"
    foreign_key: List[str] = field(default_factory=list)


@dataclass
class ModelDescriptor:
    """
    Pre-compilation description of a whole metadata model.

    Leave default_schema as None to let the store's default-schema
    hook supply it when the model is loaded back.
    """
    namespace: str
    entities: List[EntityType] = field(default_factory=list)
    relationships: List[Relationship] = field(default_factory=list)
    default_schema: Optional[str] = None

    def add_entity(self, entity: EntityType) -> EntityType:
        self.entities.append(entity)
        return entity

    def add_relationship(self, relationship: Relationship) -> Relationship:
        self.relationships.append(relationship)
        return relationship

    def entity(self, name: str) -> Optional[EntityType]:
        """Return the entity type with the given name, or None."""
        for entity in self.entities:
            if entity.name == name:
                return entity
        return None
