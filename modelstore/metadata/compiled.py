# ==============================================
# CompiledModel
# ==============================================
#
# PURPOSE:
#   The immutable, fully resolved metadata model handed to consumers.
#   Every default is applied: each entity knows its table and schema.
#
# EQUALITY:
#   A model loaded from a store compares equal to the model compiled
#   directly from the descriptor that was saved.
#
# FUNCTION:
# ---------
# - compile_model(descriptor, default_schema) -> CompiledModel
#     Validate the descriptor and resolve all defaults.
#     Raises ModelValidationError on structural problems.
#
# ==============================================

import re
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from modelstore.errors import ModelValidationError
from .descriptor import ModelDescriptor, EntityType, Relationship, MULTIPLICITIES

# Characters that cannot appear in an XML attribute value without being
# rejected or rewritten by the parser (control characters, surrogates, U+FFFE/U+FFFF)
_UNSAFE_TEXT = re.compile(r"[\x00-\x1f\ud800-\udfff\ufffe\uffff]")


@dataclass(frozen=True)
class CompiledProperty:
    name: str
    type_name: str
    nullable: bool
    max_length: Optional[int]


@dataclass(frozen=True)
class CompiledEntity:
    name: str
    table: str
    schema: str
    key: Tuple[str, ...]
    properties: Tuple[CompiledProperty, ...]

    def get_property(self, name: str) -> Optional[CompiledProperty]:
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None


@dataclass(frozen=True)
class CompiledRelationship:
    name: str
    principal: str
    dependent: str
    principal_multiplicity: str
    dependent_multiplicity: str
    foreign_key: Tuple[str, ...]


@dataclass(frozen=True)
class CompiledModel:
    """
    Fully resolved metadata model.

    Attributes:
        namespace: Model namespace
        default_schema: Effective schema for entities without their own
        entities: Compiled entity types, in declaration order
        relationships: Compiled associations, in declaration order
    """
    namespace: str
    default_schema: str
    entities: Tuple[CompiledEntity, ...]
    relationships: Tuple[CompiledRelationship, ...]

    @property
    def entity_names(self) -> Tuple[str, ...]:
        return tuple(entity.name for entity in self.entities)

    def entity(self, name: str) -> Optional[CompiledEntity]:
        """Return the compiled entity with the given name, or None."""
        for entity in self.entities:
            if entity.name == name:
                return entity
        return None

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to a JSON-serializable dictionary (for display).

        Returns:
            Nested dictionaries and lists describing the model
        """
        return {
            "namespace": self.namespace,
            "default_schema": self.default_schema,
            "entities": [
                {
                    "name": entity.name,
                    "table": entity.table,
                    "schema": entity.schema,
                    "key": list(entity.key),
                    "properties": [
                        {
                            "name": prop.name,
                            "type": prop.type_name,
                            "nullable": prop.nullable,
                            "max_length": prop.max_length,
                        }
                        for prop in entity.properties
                    ],
                }
                for entity in self.entities
            ],
            "relationships": [
                {
                    "name": rel.name,
                    "principal": rel.principal,
                    "dependent": rel.dependent,
                    "principal_multiplicity": rel.principal_multiplicity,
                    "dependent_multiplicity": rel.dependent_multiplicity,
                    "foreign_key": list(rel.foreign_key),
                }
                for rel in self.relationships
            ],
        }


# ==============================================
# Compilation
# ==============================================

def compile_model(descriptor: ModelDescriptor, default_schema: str) -> CompiledModel:
    """
    Validate a descriptor and resolve it into a CompiledModel.

    Args:
        descriptor: The model to compile
        default_schema: Fallback schema when the descriptor has none

    Returns:
        The compiled model

    Raises:
        ModelValidationError: If the descriptor is structurally invalid
    """
    if descriptor is None:
        raise ValueError("descriptor must not be None")
    if not descriptor.namespace:
        raise ModelValidationError("Model namespace must not be empty")
    _check_text(descriptor.namespace, "Model namespace")

    model_schema = descriptor.default_schema or default_schema
    if not model_schema:
        raise ModelValidationError("No default schema available for model")
    _check_text(model_schema, "Model schema")

    entities = []
    properties_by_entity: Dict[str, set] = {}
    for entity in descriptor.entities:
        if entity.name in properties_by_entity:
            raise ModelValidationError(f"Duplicate entity type '{entity.name}'")
        compiled = _compile_entity(entity, model_schema)
        properties_by_entity[entity.name] = {p.name for p in compiled.properties}
        entities.append(compiled)

    relationships = []
    seen_relationships = set()
    for relationship in descriptor.relationships:
        if relationship.name in seen_relationships:
            raise ModelValidationError(f"Duplicate relationship '{relationship.name}'")
        _check_text(relationship.name, "Relationship name")
        seen_relationships.add(relationship.name)
        relationships.append(_compile_relationship(relationship, properties_by_entity))

    return CompiledModel(
        namespace=descriptor.namespace,
        default_schema=model_schema,
        entities=tuple(entities),
        relationships=tuple(relationships),
    )


def _compile_entity(entity: EntityType, model_schema: str) -> CompiledEntity:
    if not entity.name:
        raise ModelValidationError("Entity type name must not be empty")
    _check_text(entity.name, "Entity type name")
    if entity.table:
        _check_text(entity.table, f"Table of entity '{entity.name}'")
    if entity.schema:
        _check_text(entity.schema, f"Schema of entity '{entity.name}'")

    properties = []
    names = set()
    for prop in entity.properties:
        if not prop.name or not prop.type_name:
            raise ModelValidationError(
                f"Entity '{entity.name}' has a property without a name or type"
            )
        _check_text(prop.name, f"Property name on entity '{entity.name}'")
        _check_text(prop.type_name, f"Type of property '{prop.name}'")
        if prop.name in names:
            raise ModelValidationError(
                f"Duplicate property '{prop.name}' on entity '{entity.name}'"
            )
        names.add(prop.name)
        properties.append(
            CompiledProperty(prop.name, prop.type_name, prop.nullable, prop.max_length)
        )

    if not entity.key:
        raise ModelValidationError(f"Entity '{entity.name}' has no key")
    for key_name in entity.key:
        if key_name not in names:
            raise ModelValidationError(
                f"Key property '{key_name}' not found on entity '{entity.name}'"
            )

    return CompiledEntity(
        name=entity.name,
        table=entity.table or entity.name,
        schema=entity.schema or model_schema,
        key=tuple(entity.key),
        properties=tuple(properties),
    )


def _compile_relationship(
    relationship: Relationship,
    properties_by_entity: Dict[str, set]
) -> CompiledRelationship:
    for end in (relationship.principal, relationship.dependent):
        if end not in properties_by_entity:
            raise ModelValidationError(
                f"Relationship '{relationship.name}' refers to unknown entity '{end}'"
            )

    for multiplicity in (relationship.principal_multiplicity, relationship.dependent_multiplicity):
        if multiplicity not in MULTIPLICITIES:
            raise ModelValidationError(
                f"Relationship '{relationship.name}' has invalid multiplicity '{multiplicity}'"
            )

    dependent_properties = properties_by_entity[relationship.dependent]
    for fk_name in relationship.foreign_key:
        if fk_name not in dependent_properties:
            raise ModelValidationError(
                f"Foreign key property '{fk_name}' not found on entity "
                f"'{relationship.dependent}'"
            )

    return CompiledRelationship(
        name=relationship.name,
        principal=relationship.principal,
        dependent=relationship.dependent,
        principal_multiplicity=relationship.principal_multiplicity,
        dependent_multiplicity=relationship.dependent_multiplicity,
        foreign_key=tuple(relationship.foreign_key),
    )


def _check_text(value: str, what: str) -> None:
    """Reject text that would not survive being written to and read from .edmx."""
    match = _UNSAFE_TEXT.search(value)
    if match:
        raise ModelValidationError(
            f"{what} contains unsupported character {match.group()!r}: {value!r}"
        )
