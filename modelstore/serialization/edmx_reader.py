# ==============================================
# EDMX Reader
# ==============================================
#
# PURPOSE:
#   Parse the .edmx XML format written by edmx_writer back into a
#   ModelDescriptor, and compile it into a CompiledModel.
#
# FUNCTIONS:
# ----------
# - read_descriptor(source) -> ModelDescriptor
#     Parse only. source is a path or a binary file object.
#
# - read_edmx(source, default_schema) -> CompiledModel
#     Parse and compile. default_schema fills in for a model
#     that carries no explicit Schema attribute.
#
# ERRORS:
# -------
#   Anything that stops the content from becoming a valid model
#   (bad XML, wrong root, missing attributes, bad facet values,
#   failed validation) raises ModelDeserializationError.
#
# ==============================================

import os
import xml.etree.ElementTree as ET
from typing import BinaryIO, List, Optional, Union

from modelstore.errors import ModelDeserializationError, ModelValidationError
from modelstore.metadata import (
    CompiledModel,
    EntityType,
    ModelDescriptor,
    Property,
    Relationship,
    compile_model,
)

EdmxSource = Union[str, os.PathLike, BinaryIO]


def read_descriptor(source: EdmxSource) -> ModelDescriptor:
    """
    Parse EDMX content into a ModelDescriptor.

    Args:
        source: File path or binary file object

    Returns:
        The parsed descriptor

    Raises:
        ModelDeserializationError: If the content is not a valid EDMX document
    """
    source_name = _describe(source)

    try:
        root = ET.parse(source).getroot()
    except ET.ParseError as e:
        raise ModelDeserializationError(f"Malformed EDMX: {e}", source_name) from e

    if root.tag != "Edmx":
        raise ModelDeserializationError(
            f"Expected <Edmx> root element, found <{root.tag}>", source_name
        )

    model = root.find("Model")
    if model is None:
        raise ModelDeserializationError("Missing <Model> element", source_name)

    descriptor = ModelDescriptor(
        namespace=_required(model, "Namespace", source_name),
        default_schema=model.get("Schema"),
    )

    for element in model.findall("EntityType"):
        descriptor.add_entity(_read_entity(element, source_name))

    for element in model.findall("Association"):
        descriptor.add_relationship(_read_relationship(element, source_name))

    return descriptor


def read_edmx(source: EdmxSource, default_schema: str) -> CompiledModel:
    """
    Parse EDMX content and compile it.

    Args:
        source: File path or binary file object
        default_schema: Schema applied when the document omits one

    Returns:
        The compiled model

    Raises:
        ModelDeserializationError: If the content does not form a valid model
    """
    descriptor = read_descriptor(source)
    try:
        return compile_model(descriptor, default_schema)
    except ModelValidationError as e:
        raise ModelDeserializationError(f"Invalid model: {e}", _describe(source)) from e


# ======================================
# Element helpers
# ======================================

def _read_entity(element: ET.Element, source_name: Optional[str]) -> EntityType:
    entity = EntityType(
        name=_required(element, "Name", source_name),
        table=element.get("Table"),
        schema=element.get("Schema"),
    )

    key = element.find("Key")
    if key is not None:
        entity.key = _property_refs(key, source_name)

    for prop in element.findall("Property"):
        entity.properties.append(Property(
            name=_required(prop, "Name", source_name),
            type_name=_required(prop, "Type", source_name),
            nullable=_parse_bool(prop.get("Nullable", "true"), source_name),
            max_length=_parse_int(prop.get("MaxLength"), source_name),
        ))

    return entity


def _read_relationship(element: ET.Element, source_name: Optional[str]) -> Relationship:
    relationship = Relationship(
        name=_required(element, "Name", source_name),
        principal=_required(element, "Principal", source_name),
        dependent=_required(element, "Dependent", source_name),
        principal_multiplicity=element.get("PrincipalMultiplicity", "1"),
        dependent_multiplicity=element.get("DependentMultiplicity", "*"),
    )

    foreign_key = element.find("ForeignKey")
    if foreign_key is not None:
        relationship.foreign_key = _property_refs(foreign_key, source_name)

    return relationship


def _property_refs(element: ET.Element, source_name: Optional[str]) -> List[str]:
    return [_required(ref, "Name", source_name) for ref in element.findall("PropertyRef")]


def _required(element: ET.Element, attribute: str, source_name: Optional[str]) -> str:
    value = element.get(attribute)
    if not value:
        raise ModelDeserializationError(
            f"<{element.tag}> is missing required attribute '{attribute}'", source_name
        )
    return value


def _parse_bool(value: str, source_name: Optional[str]) -> bool:
    if value == "true":
        return True
    if value == "false":
        return False
    raise ModelDeserializationError(f"Invalid boolean value '{value}'", source_name)


def _parse_int(value: Optional[str], source_name: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError as e:
        raise ModelDeserializationError(f"Invalid integer value '{value}'", source_name) from e


def _describe(source: EdmxSource) -> Optional[str]:
    name = source if isinstance(source, (str, os.PathLike)) else getattr(source, "name", None)
    if isinstance(name, (str, os.PathLike)):
        return os.fspath(name)
    return None
