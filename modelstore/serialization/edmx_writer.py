# ==============================================
# EDMX Writer
# ==============================================
#
# PURPOSE:
#   Serialize a ModelDescriptor into the .edmx XML format.
#
# OUTPUT:
# -------
#   <?xml version='1.0' encoding='utf-8'?>
#   <Edmx Version="1.0">
#     <Model Namespace="MyApp">
#       <EntityType Name="Blog">
#         <Key>
#           <PropertyRef Name="Id" />
#         </Key>
#         <Property Name="Id" Type="Int32" Nullable="false" />
#       </EntityType>
#       <Association Name="..." Principal="..." Dependent="..." ...>
#         <ForeignKey>
#           <PropertyRef Name="BlogId" />
#         </ForeignKey>
#       </Association>
#     </Model>
#   </Edmx>
#
# NOTES:
# ------
# - Optional attributes (Schema, Table, MaxLength) are omitted when unset.
#   A missing Schema is what lets the reader fall back to a default.
# - Output is deterministic: same descriptor, same bytes.
#
# ==============================================

import io
import xml.etree.ElementTree as ET
from typing import BinaryIO

from modelstore.metadata import ModelDescriptor, EntityType, Relationship

EDMX_VERSION = "1.0"


def build_edmx_tree(descriptor: ModelDescriptor) -> ET.ElementTree:
    """
    Build the XML element tree for a descriptor.

    Args:
        descriptor: The model to serialize

    Returns:
        An ElementTree rooted at <Edmx>
    """
    root = ET.Element("Edmx", {"Version": EDMX_VERSION})

    model = ET.SubElement(root, "Model", {"Namespace": descriptor.namespace})
    if descriptor.default_schema:
        model.set("Schema", descriptor.default_schema)

    for entity in descriptor.entities:
        _write_entity(model, entity)

    for relationship in descriptor.relationships:
        _write_relationship(model, relationship)

    return ET.ElementTree(root)


def write_edmx(descriptor: ModelDescriptor, stream: BinaryIO, indent: int = 2) -> None:
    """
    Write a descriptor as indented UTF-8 XML into a binary stream.

    Args:
        descriptor: The model to serialize
        stream: Binary file object to write into
        indent: Spaces per indentation level
    """
    if descriptor is None:
        raise ValueError("descriptor must not be None")

    tree = build_edmx_tree(descriptor)
    ET.indent(tree, space=" " * indent)
    tree.write(stream, encoding="utf-8", xml_declaration=True)
    stream.write(b"\n")


def to_edmx_bytes(descriptor: ModelDescriptor, indent: int = 2) -> bytes:
    """Serialize a descriptor to bytes."""
    buffer = io.BytesIO()
    write_edmx(descriptor, buffer, indent=indent)
    return buffer.getvalue()


# ======================================
# Element helpers
# ======================================

def _write_entity(parent: ET.Element, entity: EntityType) -> None:
    element = ET.SubElement(parent, "EntityType", {"Name": entity.name})
    if entity.table:
        element.set("Table", entity.table)
    if entity.schema:
        element.set("Schema", entity.schema)

    key = ET.SubElement(element, "Key")
    for key_name in entity.key:
        ET.SubElement(key, "PropertyRef", {"Name": key_name})

    for prop in entity.properties:
        prop_element = ET.SubElement(element, "Property", {
            "Name": prop.name,
            "Type": prop.type_name,
            "Nullable": "true" if prop.nullable else "false",
        })
        if prop.max_length is not None:
            prop_element.set("MaxLength", str(prop.max_length))


def _write_relationship(parent: ET.Element, relationship: Relationship) -> None:
    element = ET.SubElement(parent, "Association", {
        "Name": relationship.name,
        "Principal": relationship.principal,
        "Dependent": relationship.dependent,
        "PrincipalMultiplicity": relationship.principal_multiplicity,
        "DependentMultiplicity": relationship.dependent_multiplicity,
    })
    if relationship.foreign_key:
        foreign_key = ET.SubElement(element, "ForeignKey")
        for fk_name in relationship.foreign_key:
            ET.SubElement(foreign_key, "PropertyRef", {"Name": fk_name})
