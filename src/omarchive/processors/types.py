"""Open metadata type names and enum valid values."""

from __future__ import annotations

from typing import TYPE_CHECKING

from omarchive.core.errors import CatalogueError
from omarchive.core.logging import get_logger
from omarchive.definitions.records import (
    SPECIFICATION_PROPERTY_ASSIGNMENT,
    SPECIFICATION_PROPERTY_TYPE_PROPERTY,
    TYPE_NAME_PROPERTY,
    AttributeNameRecord,
    OpenMetadataEnumRecord,
    OpenMetadataTypeRecord,
)
from omarchive.processors.base import OPEN_METADATA_TYPES, BuildContext

if TYPE_CHECKING:
    from omarchive.definitions.catalogue import Catalogue

logger = get_logger(__name__)


def add_open_metadata_type(record: OpenMetadataTypeRecord, context: BuildContext) -> str:
    """Publish ``record.type_name`` as a valid value of ``typeName``."""
    guid = context.taxonomy.add_value(
        None,
        TYPE_NAME_PROPERTY,
        None,
        record.type_name,
        description=record.description,
        guid=record.description_guid,
    )
    if record.wiki_url:
        context.assembler.add_external_reference(
            guid,
            f"{record.qualified_name}_wikiLink",
            record.wiki_url,
            display_name=f"More information about open metadata type: {record.type_name}",
        )
    return guid


def add_enum(record: OpenMetadataEnumRecord, context: BuildContext) -> list[str]:
    """Add one valid value per enum member.

    Names are upper-cased into the preferred value; ordinal enums use the
    ordinal (as a string) with data type ``int``.
    """
    guids = []
    for value in record.values:
        if record.use_ordinal:
            if value.ordinal is None:
                raise CatalogueError(f"Enum value '{value.name}' of {record.property_name} has no ordinal")
            preferred = str(value.ordinal)
            data_type = "int"
        else:
            preferred = value.name.upper()
            data_type = record.enum_type_name or "string"
        guids.append(
            context.taxonomy.add_value(
                record.consuming_type_name,
                record.property_name,
                None,
                preferred,
                display_name=value.name,
                description=value.description,
                data_type=data_type,
                additional_properties=value.additional_properties or None,
                guid=value.description_guid,
            )
        )
    return guids


def add_attribute_name(record: AttributeNameRecord, context: BuildContext) -> str:
    """Publish a specification property name as a valid value of ``propertyType``."""
    return context.taxonomy.add_value(
        SPECIFICATION_PROPERTY_ASSIGNMENT,
        SPECIFICATION_PROPERTY_TYPE_PROPERTY,
        None,
        record.name,
        description=record.description,
    )


def process_open_metadata_types(catalogue: Catalogue, context: BuildContext) -> None:
    for record in catalogue.open_metadata_types:
        guid = add_open_metadata_type(record, context)
        context.tables.record(OPEN_METADATA_TYPES, record.type_name, guid)

    for enum in catalogue.enums:
        add_enum(enum, context)

    for attribute in catalogue.attribute_names:
        add_attribute_name(attribute, context)

    for value_set in catalogue.valid_value_sets:
        context.taxonomy.get_or_create_category(value_set.type_name, value_set.property_name, value_set.map_name)

    logger.info(
        "open_metadata_types_added",
        types=len(catalogue.open_metadata_types),
        enums=len(catalogue.enums),
        attribute_names=len(catalogue.attribute_names),
        sets=len(context.taxonomy),
    )


__all__ = ["add_attribute_name", "add_enum", "add_open_metadata_type", "process_open_metadata_types"]
