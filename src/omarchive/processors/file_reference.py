"""File types, well-known file names and file extensions.

Each becomes a valid value under ``DataFile``; ``ConsistentValidValue``
edges tie a name or extension to its file type and a file type to the
deployed implementation type used to catalog it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from omarchive.core.logging import get_logger
from omarchive.processors.base import DEPLOYED_IMPLEMENTATION_TYPES, FILE_TYPES, BuildContext

if TYPE_CHECKING:
    from omarchive.definitions.catalogue import Catalogue

logger = get_logger(__name__)

DATA_FILE_TYPE = "DataFile"
FILE_TYPE_PROPERTY = "fileType"
FILE_NAME_PROPERTY = "fileName"
FILE_EXTENSION_PROPERTY = "fileExtension"
CONSISTENT_VALID_VALUE = "ConsistentValidValue"


def process_file_reference_data(catalogue: Catalogue, context: BuildContext) -> None:
    taxonomy = context.taxonomy
    assembler = context.assembler
    tables = context.tables

    for file_type in catalogue.file_types:
        additional = {}
        if file_type.encoding:
            additional["encoding"] = file_type.encoding
        if file_type.asset_sub_type_name:
            additional["assetSubTypeName"] = file_type.asset_sub_type_name
        guid = taxonomy.add_value(
            DATA_FILE_TYPE,
            FILE_TYPE_PROPERTY,
            None,
            file_type.name,
            description=file_type.description,
            additional_properties=additional or None,
        )
        tables.record(FILE_TYPES, file_type.name, guid)
        if file_type.deployed_implementation_type:
            dit_guid = tables.require(DEPLOYED_IMPLEMENTATION_TYPES, file_type.deployed_implementation_type)
            assembler.add_edge(CONSISTENT_VALID_VALUE, guid, dit_guid)

    for file_name in catalogue.file_names:
        guid = taxonomy.add_value(DATA_FILE_TYPE, FILE_NAME_PROPERTY, None, file_name.file_name)
        if file_name.deployed_implementation_type:
            dit_guid = tables.require(DEPLOYED_IMPLEMENTATION_TYPES, file_name.deployed_implementation_type)
            assembler.add_edge(CONSISTENT_VALID_VALUE, guid, dit_guid)
        if file_name.file_type:
            assembler.add_edge(CONSISTENT_VALID_VALUE, guid, tables.require(FILE_TYPES, file_name.file_type))

    for extension in catalogue.file_extensions:
        guid = taxonomy.add_value(DATA_FILE_TYPE, FILE_EXTENSION_PROPERTY, None, extension.extension)
        for file_type_name in extension.file_types:
            assembler.add_edge(CONSISTENT_VALID_VALUE, guid, tables.require(FILE_TYPES, file_type_name))

    logger.info(
        "file_reference_data_added",
        file_types=len(catalogue.file_types),
        file_names=len(catalogue.file_names),
        file_extensions=len(catalogue.file_extensions),
    )


__all__ = ["process_file_reference_data"]
