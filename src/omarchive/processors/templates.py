"""
Catalog templates: pre-built asset graphs users copy to catalog a resource.

A template is anchored on one element (an asset, an endpoint or a software
capability) whose qualified name is ``"<deployed type>:<resource name>"``.
Depending on its kind it also gets a hosted capability, an endpoint and a
connection wired to a connector type.  The deployed implementation type
points at the anchor with ``CatalogTemplate``, and the anchor carries a
``Template`` classification listing the placeholders a user must fill in.

Template shapes::

    SOFTWARE_SERVER   asset ──SupportedSoftwareCapability──▶ capability
                      asset ──ServerEndpoint──▶ endpoint ──▶ connection
    FILE / FOLDER /   asset  (+ endpoint, connection when declared)
    DATA_SET / ASSET
    ENDPOINT          endpoint
    CAPABILITY        capability

    deployed type ──CatalogTemplate──▶ anchor (every kind)

Tags:
    templates, placeholders, connections, omarchive
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from omarchive.core.assembler import ENDPOINT
from omarchive.core.logging import get_logger
from omarchive.core.model import Classification
from omarchive.definitions.records import TemplateKind, TemplateRecord
from omarchive.processors.base import CONNECTOR_TYPES, DEPLOYED_IMPLEMENTATION_TYPES, TEMPLATES, BuildContext

if TYPE_CHECKING:
    from omarchive.definitions.catalogue import Catalogue

logger = get_logger(__name__)

CATALOG_TEMPLATE = "CatalogTemplate"
SUPPORTED_SOFTWARE_CAPABILITY = "SupportedSoftwareCapability"
SOFTWARE_CAPABILITY = "SoftwareCapability"

_ASSET_KINDS = frozenset(
    {TemplateKind.FILE, TemplateKind.FOLDER, TemplateKind.DATA_SET, TemplateKind.ASSET, TemplateKind.SOFTWARE_SERVER}
)


def _placeholder_properties(record: TemplateRecord) -> dict[str, Any]:
    return {
        p.name: {
            "placeholder": p.placeholder,
            "description": p.description,
            "dataType": p.data_type,
            "example": p.example,
            "required": p.required,
        }
        for p in record.placeholders
    }


def _anchor_type_name(record: TemplateRecord, catalogue: Catalogue) -> str:
    if record.type_name is not None:
        return record.type_name
    if record.kind == TemplateKind.ENDPOINT:
        return ENDPOINT
    return catalogue.deployed_type(record.deployed_implementation_type).associated_type_name


def add_template(record: TemplateRecord, catalogue: Catalogue, context: BuildContext) -> str:
    """Add one template and return the GUID of its anchor element."""
    assembler = context.assembler
    tables = context.tables
    dit_guid = tables.require(DEPLOYED_IMPLEMENTATION_TYPES, record.deployed_implementation_type)
    qualified_name = record.qualified_name

    classifications = [Classification(c.name, dict(c.properties)) for c in record.classifications]
    properties: dict[str, Any] = {
        "deployedImplementationType": record.deployed_implementation_type,
        **record.extra_properties,
    }

    if record.kind == TemplateKind.ENDPOINT:
        properties.update(
            {
                "networkAddress": record.network_address or record.resource_name,
                "protocol": record.protocol,
            }
        )
    elif record.kind in _ASSET_KINDS:
        properties["resourceName"] = record.resource_name

    anchor_guid = assembler.add_node(
        _anchor_type_name(record, catalogue),
        qualified_name,
        display_name=record.resource_name,
        description=record.description,
        properties=properties,
        classifications=classifications,
        guid=record.guid,
    )

    if record.kind == TemplateKind.SOFTWARE_SERVER and record.capability_type:
        capability = catalogue.deployed_type(record.capability_type)
        tables.require(DEPLOYED_IMPLEMENTATION_TYPES, record.capability_type)
        capability_name = record.capability_name or capability.name
        capability_guid = assembler.add_node(
            capability.associated_type_name or SOFTWARE_CAPABILITY,
            f"{qualified_name}:{capability_name}",
            display_name=capability_name,
            properties={"deployedImplementationType": capability.name},
        )
        assembler.add_edge(SUPPORTED_SOFTWARE_CAPABILITY, anchor_guid, capability_guid, {"deploymentStatus": 1})

    if record.kind in _ASSET_KINDS:
        endpoint_guid = None
        if record.network_address is not None:
            endpoint_guid = assembler.add_endpoint(
                f"{qualified_name}:Endpoint",
                record.network_address,
                display_name=f"{record.resource_name} endpoint",
                protocol=record.protocol,
                server_guid=anchor_guid if record.kind == TemplateKind.SOFTWARE_SERVER else None,
            )
        if record.connector_type is not None:
            assembler.add_connection(
                f"{qualified_name}:Connection",
                tables.require(CONNECTOR_TYPES, record.connector_type),
                display_name=f"{record.resource_name} connection",
                endpoint_guid=endpoint_guid,
                asset_guid=anchor_guid,
                user_id=record.user_id,
                configuration_properties=record.configuration_properties,
            )

    assembler.add_edge(CATALOG_TEMPLATE, dit_guid, anchor_guid)
    assembler.add_template_classification(
        anchor_guid,
        record.template_name,
        description=record.template_description,
        version_identifier=record.version_identifier,
        placeholders=_placeholder_properties(record),
        replacement_attributes=record.replacement_attributes,
    )

    tables.record(TEMPLATES, qualified_name, anchor_guid)
    logger.debug("template_added", qualified_name=qualified_name, kind=record.kind.value, guid=anchor_guid)
    return anchor_guid


def process_templates(catalogue: Catalogue, context: BuildContext) -> None:
    for record in catalogue.templates:
        add_template(record, catalogue, context)
    logger.info("templates_added", templates=len(catalogue.templates))


__all__ = ["add_template", "process_templates"]
