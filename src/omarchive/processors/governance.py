"""Governance engines and the governance services they can run."""

from __future__ import annotations

from typing import TYPE_CHECKING

from omarchive.core.logging import get_logger
from omarchive.processors.base import (
    DEPLOYED_IMPLEMENTATION_TYPES,
    GOVERNANCE_ENGINES,
    GOVERNANCE_SERVICES,
    BuildContext,
    link_resource,
)

if TYPE_CHECKING:
    from omarchive.definitions.catalogue import Catalogue

logger = get_logger(__name__)


def process_governance_engines(catalogue: Catalogue, context: BuildContext) -> None:
    assembler = context.assembler
    tables = context.tables

    for engine in catalogue.governance_engines:
        guid = assembler.add_node(
            engine.type_name,
            engine.name,
            display_name=engine.display_name,
            description=engine.description,
            properties={"name": engine.name},
            guid=engine.guid,
        )
        tables.record(GOVERNANCE_ENGINES, engine.name, guid)

    for service in catalogue.governance_services:
        guid = assembler.add_node(
            service.type_name,
            service.name,
            display_name=service.display_name,
            description=service.description,
            properties={
                "name": service.name,
                "connectorProviderClassName": service.connector_provider_class_name,
                "deployedImplementationType": service.deployed_implementation_type,
            },
            guid=service.guid,
        )
        if service.deployed_implementation_type is not None:
            dit_guid = tables.require(DEPLOYED_IMPLEMENTATION_TYPES, service.deployed_implementation_type)
            link_resource(context, dit_guid, guid, service.resource_use)
        tables.record(GOVERNANCE_SERVICES, service.name, guid)

    logger.info(
        "governance_engines_added",
        engines=len(catalogue.governance_engines),
        services=len(catalogue.governance_services),
    )


__all__ = ["process_governance_engines"]
