"""
Request types: what an engine does when asked for a named request.

Each binding ties a request type on a governance engine to the service that
handles it and publishes a ``GovernanceActionType`` describing the action to
the rest of the ecosystem.

Shape of one binding::

    engine ──SupportedGovernanceService──▶ service
    action type ──GovernanceActionExecutor──▶ engine
    action type ──TargetForActionType──▶ pre-declared target
    deployed type / open metadata type / supported element
        ──ResourceList──▶ action type

The action type's GUID is pre-declared so governance processes and remote
callers can find it without a query.  Action targets are looked up in the
graph by qualified name, so the element they name must already be added.

Tags:
    governance, request-types, action-types, omarchive
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from omarchive.core.logging import get_logger
from omarchive.definitions.records import GovernanceServiceRecord, RequestTypeRecord
from omarchive.processors.base import (
    DEPLOYED_IMPLEMENTATION_TYPES,
    GOVERNANCE_ACTION_TYPES,
    GOVERNANCE_ENGINES,
    GOVERNANCE_SERVICES,
    OPEN_METADATA_TYPES,
    TEMPLATES,
    BuildContext,
)

if TYPE_CHECKING:
    from omarchive.definitions.catalogue import Catalogue

logger = get_logger(__name__)

GOVERNANCE_ACTION_TYPE = "GovernanceActionType"
SUPPORTED_GOVERNANCE_SERVICE = "SupportedGovernanceService"
GOVERNANCE_ACTION_EXECUTOR = "GovernanceActionExecutor"
TARGET_FOR_ACTION_TYPE = "TargetForActionType"
TEMPLATE_GUID_PARAMETER = "templateGUID"


def _request_parameters(record: RequestTypeRecord, context: BuildContext) -> dict[str, str]:
    parameters = dict(record.request_parameters)
    if record.template is not None:
        parameters[TEMPLATE_GUID_PARAMETER] = context.tables.require(TEMPLATES, record.template)
    return parameters


def _link_supported(
    context: BuildContext,
    parent_guid: str,
    action_type_guid: str,
    service: GovernanceServiceRecord,
    parameters: dict[str, Any],
) -> None:
    context.assembler.add_resource_list(
        parent_guid,
        action_type_guid,
        service.resource_use,
        description=service.description,
        properties=parameters,
    )


def add_request_type(
    record: RequestTypeRecord,
    service: GovernanceServiceRecord,
    context: BuildContext,
) -> str:
    """Bind one request type and return the GUID of its action type."""
    assembler = context.assembler
    tables = context.tables
    engine_guid = tables.require(GOVERNANCE_ENGINES, record.governance_engine)
    service_guid = tables.require(GOVERNANCE_SERVICES, record.governance_service)
    parameters = _request_parameters(record, context)

    assembler.add_edge(
        SUPPORTED_GOVERNANCE_SERVICE,
        engine_guid,
        service_guid,
        {
            "requestType": record.governance_request_type,
            "serviceRequestType": record.service_request_type,
            "requestParameters": parameters or None,
        },
        discriminator=record.governance_request_type,
    )

    action_type_guid = assembler.add_node(
        GOVERNANCE_ACTION_TYPE,
        record.qualified_name,
        display_name=record.display_name,
        description=service.description,
        properties={
            "domainIdentifier": 0,
            "supportedRequestParameters": list(service.supported_request_parameters) or None,
            "supportedActionTargets": list(service.supported_action_targets) or None,
            "producedGuards": list(service.produced_guards) or None,
        },
        guid=record.governance_action_type_guid,
    )
    assembler.add_edge(
        GOVERNANCE_ACTION_EXECUTOR,
        action_type_guid,
        engine_guid,
        {"requestType": record.governance_request_type, "requestParameters": parameters or None},
    )

    for target in record.action_targets:
        assembler.add_edge(
            TARGET_FOR_ACTION_TYPE,
            action_type_guid,
            assembler.resolve(target.qualified_name),
            {"actionTargetName": target.name},
            discriminator=target.name,
        )

    for technology in service.supported_technologies:
        if technology.data_type is not None:
            type_guid = tables.require(OPEN_METADATA_TYPES, technology.data_type)
            _link_supported(context, type_guid, action_type_guid, service, parameters)
        if technology.name is not None:
            dit_guid = tables.require(DEPLOYED_IMPLEMENTATION_TYPES, technology.name)
            _link_supported(context, dit_guid, action_type_guid, service, parameters)

    if record.supported_element_qualified_name is not None:
        element_guid = assembler.resolve(record.supported_element_qualified_name)
        _link_supported(context, element_guid, action_type_guid, service, parameters)

    tables.record(GOVERNANCE_ACTION_TYPES, record.qualified_name, action_type_guid)
    return action_type_guid


def process_request_types(catalogue: Catalogue, context: BuildContext) -> None:
    services = {service.name: service for service in catalogue.governance_services}
    for record in catalogue.request_types:
        # Fails with the lookup table in context when the service is unknown
        context.tables.require(GOVERNANCE_SERVICES, record.governance_service)
        add_request_type(record, services[record.governance_service], context)

    logger.info("request_types_added", request_types=len(catalogue.request_types))


__all__ = ["add_request_type", "process_request_types"]
