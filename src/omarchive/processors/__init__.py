"""
Definition processors and the default processor plan.

Each processor reads one category of definition records from the catalogue
and adds their nodes, edges and classifications through the assembler,
recording produced GUIDs in the build's lookup tables for later stages.

Stage order::

    open_metadata_types ─────────────────────────────────────────┐
    deployed_implementation_types ─┬─ file_reference_data        │
                                   ├─ connectors ─┬─ templates ──┤
                                   │              └─ integration ┤
                                   └─ governance_engines ────────┴─ request_types
                                                                     └─ governance_processes
"""

from omarchive.processors.base import (
    CONNECTOR_CATEGORIES,
    CONNECTOR_TYPES,
    DEPLOYED_IMPLEMENTATION_TYPES,
    FILE_TYPES,
    GOVERNANCE_ACTION_TYPES,
    GOVERNANCE_ENGINES,
    GOVERNANCE_SERVICES,
    INTEGRATION_CONNECTORS,
    OPEN_METADATA_TYPES,
    TEMPLATES,
    BuildContext,
    LookupTables,
    Processor,
    ProcessorPlan,
    ProcessorStage,
    ResourceUse,
    link_resource,
)
from omarchive.processors.connectors import process_connectors
from omarchive.processors.deployed_types import process_deployed_implementation_types
from omarchive.processors.file_reference import process_file_reference_data
from omarchive.processors.governance import process_governance_engines
from omarchive.processors.integration import process_integration_connectors
from omarchive.processors.processes import process_governance_processes
from omarchive.processors.request_types import process_request_types
from omarchive.processors.templates import process_templates
from omarchive.processors.types import process_open_metadata_types

DEFAULT_STAGES: tuple[ProcessorStage, ...] = (
    ProcessorStage(
        "open_metadata_types",
        process_open_metadata_types,
        provides=frozenset({OPEN_METADATA_TYPES}),
    ),
    ProcessorStage(
        "deployed_implementation_types",
        process_deployed_implementation_types,
        provides=frozenset({DEPLOYED_IMPLEMENTATION_TYPES}),
    ),
    ProcessorStage(
        "file_reference_data",
        process_file_reference_data,
        requires=frozenset({DEPLOYED_IMPLEMENTATION_TYPES}),
        provides=frozenset({FILE_TYPES}),
    ),
    ProcessorStage(
        "connectors",
        process_connectors,
        requires=frozenset({DEPLOYED_IMPLEMENTATION_TYPES}),
        provides=frozenset({CONNECTOR_CATEGORIES, CONNECTOR_TYPES}),
    ),
    ProcessorStage(
        "templates",
        process_templates,
        requires=frozenset({DEPLOYED_IMPLEMENTATION_TYPES, CONNECTOR_TYPES}),
        provides=frozenset({TEMPLATES}),
    ),
    ProcessorStage(
        "integration_connectors",
        process_integration_connectors,
        requires=frozenset({DEPLOYED_IMPLEMENTATION_TYPES, CONNECTOR_TYPES}),
        provides=frozenset({INTEGRATION_CONNECTORS}),
    ),
    ProcessorStage(
        "governance_engines",
        process_governance_engines,
        requires=frozenset({DEPLOYED_IMPLEMENTATION_TYPES}),
        provides=frozenset({GOVERNANCE_ENGINES, GOVERNANCE_SERVICES}),
    ),
    ProcessorStage(
        "request_types",
        process_request_types,
        requires=frozenset(
            {
                OPEN_METADATA_TYPES,
                DEPLOYED_IMPLEMENTATION_TYPES,
                TEMPLATES,
                INTEGRATION_CONNECTORS,
                GOVERNANCE_ENGINES,
                GOVERNANCE_SERVICES,
            }
        ),
        provides=frozenset({GOVERNANCE_ACTION_TYPES}),
    ),
    ProcessorStage(
        "governance_processes",
        process_governance_processes,
        requires=frozenset({GOVERNANCE_ENGINES, GOVERNANCE_ACTION_TYPES}),
    ),
)

DEFAULT_PLAN = ProcessorPlan(DEFAULT_STAGES)

__all__ = [
    "DEFAULT_PLAN",
    "DEFAULT_STAGES",
    "BuildContext",
    "LookupTables",
    "Processor",
    "ProcessorPlan",
    "ProcessorStage",
    "ResourceUse",
    "link_resource",
]
