"""Governance action processes: steps run by one engine, chained by guards."""

from __future__ import annotations

from typing import TYPE_CHECKING

from omarchive.core.errors import CatalogueError
from omarchive.core.logging import get_logger
from omarchive.definitions.records import GovernanceProcessRecord
from omarchive.processors.base import GOVERNANCE_ACTION_TYPES, GOVERNANCE_ENGINES, BuildContext

if TYPE_CHECKING:
    from omarchive.definitions.catalogue import Catalogue

logger = get_logger(__name__)

GOVERNANCE_ACTION_PROCESS = "GovernanceActionProcess"
GOVERNANCE_ACTION_PROCESS_STEP = "GovernanceActionProcessStep"
GOVERNANCE_ACTION_PROCESS_FLOW = "GovernanceActionProcessFlow"
NEXT_GOVERNANCE_ACTION_PROCESS_STEP = "NextGovernanceActionProcessStep"
GOVERNANCE_ACTION_EXECUTOR = "GovernanceActionExecutor"


def add_governance_process(record: GovernanceProcessRecord, context: BuildContext) -> str:
    """Add a process, its steps and the guard transitions between them.

    Every step's request type must already be bound on the process engine.
    """
    assembler = context.assembler
    tables = context.tables
    engine_guid = tables.require(GOVERNANCE_ENGINES, record.governance_engine)

    process_guid = assembler.add_node(
        GOVERNANCE_ACTION_PROCESS,
        record.qualified_name,
        display_name=record.display_name,
        description=record.description,
        guid=record.guid,
    )

    step_guids: dict[str, str] = {}
    for step in record.steps:
        tables.require(GOVERNANCE_ACTION_TYPES, f"{record.governance_engine}:{step.request_type}")
        step_guid = assembler.add_node(
            GOVERNANCE_ACTION_PROCESS_STEP,
            record.step_qualified_name(step.name),
            display_name=step.display_name,
            properties={"ignoreMultipleTriggers": step.ignore_multiple_triggers, "domainIdentifier": 0},
        )
        assembler.add_edge(
            GOVERNANCE_ACTION_EXECUTOR,
            step_guid,
            engine_guid,
            {"requestType": step.request_type, "requestParameters": dict(step.request_parameters) or None},
        )
        step_guids[step.name] = step_guid

    unknown = {record.first_step} | {t.next_step for s in record.steps for t in s.transitions}
    unknown -= step_guids.keys()
    if unknown:
        raise CatalogueError(
            f"Process '{record.qualified_name}' refers to undeclared steps: {sorted(unknown)}"
        ).with_context(qualified_name=record.qualified_name)

    assembler.add_edge(GOVERNANCE_ACTION_PROCESS_FLOW, process_guid, step_guids[record.first_step])

    for step in record.steps:
        for transition in step.transitions:
            assembler.add_edge(
                NEXT_GOVERNANCE_ACTION_PROCESS_STEP,
                step_guids[step.name],
                step_guids[transition.next_step],
                {"guard": transition.guard, "mandatoryGuard": transition.mandatory},
                discriminator=transition.guard,
            )

    logger.debug("governance_process_added", qualified_name=record.qualified_name, steps=len(record.steps))
    return process_guid


def process_governance_processes(catalogue: Catalogue, context: BuildContext) -> None:
    for record in catalogue.governance_processes:
        add_governance_process(record, context)
    logger.info("governance_processes_added", processes=len(catalogue.governance_processes))


__all__ = ["add_governance_process", "process_governance_processes"]
