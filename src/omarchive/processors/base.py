"""
Processor plan: which definition processors run, and in what order.

A definition processor is a plain function ``(catalogue, context) -> None``
that reads one category of records, adds nodes and edges through the
context's assembler, and records the GUIDs it produced in the context's
lookup tables.  Later processors read those tables instead of reaching
into global state.

Manifesto:
    Cross-references between record categories only resolve if the
    referenced nodes exist first.  That ordering is declared once, as data,
    and checked before anything touches the graph.

    - **Declared:** Each stage names the tables it requires and provides
    - **Validated:** A stage requiring a table no earlier stage provides
      raises ``ProcessorOrderError`` up front
    - **Sortable:** ``ProcessorPlan.from_stages`` orders an unordered set of
      stages by their table dependencies (Kahn's algorithm)
    - **Explicit state:** All shared lookups live on ``BuildContext``

Architecture:
    ::

        ProcessorPlan
          └── stages[]  ── ProcessorStage(name, func, requires, provides)

        BuildContext
          ├── registry   ── IdentifierRegistry
          ├── assembler  ── GraphAssembler
          ├── taxonomy   ── ValidValueTaxonomy
          └── tables     ── LookupTables (name → GUID per table)

Examples:
    >>> plan = ProcessorPlan([
    ...     ProcessorStage("b", lambda c, ctx: None, requires=frozenset({"x"})),
    ... ])
    Traceback (most recent call last):
    ...
    ProcessorOrderError: Processor 'b' requires ['x'] which no earlier processor provides

Tags:
    processors, ordering, dependency-graph, omarchive
"""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from omarchive.core.assembler import GraphAssembler
from omarchive.core.errors import ArchiveError, DanglingReferenceError, DuplicateInstanceError, ProcessorOrderError
from omarchive.core.identifiers import IdentifierRegistry
from omarchive.core.taxonomy import ValidValueTaxonomy

if TYPE_CHECKING:
    from omarchive.definitions.catalogue import Catalogue

# ── Lookup table names ───────────────────────────────────────────
OPEN_METADATA_TYPES = "open_metadata_types"
DEPLOYED_IMPLEMENTATION_TYPES = "deployed_implementation_types"
FILE_TYPES = "file_types"
CONNECTOR_CATEGORIES = "connector_categories"
CONNECTOR_TYPES = "connector_types"
TEMPLATES = "templates"
INTEGRATION_CONNECTORS = "integration_connectors"
GOVERNANCE_ENGINES = "governance_engines"
GOVERNANCE_SERVICES = "governance_services"
GOVERNANCE_ACTION_TYPES = "governance_action_types"


class ResourceUse(str, Enum):
    """Values of the ``resourceUse`` property on ``ResourceList`` edges."""

    HOSTED_SERVICE = "Hosted Service"
    CALLED_SERVICE = "Called Service"
    CATALOG_RESOURCE = "Catalog Resource"
    IMPROVE_METADATA = "Improve Metadata"
    SURVEY_RESOURCE = "Survey Resource"
    HOSTED_GOVERNANCE_ENGINE = "Hosted Governance Engine"
    HOSTED_CONNECTOR = "Hosted Connector"

    @property
    def description(self) -> str:
        return _RESOURCE_USE_DESCRIPTIONS[self]


_RESOURCE_USE_DESCRIPTIONS = {
    ResourceUse.HOSTED_SERVICE: "A service hosted by the linked server type.",
    ResourceUse.CALLED_SERVICE: "A service called by the linked service.",
    ResourceUse.CATALOG_RESOURCE: "Catalog the contents of the linked resource.",
    ResourceUse.IMPROVE_METADATA: "Improve the metadata of the linked resource.",
    ResourceUse.SURVEY_RESOURCE: "Survey the contents of the linked resource.",
    ResourceUse.HOSTED_GOVERNANCE_ENGINE: "A governance engine run by the linked service.",
    ResourceUse.HOSTED_CONNECTOR: "A connector run by the linked engine or service.",
}


def resource_use_description(resource_use: str) -> str | None:
    """Description of a known resource use, ``None`` for custom ones."""
    try:
        return ResourceUse(resource_use).description
    except ValueError:
        return None


def link_resource(
    context: BuildContext,
    parent_guid: str,
    resource_guid: str,
    resource_use: ResourceUse | str,
    *,
    watch_resource: bool = False,
    properties: dict[str, Any] | None = None,
) -> str:
    """Add a ``ResourceList`` edge described by its resource use."""
    use = resource_use.value if isinstance(resource_use, ResourceUse) else resource_use
    return context.assembler.add_resource_list(
        parent_guid,
        resource_guid,
        use,
        description=resource_use_description(use),
        watch_resource=watch_resource,
        properties=properties,
    )


@dataclass
class LookupTables:
    """GUIDs produced by earlier processors, keyed by record name.

    Keys are type names for ``open_metadata_types``, names for deployed
    types, file types, engines and services, and qualified names for the
    rest.
    """

    open_metadata_types: dict[str, str] = field(default_factory=dict)
    deployed_implementation_types: dict[str, str] = field(default_factory=dict)
    file_types: dict[str, str] = field(default_factory=dict)
    connector_categories: dict[str, str] = field(default_factory=dict)
    connector_types: dict[str, str] = field(default_factory=dict)
    templates: dict[str, str] = field(default_factory=dict)
    integration_connectors: dict[str, str] = field(default_factory=dict)
    governance_engines: dict[str, str] = field(default_factory=dict)
    governance_services: dict[str, str] = field(default_factory=dict)
    governance_action_types: dict[str, str] = field(default_factory=dict)

    def table(self, name: str) -> dict[str, str]:
        table = getattr(self, name, None)
        if not isinstance(table, dict):
            raise ArchiveError(f"Unknown lookup table '{name}'")
        return table

    def record(self, table: str, key: str, guid: str) -> None:
        """Remember the GUID produced for ``key``.

        Raises:
            DuplicateInstanceError: ``key`` already stands for another GUID,
                so two records share a name
        """
        entries = self.table(table)
        existing = entries.setdefault(key, guid)
        if existing != guid:
            raise DuplicateInstanceError(
                guid,
                f"'{key}' is already recorded in the {table} lookup table as {existing}",
            ).with_context(lookup_table=table)

    def require(self, table: str, key: str) -> str:
        """GUID recorded under ``key``.

        Raises:
            DanglingReferenceError: Nothing recorded under ``key`` (the record
                is missing or its processor has not run yet)
        """
        guid = self.table(table).get(key)
        if guid is None:
            raise DanglingReferenceError(
                key,
                f"'{key}' is not in the {table} lookup table",
            ).with_context(lookup_table=table)
        return guid


@dataclass
class BuildContext:
    """Everything a processor may touch during one build."""

    registry: IdentifierRegistry
    assembler: GraphAssembler
    taxonomy: ValidValueTaxonomy
    tables: LookupTables = field(default_factory=LookupTables)

    @classmethod
    def create(cls, registry: IdentifierRegistry) -> BuildContext:
        assembler = GraphAssembler(registry)
        return cls(registry=registry, assembler=assembler, taxonomy=ValidValueTaxonomy(assembler))


Processor = Callable[["Catalogue", BuildContext], None]


@dataclass(frozen=True)
class ProcessorStage:
    """One named processor with the lookup tables it needs and fills."""

    name: str
    func: Processor
    requires: frozenset[str] = frozenset()
    provides: frozenset[str] = frozenset()


class ProcessorPlan:
    """An ordered list of processor stages.

    Args:
        stages: Stages in run order
        validate: Check that every ``requires`` is provided by an earlier
            stage.  Disabling this lets a caller run stages out of order; the
            assembler then reports the first unresolved reference.

    Raises:
        ProcessorOrderError: A stage requires a table no earlier stage provides
        ValueError: Two stages share a name
    """

    def __init__(self, stages: Iterable[ProcessorStage], *, validate: bool = True) -> None:
        self.stages: tuple[ProcessorStage, ...] = tuple(stages)
        names = [stage.name for stage in self.stages]
        if len(names) != len(set(names)):
            duplicates = sorted({n for n in names if names.count(n) > 1})
            raise ValueError(f"Duplicate processor names: {duplicates}")
        if validate:
            self.validate()

    def validate(self) -> None:
        provided: set[str] = set()
        for stage in self.stages:
            missing = set(stage.requires) - provided
            if missing:
                raise ProcessorOrderError(stage.name, missing)
            provided |= stage.provides

    @classmethod
    def from_stages(cls, stages: Iterable[ProcessorStage]) -> ProcessorPlan:
        """Order stages so every table is provided before it is required.

        Stages that are ready at the same time run in declaration order.

        Raises:
            ProcessorOrderError: A required table has no provider, or the
                stages require each other's tables in a cycle
        """
        stages = list(stages)
        providers: dict[str, list[str]] = defaultdict(list)
        for stage in stages:
            for table in stage.provides:
                providers[table].append(stage.name)

        adjacency: dict[str, list[str]] = defaultdict(list)
        in_degree: dict[str, int] = {s.name: 0 for s in stages}
        for stage in stages:
            unprovided = {t for t in stage.requires if not providers[t]}
            if unprovided:
                raise ProcessorOrderError(stage.name, unprovided)
            for table in sorted(stage.requires):
                for provider in providers[table]:
                    if provider != stage.name:
                        adjacency[provider].append(stage.name)
                        in_degree[stage.name] += 1

        # Kahn's algorithm, seeded in declaration order
        by_name = {s.name: s for s in stages}
        queue: deque[str] = deque(name for name, deg in in_degree.items() if deg == 0)
        ordered: list[ProcessorStage] = []
        while queue:
            name = queue.popleft()
            ordered.append(by_name[name])
            for neighbor in adjacency[name]:
                in_degree[neighbor] -= 1
                if in_degree[neighbor] == 0:
                    queue.append(neighbor)

        if len(ordered) != len(stages):
            blocked = sorted(name for name, deg in in_degree.items() if deg > 0)
            raise ProcessorOrderError(blocked[0], {f"cycle among {blocked}"})
        return cls(ordered)

    def stage_names(self) -> list[str]:
        return [stage.name for stage in self.stages]

    def __iter__(self):
        return iter(self.stages)

    def __len__(self) -> int:
        return len(self.stages)

    def __repr__(self) -> str:
        return f"ProcessorPlan({self.stage_names()})"


__all__ = [
    "BuildContext",
    "LookupTables",
    "Processor",
    "ProcessorPlan",
    "ProcessorStage",
    "ResourceUse",
    "link_resource",
    "resource_use_description",
]
