"""
Definition records: the read-only input a build compiles.

Each record is a frozen dataclass describing one logical definition (a
deployed implementation type, a connector type, a template, a governance
engine, a request type …).  Records never hold GUIDs they did not declare
and never reference other records by object: cross-references are by name
or qualified name, and the processors resolve them through the lookup
tables or the assembler.  Derived names (qualified names, categories) are
pure properties so the same record always yields the same identity.

Examples:
    >>> dit = DeployedImplementationTypeRecord("PostgreSQL Server", "SoftwareServer", "A database server.")
    >>> dit.qualified_name
    'Egeria:ValidMetadataValue:SoftwareServer:deployedImplementationType:PostgreSQL Server'
    >>> PlaceholderRecord("serverName", "Name of the server.").placeholder
    '~{serverName}~'

Tags:
    definitions, records, catalogue, omarchive
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import ConfigDict, with_config

from omarchive.core.taxonomy import ValidValueTaxonomy

TYPE_NAME_PROPERTY = "typeName"
DEPLOYED_IMPLEMENTATION_TYPE_PROPERTY = "deployedImplementationType"
SOFTWARE_SERVICE_TYPE = "SoftwareService"
SPECIFICATION_PROPERTY_ASSIGNMENT = "SpecificationPropertyAssignment"
SPECIFICATION_PROPERTY_TYPE_PROPERTY = "propertyType"

# Unknown keys in a YAML catalogue are rejected rather than dropped.
RECORD_CONFIG = ConfigDict(extra="forbid")


def placeholder(name: str) -> str:
    """Render ``name`` in placeholder form (``~{name}~``)."""
    return "~{" + name + "}~"


# ---------------------------------------------------------------------------
# Open metadata types and enums
# ---------------------------------------------------------------------------


@with_config(RECORD_CONFIG)
@dataclass(frozen=True, slots=True)
class OpenMetadataTypeRecord:
    """An open metadata type published as a valid value of ``typeName``."""

    type_name: str
    description: str
    wiki_url: str | None = None
    description_guid: str | None = None

    @property
    def qualified_name(self) -> str:
        return ValidValueTaxonomy.construct_qualified_name(None, TYPE_NAME_PROPERTY, None, self.type_name)


@with_config(RECORD_CONFIG)
@dataclass(frozen=True, slots=True)
class EnumValueRecord:
    """One member of an enumeration."""

    name: str
    description: str
    ordinal: int | None = None
    additional_properties: dict[str, str] = field(default_factory=dict)
    description_guid: str | None = None


@with_config(RECORD_CONFIG)
@dataclass(frozen=True, slots=True)
class OpenMetadataEnumRecord:
    """Valid values of an enum-typed property.

    When ``use_ordinal`` is set the preferred value is the member's ordinal
    (for ``*LevelIdentifier`` properties), otherwise its name.
    """

    consuming_type_name: str | None
    property_name: str
    values: tuple[EnumValueRecord, ...]
    enum_type_name: str | None = None
    use_ordinal: bool = False


@with_config(RECORD_CONFIG)
@dataclass(frozen=True, slots=True)
class AttributeNameRecord:
    """A property name usable in a specification (``supportedTemplate``, ``producedGuard`` ...).

    Published as a valid value of ``SpecificationPropertyAssignment.propertyType``.
    """

    name: str
    description: str

    @property
    def qualified_name(self) -> str:
        return ValidValueTaxonomy.construct_qualified_name(
            SPECIFICATION_PROPERTY_ASSIGNMENT, SPECIFICATION_PROPERTY_TYPE_PROPERTY, None, self.name
        )


@with_config(RECORD_CONFIG)
@dataclass(frozen=True, slots=True)
class ValidValueSetRecord:
    """A taxonomy set declared without values (e.g. a map name)."""

    type_name: str | None
    property_name: str | None
    map_name: str | None = None


# ---------------------------------------------------------------------------
# Deployed implementation types and software services
# ---------------------------------------------------------------------------


@with_config(RECORD_CONFIG)
@dataclass(frozen=True, slots=True)
class DeployedImplementationTypeRecord:
    """A technology type, published as a ``deployedImplementationType`` valid value."""

    name: str
    associated_type_name: str
    description: str
    wiki_url: str | None = None
    guid: str | None = None

    @property
    def qualified_name(self) -> str:
        return ValidValueTaxonomy.construct_qualified_name(
            self.associated_type_name, DEPLOYED_IMPLEMENTATION_TYPE_PROPERTY, None, self.name
        )

    @property
    def category(self) -> str:
        return ValidValueTaxonomy.construct_category(
            self.associated_type_name, DEPLOYED_IMPLEMENTATION_TYPE_PROPERTY, None
        )


@with_config(RECORD_CONFIG)
@dataclass(frozen=True, slots=True)
class SoftwareServiceRecord:
    """A service hosted by server types and optionally calling a partner service.

    ``hosted_by`` and ``partner_service`` name deployed implementation types
    or other software services.
    """

    name: str
    description: str
    hosted_by: tuple[str, ...] = ()
    partner_service: str | None = None
    wiki_url: str | None = None

    def as_deployed_type(self) -> DeployedImplementationTypeRecord:
        return DeployedImplementationTypeRecord(
            self.name, SOFTWARE_SERVICE_TYPE, self.description, wiki_url=self.wiki_url
        )


# ---------------------------------------------------------------------------
# File reference data
# ---------------------------------------------------------------------------


@with_config(RECORD_CONFIG)
@dataclass(frozen=True, slots=True)
class FileTypeRecord:
    name: str
    description: str
    encoding: str | None = None
    asset_sub_type_name: str | None = None
    deployed_implementation_type: str | None = None


@with_config(RECORD_CONFIG)
@dataclass(frozen=True, slots=True)
class FileNameRecord:
    file_name: str
    file_type: str | None = None
    deployed_implementation_type: str | None = None


@with_config(RECORD_CONFIG)
@dataclass(frozen=True, slots=True)
class FileExtensionRecord:
    extension: str
    file_types: tuple[str, ...] = ()


# ---------------------------------------------------------------------------
# Connectors
# ---------------------------------------------------------------------------


@with_config(RECORD_CONFIG)
@dataclass(frozen=True, slots=True)
class ConnectorDirectoryRecord:
    qualified_name: str
    display_name: str
    description: str


@with_config(RECORD_CONFIG)
@dataclass(frozen=True, slots=True)
class ConnectorCategoryRecord:
    qualified_name: str
    display_name: str
    description: str
    target_technology_source: str | None = None
    target_technology_name: str | None = None


@with_config(RECORD_CONFIG)
@dataclass(frozen=True, slots=True)
class ConnectorTypeRecord:
    """A connector implementation.

    ``category`` is the qualified name of its connector category (if any);
    ``supported_deployed_types`` name the technologies it can connect to.
    """

    guid: str
    qualified_name: str
    display_name: str
    description: str
    connector_provider_class_name: str
    category: str | None = None
    supported_asset_type_name: str | None = None
    supported_deployed_types: tuple[str, ...] = ()
    recognized_configuration_properties: tuple[str, ...] = ()
    connector_framework_name: str = "Open Connector Framework (OCF)"
    connector_interface_language: str = "Java"


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------


class TemplateKind(str, Enum):
    """Shape of the element a template creates."""

    FILE = "file"
    FOLDER = "folder"
    DATA_SET = "data-set"
    SOFTWARE_SERVER = "software-server"
    ENDPOINT = "endpoint"
    CAPABILITY = "capability"
    ASSET = "asset"


@with_config(RECORD_CONFIG)
@dataclass(frozen=True, slots=True)
class PlaceholderRecord:
    """A variable a template user must supply."""

    name: str
    description: str
    data_type: str = "string"
    example: str | None = None
    required: bool = True

    @property
    def placeholder(self) -> str:
        return placeholder(self.name)


@with_config(RECORD_CONFIG)
@dataclass(frozen=True, slots=True)
class ClassificationRecord:
    name: str
    properties: dict[str, Any] = field(default_factory=dict)


@with_config(RECORD_CONFIG)
@dataclass(frozen=True, slots=True)
class TemplateRecord:
    """A catalog template attached to a deployed implementation type.

    The template element's qualified name is
    ``"<deployed_implementation_type>:<resource_name>"`` unless
    ``qualified_name_override`` is given.  ``type_name`` defaults to the
    deployed type's associated type (``Endpoint`` for endpoint templates).
    """

    kind: TemplateKind
    deployed_implementation_type: str
    resource_name: str
    template_name: str
    guid: str | None = None
    template_description: str | None = None
    description: str | None = None
    version_identifier: str = "V1.0"
    type_name: str | None = None
    qualified_name_override: str | None = None
    network_address: str | None = None
    protocol: str | None = None
    connector_type: str | None = None
    user_id: str | None = None
    configuration_properties: dict[str, Any] = field(default_factory=dict)
    capability_type: str | None = None
    capability_name: str | None = None
    extra_properties: dict[str, Any] = field(default_factory=dict)
    classifications: tuple[ClassificationRecord, ...] = ()
    placeholders: tuple[PlaceholderRecord, ...] = ()
    replacement_attributes: tuple[str, ...] = ()

    @property
    def qualified_name(self) -> str:
        if self.qualified_name_override is not None:
            return self.qualified_name_override
        return f"{self.deployed_implementation_type}:{self.resource_name}"


# ---------------------------------------------------------------------------
# Integration connectors
# ---------------------------------------------------------------------------


@with_config(RECORD_CONFIG)
@dataclass(frozen=True, slots=True)
class IntegrationGroupRecord:
    qualified_name: str
    display_name: str
    description: str


@with_config(RECORD_CONFIG)
@dataclass(frozen=True, slots=True)
class IntegrationConnectorRecord:
    """An integration connector registered in the default integration group."""

    guid: str
    qualified_name: str
    display_name: str
    description: str
    connector_type: str
    connector_name: str
    connector_user_id: str
    metadata_source_qualified_name: str | None = None
    refresh_time_interval: int = 60
    endpoint_address: str | None = None
    configuration_properties: dict[str, Any] = field(default_factory=dict)
    deployed_implementation_types: tuple[str, ...] = ()
    resource_use: str = "Catalog Resource"


# ---------------------------------------------------------------------------
# Governance
# ---------------------------------------------------------------------------


@with_config(RECORD_CONFIG)
@dataclass(frozen=True, slots=True)
class GovernanceEngineRecord:
    """A governance engine; ``name`` is also its qualified name."""

    guid: str
    name: str
    display_name: str
    description: str
    type_name: str = "GovernanceActionEngine"


@with_config(RECORD_CONFIG)
@dataclass(frozen=True, slots=True)
class SupportedTechnologyRecord:
    """A technology a service works with: a deployed type name or a data type."""

    name: str | None = None
    data_type: str | None = None


@with_config(RECORD_CONFIG)
@dataclass(frozen=True, slots=True)
class GovernanceServiceRecord:
    guid: str
    name: str
    display_name: str
    description: str
    connector_provider_class_name: str
    type_name: str = "GovernanceActionService"
    deployed_implementation_type: str | None = None
    resource_use: str = "Improve Metadata"
    supported_technologies: tuple[SupportedTechnologyRecord, ...] = ()
    supported_request_parameters: tuple[str, ...] = ()
    supported_action_targets: tuple[str, ...] = ()
    produced_guards: tuple[str, ...] = ()


@with_config(RECORD_CONFIG)
@dataclass(frozen=True, slots=True)
class ActionTargetRecord:
    """A pre-declared action target: any element already in the archive."""

    name: str
    qualified_name: str


@with_config(RECORD_CONFIG)
@dataclass(frozen=True, slots=True)
class RequestTypeRecord:
    """Binds a request type on an engine to the service that handles it.

    Materialized as a ``GovernanceActionType`` whose qualified name is
    ``"<engine>:<request type>"`` and whose GUID is pre-declared.  When
    ``template`` names a template's qualified name, its GUID is passed to
    the service as the ``templateGUID`` request parameter.
    """

    governance_engine: str
    governance_service: str
    governance_request_type: str
    governance_action_type_guid: str
    service_request_type: str | None = None
    request_parameters: dict[str, str] = field(default_factory=dict)
    action_targets: tuple[ActionTargetRecord, ...] = ()
    supported_element_qualified_name: str | None = None
    template: str | None = None

    @property
    def qualified_name(self) -> str:
        return f"{self.governance_engine}:{self.governance_request_type}"

    @property
    def display_name(self) -> str:
        return f"{self.governance_request_type} ({self.governance_engine})"


@with_config(RECORD_CONFIG)
@dataclass(frozen=True, slots=True)
class ProcessTransitionRecord:
    guard: str
    next_step: str
    mandatory: bool = False


@with_config(RECORD_CONFIG)
@dataclass(frozen=True, slots=True)
class ProcessStepRecord:
    name: str
    display_name: str
    request_type: str
    request_parameters: dict[str, str] = field(default_factory=dict)
    transitions: tuple[ProcessTransitionRecord, ...] = ()
    ignore_multiple_triggers: bool = True


@with_config(RECORD_CONFIG)
@dataclass(frozen=True, slots=True)
class GovernanceProcessRecord:
    """A multi-step governance action process run by one engine.

    Step qualified names are ``"<process qualified name>:<step name>"``.
    """

    qualified_name: str
    display_name: str
    governance_engine: str
    first_step: str
    steps: tuple[ProcessStepRecord, ...]
    description: str | None = None
    guid: str | None = None

    def step_qualified_name(self, step_name: str) -> str:
        return f"{self.qualified_name}:{step_name}"


__all__ = [
    "TYPE_NAME_PROPERTY",
    "DEPLOYED_IMPLEMENTATION_TYPE_PROPERTY",
    "SOFTWARE_SERVICE_TYPE",
    "SPECIFICATION_PROPERTY_ASSIGNMENT",
    "SPECIFICATION_PROPERTY_TYPE_PROPERTY",
    "RECORD_CONFIG",
    "placeholder",
    "OpenMetadataTypeRecord",
    "EnumValueRecord",
    "OpenMetadataEnumRecord",
    "AttributeNameRecord",
    "ValidValueSetRecord",
    "DeployedImplementationTypeRecord",
    "SoftwareServiceRecord",
    "FileTypeRecord",
    "FileNameRecord",
    "FileExtensionRecord",
    "ConnectorDirectoryRecord",
    "ConnectorCategoryRecord",
    "ConnectorTypeRecord",
    "TemplateKind",
    "PlaceholderRecord",
    "ClassificationRecord",
    "TemplateRecord",
    "IntegrationGroupRecord",
    "IntegrationConnectorRecord",
    "GovernanceEngineRecord",
    "SupportedTechnologyRecord",
    "GovernanceServiceRecord",
    "ActionTargetRecord",
    "RequestTypeRecord",
    "ProcessTransitionRecord",
    "ProcessStepRecord",
    "GovernanceProcessRecord",
]
