"""Pydantic models for catalogue YAML validation.

Operators who want a different content pack describe it in YAML instead
of Python.  The document is validated into the same frozen records the
built-in catalogue uses, so both paths compile identically.

Usage::

    from omarchive.definitions.loader import CatalogueSpec, load_catalogue

    catalogue = load_catalogue("packs/files.yaml")

    # Or step by step
    spec = CatalogueSpec.from_yaml(yaml_content)
    catalogue = spec.to_catalogue()

Example YAML::

    apiVersion: omarchive.io/v1
    kind: Catalogue
    metadata:
      guid: 6b1e5c7e-0d0e-4b53-9d55-8a8f4a7f2f10
      name: FilesPack
      description: File technology for the lab
      originator_name: Data Platform Team
    spec:
      deployed_implementation_types:
        - name: File Folder
          associated_type_name: FileFolder
          description: A directory in a file system.
      templates:
        - kind: folder
          deployed_implementation_type: File Folder
          resource_name: "~{pathName}~"
          template_name: File Folder Template

Tags:
    definitions, yaml, declarative, validation, omarchive
"""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from omarchive.core.errors import ArchiveError, CatalogueError, GUIDConflictError
from omarchive.definitions.catalogue import ArchiveMetadataRecord, Catalogue
from omarchive.definitions.records import (
    AttributeNameRecord,
    ConnectorCategoryRecord,
    ConnectorDirectoryRecord,
    ConnectorTypeRecord,
    DeployedImplementationTypeRecord,
    FileExtensionRecord,
    FileNameRecord,
    FileTypeRecord,
    GovernanceEngineRecord,
    GovernanceProcessRecord,
    GovernanceServiceRecord,
    IntegrationConnectorRecord,
    IntegrationGroupRecord,
    OpenMetadataEnumRecord,
    OpenMetadataTypeRecord,
    RequestTypeRecord,
    SoftwareServiceRecord,
    TemplateRecord,
    ValidValueSetRecord,
)


def _duplicates(names: list[str]) -> set[str]:
    return {name for name, count in Counter(names).items() if count > 1}


def _check_identities(label: str, identities: list[tuple[str, str | None]]) -> None:
    """Fail on a repeated name; differing declared GUIDs are a GUID conflict."""
    declared: dict[str, str] = {}
    for name, guid in identities:
        if guid is None:
            continue
        first = declared.setdefault(name, guid)
        if first != guid:
            raise GUIDConflictError(
                name,
                first,
                guid,
                message=f"Two {label} named '{name}' declare GUIDs {first} and {guid}",
            )
    duplicates = _duplicates([name for name, _ in identities])
    if duplicates:
        raise ValueError(f"Duplicate {label}: {sorted(duplicates)}")


class CatalogueSection(BaseModel):
    """The 'spec' section: one list per record category."""

    model_config = ConfigDict(extra="forbid")

    open_metadata_types: list[OpenMetadataTypeRecord] = Field(default_factory=list)
    enums: list[OpenMetadataEnumRecord] = Field(default_factory=list)
    attribute_names: list[AttributeNameRecord] = Field(default_factory=list)
    valid_value_sets: list[ValidValueSetRecord] = Field(default_factory=list)
    deployed_implementation_types: list[DeployedImplementationTypeRecord] = Field(default_factory=list)
    software_services: list[SoftwareServiceRecord] = Field(default_factory=list)
    file_types: list[FileTypeRecord] = Field(default_factory=list)
    file_names: list[FileNameRecord] = Field(default_factory=list)
    file_extensions: list[FileExtensionRecord] = Field(default_factory=list)
    connector_directory: ConnectorDirectoryRecord | None = None
    connector_categories: list[ConnectorCategoryRecord] = Field(default_factory=list)
    connector_types: list[ConnectorTypeRecord] = Field(default_factory=list)
    templates: list[TemplateRecord] = Field(default_factory=list)
    integration_group: IntegrationGroupRecord | None = None
    integration_connectors: list[IntegrationConnectorRecord] = Field(default_factory=list)
    governance_engines: list[GovernanceEngineRecord] = Field(default_factory=list)
    governance_services: list[GovernanceServiceRecord] = Field(default_factory=list)
    request_types: list[RequestTypeRecord] = Field(default_factory=list)
    governance_processes: list[GovernanceProcessRecord] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_unique_names(self) -> CatalogueSection:
        """Reject two records that would claim the same name.

        Deployed types and software services share one name space.  Two
        records that declare different GUIDs for one qualified name raise
        ``GUIDConflictError``, which pydantic lets through unwrapped.
        """
        _check_identities("templates", [(t.qualified_name, t.guid) for t in self.templates])
        _check_identities(
            "deployed implementation types",
            [(r.qualified_name, r.guid) for r in self.deployed_implementation_types],
        )
        _check_identities("connector types", [(c.qualified_name, c.guid) for c in self.connector_types])
        _check_identities(
            "integration connectors", [(c.qualified_name, c.guid) for c in self.integration_connectors]
        )
        _check_identities("governance engines", [(e.name, e.guid) for e in self.governance_engines])
        _check_identities("governance services", [(s.name, s.guid) for s in self.governance_services])
        _check_identities(
            "request types", [(r.qualified_name, r.governance_action_type_guid) for r in self.request_types]
        )
        _check_identities("governance processes", [(p.qualified_name, p.guid) for p in self.governance_processes])
        _check_identities(
            "deployed implementation type or software service names",
            [(r.name, None) for r in self.deployed_implementation_types]
            + [(s.name, None) for s in self.software_services],
        )
        return self

    @model_validator(mode="after")
    def validate_processes(self) -> CatalogueSection:
        """Ensure first steps and transitions name steps of the same process."""
        for process in self.governance_processes:
            step_names = [step.name for step in process.steps]
            duplicates = _duplicates(step_names)
            if duplicates:
                raise ValueError(f"Process '{process.qualified_name}' has duplicate steps: {sorted(duplicates)}")
            if process.first_step not in step_names:
                raise ValueError(
                    f"Process '{process.qualified_name}' starts with unknown step '{process.first_step}'"
                )
            for step in process.steps:
                for transition in step.transitions:
                    if transition.next_step not in step_names:
                        raise ValueError(
                            f"Step '{step.name}' of '{process.qualified_name}' "
                            f"transitions to unknown step '{transition.next_step}'"
                        )
        return self


class CatalogueSpec(BaseModel):
    """Complete YAML catalogue document.

    This is the root model for parsing YAML catalogues.
    """

    model_config = ConfigDict(extra="forbid")

    apiVersion: Literal["omarchive.io/v1"] = Field(
        default="omarchive.io/v1",
        description="API version, must be omarchive.io/v1",
    )
    kind: Literal["Catalogue"] = Field(
        default="Catalogue",
        description="Resource kind, must be Catalogue",
    )
    metadata: ArchiveMetadataRecord = Field(..., description="Archive header metadata")
    spec: CatalogueSection = Field(default_factory=CatalogueSection, description="Definition records")

    def to_catalogue(self) -> Catalogue:
        """Convert the validated document to a ``Catalogue``."""
        section = self.spec
        return Catalogue(
            archive=self.metadata,
            open_metadata_types=tuple(section.open_metadata_types),
            enums=tuple(section.enums),
            attribute_names=tuple(section.attribute_names),
            valid_value_sets=tuple(section.valid_value_sets),
            deployed_implementation_types=tuple(section.deployed_implementation_types),
            software_services=tuple(section.software_services),
            file_types=tuple(section.file_types),
            file_names=tuple(section.file_names),
            file_extensions=tuple(section.file_extensions),
            connector_directory=section.connector_directory,
            connector_categories=tuple(section.connector_categories),
            connector_types=tuple(section.connector_types),
            templates=tuple(section.templates),
            integration_group=section.integration_group,
            integration_connectors=tuple(section.integration_connectors),
            governance_engines=tuple(section.governance_engines),
            governance_services=tuple(section.governance_services),
            request_types=tuple(section.request_types),
            governance_processes=tuple(section.governance_processes),
        )

    @classmethod
    def from_yaml(cls, yaml_content: str) -> CatalogueSpec:
        """Parse and validate YAML content.

        Raises:
            CatalogueError: The YAML is malformed or does not match the schema
        """
        try:
            data = yaml.safe_load(yaml_content)
        except yaml.YAMLError as e:
            raise CatalogueError(f"Invalid YAML: {e}", cause=e) from e

        if not isinstance(data, dict):
            raise CatalogueError("Catalogue document must be a mapping")

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise CatalogueError(
                f"Catalogue failed validation with {e.error_count()} error(s): {e}",
                cause=e,
            ) from e

    @classmethod
    def from_yaml_file(cls, path: str | Path) -> CatalogueSpec:
        """Load and validate from a YAML file."""
        try:
            content = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            raise CatalogueError(f"Cannot read catalogue {path}: {e}", cause=e).with_context(path=str(path)) from e
        try:
            return cls.from_yaml(content)
        except ArchiveError as e:
            raise e.with_context(path=str(path))


def load_catalogue(path: str | Path) -> Catalogue:
    """Read a YAML catalogue file into a ``Catalogue``."""
    return CatalogueSpec.from_yaml_file(path).to_catalogue()


__all__ = [
    "CatalogueSection",
    "CatalogueSpec",
    "load_catalogue",
]
