"""
Valid-value taxonomy: one organizing set per (type, property, map name).

Enumerated values in an archive hang off a four-level tree of
``ValidValueSet`` nodes::

    Egeria:ValidMetadataValue                              (root)
    └── Egeria:ValidMetadataValue:DataFile                 (type)
        └── …:DataFile:fileType                            (property)
            └── …:DataFile:additionalProperties:encoding   (map name)

Any processor can ask for the set of any tuple at any time; missing
ancestors are created first, and every set is created exactly once per
build because the cache is consulted before the graph is touched.

Examples:
    >>> ValidValueTaxonomy.construct_qualified_name("DataFile", "fileType", None, "CSV")
    'Egeria:ValidMetadataValue:DataFile:fileType:CSV'
    >>> ValidValueTaxonomy.construct_category("DataFile", "fileType", None)
    'DataFile:fileType'
    >>> ValidValueTaxonomy.parent_key(("DataFile", "fileType", None))
    ('DataFile', None, None)

Tags:
    taxonomy, valid-values, hierarchy, omarchive
"""

from __future__ import annotations

from collections.abc import Mapping

from omarchive.core.assembler import VALID_VALUE_DEFINITION, VALID_VALUE_SET, GraphAssembler
from omarchive.core.errors import DuplicateTaxonomyNodeError, InvalidTaxonomyKeyError
from omarchive.core.logging import get_logger

logger = get_logger(__name__)

VALID_METADATA_VALUES_PREFIX = "Egeria:ValidMetadataValue"
VALID_METADATA_VALUES_USAGE = "Values for open metadata properties"
OPEN_METADATA_ECOSYSTEM_SCOPE = "Open Metadata Ecosystem"
SET_DESCRIPTION = "Organizing set for valid metadata values"

TaxonomyKey = tuple[str | None, str | None, str | None]


class ValidValueTaxonomy:
    """Lazily built valid-value set hierarchy for one build."""

    def __init__(self, assembler: GraphAssembler) -> None:
        self._assembler = assembler
        self._sets: dict[TaxonomyKey, str] = {}

    # ── Naming ───────────────────────────────────────────────────

    @staticmethod
    def construct_qualified_name(
        type_name: str | None = None,
        property_name: str | None = None,
        map_name: str | None = None,
        preferred_value: str | None = None,
    ) -> str:
        """Prefix followed by ``:<part>`` for every non-null part."""
        parts = [VALID_METADATA_VALUES_PREFIX]
        parts.extend(p for p in (type_name, property_name, map_name, preferred_value) if p is not None)
        return ":".join(parts)

    @staticmethod
    def construct_category(
        type_name: str | None = None,
        property_name: str | None = None,
        map_name: str | None = None,
    ) -> str:
        """Non-null parts joined by ``:`` (empty string for the root)."""
        return ":".join(p for p in (type_name, property_name, map_name) if p is not None)

    @staticmethod
    def parent_key(key: TaxonomyKey) -> TaxonomyKey | None:
        """Strip the most specific non-null component; ``None`` for the root."""
        type_name, property_name, map_name = key
        if map_name is not None:
            return (type_name, property_name, None)
        if property_name is not None:
            return (type_name, None, None)
        if type_name is not None:
            return (None, None, None)
        return None

    # ── Hierarchy ────────────────────────────────────────────────

    def get_or_create_category(
        self,
        type_name: str | None = None,
        property_name: str | None = None,
        map_name: str | None = None,
    ) -> str:
        """GUID of the set for this tuple, creating it and its ancestors if needed.

        Raises:
            InvalidTaxonomyKeyError: ``map_name`` given without ``property_name``
            DuplicateTaxonomyNodeError: The set node exists in the graph but
                not in this taxonomy's cache
        """
        if map_name is not None and property_name is None:
            raise InvalidTaxonomyKeyError(type_name, property_name, map_name)

        key: TaxonomyKey = (type_name, property_name, map_name)
        cached = self._sets.get(key)
        if cached is not None:
            return cached

        parent = self.parent_key(key)
        parent_guid = self.get_or_create_category(*parent) if parent is not None else None

        qualified_name = self.construct_qualified_name(type_name, property_name, map_name)
        if self._assembler.has_qualified_name(qualified_name):
            raise DuplicateTaxonomyNodeError(qualified_name)

        if parent is None:
            display_name = VALID_METADATA_VALUES_PREFIX
        else:
            display_name = qualified_name[len(VALID_METADATA_VALUES_PREFIX) + 1 :]

        set_guid = self._assembler.add_valid_value(
            qualified_name,
            type_name=VALID_VALUE_SET,
            display_name=display_name,
            description=SET_DESCRIPTION,
            category=self.construct_category(type_name, property_name, map_name),
            usage=VALID_METADATA_VALUES_USAGE,
            scope=OPEN_METADATA_ECOSYSTEM_SCOPE,
            parent_set_guid=parent_guid,
        )
        self._sets[key] = set_guid
        logger.debug("valid_value_set_created", qualified_name=qualified_name, guid=set_guid)
        return set_guid

    def add_value(
        self,
        type_name: str | None,
        property_name: str | None,
        map_name: str | None,
        preferred_value: str,
        *,
        display_name: str | None = None,
        description: str | None = None,
        data_type: str = "string",
        is_case_sensitive: bool = False,
        additional_properties: Mapping[str, str] | None = None,
        guid: str | None = None,
    ) -> str:
        """Add a ``ValidValueDefinition`` under its set and return its GUID."""
        set_guid = self.get_or_create_category(type_name, property_name, map_name)
        return self._assembler.add_valid_value(
            self.construct_qualified_name(type_name, property_name, map_name, preferred_value),
            display_name=display_name or preferred_value,
            description=description,
            category=self.construct_category(type_name, property_name, map_name),
            usage=VALID_METADATA_VALUES_USAGE,
            scope=OPEN_METADATA_ECOSYSTEM_SCOPE,
            preferred_value=preferred_value,
            data_type=data_type,
            is_case_sensitive=is_case_sensitive,
            parent_set_guid=set_guid,
            additional_properties=additional_properties,
            guid=guid,
        )

    def __contains__(self, key: object) -> bool:
        return key in self._sets

    def __len__(self) -> int:
        return len(self._sets)

    @property
    def sets(self) -> dict[TaxonomyKey, str]:
        return dict(self._sets)


__all__ = [
    "VALID_METADATA_VALUES_PREFIX",
    "TaxonomyKey",
    "ValidValueTaxonomy",
]
