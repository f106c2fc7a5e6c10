"""
Structured error types for the archive assembly engine.

Every failure the engine can raise is a subclass of ArchiveError.  Errors
carry a category for routing, a structured context (processor, qualified
name, GUID, type name) for logging, and an optional chained cause.

Manifesto:
    - **Typed Error Hierarchy:** One error type per failure mode of the build
    - **Always Fatal:** Nothing in the engine is retried or recovered locally
    - **Rich Context:** Errors carry the identity that triggered them
    - **Error Chaining:** Preserve original exceptions (I/O, YAML) as cause

Architecture:
    ::

        ┌─────────────────────────────────────────────────────────────────┐
        │                        ArchiveError                              │
        │               (category, context, cause)                         │
        ├─────────────────────────────────────────────────────────────────┤
        │                                                                  │
        │  GUIDConflictError       DanglingReferenceError                  │
        │  DuplicateInstanceError      IdentifierNotFound                  │
        │  (IDENTITY)              (REFERENCE)                             │
        │                                                                  │
        │  DuplicateTaxonomyNodeError   InvalidTaxonomyKeyError            │
        │  (TAXONOMY)                   CatalogueError (VALIDATION)        │
        │                                                                  │
        │  ProcessorOrderError          PersistenceError                   │
        │  (CONFIG)                     (PERSISTENCE)                      │
        └─────────────────────────────────────────────────────────────────┘

Examples:
    >>> error = GUIDConflictError("FileFolder:template", "g1", "g2")
    >>> error.category
    <ErrorCategory.IDENTITY: 'IDENTITY'>
    >>> error.context.qualified_name
    'FileFolder:template'

    >>> try:
    ...     raise OSError("disk full")
    ... except OSError as e:
    ...     raise PersistenceError("Unable to save GUID map", cause=e)
    Traceback (most recent call last):
    ...
    PersistenceError: Unable to save GUID map

Guardrails:
    ❌ DON'T: Use `assert` to check identity - asserts can be disabled
    ✅ DO: Raise GUIDConflictError from an explicit comparison

    ❌ DON'T: Catch ArchiveError inside a processor and carry on
    ✅ DO: Let it abort the build so no partial archive is written

Tags:
    error-handling, exception-hierarchy, error-context, omarchive
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """
    Standard error categories for classification and reporting.

    Attributes:
        IDENTITY: GUID assignment disagreements
        REFERENCE: Edges or lookups that point at absent nodes
        TAXONOMY: Valid-value hierarchy invariant violations
        VALIDATION: Malformed input (catalogue, taxonomy keys)
        CONFIG: Misconfigured build (processor plan, settings)
        PERSISTENCE: Registry or archive I/O failures
        INTERNAL: Bugs, unexpected state
    """

    IDENTITY = "IDENTITY"
    REFERENCE = "REFERENCE"
    TAXONOMY = "TAXONOMY"
    VALIDATION = "VALIDATION"
    CONFIG = "CONFIG"
    PERSISTENCE = "PERSISTENCE"
    INTERNAL = "INTERNAL"


@dataclass
class ErrorContext:
    """
    Structured metadata attached to an error.

    Only fields that are set appear in `to_dict()`, so the context can be
    splatted straight into a structured log event.

    Attributes:
        processor: Name of the definition processor that was running
        qualified_name: Qualified name of the element involved
        guid: GUID of the element involved
        type_name: Open metadata type name of the element involved
        path: File path for persistence errors
        metadata: Additional key-value pairs
    """

    processor: str | None = None
    qualified_name: str | None = None
    guid: str | None = None
    type_name: str | None = None
    path: str | None = None

    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for key in ["processor", "qualified_name", "guid", "type_name", "path"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class ArchiveError(Exception):
    """
    Base exception for all archive assembly errors.

    Subclasses set `default_category`.  Every ArchiveError is fatal for the
    build that raised it: the writer lets it propagate, no archive file is
    left behind and the identifier registry is not persisted.

    Examples:
        >>> error = ArchiveError("Something went wrong")
        >>> error.category
        <ErrorCategory.INTERNAL: 'INTERNAL'>

        >>> error = ArchiveError("Lookup failed").with_context(processor="templates")
        >>> error.context.processor
        'templates'

        >>> ArchiveError("Test", category=ErrorCategory.CONFIG).to_dict()["category"]
        'CONFIG'
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> ArchiveError:
        """
        Add context to this error (fluent API).

        Known ErrorContext fields are set directly, anything else lands in
        `context.metadata`.  Fields that are already set are not overwritten,
        so the innermost raiser wins.
        """
        for key, value in kwargs.items():
            if hasattr(self.context, key) and key != "metadata":
                if getattr(self.context, key) is None:
                    setattr(self.context, key, value)
            else:
                self.context.metadata.setdefault(key, value)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# IDENTITY ERRORS
# =============================================================================


class GUIDConflictError(ArchiveError):
    """
    A qualified name was pre-declared with one GUID but resolved to another.

    Signals a definition-authoring bug: a definition was renamed or re-keyed
    without updating its well-known GUID, or two definitions claim the same
    qualified name with different GUIDs.
    """

    default_category = ErrorCategory.IDENTITY

    def __init__(
        self,
        qualified_name: str,
        expected_guid: str,
        actual_guid: str,
        message: str | None = None,
    ):
        msg = message or (
            f"GUID conflict for '{qualified_name}': declared {expected_guid} "
            f"but registry holds {actual_guid}"
        )
        super().__init__(
            msg,
            context=ErrorContext(
                qualified_name=qualified_name,
                guid=actual_guid,
                metadata={"expected_guid": expected_guid},
            ),
        )
        self.qualified_name = qualified_name
        self.expected_guid = expected_guid
        self.actual_guid = actual_guid


class DuplicateInstanceError(ArchiveError):
    """The same node GUID, or edge key with different content, was added twice."""

    default_category = ErrorCategory.IDENTITY

    def __init__(self, guid: str, description: str):
        super().__init__(
            f"Duplicate instance {guid} in archive: {description}",
            context=ErrorContext(guid=guid),
        )
        self.guid = guid


# =============================================================================
# REFERENCE ERRORS
# =============================================================================


class DanglingReferenceError(ArchiveError):
    """
    An edge, classification or lookup referenced a node not in the graph.

    Signals a processor-ordering bug: something was referenced before the
    processor that creates it had run.
    """

    default_category = ErrorCategory.REFERENCE

    def __init__(self, reference: str, message: str | None = None):
        super().__init__(message or f"Dangling reference to '{reference}'")
        self.reference = reference


class IdentifierNotFound(DanglingReferenceError):
    """Identifier registry has no GUID for the requested qualified name."""

    def __init__(self, qualified_name: str):
        super().__init__(
            qualified_name,
            f"No GUID registered for qualified name '{qualified_name}'",
        )
        self.context.qualified_name = qualified_name


# =============================================================================
# TAXONOMY / VALIDATION ERRORS
# =============================================================================


class DuplicateTaxonomyNodeError(ArchiveError):
    """A valid-value set node already exists although the taxonomy cache missed it."""

    default_category = ErrorCategory.TAXONOMY

    def __init__(self, qualified_name: str):
        super().__init__(
            f"Valid value set '{qualified_name}' already exists outside the taxonomy cache",
            context=ErrorContext(qualified_name=qualified_name),
        )


class InvalidTaxonomyKeyError(ArchiveError):
    """A taxonomy tuple that cannot form a prefix chain (map name without property)."""

    default_category = ErrorCategory.VALIDATION

    def __init__(
        self,
        type_name: str | None,
        property_name: str | None,
        map_name: str | None,
    ):
        super().__init__(
            f"Invalid valid-value key (type={type_name!r}, property={property_name!r}, "
            f"map={map_name!r}): a map name requires a property name",
            context=ErrorContext(type_name=type_name),
        )


class CatalogueError(ArchiveError):
    """The definition catalogue could not be parsed or failed validation."""

    default_category = ErrorCategory.VALIDATION


# =============================================================================
# CONFIG / PERSISTENCE ERRORS
# =============================================================================


class ProcessorOrderError(ArchiveError):
    """A processor plan stage requires a lookup table no earlier stage provides."""

    default_category = ErrorCategory.CONFIG

    def __init__(self, stage: str, missing: set[str]):
        super().__init__(
            f"Processor '{stage}' requires {sorted(missing)} which no earlier processor provides",
            context=ErrorContext(processor=stage),
        )
        self.stage = stage
        self.missing = missing


class PersistenceError(ArchiveError):
    """Identifier registry or archive file could not be loaded or saved."""

    default_category = ErrorCategory.PERSISTENCE

    def __init__(self, message: str, *, path: str | None = None, cause: Exception | None = None):
        super().__init__(message, context=ErrorContext(path=path), cause=cause)


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================


def categorize_error(error: Exception) -> ErrorCategory:
    """Get category for any exception."""
    if isinstance(error, ArchiveError):
        return error.category
    if isinstance(error, OSError):
        return ErrorCategory.PERSISTENCE
    if isinstance(error, ValueError | TypeError | KeyError):
        return ErrorCategory.VALIDATION
    return ErrorCategory.INTERNAL


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "ArchiveError",
    "GUIDConflictError",
    "DuplicateInstanceError",
    "DanglingReferenceError",
    "IdentifierNotFound",
    "DuplicateTaxonomyNodeError",
    "InvalidTaxonomyKeyError",
    "CatalogueError",
    "ProcessorOrderError",
    "PersistenceError",
    "categorize_error",
]
