"""
Core building blocks of the archive assembly engine.

Architecture:
    ::

        Layer 0 (no internal deps)   errors, hashing, logging, settings
        Layer 1                      model, identifiers
        Layer 2                      assembler
        Layer 3                      taxonomy

    Definition processors and the archive writer sit on top and only touch
    the graph through ``GraphAssembler`` and ``ValidValueTaxonomy``.
"""

from omarchive.core.assembler import GraphAssembler
from omarchive.core.errors import (
    ArchiveError,
    CatalogueError,
    DanglingReferenceError,
    DuplicateInstanceError,
    DuplicateTaxonomyNodeError,
    ErrorCategory,
    ErrorContext,
    GUIDConflictError,
    IdentifierNotFound,
    InvalidTaxonomyKeyError,
    PersistenceError,
    ProcessorOrderError,
)
from omarchive.core.identifiers import IdentifierRegistry
from omarchive.core.model import Archive, ArchiveHeader, Classification, Edge, Node
from omarchive.core.taxonomy import ValidValueTaxonomy

__all__ = [
    "Archive",
    "ArchiveError",
    "ArchiveHeader",
    "CatalogueError",
    "Classification",
    "DanglingReferenceError",
    "DuplicateInstanceError",
    "DuplicateTaxonomyNodeError",
    "Edge",
    "ErrorCategory",
    "ErrorContext",
    "GUIDConflictError",
    "GraphAssembler",
    "IdentifierNotFound",
    "IdentifierRegistry",
    "InvalidTaxonomyKeyError",
    "Node",
    "PersistenceError",
    "ProcessorOrderError",
    "ValidValueTaxonomy",
]
