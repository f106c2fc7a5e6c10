"""
Definition records and catalogues.

``records`` holds the frozen record types, ``catalogue`` the container plus
the built-in core content pack, and ``loader`` the YAML path for
operator-supplied catalogues.
"""

from omarchive.definitions.catalogue import ArchiveMetadataRecord, Catalogue, builtin_catalogue
from omarchive.definitions.loader import CatalogueSpec, load_catalogue

__all__ = [
    "ArchiveMetadataRecord",
    "Catalogue",
    "CatalogueSpec",
    "builtin_catalogue",
    "load_catalogue",
]
