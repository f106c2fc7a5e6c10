"""
omarchive - compiles open metadata definitions into a content-pack archive.

A build reads a catalogue of definition records (deployed implementation
types, connector types, templates, governance engines, request types,
governance processes), turns them into one graph of typed nodes, edges and
classifications with stable GUIDs, and writes it as a single JSON archive.

Examples:
    >>> from omarchive import ArchiveWriter
    >>> from omarchive.core.settings import BuilderSettings
    >>> path = ArchiveWriter.from_settings(BuilderSettings(output_dir="/tmp/pack")).write()
"""

__version__ = "0.3.0"

from omarchive.writer import ArchiveWriter  # noqa: E402

__all__ = ["ArchiveWriter", "__version__"]
