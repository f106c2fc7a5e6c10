"""
Archive writer: runs the processor plan and writes the archive file.

Manifesto:
    A build either produces a complete archive and an updated GUID map, or
    it produces neither.  Processors never touch the file system; the
    writer owns the registry session, the serialization and the final
    rename.

    - **All or nothing:** any processor error aborts the build, the GUID
      map is not saved and no archive file appears
    - **Ordered:** stages run in the plan's validated order
    - **Observable:** every stage is logged with the archive and processor
      bound to the log context

Architecture:
    ::

        ArchiveWriter.write()
          ├─ registry.load()              load GUID map
          ├─ build graph                  run plan stages in order
          ├─ snapshot                     Archive (header + nodes + edges)
          ├─ serialize → temp file
          ├─ os.replace(temp, target)
          └─ registry.persist()           only once the archive is in place

Examples:
    >>> from omarchive.definitions import builtin_catalogue
    >>> writer = ArchiveWriter(builtin_catalogue(), "/tmp/pack")
    >>> archive = writer.build()
    >>> archive.header.name
    'CoreContentPack'

Tags:
    writer, build, persistence, omarchive
"""

from __future__ import annotations

import json
import os
import tempfile
import time
from pathlib import Path

from omarchive.core.errors import ArchiveError, PersistenceError
from omarchive.core.identifiers import IdentifierRegistry
from omarchive.core.logging import LogContext, get_logger
from omarchive.core.model import Archive, ArchiveHeader
from omarchive.core.settings import BuilderSettings
from omarchive.definitions import Catalogue, builtin_catalogue, load_catalogue
from omarchive.processors import DEFAULT_PLAN, BuildContext, ProcessorPlan

logger = get_logger(__name__)

DEFAULT_ARCHIVE_FILE_NAME = "CoreContentPack.omarchive"


class ArchiveWriter:
    """Compiles one catalogue into one archive file.

    Args:
        catalogue: Definition records to compile
        output_dir: Directory the archive file is written to
        archive_file_name: Name of the archive file inside ``output_dir``
        guid_map_dir: Directory of the GUID map files; ``output_dir`` when
            omitted
        plan: Processor stages to run; ``DEFAULT_PLAN`` when omitted
    """

    def __init__(
        self,
        catalogue: Catalogue,
        output_dir: Path | str,
        *,
        archive_file_name: str = DEFAULT_ARCHIVE_FILE_NAME,
        guid_map_dir: Path | str | None = None,
        plan: ProcessorPlan | None = None,
    ) -> None:
        self.catalogue = catalogue
        self.output_dir = Path(output_dir)
        self.archive_file_name = archive_file_name
        self.guid_map_dir = Path(guid_map_dir) if guid_map_dir is not None else self.output_dir
        self.plan = plan or DEFAULT_PLAN
        self.archive: Archive | None = None

    @classmethod
    def from_settings(cls, settings: BuilderSettings, plan: ProcessorPlan | None = None) -> ArchiveWriter:
        """Writer for the configured catalogue (the built-in one by default)."""
        if settings.catalogue_file is not None:
            catalogue = load_catalogue(settings.catalogue_file)
        else:
            catalogue = builtin_catalogue()
        return cls(
            catalogue,
            settings.output_dir,
            archive_file_name=settings.archive_file_name,
            guid_map_dir=settings.resolved_guid_map_dir,
            plan=plan,
        )

    @property
    def archive_path(self) -> Path:
        return self.output_dir / self.archive_file_name

    def new_registry(self) -> IdentifierRegistry:
        metadata = self.catalogue.archive
        return IdentifierRegistry(metadata.registry_root_name, self.guid_map_dir, archive_guid=metadata.guid)

    def header(self) -> ArchiveHeader:
        metadata = self.catalogue.archive
        return ArchiveHeader(
            guid=metadata.guid,
            name=metadata.name,
            description=metadata.description,
            originator_name=metadata.originator_name,
            originator_license=metadata.originator_license,
            version_name=metadata.version_name,
            depends_on=metadata.depends_on,
        )

    # ── Build ────────────────────────────────────────────────────

    def _assemble(self, registry: IdentifierRegistry) -> Archive:
        context = BuildContext.create(registry)
        archive_name = self.catalogue.archive.name
        logger.info("build_started", archive=archive_name, stages=len(self.plan))
        started = time.perf_counter()

        for stage in self.plan:
            with LogContext(archive=archive_name, processor=stage.name):
                stage_started = time.perf_counter()
                logger.debug("processor_started")
                try:
                    stage.func(self.catalogue, context)
                except ArchiveError as e:
                    logger.error("processor_failed", error=e.message, category=e.category.value)
                    raise e.with_context(processor=stage.name)
                logger.debug(
                    "processor_completed",
                    nodes=len(context.assembler),
                    duration_ms=round((time.perf_counter() - stage_started) * 1000, 2),
                )

        archive = context.assembler.snapshot(self.header())
        logger.info(
            "build_completed",
            archive=archive_name,
            nodes=len(archive.nodes),
            edges=len(archive.edges),
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        self.archive = archive
        return archive

    def build(self) -> Archive:
        """Run every stage and return the archive; saves the GUID map on success."""
        with self.new_registry().session() as registry:
            return self._assemble(registry)

    # ── Write ────────────────────────────────────────────────────

    def _serialize(self, archive: Archive) -> str:
        target = self.archive_path
        tmp_name: str | None = None
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=target.parent, prefix=f".{target.name}.", suffix=".tmp", delete=False
            ) as handle:
                tmp_name = handle.name
                json.dump(archive.to_dict(), handle, indent=2)
                handle.write("\n")
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise PersistenceError(f"Unable to write archive {target}", path=str(target), cause=e) from e
        return tmp_name

    def write(self) -> Path:
        """Build, serialize and move the archive into place.

        The GUID map is saved only once the archive file is in place.

        Returns:
            Path of the written archive file.

        Raises:
            ArchiveError: A processor failed; nothing is written
            PersistenceError: The archive or the GUID map could not be written
        """
        target = self.archive_path
        registry = self.new_registry()
        registry.load()
        tmp_name: str | None = None
        try:
            archive = self._assemble(registry)
            tmp_name = self._serialize(archive)
            os.replace(tmp_name, target)
        except OSError as e:
            raise PersistenceError(f"Unable to write archive {target}", path=str(target), cause=e) from e
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)

        registry.persist()
        logger.info("archive_written", path=str(target), fingerprint=archive.fingerprint()[:16])
        return target


__all__ = ["ArchiveWriter", "DEFAULT_ARCHIVE_FILE_NAME"]
