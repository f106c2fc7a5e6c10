"""
Identifier registry: stable qualified-name → GUID assignment across builds.

Every node and edge in an archive gets its GUID from here.  The registry is
loaded from ``<Root>GUIDMap.json`` at the start of a build and written back
(with the run's ``<Root>UsedGUIDs.json``) only when the build succeeds, so a
qualified name keeps its GUID from one build to the next.

Manifesto:
    Downstream repositories key everything on GUID.  If a rebuild handed out
    fresh GUIDs, every loaded instance would be duplicated instead of updated.

    - **Stable:** A name seen before keeps its GUID
    - **Deterministic:** A name never seen gets ``uuid5(archive_guid, name)``,
      so two builds from the same starting map agree even on new names
    - **Guarded:** A well-known GUID that disagrees with the map is an error,
      never silently overwritten
    - **Atomic:** The map is replaced in one step or not at all

Architecture:
    ::

        session()  ──▶ load()  ──▶ reserve()/lookup() … ──▶ persist()
                                                            (clean exit only)

        reserve(qn, requested_guid)
        ┌──────────────┬──────────────────────┬─────────────────────────┐
        │ qn known?    │ requested_guid       │ result                  │
        ├──────────────┼──────────────────────┼─────────────────────────┤
        │ yes          │ None or same         │ existing GUID           │
        │ yes          │ different            │ GUIDConflictError       │
        │ no           │ bound to other qn    │ GUIDConflictError       │
        │ no           │ given                │ requested_guid          │
        │ no           │ None                 │ uuid5(archive_guid, qn) │
        └──────────────┴──────────────────────┴─────────────────────────┘

Examples:
    >>> registry = IdentifierRegistry("CoreContentPack", archive_guid="9cbd2b33-e80f-4df2-adc6-d859ebff4c34")
    >>> g = registry.reserve("FileFolder:template")
    >>> registry.reserve("FileFolder:template") == g
    True
    >>> registry.lookup("FileFolder:template") == g
    True
    >>> registry.query("Unknown") is None
    True

Tags:
    identity, guid, registry, persistence, omarchive
"""

from __future__ import annotations

import json
import os
import tempfile
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from omarchive.core.errors import GUIDConflictError, IdentifierNotFound, PersistenceError
from omarchive.core.logging import get_logger

logger = get_logger(__name__)


def write_json_atomic(path: Path, data: Any) -> None:
    """Write ``data`` as JSON to ``path`` via a temp file and ``os.replace``.

    Raises:
        PersistenceError: If the directory cannot be created or the file
            cannot be written.  No partial file is left at ``path``.
    """
    tmp_name: str | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", delete=False
        ) as handle:
            tmp_name = handle.name
            json.dump(data, handle, indent=2, sort_keys=True)
            handle.write("\n")
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise PersistenceError(f"Unable to write {path}", path=str(path), cause=e) from e


class IdentifierRegistry:
    """Qualified name → GUID map with load/persist around a build.

    Args:
        root_name: Prefix of the persisted files (``<root_name>GUIDMap.json``)
        directory: Where the files live; ``None`` keeps the registry in memory
        archive_guid: Namespace for generated GUIDs.  Any string is accepted;
            non-UUID strings are hashed into a UUID namespace first.
    """

    def __init__(
        self,
        root_name: str,
        directory: Path | str | None = None,
        *,
        archive_guid: str,
    ) -> None:
        self.root_name = root_name
        self.directory = Path(directory) if directory is not None else None
        self.archive_guid = archive_guid
        try:
            self._namespace = uuid.UUID(archive_guid)
        except ValueError:
            self._namespace = uuid.uuid5(uuid.NAMESPACE_URL, archive_guid)

        self._guids: dict[str, str] = {}
        self._names_by_guid: dict[str, str] = {}
        self._used: dict[str, None] = {}

    # ── Paths ────────────────────────────────────────────────────

    @property
    def guid_map_path(self) -> Path | None:
        if self.directory is None:
            return None
        return self.directory / f"{self.root_name}GUIDMap.json"

    @property
    def used_guids_path(self) -> Path | None:
        if self.directory is None:
            return None
        return self.directory / f"{self.root_name}UsedGUIDs.json"

    # ── Identity ─────────────────────────────────────────────────

    def reserve(self, qualified_name: str, requested_guid: str | None = None) -> str:
        """Return the GUID for ``qualified_name``, assigning one if needed.

        Raises:
            GUIDConflictError: ``requested_guid`` disagrees with the GUID
                already held for the name, or is already held by another name.
        """
        existing = self._guids.get(qualified_name)
        if existing is not None:
            if requested_guid is not None and requested_guid != existing:
                raise GUIDConflictError(qualified_name, requested_guid, existing)
            self._used[existing] = None
            return existing

        if requested_guid is not None:
            owner = self._names_by_guid.get(requested_guid)
            if owner is not None and owner != qualified_name:
                raise GUIDConflictError(
                    qualified_name,
                    requested_guid,
                    requested_guid,
                    message=f"GUID {requested_guid} requested for '{qualified_name}' "
                    f"is already assigned to '{owner}'",
                )
            guid = requested_guid
        else:
            guid = str(uuid.uuid5(self._namespace, qualified_name))

        self._guids[qualified_name] = guid
        self._names_by_guid[guid] = qualified_name
        self._used[guid] = None
        return guid

    def lookup(self, qualified_name: str) -> str:
        """Return the GUID held for ``qualified_name``.

        Raises:
            IdentifierNotFound: The name has never been reserved or loaded.
        """
        guid = self._guids.get(qualified_name)
        if guid is None:
            raise IdentifierNotFound(qualified_name)
        return guid

    def query(self, qualified_name: str) -> str | None:
        """Non-raising ``lookup``."""
        return self._guids.get(qualified_name)

    def __contains__(self, qualified_name: object) -> bool:
        return qualified_name in self._guids

    def __len__(self) -> int:
        return len(self._guids)

    @property
    def used_guids(self) -> list[str]:
        """GUIDs reserved during this run, in first-use order."""
        return list(self._used)

    def as_dict(self) -> dict[str, str]:
        return dict(self._guids)

    def clear(self) -> None:
        """Forget all assignments (used by tests)."""
        self._guids.clear()
        self._names_by_guid.clear()
        self._used.clear()

    # ── Persistence ──────────────────────────────────────────────

    def load(self) -> int:
        """Merge the persisted GUID map into the registry.

        A missing file means a first build and loads nothing.

        Returns:
            Number of entries loaded.

        Raises:
            PersistenceError: The file exists but cannot be read or parsed.
        """
        path = self.guid_map_path
        if path is None or not path.exists():
            logger.info("guid_map_not_found", path=str(path) if path else None)
            return 0

        try:
            with path.open(encoding="utf-8") as handle:
                data = json.load(handle)
        except (OSError, ValueError) as e:
            raise PersistenceError(f"Unable to read GUID map {path}", path=str(path), cause=e) from e

        if not isinstance(data, dict):
            raise PersistenceError(f"GUID map {path} is not a JSON object", path=str(path))

        for qualified_name, guid in data.items():
            self._guids[qualified_name] = guid
            self._names_by_guid.setdefault(guid, qualified_name)

        logger.info("guid_map_loaded", path=str(path), entries=len(data))
        return len(data)

    def persist(self) -> None:
        """Write the GUID map and the used-GUID list.

        Raises:
            PersistenceError: Either file could not be written.
        """
        map_path = self.guid_map_path
        used_path = self.used_guids_path
        if map_path is None or used_path is None:
            logger.debug("guid_map_not_persisted", reason="in-memory registry")
            return

        write_json_atomic(map_path, self._guids)
        write_json_atomic(used_path, self.used_guids)
        logger.info("guid_map_saved", path=str(map_path), entries=len(self._guids), used=len(self._used))

    @contextmanager
    def session(self) -> Iterator[IdentifierRegistry]:
        """Load on entry; persist only if the body completes without raising."""
        self.load()
        yield self
        self.persist()


__all__ = ["IdentifierRegistry", "write_json_atomic"]
