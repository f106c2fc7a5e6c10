"""Builder settings.

``BuilderSettings`` holds everything a build needs that is not part of the
definition catalogue: where the archive goes, where the identifier registry
lives, an optional catalogue file, and logging preferences.  Values come from
``OMARCHIVE_*`` environment variables and an optional ``.env`` file; CLI
options override them per run.

Examples:
    >>> import os
    >>> os.environ["OMARCHIVE_OUTPUT_DIR"] = "/tmp/archives"
    >>> BuilderSettings().output_dir
    PosixPath('/tmp/archives')

Tags:
    settings, configuration, pydantic, environment, omarchive
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BuilderSettings(BaseSettings):
    """Settings for one archive build.

    Fields
    ──────
    output_dir        : Directory the archive file is written to
    archive_file_name : File name of the archive inside output_dir
    guid_map_dir      : Directory holding the GUID map and used-GUID files
                        (defaults to output_dir)
    catalogue_file    : Optional YAML catalogue replacing the built-in one
    log_level         : Structlog log level
    json_logs         : Force JSON (True) or console (False) logs; None = auto
    """

    model_config = SettingsConfigDict(
        env_prefix="OMARCHIVE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Output ───────────────────────────────────────────────────
    output_dir: Path = Field(
        default_factory=Path.cwd,
        description="Directory the archive file is written to",
    )
    archive_file_name: str = "CoreContentPack.omarchive"

    # ── Identity ─────────────────────────────────────────────────
    guid_map_dir: Path | None = Field(
        default=None,
        description="Directory for <Root>GUIDMap.json; defaults to output_dir",
    )

    # ── Input ────────────────────────────────────────────────────
    catalogue_file: Path | None = None

    # ── Observability ────────────────────────────────────────────
    log_level: str = "INFO"
    json_logs: bool | None = None

    @property
    def archive_path(self) -> Path:
        return self.output_dir / self.archive_file_name

    @property
    def resolved_guid_map_dir(self) -> Path:
        return self.guid_map_dir or self.output_dir


@lru_cache(maxsize=1)
def get_settings() -> BuilderSettings:
    """Return the process-wide settings instance (cached)."""
    return BuilderSettings()


__all__ = ["BuilderSettings", "get_settings"]
