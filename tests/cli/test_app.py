"""Tests for the ``omarchive-build`` command."""

from __future__ import annotations

import json
import textwrap

import pytest
from typer.testing import CliRunner

from omarchive import __version__
from omarchive.cli.app import app

runner = CliRunner()

MINIMAL_CATALOGUE = textwrap.dedent(
    """
    apiVersion: omarchive.io/v1
    kind: Catalogue
    metadata:
      guid: 7c2f6d8e-1e1f-4c64-8e66-9b9f5b8f3f21
      name: LabPack
      description: Lab technology
      originator_name: Data Platform Team
    spec:
      deployed_implementation_types:
        - name: Lab Server
          associated_type_name: SoftwareServer
          description: A server in the lab.
    """
)


@pytest.fixture(autouse=True)
def isolated(monkeypatch, tmp_path):
    for name in ("OMARCHIVE_OUTPUT_DIR", "OMARCHIVE_GUID_MAP_DIR", "OMARCHIVE_CATALOGUE_FILE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


class TestBuildCommand:
    def test_builds_core_pack(self, tmp_path):
        out = tmp_path / "out"
        result = runner.invoke(app, ["--output-dir", str(out), "--log-level", "WARNING"])

        assert result.exit_code == 0, result.output
        archive = json.loads((out / "CoreContentPack.omarchive").read_text(encoding="utf-8"))
        assert archive["header"]["archiveName"] == "CoreContentPack"
        assert "Entities" in result.output

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"omarchive {__version__}" in result.output

    def test_catalogue_file(self, tmp_path):
        catalogue = tmp_path / "lab.yaml"
        catalogue.write_text(MINIMAL_CATALOGUE, encoding="utf-8")

        result = runner.invoke(app, ["-o", str(tmp_path / "out"), "-c", str(catalogue), "-l", "ERROR"])

        assert result.exit_code == 0, result.output
        archive = json.loads((tmp_path / "out" / "CoreContentPack.omarchive").read_text(encoding="utf-8"))
        assert archive["header"]["archiveName"] == "LabPack"
        assert (tmp_path / "out" / "LabPackGUIDMap.json").exists()

    def test_invalid_catalogue_exits_1(self, tmp_path):
        catalogue = tmp_path / "broken.yaml"
        catalogue.write_text("apiVersion: omarchive.io/v1\nkind: Catalogue\nspec: [\n", encoding="utf-8")

        result = runner.invoke(app, ["-o", str(tmp_path / "out"), "-c", str(catalogue)])

        assert result.exit_code == 1
        assert "Error" in result.output
        assert not (tmp_path / "out" / "CoreContentPack.omarchive").exists()

    def test_missing_catalogue_file(self, tmp_path):
        """Typer rejects a catalogue path that does not exist."""
        result = runner.invoke(app, ["-c", str(tmp_path / "nope.yaml")])
        assert result.exit_code == 2

    def test_default_log_level(self, tmp_path):
        """Without --log-level the build logs at INFO and still succeeds."""
        out = tmp_path / "out"
        result = runner.invoke(app, ["--output-dir", str(out)])

        assert result.exit_code == 0, result.output
        assert (out / "CoreContentPack.omarchive").exists()
        assert "archive_written" in result.output

    def test_unknown_log_level(self, tmp_path):
        result = runner.invoke(app, ["-o", str(tmp_path / "out"), "--log-level", "CHATTY"])

        assert result.exit_code == 2
        assert "(VALIDATION)" in result.output
        assert "CHATTY" in result.output
        assert not (tmp_path / "out").exists()

    def test_conflicting_guids_exit_1(self, tmp_path):
        """A catalogue declaring one template with two GUIDs fails as an identity error."""
        templates = "".join(
            "    - kind: software-server\n"
            "      deployed_implementation_type: Lab Server\n"
            '      resource_name: "~{serverName}~"\n'
            f"      template_name: {name}\n"
            f"      guid: {guid}\n"
            for name, guid in (
                ("Lab Server Template", "11111111-1111-4111-8111-111111111111"),
                ("Another Lab Server Template", "22222222-2222-4222-8222-222222222222"),
            )
        )
        catalogue = tmp_path / "lab.yaml"
        catalogue.write_text(MINIMAL_CATALOGUE + "  templates:\n" + templates, encoding="utf-8")

        result = runner.invoke(app, ["-o", str(tmp_path / "out"), "-c", str(catalogue), "-l", "ERROR"])

        assert result.exit_code == 1
        assert "(IDENTITY)" in result.output
        assert not (tmp_path / "out" / "LabPackGUIDMap.json").exists()
