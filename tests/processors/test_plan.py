"""Tests for ProcessorPlan ordering and BuildContext lookup tables."""

from __future__ import annotations

import pytest

from omarchive.core.errors import ArchiveError, DanglingReferenceError, DuplicateInstanceError, ProcessorOrderError
from omarchive.processors import DEFAULT_PLAN, DEFAULT_STAGES, LookupTables, ProcessorPlan, ProcessorStage


def _noop(catalogue, context):
    return None


def _stage(name, requires=(), provides=()):
    return ProcessorStage(name, _noop, requires=frozenset(requires), provides=frozenset(provides))


class TestDefaultPlan:
    """Tests for the built-in stage order."""

    def test_order(self):
        """The default plan runs every stage in dependency order."""
        assert DEFAULT_PLAN.stage_names() == [
            "open_metadata_types",
            "deployed_implementation_types",
            "file_reference_data",
            "connectors",
            "templates",
            "integration_connectors",
            "governance_engines",
            "request_types",
            "governance_processes",
        ]

    def test_validates(self):
        """The default stages pass validation."""
        ProcessorPlan(DEFAULT_STAGES).validate()

    def test_from_stages_reorders_reversed_input(self):
        """Sorting the reversed default stages yields a valid plan."""
        plan = ProcessorPlan.from_stages(reversed(DEFAULT_STAGES))
        names = plan.stage_names()
        assert names.index("deployed_implementation_types") < names.index("connectors")
        assert names.index("connectors") < names.index("templates")
        assert names.index("templates") < names.index("request_types")
        assert names.index("integration_connectors") < names.index("request_types")
        assert names[-1] == "governance_processes"
        assert len(plan) == len(DEFAULT_STAGES)


class TestProcessorPlan:
    """Tests for validation and topological sorting."""

    def test_missing_requirement(self):
        """A stage requiring an unprovided table is rejected up front."""
        with pytest.raises(ProcessorOrderError) as exc:
            ProcessorPlan([_stage("b", requires={"x"})])
        assert exc.value.stage == "b"
        assert exc.value.missing == {"x"}

    def test_provider_after_consumer(self):
        """A provider listed after its consumer fails validation."""
        with pytest.raises(ProcessorOrderError):
            ProcessorPlan([_stage("b", requires={"x"}), _stage("a", provides={"x"})])

    def test_validation_can_be_disabled(self):
        """validate=False accepts any order."""
        plan = ProcessorPlan([_stage("b", requires={"x"}), _stage("a", provides={"x"})], validate=False)
        assert plan.stage_names() == ["b", "a"]

    def test_duplicate_names(self):
        """Stage names must be unique."""
        with pytest.raises(ValueError, match="Duplicate processor names"):
            ProcessorPlan([_stage("a"), _stage("a")])

    def test_from_stages_sorts(self):
        """from_stages puts providers first."""
        plan = ProcessorPlan.from_stages(
            [_stage("c", requires={"y"}), _stage("b", requires={"x"}, provides={"y"}), _stage("a", provides={"x"})]
        )
        assert plan.stage_names() == ["a", "b", "c"]

    def test_from_stages_keeps_declaration_order_for_ties(self):
        """Independent stages keep their declared order."""
        plan = ProcessorPlan.from_stages([_stage("z"), _stage("y"), _stage("x")])
        assert plan.stage_names() == ["z", "y", "x"]

    def test_from_stages_unprovided(self):
        """A requirement nobody provides is reported."""
        with pytest.raises(ProcessorOrderError) as exc:
            ProcessorPlan.from_stages([_stage("a", requires={"nothing"})])
        assert exc.value.missing == {"nothing"}

    def test_from_stages_cycle(self):
        """Mutually dependent stages are rejected."""
        with pytest.raises(ProcessorOrderError, match="cycle"):
            ProcessorPlan.from_stages(
                [_stage("a", requires={"y"}, provides={"x"}), _stage("b", requires={"x"}, provides={"y"})]
            )

    def test_iteration_and_repr(self):
        """Plans iterate their stages and show their names."""
        plan = ProcessorPlan([_stage("a"), _stage("b")])
        assert [s.name for s in plan] == ["a", "b"]
        assert repr(plan) == "ProcessorPlan(['a', 'b'])"


class TestLookupTables:
    """Tests for the lookup tables shared between stages."""

    def test_record_and_require(self):
        """Recorded GUIDs can be required later."""
        tables = LookupTables()
        tables.record("templates", "qn", "g1")
        assert tables.require("templates", "qn") == "g1"

    def test_require_missing(self):
        """A missing key raises DanglingReferenceError naming the table."""
        with pytest.raises(DanglingReferenceError) as exc:
            LookupTables().require("connector_types", "Unknown:Connector")
        assert exc.value.reference == "Unknown:Connector"
        assert exc.value.context.metadata["lookup_table"] == "connector_types"

    def test_unknown_table(self):
        """Unknown table names are rejected."""
        with pytest.raises(ArchiveError, match="Unknown lookup table"):
            LookupTables().table("dashboards")

    def test_record_same_guid_twice(self):
        """Recording a key again with the same GUID is harmless."""
        tables = LookupTables()
        tables.record("templates", "qn", "g1")
        tables.record("templates", "qn", "g1")
        assert tables.require("templates", "qn") == "g1"

    def test_record_rebinds_key(self):
        """A key already bound to another GUID is a duplicate."""
        tables = LookupTables()
        tables.record("deployed_implementation_types", "Store", "g1")
        with pytest.raises(DuplicateInstanceError) as exc:
            tables.record("deployed_implementation_types", "Store", "g2")
        assert exc.value.guid == "g2"
        assert exc.value.context.metadata["lookup_table"] == "deployed_implementation_types"
        assert tables.require("deployed_implementation_types", "Store") == "g1"
