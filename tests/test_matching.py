"""Tests for matching parsed functions to ABI entries."""

import pytest

from tests.helpers import elementary
from natspecdocs.matching import documentation_weight, match_interface, select_best
from natspecdocs.models import Candidate, FunctionNode, InterfaceEntry, Natspec, Parameter
from natspecdocs.validators import DocReport


def _candidate(name, types=(), notice=None, contract="C"):
    fn = FunctionNode(
        name=name,
        contract=contract,
        line=1,
        visibility="external",
        parameters=[
            Parameter(name=f"p{i}", type_name=elementary(t)) for i, t in enumerate(types)
        ],
    )
    return Candidate(function=fn, natspec=Natspec(notice=notice))


def _with_weight(candidate, length):
    """Pad the notice so the serialized record has exactly `length` characters."""
    base = documentation_weight(candidate)
    candidate.natspec.notice = (candidate.natspec.notice or "") + "x" * (length - base)
    assert documentation_weight(candidate) == length
    return candidate


class TestSelectBest:
    def test_longest_documentation_wins(self):
        short = _with_weight(_candidate("f", notice=""), 80)
        long = _with_weight(_candidate("f", notice=""), 120)

        assert select_best([short, long]) is long
        assert select_best([long, short]) is long

    def test_first_seen_wins_ties(self):
        first = _candidate("f", notice="same", contract="A")
        second = _candidate("f", notice="same", contract="B")

        assert select_best([first, second]) is first

    def test_documented_beats_undocumented(self):
        empty = _candidate("f")
        documented = _candidate("f", notice="Does things")

        assert select_best([empty, documented]) is documented

    def test_empty_list(self):
        with pytest.raises(ValueError):
            select_best([])


class TestMatchInterface:
    def test_one_method_per_entry(self):
        candidates = [
            _candidate("transfer", ["address", "uint256"], "Transfer"),
            _candidate("approve", ["address", "uint256"], "Approve"),
            _candidate("helper", ["uint256"], "Not in the ABI"),
        ]
        entries = [
            InterfaceEntry(name="approve", signature="approve(address,uint256)"),
            InterfaceEntry(name="transfer", signature="transfer(address,uint256)"),
        ]
        report = DocReport()

        matched = match_interface(entries, candidates, report)

        assert [m.function.name for m in matched] == ["approve", "transfer"]
        assert not report.failed

    def test_overloads_resolve_by_parameter_types(self):
        one = _candidate("mint", ["uint256"], "Mint to self")
        two = _candidate("mint", ["address", "uint256"], "Mint to guy")
        entries = [
            InterfaceEntry(name="mint", signature="mint(address,uint256)"),
            InterfaceEntry(name="mint", signature="mint(uint256)"),
        ]

        matched = match_interface(entries, [one, two], DocReport())

        assert [m.natspec.notice for m in matched] == ["Mint to guy", "Mint to self"]

    def test_duplicate_declarations_choose_best_documented(self):
        bare = _candidate("owner", notice="Owner", contract="IBase")
        rich = _candidate("owner", notice="Get the current owner of the colony", contract="IColony")
        entries = [InterfaceEntry(name="owner", signature="owner()")]
        report = DocReport()

        matched = match_interface(entries, [bare, rich], report)

        assert len(matched) == 1
        assert matched[0].function.contract == "IColony"
        assert report.warnings == ["2 declarations of owner(), using the one from IColony"]
        assert not report.failed

    def test_missing_source_is_reported(self):
        entries = [InterfaceEntry(name="ghost", signature="ghost(uint256)")]
        report = DocReport()

        matched = match_interface(entries, [], report, unit="IColony")

        assert matched == []
        assert report.failed
        assert report.errors == ["IColony: ghost(uint256) has no matching function in source"]
