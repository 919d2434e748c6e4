"""Per-unit documentation generation."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .config import InterfaceUnit
from .extractors import extract_candidates
from .generators import generate_interface_markdown
from .interface import AbiEntry, interface_entries, load_artifact
from .matching import match_interface
from .models import MatchedMethod
from .parsing import parse_source
from .sources import flatten_source, read_text
from .validators import DocReport, compute_coverage

log = logging.getLogger(__name__)


@dataclass
class UnitResult:
    """Rendered documentation for one interface unit."""

    unit: InterfaceUnit
    markdown: str
    methods: list[MatchedMethod]
    report: DocReport

    @property
    def coverage(self) -> float:
        return compute_coverage(self.methods)


def render_unit(
    unit: InterfaceUnit,
    source: str,
    template: str,
    abi: list[AbiEntry],
    report: DocReport,
) -> tuple[str, list[MatchedMethod]]:
    """Match and render already-loaded inputs for one unit."""
    tree = parse_source(source, str(unit.contract_file))
    candidates = extract_candidates(source, tree)
    entries = interface_entries(abi)
    methods = match_interface(entries, candidates, report, unit.name)
    markdown = generate_interface_markdown(template, methods, report, unit.name)
    return markdown, methods


def generate_unit(unit: InterfaceUnit, flatten_command: list[str]) -> UnitResult:
    """Load the inputs of `unit` and render its documentation.

    Structural problems raise a DocgenError; documentation problems are
    collected in the returned report.
    """
    log.info("Generating documentation for %s", unit.contract_file.name)
    report = DocReport()

    source = flatten_source(unit.contract_file, flatten_command)
    template = read_text(unit.template_file, "template")
    artifact = load_artifact(unit.artifact_file)

    markdown, methods = render_unit(unit, source, template, artifact.abi, report)
    return UnitResult(unit=unit, markdown=markdown, methods=methods, report=report)
