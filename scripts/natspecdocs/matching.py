"""Reconciling parsed functions with the ABI."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict

from .models import Candidate, InterfaceEntry, MatchedMethod
from .signatures import minimal_signature
from .validators import DocReport

log = logging.getLogger(__name__)


def documentation_weight(candidate: Candidate) -> int:
    """Length of the serialized NatSpec, a proxy for how complete it is."""
    return len(json.dumps(asdict(candidate.natspec)))


def select_best(candidates: list[Candidate]) -> Candidate:
    """Pick the best documented of several candidates for one ABI function.

    The same declaration can be reached through several inheritance paths
    after flattening. The candidate with the longest documentation wins and
    the first one seen wins a tie.
    """
    if not candidates:
        raise ValueError("select_best() requires at least one candidate")
    return max(candidates, key=documentation_weight)


def match_interface(
    entries: list[InterfaceEntry],
    candidates: list[Candidate],
    report: DocReport,
    unit: str = "",
) -> list[MatchedMethod]:
    """Resolve every ABI entry to exactly one documented candidate.

    ABI entries without a parsed counterpart are reported as errors;
    parsed functions missing from the ABI are dropped.
    """
    by_signature: dict[str, list[Candidate]] = {}
    for candidate in candidates:
        key = minimal_signature(candidate.function)
        by_signature.setdefault(key, []).append(candidate)

    matched: list[MatchedMethod] = []
    used: set[str] = set()

    for entry in entries:
        found = by_signature.get(entry.signature, [])
        if not found:
            prefix = f"{unit}: " if unit else ""
            report.error(f"{prefix}{entry.signature} has no matching function in source")
            continue

        best = found[0]
        if len(found) > 1:
            best = select_best(found)
            prefix = f"{unit}: " if unit else ""
            report.warn(
                f"{prefix}{len(found)} declarations of {entry.signature}, "
                f"using the one from {best.function.contract}"
            )
        used.add(entry.signature)
        matched.append(
            MatchedMethod(entry=entry, function=best.function, natspec=best.natspec)
        )

    for signature in sorted(set(by_signature) - used):
        log.debug("%s: %s is not part of the ABI, skipping", unit, signature)

    return matched
