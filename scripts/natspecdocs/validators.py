"""Documentation quality tracking."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .models import MatchedMethod

log = logging.getLogger(__name__)


@dataclass
class DocReport:
    """Quality problems found while generating documentation.

    Errors fail the run once every unit has been rendered; warnings are
    printed but allowed.
    """

    errors: list[str] = field(default_factory=list)  # Build fails if non-empty
    warnings: list[str] = field(default_factory=list)  # Printed but allowed

    @property
    def failed(self) -> bool:
        return bool(self.errors)

    def error(self, message: str) -> None:
        log.debug(message)
        self.errors.append(message)

    def warn(self, message: str) -> None:
        log.debug(message)
        self.warnings.append(message)

    def merge(self, other: DocReport) -> None:
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)


def tag_matches(name: str, entry_name: str | None) -> bool:
    """Whether a @param/@return tag names the declared parameter."""
    return bool(name) and entry_name == name


def compute_coverage(methods: list[MatchedMethod]) -> float:
    """Fraction of methods carrying a @notice (1.0 when there are none)."""
    if not methods:
        return 1.0
    documented = sum(1 for m in methods if m.natspec.notice)
    return documented / len(methods)
