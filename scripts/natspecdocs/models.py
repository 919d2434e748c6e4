"""Data models for NatSpec extraction and matching."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Parameter:
    """One declared parameter or return value of a parsed function."""

    name: str | None
    type_name: dict[str, Any]  # Raw parser node: ElementaryTypeName, ArrayTypeName, ...
    storage_location: str | None = None  # "memory" | "storage" | "calldata"


@dataclass
class FunctionNode:
    """A parsed external or public function."""

    name: str
    contract: str
    line: int  # 1-based line the declaration starts on
    visibility: str
    parameters: list[Parameter] = field(default_factory=list)
    return_parameters: list[Parameter] = field(default_factory=list)


@dataclass
class TagEntry:
    """A @param or @return tag split into its leading name and description."""

    name: str
    description: str


@dataclass
class Natspec:
    """Documentation recovered from the comment block above a function."""

    notice: str | None = None
    dev: str | None = None
    params: list[TagEntry] = field(default_factory=list)
    returns: list[TagEntry] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return (
            self.notice is None
            and self.dev is None
            and not self.params
            and not self.returns
        )


@dataclass
class Candidate:
    """A parsed function paired with its documentation."""

    function: FunctionNode
    natspec: Natspec


@dataclass
class InterfaceEntry:
    """A function exposed by the compiled ABI."""

    name: str
    signature: str  # Minimal form, e.g. "transfer(address,uint256)"


@dataclass
class MatchedMethod:
    """An ABI entry resolved to the candidate that documents it."""

    entry: InterfaceEntry
    function: FunctionNode
    natspec: Natspec
