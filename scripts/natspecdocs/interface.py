"""Compiler artifact loading."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from .errors import ArtifactError
from .models import InterfaceEntry
from .signatures import abi_minimal_signature


class AbiParam(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str = ""
    type: str
    internalType: Optional[str] = None
    components: Optional[list["AbiParam"]] = None


class AbiEntry(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: str
    name: Optional[str] = None
    inputs: list[AbiParam] = []
    outputs: list[AbiParam] = []
    stateMutability: Optional[str] = None


class Artifact(BaseModel):
    model_config = ConfigDict(extra="ignore")

    contractName: Optional[str] = None
    abi: list[AbiEntry]


def load_artifact(path: Path) -> Artifact:
    """Load and validate a compiler artifact JSON file."""
    if not path.exists():
        raise ArtifactError(f"Artifact not found: {path}", path)
    try:
        return Artifact.model_validate_json(path.read_text(encoding="utf-8"))
    except ValidationError as e:
        raise ArtifactError(f"Invalid artifact {path}: {e}", path) from e


def interface_entries(abi: list[AbiEntry]) -> list[InterfaceEntry]:
    """One entry per ABI function, in ABI order."""
    return [
        InterfaceEntry(
            name=entry.name or "",
            signature=abi_minimal_signature(entry.model_dump()),
        )
        for entry in abi
        if entry.type == "function"
    ]
