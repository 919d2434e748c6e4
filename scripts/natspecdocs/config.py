"""Interface unit configuration.

A unit ties one contract to the template prepended to its docs, the compiler
artifact holding its ABI, and the file the docs are written to.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from .errors import ConfigError

# Project root, defaults to the current directory
ROOT = Path(os.environ.get("NATSPECDOCS_ROOT", ".")).resolve()

# Optional JSON config replacing the built-in unit list
CONFIG_FILE = os.environ.get("NATSPECDOCS_CONFIG")

DEFAULT_FLATTEN_COMMAND = ["npx", "hardhat", "flatten"]


class InterfaceUnit(BaseModel):
    contract_file: Path
    template_file: Path
    output_file: Path
    artifact_file: Path

    @property
    def name(self) -> str:
        return self.contract_file.stem

    def resolve(self, root: Path) -> InterfaceUnit:
        """Return a copy with relative paths anchored at `root`."""
        return InterfaceUnit(
            contract_file=root / self.contract_file,
            template_file=root / self.template_file,
            output_file=root / self.output_file,
            artifact_file=root / self.artifact_file,
        )


class DocgenConfig(BaseModel):
    # Empty list reads contract files without flattening
    flatten_command: list[str] = Field(
        default_factory=lambda: list(DEFAULT_FLATTEN_COMMAND)
    )
    units: list[InterfaceUnit] = Field(min_length=1)


# (directory under contracts/, contract name, docs subdirectory)
COLONY_INTERFACES = [
    ("colony", "IColony", ""),
    ("colonyNetwork", "IColonyNetwork", ""),
    ("common", "IEtherRouter", ""),
    ("colony", "IMetaColony", ""),
    ("common", "IRecovery", ""),
    ("reputationMiningCycle", "IReputationMiningCycle", ""),
    ("tokenLocking", "ITokenLocking", ""),
    ("extensions", "IColonyExtension", "extensions"),
    ("extensions", "CoinMachine", "extensions"),
    ("extensions", "EvaluatedExpenditure", "extensions"),
    ("extensions", "FundingQueue", "extensions"),
    ("extensions", "OneTxPayment", "extensions"),
    ("extensions", "StakedExpenditure", "extensions"),
    ("extensions", "StreamingPayments", "extensions"),
    ("extensions", "TokenSupplier", "extensions"),
    ("extensions/votingReputation", "IVotingReputation", "extensions"),
    ("extensions", "Whitelist", "extensions"),
]


def _doc_name(contract: str) -> str:
    # IVotingReputation is documented as votingreputation.md
    if contract == "IVotingReputation":
        return "votingreputation"
    return contract.lower()


def default_config(root: Path = ROOT) -> DocgenConfig:
    """The built-in colonyNetwork interface list."""
    units = []
    for directory, contract, docs_subdir in COLONY_INTERFACES:
        doc_name = f"{_doc_name(contract)}.md"
        units.append(
            InterfaceUnit(
                contract_file=Path("contracts") / directory / f"{contract}.sol",
                template_file=Path("docs") / ".templates" / doc_name,
                output_file=Path("docs") / "interfaces" / docs_subdir / doc_name,
                artifact_file=Path("artifacts")
                / "contracts"
                / directory
                / f"{contract}.sol"
                / f"{contract}.json",
            ).resolve(root)
        )
    return DocgenConfig(units=units)


def load_config(path: Path, root: Path = ROOT) -> DocgenConfig:
    """Load a JSON unit list; relative paths are resolved against `root`."""
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}", path)
    try:
        config = DocgenConfig.model_validate_json(path.read_text(encoding="utf-8"))
    except ValidationError as e:
        raise ConfigError(f"Invalid config {path}: {e}", path) from e

    return DocgenConfig(
        flatten_command=config.flatten_command,
        units=[unit.resolve(root) for unit in config.units],
    )
