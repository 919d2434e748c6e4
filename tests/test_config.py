"""Tests for interface unit configuration."""

import json
from pathlib import Path

import pytest

from natspecdocs.config import COLONY_INTERFACES, default_config, load_config
from natspecdocs.errors import ConfigError


def test_default_config_paths(tmp_path):
    config = default_config(tmp_path)

    assert len(config.units) == len(COLONY_INTERFACES)
    assert config.flatten_command == ["npx", "hardhat", "flatten"]

    colony = config.units[0]
    assert colony.name == "IColony"
    assert colony.contract_file == tmp_path / "contracts" / "colony" / "IColony.sol"
    assert colony.template_file == tmp_path / "docs" / ".templates" / "icolony.md"
    assert colony.output_file == tmp_path / "docs" / "interfaces" / "icolony.md"
    assert colony.artifact_file == (
        tmp_path / "artifacts" / "contracts" / "colony" / "IColony.sol" / "IColony.json"
    )


def test_default_config_extensions(tmp_path):
    units = {u.name: u for u in default_config(tmp_path).units}

    voting = units["IVotingReputation"]
    assert voting.output_file == (
        tmp_path / "docs" / "interfaces" / "extensions" / "votingreputation.md"
    )
    assert voting.contract_file.parent == tmp_path / "contracts" / "extensions" / "votingReputation"


def test_load_config(tmp_path):
    path = tmp_path / "natspecdocs.json"
    path.write_text(
        json.dumps(
            {
                "flatten_command": [],
                "units": [
                    {
                        "contract_file": "contracts/IToken.sol",
                        "template_file": "docs/.templates/itoken.md",
                        "output_file": "docs/itoken.md",
                        "artifact_file": "artifacts/IToken.json",
                    }
                ],
            }
        )
    )

    config = load_config(path, tmp_path)

    assert config.flatten_command == []
    assert config.units[0].contract_file == tmp_path / "contracts" / "IToken.sol"
    assert config.units[0].name == "IToken"


def test_load_config_absolute_paths_kept(tmp_path):
    path = tmp_path / "natspecdocs.json"
    unit = {
        key: f"/abs/{key}"
        for key in ("contract_file", "template_file", "output_file", "artifact_file")
    }
    path.write_text(json.dumps({"units": [unit]}))

    config = load_config(path, tmp_path)

    assert config.units[0].output_file == Path("/abs/output_file")


@pytest.mark.parametrize(
    "payload",
    [
        {"units": []},
        {"units": [{"contract_file": "a.sol"}]},
        {"flatten_command": "npx hardhat flatten", "units": []},
    ],
)
def test_invalid_config(tmp_path, payload):
    path = tmp_path / "natspecdocs.json"
    path.write_text(json.dumps(payload))

    with pytest.raises(ConfigError, match="Invalid config"):
        load_config(path, tmp_path)


def test_missing_config(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "nope.json", tmp_path)
