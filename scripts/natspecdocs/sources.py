"""File and subprocess access for source, template and output files."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from .errors import ArtifactError, FlattenError

log = logging.getLogger(__name__)


def read_text(path: Path, what: str = "file") -> str:
    """Read a required input file."""
    if not path.exists():
        raise ArtifactError(f"{what.capitalize()} not found: {path}", path)
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ArtifactError(f"{what.capitalize()} is not valid UTF-8: {path}", path) from e


def flatten_source(contract_file: Path, command: list[str]) -> str:
    """Return the contract source with its imports inlined.

    With an empty `command` the contract file is read as is.
    """
    if not command:
        return read_text(contract_file, "contract")
    if not contract_file.exists():
        raise ArtifactError(f"Contract not found: {contract_file}", contract_file)

    # Written to an intermediate file since some outputs are too big for a pipe buffer
    flattened = contract_file.with_name(f"{contract_file.name}.flattened")
    log.debug("Flattening %s", contract_file)
    try:
        with flattened.open("w", encoding="utf-8") as out:
            subprocess.run(
                [*command, str(contract_file)],
                stdout=out,
                stderr=subprocess.PIPE,
                text=True,
                check=True,
            )
        return flattened.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise FlattenError(f"Flatten command not found: {command[0]}", contract_file) from e
    except subprocess.CalledProcessError as e:
        raise FlattenError(
            f"Flattening {contract_file.name} failed: {(e.stderr or '').strip()}",
            contract_file,
        ) from e
    finally:
        flattened.unlink(missing_ok=True)


def write_output(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
