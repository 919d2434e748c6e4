"""Fatal errors raised while generating documentation.

Quality problems (missing @notice, mismatched @param) are not exceptions;
they are collected in a DocReport so every unit still renders.
"""

from __future__ import annotations

from pathlib import Path


class DocgenError(Exception):
    """Base exception for structural failures that abort the run."""

    def __init__(self, message: str, path: Path | str | None = None):
        super().__init__(message)
        self.path = path


class SignatureError(DocgenError):
    """Raised when a parameter type cannot be rendered into a signature."""

    pass


class SourceParseError(DocgenError):
    """Raised when the Solidity parser rejects the (flattened) source."""

    pass


class ArtifactError(DocgenError):
    """Raised when a template, source or compiler artifact is missing or malformed."""

    pass


class FlattenError(DocgenError):
    """Raised when the flattening command fails."""

    pass


class ConfigError(DocgenError):
    """Raised when the interface unit configuration is invalid."""

    pass
