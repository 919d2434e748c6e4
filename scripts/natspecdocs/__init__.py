"""NatSpec reference documentation generator for Solidity interfaces."""

from natspecdocs.errors import (
    ArtifactError,
    ConfigError,
    DocgenError,
    FlattenError,
    SignatureError,
    SourceParseError,
)
from natspecdocs.models import (
    Candidate,
    FunctionNode,
    InterfaceEntry,
    MatchedMethod,
    Natspec,
    Parameter,
)
from natspecdocs.validators import DocReport

__all__ = [
    "ArtifactError",
    "Candidate",
    "ConfigError",
    "DocReport",
    "DocgenError",
    "FlattenError",
    "FunctionNode",
    "InterfaceEntry",
    "MatchedMethod",
    "Natspec",
    "Parameter",
    "SignatureError",
    "SourceParseError",
]
