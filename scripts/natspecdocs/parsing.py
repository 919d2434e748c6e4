"""Adapter between the Solidity parser and FunctionNode models."""

from __future__ import annotations

import logging
from typing import Any, Iterator

from .errors import SourceParseError
from .models import FunctionNode, Parameter

log = logging.getLogger(__name__)

DOCUMENTED_VISIBILITY = frozenset({"external", "public"})


def _load_parser():
    # Deferred so the antlr runtime is only loaded when source is actually parsed
    from solidity_parser import parser

    return parser


def parse_source(text: str, path: str | None = None) -> dict[str, Any]:
    """Parse Solidity source into a location-annotated syntax tree."""
    solidity_parser = _load_parser()
    try:
        return solidity_parser.parse(text, loc=True)
    except Exception as e:
        raise SourceParseError(
            f"Failed to parse {path or 'source'}: {e.__class__.__name__}: {e}",
            path,
        ) from e


def _parameter_list(node: Any) -> list[dict[str, Any]]:
    """Unwrap a parameter list, which may be a ParameterList node or a list."""
    if not node:
        return []
    if isinstance(node, dict):
        return list(node.get("parameters") or [])
    return list(node)


def _to_parameter(node: dict[str, Any]) -> Parameter:
    return Parameter(
        name=node.get("name") or None,
        type_name=node.get("typeName") or {},
        storage_location=node.get("storageLocation") or None,
    )


def _contracts(tree: dict[str, Any]) -> Iterator[dict[str, Any]]:
    for child in tree.get("children") or []:
        if child.get("type") == "ContractDefinition":
            yield child


def function_nodes(tree: dict[str, Any]) -> list[FunctionNode]:
    """All named external/public functions, in source order."""
    functions: list[FunctionNode] = []

    for contract in _contracts(tree):
        for node in contract.get("subNodes") or []:
            if node.get("type") != "FunctionDefinition":
                continue
            if node.get("visibility") not in DOCUMENTED_VISIBILITY:
                continue
            # Constructors, fallback and receive never appear as ABI functions
            if not node.get("name"):
                continue

            functions.append(
                FunctionNode(
                    name=node["name"],
                    contract=contract.get("name", ""),
                    line=node["loc"]["start"]["line"],
                    visibility=node["visibility"],
                    parameters=[
                        _to_parameter(p) for p in _parameter_list(node.get("parameters"))
                    ],
                    return_parameters=[
                        _to_parameter(p)
                        for p in _parameter_list(node.get("returnParameters"))
                    ],
                )
            )

    log.debug("Parsed %d documentable functions", len(functions))
    return functions
