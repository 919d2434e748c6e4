"""Signature rendering for parsed functions and ABI entries.

Two forms are produced:

    display   transfer(address to, bytes memory data):bool success
    minimal   transfer(address,bytes)

The minimal form is the matching key between parsed functions and the ABI,
so both sides must normalize types the same way.
"""

from __future__ import annotations

from typing import Any

from .errors import SignatureError
from .models import FunctionNode, Parameter

# Elementary aliases the compiler canonicalizes in the ABI
_TYPE_ALIASES = {
    "uint": "uint256",
    "int": "int256",
    "byte": "bytes1",
    "ufixed": "ufixed128x18",
    "fixed": "fixed128x18",
}

# internalType prefixes that mark user-defined types in ABI JSON
_USER_DEFINED_PREFIXES = ("struct ", "enum ", "contract ", "interface ")


def _array_length(type_name: dict[str, Any]) -> str:
    length = type_name.get("length")
    if length is None:
        return ""
    if isinstance(length, dict):
        number = length.get("number")
        if number is None:
            raise SignatureError(
                f"Unsupported array length expression: {length.get('type')}"
            )
        return str(number)
    return str(length)


def render_type(type_name: dict[str, Any] | None) -> str:
    """Render a parser type node as it appears in source."""
    if not type_name:
        raise SignatureError("Parameter has no type")

    kind = type_name.get("type")
    if kind == "ElementaryTypeName" and type_name.get("name"):
        return type_name["name"]
    if kind == "UserDefinedTypeName" and type_name.get("namePath"):
        return type_name["namePath"]
    if kind == "ArrayTypeName":
        base = render_type(type_name.get("baseTypeName"))
        return f"{base}[{_array_length(type_name)}]"

    raise SignatureError(f"Unknown parameter type: {kind}")


def _is_user_defined(type_name: dict[str, Any]) -> bool:
    return type_name.get("type") == "UserDefinedTypeName"


def display_parameter(param: Parameter) -> str:
    """Render `type [storage] name` for a function parameter."""
    parts = [render_type(param.type_name)]
    if param.storage_location and not _is_user_defined(param.type_name):
        parts.append(param.storage_location)
    if param.name:
        parts.append(param.name)
    return " ".join(parts)


def display_return(param: Parameter) -> str:
    """Render `type name` for a return parameter (name omitted when unnamed)."""
    type_str = render_type(param.type_name)
    return f"{type_str} {param.name}" if param.name else type_str


def param_name(param: Parameter) -> str:
    """Name used in parameter tables; unnamed values fall back to their type."""
    return param.name or render_type(param.type_name)


def display_signature(function: FunctionNode) -> str:
    """Full human-readable signature, used for headings and sorting."""
    params = ", ".join(display_parameter(p) for p in function.parameters)
    signature = f"{function.name}({params})"
    if function.return_parameters:
        returns = ", ".join(display_return(p) for p in function.return_parameters)
        signature += f":{returns}"
    return signature


def _normalize(type_str: str) -> str:
    """Normalize a rendered type for comparison with the ABI."""
    # Split off array suffixes so "uint[2][]" keeps its dimensions
    base, bracket, dims = type_str.partition("[")
    suffix = bracket + dims
    base = base.split()[0] if base.strip() else base  # "address payable" -> "address"
    base = _TYPE_ALIASES.get(base, base)
    # User-defined paths compare by their final segment
    base = base.rsplit(".", 1)[-1]
    return f"{base}{suffix}"


def minimal_signature(function: FunctionNode) -> str:
    """Name and parameter types only, e.g. `transfer(address,uint256)`."""
    types = [_normalize(render_type(p.type_name)) for p in function.parameters]
    return f"{function.name}({','.join(types)})"


def abi_type(param: dict[str, Any]) -> str:
    """Render an ABI input in the same minimal form as `minimal_signature`."""
    internal = param.get("internalType") or ""
    for prefix in _USER_DEFINED_PREFIXES:
        if internal.startswith(prefix):
            return _normalize(internal[len(prefix):].strip())

    type_str = param.get("type")
    if not type_str:
        raise SignatureError(f"ABI parameter has no type: {param!r}")
    if type_str.startswith("tuple"):
        components = ",".join(abi_type(c) for c in param.get("components") or [])
        return f"tuple({components}){type_str[len('tuple'):]}"
    return _normalize(type_str)


def abi_minimal_signature(entry: dict[str, Any]) -> str:
    """Minimal signature of an ABI function entry."""
    name = entry.get("name")
    if not name:
        raise SignatureError(f"ABI function has no name: {entry!r}")
    types = [abi_type(p) for p in entry.get("inputs") or []]
    return f"{name}({','.join(types)})"
