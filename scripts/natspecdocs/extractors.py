"""NatSpec extraction from Solidity source lines.

Documentation is anchored to a function by walking upward from its
declaration through the `///` block until the `@notice` line, then reading
the remaining tags forward from there:

    /// @notice Transfers tokens          <- anchor found walking upward
    /// to the recipient.                 <- continuation of @notice
    /// @dev Reverts if paused
    /// @param to Recipient
    /// @return success True on success
    // slither-disable-next-line reentrancy   <- tooling directive, skipped
    function transfer(address to) external returns (bool success);
"""

from __future__ import annotations

from typing import Any

from .models import Candidate, FunctionNode, Natspec, TagEntry
from .parsing import function_nodes

COMMENT = "///"
NOTICE = " @notice "
DEV = " @dev "
PARAM = " @param "
RETURN = " @return "

# Comments for other tools that may sit between the docs and the declaration
DIRECTIVES = ("slither-disable",)

# Markers that start a new tag and so end any continuation
_TAG_BREAKS = (DEV, PARAM, RETURN)


def split_lines(text: str) -> list[str]:
    """Split source into lines numbered the same way as the parser's locations."""
    return [line.rstrip("\r") for line in text.split("\n")]


def _is_comment(line: str) -> bool:
    return COMMENT in line


def _is_directive(line: str) -> bool:
    return any(directive in line for directive in DIRECTIVES)


def _is_continuation(line: str) -> bool:
    return _is_comment(line) and not any(tag in line for tag in _TAG_BREAKS)


def _find_notice(lines: list[str], anchor: int) -> int | None:
    """Walk upward from the declaration to the @notice line, if there is one."""
    index = anchor - 1
    while index >= 0:
        line = lines[index]
        if _is_directive(line) or (_is_comment(line) and NOTICE not in line):
            index -= 1
            continue
        break

    # Ran past the first line of the file: undocumented
    if index < 0:
        return None
    return index if NOTICE in lines[index] else None


def _read_tag(lines: list[str], index: int, marker: str) -> str:
    """Text after `marker` plus the text of every continuation line below it."""
    text = lines[index].split(marker, 1)[1]
    index += 1
    while index < len(lines) and _is_continuation(lines[index]):
        if not _is_directive(lines[index]):
            text += lines[index].split(COMMENT, 1)[1]
        index += 1
    return text


def _find_forward(lines: list[str], start: int, marker: str) -> int | None:
    index = start
    while index < len(lines) and _is_comment(lines[index]):
        if marker in lines[index]:
            return index
        index += 1
    return None


def _split_entry(text: str) -> TagEntry:
    """Split `name description...` into its parts."""
    parts = text.split(None, 1)
    if not parts:
        return TagEntry(name="", description="")
    # "to: Recipient" and "to, Recipient" name the same parameter as "to Recipient"
    name = parts[0].rstrip(":,")
    return TagEntry(name=name, description=parts[1] if len(parts) > 1 else "")


def _collect(lines: list[str], start: int, marker: str, limit: int) -> list[TagEntry]:
    """Collect up to `limit` tags of one kind, in comment order."""
    entries: list[TagEntry] = []
    index = start
    while index < len(lines) and _is_comment(lines[index]) and len(entries) < limit:
        if marker in lines[index]:
            entries.append(_split_entry(_read_tag(lines, index, marker)))
        index += 1
    return entries


def scan_natspec(lines: list[str], function: FunctionNode) -> Natspec:
    """Recover the NatSpec block documenting `function`.

    Args:
        lines: Source lines, 0-indexed
        function: Parsed function; `function.line` is 1-based

    Returns:
        The documentation found. An empty Natspec means no @notice line was
        found above the declaration; other tags are only read relative to it.
    """
    natspec = Natspec()

    notice_index = _find_notice(lines, function.line - 1)
    if notice_index is None:
        return natspec

    natspec.notice = _read_tag(lines, notice_index, NOTICE)

    dev_index = _find_forward(lines, notice_index + 1, DEV)
    if dev_index is not None:
        natspec.dev = _read_tag(lines, dev_index, DEV)

    if function.parameters:
        natspec.params = _collect(
            lines, notice_index + 1, PARAM, len(function.parameters)
        )
    if function.return_parameters:
        natspec.returns = _collect(
            lines, notice_index + 1, RETURN, len(function.return_parameters)
        )

    return natspec


def extract_candidates(source: str, tree: dict[str, Any]) -> list[Candidate]:
    """Pair every documentable function in `tree` with its NatSpec."""
    lines = split_lines(source)
    return [
        Candidate(function=fn, natspec=scan_natspec(lines, fn))
        for fn in function_nodes(tree)
    ]
