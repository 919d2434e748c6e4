"""Markdown generation for interface documentation."""

from __future__ import annotations

from .models import MatchedMethod, Parameter, TagEntry
from .signatures import display_signature, param_name, render_type
from .validators import DocReport, tag_matches


def _prefix(unit: str) -> str:
    return f"{unit}: " if unit else ""


def _param_row(
    method: MatchedMethod,
    param: Parameter,
    entry: TagEntry | None,
    report: DocReport,
    unit: str = "",
) -> str:
    """Render one table row, reporting tags that do not name the parameter."""
    name = param_name(param)
    type_str = render_type(param.type_name)

    description = ""
    if entry is not None and tag_matches(name, entry.name):
        description = entry.description
    else:
        report.error(
            f"{_prefix(unit)}{method.function.name} {name} has no matching natspec comment"
        )

    return f"|{name}|{type_str}|{description}"


def _param_table(
    method: MatchedMethod,
    params: list[Parameter],
    entries: list[TagEntry],
    report: DocReport,
    unit: str = "",
) -> list[str]:
    lines = [
        "|Name|Type|Description|",
        "|---|---|---|",
    ]
    for index, param in enumerate(params):
        entry = entries[index] if index < len(entries) else None
        lines.append(_param_row(method, param, entry, report, unit))
    return lines


def sort_methods(methods: list[MatchedMethod]) -> list[MatchedMethod]:
    """Order methods by display signature."""
    return sorted(methods, key=lambda m: display_signature(m.function))


def generate_methods_markdown(
    methods: list[MatchedMethod], report: DocReport, unit: str = ""
) -> str:
    """Render the "Interface Methods" section."""
    if not methods:
        return ""

    methods = sort_methods(methods)

    for method in methods:
        if not method.natspec.notice:
            report.error(
                f"{_prefix(unit)}{method.function.name} is missing a natspec @notice"
            )

    lines = [
        "## Interface Methods",
        "",
    ]

    for method in methods:
        natspec = method.natspec
        function = method.function

        lines.extend(
            [
                f"### ▸ `{display_signature(function)}`",
                "",
                natspec.notice or "",
                "",
            ]
        )

        if natspec.dev:
            lines.append(f"*Note: {natspec.dev}*")
            lines.append("")

        if function.parameters:
            lines.append("**Parameters**")
            lines.append("")
            lines.extend(
                _param_table(method, function.parameters, natspec.params, report, unit)
            )
            lines.append("")

        if function.return_parameters:
            lines.append("**Return Parameters**")
            lines.append("")
            lines.extend(
                _param_table(
                    method, function.return_parameters, natspec.returns, report, unit
                )
            )
            lines.append("")

    return "\n".join(lines)


def generate_interface_markdown(
    template: str, methods: list[MatchedMethod], report: DocReport, unit: str = ""
) -> str:
    """Template text followed by the rendered methods."""
    section = generate_methods_markdown(methods, report, unit)
    return f"{template}\n{section}".strip()
