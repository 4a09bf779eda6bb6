"""
Shared utilities for the command-line front end.

Rendering of query results in the supported output formats, plus
consistent error printing.
"""

import json
import logging
import sys
from typing import Any, Dict, List, Optional, Tuple

import yaml

from ..entries import ConfigurationSet
from ..target import Cfg

logger = logging.getLogger(__name__)

# A labelled query result: (None, config) for the host, (triple, config) otherwise
QueryResult = Tuple[Optional[str], ConfigurationSet]


# ============================================================================
# Result Conversion
# ============================================================================


def result_label(triple: Optional[str]) -> str:
    """Section label for a query result."""
    return "host" if triple is None else f"target {triple}"


def to_data(results: List[QueryResult], summary: bool = False) -> Dict[str, Any]:
    """
    Convert query results to plain data for JSON or YAML output.

    Args:
        results: Host result first, then one result per target triple
        summary: Emit the target summary instead of the raw entry list

    Returns:
        Mapping with a 'host' key and, when targets were queried, a 'targets' key

    Raises:
        MissingOutputError: If summary is requested and a target key is absent
    """
    data: Dict[str, Any] = {}
    targets: Dict[str, Any] = {}

    for triple, config in results:
        if summary:
            value = Cfg.from_configuration(config).to_dict()
        else:
            value = config.to_list()
        if triple is None:
            data["host"] = value
        else:
            targets[triple] = value

    if targets:
        data["targets"] = targets
    return data


# ============================================================================
# User Interface / Output Formatting
# ============================================================================


def render_text(results: List[QueryResult], summary: bool = False) -> str:
    """
    Render results as ``--print cfg`` style text.

    A single result is printed exactly as the compiler would print it. Several
    results are separated into ``[host]`` / ``[target TRIPLE]`` sections.
    """
    sections = []
    for triple, config in results:
        if summary:
            target = Cfg.from_configuration(config).target.to_dict()
            body = "".join(
                f"{key}: {_text_value(value)}\n" for key, value in target.items()
            )
        else:
            body = config.to_text()

        if len(results) > 1:
            body = f"[{result_label(triple)}]\n{body}"
        sections.append(body)

    return "\n".join(sections)


def render_json(results: List[QueryResult], summary: bool = False) -> str:
    """Render results as an indented JSON document."""
    return json.dumps(to_data(results, summary), indent=2) + "\n"


def render_yaml(results: List[QueryResult], summary: bool = False) -> str:
    """Render results as a YAML document."""
    return yaml.safe_dump(to_data(results, summary), sort_keys=False)


RENDERERS = {
    "text": render_text,
    "json": render_json,
    "yaml": render_yaml,
}


def render(
    results: List[QueryResult], output_format: str, summary: bool = False
) -> str:
    """
    Render results in the requested format.

    Args:
        results: Query results to render
        output_format: One of 'text', 'json', 'yaml'
        summary: Render the target summary instead of raw entries

    Returns:
        Rendered output

    Raises:
        ValueError: If the format is unknown
    """
    renderer = RENDERERS.get(output_format)
    if renderer is None:
        raise ValueError(
            f"Unknown output format: {output_format} "
            f"(expected one of {list(RENDERERS)})"
        )
    logger.debug(f"Rendering {len(results)} result(s) as {output_format}")
    return renderer(results, summary)


def _text_value(value: Any) -> str:
    if value is None:
        return "-"
    if isinstance(value, list):
        return ", ".join(value) if value else "-"
    return str(value)


def print_error(message: str, details: Optional[str] = None):
    """
    Print error message to stderr in consistent format.

    Args:
        message: Main error message
        details: Optional additional details
    """
    print(f"ERROR: {message}", file=sys.stderr)
    if details:
        for line in details.rstrip().splitlines():
            print(f"  {line}", file=sys.stderr)
