"""
CLI formatting functions for the demo catalogue.

- JSON and YAML for machine-readable output
- Rich tables for humans
"""
import io
import json
from typing import Any, Dict, List

import yaml


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.dump(data, default_flow_style=False, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    else:
        return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "demos" in data:
        return format_demos_table(data["demos"])
    return json.dumps(data, indent=2, default=str)


def format_demos_table(demos: List[Dict[str, str]]) -> str:
    """Format the demo catalogue as a Rich table."""
    if not demos:
        return "No demos found."

    from rich.console import Console
    from rich.table import Table

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Name", style="cyan")
    table.add_column("Category", style="green")
    table.add_column("Summary")

    for entry in demos:
        table.add_row(entry["name"], entry["category"], entry["summary"])

    buffer = io.StringIO()
    Console(file=buffer, force_terminal=False, width=120).print(table)
    return buffer.getvalue().rstrip("\n")
