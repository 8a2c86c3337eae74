"""Parsing helpers for CLI arguments."""

from typing import Dict, Iterable

import click


def parse_properties(ctx, param, values: Iterable[str]) -> Dict[str, str]:
    """Click callback turning repeated ``-D key=value`` options into a dict."""
    properties: Dict[str, str] = {}
    for item in values or ():
        key, sep, value = item.partition("=")
        key = key.strip()
        if not key:
            raise click.BadParameter(f"'{item}' is not of the form key=value")
        # A bare -Dkey means key=true
        properties[key] = value if sep else "true"
    return properties
