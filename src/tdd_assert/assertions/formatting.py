"""Placeholder substitution for default failure messages."""

import re
from collections.abc import Mapping
from typing import Any


_PLACEHOLDER = re.compile(r"\{.*?\}")


def format_message(template: str, data: Mapping[str, Any]) -> str:
    """Replace each ``{name}`` in ``template`` with ``str(data[name])``.

    Braces cannot be escaped and templates do not nest.

    Raises
    ------
    KeyError
        If a placeholder has no entry in ``data``.
    """
    return _PLACEHOLDER.sub(lambda match: str(data[match.group(0)[1:-1]]), template)
