"""
Scalar emitter: decides how a YAML scalar is written as JSON.
"""

import json

from .errors import UsageError

PLAIN_STYLES = {None, ""}


def is_plain(style) -> bool:
    return style in PLAIN_STYLES


def quote(value: str, escape: bool = True, ensure_ascii: bool = True) -> str:
    if escape:
        return json.dumps(value, ensure_ascii=ensure_ascii)
    # Legacy output: the raw text between double quotes
    return '"' + value + '"'


def render_key(value: str, escape: bool = True, ensure_ascii: bool = True,
               allow_empty: bool = True) -> str:
    """Mapping keys are always JSON strings, whatever their YAML style."""
    if not value and not allow_empty:
        raise UsageError("Mapping key is empty")
    return quote(value, escape, ensure_ascii)


def render_scalar(value: str, style=None, escape: bool = True, ensure_ascii: bool = True,
                  allow_empty: bool = True) -> str:
    """
    Render a scalar value.

    Plain scalars are copied verbatim so that numbers, true, false and null
    come out as JSON literals. Plain text that is not a JSON literal is
    copied as well and gives invalid JSON. Non-ASCII characters in plain
    scalars are copied too, whatever ensure_ascii says. Quoted and block
    scalars are written as JSON strings.
    """
    if not value:
        if not allow_empty:
            raise UsageError("Scalar value is empty")
        return quote("", escape, ensure_ascii)
    if is_plain(style):
        return value
    return quote(value, escape, ensure_ascii)
