"""Lenient parser for the YAML subset used by NPC plugin save files.

Only `key: value` lines and nested mappings are understood. Nesting depth is
taken as leading whitespace // 2, so files indented with anything other than
two spaces will nest incorrectly; consumers must look keys up defensively
(see lookup()). Lines without a colon are ignored and unknown scalar shapes
fall back to plain strings, so parse() never raises.
"""

import re

from npc_converter.models import GenericDocument, GenericValue

_NUMBER_RE = re.compile(r"^[-+]?(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?$")
_INTEGER_RE = re.compile(r"^[-+]?\d+$")


def _unquote(text: str) -> str | None:
    """Strip surrounding single quotes, or return None if not single-quoted.

    Inside single quotes '' stands for one apostrophe ('Bob''s' → Bob's).
    """
    if len(text) >= 2 and text.startswith("'") and text.endswith("'"):
        return text[1:-1].replace("''", "'")
    return None


def parse_scalar(value: str) -> GenericValue:
    """Infer the type of a trimmed value.

    "" / "{}" → {}, 'quoted' → str, true/false → bool,
    decimal literal → int or float, anything else → str unchanged.
    """
    if value == "" or value == "{}":
        return {}
    quoted = _unquote(value)
    if quoted is not None:
        return quoted
    if value == "true":
        return True
    if value == "false":
        return False
    if _NUMBER_RE.match(value):
        if _INTEGER_RE.match(value):
            return int(value)
        return float(value)
    return value


def parse(text: str) -> GenericDocument:
    """Parse markup text into a nested dict of inferred scalars."""
    root: GenericDocument = {}
    path: list[str] = []

    for line in text.splitlines():
        content = line.strip()
        if not content or content.startswith("#"):
            continue
        if ":" not in content:
            continue

        depth = (len(line) - len(line.lstrip())) // 2
        raw_key, _, remainder = content.partition(":")
        key = raw_key.strip()  # kept verbatim, quotes included

        path = path[:depth]
        path.append(key)

        current = root
        for ancestor in path[:-1]:
            child = current.get(ancestor)
            if not isinstance(child, dict):
                # Missing parent, or a scalar now being nested into
                child = {}
                current[ancestor] = child
            current = child

        current[key] = parse_scalar(remainder.strip())

    return root


def lookup(document: GenericValue | None, *keys: str) -> GenericValue | None:
    """Follow keys into nested mappings; None if any step is missing.

    lookup(doc, "traits", "location", "world") is the safe form of
    doc["traits"]["location"]["world"].
    """
    node = document
    for key in keys:
        if not isinstance(node, dict) or key not in node:
            return None
        node = node[key]
    return node
