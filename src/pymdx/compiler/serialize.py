"""Conversion between ESTree JSON and node dataclasses."""

import json
from functools import lru_cache
from typing import IO, Any, Dict, Optional, Tuple, Type

from pymdx.compiler.ast_nodes import NODE_TYPES, JSXElement, Node, node_fields
from pymdx.compiler.exceptions import MalformedTreeError

# Field names that cannot be written as-is in Python.
_RENAMED_FIELDS = {"is_async": "async", "is_await": "await"}

# Keys ESTree leaves out entirely instead of setting to null.
_OMIT_WHEN_NONE = {"regex", "bigint", "directive"}

EXPLICIT_JSX_KEY = "_mdxExplicitJsx"
_LEGACY_EXPLICIT_JSX_KEYS = ("_xdmExplicitJsx",)


def _to_camel(name: str) -> str:
    head, *tail = name.split("_")
    return head + "".join(part.capitalize() for part in tail)


@lru_cache(maxsize=None)
def _key_map(cls: Type[Node]) -> Tuple[Tuple[str, str], ...]:
    """(json_key, field_name) pairs for a node kind."""
    pairs = []
    for name in node_fields(cls):
        if cls is JSXElement and name == "explicit":
            continue
        key = _RENAMED_FIELDS.get(name) or _to_camel(name)
        pairs.append((key, name))
    return tuple(pairs)


def from_dict(data: Any) -> Node:
    """Build a node tree from ESTree JSON data."""
    if not isinstance(data, dict) or "type" not in data:
        raise MalformedTreeError(f"Expected an ESTree node, got {type(data).__name__}")

    kind = data["type"]
    cls = NODE_TYPES.get(kind)
    if cls is None:
        raise MalformedTreeError(f"Unknown node type '{kind}'")

    remaining = {k: v for k, v in data.items() if k != "type"}
    attrs: Dict[str, Any] = {}

    for key, name in _key_map(cls):
        if key in remaining:
            attrs[name] = _convert(remaining.pop(key))

    if cls is JSXElement:
        attrs["explicit"] = _pop_explicit_marker(remaining)

    node = cls(**attrs)
    node.extra = remaining
    return node


def _convert(value: Any) -> Any:
    if isinstance(value, dict) and "type" in value:
        return from_dict(value)
    if isinstance(value, list):
        return [_convert(item) for item in value]
    return value


def _pop_explicit_marker(remaining: Dict[str, Any]) -> bool:
    """Read the explicit-JSX marker off ``data``.

    The current key is consumed. Legacy keys stay in ``data`` so they are
    written back as they were read.
    """
    data = remaining.get("data")
    if not isinstance(data, dict):
        return False

    data = dict(data)
    explicit = bool(data.pop(EXPLICIT_JSX_KEY, False))
    explicit = explicit or any(data.get(key) for key in _LEGACY_EXPLICIT_JSX_KEYS)

    if data:
        remaining["data"] = data
    else:
        remaining.pop("data")
    return explicit


def to_dict(node: Node) -> Dict[str, Any]:
    """Convert a node tree back into ESTree JSON data."""
    result: Dict[str, Any] = {"type": node.type}

    for key, name in _key_map(type(node)):
        value = getattr(node, name)
        if value is None and key in _OMIT_WHEN_NONE:
            continue
        result[key] = _unconvert(value)

    for key, value in node.extra.items():
        result.setdefault(key, value)

    if isinstance(node, JSXElement) and isinstance(result.get("data", {}), dict):
        data = dict(result.get("data", {}))
        has_legacy_marker = any(data.get(key) for key in _LEGACY_EXPLICIT_JSX_KEYS)
        if node.explicit and not has_legacy_marker:
            data[EXPLICIT_JSX_KEY] = True
        elif not node.explicit:
            for key in _LEGACY_EXPLICIT_JSX_KEYS:
                data.pop(key, None)
        if data:
            result["data"] = data
        else:
            result.pop("data", None)

    return result


def _unconvert(value: Any) -> Any:
    if isinstance(value, Node):
        return to_dict(value)
    if isinstance(value, list):
        return [_unconvert(item) for item in value]
    return value


def loads(text: str) -> Node:
    return from_dict(json.loads(text))


def load(fp: IO[str]) -> Node:
    return from_dict(json.load(fp))


def dumps(node: Node, indent: Optional[int] = None) -> str:
    return json.dumps(to_dict(node), indent=indent, ensure_ascii=False)


def dump(node: Node, fp: IO[str], indent: Optional[int] = None) -> None:
    json.dump(to_dict(node), fp, indent=indent, ensure_ascii=False)
