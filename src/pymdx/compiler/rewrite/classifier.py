"""Classification of JSX element names."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pymdx.compiler.ast_nodes import (
    JSXElement,
    JSXIdentifier,
    JSXMemberExpression,
    JSXNamespacedName,
    Node,
    u,
)
from pymdx.compiler.exceptions import UnsupportedNodeError
from pymdx.compiler.identifiers import is_identifier_name

COMPONENTS_OBJECT = "_components"

_LOWERCASE_START = re.compile(r"^[a-z]")


class ElementKind(Enum):
    OBJECT = "object"  # `<x.y>`: root of a member chain
    NAMESPACE = "namespace"  # `<svg:rect>`: ignored
    COMPONENT = "component"  # `<Foo>`, `<$foo>`, `<_bar>`
    EXPLICIT = "explicit"  # `<h1>` written as JSX in the source
    TAG = "tag"  # `h1` generated from markdown


@dataclass(frozen=True)
class Classification:
    kind: ElementKind
    name: Optional[str] = None


def classify(name: Optional[Node], explicit: bool = False) -> Classification:
    """Classify the name of a JSX element.

    Member chains and namespaces are told apart by shape. A plain name that is
    a valid identifier and does not start with a lowercase letter is a
    component. Remaining names are tags, unless the element was written as
    literal JSX.
    """
    if isinstance(name, JSXMemberExpression):
        root: Optional[Node] = name
        while isinstance(root, JSXMemberExpression):
            root = root.object
        if not isinstance(root, JSXIdentifier):
            raise UnsupportedNodeError(
                "Member expression in JSX name must start with an identifier",
                node_type=root.type if root is not None else None,
            )
        return Classification(ElementKind.OBJECT, root.name)

    if isinstance(name, JSXNamespacedName):
        return Classification(ElementKind.NAMESPACE)

    if isinstance(name, JSXIdentifier):
        if is_identifier_name(name.name) and not _LOWERCASE_START.match(name.name):
            return Classification(ElementKind.COMPONENT, name.name)
        if explicit:
            return Classification(ElementKind.EXPLICIT, name.name)
        return Classification(ElementKind.TAG, name.name)

    raise UnsupportedNodeError(
        "Unexpected JSX element name",
        node_type=name.type if name is not None else None,
    )


def route_through_components(element: JSXElement, tag: str) -> None:
    """Rewrite ``<tag>`` to ``<_components.tag>``, closing name included."""
    opening = element.opening_element
    opening.name = u(
        "JSXMemberExpression",
        object=u("JSXIdentifier", name=COMPONENTS_OBJECT),
        property=opening.name,
    )

    if element.closing_element is not None:
        element.closing_element.name = u(
            "JSXMemberExpression",
            object=u("JSXIdentifier", name=COMPONENTS_OBJECT),
            property=u("JSXIdentifier", name=tag),
        )
