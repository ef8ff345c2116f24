import pytest
from pymdx.compiler.ast_nodes import (
    Identifier,
    JSXIdentifier,
    JSXMemberExpression,
    JSXNamespacedName,
    JSXOpeningElement,
    JSXElement,
)
from pymdx.compiler.exceptions import UnsupportedNodeError
from pymdx.compiler.rewrite.classifier import (
    Classification,
    ElementKind,
    classify,
    route_through_components,
)


def member(*parts: str) -> JSXMemberExpression:
    node = JSXIdentifier(parts[0])
    for part in parts[1:]:
        node = JSXMemberExpression(object=node, property=JSXIdentifier(part))
    return node


@pytest.mark.parametrize(
    "name, explicit, expected",
    [
        ("Foo", False, Classification(ElementKind.COMPONENT, "Foo")),
        ("Foo", True, Classification(ElementKind.COMPONENT, "Foo")),
        ("$foo", False, Classification(ElementKind.COMPONENT, "$foo")),
        ("_bar", True, Classification(ElementKind.COMPONENT, "_bar")),
        ("h1", False, Classification(ElementKind.TAG, "h1")),
        ("h1", True, Classification(ElementKind.EXPLICIT, "h1")),
        ("b-ar", False, Classification(ElementKind.TAG, "b-ar")),
        ("B-ar", False, Classification(ElementKind.TAG, "B-ar")),
        ("B-ar", True, Classification(ElementKind.EXPLICIT, "B-ar")),
    ],
)
def test_classify_identifiers(name: str, explicit: bool, expected: Classification) -> None:
    assert classify(JSXIdentifier(name), explicit) == expected


def test_member_chain_reports_leftmost_identifier() -> None:
    assert classify(member("a", "b", "c")) == Classification(ElementKind.OBJECT, "a")
    assert classify(member("Foo", "Bar"), explicit=True) == Classification(
        ElementKind.OBJECT, "Foo"
    )


def test_namespaced_name_is_ignored() -> None:
    name = JSXNamespacedName(namespace=JSXIdentifier("svg"), name=JSXIdentifier("rect"))
    assert classify(name) == Classification(ElementKind.NAMESPACE)


def test_unknown_name_variant_raises() -> None:
    with pytest.raises(UnsupportedNodeError, match="Unexpected JSX element name"):
        classify(Identifier("div"))

    with pytest.raises(UnsupportedNodeError):
        classify(None)


def test_member_chain_must_start_with_identifier() -> None:
    broken = JSXMemberExpression(object=Identifier("x"), property=JSXIdentifier("y"))
    with pytest.raises(UnsupportedNodeError, match="node: Identifier"):
        classify(broken)


def test_route_through_components_self_closing() -> None:
    name = JSXIdentifier("hr")
    element = JSXElement(
        opening_element=JSXOpeningElement(name=name, self_closing=True)
    )

    route_through_components(element, "hr")

    assert element.opening_element.name == member("_components", "hr")
    assert element.opening_element.name.property is name
    assert element.closing_element is None
