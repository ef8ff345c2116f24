from typing import List, Optional, Tuple

import pytest
from pymdx.compiler.ast_nodes import (
    NODE_TYPES,
    ArrowFunctionExpression,
    BlockStatement,
    FunctionDeclaration,
    FunctionExpression,
    Identifier,
    JSXElement,
    Literal,
    Node,
    Program,
    ReturnStatement,
    is_function,
    node_fields,
    u,
)
from pymdx.compiler.exceptions import MalformedTreeError
from pymdx.compiler.walker import walk


def test_u_builds_registered_kinds() -> None:
    node = u("MemberExpression", object=u("Identifier", name="a"), property=u("Identifier", name="b"))

    assert node.type == "MemberExpression"
    assert node.object == Identifier("a")
    assert node.computed is False


def test_u_accepts_kind_as_a_field() -> None:
    prop = u("Property", kind="init", key=u("Identifier", name="a"), value=Literal(1))
    declaration = u("VariableDeclaration", kind="const", declarations=[])

    assert prop.type == "Property"
    assert prop.kind == "init"
    assert declaration.kind == "const"


def test_u_rejects_unknown_kinds_and_fields() -> None:
    with pytest.raises(MalformedTreeError, match="Unknown node type 'Bogus'"):
        u("Bogus")

    with pytest.raises(MalformedTreeError, match="node: Identifier"):
        u("Identifier", name="a", computed=True)


def test_registry_covers_jsx_and_functions() -> None:
    for kind in (
        "Program",
        "JSXElement",
        "JSXMemberExpression",
        "JSXNamespacedName",
        "ArrowFunctionExpression",
        "ObjectPattern",
        "ImportDeclaration",
    ):
        assert NODE_TYPES[kind].__name__ == kind
    assert "Node" not in NODE_TYPES


def test_fields_exclude_extra_and_keep_source_order() -> None:
    assert node_fields(JSXElement) == (
        "opening_element",
        "children",
        "closing_element",
        "explicit",
    )
    assert "extra" not in node_fields(Program)


def test_extra_is_ignored_by_equality() -> None:
    assert Identifier("a", extra={"start": 0}) == Identifier("a", extra={"start": 5})
    assert Literal("a", raw="'a'") == Literal("a", raw='"a"')
    assert Literal("a") != Literal("b")


def test_is_function() -> None:
    assert is_function(FunctionDeclaration())
    assert is_function(FunctionExpression())
    assert is_function(ArrowFunctionExpression())
    assert not is_function(BlockStatement())


def test_walk_enter_and_leave_order() -> None:
    tree = Program(
        [
            FunctionDeclaration(
                id=Identifier("f"),
                body=BlockStatement([ReturnStatement(Literal(1))]),
            )
        ]
    )
    events: List[Tuple[str, str, Optional[str]]] = []

    def enter(node: Node, parent: Optional[Node], key: Optional[str]) -> None:
        events.append(("enter", node.type, key))

    def leave(node: Node, parent: Optional[Node], key: Optional[str]) -> None:
        events.append(("leave", node.type, key))

    walk(tree, enter=enter, leave=leave)

    assert events == [
        ("enter", "Program", None),
        ("enter", "FunctionDeclaration", "body"),
        ("enter", "Identifier", "id"),
        ("leave", "Identifier", "id"),
        ("enter", "BlockStatement", "body"),
        ("enter", "ReturnStatement", "body"),
        ("enter", "Literal", "argument"),
        ("leave", "Literal", "argument"),
        ("leave", "ReturnStatement", "body"),
        ("leave", "BlockStatement", "body"),
        ("leave", "FunctionDeclaration", "body"),
        ("leave", "Program", None),
    ]


def test_walk_follows_replaced_children_and_skips_prepended_statements() -> None:
    tree = Program([ReturnStatement(Identifier("old"))])
    seen: List[str] = []

    def enter(node: Node, parent: Optional[Node], key: Optional[str]) -> None:
        if isinstance(node, ReturnStatement):
            node.argument = Identifier("new")
            tree.body.insert(0, ReturnStatement(Identifier("prepended")))
        if isinstance(node, Identifier):
            seen.append(node.name)

    walk(tree, enter=enter)

    assert seen == ["new"]
    assert len(tree.body) == 2
