"""Top-level declaration analysis.

Finds every name bound in the outermost lexical scope of a program: imports,
function and class declarations, ``let``/``const``/``var`` bindings directly
in the program body, and ``var`` bindings hoisted out of nested blocks.
Function bodies are never entered.
"""

from typing import Iterator, List, Optional, Set

from pymdx.compiler.ast_nodes import (
    ArrayPattern,
    AssignmentPattern,
    BlockStatement,
    ClassDeclaration,
    DoWhileStatement,
    ExportDefaultDeclaration,
    ExportNamedDeclaration,
    ForInStatement,
    ForOfStatement,
    ForStatement,
    FunctionDeclaration,
    Identifier,
    IfStatement,
    ImportDeclaration,
    LabeledStatement,
    Node,
    ObjectPattern,
    Program,
    Property,
    RestElement,
    SwitchStatement,
    TryStatement,
    VariableDeclaration,
    WhileStatement,
    WithStatement,
)


def top_scope_declarations(tree: Program) -> Set[str]:
    """Return the names declared at the top level of ``tree``."""
    names: Set[str] = set()
    for statement in tree.body:
        _collect(statement, names, top_level=True)
    return names


def pattern_names(pattern: Optional[Node]) -> Iterator[str]:
    """Yield the identifiers bound by a binding pattern."""
    if isinstance(pattern, Identifier):
        yield pattern.name
    elif isinstance(pattern, ObjectPattern):
        for prop in pattern.properties:
            if isinstance(prop, Property):
                yield from pattern_names(prop.value)
            elif isinstance(prop, RestElement):
                yield from pattern_names(prop.argument)
    elif isinstance(pattern, ArrayPattern):
        for element in pattern.elements:
            yield from pattern_names(element)
    elif isinstance(pattern, RestElement):
        yield from pattern_names(pattern.argument)
    elif isinstance(pattern, AssignmentPattern):
        yield from pattern_names(pattern.left)


def _collect(node: Optional[Node], names: Set[str], top_level: bool) -> None:
    if node is None:
        return

    if isinstance(node, ImportDeclaration):
        for specifier in node.specifiers:
            local = getattr(specifier, "local", None)
            if isinstance(local, Identifier):
                names.add(local.name)

    elif isinstance(node, (ExportNamedDeclaration, ExportDefaultDeclaration)):
        _collect(node.declaration, names, top_level)

    elif isinstance(node, (FunctionDeclaration, ClassDeclaration)):
        # Declarations inside blocks are block scoped.
        if top_level and isinstance(node.id, Identifier):
            names.add(node.id.name)

    elif isinstance(node, VariableDeclaration):
        if top_level or node.kind == "var":
            for declarator in node.declarations:
                names.update(pattern_names(declarator.id))

    else:
        # Only `var` escapes nested blocks.
        for child in _nested_statements(node):
            _collect(child, names, top_level=False)


def _nested_statements(node: Node) -> List[Optional[Node]]:
    if isinstance(node, BlockStatement):
        return list(node.body)
    if isinstance(node, IfStatement):
        return [node.consequent, node.alternate]
    if isinstance(node, ForStatement):
        return [node.init, node.body]
    if isinstance(node, (ForInStatement, ForOfStatement)):
        return [node.left, node.body]
    if isinstance(node, (WhileStatement, DoWhileStatement, WithStatement)):
        return [node.body]
    if isinstance(node, LabeledStatement):
        return [node.body]
    if isinstance(node, TryStatement):
        handler_body = node.handler.body if node.handler is not None else None
        return [node.block, handler_body, node.finalizer]
    if isinstance(node, SwitchStatement):
        return [stmt for case in node.cases for stmt in case.consequent]
    return []
