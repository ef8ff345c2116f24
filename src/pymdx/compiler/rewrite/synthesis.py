"""Statements injected by the JSX rewrite pass.

For the outermost function that renders JSX this builds::

    const _components = {h1: "h1", Foo: _missingComponent("Foo"), ...props.components}
    const {Foo, wrapper: MDXLayout} = _components

and, once per program, the ``_missingComponent`` helper and the binding of
``_provideComponents`` from the provider source.
"""

import json
from typing import List, Optional, Sequence, Tuple

from pymdx.compiler.ast_nodes import (
    ArrowFunctionExpression,
    AssignmentPattern,
    BlockStatement,
    Identifier,
    ImportDefaultSpecifier,
    ImportNamespaceSpecifier,
    ImportSpecifier,
    Node,
    RestElement,
    u,
)
from pymdx.compiler.exceptions import UnsupportedNodeError
from pymdx.compiler.options import FUNCTION_BODY
from pymdx.compiler.rewrite.classifier import COMPONENTS_OBJECT
from pymdx.compiler.rewrite.scope_stack import ScopeFrame

MISSING_COMPONENT_HELPER = "_missingComponent"
PROVIDE_COMPONENTS = "_provideComponents"
PROVIDER_EXPORT = "useMDXComponents"
LAYOUT_COMPONENT = "MDXLayout"
LAYOUT_KEY = "wrapper"
ENTRY_POINT = "MDXContent"
PROPS_PARAMETER = "_props"


def _identifier(name: str) -> Node:
    return u("Identifier", name=name)


def _string(value: str) -> Node:
    return u("Literal", value=value, raw=json.dumps(value, ensure_ascii=False))


def _number(value: int) -> Node:
    return u("Literal", value=value, raw=str(value))


def _const(target: Node, init: Node) -> Node:
    return u(
        "VariableDeclaration",
        kind="const",
        declarations=[u("VariableDeclarator", id=target, init=init)],
    )


def build_defaults(frame: ScopeFrame) -> List[Node]:
    """Fallback entries: tags render as themselves, components throw."""
    properties = []

    for name in frame.tags:
        properties.append(
            u("Property", kind="init", key=_identifier(name), value=_string(name))
        )

    for name in frame.components:
        if name == LAYOUT_COMPONENT:
            continue
        properties.append(
            u(
                "Property",
                kind="init",
                key=_identifier(name),
                value=u(
                    "CallExpression",
                    callee=_identifier(MISSING_COMPONENT_HELPER),
                    arguments=[_string(name)],
                ),
            )
        )

    return properties


def build_actual(frame: ScopeFrame) -> List[Node]:
    """Destructuring entries binding components and objects locally."""
    properties = []

    for name in frame.components:
        is_layout = name == LAYOUT_COMPONENT
        properties.append(
            u(
                "Property",
                kind="init",
                shorthand=not is_layout,
                key=_identifier(LAYOUT_KEY if is_layout else name),
                value=_identifier(name),
            )
        )

    for name in frame.objects:
        properties.append(
            u(
                "Property",
                kind="init",
                shorthand=True,
                key=_identifier(name),
                value=_identifier(name),
            )
        )

    return properties


def merge_objects(parts: Sequence[Node]) -> Node:
    """Shallow-merge ``parts`` left to right into one object literal.

    The first part must be an object literal. Further parts are spread after
    its properties so later parts win.
    """
    if len(parts) == 1:
        return parts[0]

    first, *rest = parts
    return u(
        "ObjectExpression",
        properties=list(first.properties)
        + [u("SpreadElement", argument=part) for part in rest],
    )


def _first_argument(name: str) -> Node:
    return u(
        "MemberExpression",
        object=_identifier(name),
        property=_number(0),
        computed=True,
    )


def entry_point_props(function: Node) -> Tuple[Node, List[Node]]:
    """Expression reading the props of an entry point function.

    Returns the expression and statements that have to be prepended to the
    body. A pattern that cannot be read back without losing its default or
    its meaning is bound to ``_props`` instead and destructured from it at
    the top of the body. Arrow functions have no ``arguments``, so a
    destructured or missing first parameter is replaced by ``_props``.
    """
    params = function.params
    first = params[0] if params else None
    props = _identifier(PROPS_PARAMETER)

    if isinstance(first, Identifier):
        return _identifier(first.name), []
    if isinstance(first, AssignmentPattern) and isinstance(first.left, Identifier):
        return _identifier(first.left.name), []

    if isinstance(first, RestElement):
        if isinstance(first.argument, Identifier):
            return _first_argument(first.argument.name), []
        # `(...[a]) =>` becomes `(..._props) => { const [a] = _props }`
        pattern = first.argument
        first.argument = _identifier(PROPS_PARAMETER)
        return _first_argument(PROPS_PARAMETER), [_const(pattern, props)]

    if isinstance(first, AssignmentPattern):
        # The default only applies to the parameter, so keep it there.
        pattern = first.left
        first.left = _identifier(PROPS_PARAMETER)
        return props, [_const(pattern, _identifier(PROPS_PARAMETER))]

    if not isinstance(function, ArrowFunctionExpression):
        return _first_argument("arguments"), []

    if first is None:
        params.append(_identifier(PROPS_PARAMETER))
        return props, []

    params[0] = _identifier(PROPS_PARAMETER)
    return props, [_const(first, _identifier(PROPS_PARAMETER))]


def inject_declarations(function: Node, frame: ScopeFrame, use_provider: bool) -> bool:
    """Prepend the ``_components`` declarations to ``function``.

    Returns False, leaving the function untouched, when nothing was tracked.
    """
    if frame.is_empty():
        return False

    defaults = build_defaults(frame)
    actual = build_actual(frame)

    parts: List[Node] = [u("ObjectExpression", properties=defaults)]
    prelude: List[Node] = []

    if use_provider:
        parts.append(
            u("CallExpression", callee=_identifier(PROVIDE_COMPONENTS), arguments=[])
        )

    # Accept `components` as a prop on the entry point.
    if frame.is_entry_point:
        props, prelude = entry_point_props(function)
        parts.append(
            u("MemberExpression", object=props, property=_identifier("components"))
        )

    declarations = [_const(_identifier(COMPONENTS_OBJECT), merge_objects(parts))]
    if actual:
        declarations.append(
            _const(
                u("ObjectPattern", properties=actual), _identifier(COMPONENTS_OBJECT)
            )
        )

    # Arrow functions with an implied return.
    if not isinstance(function.body, BlockStatement):
        function.body = u(
            "BlockStatement", body=[u("ReturnStatement", argument=function.body)]
        )
        if isinstance(function, ArrowFunctionExpression):
            function.expression = False

    function.body.body[0:0] = prelude + declarations
    return True


def create_missing_component_helper() -> Node:
    """``function _missingComponent(name) { return function () { throw ... } }``"""
    message = u(
        "BinaryExpression",
        operator="+",
        left=u(
            "BinaryExpression",
            operator="+",
            left=_string("Component `"),
            right=_identifier("name"),
        ),
        right=_string("` was not imported, exported, or given"),
    )

    thrower = u(
        "FunctionExpression",
        params=[],
        body=u(
            "BlockStatement",
            body=[
                u(
                    "ThrowStatement",
                    argument=u(
                        "NewExpression",
                        callee=_identifier("Error"),
                        arguments=[message],
                    ),
                )
            ],
        ),
    )

    return u(
        "FunctionDeclaration",
        id=_identifier(MISSING_COMPONENT_HELPER),
        params=[_identifier("name")],
        body=u("BlockStatement", body=[u("ReturnStatement", argument=thrower)]),
    )


def create_import_provider(source: Optional[str], output_format: str) -> Node:
    """Bind ``_provideComponents`` to the provider's ``useMDXComponents``."""
    specifiers = [
        u(
            "ImportSpecifier",
            imported=_identifier(PROVIDER_EXPORT),
            local=_identifier(PROVIDE_COMPONENTS),
        )
    ]

    if output_format == FUNCTION_BODY:
        return _const(
            specifiers_to_object_pattern(specifiers), _first_argument("arguments")
        )

    if source is None:
        raise UnsupportedNodeError(
            "A provider import needs a source", node_type="ImportDeclaration"
        )
    return u("ImportDeclaration", specifiers=specifiers, source=_string(source))


def specifiers_to_object_pattern(specifiers: Sequence[Node]) -> Node:
    """Turn import specifiers into the equivalent destructuring pattern.

    ``{a, b as c}`` -> ``{a, b: c}``; a default import ``d`` -> ``{default: d}``.
    Namespace imports have no pattern equivalent.
    """
    properties = []

    for specifier in specifiers:
        if isinstance(specifier, ImportSpecifier):
            imported = specifier.imported
            local_name = specifier.local.name
            if isinstance(imported, Identifier):
                key = _identifier(imported.name)
                shorthand = imported.name == local_name
            else:
                # `import {"a-b" as c}`
                key = _string(imported.value)
                shorthand = False
        elif isinstance(specifier, ImportDefaultSpecifier):
            local_name = specifier.local.name
            key = _identifier("default")
            shorthand = False
        elif isinstance(specifier, ImportNamespaceSpecifier):
            raise UnsupportedNodeError(
                "Cannot turn a namespace import into an object pattern",
                node_type=specifier.type,
            )
        else:
            raise UnsupportedNodeError(
                "Expected an import specifier",
                node_type=specifier.type if specifier is not None else None,
            )

        properties.append(
            u(
                "Property",
                kind="init",
                shorthand=shorthand,
                key=key,
                value=_identifier(local_name),
            )
        )

    return u("ObjectPattern", properties=properties)
