"""ESTree + JSX syntax tree nodes.

Every node kind is a dataclass with explicit fields, named after its ESTree
``type``. Fields use snake_case; :mod:`pymdx.compiler.serialize` maps them to
and from the camelCase keys of ESTree JSON. Keys a kind does not define
(positions, comments, parser specific data) are kept in ``extra``.
"""

from dataclasses import dataclass, field, fields
from functools import lru_cache
from typing import Any, Dict, List, Optional, Tuple, Type

from pymdx.compiler.exceptions import MalformedTreeError


@dataclass
class Node:
    """Base class of all syntax tree nodes."""

    extra: Dict[str, Any] = field(
        default_factory=dict, repr=False, compare=False, kw_only=True
    )

    @property
    def type(self) -> str:
        return type(self).__name__


# === Program & statements ===


@dataclass
class Program(Node):
    body: List[Node] = field(default_factory=list)
    source_type: str = "module"


@dataclass
class ExpressionStatement(Node):
    expression: Optional[Node] = None
    directive: Optional[str] = None


@dataclass
class BlockStatement(Node):
    body: List[Node] = field(default_factory=list)


@dataclass
class StaticBlock(Node):
    body: List[Node] = field(default_factory=list)


@dataclass
class EmptyStatement(Node):
    pass


@dataclass
class DebuggerStatement(Node):
    pass


@dataclass
class WithStatement(Node):
    object: Optional[Node] = None
    body: Optional[Node] = None


@dataclass
class ReturnStatement(Node):
    argument: Optional[Node] = None


@dataclass
class LabeledStatement(Node):
    label: Optional[Node] = None
    body: Optional[Node] = None


@dataclass
class BreakStatement(Node):
    label: Optional[Node] = None


@dataclass
class ContinueStatement(Node):
    label: Optional[Node] = None


@dataclass
class IfStatement(Node):
    test: Optional[Node] = None
    consequent: Optional[Node] = None
    alternate: Optional[Node] = None


@dataclass
class SwitchStatement(Node):
    discriminant: Optional[Node] = None
    cases: List[Node] = field(default_factory=list)


@dataclass
class SwitchCase(Node):
    test: Optional[Node] = None
    consequent: List[Node] = field(default_factory=list)


@dataclass
class ThrowStatement(Node):
    argument: Optional[Node] = None


@dataclass
class TryStatement(Node):
    block: Optional[Node] = None
    handler: Optional[Node] = None
    finalizer: Optional[Node] = None


@dataclass
class CatchClause(Node):
    param: Optional[Node] = None
    body: Optional[Node] = None


@dataclass
class WhileStatement(Node):
    test: Optional[Node] = None
    body: Optional[Node] = None


@dataclass
class DoWhileStatement(Node):
    body: Optional[Node] = None
    test: Optional[Node] = None


@dataclass
class ForStatement(Node):
    init: Optional[Node] = None
    test: Optional[Node] = None
    update: Optional[Node] = None
    body: Optional[Node] = None


@dataclass
class ForInStatement(Node):
    left: Optional[Node] = None
    right: Optional[Node] = None
    body: Optional[Node] = None


@dataclass
class ForOfStatement(Node):
    left: Optional[Node] = None
    right: Optional[Node] = None
    body: Optional[Node] = None
    is_await: bool = False


# === Declarations ===


@dataclass
class FunctionDeclaration(Node):
    id: Optional[Node] = None
    params: List[Node] = field(default_factory=list)
    body: Optional[Node] = None
    generator: bool = False
    is_async: bool = False


@dataclass
class VariableDeclaration(Node):
    declarations: List[Node] = field(default_factory=list)
    kind: str = "var"


@dataclass
class VariableDeclarator(Node):
    id: Optional[Node] = None
    init: Optional[Node] = None


@dataclass
class ClassDeclaration(Node):
    id: Optional[Node] = None
    super_class: Optional[Node] = None
    body: Optional[Node] = None


@dataclass
class ClassBody(Node):
    body: List[Node] = field(default_factory=list)


@dataclass
class MethodDefinition(Node):
    key: Optional[Node] = None
    value: Optional[Node] = None
    kind: str = "method"
    computed: bool = False
    static: bool = False


@dataclass
class PropertyDefinition(Node):
    key: Optional[Node] = None
    value: Optional[Node] = None
    computed: bool = False
    static: bool = False


# === Expressions ===


@dataclass
class Identifier(Node):
    name: str = ""


@dataclass
class PrivateIdentifier(Node):
    name: str = ""


@dataclass
class Literal(Node):
    value: Any = None
    raw: Optional[str] = field(default=None, compare=False)
    regex: Optional[Dict[str, str]] = None
    bigint: Optional[str] = None


@dataclass
class ThisExpression(Node):
    pass


@dataclass
class Super(Node):
    pass


@dataclass
class ArrayExpression(Node):
    elements: List[Optional[Node]] = field(default_factory=list)


@dataclass
class ObjectExpression(Node):
    properties: List[Node] = field(default_factory=list)


@dataclass
class Property(Node):
    key: Optional[Node] = None
    value: Optional[Node] = None
    kind: str = "init"
    method: bool = False
    shorthand: bool = False
    computed: bool = False


@dataclass
class FunctionExpression(Node):
    id: Optional[Node] = None
    params: List[Node] = field(default_factory=list)
    body: Optional[Node] = None
    generator: bool = False
    is_async: bool = False


@dataclass
class ArrowFunctionExpression(Node):
    id: Optional[Node] = None
    params: List[Node] = field(default_factory=list)
    body: Optional[Node] = None
    expression: bool = False
    generator: bool = False
    is_async: bool = False


@dataclass
class UnaryExpression(Node):
    operator: str = ""
    prefix: bool = True
    argument: Optional[Node] = None


@dataclass
class UpdateExpression(Node):
    operator: str = ""
    argument: Optional[Node] = None
    prefix: bool = False


@dataclass
class BinaryExpression(Node):
    operator: str = ""
    left: Optional[Node] = None
    right: Optional[Node] = None


@dataclass
class LogicalExpression(Node):
    operator: str = ""
    left: Optional[Node] = None
    right: Optional[Node] = None


@dataclass
class AssignmentExpression(Node):
    operator: str = "="
    left: Optional[Node] = None
    right: Optional[Node] = None


@dataclass
class MemberExpression(Node):
    object: Optional[Node] = None
    property: Optional[Node] = None
    computed: bool = False
    optional: bool = False


@dataclass
class ChainExpression(Node):
    expression: Optional[Node] = None


@dataclass
class ConditionalExpression(Node):
    test: Optional[Node] = None
    consequent: Optional[Node] = None
    alternate: Optional[Node] = None


@dataclass
class CallExpression(Node):
    callee: Optional[Node] = None
    arguments: List[Node] = field(default_factory=list)
    optional: bool = False


@dataclass
class NewExpression(Node):
    callee: Optional[Node] = None
    arguments: List[Node] = field(default_factory=list)


@dataclass
class SequenceExpression(Node):
    expressions: List[Node] = field(default_factory=list)


@dataclass
class YieldExpression(Node):
    argument: Optional[Node] = None
    delegate: bool = False


@dataclass
class AwaitExpression(Node):
    argument: Optional[Node] = None


@dataclass
class TemplateLiteral(Node):
    quasis: List[Node] = field(default_factory=list)
    expressions: List[Node] = field(default_factory=list)


@dataclass
class TaggedTemplateExpression(Node):
    tag: Optional[Node] = None
    quasi: Optional[Node] = None


@dataclass
class TemplateElement(Node):
    tail: bool = False
    value: Dict[str, Optional[str]] = field(default_factory=dict)


@dataclass
class ClassExpression(Node):
    id: Optional[Node] = None
    super_class: Optional[Node] = None
    body: Optional[Node] = None


@dataclass
class MetaProperty(Node):
    meta: Optional[Node] = None
    property: Optional[Node] = None


@dataclass
class ImportExpression(Node):
    source: Optional[Node] = None


@dataclass
class SpreadElement(Node):
    argument: Optional[Node] = None


# === Patterns ===


@dataclass
class ObjectPattern(Node):
    properties: List[Node] = field(default_factory=list)


@dataclass
class ArrayPattern(Node):
    elements: List[Optional[Node]] = field(default_factory=list)


@dataclass
class RestElement(Node):
    argument: Optional[Node] = None


@dataclass
class AssignmentPattern(Node):
    left: Optional[Node] = None
    right: Optional[Node] = None


# === Modules ===


@dataclass
class ImportDeclaration(Node):
    specifiers: List[Node] = field(default_factory=list)
    source: Optional[Node] = None


@dataclass
class ImportSpecifier(Node):
    imported: Optional[Node] = None
    local: Optional[Node] = None


@dataclass
class ImportDefaultSpecifier(Node):
    local: Optional[Node] = None


@dataclass
class ImportNamespaceSpecifier(Node):
    local: Optional[Node] = None


@dataclass
class ExportNamedDeclaration(Node):
    declaration: Optional[Node] = None
    specifiers: List[Node] = field(default_factory=list)
    source: Optional[Node] = None


@dataclass
class ExportSpecifier(Node):
    local: Optional[Node] = None
    exported: Optional[Node] = None


@dataclass
class ExportDefaultDeclaration(Node):
    declaration: Optional[Node] = None


@dataclass
class ExportAllDeclaration(Node):
    exported: Optional[Node] = None
    source: Optional[Node] = None


# === JSX ===


@dataclass
class JSXElement(Node):
    """A rendered markup element.

    ``explicit`` is set by the parser when the element was written as literal
    JSX in the source, as opposed to being generated from markdown shorthand
    (``# hi`` -> ``<h1>``).
    """

    opening_element: Optional[Node] = None
    children: List[Node] = field(default_factory=list)
    closing_element: Optional[Node] = None
    explicit: bool = False


@dataclass
class JSXOpeningElement(Node):
    name: Optional[Node] = None
    attributes: List[Node] = field(default_factory=list)
    self_closing: bool = False


@dataclass
class JSXClosingElement(Node):
    name: Optional[Node] = None


@dataclass
class JSXFragment(Node):
    opening_fragment: Optional[Node] = None
    children: List[Node] = field(default_factory=list)
    closing_fragment: Optional[Node] = None


@dataclass
class JSXOpeningFragment(Node):
    pass


@dataclass
class JSXClosingFragment(Node):
    pass


@dataclass
class JSXIdentifier(Node):
    name: str = ""


@dataclass
class JSXMemberExpression(Node):
    object: Optional[Node] = None
    property: Optional[Node] = None


@dataclass
class JSXNamespacedName(Node):
    namespace: Optional[Node] = None
    name: Optional[Node] = None


@dataclass
class JSXAttribute(Node):
    name: Optional[Node] = None
    value: Optional[Node] = None


@dataclass
class JSXSpreadAttribute(Node):
    argument: Optional[Node] = None


@dataclass
class JSXExpressionContainer(Node):
    expression: Optional[Node] = None


@dataclass
class JSXEmptyExpression(Node):
    pass


@dataclass
class JSXSpreadChild(Node):
    expression: Optional[Node] = None


@dataclass
class JSXText(Node):
    value: str = ""
    raw: Optional[str] = field(default=None, compare=False)


def _collect_node_types() -> Dict[str, Type[Node]]:
    registry: Dict[str, Type[Node]] = {}
    pending = list(Node.__subclasses__())
    while pending:
        cls = pending.pop()
        registry[cls.__name__] = cls
        pending.extend(cls.__subclasses__())
    return registry


NODE_TYPES: Dict[str, Type[Node]] = _collect_node_types()

FUNCTION_TYPES: Tuple[Type[Node], ...] = (
    FunctionDeclaration,
    FunctionExpression,
    ArrowFunctionExpression,
)


@lru_cache(maxsize=None)
def node_fields(cls: Type[Node]) -> Tuple[str, ...]:
    """Names of the syntax fields of a node kind, in traversal order."""
    return tuple(f.name for f in fields(cls) if f.name != "extra")


def u(kind: str, /, **attrs: Any) -> Node:
    """Build a node of the given ESTree ``type``.

    Example:
        u("Identifier", name="_components")
    """
    cls = NODE_TYPES.get(kind)
    if cls is None:
        raise MalformedTreeError(f"Unknown node type '{kind}'")

    known = node_fields(cls)
    unexpected = [name for name in attrs if name not in known and name != "extra"]
    if unexpected:
        raise MalformedTreeError(
            f"Unexpected field(s) {', '.join(sorted(unexpected))}", node_type=kind
        )

    return cls(**attrs)


def is_function(node: Any) -> bool:
    return isinstance(node, FUNCTION_TYPES)
