"""JSX rewrite pass.

Rewrites JSX so components come from a single ``_components`` object that
combines fallbacks, an optional provider and ``props.components``:

* ``<h1>`` generated from markdown becomes ``<_components.h1>``;
* ``<Foo>`` keeps its name but ``Foo`` is destructured from ``_components``,
  with a fallback that throws when rendered if it was never given;
* ``<x.y>`` destructures ``x`` from ``_components``;
* names declared at the top level of the program are left alone.

The pass is not idempotent: it must run once on a tree.
"""

import logging
from typing import Callable, Optional, Set

from pymdx.compiler.ast_nodes import (
    FunctionDeclaration,
    Identifier,
    JSXElement,
    Node,
    Program,
    VariableDeclarator,
    is_function,
)
from pymdx.compiler.options import RewriteOptions
from pymdx.compiler.rewrite.classifier import (
    ElementKind,
    classify,
    route_through_components,
)
from pymdx.compiler.rewrite.scope_stack import ScopeFrame, ScopeStack
from pymdx.compiler.rewrite.synthesis import (
    ENTRY_POINT,
    LAYOUT_COMPONENT,
    MISSING_COMPONENT_HELPER,
    create_import_provider,
    create_missing_component_helper,
    inject_declarations,
)
from pymdx.compiler.scope import top_scope_declarations
from pymdx.compiler.walker import walk

logger = logging.getLogger(__name__)

TopScopeAnalyzer = Callable[[Program], Set[str]]


class JsxRewriter:
    """Configured JSX rewrite pass. Instances can be reused across trees."""

    def __init__(
        self,
        options: Optional[RewriteOptions] = None,
        compute_top_scope: Optional[TopScopeAnalyzer] = None,
    ) -> None:
        self.options = options or RewriteOptions()
        self.compute_top_scope = compute_top_scope or top_scope_declarations

    def rewrite(self, tree: Program) -> Program:
        """Rewrite ``tree`` in place and return it."""
        return _RewritePass(self.options, self.compute_top_scope(tree)).run(tree)

    __call__ = rewrite


class _RewritePass:
    """State of one run of the pass over one tree."""

    def __init__(self, options: RewriteOptions, top_scope: Set[str]) -> None:
        self.options = options
        self.top_scope = top_scope
        self.stack = ScopeStack()
        self.use_missing_component_helper = False
        self.import_provider = False

    def run(self, tree: Program) -> Program:
        walk(tree, enter=self._enter, leave=self._leave)

        # Each insert goes to the front: the provider ends up before the helper.
        if self.use_missing_component_helper:
            logger.debug("Adding %s helper", MISSING_COMPONENT_HELPER)
            tree.body.insert(0, create_missing_component_helper())

        if self.import_provider:
            logger.debug(
                "Adding provider binding from %r (%s)",
                self.options.provider_import_source,
                self.options.output_format,
            )
            tree.body.insert(
                0,
                create_import_provider(
                    self.options.provider_import_source, self.options.output_format
                ),
            )

        return tree

    def _enter(self, node: Node, parent: Optional[Node], key: Optional[str]) -> None:
        if is_function(node):
            is_outermost = len(self.stack) == 0
            entry_point = is_outermost and _is_entry_point(node, parent)
            self.stack.push(ScopeFrame(is_entry_point=entry_point))

        if isinstance(node, JSXElement) and self.stack.root is not None:
            self._track_element(node, self.stack.root)

    def _track_element(self, node: JSXElement, scope: ScopeFrame) -> None:
        # Discoveries go to the outermost function: top-level functions are
        # the components.
        result = classify(node.opening_element.name, node.explicit)
        name = result.name

        if result.kind is ElementKind.OBJECT:
            if name not in self.top_scope and scope.objects.add(name):
                logger.debug("Tracking object %s", name)

        elif result.kind is ElementKind.COMPONENT:
            if name not in scope.components and name not in self.top_scope:
                if name != LAYOUT_COMPONENT:
                    self.use_missing_component_helper = True
                scope.components.add(name)
                logger.debug("Tracking component %s", name)

        elif result.kind is ElementKind.TAG:
            if scope.tags.add(name):
                logger.debug("Tracking tag %s", name)
            route_through_components(node, name)

    def _leave(self, node: Node, parent: Optional[Node], key: Optional[str]) -> None:
        if not is_function(node):
            return

        frame = self.stack.pop()
        if len(self.stack) > 0:
            # Inner frames never receive discoveries.
            return

        if inject_declarations(node, frame, self.options.uses_provider):
            logger.debug(
                "Injected components into %s (tags=%s, components=%s, objects=%s)",
                _function_name(node, parent) or "<anonymous>",
                list(frame.tags),
                list(frame.components),
                list(frame.objects),
            )
            if self.options.uses_provider:
                self.import_provider = True


def _function_name(node: Node, parent: Optional[Node]) -> Optional[str]:
    if isinstance(node, FunctionDeclaration) and isinstance(node.id, Identifier):
        return node.id.name
    if (
        isinstance(parent, VariableDeclarator)
        and parent.init is node
        and isinstance(parent.id, Identifier)
    ):
        return parent.id.name
    return None


def _is_entry_point(node: Node, parent: Optional[Node]) -> bool:
    return _function_name(node, parent) == ENTRY_POINT


def rewrite_jsx(
    tree: Program,
    options: Optional[RewriteOptions] = None,
    *,
    compute_top_scope: Optional[TopScopeAnalyzer] = None,
) -> Program:
    """Run the JSX rewrite pass over ``tree`` in place."""
    return JsxRewriter(options, compute_top_scope=compute_top_scope).rewrite(tree)
