"""Rewrite of JSX element references through an injected `_components` object."""

from pymdx.compiler.rewrite.classifier import Classification, ElementKind, classify
from pymdx.compiler.rewrite.synthesis import specifiers_to_object_pattern
from pymdx.compiler.rewrite.transformer import JsxRewriter, rewrite_jsx

__all__ = [
    "Classification",
    "ElementKind",
    "JsxRewriter",
    "classify",
    "rewrite_jsx",
    "specifiers_to_object_pattern",
]
