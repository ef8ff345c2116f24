from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pymdx")
except PackageNotFoundError:
    __version__ = "unknown"

from pymdx.compiler.ast_nodes import Node, Program, u
from pymdx.compiler.exceptions import (
    InvalidOptionError,
    MalformedTreeError,
    PyMdxError,
    UnsupportedNodeError,
)
from pymdx.compiler.options import RewriteOptions
from pymdx.compiler.rewrite import JsxRewriter, rewrite_jsx
from pymdx.compiler.scope import top_scope_declarations

__all__ = [
    "JsxRewriter",
    "rewrite_jsx",
    "RewriteOptions",
    "top_scope_declarations",
    "Node",
    "Program",
    "u",
    "PyMdxError",
    "UnsupportedNodeError",
    "MalformedTreeError",
    "InvalidOptionError",
]
