"""Configuration of the JSX rewrite pass."""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from pymdx.compiler.exceptions import InvalidOptionError

PROGRAM = "program"
FUNCTION_BODY = "function-body"
OUTPUT_FORMATS = (PROGRAM, FUNCTION_BODY)

_ALIASES = {
    "outputFormat": "output_format",
    "providerImportSource": "provider_import_source",
}


@dataclass(frozen=True)
class RewriteOptions:
    """Options for :class:`pymdx.compiler.rewrite.JsxRewriter`.

    Attributes:
        output_format: ``"program"`` imports the provider with an import
            declaration, ``"function-body"`` reads it from ``arguments[0]``.
        provider_import_source: Module to import ``useMDXComponents`` from.
            When unset, no provider is used.
    """

    output_format: str = PROGRAM
    provider_import_source: Optional[str] = None

    def __post_init__(self) -> None:
        if self.output_format not in OUTPUT_FORMATS:
            raise InvalidOptionError(
                f"Invalid output format '{self.output_format}', "
                f"expected one of: {', '.join(OUTPUT_FORMATS)}"
            )
        if self.provider_import_source is not None and not isinstance(
            self.provider_import_source, str
        ):
            raise InvalidOptionError("provider_import_source must be a string")
        if self.provider_import_source == "":
            raise InvalidOptionError("provider_import_source must not be empty")

    @classmethod
    def from_mapping(cls, options: Optional[Mapping[str, Any]]) -> "RewriteOptions":
        """Build options from a mapping using camelCase or snake_case keys."""
        if not options:
            return cls()

        values = {}
        for key, value in options.items():
            name = _ALIASES.get(key, key)
            if name not in ("output_format", "provider_import_source"):
                raise InvalidOptionError(f"Unknown option '{key}'")
            if value is None and name == "output_format":
                continue
            values[name] = value

        return cls(**values)

    @property
    def uses_provider(self) -> bool:
        return self.provider_import_source is not None
