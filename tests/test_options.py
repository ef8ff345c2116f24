import unittest

from pymdx.compiler.exceptions import InvalidOptionError
from pymdx.compiler.options import RewriteOptions


class TestRewriteOptions(unittest.TestCase):
    def test_defaults(self) -> None:
        options = RewriteOptions()
        self.assertEqual(options.output_format, "program")
        self.assertIsNone(options.provider_import_source)
        self.assertFalse(options.uses_provider)

    def test_explicit(self) -> None:
        options = RewriteOptions(
            output_format="function-body", provider_import_source="@mdx-js/react"
        )
        self.assertEqual(options.output_format, "function-body")
        self.assertTrue(options.uses_provider)

    def test_invalid_output_format(self) -> None:
        with self.assertRaises(InvalidOptionError):
            RewriteOptions(output_format="module")
        # Also usable as a ValueError
        with self.assertRaises(ValueError):
            RewriteOptions(output_format="")

    def test_invalid_provider_source(self) -> None:
        with self.assertRaises(InvalidOptionError):
            RewriteOptions(provider_import_source="")
        with self.assertRaises(InvalidOptionError):
            RewriteOptions(provider_import_source=42)  # type: ignore[arg-type]

    def test_from_mapping_camel_case(self) -> None:
        options = RewriteOptions.from_mapping(
            {"outputFormat": "function-body", "providerImportSource": "x"}
        )
        self.assertEqual(
            options,
            RewriteOptions(output_format="function-body", provider_import_source="x"),
        )

    def test_from_mapping_snake_case_and_empty(self) -> None:
        self.assertEqual(RewriteOptions.from_mapping(None), RewriteOptions())
        self.assertEqual(
            RewriteOptions.from_mapping({"output_format": None}), RewriteOptions()
        )
        self.assertEqual(
            RewriteOptions.from_mapping({"provider_import_source": "x"}).provider_import_source,
            "x",
        )

    def test_from_mapping_unknown_key(self) -> None:
        with self.assertRaisesRegex(InvalidOptionError, "Unknown option 'jsx'"):
            RewriteOptions.from_mapping({"jsx": True})


if __name__ == "__main__":
    unittest.main()
