import pytest
from pymdx.compiler.identifiers import is_identifier_name


@pytest.mark.parametrize(
    "name",
    ["a", "Foo", "$", "$foo", "_bar", "foo$bar", "a1", "Ünicode", "日本", "a\u200cb"],
)
def test_valid_identifier_names(name: str) -> None:
    assert is_identifier_name(name)


@pytest.mark.parametrize(
    "name", ["", "1a", "b-ar", "a b", "a.b", "ns:tag", "\u200cab", "a+"]
)
def test_invalid_identifier_names(name: str) -> None:
    assert not is_identifier_name(name)
