import json
from pathlib import Path

from click.testing import CliRunner
from pymdx import __version__
from pymdx.cli.main import cli


def write_tree(tmp_path: Path) -> Path:
    # function MDXContent(props) { return <h1><Foo /></h1> }
    tree = {
        "type": "Program",
        "sourceType": "module",
        "body": [
            {
                "type": "ImportDeclaration",
                "specifiers": [
                    {
                        "type": "ImportDefaultSpecifier",
                        "local": {"type": "Identifier", "name": "Chart"},
                    }
                ],
                "source": {"type": "Literal", "value": "./chart.js", "raw": "'./chart.js'"},
            },
            {
                "type": "FunctionDeclaration",
                "id": {"type": "Identifier", "name": "MDXContent"},
                "params": [{"type": "Identifier", "name": "props"}],
                "generator": False,
                "async": False,
                "body": {
                    "type": "BlockStatement",
                    "body": [
                        {
                            "type": "ReturnStatement",
                            "argument": {
                                "type": "JSXElement",
                                "openingElement": {
                                    "type": "JSXOpeningElement",
                                    "name": {"type": "JSXIdentifier", "name": "h1"},
                                    "attributes": [],
                                    "selfClosing": False,
                                },
                                "closingElement": {
                                    "type": "JSXClosingElement",
                                    "name": {"type": "JSXIdentifier", "name": "h1"},
                                },
                                "children": [
                                    {
                                        "type": "JSXElement",
                                        "openingElement": {
                                            "type": "JSXOpeningElement",
                                            "name": {"type": "JSXIdentifier", "name": "Foo"},
                                            "attributes": [],
                                            "selfClosing": True,
                                        },
                                        "closingElement": None,
                                        "children": [],
                                    }
                                ],
                            },
                        }
                    ],
                },
            },
        ],
    }
    path = tmp_path / "tree.json"
    path.write_text(json.dumps(tree), encoding="utf-8")
    return path


def test_rewrite_command(tmp_path: Path) -> None:
    source = write_tree(tmp_path)
    out = tmp_path / "out.json"
    runner = CliRunner()

    result = runner.invoke(
        cli, ["rewrite", str(source), "-o", str(out), "--provider-import-source", "x"]
    )

    assert result.exit_code == 0, result.output
    tree = json.loads(out.read_text(encoding="utf-8"))
    kinds = [statement["type"] for statement in tree["body"]]
    assert kinds == [
        "ImportDeclaration",
        "FunctionDeclaration",
        "ImportDeclaration",
        "FunctionDeclaration",
    ]
    assert tree["body"][0]["source"]["value"] == "x"
    assert tree["body"][1]["id"]["name"] == "_missingComponent"

    content = tree["body"][3]["body"]["body"]
    init = content[0]["declarations"][0]["init"]
    assert [p["type"] for p in init["properties"]] == [
        "Property",
        "Property",
        "SpreadElement",
        "SpreadElement",
    ]
    heading = content[2]["argument"]
    assert heading["openingElement"]["name"]["type"] == "JSXMemberExpression"


def test_rewrite_command_to_stdout(tmp_path: Path) -> None:
    source = write_tree(tmp_path)
    result = CliRunner().invoke(cli, ["rewrite", str(source), "--indent", "2"])

    assert result.exit_code == 0, result.output
    tree = json.loads(result.output)
    assert tree["body"][0]["id"]["name"] == "_missingComponent"


def test_rewrite_rejects_bad_json(tmp_path: Path) -> None:
    source = tmp_path / "broken.json"
    source.write_text("{not json", encoding="utf-8")

    result = CliRunner().invoke(cli, ["rewrite", str(source)])

    assert result.exit_code != 0
    assert "Invalid JSON" in result.output


def test_rewrite_rejects_unknown_nodes(tmp_path: Path) -> None:
    source = tmp_path / "unknown.json"
    source.write_text(json.dumps({"type": "Program", "body": [{"type": "Nope"}]}))

    result = CliRunner().invoke(cli, ["rewrite", str(source)])

    assert result.exit_code == 1
    assert "Unknown node type 'Nope'" in result.output


def test_rewrite_rejects_non_program(tmp_path: Path) -> None:
    source = tmp_path / "identifier.json"
    source.write_text(json.dumps({"type": "Identifier", "name": "a"}))

    result = CliRunner().invoke(cli, ["rewrite", str(source)])

    assert result.exit_code != 0
    assert "Expected a Program node" in result.output


def test_scope_command(tmp_path: Path) -> None:
    source = write_tree(tmp_path)

    result = CliRunner().invoke(cli, ["scope", str(source)])

    assert result.exit_code == 0
    assert result.output.splitlines() == ["Chart", "MDXContent"]


def test_version_option() -> None:
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output
