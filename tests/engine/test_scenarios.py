"""
End-to-end scenarios for the directive engine.
"""

from pathlib import Path

import pytest

from textpp.engine import Engine
from textpp.errors import MismatchedEndif
from textpp.symbols import SymbolTable

from tests.infrastructure.file_utils import write
from tests.infrastructure.rendering_utils import render

GREETING = "#ifdef NAME\nHello $$NAME$$\n#else\nHello\n#endif\n"
COMPARISON = "#if (A == B)\nmatch\n#else\nno match\n#endif\n"


def test_greeting_with_name():
    assert render(GREETING, NAME="Alice") == "Hello Alice\n"


def test_greeting_without_name():
    assert render(GREETING) == "Hello\n"


def test_comparison_match():
    assert render(COMPARISON, A="x", B="x") == "match\n"


def test_comparison_with_undefined_operand():
    assert render(COMPARISON, A="x") == "no match\n"


def test_missing_include_produces_nothing(tmp_path: Path):
    doc = write(tmp_path / "doc.md", "#include \"missing.txt\"\n")

    assert Engine(SymbolTable()).process_file(doc) == ""


def test_stray_endif_is_fatal():
    with pytest.raises(MismatchedEndif):
        render("#endif\n")


def test_negated_undefined():
    assert render("#if (A && !B)\nyes\n#else\nno\n#endif\n", A="TRUE") == "yes\n"


def test_ifdef_fails_when_defined_as_empty():
    """-DKEY= leaves KEY undefined"""
    symbols = SymbolTable.from_pairs([("KEY", "")])
    text = "#ifdef KEY\nyes\n#else\nno\n#endif\n"

    assert Engine(symbols).process_text(text) == "no\n"


def test_if_expression_truthiness_and_comparisons():
    symbols = SymbolTable.from_pairs([
        ("VAR", ""),
        ("VAR2", "3"),
        ("VAR3", "aaa"),
        ("VAR4", "bbb"),
        ("VAR5", "ccc"),
    ])
    text = (
        "#if (VAR || VAR2 == 3 && VAR3 == \"aaa\" || VAR4 != \"bbb\" "
        "|| !(VAR3 == \"aaa\" || VAR5==\"ccc\"))\n"
        "TRUE\n#else\nFALSE\n#endif\n"
    )

    assert Engine(symbols).process_text(text) == "TRUE\n"


@pytest.mark.parametrize("value,expected", [
    ("TRUE", "on\n"),
    ("yes", "on\n"),
    ("Falsey", "on\n"),
    ("0", "off\n"),
    ("F", "off\n"),
    ("false", "off\n"),
    ("No", "off\n"),
])
def test_if_uses_truthiness(value, expected):
    assert render("#if (FLAG)\non\n#else\noff\n#endif\n", FLAG=value) == expected


def test_markdown_document_with_headings():
    text = (
        "# Guide\n"
        "## Install\n"
        "#ifdef WINDOWS\n"
        "Run setup.exe\n"
        "#else\n"
        "Run ./setup.sh --prefix $$PREFIX$$\n"
        "#endif\n"
        "### Notes\n"
    )

    assert render(text, PREFIX="/opt") == (
        "# Guide\n"
        "## Install\n"
        "Run ./setup.sh --prefix /opt\n"
        "### Notes\n"
    )
