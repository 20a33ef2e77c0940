"""Tests for the lowercase acronym checker."""

from __future__ import annotations

import pytest

from repolint.checkers import AcronymChecker
from tests._fixtures.repo_builder import make_file


def _check(contents: str, path: str = "README.md") -> list[str]:
    checker = AcronymChecker()
    checker.push_file(make_file(path, contents))
    return checker.check_files()


def test_lowercase_acronym_is_reported() -> None:
    assert _check("we use sql and GUI tools") == ["README.md:1: replace sql with SQL"]


def test_uppercase_acronym_is_left_alone() -> None:
    assert _check("GUI and SQL are fine") == []
    assert _check("Gui is mixed case") == []


def test_every_match_on_a_line_is_reported() -> None:
    assert _check("a gui for sql\nno match here\ndsl oop") == [
        "README.md:1: replace gui with GUI",
        "README.md:1: replace sql with SQL",
        "README.md:3: replace dsl with DSL",
        "README.md:3: replace oop with OOP",
    ]


def test_adjacent_acronyms_are_all_reported() -> None:
    assert _check("gnu gui") == [
        "README.md:1: replace gnu with GNU",
        "README.md:1: replace gui with GUI",
    ]


def test_only_whole_words_match() -> None:
    assert _check("guide sqlite mysql bios.") == []


def test_acronym_checker_requires_contents_of_documentation() -> None:
    checker = AcronymChecker()
    doc = make_file("CONTRIBUTING.md")
    code = make_file("main.c")
    checker.push_file(doc)
    checker.push_file(code)

    assert checker.files == [doc]
    assert doc.require.contents is True
    assert doc.require.local_copy is False
    assert code.require.contents is False


def test_acronym_table_is_read_only() -> None:
    checker = AcronymChecker()
    assert checker.acronyms["ansi"] == "ANSI"
    with pytest.raises(TypeError):
        checker.acronyms["foo"] = "FOO"  # type: ignore[index]


def test_unicode_spaces_are_not_word_boundaries() -> None:
    assert _check("a\u00a0sql\u00a0b") == []
    assert _check("a\u2003gui") == []
    assert _check("tab\tsql\tsep") == ["README.md:1: replace sql with SQL"]
