"""Tests for the variable name typo checker."""

from __future__ import annotations

from repolint.checkers import VarTypoChecker
from tests._fixtures.repo_builder import make_file


def _check(contents: str, path: str = "README.md") -> list[str]:
    checker = VarTypoChecker()
    checker.push_file(make_file(path, contents))
    return checker.check_files()


def test_bare_reference_is_reported() -> None:
    assert _check("export PATH=$GOPAHT/bin") == [
        "README.md:1: $GOPAHT could be a misspelling of GOPATH"
    ]


def test_braced_reference_is_reported() -> None:
    assert _check("java -cp ${CLASPATH} Main") == [
        "README.md:1: ${CLASPATH} could be a misspelling of CLASSPATH"
    ]


def test_multiple_lines_and_matches() -> None:
    contents = "\n".join(
        [
            "cd $HOEM",
            "ok $PATH $HOME",
            "$JAAV_HOME/bin:$JAVE_HOME and ${JAVA_HOEM}",
        ]
    )
    assert _check(contents, "TODO.md") == [
        "TODO.md:1: $HOEM could be a misspelling of HOME",
        "TODO.md:3: $JAAV_HOME could be a misspelling of JAVA_HOME",
        "TODO.md:3: $JAVE_HOME could be a misspelling of JAVA_HOME",
        "TODO.md:3: ${JAVA_HOEM} could be a misspelling of JAVA_HOME",
    ]


def test_trailing_word_boundary_is_required() -> None:
    assert _check("$PAHTS and $PAHT_X") == []


def test_typos_are_case_sensitive() -> None:
    assert _check("$paht ${Hoem}") == []


def test_typo_checker_requires_contents_of_documentation() -> None:
    checker = VarTypoChecker()
    doc = make_file("README")
    script = make_file("install.sh", "$PAHT")
    checker.push_file(doc)
    checker.push_file(script)

    assert checker.files == [doc]
    assert doc.require.contents is True
    assert script.require.contents is False


def test_word_boundary_follows_ascii_rules() -> None:
    assert _check("echo $PAHTé") == ["README.md:1: $PAHT could be a misspelling of PATH"]
