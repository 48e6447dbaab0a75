"""Tests for the missing terminator heuristics."""

import pytest

from codechat.code_review.analysis.terminators import (
    check_terminators,
    is_skippable,
    needs_terminator,
    opens_block,
    triggers_terminator,
)


def test_assignment_without_terminator_is_flagged():
    issues = check_terminators("Java", "x = 5")
    assert len(issues) == 1
    assert issues[0].line == 1
    assert issues[0].as_text() == "Line 1: Possible missing ';' at end of statement."


def test_terminated_statement_is_not_flagged():
    assert check_terminators("C++", "int x = 5;") == []


def test_line_numbers_are_one_based():
    code = "int f(int x) {\n    int y = x * 2;\n    return y\n}"
    assert [i.line for i in check_terminators("C++", code)] == [3]


@pytest.mark.parametrize(
    "line",
    [
        "if (x == 5) {",
        "for (int i = 0; i < n; i++)",
        "while (x = next())",
        "} else {",
        "// x = 5",
        "# define X = 1",
        "case 1:",
        "public class Foo",
        "",
        "   ",
    ],
)
def test_skipped_lines(line):
    assert not needs_terminator(line)


def test_print_and_log_calls_trigger():
    assert needs_terminator("console.log('hi')")
    assert needs_terminator('System.out.println("hi")')
    assert needs_terminator("cout << x")


def test_plain_call_without_trigger_is_left_alone():
    assert not triggers_terminator("foo()")
    assert check_terminators("JavaScript", "foo()") == []


def test_languages_without_terminators_produce_nothing():
    assert check_terminators("Python", "x = 5") == []
    assert check_terminators("Go", "x := 5") == []
    assert check_terminators("Rust", "let x = 5") == []


def test_language_aliases_are_normalized():
    assert len(check_terminators("cpp", "x = 5")) == 1
    assert len(check_terminators("typescript", "const x = 5")) == 1


def test_predicates():
    assert is_skippable("")
    assert is_skippable("/* block */")
    assert is_skippable("label:")
    assert not is_skippable("x = 1")
    assert opens_block("export default class Widget")
    assert opens_block("else x = 1")
    assert not opens_block("format = 3")
    assert not opens_block("double d = 2.0")
