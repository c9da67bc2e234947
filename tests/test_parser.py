import pytest

from idtemplate import Parser, TemplateSyntaxError
from idtemplate.elements import (
    FixedElement,
    RandomElement,
    SliceMode,
    SubstringElement,
)


def test_parse_mixed_template():
    elements = Parser.get_elements("=x-=:1f:l:N+")

    assert [type(e) for e in elements] == [
        FixedElement,
        SubstringElement,
        SubstringElement,
        RandomElement,
    ]
    assert [e.element for e in elements] == ["=x-=", "1f", "l", "N+"]
    assert [e.key for e in elements] == [None, "f", "l", "N"]


def test_fixed_string_may_contain_delimiters():
    elements = Parser.get_elements("=myPrefix:123+=:1a3:")

    assert len(elements) == 2
    assert elements[0].text == "myPrefix:123+"
    assert elements[1].mode == SliceMode.RANGE
    assert (elements[1].start, elements[1].end) == (1, 3)


def test_empty_tokens_are_ignored():
    elements = Parser.get_elements("::f::l:")

    assert [e.key for e in elements] == ["f", "l"]


def test_empty_template_has_no_elements():
    assert Parser.get_elements("") == []


@pytest.mark.parametrize(
    "token, mode, count, start, end",
    [
        ("name", SliceMode.FULL, 0, 0, 0),
        ("3n", SliceMode.LEADING, 3, 0, 0),
        ("n12", SliceMode.TRAILING, 12, 0, 0),
        ("2n5", SliceMode.RANGE, 0, 2, 5),
        ("n2,5", SliceMode.RANGE, 0, 2, 5),
        ("n4,4", SliceMode.RANGE, 0, 4, 4),
    ],
)
def test_substring_tokens(token, mode, count, start, end):
    element = Parser.parse_token(token)

    assert isinstance(element, SubstringElement)
    assert element.mode == mode
    assert element.count == count
    assert (element.start, element.end) == (start, end)


def test_random_token():
    element = Parser.parse_token("C+")

    assert isinstance(element, RandomElement)
    assert element.key == "C"
    assert element.is_resolver


def test_each_parse_returns_fresh_elements():
    first = Parser.get_elements("f:V+")
    second = Parser.get_elements("f:V+")

    assert all(a is not b for a, b in zip(first, second))


@pytest.mark.parametrize(
    "template",
    [
        "=abc",
        "=a=b",
        "f-",
        "2f+",
        "f3+",
        "f+2",
        "0f",
        "f0",
        "f3,2",
        "0f2",
        "1f2,3",
        "f,2",
        "12",
        "f:?",
    ],
)
def test_invalid_templates(template):
    with pytest.raises(TemplateSyntaxError):
        Parser.get_elements(template)


def test_syntax_error_carries_token_and_position():
    with pytest.raises(TemplateSyntaxError) as excinfo:
        Parser.get_elements("f:l:x?y")

    assert excinfo.value.token == "x?y"
    assert excinfo.value.position == 4
    assert isinstance(excinfo.value, ValueError)
