import pytest

from algonotes.brackets import is_balanced


@pytest.mark.parametrize(
    "text, expected",
    [
        ("[{()}]", True),
        ("[{()}", False),
        ("[}()]{", False),
        ("", True),
        ("(", False),
        ("([)]", False),
        ("a(b)c", True),
    ],
)
def test_examples(text, expected):
    assert is_balanced(text) is expected


def test_unmatched_closer_on_empty_stack_is_ignored():
    assert is_balanced(")") is True
    assert is_balanced("())") is True


def test_nested_repetition():
    assert is_balanced("({[" * 50 + "]})" * 50) is True
    assert is_balanced("({[" * 50 + "]})" * 49) is False