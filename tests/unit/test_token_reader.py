import io

import pytest

from adapters.token_reader import InsufficientInputError, iter_tokens, read_tokens


def test_tokens_split_on_any_whitespace():
    stream = io.StringIO("10.0.0.1\t300.1.1.1\n\n   8.8.8.8\n")
    assert list(iter_tokens(stream)) == ["10.0.0.1", "300.1.1.1", "8.8.8.8"]


def test_read_tokens_ignores_extra_input():
    stream = io.StringIO("a b c d e")
    assert read_tokens(stream, 3) == ["a", "b", "c"]


def test_insufficient_input_fails_fast():
    with pytest.raises(InsufficientInputError) as excinfo:
        read_tokens(io.StringIO("1.2.3.4 5.6.7.8\n"), 3)
    assert excinfo.value.expected == 3
    assert excinfo.value.received == 2
    assert "end of input" in str(excinfo.value)


def test_empty_input():
    with pytest.raises(InsufficientInputError):
        read_tokens(io.StringIO(""), 3)
