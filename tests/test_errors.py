import pytest

from zsw.errors import MissingTag, ParseError, StepError, context, error_chain, format_chain, root_cause


def failing():
    with context("applying multiplier"):
        with context("parsing APBeschl"):
            try:
                float("x")
            except ValueError as exc:
                raise ParseError("invalid number 'x'") from exc


def test_chain_is_root_cause_first():
    with pytest.raises(StepError) as exc_info:
        failing()
    chain = error_chain(exc_info.value)
    assert [op for op, _ in chain] == [None, None, "parsing APBeschl", "applying multiplier"]
    assert isinstance(chain[0][1], ValueError)
    assert isinstance(chain[1][1], ParseError)
    assert isinstance(root_cause(exc_info.value), ValueError)


def test_format_chain():
    with pytest.raises(StepError) as exc_info:
        failing()
    text = format_chain(exc_info.value)
    assert text.endswith("ParseError: invalid number 'x' <- parsing APBeschl <- applying multiplier")


def test_context_only_wraps_own_errors():
    with pytest.raises(KeyError):
        with context("looking up"):
            raise KeyError("x")


def test_single_error_chain():
    err = MissingTag("Zug")
    assert error_chain(err) == [(None, err)]
    assert format_chain(err) == "MissingTag: no tag 'Zug'"
