import pytest

from remotecache.annotate import annotate


def test_prefix_only_when_context_is_alive():
    err = ValueError("boom")
    result = annotate("read blob", err)
    assert str(result) == "read blob: boom"
    assert result.__cause__ is err


def test_context_error_is_appended():
    err = OSError("disk failure")
    ctx = TimeoutError("deadline exceeded")
    result = annotate("write blob", err, ctx)
    assert str(result) == "write blob: disk failure (deadline exceeded)"
    assert result.context_error is ctx
    assert result.error is err


def test_result_can_be_raised_and_caught():
    err = KeyError("missing")
    with pytest.raises(Exception) as info:
        raise annotate("lookup", err)
    assert info.value.__cause__ is err
    assert str(info.value).startswith("lookup: ")