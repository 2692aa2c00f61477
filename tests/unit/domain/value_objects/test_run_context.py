"""Unit tests for RunContext capture."""

import pytest

from dirpasswd.domain.value_objects.run_context import RunContext


def test_capture_root():
    context = RunContext.capture("dirpasswd", uid=0)

    assert context.is_privileged
    assert context.prog_name == "dirpasswd"
    assert context.correlation_id


def test_capture_regular_user(mocker):
    mocker.patch("dirpasswd.domain.value_objects.run_context.os.getuid", return_value=501)

    context = RunContext.capture("dirpasswd")

    assert not context.is_privileged


def test_context_is_immutable():
    context = RunContext(prog_name="dirpasswd")

    with pytest.raises(AttributeError):
        context.is_privileged = True  # type: ignore
