"""Tests for helpers: fail, default_to, when."""

from __future__ import annotations

import pytest
from hypothesis import given

from klaw_guard import UNSET, GuardError, default_to, fail, when
from tests.strategies import defined_values, exceptions, messages


def sample_function() -> None:
    pass


class TestFail:
    """Tests for fail."""

    def test_raises_guard_error_for_message(self) -> None:
        with pytest.raises(GuardError, match='^error message$'):
            fail(error_or_message='error message')

    def test_raises_given_exception(self) -> None:
        error = KeyError('missing')
        with pytest.raises(KeyError) as exc_info:
            fail(error_or_message=error)
        assert exc_info.value is error

    def test_rejects_other_values(self) -> None:
        with pytest.raises(TypeError, match='got int'):
            fail(error_or_message=42)  # type: ignore[arg-type]

    def test_is_keyword_only(self) -> None:
        with pytest.raises(TypeError):
            fail('message')  # type: ignore[misc]

    @given(messages)
    def test_message_round_trip(self, message: str) -> None:
        with pytest.raises(GuardError) as exc_info:
            fail(error_or_message=message)
        assert exc_info.value.message == message

    @given(exceptions)
    def test_identity_preserved(self, error: Exception) -> None:
        with pytest.raises(type(error)) as exc_info:
            fail(error_or_message=error)
        assert exc_info.value is error


class TestDefaultTo:
    """Tests for default_to."""

    @pytest.mark.parametrize('val', [sample_function, {}, 0, '', 1, False, []])
    def test_keeps_defined_values(self, val: object) -> None:
        assert default_to(val, 'default') is val

    @pytest.mark.parametrize('val', [None, UNSET])
    def test_replaces_null_and_undefined(self, val: object) -> None:
        assert default_to(val, 'default') == 'default'

    @given(defined_values)
    def test_defined_values_pass_through(self, val: object) -> None:
        assert default_to(val, object()) is val


class TestWhen:
    """Tests for when."""

    def test_runs_then_on_truthy(self) -> None:
        assert when(True, lambda: 'then', lambda: 'otherwise') == 'then'
        assert when([1], lambda: 'then') == 'then'

    def test_runs_otherwise_on_falsy(self) -> None:
        assert when(False, lambda: 'then', lambda: 'otherwise') == 'otherwise'
        assert when(0, lambda: 'then', lambda: 'otherwise') == 'otherwise'

    def test_returns_none_without_otherwise(self) -> None:
        assert when(False, lambda: 'then') is None

    def test_ignores_non_callable_otherwise(self) -> None:
        assert when(False, lambda: 'then', 'not callable') is None  # type: ignore[arg-type]

    def test_only_one_branch_runs(self) -> None:
        calls: list[str] = []
        when(True, lambda: calls.append('then'), lambda: calls.append('otherwise'))
        assert calls == ['then']

    def test_errors_propagate(self) -> None:
        def boom() -> None:
            raise RuntimeError('boom')

        with pytest.raises(RuntimeError, match='boom'):
            when(True, boom)
