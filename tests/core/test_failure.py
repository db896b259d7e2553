"""Tests for outcomes.core.failure module."""

import asyncio

import pytest

from outcomes.core.failure import DEFAULT_MESSAGE, Failure, describe_error, error_message
from outcomes.core.failures import ApiFailure, EntityNotFound, IllegalArgument
from outcomes.core.kinds import FailureCategory, FailureKind


class TestEmptySentinel:
    """Test the process-wide empty Failure."""

    def test_empty_is_empty(self):
        assert Failure.empty().is_empty() is True
        assert Failure.empty().is_present() is False

    def test_empty_is_singleton(self):
        assert Failure.empty() is Failure.empty()

    def test_empty_equals_itself(self):
        assert Failure.empty() == Failure.empty()

    def test_same_message_is_not_empty(self):
        """Emptiness is identity, not content."""
        lookalike = Failure("no failure")
        assert lookalike.is_present()
        assert lookalike != Failure.empty()

    def test_present_not_equal_to_empty(self):
        assert Failure.of_message("x") != Failure.empty()
        assert Failure.empty() != Failure.of_message("x")

    def test_str(self):
        assert str(Failure.empty()) == "Failure.EMPTY"


class TestConstruction:
    """Test Failure factories."""

    def test_of_message(self):
        failure = Failure.of_message("boom")
        assert failure.message == "boom"
        assert failure.cause is None
        assert failure.is_present()

    def test_blank_message_falls_back(self):
        assert Failure.of_message("").message == DEFAULT_MESSAGE
        assert Failure.of_message("   ").message == DEFAULT_MESSAGE
        assert Failure(None).message == DEFAULT_MESSAGE

    def test_wrap_keeps_cause(self):
        cause = TypeError("Invalid type provided")
        failure = Failure.wrap("Specific issue", cause)
        assert failure.message == "Specific issue"
        assert failure.cause is cause
        assert failure.__cause__ is cause

    def test_wrap_non_exception_cause_not_chained(self):
        failure = Failure.wrap("outer", "plain text")
        assert failure.cause == "plain text"
        assert failure.__cause__ is None

    def test_from_cause_returns_present_failure_unchanged(self):
        inner = Failure.of_message("inner")
        assert Failure.from_cause(inner) is inner
        assert Failure.from_cause(inner, "ignored message") is inner

    def test_from_cause_uses_explicit_message(self):
        cause = ValueError("bad")
        failure = Failure.from_cause(cause, "explicit")
        assert failure.message == "explicit"
        assert failure.cause is cause

    def test_from_cause_uses_error_message(self):
        assert Failure.from_cause(ValueError("bad value")).message == "bad value"

    def test_from_cause_stringifies_non_errors(self):
        assert Failure.from_cause(404).message == "404"
        assert Failure.from_cause("text").message == "text"

    def test_from_cause_unknown(self):
        failure = Failure.from_cause(None)
        assert failure.message == "unknown cause"
        assert failure.is_present()

    def test_from_cause_wraps_empty_sentinel(self):
        """The empty sentinel is not flattened; it becomes the cause."""
        failure = Failure.from_cause(Failure.empty())
        assert failure.is_present()
        assert failure.cause is Failure.empty()

    def test_is_failure(self):
        assert Failure.is_failure(Failure.of_message("x"))
        assert Failure.is_failure(ApiFailure("x"))
        assert not Failure.is_failure(ValueError("x"))


class TestUnwrap:
    """Test one-level cause unwrapping."""

    def test_unwrap_failure_cause(self):
        inner = Failure.of_message("Inner error")
        outer = Failure.wrap("Outer error", inner)
        assert outer.unwrap() is inner

    def test_unwrap_is_one_level(self):
        innermost = Failure.of_message("innermost")
        middle = Failure.wrap("middle", innermost)
        outer = Failure.wrap("outer", middle)
        assert outer.unwrap() is middle
        assert outer.unwrap().unwrap() is innermost

    def test_unwrap_non_failure_cause_returns_self(self):
        failure = Failure.wrap("outer", ValueError("x"))
        assert failure.unwrap() is failure

    def test_unwrap_empty_cause_returns_self(self):
        failure = Failure.wrap("outer", Failure.empty())
        assert failure.unwrap() is failure


class TestConditionalActions:
    """Test if_*/inspect_* side effects."""

    def test_if_present_runs_for_present(self):
        seen = []
        failure = Failure.of_message("x")
        failure.if_present(seen.append)
        assert seen == [failure]

    def test_if_present_skips_empty(self):
        seen = []
        Failure.empty().if_present(seen.append)
        assert seen == []

    def test_if_empty(self):
        seen = []
        Failure.empty().if_empty(lambda: seen.append("empty"))
        Failure.of_message("x").if_empty(lambda: seen.append("present"))
        assert seen == ["empty"]

    def test_inspect_returns_self(self):
        seen = []
        failure = Failure.of_message("x")
        assert failure.inspect_present(seen.append).inspect_empty(lambda: seen.append("no")) is failure
        assert seen == [failure]

        empty = Failure.empty()
        assert empty.inspect_empty(lambda: seen.append("empty")) is empty

    @pytest.mark.parametrize("method", ["if_present", "if_empty", "inspect_present", "inspect_empty"])
    def test_none_action_raises(self, method):
        with pytest.raises(IllegalArgument):
            getattr(Failure.of_message("x"), method)(None)


class TestOrRaise:
    """Test or_raise."""

    def test_raises_present(self):
        failure = Failure.of_message("boom")
        with pytest.raises(Failure) as excinfo:
            failure.or_raise()
        assert excinfo.value is failure

    def test_empty_is_noop(self):
        assert Failure.empty().or_raise() is None


class TestIsA:
    """Test kind matching."""

    def test_member_is_a_itself_and_base(self):
        failure = EntityNotFound("user 1")
        assert failure.is_a(FailureKind.ENTITY_NOT_FOUND)
        assert failure.is_a(FailureKind.FAILURE)
        assert not failure.is_a(FailureKind.API_FAILURE)

    def test_accepts_failure_classes(self):
        failure = ApiFailure("down")
        assert failure.is_a(ApiFailure)
        assert failure.is_a(Failure)
        assert not failure.is_a(EntityNotFound)

    def test_base_failure_is_not_a_member(self):
        assert not Failure.of_message("x").is_a(ApiFailure)

    def test_empty_is_never_a_kind(self):
        assert not Failure.empty().is_a(FailureKind.FAILURE)

    def test_accepts_kind_names(self):
        failure = ApiFailure("x")
        assert failure.is_a("ApiFailure")
        assert failure.is_a("Failure")
        assert not failure.is_a("EntityNotFound")
        assert not failure.is_a("NoSuchKind")

    def test_none_kind_raises(self):
        with pytest.raises(IllegalArgument):
            Failure.of_message("x").is_a(None)

    def test_category(self):
        assert ApiFailure("x").category is FailureCategory.INFRASTRUCTURE
        assert Failure.of_message("x").category is FailureCategory.UNCATEGORIZED


class TestEquality:
    """Test equality and hashing."""

    def test_same_message_no_cause(self):
        assert Failure.of_message("x") == Failure.of_message("x")
        assert hash(Failure.of_message("x")) == hash(Failure.of_message("x"))

    def test_different_message(self):
        assert Failure.of_message("x") != Failure.of_message("y")

    def test_same_cause_reference(self):
        cause = ValueError("c")
        assert Failure.wrap("x", cause) == Failure.wrap("x", cause)

    def test_distinct_exception_causes_differ(self):
        """Exception causes compare by reference."""
        assert Failure.wrap("x", ValueError("c")) != Failure.wrap("x", ValueError("c"))

    def test_value_causes_compare_by_value(self):
        assert Failure.wrap("x", "c") == Failure.wrap("x", "c")
        assert Failure.wrap("x", 1) != Failure.wrap("x", 2)

    def test_container_causes_compare_by_reference(self):
        assert Failure.wrap("x", {"a": 1}) != Failure.wrap("x", {"a": 1})
        assert Failure.wrap("x", [1]) != Failure.wrap("x", [1])
        shared = {"a": 1}
        assert Failure.wrap("x", shared) == Failure.wrap("x", shared)

    def test_failure_causes_compare_as_failures(self):
        assert Failure.wrap("x", Failure.of_message("c")) == Failure.wrap("x", Failure.of_message("c"))

    def test_kind_does_not_affect_equality(self):
        assert ApiFailure("x") == Failure.of_message("x")

    def test_not_equal_to_other_types(self):
        assert Failure.of_message("x") != "x"
        assert Failure.of_message("x") != ValueError("x")

    def test_usable_in_sets(self):
        assert len({Failure.of_message("x"), Failure.of_message("x"), Failure.empty()}) == 2


class TestRendering:
    """Test __str__ and to_dict."""

    def test_message_only(self):
        assert str(Failure.of_message("boom")) == "Failure{message='boom'}"

    def test_error_cause(self):
        failure = Failure.wrap("Specific issue", TypeError("Invalid type provided"))
        assert str(failure) == "Failure{message='Specific issue', cause=TypeError('Invalid type provided')}"

    def test_failure_cause_uses_kind(self):
        failure = Failure.wrap("outer", EntityNotFound("user 1"))
        assert str(failure) == "Failure{message='outer', cause=EntityNotFound('user 1')}"

    def test_value_cause(self):
        assert str(Failure.wrap("outer", 42)) == "Failure{message='outer', cause='42'}"

    def test_subclass_uses_kind_name(self):
        assert str(ApiFailure("down")) == "ApiFailure{message='down'}"

    def test_repr_matches_str(self):
        failure = Failure.of_message("boom")
        assert repr(failure) == str(failure)

    def test_to_dict(self):
        d = Failure.wrap("outer", ValueError("inner")).to_dict()
        assert d == {
            "kind": "Failure",
            "category": "UNCATEGORIZED",
            "message": "outer",
            "cause": "ValueError('inner')",
        }

    def test_to_dict_empty(self):
        assert Failure.empty().to_dict() == {"kind": None, "message": None}


class TestMessageDerivation:
    """Test describe_error / error_message."""

    def test_error_message(self):
        assert error_message(ValueError("bad")) == "bad"
        assert error_message(Failure.of_message("f")) == "f"
        assert error_message("text") is None
        assert error_message(None) is None

    def test_describe_error_order(self):
        assert describe_error(ValueError("bad"), "fallback") == "bad"
        assert describe_error(ValueError(""), "fallback") == "fallback"
        assert describe_error("  text  ", "fallback") == "  text  "
        assert describe_error("   ", "fallback") == "fallback"
        assert describe_error(42, "fallback") == "fallback"


class TestFailureOf:
    """Test async capture with Failure.of."""

    @pytest.mark.asyncio
    async def test_sync_success_returns_empty(self):
        calls = []
        failure = await Failure.of(lambda: calls.append("ran"))
        assert failure is Failure.empty()
        assert calls == ["ran"]

    @pytest.mark.asyncio
    async def test_async_success_returns_empty(self):
        async def work():
            await asyncio.sleep(0)

        assert (await Failure.of(work)).is_empty()

    @pytest.mark.asyncio
    async def test_sync_raise_is_captured(self):
        error = RuntimeError("Something went wrong!")

        def work():
            raise error

        failure = await Failure.of(work)
        assert failure.is_present()
        assert failure.message == "Something went wrong!"
        assert failure.cause is error

    @pytest.mark.asyncio
    async def test_async_raise_is_captured(self):
        async def work():
            await asyncio.sleep(0)
            raise ValueError("late")

        failure = await Failure.of(work)
        assert failure.message == "late"
        assert isinstance(failure.cause, ValueError)

    @pytest.mark.asyncio
    async def test_blank_error_message_uses_fallback(self):
        def work():
            raise RuntimeError()

        failure = await Failure.of(work)
        assert failure.message == "An unexpected error occurred during runnable execution."

    @pytest.mark.asyncio
    async def test_none_thunk_raises(self):
        with pytest.raises(IllegalArgument):
            await Failure.of(None)

    @pytest.mark.asyncio
    async def test_base_exceptions_propagate(self):
        class Abort(BaseException):
            pass

        def work():
            raise Abort

        with pytest.raises(Abort):
            await Failure.of(work)


class TestImmutability:
    """Test that Failure state cannot be rewritten."""

    def test_private_fields_are_read_only(self):
        failure = Failure.of_message("x")
        with pytest.raises(AttributeError):
            failure._message = "y"
        with pytest.raises(AttributeError):
            failure._cause = ValueError("late")
        assert failure.message == "x"
        assert failure.cause is None

    def test_new_attributes_rejected(self):
        with pytest.raises(AttributeError):
            EntityNotFound("user 1").extra = 1

    def test_empty_sentinel_is_read_only(self):
        with pytest.raises(AttributeError):
            Failure.empty()._message = "something"
        assert Failure.empty().is_empty()

    def test_raise_from_still_chains(self):
        cause = ValueError("root")
        with pytest.raises(Failure) as excinfo:
            raise Failure.of_message("outer") from cause
        assert excinfo.value.__cause__ is cause
        assert excinfo.value.__traceback__ is not None
