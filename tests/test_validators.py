"""Tests for built-in validators and validator composition."""

import pytest

from formact.core.errors import FormDefinitionError, UnknownValidatorError
from formact.validation import (
    DEFAULT_REQUIRED_MESSAGE,
    REQUIRED,
    compose_message,
    create_registry,
    email,
    is_empty,
    make_required,
    max_length,
    max_value,
    min_length,
    min_value,
    normalize_validation,
    numeric,
    one_of,
    pattern,
)


def always(message: str):
    def validator(value, field_name):
        return message

    return validator


def never(value, field_name):
    return ""


class TestIsEmpty:
    """Tests for the emptiness rule."""

    @pytest.mark.parametrize("value", [None, "", "   ", [], {}, ()])
    def test_empty_values(self, value) -> None:
        assert is_empty(value) is True

    @pytest.mark.parametrize("value", ["a", 0, 5, False, True, 0.0, [0], {"a": 1}])
    def test_non_empty_values(self, value) -> None:
        assert is_empty(value) is False


class TestRequired:
    """Tests for the REQUIRED check."""

    def test_required_message_on_empty(self) -> None:
        assert REQUIRED("", "email") == DEFAULT_REQUIRED_MESSAGE
        assert DEFAULT_REQUIRED_MESSAGE == "Field is required"

    def test_required_passes_on_value(self) -> None:
        assert not REQUIRED("x", "email")

    def test_custom_required_message(self) -> None:
        check = make_required("Please fill in")
        assert check(None, "email") == "Please fill in"


class TestBuiltinValidators:
    """Tests for the validator factories."""

    def test_min_length(self) -> None:
        check = min_length(3)
        assert check("ab", "nick") == "Must be at least 3 characters"
        assert not check("abc", "nick")
        assert not check("", "nick")

    def test_max_length(self) -> None:
        check = max_length(2)
        assert check("abc", "code") == "Must be at most 2 characters"
        assert not check("ab", "code")

    def test_pattern(self) -> None:
        check = pattern(r"\d{4}", message="Four digits")
        assert check("12a4", "pin") == "Four digits"
        assert not check("1234", "pin")
        assert not check("", "pin")

    def test_email(self) -> None:
        check = email()
        assert not check("a@b.com", "email")
        assert check("not-an-email", "email") == "Invalid email address"
        assert not check("", "email")

    def test_numeric(self) -> None:
        check = numeric()
        assert not check("42", "age")
        assert not check(4.5, "age")
        assert check("forty", "age") == "Must be a number"
        assert check(True, "age") == "Must be a number"

    def test_min_and_max_value(self) -> None:
        assert min_value(18)("17", "age") == "Must be at least 18"
        assert not min_value(18)(18, "age")
        assert max_value(10)(11, "age") == "Must be at most 10"
        assert not max_value(10)("not a number", "age")

    def test_one_of(self) -> None:
        check = one_of(["red", "green"])
        assert not check("red", "colour")
        assert check("blue", "colour") == "Must be one of: red, green"


class TestNormalizeValidation:
    """Tests for normalizing the validation prop."""

    def test_none_gives_empty_list(self) -> None:
        assert normalize_validation(None) == []

    def test_empty_list_gives_empty_list(self) -> None:
        assert normalize_validation([]) == []

    def test_single_callable_gives_singleton(self) -> None:
        assert normalize_validation(never) == [never]

    def test_list_is_kept_in_order(self) -> None:
        first, second = always("a"), always("b")
        assert normalize_validation([first, second]) == [first, second]


class TestComposeMessage:
    """Tests for composing validator messages."""

    def test_no_validators_is_valid(self) -> None:
        assert compose_message("x", "f") == ""

    def test_required_message_comes_first(self) -> None:
        message = compose_message(
            "",
            "f",
            validation=[always("first"), always("second")],
            required=True,
        )
        assert message == f"{DEFAULT_REQUIRED_MESSAGE} first second"

    def test_empty_messages_are_skipped(self) -> None:
        message = compose_message("x", "f", validation=[never, always("bad"), never])
        assert message == "bad"

    def test_validators_receive_value_and_name(self) -> None:
        calls = []

        def spy(value, field_name):
            calls.append((value, field_name))
            return None

        compose_message(7, "age", validation=spy)
        assert calls == [(7, "age")]

    def test_order_only_affects_text(self) -> None:
        forward = compose_message("", "f", validation=[always("a"), always("b")])
        backward = compose_message("", "f", validation=[always("b"), always("a")])
        assert forward == "a b"
        assert backward == "b a"
        assert bool(forward) == bool(backward)

    def test_non_callable_entries_are_skipped(self) -> None:
        message = compose_message("x", "f", validation=[None, "oops", always("bad")])
        assert message == "bad"

    def test_non_string_messages_are_coerced(self) -> None:
        message = compose_message("x", "f", validation=[always(42), always("bad")])
        assert message == "42 bad"


class TestValidatorRegistry:
    """Tests for name-based validator lookup."""

    def test_builtins_registered(self) -> None:
        registry = create_registry()
        for name in ["required", "email", "min_length", "max_length", "pattern", "numeric"]:
            assert registry.has(name)

    def test_get_with_params(self) -> None:
        registry = create_registry()
        check = registry.get("min_length", length=2)
        assert check("a", "f") == "Must be at least 2 characters"

    def test_unknown_validator_raises(self) -> None:
        registry = create_registry()
        with pytest.raises(UnknownValidatorError, match="nope"):
            registry.get("nope")

    def test_register_custom(self) -> None:
        registry = create_registry()
        registry.register("always_bad", lambda: always("bad"))
        assert registry.get("always_bad")("x", "f") == "bad"
        assert "always_bad" in registry.names

    def test_required_message_override(self) -> None:
        registry = create_registry(required_message="Needed")
        assert registry.get("required")("", "f") == "Needed"

    def test_bad_params_raise_definition_error(self) -> None:
        registry = create_registry()
        with pytest.raises(FormDefinitionError, match="min_length"):
            registry.get("min_length", len=3)

    def test_bad_regex_raises_definition_error(self) -> None:
        registry = create_registry()
        with pytest.raises(FormDefinitionError, match="pattern"):
            registry.get("pattern", regex="(")
