import logging
import random

import pytest
from strutil import (
    CHARS_DIGITS,
    CHARS_LOWER,
    CHARS_SYMBOLS,
    CHARS_UPPER,
    CharsetRule,
    PasswordGenerator,
    PasswordGeneratorBuilder,
    PasswordPolicy,
)
from strutil.exc import (
    ApplicationError,
    PasswordValidationError,
    TooFewCharsError,
    TooManyCharsError,
)


def count_in(password: str, charset: str) -> int:
    return sum(1 for c in password if c in charset)


def test_default_rule_spans_all_charsets():
    generator = PasswordGenerator()

    assert len(generator.rules) == 1
    assert generator.rules[0].charset == (
        CHARS_LOWER + CHARS_UPPER + CHARS_DIGITS + CHARS_SYMBOLS
    )
    assert generator.rules[0].min_count == 0
    assert generator.rules[0].max_count == 0


def test_default_generates_exact_length():
    generator = PasswordGenerator(rng=random.Random(7))
    allowed = CHARS_LOWER + CHARS_UPPER + CHARS_DIGITS + CHARS_SYMBOLS

    for length in (0, 1, 8, 64):
        password = generator.generate(length)
        assert len(password) == length
        assert all(c in allowed for c in password)


def test_default_never_rejects():
    generator = PasswordGenerator()

    for password in ("", "a", "ééé", " " * 100, "Zz9!"):
        generator.validate(password)
        assert generator.is_valid(password)


@pytest.mark.parametrize("seed", range(50))
def test_minimums_and_maximums_are_honoured(seed):
    generator = (
        PasswordGeneratorBuilder()
        .charset(2, 0, CHARS_DIGITS)
        .charset(1, 3, CHARS_SYMBOLS)
        .charset(0, 0, CHARS_LOWER)
        .build(rng=random.Random(seed))
    )

    password = generator.generate(16)

    assert len(password) == 16
    assert count_in(password, CHARS_DIGITS) >= 2
    assert 1 <= count_in(password, CHARS_SYMBOLS) <= 3
    generator.validate(password)


def test_length_is_capped_by_combined_maximums(caplog):
    generator = (
        PasswordGeneratorBuilder()
        .charset(1, 3, "ab")
        .charset(0, 2, "01")
        .build(rng=random.Random(1))
    )

    with caplog.at_level(logging.WARNING, logger="strutil.generator"):
        password = generator.generate(10)

    assert len(password) == 5
    assert count_in(password, "ab") == 3
    assert count_in(password, "01") == 2
    assert "allow only 5 of 10" in caplog.text


def test_length_below_combined_maximums():
    generator = (
        PasswordGeneratorBuilder()
        .charset(1, 3, "ab")
        .charset(0, 2, "01")
        .build(rng=random.Random(1))
    )

    assert len(generator.generate(4)) == 4


def test_minimums_exceed_required_length():
    generator = (
        PasswordGeneratorBuilder()
        .charset(3, 0, CHARS_UPPER)
        .charset(2, 0, CHARS_DIGITS)
        .build(rng=random.Random(3))
    )

    password = generator.generate(2)

    assert len(password) == 5
    generator.validate(password)


def test_rule_with_equal_bounds_is_not_used_for_filling():
    generator = (
        PasswordGeneratorBuilder()
        .charset(2, 2, CHARS_SYMBOLS)
        .charset(0, 0, CHARS_LOWER)
        .build(rng=random.Random(5))
    )

    password = generator.generate(12)

    assert len(password) == 12
    assert count_in(password, CHARS_SYMBOLS) == 2


def test_same_seed_yields_same_password():
    policy = PasswordPolicy(
        rules=(
            CharsetRule(charset=CHARS_UPPER, min_count=1),
            CharsetRule(charset=CHARS_LOWER, min_count=1),
        )
    )

    first = PasswordGenerator.from_policy(policy, rng=random.Random(42))
    second = PasswordGenerator.from_policy(policy, rng=random.Random(42))

    assert first.generate(20) == second.generate(20)


def test_negative_length_is_rejected():
    with pytest.raises(ValueError, match="non-negative"):
        PasswordGenerator().generate(-1)


def test_validate_too_few():
    generator = PasswordGeneratorBuilder().charset(2, 0, CHARS_DIGITS).build()

    with pytest.raises(TooFewCharsError) as exc_info:
        generator.validate("a1")

    assert exc_info.value.ctx == {"charset": CHARS_DIGITS, "expected": 2, "actual": 1}
    assert str(exc_info.value) == "too few of 0123456789 (min 2, you have 1)"
    assert not generator.is_valid("a1")


def test_validate_too_many():
    generator = PasswordGeneratorBuilder().charset(0, 1, "xyz").build()

    with pytest.raises(TooManyCharsError) as exc_info:
        generator.validate("xyzw")

    assert exc_info.value.ctx == {"charset": "xyz", "expected": 1, "actual": 3}
    assert str(exc_info.value) == "too many of xyz (max 1, you have 3)"


def test_validation_errors_share_a_base():
    assert issubclass(TooFewCharsError, PasswordValidationError)
    assert issubclass(TooManyCharsError, PasswordValidationError)
    assert issubclass(PasswordValidationError, ApplicationError)


def test_overlapping_charsets_count_for_every_rule():
    generator = (
        PasswordGeneratorBuilder()
        .charset(0, 2, "abc")
        .charset(0, 2, "a1")
        .build()
    )

    generator.validate("ab1")
    with pytest.raises(TooManyCharsError) as exc_info:
        generator.validate("aa1")

    assert exc_info.value.ctx["charset"] == "a1"
    assert exc_info.value.ctx["actual"] == 3


def test_first_failing_rule_is_reported():
    generator = (
        PasswordGeneratorBuilder()
        .charset(1, 0, CHARS_UPPER)
        .charset(0, 1, CHARS_DIGITS)
        .build()
    )

    with pytest.raises(TooFewCharsError):
        generator.validate("a12")


@pytest.mark.parametrize("length", [4, 10, 32])
def test_generated_passwords_validate(length):
    generator = (
        PasswordGeneratorBuilder()
        .charset(1, 2, CHARS_UPPER)
        .charset(1, 0, CHARS_LOWER)
        .charset(1, 1, CHARS_DIGITS)
        .charset(1, 2, CHARS_SYMBOLS)
        .build(rng=random.Random(length))
    )

    generator.validate(generator.generate(length))


def test_builder_keeps_rule_order():
    builder = PasswordGeneratorBuilder().charset(0, 0, "ab").charset(1, 2, "cd")

    assert [rule.charset for rule in builder.build().rules] == ["ab", "cd"]


def test_builder_without_rules_uses_default():
    generator = PasswordGeneratorBuilder().build()

    assert generator.rules == PasswordGenerator().rules


def test_minimum_is_checked_before_maximum():
    # bypasses the min <= max validator to reach both branches for one rule
    rule = CharsetRule.model_construct(charset="ab", min_count=3, max_count=1)
    generator = PasswordGenerator(rules=[rule])

    with pytest.raises(TooFewCharsError) as exc_info:
        generator.validate("ab")

    assert exc_info.value.ctx == {"charset": "ab", "expected": 3, "actual": 2}
