"""Unit tests for the validation helpers."""

import datetime as dt
import re

import pytest

from deepvalid.errors import MissingRuleError
from deepvalid.helpers import (
    all_of,
    any_of,
    boolean,
    date,
    datetime,
    float_,
    instance_of,
    integer,
    json_text,
    mapping,
    sequence,
    string,
    structure_ref,
    time,
    token,
)
from deepvalid.ranges import Between
from deepvalid.registry import Registry
from deepvalid.rules import Predicate, Validation


class TestToken:
    """Test token helper."""

    def test_without_size(self):
        assert token().valid("abc_123")
        assert token().valid("")
        assert not token().valid("abc-123")
        assert not token().valid("abc 123")
        assert not token().valid(123)

    def test_rejects_trailing_newline(self):
        assert not token().valid("abc\n")

    def test_exact_size(self):
        assert token(32).valid("x" * 32)
        assert not token(32).valid("x" * 31)

    def test_range_size(self):
        assert token(Between(1, 23)).valid("abc")
        assert not token(Between(1, 23)).valid("")
        assert not token(range(1, 24)).valid("x" * 24)


class TestString:
    """Test string helper."""

    def test_without_size(self):
        assert string().valid("asdf")
        assert not string().valid(4)

    def test_exact_size(self):
        assert string(4).valid("asdf")
        assert not string(4).valid("a")

    def test_range_size(self):
        assert string(Between(1, 5)).valid("asdf")
        assert not string(Between(3, 5)).valid("a")

    def test_named_bounds(self):
        assert string({"min": 2, "max": 4}).valid("abc")
        assert not string({"min": 2, "max": 4}).valid("abcde")


class TestNumbers:
    """Test integer and float helpers."""

    def test_integer_without_limit(self):
        assert integer().valid(123)
        assert not integer().valid(1.5)
        assert not integer().valid("123")

    def test_integer_rejects_booleans(self):
        assert not integer().valid(True)

    def test_integer_exact_limit(self):
        assert integer(4).valid(4)
        assert not integer(4).valid(5)

    def test_integer_range_limit(self):
        assert integer(Between(1, 5)).valid(3)
        assert not integer(Between(3, 5)).valid(20)
        assert integer(range(1, 101)).valid(100)

    def test_float(self):
        assert float_().valid(1.5)
        assert not float_().valid(1)
        assert float_({"greater_than": 0.0}).valid(0.1)
        assert not float_({"greater_than": 0.0}).valid(0.0)


class TestTemporal:
    """Test date, time and datetime helpers."""

    def test_date(self):
        assert date().valid(dt.date(2024, 1, 1))
        assert not date().valid(dt.datetime(2024, 1, 1, 12))
        assert not date().valid("2024-01-01")

    def test_date_limit(self):
        validation = date({"after": dt.date(2020, 1, 1), "before": dt.date(2030, 1, 1)})
        assert validation.valid(dt.date(2024, 6, 1))
        assert not validation.valid(dt.date(2019, 6, 1))

    def test_time(self):
        assert time().valid(dt.time(9, 30))
        assert time(Between(dt.time(9), dt.time(17))).valid(dt.time(12))
        assert not time(Between(dt.time(9), dt.time(17))).valid(dt.time(18))

    def test_datetime(self):
        moment = dt.datetime(2024, 1, 1, 12)
        assert datetime().valid(moment)
        assert not datetime().valid(moment.date())
        assert datetime({"min": moment}).valid(moment)

    def test_naive_and_aware_do_not_compare(self):
        aware = dt.datetime(2024, 1, 1, tzinfo=dt.UTC)
        assert not datetime({"min": dt.datetime(2020, 1, 1)}).valid(aware)


class TestInstanceOf:
    """Test instance_of helper."""

    def test_validates_by_class(self):
        assert instance_of(str).valid("asdf")
        assert instance_of(list).valid([1, 2, 3])

        assert not instance_of(str).valid([1, 2, 3])
        assert not instance_of(list).valid("asdf")

    def test_tuple_of_classes(self):
        assert instance_of((int, float)).valid(1.5)


class TestJsonText:
    """Test json_text helper."""

    def test_well_formed(self):
        assert json_text().valid('{"x": "y"}')
        assert json_text().valid('{"key": ["y", 1, 2, true, false]}')

    def test_malformed(self):
        assert not json_text().valid('{"x" "y"}')
        assert not json_text().valid('{"key": {"y", 1, 2, true, false]}')

    def test_non_text(self):
        assert not json_text().valid({"x": "y"})
        assert not json_text().valid(None)

    def test_size(self):
        assert json_text(Between(1, 10)).valid("[1, 2]")
        assert not json_text(Between(1, 3)).valid("[1, 2]")


class TestAnyOf:
    """Test any_of helper."""

    def test_literals(self):
        assert any_of("a", "b", "c").valid("c")
        assert any_of(1, 2, 3).valid(2)

        assert not any_of("a", "b", "c").valid("x")
        assert not any_of(1, 2, 3).valid(20)

    def test_nested_validations(self):
        assert any_of(Validation("a"), Validation("b")).valid("a")
        assert any_of(Validation(re.compile("[a-z]+")), Validation(re.compile("[0-9]+"))).valid("12")

        assert not any_of(Validation("a"), Validation("b")).valid("abc")
        assert not any_of(Validation(re.compile("^[a-z]+")), Validation(re.compile("^[0-9]+"))).valid("Z12")

    def test_mixed_options_are_literals(self):
        literal_validation = Validation("a")
        validation = any_of(literal_validation, "a")
        assert not validation.valid("a")
        assert validation.valid(literal_validation)

    def test_boolean(self):
        assert boolean().valid(True)
        assert boolean().valid(False)
        assert not boolean().valid(1)
        assert not boolean().valid(None)


class TestAllOf:
    """Test all_of helper."""

    def test_conjunction(self):
        lower, digit = Validation(re.compile("[a-z]+")), Validation(re.compile("[0-9]+"))
        assert all_of(lower, digit).valid("ab12")

        anchored_lower, anchored_digit = Validation(re.compile("^[a-z]+")), Validation(re.compile("^[0-9]+"))
        assert not all_of(anchored_lower, anchored_digit).valid("ab12")

    def test_wraps_raw_rules(self):
        assert all_of(re.compile("a"), string(3)).valid("abc")
        assert not all_of(re.compile("a"), string(3)).valid("abcd")


class TestMapping:
    """Test mapping helper."""

    def test_without_example(self):
        assert mapping().valid({})
        assert not mapping().valid([])

    def test_patterns(self):
        validation = mapping({re.compile("^[a-z]+$"): re.compile("^[0-9]+$")})
        assert validation.valid({"abc": "123"})
        assert not validation.valid({"abc": 123})
        assert not validation.valid("abc")

    def test_predicate_values(self):
        is_list = Validation(predicate=lambda d: isinstance(d, list))
        validation = mapping({re.compile("^[a-z]+$"): is_list})

        assert validation.valid({"abc": []})
        assert validation.valid({"abc": [], "cc": [], "asd": []})

        assert not validation.valid({"abc": {}})
        assert not validation.valid({"abc": [], "cde": 123})

    def test_only_first_pair_is_used(self):
        validation = mapping({token(): integer(), string(): string()})
        assert validation.valid({"a": 1})
        assert not validation.valid({"a": "b"})

    def test_empty_example(self):
        with pytest.raises(MissingRuleError):
            mapping({})


class TestSequence:
    """Test sequence helper."""

    def test_without_rule(self):
        assert sequence().valid([])
        assert sequence().valid((1, 2))
        assert not sequence().valid("abc")

    def test_elements(self):
        assert sequence(re.compile("^[a-z]+$")).valid(["abc", "def", "xyz"])
        assert sequence(Validation(predicate=lambda d: d > 10)).valid([11, 12, 23])

        assert not sequence(re.compile("^[a-z]+$")).valid(["1abc", "def", "xyz"])
        assert not sequence(Validation(predicate=lambda d: d > 10)).valid([11, 0, 12, 23])

    def test_non_sequence(self):
        assert not sequence(integer()).valid({"a": 1})
        assert not sequence(integer()).valid(None)


class TestStructureRef:
    """Test structure_ref helper."""

    def test_lookup_happens_at_check_time(self):
        registry = Registry()
        validation = structure_ref(registry, "word")
        registry.define("word", re.compile("^[a-z]+$"))

        assert validation.valid("abc")
        assert not validation.valid("123")

    def test_labels(self):
        validation = structure_ref(Registry(), "word")
        assert isinstance(validation.rule, Predicate)
        assert validation.rule.label == "structure(word)"
