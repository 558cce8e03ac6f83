"""Tests for jsonpick.evaluate: single steps and folds over decoded values."""

from __future__ import annotations

from collections import OrderedDict

import pytest

from jsonpick.errors import (
    ArrayTokenError,
    LeadingZeroArrayTokenError,
    NonNumericArrayTokenError,
    UnsupportedArrayAppendError,
)
from jsonpick.evaluate import ContextKind, classify, evaluate, step
from jsonpick.types import ABSENT, ResolveOptions

LAX = ResolveOptions(strict_array_index=False)


class TestClassify:
    @pytest.mark.parametrize(
        ("value", "kind"),
        [
            ([], ContextKind.ARRAY),
            ((1, 2), ContextKind.ARRAY),
            ({}, ContextKind.OBJECT),
            (OrderedDict(a=1), ContextKind.OBJECT),
            ("abc", ContextKind.SCALAR),
            (0, ContextKind.SCALAR),
            (1.5, ContextKind.SCALAR),
            (True, ContextKind.SCALAR),
            (None, ContextKind.SCALAR),
            (ABSENT, ContextKind.ABSENT),
        ],
    )
    def test_kinds(self, value, kind):
        assert classify(value) is kind


class TestStepArray:
    def test_index(self):
        assert step([1, 2, 3], "1") == 2

    def test_zero_index(self):
        assert step(["a"], "0") == "a"

    def test_out_of_bounds_is_absent(self):
        assert step([1, 2, 3], "3") is ABSENT

    def test_null_element_is_not_absent(self):
        assert step([None], "0") is None

    def test_append_token_rejected(self):
        with pytest.raises(UnsupportedArrayAppendError) as exc_info:
            step([1], "-")
        assert exc_info.value.token == "-"

    @pytest.mark.parametrize("token", ["x", "", "-1", "1.5", " 2", "1e0", "+1", "١"])
    def test_non_numeric_rejected_in_strict_mode(self, token):
        with pytest.raises(NonNumericArrayTokenError):
            step([1, 2, 3], token)

    @pytest.mark.parametrize("token", ["01", "00", "007"])
    def test_leading_zero_rejected(self, token):
        with pytest.raises(LeadingZeroArrayTokenError):
            step([1, 2, 3], token)

    def test_errors_share_base_class(self):
        with pytest.raises(ArrayTokenError):
            step([], "x")

    def test_token_is_unescaped_before_checks(self):
        # "~1" decodes to "/", which is not a number.
        with pytest.raises(NonNumericArrayTokenError):
            step([1], "~1")


class TestStepArrayLax:
    @pytest.mark.parametrize("token", ["1.5", " 2", "1e0", "-1", "", "Infinity"])
    def test_number_like_tokens_are_absent_with_warning(self, token):
        with pytest.warns(UserWarning, match="not a non-negative integer"):
            assert step([1, 2, 3], token, options=LAX) is ABSENT

    @pytest.mark.parametrize("token", ["x", "nan", "inf", "1_0", "-0x1", "+0b1", "١", "１"])
    def test_non_numeric_still_rejected(self, token):
        with pytest.raises(NonNumericArrayTokenError):
            step([1, 2, 3], token, options=LAX)

    def test_leading_zero_still_rejected(self):
        with pytest.raises(LeadingZeroArrayTokenError):
            step([1, 2, 3], "01", options=LAX)

    def test_append_token_still_rejected(self):
        with pytest.raises(UnsupportedArrayAppendError):
            step([1, 2, 3], "-", options=LAX)

    def test_canonical_index(self):
        assert step([1, 2, 3], "2", options=LAX) == 3

    def test_warning_points_at_step_caller(self):
        with pytest.warns(UserWarning) as record:
            step([1, 2, 3], "1.5", options=LAX)
        assert record[0].filename == __file__

    def test_warning_points_at_evaluate_caller(self):
        with pytest.warns(UserWarning) as record:
            evaluate({"a": [1]}, ["a", "1.5"], options=LAX)
        assert record[0].filename == __file__


class TestStepObject:
    def test_key(self):
        assert step({"a": 1}, "a") == 1

    def test_missing_key_is_absent(self):
        assert step({"a": 1}, "b") is ABSENT

    def test_empty_key(self):
        assert step({"": 0}, "") == 0

    def test_escaped_keys(self):
        doc = {"x~y": 5, "p/q": 6}
        assert step(doc, "x~0y") == 5
        assert step(doc, "p~1q") == 6

    def test_numeric_key_on_object(self):
        assert step({"0": "zero"}, "0") == "zero"

    def test_dash_key_on_object(self):
        assert step({"-": "dash"}, "-") == "dash"

    def test_leading_zero_key_on_object(self):
        assert step({"01": "ok"}, "01") == "ok"


class TestStepScalar:
    @pytest.mark.parametrize("context", ["text", 42, 1.5, True, None, ABSENT])
    def test_cannot_traverse(self, context):
        assert step(context, "a") is ABSENT

    def test_string_is_not_indexed(self):
        assert step("abc", "0") is ABSENT


class TestEvaluate:
    def test_empty_tokens_return_document(self):
        doc = {"a": 1}
        assert evaluate(doc, []) is doc

    def test_walks_root_to_leaf(self):
        assert evaluate({"a": {"b": [1, 2, 3]}}, ["a", "b", "1"]) == 2

    def test_short_circuits_on_absent(self):
        # "-" would raise in array context, but the walk stops at "missing".
        assert evaluate({"a": [1]}, ["missing", "-"]) is ABSENT

    def test_stops_at_scalar(self):
        assert evaluate({"a": 1}, ["a", "b", "c"]) is ABSENT

    def test_does_not_mutate(self):
        doc = {"a": {"b": [1, 2, 3]}}
        snapshot = repr(doc)
        evaluate(doc, ["a", "b", "0"])
        assert repr(doc) == snapshot

    def test_accepts_generator(self):
        assert evaluate({"a": {"b": 7}}, (t for t in ["a", "b"])) == 7
