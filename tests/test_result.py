"""Tests for cusip.core.result — Ok/Err values and free functions."""

from __future__ import annotations

import dataclasses

import pytest

from cusip.core.errors import InvalidCUSIPLength
from cusip.core.identifiers import CUSIP
from cusip.core.result import Err, Ok, unwrap


class TestOkErr:
    def test_ok_is_frozen(self) -> None:
        ok = Ok(42)
        with pytest.raises(dataclasses.FrozenInstanceError):
            ok.value = 99  # type: ignore[misc]

    def test_equality(self) -> None:
        assert Ok(42) == Ok(42)
        assert Ok(42) != Err(42)
        assert Err("a") != Err("b")

    def test_pattern_match_parse_result(self) -> None:
        match CUSIP.parse(""):
            case Err(InvalidCUSIPLength(was=n)):
                assert n == 0
            case _:
                pytest.fail("Should match Err(InvalidCUSIPLength)")


class TestMap:
    def test_map(self) -> None:
        assert Ok(5).map(lambda x: x * 2) == Ok(10)
        assert Err("e").map(lambda x: x * 2) == Err("e")

    def test_map_parse_result(self) -> None:
        assert CUSIP.parse("09739D100").map(CUSIP.issuer_num) == Ok("09739D")
        assert CUSIP.parse("").map(CUSIP.issuer_num) == Err(InvalidCUSIPLength(was=0))


class TestUnwrap:
    def test_method(self) -> None:
        assert Ok(42).unwrap() == 42
        with pytest.raises(RuntimeError, match="Called unwrap on Err"):
            CUSIP.parse("").unwrap()

    def test_free_function(self) -> None:
        assert unwrap(Ok(42)) == 42
        with pytest.raises(RuntimeError, match="CUSIP must be 9 bytes"):
            unwrap(CUSIP.parse(""))

    def test_free_function_rejects_non_result(self) -> None:
        with pytest.raises(TypeError):
            unwrap(42)  # type: ignore[arg-type]
