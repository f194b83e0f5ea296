"""Tests for the invocation model and its invariants."""

import pytest
from pydantic import ValidationError

from core.domain.errors import OpenError, ReadError
from core.domain.models import InvocationConfig, LineCounter, NumberingMode


def test_sources_default_to_stdin():
	assert InvocationConfig().sources == ["-"]
	assert InvocationConfig(sources=[]).sources == ["-"]
	assert InvocationConfig(sources=None).sources == ["-"]


def test_sources_keep_order_and_duplicates():
	cfg = InvocationConfig(sources=["b.txt", "-", "a.txt", "-"])
	assert cfg.sources == ["b.txt", "-", "a.txt", "-"]


def test_mode_is_derived_from_flags():
	assert InvocationConfig().mode is NumberingMode.PLAIN
	assert InvocationConfig(number_all_lines=True).mode is NumberingMode.ALL
	assert InvocationConfig(number_nonblank_lines=True).mode is NumberingMode.NONBLANK


def test_both_numbering_flags_are_rejected():
	with pytest.raises(ValidationError) as exc:
		InvocationConfig(number_all_lines=True, number_nonblank_lines=True)
	assert "cannot be used with" in str(exc.value)


def test_number_width_must_be_positive():
	with pytest.raises(ValidationError):
		InvocationConfig(number_width=0)


def test_line_counter_starts_at_zero():
	counter = LineCounter()
	assert counter.total_line_number == 0
	assert counter.nonblank_line_number == 0


def test_open_error_message_uses_os_error_text():
	err = OpenError("missing.txt", FileNotFoundError(2, "No such file or directory"))
	assert str(err) == "missing.txt: No such file or directory"
	assert err.source == "missing.txt"
	assert err.exit_code == 1


def test_read_error_message_names_the_source():
	cause = UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
	err = ReadError("bad.txt", cause)
	assert str(err).startswith("bad.txt: ")
	assert "invalid start byte" in str(err)
