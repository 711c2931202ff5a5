# ---------------------------------------------------------------------------
# File: test_position.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for pyezview.menus.position (context menu placement).
#
# Notes:
#	- Pure unit tests; no Tkinter dependency.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/09/2026	Paul G. LeDuc				Initial tests
# 01/11/2026	Paul G. LeDuc				Mapping points + anchor
# ---------------------------------------------------------------------------

from __future__ import annotations

from types import SimpleNamespace
from typing import Any, Optional

from pyezview.menus.position import (
	ORIGIN,
	Position,
	canvas_points_position,
	default_position_chain,
	element_origin,
	event_position,
	resolve_default_position,
	resolve_position,
	to_position,
)


class _Element:
	def __init__(self, origin: Optional[tuple[float, float]]) -> None:
		self.origin = origin
		self.calls = 0

	def bounding_box(self) -> Optional[tuple[float, float]]:
		self.calls += 1
		return self.origin


def test_to_position_accepts_common_shapes():
	assert to_position((1, 2)) == Position(1, 2)
	assert to_position([1.5, 2.5]) == Position(1.5, 2.5)
	assert to_position({"x": 3, "y": 4}) == Position(3, 4)
	assert to_position(SimpleNamespace(x=5, y=6)) == Position(5, 6)

	p = Position(7, 8)
	assert to_position(p) is p


def test_to_position_rejects_non_numeric():
	assert to_position(None) is None
	assert to_position((1,)) is None
	assert to_position(("1", 2)) is None
	assert to_position({"x": 1}) is None
	assert to_position((True, 2)) is None
	assert to_position("12") is None
	assert to_position(object()) is None


def test_resolve_position_stops_at_first_valid():
	evaluated: list[str] = []

	def produce(name: str, value: Any):
		def _p() -> Any:
			evaluated.append(name)
			return value
		return _p

	pos = resolve_position([
		produce("a", None),
		produce("b", {"x": "no", "y": 1}),
		produce("c", (10, 20)),
		produce("d", (30, 40)),
	])

	assert pos == Position(10, 20)
	assert evaluated == ["a", "b", "c"]


def test_resolve_position_none_when_nothing_valid():
	assert resolve_position([lambda: None, lambda: (None, 1)]) is None
	assert resolve_position([]) is None


def test_canvas_point_wins_and_is_offset_by_element_origin():
	element = _Element((100, 50))
	event = SimpleNamespace(client=(5, 5))

	pos = resolve_default_position([(10, 20)], event, element)

	assert pos == Position(110, 70)


def test_canvas_points_skip_invalid_points():
	element = _Element((100, 50))

	assert canvas_points_position([None, {"x": 1, "y": 2}], element) == Position(101, 52)


def test_canvas_points_need_element_origin():
	assert canvas_points_position([(10, 20)], None) is None
	assert canvas_points_position([(10, 20)], _Element(None)) is None
	assert canvas_points_position([], _Element((0, 0))) is None


def test_falls_back_to_event_point():
	event = SimpleNamespace(client=(15, 25))

	assert resolve_default_position(None, event, None) == Position(15, 25)


def test_event_point_from_mapping_event():
	assert event_position({"client": {"x": 1, "y": 2}}) == Position(1, 2)
	assert event_position({"other": 1}) is None
	assert event_position(None) is None


def test_falls_back_to_element_origin():
	element = _Element((30, 40))
	event = SimpleNamespace(client=None)

	assert resolve_default_position(None, event, element) == Position(30, 40)


def test_falls_back_to_origin():
	assert resolve_default_position() == ORIGIN
	assert resolve_default_position([(1, 2)], SimpleNamespace(client=None), _Element(None)) == ORIGIN


def test_element_origin_requires_bounding_box():
	assert element_origin(None) is None
	assert element_origin(object()) is None
	assert element_origin(_Element((1, 2))) == Position(1, 2)


def test_anchor_comes_first_and_short_circuits():
	element = _Element((100, 100))
	chain = default_position_chain([(1, 1)], None, element, anchor=Position(9, 9))

	assert resolve_position(chain) == Position(9, 9)
	assert element.calls == 0
