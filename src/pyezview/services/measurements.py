# ---------------------------------------------------------------------------
# File: measurements.py
# ---------------------------------------------------------------------------
# Description:
#	Measurement service for pyezview.
#
# Notes:
#	- MeasurementService owns measurement records (in memory) and the current
#	  selection.
#	- Viewports register a change callback to redraw.
#	- Storage format is not a concern here; records are plain dataclasses.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/03/2026	Paul G. LeDuc				Initial coding / release (StatusService)
# 01/10/2026	Paul G. LeDuc				Rework as MeasurementService (records + selection)
# 01/11/2026	Paul G. LeDuc				Add find_near hit test
# ---------------------------------------------------------------------------

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, Optional

from pyezview.core.logging import get_app_logger


_log = get_app_logger("measurements")

Point = tuple[float, float]


@dataclass(frozen=True, slots=True)
class Measurement:
	"""
	Measurement

	- uid:			Unique id.
	- tool_name:	Tool that created it (e.g., "Length", "EllipticalROI").
	- points:		Canvas points (element-relative).
	- label:		Display label.
	- finding:		Coded finding (a reference table entry) or None.
	- site:			Coded site (a reference table entry) or None.
	"""
	uid: str
	tool_name: str
	points: tuple[Point, ...] = ()
	label: str = ""
	finding: Any = None
	site: Any = None

	def distance_to(self, point: Point) -> float:
		if not self.points:
			return math.inf
		px, py = point
		return min(math.hypot(x - px, y - py) for x, y in self.points)


@dataclass(frozen=True, slots=True)
class MeasurementsSnapshot:
	"""
	Immutable view handed to change callbacks.
	"""
	measurements: tuple[Measurement, ...]
	selected_uid: Optional[str] = None


@dataclass(slots=True)
class MeasurementService:
	"""
	MeasurementService

	Owns measurement records and notifies an optional change callback.
	"""
	_records: Dict[str, Measurement] = field(default_factory=dict)
	_selected_uid: Optional[str] = None

	on_change: Optional[Callable[[MeasurementsSnapshot], None]] = None

	# -----------------------------------------------------------------------
	# Wiring
	# -----------------------------------------------------------------------

	def set_on_change(self, cb: Optional[Callable[[MeasurementsSnapshot], None]]) -> None:
		self.on_change = cb
		if cb:
			cb(self.snapshot())

	def snapshot(self) -> MeasurementsSnapshot:
		return MeasurementsSnapshot(
			measurements=tuple(self._records.values()),
			selected_uid=self._selected_uid,
		)

	# -----------------------------------------------------------------------
	# Queries
	# -----------------------------------------------------------------------

	def get(self, uid: str) -> Optional[Measurement]:
		return self._records.get(uid)

	def all(self) -> list[Measurement]:
		return list(self._records.values())

	def selected(self) -> Optional[Measurement]:
		if self._selected_uid is None:
			return None
		return self._records.get(self._selected_uid)

	def find_near(self, point: Optional[Point], tolerance: float = 8.0) -> Optional[Measurement]:
		"""
		Closest measurement with a point within tolerance of point (None if none).
		"""
		if point is None:
			return None

		best: Optional[Measurement] = None
		best_dist = tolerance
		for m in self._records.values():
			dist = m.distance_to(point)
			if dist <= best_dist:
				best, best_dist = m, dist
		return best

	# -----------------------------------------------------------------------
	# Mutators
	# -----------------------------------------------------------------------

	def add(self, measurement: Measurement) -> None:
		if measurement.uid in self._records:
			raise ValueError(f"Duplicate measurement uid: {measurement.uid!r}")
		self._records[measurement.uid] = measurement
		self._notify()

	def update(self, uid: str, measurement: Measurement) -> None:
		if uid not in self._records:
			raise KeyError(f"Unknown measurement uid: {uid!r}")
		self._records[uid] = replace(measurement, uid=uid)
		self._notify()

	def remove(self, uid: str) -> bool:
		if self._records.pop(uid, None) is None:
			_log.info("Measurement %r already removed", uid)
			return False
		if self._selected_uid == uid:
			self._selected_uid = None
		self._notify()
		return True

	def select(self, uid: Optional[str]) -> None:
		if uid is not None and uid not in self._records:
			raise KeyError(f"Unknown measurement uid: {uid!r}")
		self._selected_uid = uid
		self._notify()

	# -----------------------------------------------------------------------
	# Internal helpers
	# -----------------------------------------------------------------------

	def _notify(self) -> None:
		if self.on_change:
			self.on_change(self.snapshot())
