# ---------------------------------------------------------------------------
# File: conftest.py
# ---------------------------------------------------------------------------
# Description:
#	Shared fixtures for the pyezview tests.
#
# Notes:
#	- FakePanelService records show/dismiss calls (no Tk).
#	- tk_root skips Tk-backed tests when no display is available.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/13/2026	Paul G. LeDuc				Initial fixtures
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Iterator

import tkinter as tk

import pytest

from pyezview.core.telemetry import MemorySink, Telemetry
from pyezview.services.panel import PanelRequest


class FakePanelService:
	"""
	PanelService stand-in that records calls in order.
	"""
	def __init__(self) -> None:
		self.calls: list[tuple[str, Any]] = []
		self.requests: list[PanelRequest] = []
		self.visible: dict[str, PanelRequest] = {}

	def show(self, request: PanelRequest) -> None:
		self.calls.append(("show", request.id))
		self.requests.append(request)
		self.visible[request.id] = request

	def dismiss(self, panel_id: str) -> None:
		self.calls.append(("dismiss", panel_id))
		self.visible.pop(panel_id, None)

	@property
	def last(self) -> PanelRequest:
		return self.requests[-1]

	def count(self, kind: str) -> int:
		return sum(1 for k, _ in self.calls if k == kind)


@pytest.fixture
def panel() -> FakePanelService:
	return FakePanelService()


@pytest.fixture
def sink() -> MemorySink:
	return MemorySink()


@pytest.fixture
def telemetry(sink: MemorySink) -> Telemetry:
	return Telemetry(enabled=True, sink=sink)


@pytest.fixture
def tk_root() -> Iterator[tk.Tk]:
	try:
		root = tk.Tk()
	except tk.TclError as ex:
		pytest.skip(f"Tk not available: {ex}")
	root.withdraw()
	try:
		yield root
	finally:
		root.destroy()
