# ---------------------------------------------------------------------------
# File: panel.py
# ---------------------------------------------------------------------------
# Description:
#	Floating panel contract used by the context menu controller.
#
# Notes:
#	- Panels are identified by a fixed logical id; showing a panel with an id
#	  that is already visible replaces it.
#	- The Tk implementation lives in pyezview.ui.context_panel.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/10/2026	Paul G. LeDuc				Initial coding / release
# 01/15/2026	Paul G. LeDuc				Drop unused request fields
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol, runtime_checkable

from pyezview.menus.menu_defs import ActivationTarget, ResolvedMenuItem
from pyezview.menus.position import Position


@dataclass(frozen=True, slots=True)
class PanelRequest:
	"""
	Everything a panel service needs to show a context menu.

	- id:				Logical panel id (e.g., "context-menu").
	- position:			Screen position of the panel's top-left corner.
	- items:			Items to render, in order.
	- target:			Passed to ResolvedMenuItem.activate() on click.
	- on_close:			Call when the panel closes itself.
	- on_click_outside:	Call when the user clicks outside the panel.
	"""
	id: str
	position: Position
	items: tuple[ResolvedMenuItem, ...]
	target: ActivationTarget
	on_close: Callable[[], None]
	on_click_outside: Callable[[], None]


@runtime_checkable
class PanelService(Protocol):
	def show(self, request: PanelRequest) -> None: ...
	def dismiss(self, panel_id: str) -> None: ...
