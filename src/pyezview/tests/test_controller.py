# ---------------------------------------------------------------------------
# File: test_controller.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for ContextMenuController (session lifecycle + activation).
#
# Notes:
#	- Uses FakePanelService (conftest) instead of Tk.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/11/2026	Paul G. LeDuc				Initial tests
# 01/12/2026	Paul G. LeDuc				Telemetry + activation arg layering
# 01/13/2026	Paul G. LeDuc				Sub-menu anchor reuse
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging
from types import SimpleNamespace
from typing import Any

import pytest

from pyezview.app.commands import CommandCall, CommandContext, CommandRegistry
from pyezview.app.errors import ContextMismatch, UnknownCommand
from pyezview.menus.controller import (
	CONTEXT_MENU_ID,
	ContextMenuController,
	ContextMenuProps,
	SessionState,
)
from pyezview.menus.menu_defs import ActionKind, MenuDef, MenuItemSpec, MenuSet
from pyezview.menus.position import Position


class _Element:
	def __init__(self, origin: tuple[float, float] = (100.0, 200.0)) -> None:
		self.origin = origin

	def bounding_box(self) -> tuple[float, float]:
		return self.origin


def _registry() -> tuple[CommandRegistry, list[tuple[str, dict[str, Any], Any]]]:
	reg = CommandRegistry()
	calls: list[tuple[str, dict[str, Any], Any]] = []

	def recorder(name: str):
		def _h(args: dict[str, Any], ctx: CommandContext) -> str:
			calls.append((name, args, ctx.tag))
			return name
		return _h

	for name in ("cmd", "other", "viewerOnly"):
		reg.define(name, recorder(name), allowed_contexts=("VIEWER",) if name == "viewerOnly" else ())
	return reg, calls


def _menus() -> MenuSet:
	return MenuSet([
		MenuDef(id="main", items=(
			MenuItemSpec(
				id="run",
				label="Run",
				command_name="cmd",
				command_options={"opt": "options", "shared": "options"},
				attrs={"shared": "attrs", "extra": "attrs"},
				context="VIEWER",
			),
			MenuItemSpec(id="more", label="More", action_kind=ActionKind.SUB_MENU, sub_menu_id="sub"),
			MenuItemSpec(id="broken", label="Broken", action_kind=ActionKind.SUB_MENU),
			MenuItemSpec(
				id="multi",
				label="Multi",
				action_kind=ActionKind.RUN_COMMANDS,
				commands=(
					CommandCall("cmd", {"n": 1, "uid": "from-options", "refs": "from-options"}),
					CommandCall("other", {"n": 2}, "VIEWER"),
				),
			),
			MenuItemSpec(id="nothing", label="Nothing"),
		)),
		MenuDef(id="sub", selector=lambda p: False, items=(
			MenuItemSpec(id="sub-item", label="Sub item", command_name="other"),
		)),
		MenuDef(id="empty", selector=lambda p: False),
	])


REFS = {"k": {"text": "K"}}


def _props(**kwargs: Any) -> ContextMenuProps:
	base: dict[str, Any] = {
		"menus": _menus(),
		"check_props": {"uid": "m1", "shared": "check"},
		"event": SimpleNamespace(client=(5.0, 6.0)),
		"references": REFS,
	}
	base.update(kwargs)
	return ContextMenuProps(**base)


def _item(controller: ContextMenuController, item_id: str):
	assert controller.session is not None
	return next(i for i in controller.session.items if i.id == item_id)


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------

def test_show_opens_session_and_panel(panel):
	reg, _ = _registry()
	c = ContextMenuController(reg, panel)

	session = c.show_context_menu(_props(), _Element(), [(10.0, 20.0)])

	assert session is not None
	assert c.is_open and c.state is SessionState.OPEN
	assert c.session is session
	assert session.menu_id == "main"
	assert [i.id for i in session.items] == ["run", "more", "broken", "multi", "nothing"]
	assert session.position == Position(110.0, 220.0)

	assert panel.calls == [("show", CONTEXT_MENU_ID)]
	req = panel.last
	assert req.id == CONTEXT_MENU_ID
	assert req.position == session.position
	assert req.items == session.items


def test_position_falls_back_to_event_point(panel):
	reg, _ = _registry()
	c = ContextMenuController(reg, panel)

	session = c.show_context_menu(_props())

	assert session is not None
	assert session.position == Position(5.0, 6.0)


def test_show_without_panel_service_stays_closed(caplog: pytest.LogCaptureFixture):
	reg, _ = _registry()
	c = ContextMenuController(reg)

	with caplog.at_level(logging.WARNING):
		assert c.show_context_menu(_props()) is None

	assert c.state is SessionState.CLOSED
	assert any("no panel service" in r.getMessage() for r in caplog.records)


def test_set_panel_service_later(panel):
	reg, _ = _registry()
	c = ContextMenuController(reg)
	c.set_panel_service(panel)

	assert c.show_context_menu(_props()) is not None


def test_reopen_is_exactly_one_dismiss_then_show(panel):
	reg, _ = _registry()
	c = ContextMenuController(reg, panel)

	c.show_context_menu(_props())
	c.show_context_menu(_props())

	assert panel.calls == [
		("show", CONTEXT_MENU_ID),
		("dismiss", CONTEXT_MENU_ID),
		("show", CONTEXT_MENU_ID),
	]
	assert list(panel.visible) == [CONTEXT_MENU_ID]


def test_no_menu_closes_existing_and_shows_nothing(panel):
	reg, _ = _registry()
	c = ContextMenuController(reg, panel)
	c.show_context_menu(_props())

	assert c.show_context_menu(_props(menu_id="ghost")) is None

	assert c.state is SessionState.CLOSED
	assert panel.calls == [("show", CONTEXT_MENU_ID), ("dismiss", CONTEXT_MENU_ID)]


def test_empty_menu_shows_nothing(panel):
	reg, _ = _registry()
	c = ContextMenuController(reg, panel)

	assert c.show_context_menu(_props(menu_id="empty")) is None
	assert panel.calls == []


def test_close_dismisses_once(panel):
	reg, _ = _registry()
	c = ContextMenuController(reg, panel)
	c.show_context_menu(_props())

	c.close()
	c.close()

	assert c.state is SessionState.CLOSED
	assert panel.count("dismiss") == 1


def test_click_outside_closes(panel):
	reg, _ = _registry()
	c = ContextMenuController(reg, panel)
	c.show_context_menu(_props())

	panel.last.on_click_outside()

	assert not c.is_open
	assert panel.visible == {}


def test_lifecycle_telemetry(panel, telemetry, sink):
	reg, _ = _registry()
	c = ContextMenuController(reg, panel, telemetry=telemetry)

	c.show_context_menu(_props())
	c.close()

	opened = sink.named("context_menu.open")
	assert opened[0].attrs == {"menu_id": "main", "items": 5}
	assert sink.named("context_menu.close")[0].attrs == {"menu_id": "main"}


def test_custom_panel_id(panel):
	reg, _ = _registry()
	c = ContextMenuController(reg, panel, panel_id="other-panel")
	c.show_context_menu(_props())

	assert panel.last.id == "other-panel"


# ---------------------------------------------------------------------------
# Activation
# ---------------------------------------------------------------------------

def test_default_activation_layers_args_and_closes(panel):
	reg, calls = _registry()
	c = ContextMenuController(reg, panel)
	c.show_context_menu(_props())

	_item(c, "run").activate(panel.last.target)

	assert not c.is_open
	name, args, tag = calls[0]
	assert name == "cmd"
	assert tag == "VIEWER"
	assert args == {
		"extra": "attrs",
		"opt": "options",
		"shared": "check",
		"uid": "m1",
		"refs": REFS,
	}


def test_default_activation_without_command_is_noop(panel):
	reg, calls = _registry()
	c = ContextMenuController(reg, panel)
	c.show_context_menu(_props())

	_item(c, "nothing").activate(panel.last.target)

	assert calls == []
	assert not c.is_open


def test_sub_menu_activation_reopens_at_same_anchor(panel):
	reg, _ = _registry()
	c = ContextMenuController(reg, panel)
	element = _Element()
	first = c.show_context_menu(_props(), element, [(10.0, 20.0)])
	assert first is not None

	_item(c, "more").activate(panel.last.target)

	second = c.session
	assert second is not None
	assert second.menu_id == "sub"
	assert [i.id for i in second.items] == ["sub-item"]
	assert second.position == first.position
	assert second.viewer_element is element
	assert second.props.check_props == first.props.check_props
	assert panel.calls == [
		("show", CONTEXT_MENU_ID),
		("dismiss", CONTEXT_MENU_ID),
		("show", CONTEXT_MENU_ID),
	]


def test_sub_menu_item_activation_runs_command(panel):
	reg, calls = _registry()
	c = ContextMenuController(reg, panel)
	c.show_context_menu(_props())
	_item(c, "more").activate(panel.last.target)

	_item(c, "sub-item").activate(panel.last.target)

	assert calls[0][0] == "other"
	assert not c.is_open


def test_sub_menu_without_id_is_noop(panel, caplog: pytest.LogCaptureFixture):
	reg, _ = _registry()
	c = ContextMenuController(reg, panel)
	c.show_context_menu(_props())

	with caplog.at_level(logging.WARNING):
		_item(c, "broken").activate(panel.last.target)

	assert not c.is_open
	assert panel.count("show") == 1
	assert any("No sub-menu" in r.getMessage() for r in caplog.records)


def test_run_commands_activation_layers_args(panel):
	reg, calls = _registry()
	c = ContextMenuController(reg, panel)
	c.show_context_menu(_props())

	_item(c, "multi").activate(panel.last.target)

	assert [(n, t) for n, _, t in calls] == [("cmd", None), ("other", "VIEWER")]
	first_args = calls[0][1]
	assert first_args["n"] == 1
	assert first_args["uid"] == "m1"
	assert first_args["refs"] == REFS
	assert calls[1][1]["n"] == 2


def test_activation_telemetry(panel, telemetry, sink):
	reg, _ = _registry()
	c = ContextMenuController(reg, panel, telemetry=telemetry)
	c.show_context_menu(_props())

	_item(c, "run").activate(panel.last.target)

	ev = sink.named("context_menu.activate")[0]
	assert ev.attrs == {"menu_id": "main", "item_id": "run", "action": "default"}


def test_dispatch_errors_propagate(panel):
	reg = CommandRegistry()
	reg.define("viewerOnly", lambda args, ctx: None, allowed_contexts=("VIEWER",))

	menus = [MenuDef(id="m", items=(
		MenuItemSpec(id="unknown", command_name="missing"),
		MenuItemSpec(id="wrong", command_name="viewerOnly", context="OTHER"),
	))]
	c = ContextMenuController(reg, panel)

	c.show_context_menu(ContextMenuProps(menus=menus))
	with pytest.raises(UnknownCommand):
		_item(c, "unknown").activate(panel.last.target)

	c.show_context_menu(ContextMenuProps(menus=menus))
	with pytest.raises(ContextMismatch):
		_item(c, "wrong").activate(panel.last.target)
