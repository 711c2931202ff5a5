# ---------------------------------------------------------------------------
# File: test_interaction.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for InteractionRouter (viewport clicks -> commands).
#
# Notes:
#	- Pure unit tests; no Tkinter dependency.
#	- Adds telemetry assertions (MemorySink).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/01/2026	Paul G. LeDuc				Initial tests (KeyRouter)
# 01/12/2026	Paul G. LeDuc				Rework for InteractionRouter
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any

from pyezview.app.commands import CommandCall, CommandContext, CommandCustomization, CommandRegistry
from pyezview.app.interaction import (
	DEFAULT_SHOW_CONTEXT_MENU,
	SHOW_CONTEXT_MENU,
	InteractionRouter,
)
from pyezview.app.viewer import build_viewer
from pyezview.core.config import AppConfig
from pyezview.services.customization import ModeCustomizationService
from pyezview.services.measurements import Measurement
from pyezview.services.viewport import BUTTON_MIDDLE, BUTTON_PRIMARY, BUTTON_SECONDARY, InteractionEvent


class _Viewport:
	def __init__(self, hit: Any = None) -> None:
		self.hit = hit

	def bounding_box(self) -> tuple[float, float]:
		return (0.0, 0.0)

	def find_nearby_object(self, point: Any) -> Any:
		return self.hit


def _registry() -> tuple[CommandRegistry, list[tuple[str, dict[str, Any]]]]:
	reg = CommandRegistry()
	calls: list[tuple[str, dict[str, Any]]] = []

	def recorder(name: str, result: Any = None):
		def _h(args: dict[str, Any], ctx: CommandContext) -> Any:
			calls.append((name, args))
			return result
		return _h

	reg.define("closeViewerContextMenu", recorder("close"))
	reg.define("getNearbyToolData", recorder("nearby", "HIT"), allowed_contexts=("VIEWER",))
	reg.define("showViewerContextMenu", recorder("show"))
	reg.define("custom", recorder("custom"))
	return reg, calls


def test_secondary_click_runs_show_customization():
	reg, calls = _registry()
	router = InteractionRouter(registry=reg, customizations=ModeCustomizationService())
	event = InteractionEvent(button=BUTTON_SECONDARY, canvas=(1.0, 2.0), element=_Viewport())

	assert router.route_click(event) is True

	assert [c[0] for c in calls] == ["nearby", "show"]
	nearby_args = calls[0][1]
	assert nearby_args["canvasCoordinates"] == (1.0, 2.0)

	show_args = calls[1][1]
	assert show_args["menuName"] == "viewerContextMenu"
	assert show_args["event"] is event
	assert show_args["nearbyToolData"] == "HIT"


def test_secondary_click_without_element_skips_hit_test():
	reg, calls = _registry()
	router = InteractionRouter(registry=reg, customizations=ModeCustomizationService())

	router.route_click(InteractionEvent(button=BUTTON_SECONDARY))

	assert [c[0] for c in calls] == ["show"]
	assert calls[0][1]["nearbyToolData"] is None


def test_other_click_closes_menu():
	reg, calls = _registry()
	router = InteractionRouter(registry=reg, customizations=ModeCustomizationService())

	assert router.route_click(InteractionEvent(button=BUTTON_PRIMARY)) is False
	assert [c[0] for c in calls] == ["close"]


def test_mode_customization_replaces_default_bundle():
	reg, calls = _registry()
	customizations = ModeCustomizationService(overrides={
		SHOW_CONTEXT_MENU: {"commands": [{"commandName": "custom", "commandOptions": {"x": 1}}]},
	})
	router = InteractionRouter(registry=reg, customizations=customizations)

	router.route_click(InteractionEvent(button=BUTTON_SECONDARY))

	assert [c[0] for c in calls] == ["custom"]
	assert calls[0][1]["x"] == 1


def test_default_customization_is_used_when_nothing_registered():
	router = InteractionRouter(registry=CommandRegistry(), customizations=ModeCustomizationService())

	assert router.show_context_menu_customization() is DEFAULT_SHOW_CONTEXT_MENU


def test_from_config_reads_context_button():
	reg, calls = _registry()
	cfg = AppConfig({"interaction.context_button": BUTTON_MIDDLE})
	router = InteractionRouter.from_config(reg, ModeCustomizationService(), cfg)

	assert router.context_button == BUTTON_MIDDLE
	assert router.route_click(InteractionEvent(button=BUTTON_SECONDARY)) is False
	assert router.route_click(InteractionEvent(button=BUTTON_MIDDLE)) is True


def test_click_counter_telemetry(telemetry, sink):
	reg, _ = _registry()
	router = InteractionRouter(registry=reg, customizations=ModeCustomizationService(), telemetry=telemetry)

	router.route_click(InteractionEvent(button=BUTTON_PRIMARY))

	metric = next(m for m in sink.metrics if m.name == "interaction.click")
	assert metric.value == 1.0
	assert metric.attrs == {"button": BUTTON_PRIMARY}


def test_right_click_on_measurement_opens_menu_end_to_end(panel):
	m = Measurement(uid="m1", tool_name="Length", points=((10.0, 10.0),))
	viewer = build_viewer(panel_service=panel)
	viewer.measurements.add(m)
	viewport = _Viewport(hit=m)

	assert viewer.router.route_click(InteractionEvent(button=BUTTON_SECONDARY, client=(300.0, 400.0), element=viewport))

	session = viewer.context_menu.session
	assert session is not None
	assert session.props.check_props["uid"] == "m1"
	assert panel.count("show") == 1

	viewer.router.route_click(InteractionEvent(button=BUTTON_PRIMARY))

	assert not viewer.context_menu.is_open


def test_right_click_on_empty_space_shows_nothing(panel):
	viewer = build_viewer(panel_service=panel)

	viewer.router.route_click(InteractionEvent(button=BUTTON_SECONDARY, element=_Viewport(hit=None)))

	assert not viewer.context_menu.is_open
	assert panel.calls == []


def test_custom_command_bundle_from_config(panel):
	viewer = build_viewer(
		AppConfig({"customizations": {
			SHOW_CONTEXT_MENU: CommandCustomization(commands=(CommandCall("closeViewerContextMenu"),)),
		}}),
		panel_service=panel,
	)

	viewer.router.route_click(InteractionEvent(button=BUTTON_SECONDARY, element=_Viewport(hit="x")))

	assert panel.calls == []
