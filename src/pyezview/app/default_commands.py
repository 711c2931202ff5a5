# ---------------------------------------------------------------------------
# File: default_commands.py
# ---------------------------------------------------------------------------
# Description:
#	Default viewer command definitions for pyezview.
#
# Notes:
#	- Handlers reach collaborators through CommandContext.services (see the
#	  SERVICE_* names below); the app registers them on the registry.
#	- Measurement commands are scoped to the VIEWER context tag.
#	- setFinding / setSite share one handler and differ only in the default
#	  "measurementKey" option.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 12/31/2025	Paul G. LeDuc				Initial coding / release
# 01/12/2026	Paul G. LeDuc				Replace app commands with viewer context menu commands
# 01/13/2026	Paul G. LeDuc				Add useSelectedAnnotation / allowedSelectedTools
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import replace
from typing import Any, Callable, Optional

from pyezview.app.commands import CommandContext, CommandRegistry
from pyezview.app.default_menus import (
	VIEWER_CONTEXT,
	build_viewer_context_menu,
)
from pyezview.core.logging import get_app_logger
from pyezview.menus.adapter import reference_text
from pyezview.menus.controller import ContextMenuController, ContextMenuProps, MenuSession
from pyezview.services.customization import ModeCustomizationService
from pyezview.services.measurements import Measurement, MeasurementService


_log = get_app_logger("commands")


SERVICE_MEASUREMENTS = "measurements"
SERVICE_CONTEXT_MENU = "context_menu"
SERVICE_CUSTOMIZATIONS = "customizations"
SERVICE_ACTIVE_VIEWPORT = "active_viewport"		# Callable[[], ViewportLike | None]
SERVICE_LABEL_PROMPT = "label_prompt"			# Callable[[Measurement], str | None]

MEASUREMENT_KEYS: frozenset[str] = frozenset({"finding", "site"})


def _require(ctx: CommandContext, name: str) -> Any:
	service = ctx.service(name)
	if service is None:
		raise RuntimeError(f"Service {name!r} is not registered")
	return service


def _active_viewport(ctx: CommandContext) -> Any:
	provider: Optional[Callable[[], Any]] = ctx.service(SERVICE_ACTIVE_VIEWPORT)
	return provider() if provider is not None else None


def register_viewer_commands(registry: CommandRegistry) -> None:

	def _show_viewer_context_menu(args: dict[str, Any], ctx: CommandContext) -> Optional[MenuSession]:
		controller: ContextMenuController = _require(ctx, SERVICE_CONTEXT_MENU)
		options = dict(args)
		event = options.get("event")

		element = _active_viewport(ctx)
		if element is None and event is not None:
			element = getattr(event, "element", None)

		menu_name = options.get("menuName")
		if menu_name:
			customizations: Optional[ModeCustomizationService] = ctx.service(SERVICE_CUSTOMIZATIONS)
			if customizations is not None:
				value = customizations.get(menu_name, None)
			else:
				value = None
			if value is None:
				value = build_viewer_context_menu()
			options.update(value)

		nearby = options.get("nearbyToolData")
		if options.get("useSelectedAnnotation") and nearby is None:
			measurements: MeasurementService = _require(ctx, SERVICE_MEASUREMENTS)
			selected = measurements.selected()
			allowed = options.get("allowedSelectedTools")
			if allowed and getattr(selected, "tool_name", None) not in allowed:
				return None
			nearby = selected

		menus = options.get("menus")
		if menus is None:
			_log.warning("No menus for context menu %r", menu_name)
			return None

		check_props = {
			"toolName": getattr(nearby, "tool_name", None),
			"value": nearby,
			"uid": getattr(nearby, "uid", None),
			"nearbyToolData": nearby,
		}
		canvas_points = list(getattr(nearby, "points", ()) or ())

		return controller.show_context_menu(
			ContextMenuProps(
				menus=menus,
				check_props=check_props,
				event=event,
				menu_id=options.get("menuId"),
				references=options.get("references") or options.get("refs") or {},
			),
			element,
			canvas_points,
		)

	def _close_viewer_context_menu(args: dict[str, Any], ctx: CommandContext) -> None:
		controller: ContextMenuController = _require(ctx, SERVICE_CONTEXT_MENU)
		controller.close()

	def _get_nearby_tool_data(args: dict[str, Any], ctx: CommandContext) -> Any:
		nearby = args.get("nearbyToolData")
		if nearby is not None:
			return nearby

		element = args.get("element")
		if element is None:
			return None
		return element.find_nearby_object(args.get("canvasCoordinates"))

	def _delete_measurement(args: dict[str, Any], ctx: CommandContext) -> None:
		uid = args.get("uid")
		if uid:
			measurements: MeasurementService = _require(ctx, SERVICE_MEASUREMENTS)
			measurements.remove(uid)

	def _set_label(args: dict[str, Any], ctx: CommandContext) -> None:
		measurements: MeasurementService = _require(ctx, SERVICE_MEASUREMENTS)
		measurement = measurements.get(args.get("uid") or "")
		if measurement is None:
			_log.warning("setLabel: no measurement %r", args.get("uid"))
			return

		prompt: Optional[Callable[[Measurement], Optional[str]]] = ctx.service(SERVICE_LABEL_PROMPT)
		if prompt is None:
			_log.warning("setLabel: no label prompt available")
			return

		label = prompt(measurement)
		if label is None:
			# Cancelled
			return

		measurements.update(measurement.uid, replace(measurement, label=label))

	def _update_measurement(args: dict[str, Any], ctx: CommandContext) -> None:
		measurements: MeasurementService = _require(ctx, SERVICE_MEASUREMENTS)
		key = args.get("measurementKey", "finding")
		if key not in MEASUREMENT_KEYS:
			raise ValueError(f"Unsupported measurement key: {key!r}")

		measurement = measurements.get(args.get("uid") or "")
		if measurement is None:
			_log.warning("updateMeasurement: no measurement %r", args.get("uid"))
			return

		code = args.get("code")
		updated = replace(measurement, label=reference_text(code) or "", **{key: code})
		measurements.update(measurement.uid, updated)

	registry.define(
		"showViewerContextMenu",
		_show_viewer_context_menu,
		description="Show the viewer context menu for the current interaction.",
	)
	registry.define(
		"closeViewerContextMenu",
		_close_viewer_context_menu,
		description="Close any open viewer context menu.",
	)
	registry.define(
		"getNearbyToolData",
		_get_nearby_tool_data,
		allowed_contexts=(VIEWER_CONTEXT,),
		description="Find the interactive object near a canvas point.",
	)
	registry.define(
		"deleteMeasurement",
		_delete_measurement,
		allowed_contexts=(VIEWER_CONTEXT,),
		description="Delete a measurement.",
	)
	registry.define(
		"setLabel",
		_set_label,
		allowed_contexts=(VIEWER_CONTEXT,),
		description="Prompt for and set a measurement label.",
	)
	registry.define(
		"setFinding",
		_update_measurement,
		default_options={"measurementKey": "finding"},
		allowed_contexts=(VIEWER_CONTEXT,),
		description="Set the coded finding of a measurement.",
	)
	registry.define(
		"setSite",
		_update_measurement,
		default_options={"measurementKey": "site"},
		allowed_contexts=(VIEWER_CONTEXT,),
		description="Set the coded site of a measurement.",
	)
