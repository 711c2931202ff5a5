# ---------------------------------------------------------------------------
# File: controller.py
# ---------------------------------------------------------------------------
# Description:
#	ContextMenuController: lifecycle of the floating context menu.
#
# Notes:
#	- One session at a time. Opening while open dismisses the current panel
#	  first (exactly one dismiss, then one show).
#	- Items come from the resolver, placement from the position chain.
#	- Item activation:
#		DEFAULT			-> run the item's command
#		SUB_MENU		-> reopen with the item's sub-menu at the same anchor
#		RUN_COMMANDS	-> run the item's command list
#	- Command args are layered, later layers win:
#		DEFAULT:		item attrs < command_options < check_props < {"refs"}
#		RUN_COMMANDS:	command_options < {"refs"} < check_props
#	- Dispatch errors (UnknownCommand, ContextMismatch) propagate.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/11/2026	Paul G. LeDuc				Initial coding / release
# 01/12/2026	Paul G. LeDuc				Typed session handle + telemetry
# 01/13/2026	Paul G. LeDuc				Reuse the session anchor for sub-menus
# ---------------------------------------------------------------------------

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import Any, Optional, Sequence

from pyezview.app.commands import CommandRegistry
from pyezview.core.logging import get_app_logger
from pyezview.core.telemetry import Telemetry, get_telemetry
from pyezview.menus.menu_defs import (
	ActionKind,
	ActivationTarget,
	CheckProps,
	MenuItemSpec,
	MenuSource,
	ReferenceTable,
	ResolvedMenuItem,
	SessionProps,
)
from pyezview.menus.position import Position, resolve_default_position
from pyezview.menus.resolver import find_menu, get_menu_items
from pyezview.services.panel import PanelRequest, PanelService


_log = get_app_logger("context_menu")

CONTEXT_MENU_ID = "context-menu"


class SessionState(enum.Enum):
	CLOSED = "closed"
	OPEN = "open"


@dataclass(frozen=True, slots=True)
class ContextMenuProps:
	"""
	ContextMenuProps

	- menus:		Menu definitions to choose from.
	- check_props:	Values for selectors/check functions; merged into command args.
	- event:		Triggering interaction event (may be None).
	- menu_id:		Open this menu by id instead of by selector.
	- references:	Reference table for the menus' reference attributes.
	"""
	menus: MenuSource
	check_props: CheckProps = field(default_factory=dict)
	event: Any = None
	menu_id: Optional[str] = None
	references: ReferenceTable = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class MenuSession:
	"""
	Handle for the open context menu.
	"""
	menu_id: Optional[str]
	position: Position
	items: tuple[ResolvedMenuItem, ...]
	props: ContextMenuProps
	viewer_element: Any = None
	canvas_points: Optional[Sequence[Any]] = None


class ContextMenuController:
	"""
	ContextMenuController

	Opens, replaces and closes the context menu panel, and routes item
	activations to the command registry.
	"""

	def __init__(
		self,
		registry: CommandRegistry,
		panel_service: Optional[PanelService] = None,
		*,
		panel_id: str = CONTEXT_MENU_ID,
		telemetry: Optional[Telemetry] = None,
	) -> None:
		self._registry = registry
		self._panel_service = panel_service
		self._panel_id = panel_id
		self._telemetry = telemetry
		self._session: Optional[MenuSession] = None

	# -----------------------------------------------------------------------
	# State
	# -----------------------------------------------------------------------

	@property
	def session(self) -> Optional[MenuSession]:
		return self._session

	@property
	def state(self) -> SessionState:
		return SessionState.OPEN if self._session is not None else SessionState.CLOSED

	@property
	def is_open(self) -> bool:
		return self._session is not None

	def set_panel_service(self, panel_service: Optional[PanelService]) -> None:
		self._panel_service = panel_service

	# -----------------------------------------------------------------------
	# Lifecycle
	# -----------------------------------------------------------------------

	def show_context_menu(
		self,
		props: ContextMenuProps,
		viewer_element: Any = None,
		canvas_points: Optional[Sequence[Any]] = None,
		*,
		anchor: Optional[Position] = None,
	) -> Optional[MenuSession]:
		"""
		Resolve and show a context menu.

		Returns the new session, or None when nothing was shown (no panel
		service, or no menu/items apply).
		"""
		panel = self._panel_service
		if panel is None:
			_log.warning("Unable to show context menu; no panel service available")
			return None

		check_props = props.check_props or {}
		menu = find_menu(props.menus, check_props, props.menu_id)
		items = get_menu_items(check_props, props.event, props.menus, props.references, props.menu_id)

		if self._session is not None:
			self._dismiss()

		if not items:
			_log.debug("No context menu items for menu %s", menu.id if menu else None)
			return None

		position = resolve_default_position(
			canvas_points,
			props.event,
			viewer_element,
			anchor=anchor,
		)

		session = MenuSession(
			menu_id=menu.id if menu else None,
			position=position,
			items=tuple(items),
			props=props,
			viewer_element=viewer_element,
			canvas_points=canvas_points,
		)

		panel.show(PanelRequest(
			id=self._panel_id,
			position=position,
			items=session.items,
			target=self._build_target(session),
			on_close=self.close,
			on_click_outside=self.close,
		))
		self._session = session

		self._tel().event("context_menu.open", {
			"menu_id": session.menu_id,
			"items": len(session.items),
		})
		return session

	def close(self) -> None:
		"""
		Dismiss the open context menu (no-op when closed).
		"""
		if self._session is None:
			return
		self._dismiss()

	def _dismiss(self) -> None:
		session = self._session
		self._session = None

		if self._panel_service is not None:
			self._panel_service.dismiss(self._panel_id)

		if session is not None:
			self._tel().event("context_menu.close", {"menu_id": session.menu_id})

	# -----------------------------------------------------------------------
	# Activation
	# -----------------------------------------------------------------------

	def _build_target(self, session: MenuSession) -> ActivationTarget:
		def on_default(item: ResolvedMenuItem, spec: MenuItemSpec, sub: SessionProps) -> None:
			self._on_default(session, item, spec, sub)

		def on_sub_menu(item: ResolvedMenuItem, spec: MenuItemSpec, sub: SessionProps) -> None:
			self._on_sub_menu(session, item, spec)

		def on_run_commands(item: ResolvedMenuItem, spec: MenuItemSpec, sub: SessionProps) -> None:
			self._on_run_commands(session, item, spec, sub)

		return ActivationTarget(
			close=self.close,
			handlers={
				ActionKind.DEFAULT: on_default,
				ActionKind.SUB_MENU: on_sub_menu,
				ActionKind.RUN_COMMANDS: on_run_commands,
			},
		)

	def _on_default(
		self,
		session: MenuSession,
		item: ResolvedMenuItem,
		spec: MenuItemSpec,
		sub: SessionProps,
	) -> Any:
		if not spec.command_name:
			_log.debug("Menu item %r has no command", spec.id)
			return None

		self._track_activation(session, item)

		args: dict[str, Any] = dict(spec.attrs)
		args.update(spec.command_options)
		args.update(sub.check_props)
		args["refs"] = session.props.references

		return self._registry.run(spec.command_name, args, spec.context)

	def _on_sub_menu(self, session: MenuSession, item: ResolvedMenuItem, spec: MenuItemSpec) -> None:
		if not spec.sub_menu_id:
			_log.warning("No sub-menu defined for menu item %r", spec.id)
			return

		self._track_activation(session, item)

		self.show_context_menu(
			replace(session.props, menu_id=spec.sub_menu_id),
			session.viewer_element,
			session.canvas_points,
			anchor=session.position,
		)

	def _on_run_commands(
		self,
		session: MenuSession,
		item: ResolvedMenuItem,
		spec: MenuItemSpec,
		sub: SessionProps,
	) -> list[Any]:
		self._track_activation(session, item)

		extra: dict[str, Any] = {"refs": session.props.references}
		extra.update(sub.check_props)

		results: list[Any] = []
		for call in spec.commands:
			args = CommandRegistry.merge_options(call.command_options, extra)
			results.append(self._registry.run(call.command_name, args, call.context))
		return results

	# -----------------------------------------------------------------------
	# Internal helpers
	# -----------------------------------------------------------------------

	def _track_activation(self, session: MenuSession, item: ResolvedMenuItem) -> None:
		self._tel().event("context_menu.activate", {
			"menu_id": session.menu_id,
			"item_id": item.id,
			"action": item.spec.action_kind.value,
		})

	def _tel(self) -> Telemetry:
		return self._telemetry or get_telemetry()
