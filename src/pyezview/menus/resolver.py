# ---------------------------------------------------------------------------
# File: resolver.py
# ---------------------------------------------------------------------------
# Description:
#	Menu resolution: choose a menu for an interaction and flatten its items.
#
# Notes:
#	- find_menu() is pure: same menus/check props/menu id -> same menu.
#	- With a menu id, lookup is by id only. Without one, the first menu whose
#	  selector matches (or that has no selector) wins.
#	- Delegating items are expanded depth-first at their declaration point; the
#	  returned list never contains delegating items.
#	- Resolution anomalies are logged and degrade to fewer items. Delegation
#	  cycles raise CyclicMenuDefinition.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/10/2026	Paul G. LeDuc				Initial coding / release
# 01/12/2026	Paul G. LeDuc				Detect delegation cycles during resolution
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Callable, Optional

from pyezview.app.errors import CyclicMenuDefinition
from pyezview.core.logging import get_app_logger
from pyezview.menus.adapter import adapt_item
from pyezview.menus.menu_defs import (
	CheckProps,
	MenuDef,
	MenuSet,
	MenuSource,
	ReferenceTable,
	ResolvedMenuItem,
	SessionProps,
	as_menu_list,
)


_log = get_app_logger("menus")


def find_menu_by_id(menus: Optional[MenuSource], menu_id: Optional[str]) -> Optional[MenuDef]:
	if not menu_id or menus is None:
		return None
	if isinstance(menus, MenuSet):
		return menus.get(menu_id)
	for menu in menus:
		if menu.id == menu_id:
			return menu
	return None


def find_menu_default(menus: Optional[MenuSource], check_props: CheckProps) -> Optional[MenuDef]:
	if menus is None:
		return None
	for menu in menus:
		if menu.matches(check_props):
			return menu
	return None


def find_menu(
	menus: Optional[MenuSource],
	check_props: CheckProps,
	menu_id_filter: Optional[str] = None,
) -> Optional[MenuDef]:
	"""
	Choose the menu for an interaction.

	Candidates, first hit wins:
		1) menu_id_filter (when given, no other candidate is tried)
		2) first menu whose selector matches check_props
	"""
	finders: list[Callable[[], Optional[MenuDef]]]
	if menu_id_filter:
		finders = [lambda: find_menu_by_id(menus, menu_id_filter)]
	else:
		finders = [lambda: find_menu_default(menus, check_props)]

	menu: Optional[MenuDef] = None
	for find in finders:
		menu = find()
		if menu is not None:
			break

	_log.debug("Menu chosen: %s", menu.id if menu else "NONE")
	return menu


def get_menu_items(
	check_props: Optional[CheckProps],
	event: Any,
	menus: Optional[MenuSource],
	references: Optional[ReferenceTable] = None,
	menu_id_filter: Optional[str] = None,
) -> Optional[list[ResolvedMenuItem]]:
	"""
	Resolve the items to show for an interaction.

	Returns:
		None when no menu applies ("show nothing"), otherwise the flattened items.

	Raises:
		CyclicMenuDefinition: delegating items loop back to a menu being expanded.
	"""
	props: CheckProps = check_props or {}
	session_props = SessionProps(check_props=props, event=event)
	return _resolve(session_props, as_menu_list(menus), references, menu_id_filter, ())


def _resolve(
	session_props: SessionProps,
	menus: list[MenuDef],
	references: Optional[ReferenceTable],
	menu_id_filter: Optional[str],
	path: tuple[str, ...],
) -> Optional[list[ResolvedMenuItem]]:
	check_props = session_props.check_props

	menu = find_menu(menus, check_props, menu_id_filter)
	if menu is None:
		return None

	if menu.id in path:
		raise CyclicMenuDefinition(path + (menu.id,))

	if not menu.items:
		_log.warning("Menu %r defines no items", menu.id)
		return []

	path = path + (menu.id,)
	out: list[ResolvedMenuItem] = []

	for item in menu.items:
		if not item.is_included(check_props):
			continue

		if item.delegating:
			sub_items = None
			if item.sub_menu_id:
				sub_items = _resolve(session_props, menus, references, item.sub_menu_id, path)
			if sub_items is None:
				_log.warning(
					"Delegating item %r in menu %r points at missing menu %r",
					item.id,
					menu.id,
					item.sub_menu_id,
				)
				continue
			out.extend(sub_items)
			continue

		out.append(adapt_item(menu.reference_attribute, item, session_props, references))

	return out
