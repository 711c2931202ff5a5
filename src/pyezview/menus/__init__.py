# ---------------------------------------------------------------------------
# File: menus/__init__.py
# ---------------------------------------------------------------------------
# Description:
#	Public context menu package surface for pyezview.
#
# Notes:
#	- Uses lazy exports (PEP 562) so services can import menu_defs without
#	  pulling in the controller.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	# Definitions
	"ActionKind", "ActivationTarget", "MenuDef", "MenuItemSpec", "MenuSet",
	"ResolvedMenuItem", "SessionProps",

	# Resolution
	"Position", "resolve_position", "resolve_default_position",
	"adapt_item", "find_menu", "get_menu_items",

	# Session
	"CONTEXT_MENU_ID", "ContextMenuController", "ContextMenuProps", "MenuSession",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"ActionKind": ("pyezview.menus.menu_defs", "ActionKind"),
	"ActivationTarget": ("pyezview.menus.menu_defs", "ActivationTarget"),
	"MenuDef": ("pyezview.menus.menu_defs", "MenuDef"),
	"MenuItemSpec": ("pyezview.menus.menu_defs", "MenuItemSpec"),
	"MenuSet": ("pyezview.menus.menu_defs", "MenuSet"),
	"ResolvedMenuItem": ("pyezview.menus.menu_defs", "ResolvedMenuItem"),
	"SessionProps": ("pyezview.menus.menu_defs", "SessionProps"),

	"Position": ("pyezview.menus.position", "Position"),
	"resolve_position": ("pyezview.menus.position", "resolve_position"),
	"resolve_default_position": ("pyezview.menus.position", "resolve_default_position"),
	"adapt_item": ("pyezview.menus.adapter", "adapt_item"),
	"find_menu": ("pyezview.menus.resolver", "find_menu"),
	"get_menu_items": ("pyezview.menus.resolver", "get_menu_items"),

	"CONTEXT_MENU_ID": ("pyezview.menus.controller", "CONTEXT_MENU_ID"),
	"ContextMenuController": ("pyezview.menus.controller", "ContextMenuController"),
	"ContextMenuProps": ("pyezview.menus.controller", "ContextMenuProps"),
	"MenuSession": ("pyezview.menus.controller", "MenuSession"),
}

def __getattr__(name: str) -> Any:
	try:
		mod_name, attr_name = _EXPORTS[name]
	except KeyError as ex:
		raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from ex

	import importlib
	mod = importlib.import_module(mod_name)
	return getattr(mod, attr_name)

def __dir__() -> list[str]:
	return sorted(set(list(globals().keys()) + list(__all__)))

if TYPE_CHECKING:
	from pyezview.menus.menu_defs import (
		ActionKind, ActivationTarget, MenuDef, MenuItemSpec, MenuSet, ResolvedMenuItem, SessionProps,
	)
	from pyezview.menus.position import Position, resolve_position, resolve_default_position
	from pyezview.menus.adapter import adapt_item
	from pyezview.menus.resolver import find_menu, get_menu_items
	from pyezview.menus.controller import (
		CONTEXT_MENU_ID, ContextMenuController, ContextMenuProps, MenuSession,
	)
