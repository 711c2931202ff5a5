# ---------------------------------------------------------------------------
# File: menu_defs.py
# ---------------------------------------------------------------------------
# Description:
#	Context menu definition types for pyezview.
#
# Notes:
#	- MenuDef / MenuItemSpec are declared once at startup and never mutated.
#	- ResolvedMenuItem is built per interaction by the adapter and discarded
#	  when the menu session closes.
#	- A delegating item is a pointer to another MenuDef whose items are spliced
#	  in its place. MenuSet.validate() rejects delegation cycles.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/01/2026	Paul G. LeDuc				Initial coding / release
# 01/09/2026	Paul G. LeDuc				Rework for context menus (selectors, delegation, references)
# 01/10/2026	Paul G. LeDuc				Add ActionKind + ActivationTarget
# 01/12/2026	Paul G. LeDuc				Add MenuSet with cycle validation
# ---------------------------------------------------------------------------

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Iterable, Iterator, Mapping, Optional, Sequence, Union, TypeAlias

from pyezview.app.commands import CommandCall
from pyezview.app.errors import CyclicMenuDefinition, DuplicateMenuId
from pyezview.core.logging import get_app_logger


_log = get_app_logger("menus")


CheckProps: TypeAlias = Mapping[str, Any]
Predicate: TypeAlias = Callable[[CheckProps], bool]
ReferenceTable: TypeAlias = Mapping[str, Any]


class ActionKind(enum.Enum):
	"""
	What activating a menu item does.
	"""
	DEFAULT = "default"				# run the item's command
	SUB_MENU = "sub_menu"			# open another menu at the same anchor
	RUN_COMMANDS = "run_commands"	# run the item's command list


@dataclass(frozen=True, slots=True)
class SessionProps:
	"""
	Properties of the interaction a menu was resolved for.

	check_props:	Values the selectors and check functions look at.
	event:			The interaction event that opened the menu (may be None).
	"""
	check_props: CheckProps = field(default_factory=dict)
	event: Any = None


ActionHandler = Callable[["ResolvedMenuItem", "MenuItemSpec", SessionProps], None]


@dataclass(frozen=True, slots=True)
class ActivationTarget:
	"""
	ActivationTarget

	What an activated item talks to: a way to close the hosting panel and one
	handler per ActionKind.
	"""
	close: Callable[[], None]
	handlers: Mapping[ActionKind, ActionHandler] = field(default_factory=dict)

	def handler_for(self, kind: ActionKind) -> Optional[ActionHandler]:
		return self.handlers.get(kind)


ItemAction = Callable[["ResolvedMenuItem", ActivationTarget], None]


@dataclass(frozen=True, slots=True)
class MenuItemSpec:
	"""
	MenuItemSpec

	id:					Item id (required).
	label:				Optional display label (falls back to the reference text).
	check_function:		Optional predicate; item is skipped when it returns False.
	delegating:			True when this item only points at sub_menu_id.
	sub_menu_id:		Menu spliced in place (delegating) or opened (SUB_MENU).
	command_name:		Command run on DEFAULT activation.
	command_options:	Options passed to command_name.
	context:			Context tag passed with the command.
	action_kind:		Which ActivationTarget handler receives the activation.
	attrs:				Extra item fields; the menu's reference_attribute names one of them.
	commands:			Command calls run on RUN_COMMANDS activation.
	action:				Optional custom activation callable (replaces the default).
	"""
	id: str
	label: Optional[str] = None
	check_function: Optional[Predicate] = None

	delegating: bool = False
	sub_menu_id: Optional[str] = None

	command_name: Optional[str] = None
	command_options: Mapping[str, Any] = field(default_factory=dict)
	context: Optional[str] = None

	action_kind: ActionKind = ActionKind.DEFAULT
	attrs: Mapping[str, Any] = field(default_factory=dict)
	commands: tuple[CommandCall, ...] = ()
	action: Optional[ItemAction] = None

	def __post_init__(self) -> None:
		object.__setattr__(self, "command_options", MappingProxyType(dict(self.command_options)))
		object.__setattr__(self, "attrs", MappingProxyType(dict(self.attrs)))
		object.__setattr__(self, "commands", tuple(self.commands))

	def is_included(self, check_props: CheckProps) -> bool:
		if self.check_function is None:
			return True
		return bool(self.check_function(check_props))


@dataclass(frozen=True, slots=True)
class MenuDef:
	"""
	MenuDef

	id:						Unique menu id.
	items:					Ordered item specs.
	selector:				Optional predicate; a menu without one matches anything.
	reference_attribute:	Optional item attr whose value is a reference table key.
	"""
	id: str
	items: tuple[MenuItemSpec, ...] = ()
	selector: Optional[Predicate] = None
	reference_attribute: Optional[str] = None

	def __post_init__(self) -> None:
		object.__setattr__(self, "items", tuple(self.items))

	def matches(self, check_props: CheckProps) -> bool:
		if self.selector is None:
			return True
		return bool(self.selector(check_props))

	def delegate_ids(self) -> list[str]:
		return [it.sub_menu_id for it in self.items if it.delegating and it.sub_menu_id]


@dataclass(slots=True)
class ResolvedMenuItem:
	"""
	ResolvedMenuItem

	A menu item ready for display and activation.
	"""
	spec: MenuItemSpec
	source: MenuItemSpec
	session_props: SessionProps
	label: Optional[str] = None
	label_ref: Optional[str] = None
	value: Any = None
	element: Any = None
	action: Optional[ItemAction] = None

	@property
	def id(self) -> str:
		return self.spec.id

	@property
	def attrs(self) -> Mapping[str, Any]:
		return self.spec.attrs

	def activate(self, target: ActivationTarget) -> None:
		if self.action is None:
			_log.warning("Menu item %r has no action bound", self.id)
			return
		self.action(self, target)


MenuSource: TypeAlias = Union["MenuSet", Sequence[MenuDef]]


class MenuSet:
	"""
	MenuSet

	Ordered collection of MenuDefs, keyed by id.

	Declaration order matters: selectors are tried in the order menus were
	registered.
	"""

	def __init__(self, menus: Iterable[MenuDef] = ()) -> None:
		self._menus: dict[str, MenuDef] = {}
		for m in menus:
			self.register(m)

	def __iter__(self) -> Iterator[MenuDef]:
		return iter(self._menus.values())

	def __len__(self) -> int:
		return len(self._menus)

	def __contains__(self, menu_id: object) -> bool:
		return menu_id in self._menus

	def register(self, menu: MenuDef) -> None:
		if not menu.id:
			raise ValueError("Menu id must be a non-empty string")
		if menu.id in self._menus:
			raise DuplicateMenuId(menu.id)
		self._menus[menu.id] = menu

	def get(self, menu_id: str) -> Optional[MenuDef]:
		return self._menus.get(menu_id)

	def ids(self) -> list[str]:
		return list(self._menus.keys())

	def validate(self) -> "MenuSet":
		"""
		Check the delegation graph.

		- Missing delegation targets are logged (they resolve to nothing).
		- Cycles raise CyclicMenuDefinition.

		Returns self so definitions can be built as MenuSet([...]).validate().
		"""
		done: set[str] = set()

		def visit(menu_id: str, path: tuple[str, ...]) -> None:
			if menu_id in path:
				start = path.index(menu_id)
				raise CyclicMenuDefinition(path[start:] + (menu_id,))
			if menu_id in done:
				return

			menu = self._menus.get(menu_id)
			if menu is None:
				_log.warning("Menu %r delegates to missing menu %r", path[-1] if path else None, menu_id)
				return

			for sub_id in menu.delegate_ids():
				visit(sub_id, path + (menu_id,))
			done.add(menu_id)

		for menu_id in self._menus:
			visit(menu_id, ())

		return self


def as_menu_list(menus: Optional[MenuSource]) -> list[MenuDef]:
	if menus is None:
		return []
	return list(menus)
