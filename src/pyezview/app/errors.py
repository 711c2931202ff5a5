# ---------------------------------------------------------------------------
# File: errors.py
# ---------------------------------------------------------------------------
# Description:
#	Exception types for command dispatch and menu definitions.
#
# Notes:
#	- Only dispatch failures (UnknownCommand, ContextMismatch) reach callers at
#	  interaction time. Menu resolution anomalies are logged, never raised.
#	- Menu definition errors are raised while menus are being registered.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/09/2026	Paul G. LeDuc				Initial coding / release
# 01/12/2026	Paul G. LeDuc				Add CyclicMenuDefinition path reporting
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Iterable, Optional


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

class CommandError(Exception):
	"""
	Base class for command dispatch failures.
	"""


class UnknownCommand(CommandError, KeyError):
	"""
	Raised when running a command name that was never registered.

	Subclasses KeyError so `except KeyError` callers keep working.
	"""

	def __init__(self, name: str) -> None:
		super().__init__(f"Unknown command: {name!r}")
		self.name = name

	def __str__(self) -> str:
		return str(self.args[0])


class ContextMismatch(CommandError):
	"""
	Raised when a command is run from a context tag it does not allow.
	"""

	def __init__(self, name: str, context: str, allowed: Iterable[str]) -> None:
		self.name = name
		self.context = context
		self.allowed = tuple(sorted(allowed))
		super().__init__(
			f"Command {name!r} is not available in context {context!r} "
			f"(allowed: {', '.join(self.allowed)})"
		)


# ---------------------------------------------------------------------------
# Menu definitions
# ---------------------------------------------------------------------------

class MenuDefinitionError(ValueError):
	"""
	Base class for invalid menu definitions.
	"""


class DuplicateMenuId(MenuDefinitionError):
	def __init__(self, menu_id: str) -> None:
		super().__init__(f"Duplicate menu id: {menu_id!r}")
		self.menu_id = menu_id


class CyclicMenuDefinition(MenuDefinitionError):
	"""
	Raised when delegating items form a cycle between menus.

	path:	menu ids in delegation order, ending with the repeated id.
	"""

	def __init__(self, path: Iterable[str], detail: Optional[str] = None) -> None:
		self.path = tuple(path)
		msg = "Cyclic menu delegation: " + " -> ".join(self.path)
		if detail:
			msg = f"{msg} ({detail})"
		super().__init__(msg)
