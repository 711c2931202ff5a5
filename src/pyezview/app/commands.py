# ---------------------------------------------------------------------------
# File: commands.py
# ---------------------------------------------------------------------------
# Description:
#	Command definitions + registry for pyezview.
#
# Notes:
#	- Commands are the single invocation spine for viewer actions (context menu
#	  items, clicks, other commands).
#	- A command binds a handler to default options and, optionally, to the set
#	  of context tags it may be run from.
#	- run() merges default options with call-time args into a new dict
#	  (call-time wins) and calls handler(args, ctx) synchronously.
#	- UnknownCommand / ContextMismatch always propagate to the caller.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 12/30/2025	Paul G. LeDuc				Initial coding / release
# 12/30/2025	Paul G. LeDuc				Add Command + CommandRegistry
# 01/09/2026	Paul G. LeDuc				Named commands with default options + context tags
# 01/10/2026	Paul G. LeDuc				Add CommandCall / CommandCustomization + run_commands
# 01/11/2026	Paul G. LeDuc				Add telemetry for command runs
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping, Optional

from pyezview.app.errors import ContextMismatch, UnknownCommand
from pyezview.core.logging import get_app_logger
from pyezview.core.telemetry import Telemetry, get_telemetry


_log = get_app_logger("commands")


@dataclass(frozen=True, slots=True)
class CommandContext:
	"""
	CommandContext

	Passed to every handler alongside the merged args.

	- tag:		Context tag the command was run with (may be None).
	- registry:	Registry that dispatched the command (for handlers that chain commands).
	- services:	Named collaborators (panel, measurements, viewport, ...).
	"""
	tag: Optional[str] = None
	registry: Optional["CommandRegistry"] = None
	services: Mapping[str, Any] = field(default_factory=dict)

	def service(self, name: str, default: Any = None) -> Any:
		return self.services.get(name, default)


CommandHandler = Callable[[dict[str, Any], CommandContext], Any]


@dataclass(frozen=True, slots=True)
class Command:
	"""
	Command

	Represents a named action that can be run by the registry.

	- name:				Unique name (required).
	- handler:			Callable executed as handler(args, ctx).
	- default_options:	Options merged under the call-time args.
	- allowed_contexts:	Context tags this command accepts (empty = any).
	- description:		Optional help text.
	"""
	name: str
	handler: CommandHandler

	default_options: Mapping[str, Any] = field(default_factory=dict)
	allowed_contexts: frozenset[str] = field(default_factory=frozenset)
	description: Optional[str] = None

	def __post_init__(self) -> None:
		# Snapshot caller-owned containers so the definition stays immutable.
		object.__setattr__(self, "default_options", MappingProxyType(dict(self.default_options)))
		object.__setattr__(self, "allowed_contexts", frozenset(self.allowed_contexts))

	def allows(self, context: Optional[str]) -> bool:
		if context is None or not self.allowed_contexts:
			return True
		return context in self.allowed_contexts


@dataclass(frozen=True, slots=True)
class CommandCall:
	"""
	One command invocation inside a CommandCustomization.
	"""
	command_name: str
	command_options: Mapping[str, Any] = field(default_factory=dict)
	context: Optional[str] = None

	@classmethod
	def from_mapping(cls, data: Mapping[str, Any]) -> "CommandCall":
		"""
		Accept both snake_case and the camelCase keys used in mode configs.
		"""
		name = data.get("command_name", data.get("commandName"))
		if not name:
			raise ValueError(f"Command call without a command name: {dict(data)!r}")
		options = data.get("command_options", data.get("commandOptions")) or {}
		return cls(command_name=str(name), command_options=dict(options), context=data.get("context"))


@dataclass(frozen=True, slots=True)
class CommandCustomization:
	"""
	An ordered bundle of command calls, selected per mode for a generic
	trigger such as a right click.
	"""
	commands: tuple[CommandCall, ...] = ()

	@classmethod
	def from_value(cls, value: Any) -> "CommandCustomization":
		if isinstance(value, CommandCustomization):
			return value
		if isinstance(value, CommandCall):
			return cls(commands=(value,))
		if isinstance(value, Mapping):
			calls = value.get("commands", ())
			return cls(commands=tuple(
				c if isinstance(c, CommandCall) else CommandCall.from_mapping(c)
				for c in calls
			))
		raise TypeError(f"Cannot build a CommandCustomization from {type(value).__name__}")


class CommandRegistry:
	"""
	CommandRegistry

	Stores commands by name and runs them.

	Built once at startup; not mutated while interactions are being handled.
	"""

	def __init__(
		self,
		*,
		services: Optional[Mapping[str, Any]] = None,
		telemetry: Optional[Telemetry] = None,
	) -> None:
		self._commands: dict[str, Command] = {}
		self._services: dict[str, Any] = dict(services or {})
		self._telemetry = telemetry

	# -----------------------------------------------------------------------
	# Registration
	# -----------------------------------------------------------------------

	def register(self, command: Command) -> None:
		if not command.name:
			raise ValueError("Command name must be a non-empty string")

		if command.name in self._commands:
			# Last writer wins; nothing should depend on it.
			_log.warning("Command %r re-registered; replacing previous definition", command.name)

		self._commands[command.name] = command

	def define(
		self,
		name: str,
		handler: CommandHandler,
		*,
		default_options: Optional[Mapping[str, Any]] = None,
		allowed_contexts: Iterable[str] = (),
		description: Optional[str] = None,
	) -> Command:
		"""
		Build and register a Command in one call.
		"""
		command = Command(
			name=name,
			handler=handler,
			default_options=default_options or {},
			allowed_contexts=frozenset(allowed_contexts),
			description=description,
		)
		self.register(command)
		return command

	def unregister(self, name: str) -> None:
		self._commands.pop(name, None)

	def has(self, name: str) -> bool:
		return name in self._commands

	def get(self, name: str) -> Optional[Command]:
		return self._commands.get(name)

	def names(self) -> list[str]:
		return list(self._commands.keys())

	# -----------------------------------------------------------------------
	# Services
	# -----------------------------------------------------------------------

	@property
	def services(self) -> Mapping[str, Any]:
		return MappingProxyType(self._services)

	def set_service(self, name: str, service: Any) -> None:
		self._services[name] = service

	# -----------------------------------------------------------------------
	# Dispatch
	# -----------------------------------------------------------------------

	@staticmethod
	def merge_options(
		defaults: Mapping[str, Any],
		call_args: Optional[Mapping[str, Any]],
	) -> dict[str, Any]:
		"""
		Shallow merge into a new dict; call-time values override defaults.
		"""
		merged = dict(defaults)
		if call_args:
			merged.update(call_args)
		return merged

	def run(
		self,
		name: str,
		call_args: Optional[Mapping[str, Any]] = None,
		context: Optional[str] = None,
	) -> Any:
		"""
		Run a command by name.

		Raises:
			UnknownCommand:		name is not registered.
			ContextMismatch:	context is given and not allowed by the command.
		"""
		command = self._commands.get(name)
		if command is None:
			raise UnknownCommand(name)

		if not command.allows(context):
			raise ContextMismatch(name, str(context), command.allowed_contexts)

		args = self.merge_options(command.default_options, call_args)
		ctx = CommandContext(tag=context, registry=self, services=self.services)

		telemetry = self._telemetry or get_telemetry()
		telemetry.event("command.run", {"command": name, "context": context})

		_log.debug("Running command %s (context=%s)", name, context)
		with telemetry.timer("command.duration_ms", {"command": name}):
			return command.handler(args, ctx)

	def run_commands(
		self,
		customization: Any,
		extra_args: Optional[Mapping[str, Any]] = None,
	) -> list[Any]:
		"""
		Run every call of a CommandCustomization in order.

		Each call gets {**call.command_options, **extra_args}. Failures propagate
		and stop the remaining calls.
		"""
		bundle = CommandCustomization.from_value(customization)
		results: list[Any] = []
		for call in bundle.commands:
			args = self.merge_options(call.command_options, extra_args)
			results.append(self.run(call.command_name, args, call.context))
		return results
