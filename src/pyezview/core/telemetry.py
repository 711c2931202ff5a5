# ---------------------------------------------------------------------------
# File: telemetry.py
# Description:
#	Lightweight telemetry subsystem for pyezview.
#
#	Provides a small facade for emitting:
#	  - events		(context_menu.open, command.run, ...)
#	  - counters	(interaction.click, ...)
#	  - timers		(command.duration_ms)
#
#	Backends are implemented as "sinks".
#
# Notes:
#	- Telemetry is optional and safe to call even when disabled.
#	- Default sink is NullSink (no-op).
#	- MemorySink is what the unit tests assert against.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/08/2026	Paul G. LeDuc				Initial coding / release
# 01/10/2026	Paul G. LeDuc				Accept AppConfig in init_telemetry, add MemorySink.named
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol


# ---------------------------------------------------------------------------
# Telemetry data models
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TelemetryEvent:
	name: str
	timestamp: float
	attrs: Dict[str, Any]


@dataclass(frozen=True, slots=True)
class TelemetryMetric:
	name: str
	value: float
	attrs: Dict[str, Any]


# ---------------------------------------------------------------------------
# Sink protocol
# ---------------------------------------------------------------------------

class TelemetrySink(Protocol):
	def emit_event(self, event: TelemetryEvent) -> None: ...
	def emit_metric(self, metric: TelemetryMetric) -> None: ...


# ---------------------------------------------------------------------------
# Sink implementations
# ---------------------------------------------------------------------------

class NullSink:
	"""
	No-op telemetry sink.
	"""

	def emit_event(self, event: TelemetryEvent) -> None:
		return

	def emit_metric(self, metric: TelemetryMetric) -> None:
		return


class LogSink:
	"""
	Telemetry sink that writes events and metrics to a logger.
	"""

	def __init__(self, logger: logging.Logger) -> None:
		self._log = logger

	def emit_event(self, event: TelemetryEvent) -> None:
		self._log.info("telemetry.event name=%s attrs=%s", event.name, event.attrs)

	def emit_metric(self, metric: TelemetryMetric) -> None:
		self._log.info(
			"telemetry.metric name=%s value=%s attrs=%s",
			metric.name,
			metric.value,
			metric.attrs,
		)


class MemorySink:
	"""
	In-memory telemetry sink for testing.
	"""

	def __init__(self) -> None:
		self.events: list[TelemetryEvent] = []
		self.metrics: list[TelemetryMetric] = []

	def emit_event(self, event: TelemetryEvent) -> None:
		self.events.append(event)

	def emit_metric(self, metric: TelemetryMetric) -> None:
		self.metrics.append(metric)

	def named(self, name: str) -> list[TelemetryEvent]:
		return [e for e in self.events if e.name == name]

	def clear(self) -> None:
		self.events.clear()
		self.metrics.clear()


# ---------------------------------------------------------------------------
# Telemetry facade
# ---------------------------------------------------------------------------

class Telemetry:
	"""
	Telemetry facade shared by the command registry, the context-menu
	controller and the interaction router.
	"""

	def __init__(self, enabled: bool, sink: TelemetrySink) -> None:
		self._enabled = enabled
		self._sink = sink

	@property
	def enabled(self) -> bool:
		return self._enabled

	def event(self, name: str, attrs: Optional[Dict[str, Any]] = None) -> None:
		if not self._enabled:
			return

		self._sink.emit_event(TelemetryEvent(
			name=name,
			timestamp=time.time(),
			attrs=attrs or {},
		))

	def counter(
		self,
		name: str,
		value: int = 1,
		attrs: Optional[Dict[str, Any]] = None,
	) -> None:
		if not self._enabled:
			return

		self._sink.emit_metric(TelemetryMetric(
			name=name,
			value=float(value),
			attrs=attrs or {},
		))

	def timer(self, name: str, attrs: Optional[Dict[str, Any]] = None) -> "_TelemetryTimer":
		return _TelemetryTimer(self, name, attrs or {})


class _TelemetryTimer:
	"""
	Context manager reporting elapsed milliseconds as a counter.
	"""

	def __init__(self, telemetry: Telemetry, name: str, attrs: Dict[str, Any]) -> None:
		self._telemetry = telemetry
		self._name = name
		self._attrs = attrs
		self._start: float = 0.0

	def __enter__(self) -> "_TelemetryTimer":
		self._start = time.perf_counter()
		return self

	def __exit__(self, exc_type, exc, tb) -> None:
		elapsed_ms = (time.perf_counter() - self._start) * 1000.0
		attrs = dict(self._attrs)
		if exc_type is not None:
			attrs["error"] = exc_type.__name__
		self._telemetry.counter(self._name, value=int(elapsed_ms), attrs=attrs)


# ---------------------------------------------------------------------------
# Global helpers
# ---------------------------------------------------------------------------

_telemetry: Optional[Telemetry] = None


def init_telemetry(cfg: Any, logger: Optional[logging.Logger] = None) -> Telemetry:
	"""
	Initialize and return the global telemetry instance.

	Expected cfg keys:
		telemetry_enabled:	bool
		telemetry_sink:		"null" | "log"
	"""
	global _telemetry

	enabled = bool(cfg.get("telemetry_enabled", False))
	sink_name = cfg.get("telemetry_sink", "null")

	if not enabled:
		_telemetry = Telemetry(False, NullSink())
		return _telemetry

	sink: TelemetrySink
	if sink_name == "log" and logger is not None:
		sink = LogSink(logger)
	else:
		sink = NullSink()

	_telemetry = Telemetry(enabled=True, sink=sink)
	return _telemetry


def get_telemetry() -> Telemetry:
	"""
	Return the global telemetry instance (disabled until init_telemetry runs).
	"""
	global _telemetry

	if _telemetry is None:
		_telemetry = Telemetry(False, NullSink())

	return _telemetry
