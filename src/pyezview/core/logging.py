# ---------------------------------------------------------------------------
# File: logging.py
# ---------------------------------------------------------------------------
# Description:
#	Core logging helpers for pyezview (stdlib logging).
#
# Notes:
#	- Menu resolution anomalies (missing sub-menus, missing references, items
#	  without an action handler) are reported here rather than raised.
#	- Safe to call before any Tk window exists.
#	- Idempotent initialization (won't duplicate handlers).
#
#	Supported cfg keys (dotted key wins over the flat alias):
#	- Level:		"logging.level", "log_level"			(default: "INFO")
#	- Console:		"logging.console", "log_console"		(default: True)
#	- File:			"logging.file", "log_file"				(default: None)
#	- File mode:	"logging.file_mode", "log_file_mode"	(default: "a")
#	- Root reset:	"logging.reset_root", "log_reset_root"	(default: True)
#	- Format:		"logging.format", "log_format"
#	- Date format:	"logging.datefmt", "log_datefmt"		(default: "%Y-%m-%d %H:%M:%S")
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/08/2026	Paul G. LeDuc				Initial coding / release
# 01/09/2026	Paul G. LeDuc				Add menu/command logger namespaces
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any
import logging
import os


APP_LOGGER_NAME = "pyezview.app"

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


# ---------------------------------------------------------------------------
# Module-scoped state (idempotent init)
# ---------------------------------------------------------------------------

_INITIALIZED: bool = False
_CONFIG_SIGNATURE: tuple[Any, ...] | None = None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def get_logger(name: str) -> logging.Logger:
	"""
	Return a logger by explicit name.
	"""
	return logging.getLogger(name)


def get_app_logger(component: str | None = None) -> logging.Logger:
	"""
	Return an application-scoped logger.

	Examples:
		get_app_logger()				-> pyezview.app
		get_app_logger("menus")			-> pyezview.app.menus
		get_app_logger("commands")		-> pyezview.app.commands
	"""
	if component:
		return logging.getLogger(f"{APP_LOGGER_NAME}.{component}")
	return logging.getLogger(APP_LOGGER_NAME)


def init_logging(cfg: Any | None = None) -> None:
	"""
	Initialize stdlib logging for pyezview.

	Reconfiguration only happens when the resolved settings change, so the
	viewer and the tests can both call this freely.

	Args:
		cfg:
			Anything with cfg.get(key, default) (e.g., AppConfig) or a dict-like.
	"""
	global _INITIALIZED, _CONFIG_SIGNATURE

	level = _coerce_level(_setting(cfg, "level", "INFO"))
	console_enabled = bool(_setting(cfg, "console", True))
	log_file = _setting(cfg, "file", None)
	file_mode = _coerce_file_mode(_setting(cfg, "file_mode", "a"))
	reset_root = bool(_setting(cfg, "reset_root", True))
	fmt = str(_setting(cfg, "format", None) or DEFAULT_FORMAT)
	datefmt = str(_setting(cfg, "datefmt", DEFAULT_DATEFMT))

	log_file = str(log_file) if log_file else None

	signature: tuple[Any, ...] = (
		level,
		console_enabled,
		log_file,
		file_mode,
		reset_root,
		fmt,
		datefmt,
	)

	if _INITIALIZED and _CONFIG_SIGNATURE == signature:
		return

	_configure_root_logger(
		level=level,
		console_enabled=console_enabled,
		log_file=log_file,
		file_mode=file_mode,
		fmt=fmt,
		datefmt=datefmt,
		reset_root=reset_root,
	)

	_INITIALIZED = True
	_CONFIG_SIGNATURE = signature


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------

def _setting(cfg: Any | None, name: str, default: Any) -> Any:
	"""
	Look up "logging.<name>" first, then the flat "log_<name>" alias.
	"""
	value = _cfg_get(cfg, f"logging.{name}", None)
	if value is None:
		value = _cfg_get(cfg, f"log_{name}", default)
	return value


def _cfg_get(cfg: Any | None, key: str, default: Any = None) -> Any:
	"""
	Best-effort config getter.

	Supports:
	- cfg.get(key, default)
	- dict-like objects
	"""
	if cfg is None:
		return default

	getter = getattr(cfg, "get", None)
	if callable(getter):
		try:
			return getter(key, default)
		except Exception:
			return default

	try:
		return cfg[key]  # type: ignore[index]
	except Exception:
		return default


def _coerce_level(level: Any) -> int:
	"""
	Convert common representations of logging levels to an int.
	"""
	if isinstance(level, int):
		return level

	if isinstance(level, str):
		val = level.strip().upper()
		if val.isdigit():
			return int(val)
		resolved = getattr(logging, val, None)
		if isinstance(resolved, int):
			return resolved

	return logging.INFO


def _coerce_file_mode(mode: Any) -> str:
	"""
	Only "a" or "w" are accepted for the FileHandler.
	"""
	if isinstance(mode, str):
		val = mode.strip().lower()
		if val in ("a", "w"):
			return val
	return "a"


def _configure_root_logger(
	*,
	level: int,
	console_enabled: bool,
	log_file: str | None,
	file_mode: str,
	fmt: str,
	datefmt: str,
	reset_root: bool,
) -> None:
	root = logging.getLogger()
	root.setLevel(level)

	if reset_root:
		for h in list(root.handlers):
			root.removeHandler(h)

	formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

	if console_enabled:
		ch = logging.StreamHandler()
		ch.setLevel(level)
		ch.setFormatter(formatter)
		root.addHandler(ch)

	if log_file:
		_ensure_parent_dir(log_file)
		fh = logging.FileHandler(log_file, mode=file_mode, encoding="utf-8")
		fh.setLevel(level)
		fh.setFormatter(formatter)
		root.addHandler(fh)


def _ensure_parent_dir(path: str) -> None:
	parent = os.path.dirname(os.path.abspath(path))
	if parent:
		os.makedirs(parent, exist_ok=True)


# ---------------------------------------------------------------------------
# Test helper
# ---------------------------------------------------------------------------

def _reset_logging_for_tests() -> None:
	"""
	Reset module-scoped init state (intended for unit tests only).
	"""
	global _INITIALIZED, _CONFIG_SIGNATURE
	_INITIALIZED = False
	_CONFIG_SIGNATURE = None
