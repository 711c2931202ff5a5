# ---------------------------------------------------------------------------
# File: test_config.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for pyezview.core.config.AppConfig.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/08/2026	Paul G. LeDuc				Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

import dataclasses

import pytest

from pyezview.core.config import AppConfig


def test_get_with_and_without_options():
	assert AppConfig().get("x", 1) == 1
	assert AppConfig({"panel.theme": "arc"}).get("panel.theme") == "arc"


def test_section_returns_copy():
	options = {"customizations": {"a": 1}}
	cfg = AppConfig(options)

	section = cfg.section("customizations")
	section["b"] = 2

	assert options["customizations"] == {"a": 1}
	assert cfg.section("missing") == {}


def test_config_is_frozen():
	cfg = AppConfig({})

	with pytest.raises(dataclasses.FrozenInstanceError):
		cfg.options = {"x": 1}  # type: ignore[misc]
