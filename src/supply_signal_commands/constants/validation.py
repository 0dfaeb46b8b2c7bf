"""Stable validation error codes for configuration documents."""

from __future__ import annotations

CFG001: str = "CFG001"  # config file not found
CFG002: str = "CFG002"  # invalid YAML/JSON parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown key
CFG005: str = "CFG005"  # invalid value type
CFG006: str = "CFG006"  # invalid enum value
CFG007: str = "CFG007"  # value out of range
CFG008: str = "CFG008"  # invalid version string
CFG009: str = "CFG009"  # invalid nested mapping
CFG010: str = "CFG010"  # version newer than this plugin
CFG011: str = "CFG011"  # rule shadowed by an earlier rule

LEVEL_ERROR: str = "error"
LEVEL_WARNING: str = "warning"
