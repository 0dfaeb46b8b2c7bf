"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "Supply Signal Commands"
CLI_PROG: str = "signalcmd"
CLI_DESCRIPTION: str = f"{BRAND_NAME}: manage and dry-run supply signal rule configs"
