"""Plugin version stamped into configuration documents."""

from __future__ import annotations

PLUGIN_VERSION: str = "1.4.0"
