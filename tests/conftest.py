"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest
from fakes import FakeClock, RecordingHost

from supply_signal_commands.types.host import Player, Position


@pytest.fixture(scope="session")
def fixtures_root() -> Path:
    """Return root directory for test fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def configs_root(fixtures_root: Path) -> Path:
    return fixtures_root / "configs"


@pytest.fixture
def bob() -> Player:
    return Player(user_id="76561198000000001", display_name="Bob", position=Position(12.34, 5.0, -7.25))


@pytest.fixture
def alice() -> Player:
    return Player(user_id="76561198000000002", display_name="Alice", position=Position(0.0, 0.0, 0.0), locale="de-AT")


@pytest.fixture
def host(bob: Player, alice: Player) -> RecordingHost:
    return RecordingHost(players=[bob, alice])


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
