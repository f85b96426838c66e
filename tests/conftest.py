import json
from pathlib import Path

import pytest

_FIXTURE_DIR: Path = Path(__file__).parent / "fixtures"


@pytest.fixture
def mixed_players_records() -> list[dict]:
    """Video records for one title spread over three players."""
    data = json.loads((_FIXTURE_DIR / "mixed_players.json").read_text(encoding="utf-8"))
    return data["response"]
