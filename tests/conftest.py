import sys
from pathlib import Path

import pytest

# Flat layout: make the top-level modules importable without installing
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT))

from models import MeetingSpec
from utils import Registry


@pytest.fixture
def registry():
    reg = Registry()
    reg.add("Ana", "America/New_York")
    reg.add("Bruno", "Europe/Madrid")
    return reg


@pytest.fixture
def sync_spec():
    return MeetingSpec(
        title="Sync",
        date="2025-11-22",
        time="15:00",
        base_timezone="America/Buenos_Aires",
        language="en",
    )
