import logging
import os
import uuid
from dataclasses import fields

import yaml

from exceptions import ValidationError
from models import Config, Participant

logger = logging.getLogger(__name__)

# Constants
CONFIG_PATH = 'config.yaml'

DEFAULT_TIMEZONES = [
    'America/Buenos_Aires',
    'America/Sao_Paulo',
    'America/Santiago',
    'America/Bogota',
    'America/Lima',
    'America/Mexico_City',
    'America/New_York',
    'America/Chicago',
    'America/Denver',
    'America/Los_Angeles',
    'Europe/London',
    'Europe/Madrid',
    'Europe/Paris',
    'Europe/Berlin',
    'Asia/Tokyo',
    'Asia/Shanghai',
    'Asia/Kolkata',
    'Australia/Sydney',
    'UTC',
]

DEFAULT_PARTICIPANTS = [
    {'name': 'Equipo Buenos Aires', 'timezone': 'America/Buenos_Aires'},
    {'name': 'Equipo New York', 'timezone': 'America/New_York'},
]

# ===== Participant Registry =====

class Registry:
    """Ordered list of meeting participants, kept in insertion order."""

    def __init__(self):
        self._participants = []

    @classmethod
    def from_config(cls, entries):
        """Seed a registry from config entries, skipping unusable ones."""
        registry = cls()
        for entry in entries or []:
            if not isinstance(entry, dict):
                logger.warning("Skipping participant entry %r: expected name and timezone", entry)
                continue
            try:
                registry.add(entry.get('name', ''), entry.get('timezone', 'UTC'))
            except ValidationError:
                logger.warning("Skipping participant entry %r: empty name", entry)
        return registry

    def add(self, name, timezone):
        """Add a participant and return it. Empty names are rejected."""
        name = (name or '').strip()
        if not name:
            raise ValidationError('Please, add a name for the participant')
        participant = Participant(id=str(uuid.uuid4()), name=name, timezone=timezone)
        self._participants.append(participant)
        logger.debug("Added participant %s (%s)", name, timezone)
        return participant

    def remove(self, participant_id):
        self._participants = [p for p in self._participants if p.id != participant_id]

    def list(self):
        return tuple(self._participants)

    def __len__(self):
        return len(self._participants)

    def __iter__(self):
        return iter(self.list())

def parse_participant_arg(value):
    """Parse a NAME=ZONE command line value into (name, zone)."""
    if '=' not in value:
        raise ValidationError(f"Participant must look like NAME=ZONE, got {value!r}")
    name, timezone = value.rsplit('=', 1)
    if not name.strip():
        raise ValidationError('Please, add a name for the participant')
    return name.strip(), timezone.strip()

# ===== Display Helpers =====

def city_label(timezone):
    """Readable city for an IANA identifier: America/New_York -> New York."""
    parts = timezone.split('/')
    if len(parts) >= 2:
        return parts[-1].replace('_', ' ')
    return timezone

# ===== Configuration Management =====

def load_config(path=CONFIG_PATH):
    """Load config.yaml, falling back to the built-in defaults."""
    config = Config(timezones=list(DEFAULT_TIMEZONES), participants=[dict(p) for p in DEFAULT_PARTICIPANTS])
    if not os.path.exists(path):
        return config
    with open(path, 'r') as f:
        data = yaml.safe_load(f) or {}
    known = {f.name for f in fields(Config)}
    for key, value in data.items():
        if key in known and value is not None:
            setattr(config, key, value)
    logger.debug("Loaded config from %s", path)
    return config

def config_to_dict(config):
    return {
        'base_timezone': config.base_timezone,
        'language': config.language,
        'timezones': list(config.timezones),
        'participants': [dict(p) for p in config.participants],
    }
