from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Tuple

LANGUAGES = ('es', 'en')

@dataclass(frozen=True)
class Participant:
    id: str
    name: str
    timezone: str  # IANA identifier

@dataclass(frozen=True)
class MeetingSpec:
    title: str
    date: str  # YYYY-MM-DD
    time: str  # HH:MM
    base_timezone: str
    language: str = 'es'

@dataclass(frozen=True)
class Conversion:
    participant: Participant
    local_time: datetime  # tz-aware, in the participant's zone
    formatted: str
    city: str

@dataclass(frozen=True)
class ConversionSet:
    base_time: datetime
    base_formatted: str
    base_city: str
    conversions: Tuple[Conversion, ...] = field(default_factory=tuple)

    def __len__(self):
        return len(self.conversions)

    def __iter__(self):
        return iter(self.conversions)

@dataclass
class Config:
    base_timezone: str = 'America/Buenos_Aires'
    language: str = 'es'
    timezones: List[str] = field(default_factory=list)
    participants: List[dict] = field(default_factory=list)
