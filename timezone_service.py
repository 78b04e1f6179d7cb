import logging

import pytz
from babel.dates import format_datetime
from dateutil.parser import isoparse

from exceptions import InvalidDateTime, ValidationError
from models import Conversion, ConversionSet
from utils import city_label

logger = logging.getLogger(__name__)

# LDML patterns; the en dash before the time is literal text
PATTERNS = {
    'es': "EEEE, d 'de' MMMM 'de' y – HH:mm",
    'en': "EEEE, MMMM d, y – h:mm a",
}

def get_zone(timezone):
    """Look up an IANA zone in the pytz database."""
    try:
        return pytz.timezone(timezone)
    except (pytz.UnknownTimeZoneError, AttributeError):
        raise InvalidDateTime(f"Unknown time zone: {timezone!r}")

def is_valid_timezone(timezone):
    return isinstance(timezone, str) and timezone in pytz.all_timezones_set

def resolve_base_time(date, time, timezone):
    """Resolve a local date + wall-clock time in `timezone` to an aware datetime.

    Local times skipped by a spring-forward transition are rejected. Times
    repeated by a fall-back transition resolve to their first occurrence.
    """
    tz = get_zone(timezone)
    try:
        naive = isoparse(f"{date}T{time}")
    except (ValueError, OverflowError):
        raise InvalidDateTime(f"Invalid date/time: {date} {time}")
    if naive.tzinfo is not None:
        raise InvalidDateTime(f"Invalid date/time: {date} {time}")

    out_of_range = f"{date} {time} is out of range in {timezone}"
    try:
        resolved = tz.localize(naive, is_dst=None)
    except pytz.NonExistentTimeError:
        raise InvalidDateTime(f"{date} {time} does not exist in {timezone}")
    except pytz.AmbiguousTimeError:
        try:
            resolved = tz.localize(naive, is_dst=True)
        except OverflowError:
            raise InvalidDateTime(out_of_range)
        logger.debug("Ambiguous local time %s in %s, using first occurrence", naive, timezone)
    except OverflowError:
        raise InvalidDateTime(out_of_range)
    return resolved

def reproject(instant, timezone):
    """Express the same absolute instant in another zone."""
    tz = get_zone(timezone)
    try:
        return tz.normalize(instant.astimezone(tz))
    except OverflowError:
        raise InvalidDateTime(f"{instant.isoformat()} is out of range in {timezone}")

def format_localized(instant, language):
    if language not in PATTERNS:
        raise ValidationError(f"Unsupported language: {language!r}")
    return format_datetime(instant, PATTERNS[language], locale=language)

def utc_offset_label(instant):
    offset = instant.strftime('%z') or '+0000'
    return f"UTC{offset[:3]}:{offset[3:]}"

def convert(spec, participants, language=None):
    """Reproject the meeting time into each participant's zone.

    `language` overrides `spec.language` for the formatted strings. Nothing is
    returned unless every participant converts.
    """
    language = language or spec.language
    base = resolve_base_time(spec.date, spec.time, spec.base_timezone)
    conversions = []
    for participant in participants:
        local = reproject(base, participant.timezone)
        conversions.append(Conversion(
            participant=participant,
            local_time=local,
            formatted=format_localized(local, language),
            city=city_label(participant.timezone),
        ))
    logger.debug("Converted %s %s (%s) for %d participants",
                 spec.date, spec.time, spec.base_timezone, len(conversions))
    return ConversionSet(
        base_time=base,
        base_formatted=format_localized(base, language),
        base_city=city_label(spec.base_timezone),
        conversions=tuple(conversions),
    )
