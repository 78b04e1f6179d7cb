import pytest

from actions import CALCULATE_ERRORS, GENERATE_ERRORS, calculate, generate_message
from exceptions import InvalidDateTime, ValidationError
from models import MeetingSpec
from utils import Registry


def make_spec(**overrides):
    values = dict(title="Sync", date="2025-11-22", time="15:00",
                  base_timezone="America/Buenos_Aires", language="en")
    values.update(overrides)
    return MeetingSpec(**values)


def test_calculate_formats_in_spanish(registry):
    result = calculate(make_spec(), registry)
    assert result.conversions[0].formatted == "sábado, 22 de noviembre de 2025 – 13:00"


def test_generate_message_uses_selected_language(registry):
    result, message = generate_message(make_spec(), registry)
    assert len(result) == 2
    assert "Saturday, November 22, 2025 – 1:00 PM" in message


@pytest.mark.parametrize("action,errors", [(calculate, CALCULATE_ERRORS), (generate_message, GENERATE_ERRORS)])
def test_validation_order(action, errors):
    empty = Registry()
    with pytest.raises(ValidationError, match=errors["title"]):
        action(make_spec(title="  ", date="", time=""), empty)
    with pytest.raises(ValidationError, match=errors["datetime"]):
        action(make_spec(time=""), empty)
    with pytest.raises(ValidationError, match=errors["participants"]):
        action(make_spec(date="2025-02-30"), empty)


def test_zero_participants_is_rejected():
    with pytest.raises(ValidationError):
        calculate(make_spec(), Registry())
    with pytest.raises(ValidationError):
        generate_message(make_spec(), Registry())


def test_invalid_datetime_is_reported(registry):
    spec = make_spec(date="2025-03-09", time="02:30", base_timezone="America/New_York")
    with pytest.raises(InvalidDateTime, match="no son válidas"):
        generate_message(spec, registry)
