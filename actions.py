"""Calculate and generate actions shared by the CLI and the Streamlit form.

Each action validates the form in a fixed order and either returns a complete
result or raises; nothing partial is ever handed back to the caller.
"""
import logging

from exceptions import InvalidDateTime, ValidationError
from messages import render_message
from timezone_service import convert

logger = logging.getLogger(__name__)

INVALID_DATETIME = 'La fecha y hora seleccionadas no son válidas'

CALCULATE_ERRORS = {
    'title': 'Please, add a heading title',
    'datetime': 'Please fill in the date, time, and base time zone.',
    'participants': 'Please add at least one participant.',
}

GENERATE_ERRORS = {
    'title': 'Por favor, ingresa un título para la reunión',
    'datetime': 'Por favor, selecciona una fecha y hora para la reunión',
    'participants': 'Por favor, agrega al menos un participante antes de generar el mensaje',
}

def validate(spec, registry, errors):
    if not (spec.title or '').strip():
        raise ValidationError(errors['title'])
    if not spec.date or not spec.time:
        raise ValidationError(errors['datetime'])
    if len(registry) == 0:
        raise ValidationError(errors['participants'])

def _convert(spec, registry, language=None):
    try:
        return convert(spec, registry.list(), language=language)
    except InvalidDateTime as e:
        raise InvalidDateTime(f"{INVALID_DATETIME} ({e})") from e

def calculate(spec, registry):
    """Validate and convert for the results table (always in Spanish)."""
    validate(spec, registry, CALCULATE_ERRORS)
    return _convert(spec, registry, language='es')

def generate_message(spec, registry):
    """Validate, convert and render the invitation. Returns (conversions, message)."""
    validate(spec, registry, GENERATE_ERRORS)
    conversion_set = _convert(spec, registry)
    message = render_message(spec, conversion_set)
    logger.debug("Generated %s message for %r", spec.language, spec.title)
    return conversion_set, message
