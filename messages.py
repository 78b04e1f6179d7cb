from exceptions import ValidationError
from timezone_service import utc_offset_label

SEPARATOR = '_' * 45

TABLE_COLUMNS = ['Participante', 'Ubicación', 'Hora local', 'UTC']

def _participant_lines(conversion_set):
    lines = []
    for conv in conversion_set:
        lines += [f"- {conv.participant.name}", f"  {conv.formatted}", f"  {conv.city}", ""]
    return lines

def render_spanish_message(title, conversion_set):
    lines = [
        "Hola,",
        "",
        f'Te comparto los detalles de nuestra reunión: "{title}".',
        "",
        SEPARATOR,
        "",
        "Fecha y hora de referencia:",
        conversion_set.base_formatted,
        conversion_set.base_city,
        "",
        "Horario para cada participante:",
        "",
    ]
    lines += _participant_lines(conversion_set)
    lines += [
        SEPARATOR,
        "",
        "Si ves algún error en tu horario local, por favor avísame.",
        "",
        "¡Nos vemos en la reunión!",
    ]
    return "\n".join(lines)

def render_english_message(title, conversion_set):
    lines = [
        "Hi,",
        "",
        f'Here are the details for our meeting: "{title}".',
        "",
        SEPARATOR,
        "",
        "Reference date and time:",
        conversion_set.base_formatted,
        conversion_set.base_city,
        "",
        "Local time for each participant:",
        "",
    ]
    lines += _participant_lines(conversion_set)
    lines += [
        SEPARATOR,
        "",
        "If you notice any issue with your local time, please let me know.",
        "",
        "Looking forward to our meeting!",
    ]
    return "\n".join(lines)

def render_message(spec, conversion_set):
    """Render the invitation in the meeting's language."""
    if spec.language == 'es':
        return render_spanish_message(spec.title.strip(), conversion_set)
    if spec.language == 'en':
        return render_english_message(spec.title.strip(), conversion_set)
    raise ValidationError(f"Unsupported language: {spec.language!r}")

def conversion_rows(conversion_set):
    """Rows for the results table, one per participant."""
    return [
        {
            'Participante': conv.participant.name,
            'Ubicación': conv.city,
            'Hora local': conv.formatted,
            'UTC': utc_offset_label(conv.local_time),
        }
        for conv in conversion_set
    ]

def format_table(rows, columns=TABLE_COLUMNS):
    """Plain-text aligned table for terminal output."""
    widths = [max([len(col)] + [len(str(row[col])) for row in rows]) for col in columns]
    header = "  ".join(col.ljust(w) for col, w in zip(columns, widths))
    rule = "  ".join('-' * w for w in widths)
    body = ["  ".join(str(row[col]).ljust(w) for col, w in zip(columns, widths)) for row in rows]
    return "\n".join([header, rule] + body)
