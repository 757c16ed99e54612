# core/codecs.py
# Field converters shared by every domain codec

import json
import re
from datetime import date, datetime, time
from decimal import Decimal

from django.core.serializers.json import DjangoJSONEncoder
from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")


def camel_to_snake(name: str) -> str:
    return _CAMEL_RE.sub("_", name).lower()


def snake_to_camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def _naive(value: datetime) -> datetime:
    # USE_TZ is off; the database only accepts naive local datetimes
    if timezone.is_aware(value):
        return timezone.make_naive(value)
    return value


def to_date(value):
    """
    Decode a date field.

    Legacy payloads store dates as full ISO datetimes ("2024-03-01T00:00:00.000Z");
    those are converted to local time before the date part is taken.
    """
    if value in (None, ""):
        return None
    if isinstance(value, datetime):
        return _naive(value).date()
    if isinstance(value, date):
        return value
    parsed = parse_date(value)
    if parsed is not None:
        return parsed
    parsed = parse_datetime(value)
    if parsed is None:
        raise ValueError(f"Invalid date: {value!r}")
    return _naive(parsed).date()


def to_datetime(value):
    if value in (None, ""):
        return None
    if isinstance(value, datetime):
        return _naive(value)
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    parsed = parse_datetime(value)
    if parsed is None:
        day = parse_date(value)
        if day is None:
            raise ValueError(f"Invalid datetime: {value!r}")
        return datetime.combine(day, time.min)
    return _naive(parsed)


def to_decimal(value):
    if value in (None, ""):
        return None
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def to_int(value):
    if value in (None, ""):
        return None
    return int(value)


def to_bool(value):
    if value is None:
        return None
    return bool(value)


def to_list(value):
    # Older task payloads stored a single assignee as a plain string
    if value in (None, ""):
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


CONVERTERS = {
    "date": to_date,
    "datetime": to_datetime,
    "decimal": to_decimal,
    "int": to_int,
    "bool": to_bool,
    "list": to_list,
}


def dumps(value) -> str:
    return json.dumps(value, cls=DjangoJSONEncoder)


def jsonable(value):
    """Dates and decimals rendered the way the remote REST API expects them."""
    return json.loads(dumps(value))
