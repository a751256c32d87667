"""
Typed request fields for content resources.

Each ``Field`` turns one loosely-typed JSON value into the Python value stored
on the model, or raises ``ValidationError`` naming the field.
"""
import re
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, Callable, Dict, Iterable, Optional, Tuple, Union
from urllib.parse import urlparse

from dateutil import parser as date_parser

from province_portal.errors import ValidationError
from province_portal.models.base import SQL_INT_MAX

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off", ""}
HEX_COLOR = re.compile(r"^#[0-9A-Fa-f]{6}$")

KINDS = {"string", "text", "int", "bool", "date", "datetime", "url", "choice", "color"}


@dataclass(frozen=True)
class Field:
    name: str
    kind: str = "string"
    required: bool = False
    default: Union[Any, Callable[[], Any]] = None
    choices: Tuple[str, ...] = ()
    max_length: Optional[int] = None
    label: Optional[str] = None
    message: Optional[str] = None
    attribute: Optional[str] = None

    def __post_init__(self):
        if self.kind not in KINDS:
            raise ValueError(f"Unknown field kind: {self.kind}")

    @property
    def display_name(self) -> str:
        return self.label or self.name.replace("_", " ").capitalize()

    @property
    def column(self) -> str:
        return self.attribute or self.name

    def initial(self) -> Any:
        return self.default() if callable(self.default) else self.default

    def fail(self, message: str):
        raise ValidationError(self.message or message, field=self.name)

    def coerce(self, raw: Any) -> Any:
        if self.kind in {"string", "text", "url", "choice"}:
            value = self._text(raw)
            if value is None:
                return None
            if self.kind == "url" and not _is_url(value):
                self.fail(f"{self.display_name} must be a valid URL")
            if self.kind == "choice" and value not in self.choices:
                self.fail(f"{self.display_name} must be one of: {', '.join(self.choices)}")
            return value

        if raw is None:
            return False if self.kind == "bool" else None

        return getattr(self, f"_{self.kind}")(raw)

    def _text(self, raw: Any) -> Optional[str]:
        if raw is None:
            return None
        if isinstance(raw, bool) or not isinstance(raw, (str, int, float)):
            self.fail(f"{self.display_name} must be a string")

        value = str(raw).replace("\x00", "").strip()
        if not value:
            return None

        limit = self.max_length or (None if self.kind == "text" else 255)
        if limit is not None and len(value) > limit:
            self.fail(f"{self.display_name} must be at most {limit} characters")
        return value

    def _int(self, raw: Any) -> Optional[int]:
        value: Optional[int] = None
        if isinstance(raw, bool):
            value = int(raw)
        elif isinstance(raw, int):
            value = raw
        elif isinstance(raw, float) and raw.is_integer():
            value = int(raw)
        elif isinstance(raw, str):
            if not raw.strip():
                return None
            try:
                value = int(raw.strip())
            except ValueError:
                pass

        if value is None:
            self.fail(f"{self.display_name} must be an integer")
        if abs(value) > SQL_INT_MAX:
            self.fail(f"{self.display_name} is out of range")
        return value

    def _bool(self, raw: Any) -> bool:
        if isinstance(raw, bool):
            return raw
        if isinstance(raw, int) and raw in (0, 1):
            return bool(raw)
        if isinstance(raw, str):
            lowered = raw.strip().lower()
            if lowered in TRUE_VALUES:
                return True
            if lowered in FALSE_VALUES:
                return False
        self.fail(f"{self.display_name} must be true or false")

    def _date(self, raw: Any) -> Optional[date]:
        if isinstance(raw, datetime):
            return raw.date()
        if isinstance(raw, date):
            return raw
        if isinstance(raw, str):
            if not raw.strip():
                return None
            try:
                return date_parser.isoparse(raw.strip()).date()
            except ValueError:
                pass
        self.fail(f"{self.display_name} must be a valid date (YYYY-MM-DD)")

    def _datetime(self, raw: Any) -> Optional[datetime]:
        if isinstance(raw, datetime):
            value = raw
        elif isinstance(raw, str):
            if not raw.strip():
                return None
            try:
                value = date_parser.parse(raw.strip())
            except (ValueError, OverflowError):
                self.fail(f"{self.display_name} must be a valid date and time")
        else:
            self.fail(f"{self.display_name} must be a valid date and time")

        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value

    def _color(self, raw: Any) -> str:
        value = raw.strip() if isinstance(raw, str) else ""
        return value if HEX_COLOR.match(value) else self.initial()


def _is_url(value: str) -> bool:
    parsed = urlparse(value)
    return parsed.scheme in {"http", "https"} and bool(parsed.netloc)


def parse_payload(fields: Iterable[Field], data: Any, *, partial: bool) -> Dict[str, Any]:
    """
    Coerce a request body through ``fields``.

    Unknown keys are ignored. With ``partial`` only the keys present in the
    body are returned; otherwise absent fields take their defaults.
    """
    if not isinstance(data, dict):
        raise ValidationError("Invalid JSON body")

    values: Dict[str, Any] = {}
    for field in fields:
        if field.name in data:
            value = field.coerce(data[field.name])
        elif partial:
            continue
        else:
            value = field.initial()

        if value is None:
            if field.required:
                field.fail(f"{field.display_name} is required")
            value = field.initial()

        values[field.name] = value

    return values
