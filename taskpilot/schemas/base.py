
from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel


def to_iso(value: datetime) -> str:
    if value.tzinfo is not None:
        value = value.astimezone(UTC).replace(tzinfo=None)
    return f"{value.strftime('%Y-%m-%dT%H:%M:%S')}.{value.microsecond // 1000:03d}Z"


def parse_iso(value: Any) -> Any:
    """Parse ISO-8601 strings (date-only and trailing ``Z`` included) into naive UTC."""
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            raise ValueError(f"invalid ISO-8601 date: {value!r}") from None
    if isinstance(value, datetime) and value.tzinfo is not None:
        value = value.astimezone(UTC).replace(tzinfo=None)
    return value


IsoDatetime = Annotated[datetime, PlainSerializer(to_iso, return_type=str)]
InputDatetime = Annotated[datetime, BeforeValidator(parse_iso)]


class CamelSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def unique_ids(ids: list[Any] | None) -> list[str]:
    """Tag id set as stored: strings, first occurrence wins."""
    return list(dict.fromkeys(str(_) for _ in ids or []))
