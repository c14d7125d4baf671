"""Turn raw caller parameters into validated query models."""

from datetime import datetime, timezone
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from logicon.errors import InvalidArgumentError

QueryT = TypeVar("QueryT", bound=BaseModel)


def parse_query(model: type[QueryT], **params: Any) -> QueryT:
    """Validate ``params`` against ``model``.

    ``None`` values count as absent, so the model default applies for optional
    parameters and required ones are reported missing.
    """
    supplied = {name: value for name, value in params.items() if value is not None}
    try:
        return model.model_validate(supplied)
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise InvalidArgumentError(f"Invalid {model.__name__}: {details}") from e


def resolve_now(now: datetime | None) -> datetime:
    """Caller-supplied reference time in UTC, defaulting to the current time.

    Window arithmetic and bucket labels both work in UTC; naive values are
    taken to be UTC already.
    """
    if now is None:
        return datetime.now(timezone.utc)
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc)
