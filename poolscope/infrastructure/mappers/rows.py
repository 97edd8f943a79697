from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError


logger = logging.getLogger(__name__)

RowT = TypeVar("RowT", bound=BaseModel)


def validate_rows(model: type[RowT], rows: list[Any], *, source: str) -> list[RowT]:
    """Validate list rows one at a time; a malformed row is skipped, not fatal."""
    valid: list[RowT] = []
    for index, raw in enumerate(rows):
        try:
            valid.append(model.model_validate(raw))
        except ValidationError as exc:
            logger.warning(
                "rows: skipped_invalid_row source=%s model=%s index=%s errors=%s",
                source,
                model.__name__,
                index,
                exc.error_count(),
            )
    return valid
