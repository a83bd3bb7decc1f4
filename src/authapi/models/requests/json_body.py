import json
from collections.abc import Awaitable, Callable
from typing import Self

from fastapi import Request
from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from authapi.core.errors import ValidationError
from authapi.shared import Logger

logger = Logger(__name__).get_logger()

type ParseHandler[T] = Callable[[Request], Awaitable[T]]


class JsonBody(BaseModel):
    """Base for request bodies.

    Fields are optional so a body with missing fields still parses; presence
    is checked by the account service, which owns the error messages.
    """

    model_config = ConfigDict(extra="ignore")

    @classmethod
    def parse(cls) -> ParseHandler[Self]:
        logger.debug("Creating body parser for: %s", cls.__name__)

        async def parse_handler(request: Request):
            raw = await request.body()
            try:
                data = json.loads(raw) if raw.strip() else {}
                if not isinstance(data, dict):
                    raise ValueError("expected a JSON object")

                result = cls.model_validate(data)
                logger.debug("Parsed request body into %s", cls.__name__)
                return result

            except PydanticValidationError as e:
                fields = ", ".join(
                    ".".join(str(part) for part in error["loc"]) for error in e.errors()
                )
                logger.warning("Rejected %s body, bad fields: %s", cls.__name__, fields)
                raise ValidationError(f"Invalid request body: bad {fields}") from e

            except ValueError as e:
                logger.warning("Failed to parse request body: %s", e)
                raise ValidationError(f"Invalid request body: {e}") from e

        return parse_handler
