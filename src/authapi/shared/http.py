import logging
from contextlib import contextmanager

from authapi.core.errors import ApiError, UnexpectedError
from authapi.shared.logger import Logger

__all__ = ["server_error_handler"]

logger = Logger(__name__, level=logging.DEBUG).get_logger()


@contextmanager
def server_error_handler(stacklevel=1):
    # Go 3 levels up to escape @contextmanager methods and current function
    stack_level = 2 + stacklevel
    kw = {"stacklevel": stack_level}
    try:
        yield

    except ApiError:
        raise

    except Exception as e:
        logger.error("Failed to process request: %r", e, exc_info=e, **kw)
        raise UnexpectedError() from e
