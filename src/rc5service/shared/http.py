from contextlib import contextmanager

from fastapi import HTTPException

from rc5service.core import RC5Error
from rc5service.shared.logger import Logger

__all__ = ["bad_request_handler"]

logger = Logger(__name__).get_logger()


@contextmanager
def bad_request_handler(stacklevel=1):
    """Map cipher failures to 400 and anything unexpected to 500."""
    # Go 3 levels up to escape @contextmanager methods and current function
    stack_level = 2 + stacklevel
    kw = {"stacklevel": stack_level}
    try:
        yield

    except HTTPException:
        raise

    except RC5Error as e:
        logger.warning("Rejected cipher request: %s", e, **kw)
        raise HTTPException(status_code=400, detail=f"Error: {e}") from e

    except Exception as e:
        logger.error("Failed to process request: %s", e, **kw)
        raise HTTPException(status_code=500, detail=str(e)) from e
