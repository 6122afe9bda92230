# dispatcher.py
import asyncio
from typing import Any, Mapping, Optional, Sequence

from exceptions import UnsupportedOperation
from handlers import handlers
from models import Record
from settings import logger

OPERATIONS = tuple(handlers)


def run_operation(
    operation: str,
    items: Sequence[Record],
    params: Optional[Mapping[str, Any]] = None,
    continue_on_fail: bool = False,
) -> list[Record]:
    """
    Runs one operation (merge, split, toImage, ocr) over the input records.

    Every invocation is self-contained: it either returns all of its output
    records or raises. `continue_on_fail` is only honoured by merge, which
    skips unusable inputs instead of failing.
    """
    handler = handlers.get(operation)
    if handler is None:
        raise UnsupportedOperation(f'Unknown operation "{operation}"')

    logger.info(f"Running {operation} on {len(items)} item(s)")
    outputs = handler(items, params or {}, continue_on_fail)
    logger.info(f"{operation} produced {len(outputs)} item(s)")
    return outputs


async def run_operation_async(
    operation: str,
    items: Sequence[Record],
    params: Optional[Mapping[str, Any]] = None,
    continue_on_fail: bool = False,
) -> list[Record]:
    """Same as run_operation, in a worker thread so the event loop stays free."""
    return await asyncio.to_thread(run_operation, operation, items, params, continue_on_fail)
