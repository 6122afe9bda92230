from typing import Any, Mapping, Sequence

from exceptions import MissingPayload, PreconditionViolation
from models import Payload, Record
from settings import DEFAULT_PAYLOAD_NAME, PDF_MAGIC, logger


def require_single_item(items: Sequence[Record], operation: str) -> Record:
    """
    split / toImage / ocr work on exactly one input record.
    """
    if len(items) != 1:
        logger.info(f"{operation}: expected 1 input record, got {len(items)}")
        raise PreconditionViolation(
            f'Operation "{operation}" expects a single input item, got {len(items)}'
        )
    return items[0]


def require_items(items: Sequence[Record], operation: str) -> None:
    if not items:
        raise PreconditionViolation(f'Operation "{operation}" expects at least one input item')


def get_payload(item: Record, name: str, index: int = 0) -> Payload:
    payload = item.payloads.get(name)
    if payload is None:
        raise MissingPayload(f'No binary payload named "{name}"', item_index=index)
    return payload


def input_payload_name(params: Mapping[str, Any]) -> str:
    return params.get("inputPayloadName") or DEFAULT_PAYLOAD_NAME


def is_pdf_payload(payload: Payload) -> bool:
    """
    Declared MIME type first, then the %PDF- magic number.
    Either one is enough, the MIME type may be missing or wrong.
    """
    if payload.mime_type and "pdf" in payload.mime_type.lower():
        return True
    return payload.data[: len(PDF_MAGIC)] == PDF_MAGIC
