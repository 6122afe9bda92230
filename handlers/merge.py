# handlers/merge.py
from typing import Any, Mapping, Sequence

from exceptions import MissingPayload
from models import Payload, Record
from pdf_services import merge_pdfs
from settings import DEFAULT_PAYLOAD_NAME, MERGED_FILE_NAME, PDF_MIME, logger
from utils import get_payload, input_payload_name, require_items


def handle_merge(
    items: Sequence[Record],
    params: Mapping[str, Any],
    continue_on_fail: bool = False,
) -> list[Record]:
    require_items(items, "merge")

    prop_in = input_payload_name(params)
    out_prop = params.get("outputPayloadName") or DEFAULT_PAYLOAD_NAME
    file_name = params.get("outputFileName") or MERGED_FILE_NAME

    def sources():
        for i, item in enumerate(items):
            try:
                payload = get_payload(item, prop_in, i)
            except MissingPayload as e:
                if not continue_on_fail:
                    raise
                logger.warning(f"Merge: skipping item {i}: {e}")
                yield None
                continue
            yield payload.data

    merged, page_count = merge_pdfs(sources(), continue_on_fail=continue_on_fail)

    return [
        Record(
            metadata={"pageCount": page_count},
            payloads={out_prop: Payload(merged, PDF_MIME, file_name)},
        )
    ]
