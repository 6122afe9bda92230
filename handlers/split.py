# handlers/split.py
from typing import Any, Mapping, Sequence

from models import Payload, Record
from pdf_services import part_file_name, split_pdf
from settings import DEFAULT_PAYLOAD_NAME, PDF_MIME
from utils import get_payload, input_payload_name, require_single_item


def handle_split(
    items: Sequence[Record],
    params: Mapping[str, Any],
    continue_on_fail: bool = False,
) -> list[Record]:
    item = require_single_item(items, "split")
    payload = get_payload(item, input_payload_name(params))

    mode = params.get("splitMode") or "everyPage"
    range_str = params.get("rangesSpec", "1-")
    out_prop = params.get("outputPayloadName") or DEFAULT_PAYLOAD_NAME

    parts = split_pdf(payload.data, mode=mode, range_str=range_str)

    outputs: list[Record] = []
    for part_idx, (page_range, data) in enumerate(parts, start=1):
        outputs.append(
            Record(
                metadata={"startPage": page_range.start, "endPage": page_range.end},
                payloads={out_prop: Payload(data, PDF_MIME, part_file_name(part_idx))},
            )
        )
    return outputs
