from .merge import handle_merge
from .split import handle_split
from .images import handle_to_image
from .ocr import handle_ocr

# operation name -> handler(items, params, continue_on_fail)
handlers = {
    "merge": handle_merge,
    "split": handle_split,
    "toImage": handle_to_image,
    "ocr": handle_ocr,
}
