# settings.py
import os
import logging

# ========== LOGGING ==========
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

logger = logging.getLogger(__name__)
logging.basicConfig(level=LOG_LEVEL)

# ========== RENDERING ==========
# PDF user space is 72 points per inch.
PDF_POINTS_PER_INCH = 72
MIN_DPI = 36
MAX_DPI = 600

RENDER_DPI = int(os.getenv("RENDER_DPI", "150"))
JPEG_QUALITY = float(os.getenv("JPEG_QUALITY", "0.9"))

# ========== OCR ==========
OCR_LANG = os.getenv("OCR_LANG", "eng")
OCR_DPI = int(os.getenv("OCR_DPI", "150"))
TESSDATA_DIR = os.getenv("TESSDATA_DIR") or None

# ========== PAYLOADS ==========
PDF_MAGIC = b"%PDF-"
PDF_MIME = "application/pdf"
TEXT_MIME = "text/plain"
IMAGE_MIMES = {
    "png": "image/png",
    "jpeg": "image/jpeg",
}

DEFAULT_PAYLOAD_NAME = "data"
MERGED_FILE_NAME = "merged.pdf"
