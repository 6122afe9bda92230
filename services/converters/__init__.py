from .pdf import *  # noqa
from .pdf import __all__ as _pdf_all

__all__ = list(_pdf_all)
