from .text_utils import (
    sanitize,
    clean_input,
    format_es_date,
    format_es_time,
    epoch_millis,
)
from .docx_utils import (
    tight_paragraph,
    add_labeled_line,
    set_font_size,
    docx_bytes,
)

__all__ = [
    # text utils
    "sanitize",
    "clean_input",
    "format_es_date",
    "format_es_time",
    "epoch_millis",
    # docx utils
    "tight_paragraph",
    "add_labeled_line",
    "set_font_size",
    "docx_bytes",
]
