from io import BytesIO

from docx.shared import Pt
from docx.text.paragraph import Paragraph


def tight_paragraph(p: Paragraph):
    pf = p.paragraph_format
    pf.space_before = Pt(0)
    pf.space_after = Pt(0)
    pf.line_spacing = 1.0


def add_labeled_line(doc, label: str, value: str) -> Paragraph:
    """Append 'Label: value' with the label in bold."""
    p = doc.add_paragraph()
    r = p.add_run(f"{label}: ")
    r.bold = True
    p.add_run(value or "")
    tight_paragraph(p)
    return p


def set_font_size(doc, size: int = 11):
    for p in doc.paragraphs:
        for run in p.runs:
            run.font.size = Pt(size)


def docx_bytes(doc) -> bytes:
    bio = BytesIO()
    doc.save(bio)
    return bio.getvalue()
