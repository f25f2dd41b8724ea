import io

from pypdf import PdfReader, PdfWriter


def build_pdf(widths):
    """Return PDF bytes with one blank page per width, in order."""
    writer = PdfWriter()
    for width in widths:
        writer.add_blank_page(width=width, height=200)
    output = io.BytesIO()
    writer.write(output)
    return output.getvalue()


def page_widths(pdf_bytes):
    """Page widths of a PDF, used as page identity in assertions."""
    reader = PdfReader(io.BytesIO(pdf_bytes))
    return [int(page.mediabox.width) for page in reader.pages]
