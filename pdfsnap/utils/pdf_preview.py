import base64

import fitz  # PyMuPDF


def render_page_preview(
    pdf_bytes: bytes,
    page_number: int = 1,
    zoom: float = 0.5,
) -> str:
    """
    Render one page of an in-memory PDF as a base64 PNG data URL.

    Args:
        pdf_bytes: the PDF document.
        page_number: 1-based page index.
        zoom: scale factor; the default keeps previews thumbnail sized.
    """
    if page_number < 1:
        raise ValueError("page_number must be >= 1")

    with fitz.open(stream=pdf_bytes, filetype="pdf") as document:
        if page_number > document.page_count:
            raise ValueError("page_number exceeds document pages")

        page = document.load_page(page_number - 1)
        pixmap = page.get_pixmap(matrix=fitz.Matrix(zoom, zoom), alpha=False)
        image_bytes = pixmap.tobytes("png")

    encoded = base64.b64encode(image_bytes).decode("utf-8")
    return f"data:image/png;base64,{encoded}"
