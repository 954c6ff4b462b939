from __future__ import annotations

import sys
from pathlib import Path

import fitz
import pytest

ROOT = Path(__file__).resolve().parents[1]
ROOT_STR = str(ROOT)
if ROOT_STR not in sys.path:
    sys.path.insert(0, ROOT_STR)


def write_pdf(path: Path, page_count: int, label: str, **save_options) -> str:
    """Write a PDF whose pages read "<label> - Page <n>"."""
    document = fitz.open()
    for number in range(1, page_count + 1):
        page = document.new_page(width=612, height=792)
        page.insert_text((50, 92), f"{label} - Page {number}", fontsize=24)
    document.save(str(path), **save_options)
    document.close()
    return str(path)


@pytest.fixture
def make_pdf(tmp_path):
    def _make(name: str, page_count: int = 3, label: str = "Sample PDF", **save_options) -> str:
        return write_pdf(tmp_path / name, page_count, label, **save_options)

    return _make


@pytest.fixture
def single_page_pdf(make_pdf) -> str:
    return make_pdf("sample-single.pdf", 1, "Single Page PDF")


@pytest.fixture
def multi_page_pdf(make_pdf) -> str:
    return make_pdf("sample-multi.pdf", 5, "Multi Page PDF")


@pytest.fixture
def corrupt_pdf(tmp_path) -> str:
    path = tmp_path / "sample-corrupt.pdf"
    path.write_bytes(b"not a valid pdf file content")
    return str(path)


def zero_page_pdf_bytes() -> bytes:
    """Well-formed PDF whose page tree is empty."""
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [] /Count 0 >>",
    ]
    body = b"%PDF-1.4\n"
    offsets = []
    for number, content in enumerate(objects, start=1):
        offsets.append(len(body))
        body += b"%d 0 obj\n" % number + content + b"\nendobj\n"

    xref_offset = len(body)
    body += b"xref\n0 %d\n" % (len(objects) + 1)
    body += b"0000000000 65535 f \n"
    for offset in offsets:
        body += b"%010d 00000 n \n" % offset
    body += b"trailer\n<< /Size %d /Root 1 0 R >>\n" % (len(objects) + 1)
    body += b"startxref\n%d\n%%%%EOF\n" % xref_offset
    return body


@pytest.fixture
def zero_page_pdf(tmp_path) -> str:
    path = tmp_path / "sample-empty.pdf"
    path.write_bytes(zero_page_pdf_bytes())
    return str(path)
