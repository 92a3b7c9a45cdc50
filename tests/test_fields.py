"""Field extractor tests over static and rendered documents."""

import pytest

from src.extraction.document import RenderedDocument, StaticDocument
from src.extraction.fields import (
    DEFAULT_DESCRIPTION,
    DEFAULT_PRODUCT_NAME,
    DEFAULT_TITLE,
    extract_fields,
)

URL = "https://www.example.com/products/sneaker"


@pytest.fixture(params=["static", "rendered"])
def build_doc(request):
    """Both document providers must give the same answers for the same markup."""

    def _build(markup: str):
        if request.param == "static":
            return StaticDocument(markup)
        return RenderedDocument(markup, URL)

    return _build


# --- Description ---


def test_meta_description_used_when_long_enough(build_doc, make_page):
    doc = build_doc(make_page(description="Lightweight running shoe", paragraph="Body text"))
    assert extract_fields(doc, URL).product_description == "Lightweight running shoe"


def test_short_meta_description_falls_back_to_paragraph(build_doc, make_page):
    doc = build_doc(make_page(description="Too short", paragraph="First paragraph"))
    assert extract_fields(doc, URL).product_description == "First paragraph"


def test_meta_description_of_exactly_ten_chars_is_kept(build_doc, make_page):
    doc = build_doc(make_page(description="0123456789", paragraph="First paragraph"))
    assert extract_fields(doc, URL).product_description == "0123456789"


def test_missing_meta_description_uses_first_paragraph(build_doc):
    markup = "<html><body><p>First one</p><p>Second one</p></body></html>"
    assert extract_fields(build_doc(markup), URL).product_description == "First one"


def test_description_falls_back_to_h1(build_doc, make_page):
    doc = build_doc(make_page(h1="Acme Sneaker"))
    assert extract_fields(doc, URL).product_description == "Acme Sneaker"


def test_description_default_when_nothing_found(build_doc, make_page):
    doc = build_doc(make_page())
    assert extract_fields(doc, URL).product_description == DEFAULT_DESCRIPTION


def test_paragraph_text_joins_nested_elements(build_doc, make_page):
    doc = build_doc(make_page(paragraph="Soft <b>cotton</b>   blend"))
    assert extract_fields(doc, URL).product_description == "Soft cotton blend"


# --- Brand name ---


def test_brand_from_og_site_name(build_doc, make_page):
    doc = build_doc(make_page(site_name="Acme"))
    assert extract_fields(doc, URL).brand_name == "Acme"


def test_brand_falls_back_to_hostname(build_doc, make_page):
    doc = build_doc(make_page())
    assert extract_fields(doc, URL).brand_name == "www.example.com"


def test_blank_site_name_falls_back_to_hostname(build_doc, make_page):
    doc = build_doc(make_page(site_name="   "))
    assert extract_fields(doc, URL).brand_name == "www.example.com"


# --- Product name / title ---


def test_product_name_from_h1(build_doc, make_page):
    doc = build_doc(make_page(title="Store", h1="Acme Sneaker"))
    assert extract_fields(doc, URL).product_name == "Acme Sneaker"


def test_product_name_falls_back_to_title(build_doc, make_page):
    doc = build_doc(make_page(title="Acme Sneaker | Acme"))
    fields = extract_fields(doc, URL)
    assert fields.product_name == "Acme Sneaker | Acme"
    assert fields.title == "Acme Sneaker | Acme"


def test_product_name_default_without_h1_or_title(build_doc, make_page):
    doc = build_doc(make_page(title=None))
    fields = extract_fields(doc, URL)
    assert fields.product_name == DEFAULT_PRODUCT_NAME
    assert fields.title == DEFAULT_TITLE


def test_empty_document_degrades_to_defaults(build_doc):
    fields = extract_fields(build_doc(""), URL)
    assert fields.title == DEFAULT_TITLE
    assert fields.brand_name == "www.example.com"
    assert fields.product_name == DEFAULT_PRODUCT_NAME
    assert fields.product_description == DEFAULT_DESCRIPTION
    assert fields.image_candidates == []


# --- Image candidates ---


def test_static_document_keeps_only_absolute_sources(make_page):
    markup = make_page(
        images=[
            "https://x.com/a.jpg",
            "/relative/b.jpg",
            "//cdn.x.com/c.jpg",
            "http://x.com/d.png",
        ]
    )
    fields = extract_fields(StaticDocument(markup), URL)
    assert fields.image_candidates == ["https://x.com/a.jpg", "http://x.com/d.png"]


def test_rendered_document_resolves_relative_sources(make_page):
    markup = make_page(images=["https://x.com/a.jpg", "/img/b.jpg", "c.jpg"])
    doc = RenderedDocument(markup, "https://shop.example.com/p/1")
    assert extract_fields(doc, URL).image_candidates == [
        "https://x.com/a.jpg",
        "https://shop.example.com/img/b.jpg",
        "https://shop.example.com/p/c.jpg",
    ]


def test_rendered_document_honours_base_href(make_page):
    markup = make_page(
        images=["img/a.jpg"],
        head_extra='<base href="https://cdn.example.com/assets/">',
    )
    doc = RenderedDocument(markup, "https://shop.example.com/p/1")
    assert doc.image_sources() == ["https://cdn.example.com/assets/img/a.jpg"]


def test_rendered_document_reads_lazy_load_attributes():
    markup = (
        "<html><body>"
        '<img data-src="/lazy/a.jpg">'
        '<img data-srcset="/lazy/b.jpg 1x, /lazy/b@2x.jpg 2x">'
        "<img>"
        "</body></html>"
    )
    doc = RenderedDocument(markup, "https://shop.example.com/p/1")
    assert doc.image_sources() == [
        "https://shop.example.com/lazy/a.jpg",
        "https://shop.example.com/lazy/b.jpg",
    ]


def test_brand_uses_request_url_not_rendered_url(make_page):
    doc = RenderedDocument(make_page(), "https://redirected.example.org/p/1")
    assert extract_fields(doc, URL).brand_name == "www.example.com"
