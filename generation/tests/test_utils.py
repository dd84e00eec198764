"""
Test suite for generation post-processing (mailto sanitization).
"""

import pytest

from generation.models import GeneratedContent
from generation.utils import sanitize_content, sanitize_mailto_link


def make_content(mailto_link: str) -> GeneratedContent:
    return GeneratedContent.model_validate({
        "clientEmail": {"body": "Hi Jane,", "mailtoLink": mailto_link},
        "crmNotes": "• note",
    })


@pytest.mark.unit
@pytest.mark.parametrize("link", [
    "http://not-a-mailto",
    "https://example.com/?to=jane",
    "",
    " mailto:jane@example.com",
    "MAILTO:jane@example.com",
    "[Email](mailto:jane@example.com)",
])
def test_non_mailto_links_become_bare_scheme(link):
    assert sanitize_mailto_link(link) == "mailto:"
    assert sanitize_content(make_content(link)).client_email.mailto_link == "mailto:"


@pytest.mark.unit
@pytest.mark.parametrize("link", [
    "mailto:",
    "mailto:?subject=Update&body=Hi%20Jane",
    "mailto:jane%40example.com?subject=Your%20mortgage",
])
def test_mailto_links_pass_through(link):
    assert sanitize_mailto_link(link) == link
    assert sanitize_content(make_content(link)).client_email.mailto_link == link


@pytest.mark.unit
def test_sanitize_only_touches_mailto_link():
    original = make_content("http://not-a-mailto")

    sanitized = sanitize_content(original)

    assert sanitized.client_email.body == "Hi Jane,"
    assert sanitized.crm_notes == "• note"
    # The parsed value itself is immutable and left alone
    assert original.client_email.mailto_link == "http://not-a-mailto"


@pytest.mark.unit
def test_valid_content_is_returned_as_is():
    content = make_content("mailto:?subject=Hi")

    assert sanitize_content(content) is content
