"""
Unit tests for ReadabilityExtractor.
"""

from unittest.mock import MagicMock, patch

import pytest
from bs4 import BeautifulSoup
from readability.readability import Unparseable

from browserlite.extractor.errors import ContentParseError
from browserlite.extractor.models import FailureReason, PageDocument
from browserlite.extractor.protocols import Extractor
from browserlite.extractor.readability_extractor import ReadabilityExtractor, ScoredDocument

DOCUMENT_PATH = "browserlite.extractor.readability_extractor.ScoredDocument"

# no <p>, <pre> or <td>, so readability has nothing to score
PLAIN_TEXT_PAGE = (
    "<html><body>"
    "<nav>Primary navigation text</nav>"
    "<header>Header banner text</header>"
    "<main>Plain main text without paragraph markup that is long enough to matter.</main>"
    "<footer>Footer legal text</footer>"
    "</body></html>"
)


def _mock_document(summary: str, title: str = "", found_candidate: bool = True) -> MagicMock:
    doc = MagicMock()
    doc.summary.return_value = summary
    doc.short_title.return_value = title
    doc.found_candidate = found_candidate
    return doc


@pytest.fixture
def document() -> PageDocument:
    return PageDocument(final_url="https://example.com/post", html="<html><body><p>x</p></body></html>")


class TestScoredDocument:
    """Test cases for candidate tracking on the readability Document."""

    def test_records_candidate_for_article(self, article_html):
        doc = ScoredDocument(article_html)
        doc.summary(html_partial=True)
        assert doc.found_candidate is True

    def test_records_missing_candidate(self):
        doc = ScoredDocument(PLAIN_TEXT_PAGE)
        doc.summary(html_partial=True)
        assert doc.found_candidate is False


class TestReadabilityExtractor:
    """Test cases for ReadabilityExtractor."""

    def test_satisfies_protocol(self):
        assert isinstance(ReadabilityExtractor(), Extractor)

    def test_extracts_article_as_markdown(self, article_html, make_document):
        document = make_document(article_html)
        extracted = ReadabilityExtractor().extract(document, BeautifulSoup(article_html, "lxml"))

        assert extracted is not None
        assert extracted.method == "readability"
        assert extracted.title == "Test Article"
        assert "Readable pages keep their main text" in extracted.content
        assert "## Details" in extracted.content
        assert "Footer copyright text" not in extracted.content

    def test_page_without_candidate_returns_none(self, make_document):
        document = make_document(PLAIN_TEXT_PAGE)
        soup = BeautifulSoup(PLAIN_TEXT_PAGE, "lxml")
        assert ReadabilityExtractor().extract(document, soup) is None

    def test_bodiless_title_only_page_returns_none(self, make_document):
        html = "<html><head><title>Only</title></head></html>"
        assert ReadabilityExtractor().extract(make_document(html), BeautifulSoup(html, "lxml")) is None

    def test_passes_settings_to_readability(self, document):
        with patch(DOCUMENT_PATH, return_value=_mock_document("<div><p>Body</p></div>")) as doc_cls:
            ReadabilityExtractor(min_text_length=10, retry_length=99).extract(document, MagicMock())

        doc_cls.assert_called_once_with(
            document.html,
            url="https://example.com/post",
            min_text_length=10,
            retry_length=99,
        )

    def test_summary_is_converted_and_cleaned(self, document):
        summary = "<div><h2>Heading</h2><p>First   paragraph.</p><p>()</p><p>Second.</p></div>"
        with patch(DOCUMENT_PATH, return_value=_mock_document(summary, "Post title")):
            extracted = ReadabilityExtractor().extract(document, MagicMock())

        assert extracted.title == "Post title"
        assert extracted.content == "## Heading\n\nFirst paragraph.\n\nSecond."

    def test_whole_body_summary_without_candidate_is_discarded(self, document):
        summary = "<body><nav>Menu</nav><div>Some body text</div></body>"
        with patch(DOCUMENT_PATH, return_value=_mock_document(summary, "Title", found_candidate=False)):
            assert ReadabilityExtractor().extract(document, MagicMock()) is None

    @pytest.mark.parametrize("summary", ["", "<div></div>", "<div>  <p> </p> <img src='x.png'></div>"])
    def test_empty_summary_returns_none(self, document, summary):
        with patch(DOCUMENT_PATH, return_value=_mock_document(summary, "Title")):
            assert ReadabilityExtractor().extract(document, MagicMock()) is None

    @pytest.mark.parametrize("title", ["", "   ", "[no-title]"])
    def test_missing_title_becomes_none(self, document, title):
        with patch(DOCUMENT_PATH, return_value=_mock_document("<p>Body text</p>", title)):
            extracted = ReadabilityExtractor().extract(document, MagicMock())

        assert extracted is not None
        assert extracted.title is None

    def test_unparseable_becomes_parse_error(self, document):
        doc = MagicMock()
        doc.summary.side_effect = Unparseable("broken")
        with patch(DOCUMENT_PATH, return_value=doc):
            with pytest.raises(ContentParseError) as exc_info:
                ReadabilityExtractor().extract(document, BeautifulSoup(document.html, "lxml"))

        assert exc_info.value.reason is FailureReason.PARSE_ERROR
        assert "https://example.com/post" in str(exc_info.value)

    def test_unparseable_page_without_text_returns_none(self):
        document = PageDocument(final_url="https://example.com/c", html="<!-- x -->")
        doc = MagicMock()
        doc.summary.side_effect = Unparseable("Document is empty")
        with patch(DOCUMENT_PATH, return_value=doc):
            assert ReadabilityExtractor().extract(document, BeautifulSoup(document.html, "lxml")) is None

    def test_comment_only_page_returns_none(self, make_document):
        html = "<!-- x -->"
        assert ReadabilityExtractor().extract(make_document(html), BeautifulSoup(html, "lxml")) is None

    def test_empty_final_url_is_not_passed(self):
        document = PageDocument(final_url="", html="<p>x</p>")
        with patch(DOCUMENT_PATH, return_value=_mock_document("<p>Body</p>")) as doc_cls:
            ReadabilityExtractor().extract(document, MagicMock())

        assert doc_cls.call_args.kwargs["url"] is None
