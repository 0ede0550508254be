"""
Content extraction: rendered HTML in, title and Markdown out.

1. Primary: readability-lxml article scoring, converted to GitHub-flavoured
   Markdown with markdownify
2. Fallback: BeautifulSoup chrome stripping and main-container text
3. Quality gate: minimum content length, whichever path produced it
"""

from .cleaning import clean_text
from .content_extractor import UNTITLED, ContentExtractor
from .errors import ContentParseError, ExtractionError, InsufficientContentError
from .markdown import GfmMarkdownConverter, html_to_markdown
from .models import ExtractedContent, ExtractionFailure, ExtractionResult, FailureReason, PageDocument
from .protocols import Extractor
from .readability_extractor import ReadabilityExtractor
from .soup_extractor import SoupFallbackExtractor

__all__ = [
    "ContentExtractor",
    "ContentParseError",
    "ExtractedContent",
    "ExtractionError",
    "ExtractionFailure",
    "ExtractionResult",
    "Extractor",
    "FailureReason",
    "GfmMarkdownConverter",
    "InsufficientContentError",
    "PageDocument",
    "ReadabilityExtractor",
    "SoupFallbackExtractor",
    "UNTITLED",
    "clean_text",
    "html_to_markdown",
]
