"""
browserlite - one-shot command-line tools for a Chrome remote debugging session.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import Config
from .extractor import ContentExtractor, ExtractionResult, PageDocument

__all__ = ["__version__", "Config", "ContentExtractor", "ExtractionResult", "PageDocument"]
