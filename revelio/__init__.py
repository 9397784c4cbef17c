"""
Revelio - uncover hard-coded secrets in minified JavaScript files.
"""

__version__ = "1.2.1"

from revelio.models import ExtractionMode, ExtractionRequest, Finding, UrlResult
from revelio.pipelines.extraction import ExtractionRunner

__all__ = [
    "__version__",
    "ExtractionMode",
    "ExtractionRequest",
    "ExtractionRunner",
    "Finding",
    "UrlResult",
]
