"""
Extraction pipeline.
Fetch, normalize and scan JavaScript files for hard-coded string assignments.
"""

from .runner import ExtractionRunner

__all__ = ["ExtractionRunner"]
