"""Extraction sub-package: deterministic, regex-based document simplification."""

from .entities import decode_entities
from .main_content import extract_main_content, locate_content_region
from .markup import html_to_text
from .metadata import extract_title
from .sections import classify_section, extract_sections, is_heading
from .summary import generate_summary
from .takeaways import extract_key_takeaways

__all__ = [
    "classify_section",
    "decode_entities",
    "extract_key_takeaways",
    "extract_main_content",
    "extract_sections",
    "extract_title",
    "generate_summary",
    "html_to_text",
    "is_heading",
    "locate_content_region",
]
