from showcase.extractor.extractor import MetadataExtractor, find_markdown_file
from showcase.extractor.parser import (
    parse_description,
    parse_metadata,
    parse_redirect_url,
    parse_tags,
    split_lines,
)

__all__ = [
    "MetadataExtractor",
    "find_markdown_file",
    "parse_description",
    "parse_metadata",
    "parse_redirect_url",
    "parse_tags",
    "split_lines",
]
