"""Template decoding and metadata extraction."""

from .template_yaml import extract_template_record, is_template_file, load_template_document, to_listing_entry

__all__ = ["extract_template_record", "is_template_file", "load_template_document", "to_listing_entry"]
