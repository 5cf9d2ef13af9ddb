"""Catalog — Ordered YAML tables driving section and document detection."""

from prowrite.catalog.loader import (
    clear_cache,
    get_document_catalog,
    get_section_catalog,
    load_document_catalog,
    load_section_catalog,
)
from prowrite.catalog.models import (
    DocumentCatalog,
    SectionCatalog,
    SectionRule,
    SectionType,
)

__all__ = [
    "DocumentCatalog",
    "SectionCatalog",
    "SectionRule",
    "SectionType",
    "clear_cache",
    "get_document_catalog",
    "get_section_catalog",
    "load_document_catalog",
    "load_section_catalog",
]
