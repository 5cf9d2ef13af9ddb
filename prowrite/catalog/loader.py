"""
Catalog Loader — Load ordered section / document-type tables from YAML.

Catalogs ship in prowrite/catalog/data. Set PROWRITE_CATALOG_DIR to point
at a directory with replacement files of the same names.
"""

import os
from pathlib import Path
from typing import Optional, Union

import yaml

from prowrite.catalog.models import (
    DocumentCatalog,
    SectionCatalog,
    SectionRule,
    SectionType,
)
from prowrite.core.logging import get_component_logger

log = get_component_logger(__name__)

# Default catalog directory
CATALOG_DIR = Path(__file__).parent / "data"

SECTIONS_FILE = "sections.yaml"
DOCUMENTS_FILE = "hr_documents.yaml"


def catalog_dir() -> Path:
    """Directory catalogs are read from (env override or packaged data)."""
    override = os.environ.get("PROWRITE_CATALOG_DIR")
    return Path(override) if override else CATALOG_DIR


def _read_yaml(path: Path) -> dict:
    if not path.exists():
        raise FileNotFoundError(f"Catalog not found: {path}")

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Catalog {path} must be a mapping, got {type(data).__name__}")
    return data


def parse_section_rule(data: dict) -> Optional[SectionRule]:
    """Parse a single section rule, or None if it is malformed."""
    try:
        label = str(data["label"]).strip()
        if not label:
            raise ValueError("empty label")
        return SectionRule(
            label=label,
            type=SectionType(data["type"]),
            title=data.get("title") or label.title(),
            icon=data.get("icon", ""),
        )
    except (KeyError, ValueError, TypeError, AttributeError) as e:
        log.warning("section_rule_skipped", error=str(e), entry=repr(data)[:80])
        return None


def parse_section_catalog(data: dict) -> SectionCatalog:
    """Build a SectionCatalog from a parsed YAML mapping."""
    rules = []
    for rule_data in data.get("rules") or []:
        rule = parse_section_rule(rule_data)
        if rule:
            rules.append(rule)

    return SectionCatalog(name=data.get("name", "unnamed"), rules=tuple(rules))


def parse_document_catalog(data: dict) -> DocumentCatalog:
    """Build a DocumentCatalog from a parsed YAML mapping."""
    types = []
    for entry in data.get("document_types") or []:
        if isinstance(entry, str) and entry.strip():
            types.append(entry.strip())
        else:
            log.warning("document_type_skipped", entry=repr(entry)[:80])

    return DocumentCatalog(
        name=data.get("name", "unnamed"),
        document_types=tuple(types),
        default_type=data.get("default_type", "HR Document"),
    )


def load_section_catalog(path: Union[str, Path, None] = None) -> SectionCatalog:
    """
    Load the section catalog.

    Args:
        path: Explicit YAML file (default: sections.yaml in catalog_dir())

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the top level is not a mapping
    """
    path = Path(path) if path else catalog_dir() / SECTIONS_FILE
    catalog = parse_section_catalog(_read_yaml(path))
    log.verbose("section_catalog_loaded", path=str(path), rules=len(catalog.rules))
    return catalog


def load_document_catalog(path: Union[str, Path, None] = None) -> DocumentCatalog:
    """Load the HR document-type catalog (same contract as load_section_catalog)."""
    path = Path(path) if path else catalog_dir() / DOCUMENTS_FILE
    catalog = parse_document_catalog(_read_yaml(path))
    log.verbose("document_catalog_loaded", path=str(path), types=len(catalog.document_types))
    return catalog


# Cache for loaded catalogs
_cache: dict[str, object] = {}


def get_section_catalog(use_cache: bool = True) -> SectionCatalog:
    """Get the section catalog, using cache by default."""
    if use_cache and "sections" in _cache:
        return _cache["sections"]

    catalog = load_section_catalog()
    _cache["sections"] = catalog
    return catalog


def get_document_catalog(use_cache: bool = True) -> DocumentCatalog:
    """Get the document-type catalog, using cache by default."""
    if use_cache and "documents" in _cache:
        return _cache["documents"]

    catalog = load_document_catalog()
    _cache["documents"] = catalog
    return catalog


def clear_cache() -> None:
    """Clear the catalog cache."""
    _cache.clear()
