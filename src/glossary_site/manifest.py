from __future__ import annotations

import logging
from pathlib import Path
from typing import AbstractSet, Dict, List, Mapping

import pandas as pd

from .pages import linked_terms, page_name, page_terms
from .records import sorted_keys

LOGGER = logging.getLogger(__name__)
MANIFEST_COLUMNS = ["term", "page", "definition", "linked_terms"]


def to_records(
    glossary: Mapping[str, str],
    separators: AbstractSet[str],
    *,
    link_separators: bool = True,
) -> List[Dict[str, object]]:
    records: List[Dict[str, object]] = []
    known = frozenset(page_terms(glossary))
    for term in sorted_keys(glossary):
        definition = glossary[term]
        records.append(
            {
                "term": term,
                "page": page_name(term) if term in known else "",
                "definition": definition,
                "linked_terms": "; ".join(
                    linked_terms(
                        definition, known, separators, link_separators=link_separators
                    )
                ),
            }
        )
    return records


def write_manifest(records: List[Dict[str, object]], path: Path) -> Path:
    frame = pd.DataFrame(records, columns=MANIFEST_COLUMNS)
    path.parent.mkdir(parents=True, exist_ok=True)
    LOGGER.info("Writing %s manifest rows to %s", len(frame), path)
    frame.to_csv(path, index=False, encoding="utf-8-sig")
    return path
