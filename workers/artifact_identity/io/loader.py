"""
Loader — read and validate naming policy tables.

Validates the ``schema_version`` constraint (≥ 0.1) before parsing.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Tuple

from artifact_identity.io.schema import PolicyTableDocument
from artifact_identity.policy.naming import NamingPolicyTable

logger = logging.getLogger(__name__)

_POLICY_MIN_SCHEMA = (0, 1)


def _parse_version(v: str) -> Tuple[int, ...]:
    return tuple(int(p) for p in v.split("."))


def parse_policy_table(data: dict, label: str = "policy table") -> NamingPolicyTable:
    """
    Validate a decoded policy-table dict and build the lookup table.

    Raises ValueError if schema_version < 0.1 or an entry is invalid.
    """
    sv = data.get("schema_version", "0.0")
    if _parse_version(sv) < _POLICY_MIN_SCHEMA:
        min_str = ".".join(str(p) for p in _POLICY_MIN_SCHEMA)
        raise ValueError(f"{label} schema_version {sv} < required {min_str}")

    doc = PolicyTableDocument.model_validate(data)
    return doc.to_table()


def load_policy_table(path: Path) -> NamingPolicyTable:
    """Load a JSON policy table from *path*."""
    data = json.loads(path.read_text(encoding="utf-8"))
    table = parse_policy_table(data, label=str(path))
    logger.debug("loaded %d naming policies from %s", len(table), path)
    return table
