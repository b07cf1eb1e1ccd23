"""
Schema — Pydantic models for artifact_identity JSON inputs and outputs.

Input:
  policy table  — per-project naming policies (``PolicyTableDocument``).

Output:
  artifact_report.json — decoded and excluded executables for a project.

Runtime contract fields (present in every output):
  package_name, codec_version, schema_version.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from artifact_identity import CODEC_VERSION, PACKAGE_NAME, SCHEMA_VERSION
from artifact_identity.core.codec import ArtifactIdentity
from artifact_identity.policy.naming import NamingKind, NamingPolicy, NamingPolicyTable


# ── Policy table (input) ─────────────────────────────────────────────────────

class PolicyEntry(BaseModel):
    """One project's declared naming policy."""

    project_name: str = Field(min_length=1)
    kind: NamingKind
    executable_stem: Optional[str] = None
    generic_name: Optional[str] = None

    @model_validator(mode="after")
    def check_kind_fields(self) -> PolicyEntry:
        # Same rules as NamingPolicy, surfaced as a ValidationError.
        self.to_policy()
        return self

    def to_policy(self) -> NamingPolicy:
        return NamingPolicy(
            kind=self.kind,
            executable_stem=self.executable_stem,
            generic_name=self.generic_name,
        )


class PolicyTableDocument(BaseModel):
    """Top-level policy table file."""

    schema_version: str = SCHEMA_VERSION
    policies: List[PolicyEntry] = Field(default_factory=list)

    def to_table(self) -> NamingPolicyTable:
        return NamingPolicyTable.from_pairs(
            (e.project_name, e.to_policy()) for e in self.policies
        )


# ── Report (output) ──────────────────────────────────────────────────────────

class ClassifiedArtifact(BaseModel):
    """An executable that decoded to a full identity."""

    file_name: str
    project_name: str
    platform: str
    configuration: str
    role: str

    @classmethod
    def from_identity(cls, file_name: str, ident: ArtifactIdentity) -> ClassifiedArtifact:
        return cls(
            file_name=file_name,
            project_name=ident.project_name,
            platform=ident.platform.value,
            configuration=ident.configuration.value,
            role=ident.role.value,
        )


class ExcludedArtifact(BaseModel):
    """An executable that could not be attributed to the project."""

    file_name: str
    reason: str                     # ErrorKind value
    message: str = ""
    token: Optional[str] = None


class ArtifactCounts(BaseModel):
    total: int = 0
    classified: int = 0
    excluded: int = 0


class ArtifactReport(BaseModel):
    """Classification of a set of executable names for one project."""

    package_name: str = PACKAGE_NAME
    codec_version: str = CODEC_VERSION
    schema_version: str = SCHEMA_VERSION

    project_name: str
    policy: str                     # NamingPolicy.summary()
    host_platform: Optional[str] = None

    artifacts: List[ClassifiedArtifact] = Field(default_factory=list)
    excluded: List[ExcludedArtifact] = Field(default_factory=list)
    counts: ArtifactCounts = Field(default_factory=ArtifactCounts)

    timestamp: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )
