"""
Naming policy — per-project executable naming facts.

A policy is supplied by the build-configuration layer and never inferred
from the project name.  It answers one question: which base names can a
project's executables carry?

  dedicated     <stem>Client / <stem>Server executables
  monolithic    a single executable named after the project (Client)
  content_only  a shared generic executable, e.g. ``UE4Game`` (Client)
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from artifact_identity.core.errors import MissingNamingPolicy

# Trailing project-name suffix dropped when deriving a dedicated stem.
GAME_SUFFIX = "Game"


class NamingKind(str, Enum):
    DEDICATED    = "dedicated"
    MONOLITHIC   = "monolithic"
    CONTENT_ONLY = "content_only"


@dataclass(frozen=True)
class NamingPolicy:
    """Immutable naming policy for one project."""

    kind: NamingKind
    executable_stem: Optional[str] = None
    generic_name: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind is NamingKind.CONTENT_ONLY:
            if not self.generic_name:
                raise ValueError("content_only policy requires generic_name")
        elif self.generic_name is not None:
            raise ValueError(
                f"generic_name is only valid for content_only, not {self.kind.value}"
            )
        if self.executable_stem is not None and self.kind is not NamingKind.DEDICATED:
            raise ValueError(
                f"executable_stem is only valid for dedicated, not {self.kind.value}"
            )
        if self.executable_stem == "":
            raise ValueError("executable_stem must not be empty")

    # ── Constructors ─────────────────────────────────────────────────

    @classmethod
    def dedicated(cls, executable_stem: Optional[str] = None) -> NamingPolicy:
        return cls(kind=NamingKind.DEDICATED, executable_stem=executable_stem)

    @classmethod
    def monolithic(cls) -> NamingPolicy:
        return cls(kind=NamingKind.MONOLITHIC)

    @classmethod
    def content_only(cls, generic_name: str) -> NamingPolicy:
        return cls(kind=NamingKind.CONTENT_ONLY, generic_name=generic_name)

    # ── Queries ──────────────────────────────────────────────────────

    @property
    def is_dedicated(self) -> bool:
        return self.kind is NamingKind.DEDICATED

    @property
    def is_content_only(self) -> bool:
        return self.kind is NamingKind.CONTENT_ONLY

    def role_stem(self, project_name: str) -> str:
        """
        Stem that dedicated role suffixes attach to.

        The explicit ``executable_stem`` wins; otherwise a trailing
        ``Game`` is dropped (``FortniteGame`` → ``Fortnite``).
        """
        if self.executable_stem:
            return self.executable_stem
        n = len(GAME_SUFFIX)
        if len(project_name) > n and project_name[-n:].lower() == GAME_SUFFIX.lower():
            return project_name[:-n]
        return project_name

    def summary(self) -> str:
        """Short human-readable form used in error context and reports."""
        if self.kind is NamingKind.CONTENT_ONLY:
            return f"content_only(generic_name={self.generic_name})"
        if self.kind is NamingKind.DEDICATED and self.executable_stem:
            return f"dedicated(stem={self.executable_stem})"
        return self.kind.value


class NamingPolicyTable:
    """
    Read-only project → policy lookup.

    Project names compare case-insensitively; two entries that differ
    only by case are rejected at construction.
    """

    def __init__(self, policies: Mapping[str, NamingPolicy]) -> None:
        entries: Dict[str, Tuple[str, NamingPolicy]] = {}
        for project_name, policy in policies.items():
            key = project_name.lower()
            if key in entries:
                raise ValueError(
                    f"duplicate policy for project '{project_name}' "
                    f"(already defined as '{entries[key][0]}')"
                )
            entries[key] = (project_name, policy)
        self._entries = MappingProxyType(entries)

    @classmethod
    def from_pairs(
        cls, pairs: Iterable[Tuple[str, NamingPolicy]],
    ) -> NamingPolicyTable:
        table: Dict[str, NamingPolicy] = {}
        for project_name, policy in pairs:
            if project_name in table:
                raise ValueError(f"duplicate policy for project '{project_name}'")
            table[project_name] = policy
        return cls(table)

    def lookup(self, project_name: str) -> NamingPolicy:
        """Return the policy for *project_name*; never guesses a default."""
        try:
            return self._entries[project_name.lower()][1]
        except KeyError:
            raise MissingNamingPolicy(
                "no naming policy declared",
                token=project_name,
                project_name=project_name,
            ) from None

    def projects(self) -> List[str]:
        """Project names as declared, sorted case-insensitively."""
        return sorted((name for name, _ in self._entries.values()), key=str.lower)

    def __contains__(self, project_name: object) -> bool:
        return isinstance(project_name, str) and project_name.lower() in self._entries

    def __len__(self) -> int:
        return len(self._entries)
