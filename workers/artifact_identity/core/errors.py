"""
Error taxonomy for the identity codec.

Every failure is terminal for the call that raised it.  Each exception
carries a machine-readable ``kind`` plus the context needed for a precise
diagnostic: the offending token, the project name and a policy summary.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """Stable reason tags, one per exception class."""

    MALFORMED_ARTIFACT_NAME        = "MALFORMED_ARTIFACT_NAME"
    UNRECOGNIZED_PLATFORM          = "UNRECOGNIZED_PLATFORM"
    UNRECOGNIZED_CONFIGURATION     = "UNRECOGNIZED_CONFIGURATION"
    UNRECOGNIZED_ARTIFACT_IDENTITY = "UNRECOGNIZED_ARTIFACT_IDENTITY"
    UNSUPPORTED_ROLE_FOR_ENCODING  = "UNSUPPORTED_ROLE_FOR_ENCODING"
    ROLE_NOT_REPRESENTABLE         = "ROLE_NOT_REPRESENTABLE"
    MISSING_NAMING_POLICY          = "MISSING_NAMING_POLICY"
    UNSUPPORTED_HOST_PLATFORM      = "UNSUPPORTED_HOST_PLATFORM"


class ArtifactIdentityError(ValueError):
    """Base class for all codec failures."""

    kind: ErrorKind

    def __init__(
        self,
        message: str,
        *,
        token: Optional[str] = None,
        project_name: Optional[str] = None,
        policy: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.token = token
        self.project_name = project_name
        self.policy = policy

    def __str__(self) -> str:
        parts = [self.message]
        if self.project_name is not None:
            parts.append(f"project={self.project_name}")
        if self.policy is not None:
            parts.append(f"policy={self.policy}")
        return " ".join(parts)

    def context(self) -> Dict[str, Any]:
        """Structured diagnostic, suitable for logging or JSON reports."""
        return {
            "kind": self.kind.value,
            "message": self.message,
            "token": self.token,
            "project_name": self.project_name,
            "policy": self.policy,
        }


# ── Decode failures ──────────────────────────────────────────────────────────

class MalformedArtifactName(ArtifactIdentityError):
    """Token count is neither 1 nor 3."""
    kind = ErrorKind.MALFORMED_ARTIFACT_NAME


class UnrecognizedPlatform(ArtifactIdentityError):
    kind = ErrorKind.UNRECOGNIZED_PLATFORM


class UnrecognizedConfiguration(ArtifactIdentityError):
    kind = ErrorKind.UNRECOGNIZED_CONFIGURATION


class UnrecognizedArtifactIdentity(ArtifactIdentityError):
    """Base name cannot be attributed to any role under the policy."""
    kind = ErrorKind.UNRECOGNIZED_ARTIFACT_IDENTITY


# ── Encode failures ──────────────────────────────────────────────────────────

class UnsupportedRoleForEncoding(ArtifactIdentityError):
    """Role has no suffix in the dedicated naming family (Editor, Program)."""
    kind = ErrorKind.UNSUPPORTED_ROLE_FOR_ENCODING


class RoleNotRepresentable(ArtifactIdentityError):
    """Policy has a single executable, so only the Client role is nameable."""
    kind = ErrorKind.ROLE_NOT_REPRESENTABLE


# ── Collaborator failures ────────────────────────────────────────────────────

class MissingNamingPolicy(ArtifactIdentityError):
    kind = ErrorKind.MISSING_NAMING_POLICY


class UnsupportedHostPlatform(ArtifactIdentityError):
    kind = ErrorKind.UNSUPPORTED_HOST_PLATFORM
