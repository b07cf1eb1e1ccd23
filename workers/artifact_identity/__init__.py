"""
artifact_identity — Build-artifact identity codec.

Decodes an executable file name into (project, platform, configuration,
role) and synthesizes the canonical file name for such an identity.

Quick start::

    from artifact_identity import NamingPolicy, decode, encode

    policy = NamingPolicy.dedicated()
    ident = decode("FortniteServer-Win64-Shipping.exe", "FortniteGame", policy)
    assert encode(ident, policy, ".exe") == "FortniteServer-Win64-Shipping.exe"

Layers
------
core     Token enums, error taxonomy, decode/encode, host platform.
policy   Per-project naming policy and its lookup table.
io       Pydantic schema, policy-table loader, report writer.
runner   Classify a set of file names into a JSON report.
"""

__version__ = "0.1.0"
CODEC_VERSION = "v0"
PACKAGE_NAME = "artifact_identity"
SCHEMA_VERSION = "0.1"

from .core.tokens import (
    Configuration,
    Platform,
    Role,
    parse_configuration,
    parse_platform,
)

from .core.errors import (
    ArtifactIdentityError,
    ErrorKind,
    MalformedArtifactName,
    MissingNamingPolicy,
    RoleNotRepresentable,
    UnrecognizedArtifactIdentity,
    UnrecognizedConfiguration,
    UnrecognizedPlatform,
    UnsupportedHostPlatform,
    UnsupportedRoleForEncoding,
)

from .core.codec import ArtifactIdentity, decode, encode
from .core.host import detect_host_platform

from .policy.naming import NamingKind, NamingPolicy, NamingPolicyTable

__all__ = [
    # tokens
    "Platform",
    "Configuration",
    "Role",
    "parse_platform",
    "parse_configuration",
    # errors
    "ErrorKind",
    "ArtifactIdentityError",
    "MalformedArtifactName",
    "UnrecognizedPlatform",
    "UnrecognizedConfiguration",
    "UnrecognizedArtifactIdentity",
    "UnsupportedRoleForEncoding",
    "RoleNotRepresentable",
    "MissingNamingPolicy",
    "UnsupportedHostPlatform",
    # codec
    "ArtifactIdentity",
    "decode",
    "encode",
    "detect_host_platform",
    # policy
    "NamingKind",
    "NamingPolicy",
    "NamingPolicyTable",
    # meta
    "PACKAGE_NAME",
    "CODEC_VERSION",
    "SCHEMA_VERSION",
]
