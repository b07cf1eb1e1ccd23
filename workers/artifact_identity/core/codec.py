"""
Identity codec — executable file name ↔ ArtifactIdentity.

Name grammar::

    <BaseName>[-<Platform>-<Configuration>]<extension>

The platform/configuration pair is present exactly when the
configuration is not Development.  The base name identifies the role,
interpreted through the project's NamingPolicy.

Both operations are pure: no file-system access, no shared state.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from artifact_identity.core.errors import (
    MalformedArtifactName,
    RoleNotRepresentable,
    UnrecognizedArtifactIdentity,
    UnsupportedRoleForEncoding,
)
from artifact_identity.core.host import detect_host_platform
from artifact_identity.core.tokens import (
    EXTENSION_SEPARATOR,
    TOKEN_SEPARATOR,
    Configuration,
    Platform,
    Role,
    parse_configuration,
    parse_platform,
    split_tokens,
)
from artifact_identity.policy.naming import NamingKind, NamingPolicy

logger = logging.getLogger(__name__)

# Suffixes of the dedicated naming family.
_ROLE_SUFFIXES = {
    Role.CLIENT: "Client",
    Role.SERVER: "Server",
}


@dataclass(frozen=True)
class ArtifactIdentity:
    """Semantic identity of one executable."""

    project_name: str
    platform: Platform
    configuration: Configuration
    role: Role


# ── Decode ───────────────────────────────────────────────────────────────────

def decode(
    file_name: str,
    project_name: str,
    policy: NamingPolicy,
    host_platform: Optional[Platform] = None,
) -> ArtifactIdentity:
    """
    Decode *file_name* into an ArtifactIdentity for *project_name*.

    Parameters
    ----------
    file_name : str
        Executable name, with or without extension or directory part.
    project_name : str
        Project the executable is expected to belong to.
    policy : NamingPolicy
        The project's declared naming policy.
    host_platform : Platform, optional
        Platform for one-token names, which carry none.  Defaults to
        ``detect_host_platform()``.

    Raises
    ------
    MalformedArtifactName, UnrecognizedPlatform, UnrecognizedConfiguration,
    UnrecognizedArtifactIdentity
    """
    base_name, platform_token, config_token = split_tokens(file_name, project_name)

    if platform_token is None:
        configuration = Configuration.DEVELOPMENT
        platform = host_platform if host_platform is not None else detect_host_platform()
    else:
        platform = parse_platform(platform_token, project_name)
        configuration = parse_configuration(config_token, project_name)

    role = _resolve_role(base_name, project_name, policy)

    logger.debug(
        "decoded %s → %s %s %s", file_name, platform.value,
        configuration.value, role.value,
    )
    return ArtifactIdentity(
        project_name=project_name,
        platform=platform,
        configuration=configuration,
        role=role,
    )


def _resolve_role(base_name: str, project_name: str, policy: NamingPolicy) -> Role:
    name = base_name.lower()

    if policy.is_dedicated:
        # Canonical stem first, then the unstripped project name.
        stems = (policy.role_stem(project_name).lower(), project_name.lower())
        for role, suffix in _ROLE_SUFFIXES.items():
            if any(name == stem + suffix.lower() for stem in stems):
                return role

    # Monolithic convention: a bare project-named executable is the client.
    if name == project_name.lower():
        return Role.CLIENT

    if policy.is_content_only and name == policy.generic_name.lower():
        return Role.CLIENT

    raise UnrecognizedArtifactIdentity(
        f"base name '{base_name}' matches no role",
        token=base_name,
        project_name=project_name,
        policy=policy.summary(),
    )


# ── Encode ───────────────────────────────────────────────────────────────────

def encode(
    identity: ArtifactIdentity,
    policy: NamingPolicy,
    extension: str = "",
) -> str:
    """
    Synthesize the canonical file name for *identity*.

    *extension* is appended verbatim (include the dot); an empty
    extension yields an extensionless name.

    Raises
    ------
    UnsupportedRoleForEncoding, RoleNotRepresentable, MalformedArtifactName
    """
    base_name = _base_name(identity, policy)

    bad = [c for c in (TOKEN_SEPARATOR, EXTENSION_SEPARATOR) if c in base_name]
    if bad:
        raise MalformedArtifactName(
            f"base name '{base_name}' contains '{bad[0]}'",
            token=base_name,
            project_name=identity.project_name,
            policy=policy.summary(),
        )

    if identity.configuration.is_default:
        return base_name + extension

    return TOKEN_SEPARATOR.join(
        (base_name, identity.platform.value, identity.configuration.value)
    ) + extension


def _base_name(identity: ArtifactIdentity, policy: NamingPolicy) -> str:
    role = identity.role

    if policy.kind is NamingKind.DEDICATED:
        suffix = _ROLE_SUFFIXES.get(role)
        if suffix is None:
            raise UnsupportedRoleForEncoding(
                f"role {role.value} has no dedicated executable name",
                token=role.value,
                project_name=identity.project_name,
                policy=policy.summary(),
            )
        return policy.role_stem(identity.project_name) + suffix

    if role is not Role.CLIENT:
        raise RoleNotRepresentable(
            f"role {role.value} cannot be named under a single-executable policy",
            token=role.value,
            project_name=identity.project_name,
            policy=policy.summary(),
        )

    if policy.kind is NamingKind.CONTENT_ONLY:
        return policy.generic_name
    return identity.project_name
