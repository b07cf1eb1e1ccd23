"""
Token vocabulary for executable names.

Closed enums for the platform, configuration and role components of an
artifact identity, plus the helpers that split a file name into tokens
and parse tokens back into enum members.

Parsing is case-insensitive; encoding always emits the canonical token
(the enum value).
"""
from __future__ import annotations

import ntpath
import posixpath
from enum import Enum
from typing import List, Optional, Tuple

from artifact_identity.core.errors import (
    MalformedArtifactName,
    UnrecognizedConfiguration,
    UnrecognizedPlatform,
)

TOKEN_SEPARATOR = "-"
EXTENSION_SEPARATOR = "."


# ── Enums ────────────────────────────────────────────────────────────────────

class Platform(str, Enum):
    """Target platforms; the value is the token embedded in file names."""

    WIN32         = "Win32"
    WIN64         = "Win64"
    HOLOLENS      = "HoloLens"
    MAC           = "Mac"
    XBOXONE       = "XboxOne"
    PS4           = "PS4"
    IOS           = "IOS"
    ANDROID       = "Android"
    HTML5         = "HTML5"
    LINUX         = "Linux"
    LINUX_AARCH64 = "LinuxAArch64"
    TVOS          = "TVOS"
    SWITCH        = "Switch"
    LUMIN         = "Lumin"


class Configuration(str, Enum):
    """Build configurations.

    ``DEVELOPMENT`` is the default and is never embedded in a file name.
    """

    DEBUG       = "Debug"
    DEBUG_GAME  = "DebugGame"
    DEVELOPMENT = "Development"
    TEST        = "Test"
    SHIPPING    = "Shipping"

    @property
    def is_default(self) -> bool:
        return self is Configuration.DEVELOPMENT


class Role(str, Enum):
    """Runtime role of an executable."""

    CLIENT  = "Client"
    SERVER  = "Server"
    EDITOR  = "Editor"
    PROGRAM = "Program"


# Lowercased token → member lookups.
_PLATFORM_TOKENS = {p.value.lower(): p for p in Platform}
_CONFIGURATION_TOKENS = {
    c.value.lower(): c for c in Configuration if not c.is_default
}


# ── Parsing ──────────────────────────────────────────────────────────────────

def parse_platform(token: str, project_name: Optional[str] = None) -> Platform:
    """Parse a platform token; raises UnrecognizedPlatform on miss."""
    try:
        return _PLATFORM_TOKENS[token.lower()]
    except KeyError:
        raise UnrecognizedPlatform(
            f"'{token}' is not a known platform",
            token=token,
            project_name=project_name,
        ) from None


def parse_configuration(
    token: str, project_name: Optional[str] = None,
) -> Configuration:
    """
    Parse a configuration token.

    Only non-default configurations can appear in a file name, so
    ``Development`` is rejected like any other unknown token.
    """
    try:
        return _CONFIGURATION_TOKENS[token.lower()]
    except KeyError:
        raise UnrecognizedConfiguration(
            f"'{token}' is not an embeddable configuration",
            token=token,
            project_name=project_name,
        ) from None


# ── Splitting ────────────────────────────────────────────────────────────────

def strip_extension(file_name: str) -> str:
    """
    Drop any directory part and the last extension of *file_name*.

    Both ``/`` and ``\\`` are treated as directory separators so that
    Windows paths decode on any host.  Names without an extension are
    returned unchanged; a name that is only an extension (``.exe``)
    yields an empty stem.
    """
    base = posixpath.basename(ntpath.basename(file_name))
    stem, sep, _ext = base.rpartition(EXTENSION_SEPARATOR)
    return stem if sep else base


def split_tokens(
    file_name: str, project_name: Optional[str] = None,
) -> Tuple[str, Optional[str], Optional[str]]:
    """
    Split *file_name* into ``(base_name, platform_token, config_token)``.

    One-token names return ``(base_name, None, None)``.  Any token count
    other than 1 or 3, or an empty token, raises MalformedArtifactName.
    """
    stem = strip_extension(file_name)
    tokens: List[str] = stem.split(TOKEN_SEPARATOR)

    if any(t == "" for t in tokens):
        raise MalformedArtifactName(
            f"'{file_name}' has an empty name token",
            token=file_name,
            project_name=project_name,
        )
    if len(tokens) == 1:
        return tokens[0], None, None
    if len(tokens) == 3:
        return tokens[0], tokens[1], tokens[2]

    raise MalformedArtifactName(
        f"'{file_name}' has {len(tokens)} tokens, expected 1 or 3",
        token=file_name,
        project_name=project_name,
    )
