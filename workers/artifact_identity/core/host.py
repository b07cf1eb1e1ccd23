"""
Host platform detection.

One-token executable names carry no platform; they belong to whatever
platform the build ran on, which callers usually equate with the host.
"""
from __future__ import annotations

import platform
from typing import Optional

from artifact_identity.config import settings
from artifact_identity.core.errors import UnsupportedHostPlatform
from artifact_identity.core.tokens import Platform, parse_platform

_SYSTEM_PLATFORMS = {
    "Windows": Platform.WIN64,
    "Linux": Platform.LINUX,
    "Darwin": Platform.MAC,
}


def detect_host_platform(override: Optional[str] = None) -> Platform:
    """
    Return the Platform of the running host.

    *override* (a platform token) takes precedence; when omitted,
    ``settings.HOST_PLATFORM`` is consulted before the OS itself.
    """
    if override is None:
        override = settings.HOST_PLATFORM
    if override:
        return parse_platform(override)

    system = platform.system()
    try:
        return _SYSTEM_PLATFORMS[system]
    except KeyError:
        raise UnsupportedHostPlatform(
            f"unhandled host system '{system}'",
            token=system,
        ) from None
