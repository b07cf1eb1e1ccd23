"""
Tests for artifact_identity.core.host — host platform detection.
"""
import pytest

from artifact_identity.config import settings
from artifact_identity.core.errors import UnrecognizedPlatform, UnsupportedHostPlatform
from artifact_identity.core.host import detect_host_platform
from artifact_identity.core.tokens import Platform


@pytest.fixture(autouse=True)
def _no_settings_override(monkeypatch):
    monkeypatch.setattr(settings, "HOST_PLATFORM", None)


class TestDetectHostPlatform:

    @pytest.mark.parametrize("system,expected", [
        ("Windows", Platform.WIN64),
        ("Linux", Platform.LINUX),
        ("Darwin", Platform.MAC),
    ])
    def test_known_systems(self, monkeypatch, system, expected):
        monkeypatch.setattr("platform.system", lambda: system)
        assert detect_host_platform() is expected

    def test_unknown_system(self, monkeypatch):
        monkeypatch.setattr("platform.system", lambda: "Plan9")
        with pytest.raises(UnsupportedHostPlatform) as exc_info:
            detect_host_platform()
        assert exc_info.value.token == "Plan9"

    def test_explicit_override(self, monkeypatch):
        monkeypatch.setattr("platform.system", lambda: "Windows")
        assert detect_host_platform("Linux") is Platform.LINUX

    def test_settings_override(self, monkeypatch):
        monkeypatch.setattr("platform.system", lambda: "Windows")
        monkeypatch.setattr(settings, "HOST_PLATFORM", "Mac")
        assert detect_host_platform() is Platform.MAC

    def test_bad_override(self):
        with pytest.raises(UnrecognizedPlatform):
            detect_host_platform("Amiga")
