"""
Shared pytest fixtures for artifact_identity tests.

All fixtures are pure-Python — no build outputs on disk, no host
dependency (tests pass the host platform explicitly).
"""
import pytest

from artifact_identity.policy.naming import NamingPolicy


# ── Policies for the three reference projects ───────────────────────────────

@pytest.fixture
def content_policy():
    """ElementalDemo: content-only project running the stock UE4Game."""
    return NamingPolicy.content_only("UE4Game")


@pytest.fixture
def monolithic_policy():
    """ActionRPG: a single executable named after the project."""
    return NamingPolicy.monolithic()


@pytest.fixture
def dedicated_policy():
    """FortniteGame: dedicated FortniteClient / FortniteServer executables."""
    return NamingPolicy.dedicated()


@pytest.fixture
def policy_table_doc():
    """Policy table document as it would appear on disk."""
    return {
        "schema_version": "0.1",
        "policies": [
            {"project_name": "ElementalDemo", "kind": "content_only",
             "generic_name": "UE4Game"},
            {"project_name": "ActionRPG", "kind": "monolithic"},
            {"project_name": "FortniteGame", "kind": "dedicated"},
            {"project_name": "ShooterGame", "kind": "dedicated",
             "executable_stem": "Shooter"},
        ],
    }
