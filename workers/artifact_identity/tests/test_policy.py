"""
Tests for artifact_identity.policy.naming — policies and the lookup table.
"""
import pytest

from artifact_identity.core.errors import ErrorKind, MissingNamingPolicy
from artifact_identity.policy.naming import NamingKind, NamingPolicy, NamingPolicyTable


class TestNamingPolicy:

    def test_constructors(self):
        assert NamingPolicy.monolithic().kind is NamingKind.MONOLITHIC
        assert NamingPolicy.dedicated().is_dedicated
        content = NamingPolicy.content_only("UE4Game")
        assert content.is_content_only
        assert content.generic_name == "UE4Game"

    def test_content_only_requires_generic_name(self):
        with pytest.raises(ValueError):
            NamingPolicy(kind=NamingKind.CONTENT_ONLY)

    def test_generic_name_only_for_content(self):
        with pytest.raises(ValueError):
            NamingPolicy(kind=NamingKind.MONOLITHIC, generic_name="UE4Game")

    def test_stem_only_for_dedicated(self):
        with pytest.raises(ValueError):
            NamingPolicy(kind=NamingKind.MONOLITHIC, executable_stem="Action")

    def test_frozen(self):
        policy = NamingPolicy.monolithic()
        with pytest.raises(AttributeError):
            policy.kind = NamingKind.DEDICATED

    @pytest.mark.parametrize("project,stem", [
        ("FortniteGame", "Fortnite"),
        ("ShooterGAME", "Shooter"),
        ("Project", "Project"),
        ("Game", "Game"),
    ])
    def test_derived_role_stem(self, project, stem):
        assert NamingPolicy.dedicated().role_stem(project) == stem

    def test_explicit_role_stem(self):
        assert NamingPolicy.dedicated("FN").role_stem("FortniteGame") == "FN"

    def test_summary(self):
        assert NamingPolicy.monolithic().summary() == "monolithic"
        assert NamingPolicy.dedicated().summary() == "dedicated"
        assert NamingPolicy.dedicated("FN").summary() == "dedicated(stem=FN)"
        assert NamingPolicy.content_only("UE4Game").summary() == (
            "content_only(generic_name=UE4Game)"
        )


class TestNamingPolicyTable:

    def _table(self):
        return NamingPolicyTable({
            "ActionRPG": NamingPolicy.monolithic(),
            "FortniteGame": NamingPolicy.dedicated(),
        })

    def test_lookup_case_insensitive(self):
        table = self._table()
        assert table.lookup("fortnitegame").is_dedicated
        assert "ACTIONRPG" in table

    def test_missing_policy_is_not_guessed(self):
        with pytest.raises(MissingNamingPolicy) as exc_info:
            self._table().lookup("ElementalDemo")
        assert exc_info.value.kind == ErrorKind.MISSING_NAMING_POLICY
        assert exc_info.value.project_name == "ElementalDemo"

    def test_case_duplicates_rejected(self):
        with pytest.raises(ValueError):
            NamingPolicyTable({
                "ActionRPG": NamingPolicy.monolithic(),
                "actionrpg": NamingPolicy.dedicated(),
            })

    def test_from_pairs_duplicates_rejected(self):
        with pytest.raises(ValueError):
            NamingPolicyTable.from_pairs([
                ("ActionRPG", NamingPolicy.monolithic()),
                ("ActionRPG", NamingPolicy.monolithic()),
            ])

    def test_projects_sorted(self):
        assert self._table().projects() == ["ActionRPG", "FortniteGame"]
        assert len(self._table()) == 2
