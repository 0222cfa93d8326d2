import pytest

from modules.translations.groups import GroupClassifier


@pytest.fixture
def classify():
    return GroupClassifier(
        known=frozenset({"common", "sign", "mail", "api", "site", "store"}),
        overrides={"auth": "sign", "email": "mail"},
    )


@pytest.mark.unit
class TestGroupClassifier:
    @pytest.mark.parametrize(
        "key,group",
        [
            ("common_save", "common"),
            ("mail_welcome_subject", "mail"),
            ("store_checkout", "store"),
            ("dashboard_title", "web"),
            ("settings", "web"),
        ],
    )
    def test_known_prefixes(self, classify, key, group):
        """Declared prefixes name their group; anything else is web."""
        assert classify(key) == group

    def test_override_wins(self, classify):
        assert classify("auth_login") == "sign"
        assert classify("email_footer") == "mail"

    def test_key_without_separator_uses_whole_key(self, classify):
        assert classify("common") == "common"

    def test_custom_separator_and_fallback(self):
        classify = GroupClassifier(
            known=frozenset({"admin"}), fallback="app", separator="."
        )
        assert classify("admin.users.title") == "admin"
        assert classify("admin_users") == "app"

    def test_is_deterministic(self, classify):
        assert [classify("site_footer") for _ in range(3)] == ["site"] * 3
