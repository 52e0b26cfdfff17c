import pytest

from analytics_hub.core.errors import ConfigurationError
from analytics_hub.core.options import resolve_options


class TestResolveOptions:
    def test_scalar_uses_default_key(self):
        options = resolve_options("X", "abc", key="token", defaults={"token": None, "debug": False})
        assert options == {"token": "abc", "debug": False}

    def test_scalar_without_default_key_raises(self):
        with pytest.raises(ConfigurationError, match="no default key"):
            resolve_options("X", "abc", key=None, defaults={})

    def test_mapping_merges_over_defaults(self):
        options = resolve_options(
            "X",
            {"token": "abc", "debug": True},
            key="token",
            defaults={"token": None, "debug": False, "region": "us"},
        )
        assert options == {"token": "abc", "debug": True, "region": "us"}

    def test_mapping_accepted_without_default_key(self):
        assert resolve_options("X", {"appId": "1"}) == {"appId": "1"}

    def test_other_shapes_raise(self):
        with pytest.raises(ConfigurationError, match="Could not resolve options"):
            resolve_options("X", 42, key="token")

    def test_defaults_are_not_shared_between_instances(self):
        defaults = {"tags": ["a"]}
        options = resolve_options("X", {}, defaults=defaults)
        options["tags"].append("b")
        assert defaults == {"tags": ["a"]}
