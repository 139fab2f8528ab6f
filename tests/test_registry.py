import pytest

from flagparse import DuplicateFlagKeyError, Flag, FlagKind, FlagRegistry


class TestFlagDeclaration:
    """Test suite for Flag construction and kind inference."""

    def test_kind_inferred_from_default(self):
        assert Flag("s", value="x").kind is FlagKind.STRING
        assert Flag("n", value=3).kind is FlagKind.NUMBER
        assert Flag("f", value=2.5).kind is FlagKind.NUMBER
        assert Flag("b", value=False).kind is FlagKind.BOOLEAN

    def test_default_kind_is_string(self):
        flag = Flag("name")
        assert flag.kind is FlagKind.STRING
        assert flag.value == ""
        assert flag.triggered is False

    def test_numbers_stored_as_float(self):
        flag = Flag("count", value=3)
        assert flag.value == 3.0
        assert isinstance(flag.value, float)

    def test_explicit_kind_must_match_default(self):
        with pytest.raises(TypeError):
            Flag("count", value="three", kind=FlagKind.NUMBER)

    def test_explicit_kind_without_default(self):
        assert Flag("count", kind=FlagKind.NUMBER).value == 0.0
        assert Flag("debug", kind=FlagKind.BOOLEAN).value is False

    def test_unsupported_default(self):
        with pytest.raises(TypeError):
            Flag("items", value=[1, 2])

    def test_empty_name_rejected(self):
        with pytest.raises(ValueError):
            Flag("")

    def test_single_alias_string(self):
        assert Flag("verbose", aliases="v").aliases == ("v",)


class TestFlagRegistry:
    """Test suite for FlagRegistry."""

    def test_resolve_by_name_and_alias(self):
        registry = FlagRegistry()
        flag = registry.register(Flag("verbose", value=False, aliases=("v", "loud")))

        assert registry.resolve("verbose") is flag
        assert registry.resolve("v") is flag
        assert registry.resolve("loud") is flag

    def test_resolve_unknown(self):
        registry = FlagRegistry()
        registry.register(Flag("name"))
        assert registry.resolve("nam") is None
        assert registry.resolve("NAME") is None
        assert "name" in registry
        assert "other" not in registry

    def test_earlier_lookups_survive_later_registrations(self):
        registry = FlagRegistry()
        first = registry.register(Flag("first", value="a", aliases=("f",)))
        for i in range(100):
            registry.register(Flag(f"flag{i}", value=float(i)))

        assert registry.resolve("f") is first
        assert first.value == "a"
        assert first.triggered is False

    def test_registration_order_preserved(self):
        registry = FlagRegistry()
        for name in ("c", "a", "b"):
            registry.register(Flag(name))
        assert [flag.name for flag in registry] == ["c", "a", "b"]
        assert len(registry) == 3

    def test_keys_cover_names_and_aliases(self):
        registry = FlagRegistry()
        registry.register(Flag("verbose", value=False, aliases=("v",)))
        registry.register(Flag("name", aliases=("n", "who")))
        assert registry.keys() == ["verbose", "v", "name", "n", "who"]

    def test_duplicate_name_rejected(self):
        registry = FlagRegistry()
        registry.register(Flag("name"))
        with pytest.raises(DuplicateFlagKeyError) as exc_info:
            registry.register(Flag("name"))
        assert exc_info.value.flag_id == "name"
        assert exc_info.value.owner == "name"

    def test_alias_colliding_with_other_flag_rejected(self):
        registry = FlagRegistry()
        registry.register(Flag("verbose", value=False, aliases=("v",)))
        with pytest.raises(DuplicateFlagKeyError):
            registry.register(Flag("version", value=False, aliases=("v",)))

        # Nothing from the rejected flag was indexed
        assert "version" not in registry
        assert registry.resolve("v").name == "verbose"
        assert len(registry) == 1

    def test_alias_repeating_own_name_rejected(self):
        registry = FlagRegistry()
        with pytest.raises(DuplicateFlagKeyError):
            registry.register(Flag("name", aliases=("name",)))
        assert len(registry) == 0

    def test_table_is_read_only(self):
        registry = FlagRegistry()
        flag = registry.register(Flag("name", aliases=("n",)))
        table = registry.table
        assert table == {"name": flag, "n": flag}
        with pytest.raises(TypeError):
            table["x"] = flag  # type: ignore[index]

    def test_triggered(self):
        registry = FlagRegistry()
        a = registry.register(Flag("a"))
        registry.register(Flag("b"))
        a.trigger("x")
        assert registry.triggered() == [a]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
