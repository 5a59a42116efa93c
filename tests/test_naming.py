import pytest

from json_classgen.codegen.core.naming import (
    CollisionStrategy,
    EmptyIdentifierError,
    NameCollisionError,
    capitalize,
    is_identifier,
    require_identifier,
    resolve_record_name,
)


class TestCapitalize:
    """Test record name capitalization"""

    def test_upper_cases_first_character_only(self):
        assert capitalize("address") == "Address"
        assert capitalize("userID") == "UserID"
        assert capitalize("first_name") == "First_name"

    def test_already_capitalized(self):
        assert capitalize("Person") == "Person"

    def test_single_character(self):
        assert capitalize("a") == "A"

    def test_empty_and_non_string_unchanged(self):
        assert capitalize("") == ""
        assert capitalize(None) is None

    def test_non_letter_prefix_unchanged(self):
        assert capitalize("1st") == "1st"
        assert capitalize("_id") == "_id"


class TestIdentifiers:
    """Test identifier checks"""

    def test_require_identifier_returns_name(self):
        assert require_identifier("name", "field") == "name"

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_require_identifier_rejects_blank(self, name):
        with pytest.raises(EmptyIdentifierError):
            require_identifier(name, "field")

    def test_is_identifier(self):
        assert is_identifier("first_name")
        assert is_identifier("_private")
        assert not is_identifier("first-name")
        assert not is_identifier("2fa")
        assert not is_identifier("with space")


class TestResolveRecordName:
    """Test record name collision handling"""

    def test_free_name_is_kept(self):
        assert resolve_record_name("Address", ["Person"]) == "Address"

    def test_suffix_strategy_numbers_from_two(self):
        assert resolve_record_name("Address", ["Address"]) == "Address2"
        assert resolve_record_name("Address", ["Address", "Address2"]) == "Address3"

    def test_error_strategy_raises(self):
        with pytest.raises(NameCollisionError):
            resolve_record_name("Address", ["Address"], CollisionStrategy.ERROR)
