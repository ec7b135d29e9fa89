"""Tests for schema models."""

from enum import Enum, IntEnum

import pytest
from pydantic import ValidationError

from simple_enum.schema.builder import build_definition
from simple_enum.schema.models import EnumKey, EnumOptions, as_code


class TestAsCode:
    def test_int(self):
        assert as_code(3) == 3

    def test_bool_is_not_a_code(self):
        assert as_code(True) is None

    def test_string_is_not_a_code(self):
        assert as_code("3") is None

    def test_index_protocol(self):
        class Code:
            def __index__(self):
                return 7

        assert as_code(Code()) == 7


class TestEnumDefinition:
    @pytest.fixture
    def definition(self):
        return build_definition("gender", {"female": 1, "male": 0})

    def test_names_and_codes(self, definition):
        assert definition.names == ["female", "male"]
        assert definition.codes == [1, 0]

    def test_mapping_is_a_copy(self, definition):
        mapping = definition.mapping()
        mapping["other"] = 2
        assert "other" not in definition.mapping()

    def test_keys_enum(self, definition):
        assert issubclass(definition.keys, EnumKey)
        assert issubclass(definition.keys, Enum)
        assert definition.keys.__name__ == "Gender"
        assert definition.keys["female"] == "female"

    def test_key_prints_as_name(self, definition):
        member = definition.keys["female"]

        assert str(member) == "female"
        assert f"{member}" == "female"
        assert f"{member:>8}" == "  female"

    def test_code_for_name(self, definition):
        assert definition.code_for("female") == 1

    def test_code_for_member(self, definition):
        assert definition.code_for(definition.keys["male"]) == 0

    def test_code_for_code(self, definition):
        assert definition.code_for(1) == 1

    def test_code_for_foreign_int_enum(self, definition):
        class Legacy(IntEnum):
            FEMALE = 1

        assert definition.code_for(Legacy.FEMALE) == 1

    def test_code_for_unknown(self, definition):
        assert definition.code_for("other") is None
        assert definition.code_for(5) is None
        assert definition.code_for(True) is None

    def test_name_for(self, definition):
        assert definition.name_for(1) is definition.keys["female"]

    def test_name_for_unknown_code(self, definition):
        assert definition.name_for(9) is None
        assert definition.name_for(None) is None
        assert definition.name_for("female") is None

    def test_has_code(self, definition):
        assert definition.has_code(0)
        assert not definition.has_code(2)
        assert not definition.has_code(False)

    def test_is_immutable(self, definition):
        with pytest.raises(AttributeError):
            definition.column = "other"

    def test_compound_attribute_keys_name(self):
        definition = build_definition("payment_status", ["paid"])
        assert definition.keys.__name__ == "PaymentStatus"


class TestEnumOptions:
    def test_defaults(self):
        opts = EnumOptions()
        assert opts.column is None
        assert opts.prefix is None
        assert opts.slim is False
        assert opts.whiny is True

    def test_extra_forbidden(self):
        with pytest.raises(ValidationError):
            EnumOptions.model_validate({"bogus": 1})
