"""Tests for the validation runner."""

import pytest

from simple_enum.declarations import declare_enum
from simple_enum.schema.errors import ConfigurationError
from simple_enum.validators.enum_range import EnumRangeValidator
from simple_enum.validators.runner import (
    declare_enum_validation,
    validate_instance,
    validators_for,
)


class TestDeclareEnumValidation:
    def test_registers_validator(self, user_class):
        validator = declare_enum_validation(user_class, "gender")

        assert isinstance(validator, EnumRangeValidator)
        assert validators_for(user_class) == [validator]

    def test_undeclared_attribute_rejected(self, make_host):
        with pytest.raises(ConfigurationError) as exc_info:
            declare_enum_validation(make_host(), "gender")
        assert "no enum declared" in str(exc_info.value)

    def test_unknown_option_rejected(self, user_class):
        with pytest.raises(ConfigurationError):
            declare_enum_validation(user_class, "gender", in_list=[1, 2])

    def test_if_keyword_passed_through(self, user_class):
        validator = declare_enum_validation(
            user_class, "gender", **{"if": lambda u: False}
        )
        assert validator.validate(user_class(gender_cd=9)) == []


class TestValidateInstance:
    def test_valid_instance(self, user_class):
        declare_enum_validation(user_class, "gender")

        user = user_class()
        user.gender = "male"
        assert validate_instance(user).is_valid

    def test_allow_nil(self, user_class):
        declare_enum_validation(user_class, "gender", allow_nil=True)
        assert validate_instance(user_class()).is_valid

    def test_raw_value_out_of_range(self, user_class):
        declare_enum_validation(user_class, "gender")

        result = validate_instance(user_class(gender_cd=3))

        assert not result.is_valid
        assert result.errors_on("gender") == ["is invalid"]

    def test_catches_lenient_assignment(self, make_host):
        host = make_host(gender_cd=None)
        declare_enum(host, "gender", ["female", "male"], whiny=False)
        declare_enum_validation(host, "gender", message="is not a gender")

        user = host()
        user.gender = "robot"

        assert validate_instance(user).errors_on("gender") == ["is not a gender"]

    def test_no_validators(self, make_host):
        assert validate_instance(make_host()()).is_valid

    def test_combines_validators(self, make_host):
        host = make_host(gender_cd=None, status_cd=None)
        declare_enum(host, "gender", ["female", "male"])
        declare_enum(host, "status", ["active", "disabled"], prefix=True)
        declare_enum_validation(host, "gender")
        declare_enum_validation(host, "status")

        result = validate_instance(host(gender_cd=7, status_cd=8))

        assert [v.attribute for v in result.violations] == ["gender", "status"]

    def test_subclass_runs_base_validators(self, user_class):
        declare_enum_validation(user_class, "gender")
        child = type("Admin", (user_class,), {})

        assert not validate_instance(child(gender_cd=5)).is_valid

    def test_uses_redeclared_definition(self, user_class):
        declare_enum_validation(user_class, "gender")
        declare_enum(user_class, "gender", {"female": 1, "male": 0, "other": 2})

        assert validate_instance(user_class(gender_cd=2)).is_valid
