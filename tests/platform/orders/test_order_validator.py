"""Tests for create-order payload validation."""

import pytest

from lablink.platform.orders import OrderValidator
from lablink.platform.orders.application.validators.order_validator import validate_teeth_number


@pytest.fixture
def validator():
    return OrderValidator()


def messages(result, field_name):
    return [error.message for error in result.errors if error.field == field_name]


class TestTeethNumber:
    @pytest.mark.parametrize("value", ["11", "11-14", "11, 12, 21", "18-28,31", "48"])
    def test_valid_notation(self, value):
        assert validate_teeth_number(value) is None

    @pytest.mark.parametrize(
        "value, message",
        [
            ("  ", "Teeth number cannot be empty"),
            ("11-", "Invalid range format. Use format: 11-14"),
            ("a-b", "Invalid range format. Use format: 11-14"),
            ("11-49", "Tooth numbers must be between 1 and 48"),
            ("0", "Tooth numbers must be between 1 and 48"),
            ("14-11", "Range start must be less than end"),
            ("12-12", "Range start must be less than end"),
            ("upper left", "Tooth number must be numeric"),
            ("\u00b2", "Tooth number must be numeric"),
            ("\u2460-14", "Invalid range format. Use format: 11-14"),
        ],
    )
    def test_invalid_notation(self, value, message):
        assert validate_teeth_number(value) == message


class TestOrderValidator:
    def test_valid_payload(self, validator, valid_order_payload):
        assert validator.validate(valid_order_payload).valid

    def test_non_object_body_fails_required_fields(self, validator):
        result = validator.validate(["not", "an", "object"])

        assert not result.valid
        assert {error.field for error in result.errors} == {
            "doctorName",
            "patientName",
            "restorationType",
            "teethShade",
            "shadeSystem",
            "teethNumber",
            "urgency",
        }

    def test_name_length_bounds(self, validator, valid_order_payload):
        payload = dict(valid_order_payload, doctorName=" A ", patientName="x" * 101)
        result = validator.validate(payload)

        assert messages(result, "doctorName") == ["Doctor name must be at least 2 characters"]
        assert messages(result, "patientName") == ["Patient name must be less than 100 characters"]

    def test_name_length_counts_stored_characters(self, validator, valid_order_payload):
        result = validator.validate(dict(valid_order_payload, doctorName="<<", patientName="<b>"))

        assert messages(result, "doctorName") == ["Doctor name must be at least 2 characters"]
        assert messages(result, "patientName") == ["Patient name must be at least 2 characters"]

    def test_enum_fields(self, validator, valid_order_payload):
        payload = dict(
            valid_order_payload,
            restorationType="Gold",
            shadeSystem="Ivoclar",
            urgency="Whenever",
        )
        result = validator.validate(payload)

        assert messages(result, "restorationType") == [
            "Invalid restoration type. Must be one of: "
            "Zirconia, Zirconia Layer, Zirco-Max, PFM, Acrylic, E-max"
        ]
        assert messages(result, "shadeSystem")[0].startswith("Invalid shade system")
        assert messages(result, "urgency") == [
            "Invalid urgency level. Must be one of: Normal, Urgent"
        ]

    def test_blank_shade(self, validator, valid_order_payload):
        result = validator.validate(dict(valid_order_payload, teethShade="   "))
        assert messages(result, "teethShade") == ["Teeth shade cannot be empty"]

    def test_shade_of_only_markup(self, validator, valid_order_payload):
        result = validator.validate(dict(valid_order_payload, teethShade="<>"))
        assert messages(result, "teethShade") == ["Teeth shade cannot be empty"]

    def test_superscript_tooth_number(self, validator, valid_order_payload):
        result = validator.validate(dict(valid_order_payload, teethNumber="\u00b2"))
        assert messages(result, "teethNumber") == ["Tooth number must be numeric"]

    def test_teeth_notation_is_checked(self, validator, valid_order_payload):
        result = validator.validate(dict(valid_order_payload, teethNumber="11-60"))
        assert messages(result, "teethNumber") == ["Tooth numbers must be between 1 and 48"]

    def test_optional_field_types(self, validator, valid_order_payload):
        payload = dict(
            valid_order_payload,
            biologicalNotes=42,
            htmlExport=["<html>"],
            photosLink={"url": "x"},
            assignedLabId="not-a-uuid",
        )
        result = validator.validate(payload)

        assert messages(result, "biologicalNotes") == ["Biological notes must be a string"]
        assert messages(result, "htmlExport") == ["HTML export must be a string"]
        assert messages(result, "photosLink") == ["Photos link must be a string"]
        assert messages(result, "assignedLabId") == ["Lab ID must be a valid UUID"]

    def test_notes_too_long(self, validator, valid_order_payload):
        result = validator.validate(dict(valid_order_payload, biologicalNotes="n" * 1001))
        assert messages(result, "biologicalNotes") == [
            "Biological notes must be less than 1000 characters"
        ]

    def test_to_draft_sanitizes_text(self, validator, valid_order_payload):
        payload = dict(
            valid_order_payload,
            patientName="  <b>Samir</b> Khoury ",
            assignedLabId="",
        )
        draft = validator.to_draft(payload)

        assert draft.patient_name == "bSamir/b Khoury"
        assert draft.biological_notes == "Patient has mild bruxism"
        assert draft.assigned_lab_id is None
        assert draft.photos_link == ""
