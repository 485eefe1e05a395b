"""Tests for access code and participant rules."""

import pytest

from reencuentro.models.entities import ParticipantForm
from reencuentro.services.validation import (
    MSG_EMAIL,
    MSG_MISSING,
    MSG_MOBILE,
    MSG_NATIONAL_ID,
    ErrorKind,
    FieldRule,
    validate_access_code,
    validate_participant,
)

CODES = ["FIGMM2025", "EGRESADO001", "REENCUENTRO01"]


def _form(**overrides):
    fields = {
        "nombres": "Ana",
        "apellidos": "Lima",
        "dni": "87654321",
        "celular": "912345678",
        "email": "ana@x.com",
    }
    fields.update(overrides)
    return ParticipantForm(**fields)


@pytest.mark.parametrize("code", ["figmm2025", "FIGMM2025", "Egresado001", "reencuentro01"])
def test_access_code_accepted_case_insensitively(code):
    assert validate_access_code(code, CODES).ok


@pytest.mark.parametrize("code", ["WRONG", "", "  FIGMM2025", "FIGMM2025 "])
def test_access_code_rejected(code):
    result = validate_access_code(code, CODES)

    assert not result.ok
    assert result.kind == ErrorKind.INVALID_ACCESS_CODE
    assert result.message == "Código de acceso inválido"


def test_access_allow_list_is_case_insensitive_both_ways():
    assert validate_access_code("VIP", ["vip"]).ok


def test_valid_participant():
    result = validate_participant(_form())

    assert result.ok
    assert result.message is None


@pytest.mark.parametrize("field", ["nombres", "apellidos", "dni", "celular", "email"])
def test_missing_field(field):
    result = validate_participant(_form(**{field: ""}))

    assert result.kind == ErrorKind.INVALID_PARTICIPANT_FIELD
    assert result.rule == FieldRule.MISSING
    assert result.message == MSG_MISSING


@pytest.mark.parametrize("dni", ["1234567", "123456789", "1234567a", "１２３４５６７８"])
def test_bad_national_id(dni):
    result = validate_participant(_form(dni=dni))

    assert result.rule == FieldRule.NATIONAL_ID
    assert result.message == MSG_NATIONAL_ID


def test_eight_digit_national_id_passes():
    assert validate_participant(_form(dni="12345678")).ok


@pytest.mark.parametrize("celular", ["98765432", "9876543210", "98765432x"])
def test_bad_mobile(celular):
    result = validate_participant(_form(celular=celular))

    assert result.rule == FieldRule.MOBILE
    assert result.message == MSG_MOBILE


def test_nine_digit_mobile_passes():
    assert validate_participant(_form(celular="987654321")).ok


@pytest.mark.parametrize("email", ["a@b.c", "ana@x.com", "x a@b.c y"])
def test_loose_email_passes(email):
    assert validate_participant(_form(email=email)).ok


@pytest.mark.parametrize("email", ["abc", "a@b", "@b.c", "a@.c"])
def test_bad_email(email):
    result = validate_participant(_form(email=email))

    assert result.rule == FieldRule.EMAIL
    assert result.message == MSG_EMAIL


def test_only_first_failure_reported():
    result = validate_participant(_form(dni="1", celular="1", email="bad"))

    assert result.rule == FieldRule.NATIONAL_ID
