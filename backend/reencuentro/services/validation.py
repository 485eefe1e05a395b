"""
Access code and participant record rules.

Both rule sets are pure: they never touch session state and never raise for
bad input. A failed check is reported as a ``ValidationResult`` carrying the
first failing reason only.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from ..models.entities import ParticipantForm


class ErrorKind(str, Enum):
    INVALID_ACCESS_CODE = "invalid_access_code"
    INVALID_PARTICIPANT_FIELD = "invalid_participant_field"


class FieldRule(str, Enum):
    MISSING = "missing"
    NATIONAL_ID = "national_id"
    MOBILE = "mobile"
    EMAIL = "email"


MSG_INVALID_CODE = "Código de acceso inválido"
MSG_MISSING = "Todos los campos son obligatorios"
MSG_NATIONAL_ID = "El DNI debe tener exactamente 8 dígitos"
MSG_MOBILE = "El celular debe tener exactamente 9 dígitos"
MSG_EMAIL = "Ingrese un email válido"

NATIONAL_ID_LENGTH = 8
MOBILE_LENGTH = 9

_DIGITS = re.compile(r"[0-9]+")
# loose sanity check, searched anywhere in the value
_EMAIL = re.compile(r"\S+@\S+\.\S+")


@dataclass(frozen=True)
class ValidationResult:
    ok: bool
    kind: ErrorKind | None = None
    rule: FieldRule | None = None
    message: str | None = None

    @classmethod
    def passed(cls) -> "ValidationResult":
        return cls(ok=True)


def validate_access_code(code: str, allowed: Iterable[str]) -> ValidationResult:
    # case-insensitive, but no trimming: surrounding spaces make a code invalid
    if code.upper() in {c.upper() for c in allowed}:
        return ValidationResult.passed()
    return ValidationResult(ok=False, kind=ErrorKind.INVALID_ACCESS_CODE, message=MSG_INVALID_CODE)


def _fail(rule: FieldRule, message: str) -> ValidationResult:
    return ValidationResult(ok=False, kind=ErrorKind.INVALID_PARTICIPANT_FIELD, rule=rule, message=message)


def _exact_digits(value: str, length: int) -> bool:
    return len(value) == length and _DIGITS.fullmatch(value) is not None


def validate_participant(form: ParticipantForm) -> ValidationResult:
    if not (form.nombres and form.apellidos and form.dni and form.celular and form.email):
        return _fail(FieldRule.MISSING, MSG_MISSING)

    if not _exact_digits(form.dni, NATIONAL_ID_LENGTH):
        return _fail(FieldRule.NATIONAL_ID, MSG_NATIONAL_ID)

    if not _exact_digits(form.celular, MOBILE_LENGTH):
        return _fail(FieldRule.MOBILE, MSG_MOBILE)

    if not _EMAIL.search(form.email):
        return _fail(FieldRule.EMAIL, MSG_EMAIL)

    return ValidationResult.passed()
