from __future__ import annotations

import pytest

from postal_climate.errors import (
    STATUS_BY_KIND,
    ClassifiedError,
    ErrorKind,
    NotFoundError,
    UnknownError,
    ValidationError,
    describe_cause,
)


@pytest.mark.parametrize(
    ("error", "kind", "status"),
    [
        (ValidationError(message="invalid postal code"), ErrorKind.validation, 422),
        (NotFoundError(message="can not find postal code"), ErrorKind.not_found, 404),
        (UnknownError(message="Unknown error getting location"), ErrorKind.unknown, 500),
    ],
)
def test_each_kind_maps_to_one_status(error: ClassifiedError, kind: ErrorKind, status: int) -> None:
    assert error.kind is kind
    assert error.status_code == status
    assert str(error) == error.message


def test_every_kind_has_a_status() -> None:
    assert set(STATUS_BY_KIND) == set(ErrorKind)


def test_errors_carry_cause_and_tags() -> None:
    cause = ValueError("boom")
    err = UnknownError(message="Unknown error getting location", cause=cause, tags={"postal_code": "22021001"})

    assert err.cause is cause
    assert err.tags == {"postal_code": "22021001"}
    assert describe_cause(err) == "ValueError: boom"
    assert describe_cause(NotFoundError(message="x")) == ""
    assert describe_cause(NotFoundError(message="x", cause="empty city")) == "empty city"


def test_validation_error_keeps_reasons() -> None:
    err = ValidationError(message="invalid postal code", reasons=["postal code must have 8 digits"])
    assert err.reasons == ["postal code must have 8 digits"]


def test_classified_errors_are_raisable() -> None:
    with pytest.raises(ClassifiedError) as info:
        raise NotFoundError(message="can not find postal code")
    assert info.value.kind is ErrorKind.not_found
