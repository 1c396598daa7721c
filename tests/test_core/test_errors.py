from __future__ import annotations

import pytest

from jobdesk.core.errors import (
    AuthenticationError,
    BackendError,
    CreditError,
    GenerationError,
    InsufficientCreditsError,
    JobdeskError,
    NotFoundError,
    ValidationError,
)


@pytest.mark.parametrize(
    ("cls", "status"),
    [
        (AuthenticationError, 401),
        (ValidationError, 400),
        (NotFoundError, 404),
        (CreditError, 500),
        (BackendError, 500),
        (GenerationError, 500),
    ],
)
def test_status_codes(cls, status):
    err = cls("boom")
    assert isinstance(err, JobdeskError)
    assert err.status_code == status
    assert err.message == "boom"
    assert str(err) == "boom"


def test_insufficient_credits_default_message():
    err = InsufficientCreditsError()
    assert err.status_code == 402
    assert err.message == "Insufficient credits"


def test_status_override_is_per_instance():
    assert BackendError("x", status_code=409).status_code == 409
    assert BackendError("y").status_code == 500
