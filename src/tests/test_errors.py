import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from discoveries.core.errors import ErrorCode, FailedRequestError, failed_request_handler


@pytest.fixture
def error_client() -> TestClient:
    app = FastAPI(exception_handlers={FailedRequestError: failed_request_handler})

    @app.get("/fail/{code}")
    async def fail(code: str):
        raise FailedRequestError(ErrorCode(code), f"failed with {code}")

    return TestClient(app)


@pytest.mark.parametrize(
    "code, status_code",
    [
        (ErrorCode.INVALID_INPUT, 400),
        (ErrorCode.OPERATION_FORBIDDEN, 403),
        (ErrorCode.NOT_FOUND, 404),
        (ErrorCode.UNKNOWN_ERROR, 500),
    ],
)
def test_failed_request_maps_to_status_and_envelope(error_client, code, status_code):
    response = error_client.get(f"/fail/{code.value}")

    assert response.status_code == status_code
    assert response.json() == {"errorCode": code.value, "message": f"failed with {code.value}"}


def test_failed_request_str():
    error = FailedRequestError(ErrorCode.INVALID_INPUT, "status out of range")
    assert str(error) == "INVALID_INPUT: status out of range"
    assert error.status_code == 400
