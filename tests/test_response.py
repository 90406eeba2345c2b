# tests/test_response.py

from core.response import ErrorCode, Response


def test_succeed_defaults():
    response = Response.succeed(detail="done", data={"record": 1})

    assert response.success
    assert bool(response)
    assert response.status_code == 200
    assert response.error is None
    assert response.data == {"record": 1}
    assert str(response) == "Success: done"


def test_fail_defaults():
    response = Response.fail(detail="missing", error=ErrorCode.NOT_FOUND, status_code=404)

    assert not response.success
    assert not bool(response)
    assert response.data == {}
    assert str(response) == "Error: NOT_FOUND"


def test_to_dict():
    response = Response.fail(detail="taken", error=ErrorCode.DUPLICATE_KEY, status_code=409)

    assert response.to_dict() == {
        "success": False,
        "error": "DUPLICATE_KEY",
        "detail": "taken",
        "data": {},
        "status_code": 409,
    }
