import pytest

from sweethttp import HTTPStatusCode, HTTPStatusError, ResponseType
from sweethttp.status import _STATUS_TABLE


def test_named_codes_round_trip() -> None:
    for attr, code, _ in _STATUS_TABLE:
        status = HTTPStatusCode(code)
        assert status == getattr(HTTPStatusCode, attr)
        assert status.code == code
        assert int(status) == code
        assert status.name == attr
        assert not status.is_other


def test_table_is_a_bijection() -> None:
    codes = [code for _, code, _ in _STATUS_TABLE]
    names = [attr for attr, _, _ in _STATUS_TABLE]
    assert len(set(codes)) == len(codes)
    assert len(set(names)) == len(names)


def test_unknown_codes_fall_back_to_other() -> None:
    known = {code for _, code, _ in _STATUS_TABLE}
    for code in [-1, 0, 99, 209, 299, 420, 599, 600, 1000]:
        assert code not in known
        status = HTTPStatusCode(code)
        assert status.is_other
        assert status.name is None
        assert status.code == code
        assert status == HTTPStatusCode.other(code)
        assert status.reason == "Unknown"


def test_other_rejects_named_code() -> None:
    with pytest.raises(ValueError):
        HTTPStatusCode.other(404)


def test_code_must_be_int() -> None:
    with pytest.raises(TypeError):
        HTTPStatusCode("404")
    with pytest.raises(TypeError):
        HTTPStatusCode(True)


@pytest.mark.parametrize(
    "code, expected",
    [
        (100, ResponseType.INFORMATIONAL),
        (199, ResponseType.INFORMATIONAL),
        (200, ResponseType.SUCCESS),
        (299, ResponseType.SUCCESS),
        (300, ResponseType.REDIRECTION),
        (399, ResponseType.REDIRECTION),
        (400, ResponseType.CLIENT_ERROR),
        (499, ResponseType.CLIENT_ERROR),
        (500, ResponseType.SERVER_ERROR),
        (599, ResponseType.SERVER_ERROR),
        (99, ResponseType.UNDEFINED),
        (600, ResponseType.UNDEFINED),
        (0, ResponseType.UNDEFINED),
    ],
)
def test_response_type(code: int, expected: ResponseType) -> None:
    assert HTTPStatusCode(code).response_type is expected


def test_named_response_types() -> None:
    assert HTTPStatusCode.CONTINUE.response_type is ResponseType.INFORMATIONAL
    assert HTTPStatusCode.IM_USED.response_type is ResponseType.SUCCESS
    assert HTTPStatusCode.PERMANENT_REDIRECT.response_type is ResponseType.REDIRECTION
    assert HTTPStatusCode.TEAPOT.response_type is ResponseType.CLIENT_ERROR
    assert HTTPStatusCode.NETWORK_AUTHENTICATION_REQUIRED.response_type is ResponseType.SERVER_ERROR


def test_reason_and_repr() -> None:
    assert HTTPStatusCode.NOT_FOUND.reason == "Not Found"
    assert str(HTTPStatusCode(404)) == "404 Not Found"
    assert repr(HTTPStatusCode(404)) == "HTTPStatusCode.NOT_FOUND"
    assert repr(HTTPStatusCode(299)) == "HTTPStatusCode.other(299)"


def test_raise_for_status() -> None:
    HTTPStatusCode.OK.raise_for_status()
    HTTPStatusCode.FOUND.raise_for_status()
    HTTPStatusCode(700).raise_for_status()
    with pytest.raises(HTTPStatusError) as info:
        HTTPStatusCode(503).raise_for_status()
    assert info.value.status_code == 503
    assert info.value.status == HTTPStatusCode.SERVICE_UNAVAILABLE
    with pytest.raises(HTTPStatusError):
        HTTPStatusCode(460).raise_for_status()


def test_hashable() -> None:
    lookup = {HTTPStatusCode.OK: "ok", HTTPStatusCode(299): "odd"}
    assert lookup[HTTPStatusCode(200)] == "ok"
    assert lookup[HTTPStatusCode.other(299)] == "odd"
