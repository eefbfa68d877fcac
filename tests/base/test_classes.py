from typing import List

import pytest
from faker import Faker

from httpstatus.classes import (
    StatusClass,
    classify,
    exception_for,
    is_client_error,
    is_error,
    is_informational,
    is_redirect,
    is_server_error,
    is_success,
    raise_for_status,
)
from httpstatus.codes import HTTPStatus
from httpstatus.exceptions import (
    BadRequest,
    GatewayTimeout,
    HTTPStatusException,
    InvalidStatusCode,
    NotFound,
    ServerError,
    Teapot,
    Unauthorized,
)
from httpstatus.utilities.logs import log


class TestApp:
    # #######################################
    # ####      Classification
    #########################################
    def test_classify(self, faker: Faker) -> None:

        assert classify(100) == StatusClass.INFORMATIONAL
        assert classify(HTTPStatus.OK) == StatusClass.SUCCESS
        assert classify(304) == StatusClass.REDIRECTION
        assert classify(418) == StatusClass.CLIENT_ERROR
        assert classify(599) == StatusClass.SERVER_ERROR

        for status in HTTPStatus:
            assert classify(status) == status // 100

        # unregistered codes are classified by their first digit
        assert classify(299) == StatusClass.SUCCESS
        assert classify(499) == StatusClass.CLIENT_ERROR

        code = faker.pyint(min_value=100, max_value=599)
        assert classify(code) == code // 100

        with pytest.raises(InvalidStatusCode):
            classify(99)

        with pytest.raises(InvalidStatusCode):
            classify(600)

        with pytest.raises(InvalidStatusCode) as e:
            classify(-faker.pyint(min_value=1))
        assert e.value.code < 0

        with pytest.raises(ValueError):
            classify(True)

        with pytest.raises(ValueError):
            classify("404")  # type: ignore

    def test_predicates(self) -> None:

        assert is_informational(101)
        assert not is_informational(200)
        assert is_success(204)
        assert not is_success(304)
        assert is_redirect(307)
        assert not is_redirect(200)
        assert is_client_error(404)
        assert not is_client_error(500)
        assert is_server_error(503)
        assert not is_server_error(404)
        assert is_error(401)
        assert is_error(HTTPStatus.BadGateway)
        assert not is_error(201)

        # out of range codes never raise
        for code in (0, 99, 600, 1000, -500):
            assert not is_informational(code)
            assert not is_success(code)
            assert not is_redirect(code)
            assert not is_client_error(code)
            assert not is_server_error(code)
            assert not is_error(code)

    # #######################################
    # ####      Exceptions
    #########################################
    def test_exception_for(self) -> None:

        assert exception_for(400) is BadRequest
        assert exception_for(401) is Unauthorized
        assert exception_for(HTTPStatus.NotFound) is NotFound
        assert exception_for(418) is Teapot
        assert exception_for(500) is ServerError
        assert exception_for(504) is GatewayTimeout
        assert exception_for(502) is HTTPStatusException
        assert exception_for(499) is HTTPStatusException

    def test_raise_for_status(self, faker: Faker) -> None:

        messages: List[str] = []
        sink_id = log.add(messages.append, level="WARNING", format="{level} {message}")

        try:
            for code in (100, 200, 204, 301, 304, 399):
                assert raise_for_status(code) is None
            assert not messages

            with pytest.raises(NotFound) as e:
                raise_for_status(404)
            assert e.value.status_code == 404
            assert e.value.is_warning
            assert str(e.value) == "Not Found"
            assert messages[-1].strip() == "WARNING Not Found"

            message = faker.pystr()
            with pytest.raises(Unauthorized, match=message) as e:
                raise_for_status(401, message)
            assert e.value.status_code == 401

            with pytest.raises(ServerError) as e:
                raise_for_status(500)
            assert e.value.status_code == 500
            assert not e.value.is_warning
            assert messages[-1].strip() == "ERROR Internal Server Error"

            with pytest.raises(HTTPStatusException) as e:
                raise_for_status(502)
            assert e.value.status_code == 502
            assert str(e.value) == "Bad Gateway"
            assert not e.value.is_warning

            with pytest.raises(HTTPStatusException) as e:
                raise_for_status(499)
            assert e.value.status_code == 499
            assert str(e.value) == "HTTP status 499"
            assert e.value.is_warning

            with pytest.raises(InvalidStatusCode):
                raise_for_status(600)
        finally:
            log.remove(sink_id)
