import pytest
from faker import Faker

from httpstatus import config
from httpstatus.codes import STATUS_CODES, HTTPStatus
from httpstatus.exceptions import UnknownStatusCode
from httpstatus.reasons import REASON_PHRASES, status_text


class TestApp:
    def test_reason_phrases(self) -> None:

        assert status_text(200) == "OK"
        assert status_text(203) == "Non-Authoritative Information"
        assert status_text(404) == "Not Found"
        assert status_text(407) == "Proxy Authentication Required"
        assert status_text(418) == "I'm a teapot"
        assert status_text(500) == "Internal Server Error"
        assert status_text(505) == "HTTP Version Not Supported"
        assert status_text(HTTPStatus.LoopDetected) == "Loop Detected"

        # 306 is registered but unused
        assert status_text(306) == ""
        assert 306 not in REASON_PHRASES

        for value in STATUS_CODES.values():
            if value == 306:
                continue
            assert status_text(value)

        assert len(REASON_PHRASES) == len(STATUS_CODES) - 1

        with pytest.raises(TypeError):
            REASON_PHRASES[404] = "Lost"  # type: ignore

    def test_phrase_property(self) -> None:

        assert HTTPStatus.NotFound.phrase == "Not Found"
        assert HTTPStatus.Teapot.phrase == "I'm a teapot"
        assert HTTPStatus.Status306.phrase == ""

    def test_unregistered_codes(
        self, faker: Faker, monkeypatch: pytest.MonkeyPatch
    ) -> None:

        assert status_text(425) == ""
        assert status_text(faker.pyint(min_value=600)) == ""
        assert status_text(-1) == ""

        monkeypatch.setattr(config, "STRICT_LOOKUPS", True)

        with pytest.raises(UnknownStatusCode):
            status_text(425)

        # registered codes are unaffected by strict lookups
        assert status_text(404) == "Not Found"
        assert status_text(306) == ""
