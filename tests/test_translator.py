import pytest
import requests

from license_data import translator as translator_module
from license_data.translator import DEFAULT_USER_AGENT, GoogleTranslator, TranslationError


class FakeResponse:
    def __init__(self, payload=None, status_code=200, json_error=False):
        self.payload = payload
        self.status_code = status_code
        self.json_error = json_error

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        if self.json_error:
            raise ValueError("not json")
        return self.payload


@pytest.fixture
def captured(monkeypatch):
    calls = []
    responses = []

    def fake_get(url, params=None, headers=None, timeout=None):
        calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        return responses.pop(0)

    monkeypatch.setattr(translator_module.requests, "get", fake_get)
    return calls, responses


def test_translate_joins_segments_and_sends_query(captured):
    calls, responses = captured
    responses.append(FakeResponse([[["第一句。", "First sentence.", None], ["第二句。", " Second.", None]], None, "en"]))

    result = GoogleTranslator(timeout=5).translate("First sentence. Second.", "en", "zh-cn")

    assert result == "第一句。第二句。"
    assert calls[0]["params"] == {
        "client": "gtx",
        "sl": "en",
        "tl": "zh-cn",
        "dt": "t",
        "q": "First sentence. Second.",
    }
    assert calls[0]["headers"] == {"User-Agent": DEFAULT_USER_AGENT}
    assert calls[0]["timeout"] == 5


def test_blank_text_skips_the_request(captured):
    calls, _ = captured

    assert GoogleTranslator().translate("   ", "en", "ja") == "   "
    assert calls == []


def test_http_errors_propagate(captured):
    _, responses = captured
    responses.append(FakeResponse(status_code=429))

    with pytest.raises(requests.HTTPError):
        GoogleTranslator().translate("hello", "en", "ja")


@pytest.mark.parametrize(
    "response",
    [
        FakeResponse({"error": "bad"}),
        FakeResponse([[]]),
        FakeResponse(json_error=True),
    ],
)
def test_unexpected_responses_raise_translation_error(captured, response):
    _, responses = captured
    responses.append(response)

    with pytest.raises(TranslationError):
        GoogleTranslator().translate("hello", "en", "ja")
