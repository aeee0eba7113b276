import json
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import parse_qs

import pytest

from captchacheck.captcha import Captcha, Cloudflare, Google, HCaptcha, new
from captchacheck.client import RequestError
from captchacheck.types import (
    Challenge,
    InvalidSecretKeyError,
    Provider,
    UnsupportedProviderError,
)

_PROXY_VARS = ("http_proxy", "HTTP_PROXY", "https_proxy", "HTTPS_PROXY", "all_proxy", "ALL_PROXY")


class _State:
    def __init__(self):
        self.forms = []
        self.status = 200
        self.payload = b""
        self.url = ""


@pytest.fixture
def server(monkeypatch):
    for name in _PROXY_VARS:
        monkeypatch.delenv(name, raising=False)
    state = _State()

    class Handler(BaseHTTPRequestHandler):
        def do_POST(self):
            length = int(self.headers.get("Content-Length") or 0)
            body = self.rfile.read(length) if length else b""
            state.forms.append(parse_qs(body.decode()))
            self.send_response(state.status)
            self.send_header("Content-Type", "application/json")
            self.send_header("Content-Length", str(len(state.payload)))
            self.end_headers()
            self.wfile.write(state.payload)

        def log_message(self, *args):
            pass

    httpd = ThreadingHTTPServer(("127.0.0.1", 0), Handler)
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    state.url = f"http://127.0.0.1:{httpd.server_address[1]}/siteverify"
    yield state
    httpd.shutdown()
    httpd.server_close()


def test_new_cloudflare_example(server):
    server.payload = json.dumps({"success": True}).encode()
    cloudflare = new(Provider.CLOUDFLARE, "secret")
    assert cloudflare.provider() == "cloudflare"
    cloudflare.verify_endpoint = server.url
    assert cloudflare.validate("challenge", "ip") is True
    assert server.forms[0] == {
        "secret": ["secret"],
        "response": ["challenge"],
        "remoteip": ["ip"],
    }


@pytest.mark.parametrize(
    "provider, cls, endpoint",
    [
        (Provider.GOOGLE, Google, "https://www.google.com/recaptcha/api/siteverify"),
        (
            Provider.CLOUDFLARE,
            Cloudflare,
            "https://challenges.cloudflare.com/turnstile/v0/siteverify",
        ),
        (Provider.HCAPTCHA, HCaptcha, "https://api.hcaptcha.com/siteverify"),
    ],
)
def test_new_picks_provider_and_endpoint(provider, cls, endpoint):
    captcha = new(provider, "secret")
    assert isinstance(captcha, cls)
    assert captcha.verify_endpoint == endpoint
    assert captcha.provider() == provider.value


def test_new_accepts_provider_name_string():
    captcha = new("hcaptcha", "secret")
    assert captcha.provider() == "hcaptcha"
    assert captcha.verify_endpoint == "https://api.hcaptcha.com/siteverify"


def test_new_rejects_empty_secret():
    with pytest.raises(InvalidSecretKeyError):
        new(Provider.GOOGLE, "")


def test_new_checks_secret_before_provider():
    with pytest.raises(InvalidSecretKeyError):
        new("unknown", "")


def test_new_rejects_unknown_provider():
    with pytest.raises(UnsupportedProviderError):
        new("unknown", "secret")


def test_provider_class_rejects_empty_secret():
    with pytest.raises(InvalidSecretKeyError):
        Cloudflare("")


def test_base_class_cannot_be_used_directly():
    with pytest.raises(TypeError):
        Captcha("secret")


def test_validate_omits_empty_remote_ip(server):
    server.payload = json.dumps({"success": False}).encode()
    google = Google("secret", verify_endpoint=server.url)
    assert google.validate("challenge") is False
    assert "remoteip" not in server.forms[0]
    assert server.forms[0]["response"] == ["challenge"]


def test_validate_with_response_returns_full_result(server):
    reply = {
        "success": True,
        "challenge_ts": "2024-05-01T10:00:00Z",
        "hostname": "example.com",
        "error-codes": [],
        "score": 0.7,
    }
    server.payload = json.dumps(reply).encode()
    hcaptcha = HCaptcha("secret", verify_endpoint=server.url)
    result = hcaptcha.validate_with_response("challenge", "")
    assert result == Challenge.from_dict(reply)
    assert result.hostname == "example.com"
    assert result.score == 0.7


def test_validate_reports_error_codes(server):
    reply = {"success": False, "error-codes": ["invalid-input-response"]}
    server.payload = json.dumps(reply).encode()
    cloudflare = Cloudflare("secret", verify_endpoint=server.url)
    result = cloudflare.validate_with_response("challenge")
    assert result.success is False
    assert result.error_codes == ["invalid-input-response"]


def test_validate_raises_on_non_2xx(server):
    server.status = 500
    server.payload = b"{}"
    cloudflare = Cloudflare("secret", verify_endpoint=server.url)
    with pytest.raises(RequestError) as info:
        cloudflare.validate("challenge")
    assert "non-2xx response" in str(info.value)


def test_validate_raises_on_empty_reply(server):
    server.payload = b""
    google = Google("secret", verify_endpoint=server.url)
    with pytest.raises(RequestError):
        google.validate("challenge")


def test_validate_raises_on_non_object_reply(server):
    server.payload = b"[]"
    google = Google("secret", verify_endpoint=server.url)
    with pytest.raises(RequestError):
        google.validate_with_response("challenge")