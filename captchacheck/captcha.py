"""Challenge verification against Google reCAPTCHA, hCaptcha and Cloudflare Turnstile."""

from __future__ import annotations

from typing import ClassVar

from .client import Client, RequestError
from .types import (
    Challenge,
    InvalidSecretKeyError,
    Provider,
    UnsupportedProviderError,
)


class Captcha:
    """Verifies challenge keys with one provider's siteverify endpoint."""

    kind: ClassVar[Provider | None] = None
    default_endpoint: ClassVar[str] = ""

    def __init__(
        self,
        secret_key: str,
        client: Client | None = None,
        verify_endpoint: str | None = None,
    ) -> None:
        if self.kind is None:
            raise TypeError("use a provider class such as Google, Cloudflare or HCaptcha")
        if not secret_key:
            raise InvalidSecretKeyError()
        self.secret_key = secret_key
        self.client = client if client is not None else Client()
        self.verify_endpoint = verify_endpoint or self.default_endpoint

    def provider(self) -> str:
        """Return the provider's name, such as "cloudflare"."""
        return str(self.kind)

    def validate(self, challenge_key: str, remote_ip: str = "") -> bool:
        """Return whether the provider accepted the challenge key."""
        return self.validate_with_response(challenge_key, remote_ip).success

    def validate_with_response(self, challenge_key: str, remote_ip: str = "") -> Challenge:
        """Return the provider's full verification result for the challenge key."""
        form = [("secret", self.secret_key), ("response", challenge_key)]
        if remote_ip:
            form.append(("remoteip", remote_ip))

        reply = self.client.request(self.verify_endpoint, "POST", form)
        if not isinstance(reply, dict):
            raise RequestError("unexpected verification response: expected a JSON object")
        return Challenge.from_dict(reply)


class Google(Captcha):
    """Google reCAPTCHA."""

    kind = Provider.GOOGLE
    default_endpoint = "https://www.google.com/recaptcha/api/siteverify"


class Cloudflare(Captcha):
    """Cloudflare Turnstile."""

    kind = Provider.CLOUDFLARE
    default_endpoint = "https://challenges.cloudflare.com/turnstile/v0/siteverify"


class HCaptcha(Captcha):
    """hCaptcha."""

    kind = Provider.HCAPTCHA
    default_endpoint = "https://api.hcaptcha.com/siteverify"


_PROVIDERS: dict[Provider, type[Captcha]] = {
    Provider.GOOGLE: Google,
    Provider.CLOUDFLARE: Cloudflare,
    Provider.HCAPTCHA: HCaptcha,
}


def new(provider: Provider | str, secret_key: str) -> Captcha:
    """Create a verifier for the named provider using the given secret key."""
    if not secret_key:
        raise InvalidSecretKeyError()
    try:
        kind = Provider(provider)
    except ValueError:
        raise UnsupportedProviderError() from None
    return _PROVIDERS[kind](secret_key)