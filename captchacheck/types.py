"""Provider names, the verification result and the package's errors."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping


class Provider(str, Enum):
    """A CAPTCHA service that can verify challenge responses."""

    GOOGLE = "google"
    HCAPTCHA = "hcaptcha"
    CLOUDFLARE = "cloudflare"

    def __str__(self) -> str:
        return self.value


@dataclass
class Challenge:
    """The verification result reported by a provider's siteverify endpoint."""

    success: bool = False
    challenge_ts: str = ""
    hostname: str = ""
    error_codes: list[str] = field(default_factory=list)
    apk_package_name: str = ""
    credit: bool = False
    score: float = 0.0
    score_reason: list[Any] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Challenge:
        """Build a result from a decoded JSON object; unknown keys are ignored."""
        return cls(
            success=bool(data.get("success", False)),
            challenge_ts=str(data.get("challenge_ts") or ""),
            hostname=str(data.get("hostname") or ""),
            error_codes=[str(code) for code in data.get("error-codes") or []],
            apk_package_name=str(data.get("apk_package_name") or ""),
            credit=bool(data.get("credit", False)),
            score=float(data.get("score") or 0.0),
            score_reason=list(data.get("score_reason") or []),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object form, leaving out empty optional fields."""
        data: dict[str, Any] = {
            "success": self.success,
            "challenge_ts": self.challenge_ts,
        }
        if self.hostname:
            data["hostname"] = self.hostname
        if self.error_codes:
            data["error-codes"] = list(self.error_codes)
        if self.apk_package_name:
            data["apk_package_name"] = self.apk_package_name
        if self.credit:
            data["credit"] = True
        if self.score:
            data["score"] = self.score
        if self.score_reason:
            data["score_reason"] = list(self.score_reason)
        return data


class CaptchaError(Exception):
    """Base class for errors raised by this package."""


class UnsupportedProviderError(CaptchaError):
    """The requested provider is not one this package knows."""

    def __init__(self, message: str = "unsupported provider") -> None:
        super().__init__(message)


class InvalidSecretKeyError(CaptchaError):
    """The secret key is missing or empty."""

    def __init__(self, message: str = "invalid secret key") -> None:
        super().__init__(message)