"""Server-side verification of CAPTCHA challenges for reCAPTCHA, hCaptcha and Turnstile."""

__version__ = "0.1.0"
__all__ = ["captcha", "client", "types"]