[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "captchacheck"
version = "0.1.0"
description = "Server-side verification of CAPTCHA challenge responses for Google reCAPTCHA, hCaptcha and Cloudflare Turnstile"
requires-python = ">=3.10"
dependencies = []
keywords = ["captcha", "recaptcha", "hcaptcha", "turnstile", "verification", "siteverify"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Security",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["captchacheck"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
