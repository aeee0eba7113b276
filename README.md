# captchacheck

Server-side verification of CAPTCHA challenge responses. It supports three
providers:

- Google reCAPTCHA (`Provider.GOOGLE`, class `Google`)
- hCaptcha (`Provider.HCAPTCHA`, class `HCaptcha`)
- Cloudflare Turnstile (`Provider.CLOUDFLARE`, class `Cloudflare`)

The package uses only the standard library. Requests are synchronous.

## Installation

```
pip install captchacheck
```

## Usage

Call `new` with a provider and your secret key to build a verifier. Then pass
it the challenge key that your front end collected:

```python
from captchacheck.captcha import new
from captchacheck.types import Provider

verifier = new(Provider.CLOUDFLARE, "secret")
print(verifier.provider())  # "cloudflare"

if verifier.validate("challenge-key-from-the-form", "203.0.113.7"):
    print("human")
```

`new` also accepts the provider's name as a plain string, such as
`"google"`, `"hcaptcha"` or `"cloudflare"`.

The remote IP is optional and defaults to an empty string. When it is empty,
it is left out of the request. Otherwise the verifier sends the form fields
`secret`, `response` and `remoteip` to the provider's siteverify endpoint
with a POST request.

`validate_with_response` returns the provider's full answer as a `Challenge`:

```python
challenge = verifier.validate_with_response("challenge-key-from-the-form")
print(challenge.success, challenge.hostname, challenge.error_codes, challenge.score)
```

`Challenge` is a dataclass. Its fields are `success`, `challenge_ts`,
`hostname`, `error_codes`, `apk_package_name`, `credit`, `score` and
`score_reason`. `Challenge.from_dict` builds one from a decoded JSON object
and ignores keys it does not know. `to_dict` returns the JSON form. That form
uses the provider's key names, such as `"error-codes"`, and leaves out
optional fields that are empty.

### Using a provider class directly

You can also build the provider classes directly. This lets you pass your own
`Client` or a different verification endpoint, for example a local test
server:

```python
from captchacheck.captcha import HCaptcha
from captchacheck.client import Client

verifier = HCaptcha("secret", client=Client(5.0), verify_endpoint="http://localhost:8080/siteverify")
```

When `verify_endpoint` is not given, the provider's public siteverify URL is
used.

## Errors

| Error | When it is raised |
| --- | --- |
| `InvalidSecretKeyError` | `new` or a provider class is given an empty secret key. |
| `UnsupportedProviderError` | `new` is given a provider it does not know. |
| `RequestError` | The verification request fails, the provider answers with a status outside 2xx, or the reply is not a JSON object. |

`InvalidSecretKeyError` and `UnsupportedProviderError` come from
`captchacheck.types` and are subclasses of `CaptchaError`. `RequestError`
comes from `captchacheck.client`.

## Lower-level HTTP client

`captchacheck.client.Client` is the small HTTP client that the verifiers use.
You can also use it on its own. Its only argument is a timeout in seconds,
which defaults to 10:

```python
from captchacheck.client import Client

client = Client(10.0)
data = client.request("https://api.example.com/items", "GET", None, None, {"id": "123"})
```

`request(endpoint, method, body=None, headers=None, params=None)` sends the
request and returns the decoded JSON reply. It returns `None` when the reply
body is empty.

- A body given as a sequence of `(name, value)` string pairs is sent
  form-encoded.
- Any other body is sent as JSON.
- In both cases, the matching `Content-Type` header is added unless you set
  one yourself.
- `params` are added to the URL as a query string.
- Proxy settings are taken from the environment.

A `RequestError` is raised in these cases:

- the body cannot be encoded as JSON
- the URL is invalid
- the connection fails
- the response status is outside 2xx
- the reply is not valid JSON

## What it does not do

This package only checks challenge keys on the server side. It has the
following limits:

- It has no command-line tool.
- It renders no CAPTCHA widget.
- It ships no web framework or RPC middleware. Reading the challenge key from
  a request and calling `validate` is left to your application.