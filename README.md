# wscorsauth

A small object that lets a WebSocket server decide whether a connection
request coming from a given origin is accepted.

A server creates a `CorsAuthenticator` for the `Origin` of each incoming
handshake and hands it to application code. The application inspects the
origin and marks it as allowed or rejected; the server then acts on the
result. By default every origin is accepted.

Checking the origin only makes sense for browser clients: any other client
can send whatever `Origin` header it likes.

## Installation

```
pip install wscorsauth
```

## Usage

```python
from wscorsauth.authenticator import CorsAuthenticator

auth = CorsAuthenticator("https://app.example.com")
print(auth.origin)    # "https://app.example.com"
print(auth.allowed)   # True, every origin is accepted by default

if not auth.origin.endswith(".example.com"):
    auth.allowed = False
```

`origin` is read-only; `allowed` is a plain attribute. The allowed flag can
also be given when the object is created:

```python
auth = CorsAuthenticator("https://other.example.com", allowed=False)
```

An authenticator can be copied (with `copy()` or `copy.copy`), and two
authenticators can trade their contents:

```python
first = CorsAuthenticator("https://a.example.com")
second = CorsAuthenticator("https://b.example.com", allowed=False)

duplicate = first.copy()   # independent of first
first.swap(second)         # first now holds b.example.com, not allowed
```

Swapping an authenticator with itself leaves it unchanged.

## What this package does not do

This package holds only the authenticator object. It contains no WebSocket
server, client, handshake parsing or frame handling; whatever accepts
connections has to create the authenticator, pass it to application code and
act on `allowed` itself.

## Running the tests

```
pip install -e ".[test]"
pytest
```