"""Exceptions raised by fitbit_gateway itself.

Errors coming from the HTTP layer (``requests.RequestException`` and
``requests.HTTPError``) are never wrapped and reach the caller as raised.
"""


class InvalidArgumentError(ValueError):
    """A call is missing a required argument or got an unusable one."""
