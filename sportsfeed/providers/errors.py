"""Provider exceptions.

Raised inside the upstream clients and converted to FetchOutcome at the
client boundary; none of these reach the aggregator.
"""


class ProviderError(RuntimeError):
    """Base exception for provider-related failures."""


class ProviderRequestError(ProviderError):
    """HTTP/network/transport layer failures (timeouts, connection errors, non-2xx)."""


class ProviderRateLimited(ProviderRequestError):
    """Provider throttled the request (HTTP 429)."""


class ProviderTransportError(ProviderRequestError):
    """The request never got a response (timeout, DNS failure, connection reset)."""


class ProviderResponseError(ProviderError):
    """Provider answered, but not with a JSON object (e.g. an HTML error page)."""
