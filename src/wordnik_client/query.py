"""URL and query-string construction."""

from urllib.parse import quote, urlencode

from .models import ApiRequest

API_KEY_PARAM = "api_key"
REDACTED = "***"


def encode_query(pairs: list[tuple[str, str]]) -> str:
    """Percent-encode names and values the same way and join them with '&'.

    Unlike the form encoding default, spaces become %20 and '/' is escaped.
    """
    return urlencode(pairs, quote_via=quote)


def query_pairs(api_key: str, request: ApiRequest) -> list[tuple[str, str]]:
    """The API key first, then the request's parameters in order."""
    return [(API_KEY_PARAM, api_key)] + request.rendered_params()


def build_url(base_url: str, api_key: str, request: ApiRequest) -> str:
    query = encode_query(query_pairs(api_key, request))
    return f"{base_url.rstrip('/')}{request.endpoint.path}?{query}"


def redact(url: str, api_key: str) -> str:
    """Hide the API key in a URL before it is logged or put in an error."""
    if not api_key:
        return url
    encoded = f"{API_KEY_PARAM}={quote(api_key, safe='')}"
    return url.replace(encoded, f"{API_KEY_PARAM}={REDACTED}")
