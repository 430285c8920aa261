"""
Request parameters shared by every call to an Elasticsearch node.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional, Tuple
from urllib.parse import quote_plus, urlencode

import httpx


DEFAULT_BASE_URL = "http://localhost:9200"

# Characters the form-urlencoded byte serializer leaves untouched on top of
# the ones quote_plus already keeps.
_FORM_SAFE = "*"


def _form_quote(value, safe="", encoding=None, errors=None) -> str:
    """quote_plus, except "~" is percent-encoded like any other reserved byte."""
    return quote_plus(value, safe=safe, encoding=encoding, errors=errors).replace("~", "%7E")


def _default_headers() -> httpx.Headers:
    return httpx.Headers({"Content-Type": "application/json"})


def _to_param_str(value: Any) -> str:
    """Render a url param value the way Elasticsearch expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass(frozen=True)
class RequestParams:
    """
    Misc parameters for any request.

    Holds the base url of the Elasticsearch node, the url query
    parameters and the headers sent with every request. The
    `Content-Type: application/json` header is always present unless
    replaced with `header`.

    Instances are immutable but not hashable. Builder methods return a
    new instance, so a base configuration can be shared and adjusted per request:

        params = RequestParams.default().url_param("pretty", True).url_param("q", "*")
    """
    base_url: str = DEFAULT_BASE_URL
    url_params: Dict[str, str] = field(default_factory=dict)
    headers: httpx.Headers = field(default_factory=_default_headers)

    # dict and Headers fields cannot be hashed
    __hash__ = None

    @classmethod
    def default(cls) -> "RequestParams":
        return cls(DEFAULT_BASE_URL)

    def with_base_url(self, base: str) -> "RequestParams":
        """Set the base url for the Elasticsearch node."""
        return replace(
            self,
            base_url=base,
            url_params=dict(self.url_params),
            headers=self.headers.copy(),
        )

    def url_param(self, key: str, value: Any) -> "RequestParams":
        """
        Set a url param value.

        These parameters are added as query parameters to request urls.
        Setting a key that already exists replaces its value.
        """
        url_params = dict(self.url_params)
        url_params[key] = _to_param_str(value)
        return replace(self, url_params=url_params, headers=self.headers.copy())

    def header(self, name: str, value: str) -> "RequestParams":
        """Set a header value, replacing any existing header of the same name."""
        headers = self.headers.copy()
        headers[name] = value
        return replace(self, url_params=dict(self.url_params), headers=headers)

    def get_url_qry(self) -> Tuple[int, Optional[str]]:
        """
        Get the url query params as a formatted string.

        Follows the `application/x-www-form-urlencoded` format with keys
        in sorted order.

        Returns:
            Tuple of the query string length and the query string
            (prefixed with "?"), or (0, None) when no params are set
        """
        if not self.url_params:
            return 0, None

        pairs = sorted(self.url_params.items())
        qry = "?" + urlencode(pairs, safe=_FORM_SAFE, quote_via=_form_quote)
        return len(qry), qry
