"""
Url construction for Elasticsearch requests.
"""

from .params import RequestParams


def build_url(req_url: str, params: RequestParams) -> str:
    """
    Join the base url, the request path and the url query.

    The path is appended as given: no slash normalization or validation.

    Args:
        req_url: Request path relative to the node (e.g. "/myindex/_search")
        params: Request parameters holding the base url and url params

    Returns:
        Fully qualified request url
    """
    _, qry = params.get_url_qry()
    return f"{params.base_url}{req_url}{qry or ''}"
