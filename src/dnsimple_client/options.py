"""Request options: filtering, sorting and pagination for list endpoints.

Example:
    ```python
    from dnsimple_client.options import Filters, Paginate, RequestOptions, Sort

    options = RequestOptions(
        filters=Filters({"name_like": "example"}),
        sort=Sort("expiration:asc"),
        paginate=Paginate(page=2, per_page=30),
    )
    domains = await client.domains.list_domains(1010, options)
    ```
"""

from dataclasses import dataclass, field

import httpx


@dataclass(frozen=True)
class Filters:
    """Field name -> value pairs, sent verbatim as query parameters."""

    filters: dict[str, str] = field(default_factory=dict)

    def __hash__(self) -> int:
        return hash(tuple(self.filters.items()))


@dataclass(frozen=True)
class Sort:
    """One or more comma separated `field:direction` pairs, e.g. `"expiration:asc,name:desc"`."""

    sort_by: str


@dataclass(frozen=True)
class Paginate:
    """The page to fetch and how many entries it holds."""

    page: int
    per_page: int

    def __post_init__(self):
        if self.page < 0 or self.per_page < 0:
            raise ValueError(f"page and per_page must be non-negative (got page={self.page}, per_page={self.per_page})")


@dataclass(frozen=True)
class RequestOptions:
    """Optional filtering, sorting and pagination for a GET request."""

    filters: Filters | None = None
    sort: Sort | None = None
    paginate: Paginate | None = None


def encode_query(options: RequestOptions | None) -> list[tuple[str, str]]:
    """Translate request options into query parameters.

    Pagination comes first (`page` then `per_page`), then every filter in the
    order it was inserted, then `sort`. Parts that are not set emit nothing.

    Args:
        options: The options to encode, or None

    Returns:
        List of (name, value) pairs, ready to be passed as httpx params
    """
    params: list[tuple[str, str]] = []
    if options is None:
        return params

    if options.paginate is not None:
        params.append(("page", str(options.paginate.page)))
        params.append(("per_page", str(options.paginate.per_page)))

    if options.filters is not None:
        for key, value in options.filters.filters.items():
            params.append((key, value))

    if options.sort is not None:
        params.append(("sort", options.sort.sort_by))

    return params


def query_string(options: RequestOptions | None) -> str:
    """Return the URL encoded query string for the options (without the leading `?`)."""
    return str(httpx.QueryParams(encode_query(options)))
