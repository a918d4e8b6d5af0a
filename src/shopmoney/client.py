"""Storefront section client.

Requests a collection section with price filters applied, the way the
facets form refreshes its product grid.
"""
from __future__ import annotations

import os
import sys
from typing import Iterable

import requests

from .errors import StorefrontError
from .facets import create_url_parameters, price_filter_parameters

_DEFAULT_BASE_URL = "http://localhost:3000"
_DEFAULT_TIMEOUT = 30
_DEFAULT_MAX_RETRIES = 2


class StorefrontClient:
    """Fetches filtered collection sections from a storefront.

    Example::

        client = StorefrontClient("https://shop.example.com")
        html = client.fetch_price_filtered(
            "/collections/all",
            section_id="main-collection",
            min_value="10",
            max_value="1.000,50",
            currency="EUR",
        )

    base_url falls back to SHOPMONEY_STORE_URL, then to a local dev server.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: int = _DEFAULT_TIMEOUT,
        max_retries: int = _DEFAULT_MAX_RETRIES,
    ):
        if max_retries < 0:
            raise ValueError("max_retries must be >= 0")

        base_url = base_url or os.environ.get("SHOPMONEY_STORE_URL") or _DEFAULT_BASE_URL
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._max_retries = max_retries

    @property
    def base_url(self) -> str:
        return self._base_url

    def fetch_filtered_section(
        self,
        collection_path: str,
        section_id: str,
        params: Iterable[tuple[str, str]] = (),
    ) -> str:
        """GET a section of a collection page and return its HTML.

        Retries connection errors and timeouts; error statuses raise
        StorefrontError immediately.
        """
        if not section_id:
            raise ValueError("section_id is required")

        query = [("section_id", section_id), *params]
        url = f"{self._base_url}{collection_path}"

        for attempt in range(self._max_retries + 1):
            try:
                resp = requests.get(url, params=query, timeout=self._timeout)

                if resp.status_code >= 400:
                    code = "NOT_FOUND" if resp.status_code == 404 else f"HTTP_{resp.status_code}"
                    raise StorefrontError(
                        code,
                        f"Section {section_id} at {collection_path} returned HTTP {resp.status_code}",
                        resp.status_code,
                    )

                return resp.text

            except (requests.ConnectionError, requests.Timeout) as exc:
                if attempt == self._max_retries:
                    raise
                print(
                    f"[shopmoney] retrying {collection_path} section={section_id}"
                    f" attempt={attempt + 1} error={type(exc).__name__}",
                    file=sys.stderr,
                )

    def fetch_price_filtered(
        self,
        collection_path: str,
        section_id: str,
        min_value: str | None,
        max_value: str | None,
        currency: str,
        search_query: str | None = None,
        extra_params: Iterable[tuple[str, str]] = (),
    ) -> str:
        """Fetch a section filtered to the typed price bounds."""
        form_data = [*extra_params, *price_filter_parameters(min_value, max_value, currency)]
        params = create_url_parameters(form_data, search_query)
        return self.fetch_filtered_section(collection_path, section_id, params)
