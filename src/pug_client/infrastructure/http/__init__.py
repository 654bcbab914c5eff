"""JSON:API connection over httpx."""

from pug_client.infrastructure.http.connection import (
    Connection,
    extract_data_array,
    flatten_params,
    next_page_url,
)

__all__ = ["Connection", "extract_data_array", "flatten_params", "next_page_url"]
