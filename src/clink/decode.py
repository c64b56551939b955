"""
Response body decoding helpers.
"""

from typing import Any

import httpx

from .exceptions import DecodeError, ResponseBodyMissingError, ResponseMissingError


def _check_response(response: httpx.Response | None) -> httpx.Response:
    if response is None:
        raise ResponseMissingError()
    return response


def _parse(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError as e:
        raise DecodeError(str(e)) from e


def decode_json(response: httpx.Response | None) -> Any:
    """
    Decode a response body as JSON.

    Reads the body if it has not been read yet. The response is not closed
    beyond what httpx does once a body is fully read.

    Args:
        response: Response returned by ``Client.do``

    Returns:
        The decoded JSON value

    Raises:
        ResponseMissingError: If ``response`` is None
        ResponseBodyMissingError: If the body stream was closed before it was read
        DecodeError: If the body is empty or not valid JSON
    """
    response = _check_response(response)
    try:
        response.read()
    except httpx.StreamError as e:
        raise ResponseBodyMissingError() from e
    return _parse(response)


async def adecode_json(response: httpx.Response | None) -> Any:
    """Decode a response produced by ``AsyncClient``. See ``decode_json``."""
    response = _check_response(response)
    try:
        await response.aread()
    except httpx.StreamError as e:
        raise ResponseBodyMissingError() from e
    return _parse(response)
