import os
import json
import logging

import backoff
import requests

from . import config
from .exceptions import FetchError, InputNotFoundError
from .utils import is_empty_value

logger = logging.getLogger(__name__)


def load_source_request(seed_path):
    """Read source_http_request from a property_seed.json / unnormalized_address.json file"""
    if not os.path.isfile(seed_path):
        raise InputNotFoundError(f"Seed file not found: {seed_path}")
    try:
        with open(seed_path, "r", encoding="utf-8") as f:
            seed = json.load(f)
    except json.JSONDecodeError as e:
        raise FetchError(f"Error parsing seed file {seed_path}: {e}") from e

    request = seed.get("source_http_request") or {}
    if is_empty_value(request.get("url")):
        raise FetchError(f"No source_http_request.url in {seed_path}")
    return request


def _is_client_error(e):
    response = getattr(e, "response", None)
    return response is not None and 400 <= response.status_code < 500


@backoff.on_exception(
    backoff.expo,
    requests.exceptions.RequestException,
    max_tries=3,
    max_time=120,
    giveup=_is_client_error,
    on_backoff=lambda details: logger.warning(
        f"🔄 Fetch failed, retrying in {details['wait']:.1f}s (attempt {details['tries']})"),
    on_giveup=lambda details: logger.error(f"💥 Fetch failed after {details['tries']} attempts"),
)
def send_request(request, timeout=None):
    response = requests.request(
        (request.get("method") or "GET").upper(),
        request["url"],
        params=request.get("multiValueQueryString") or None,
        headers=request.get("headers") or None,
        json=request.get("json") or None,
        timeout=timeout or config.HTTP_TIMEOUT,
    )
    response.raise_for_status()
    return response


def default_output_name(response):
    content_type = response.headers.get("Content-Type", "")
    return "input.json" if "json" in content_type.lower() else "input.html"


def fetch_document(seed_path, output=None, timeout=None):
    """Download the property record a seed points at; returns the written path"""
    request = load_source_request(seed_path)
    logger.info(f"🔍 Fetching {request['url']}")
    try:
        response = send_request(request, timeout=timeout)
    except requests.exceptions.RequestException as e:
        raise FetchError(f"Error fetching {request['url']}: {e}") from e

    output = output or default_output_name(response)
    directory = os.path.dirname(output)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(output, "w", encoding="utf-8") as f:
        f.write(response.text)
    logger.info(f"✅ Saved {len(response.text)} characters to {output}")
    return output
