"""HTTP session management for the AiSEG2 gateway."""

import requests
from requests.auth import HTTPDigestAuth
from bs4 import BeautifulSoup

from .config import PORT, REQUEST_HEADERS, REQUEST_TIMEOUT
from .logging_setup import log

_BS4_PARSER = "lxml"


def build_session(username: str, password: str) -> requests.Session:
    """
    Return a requests.Session with digest auth and the gateway's fixed headers.

    No retry adapter is mounted: a failed request fails the whole operation.
    """
    session = requests.Session()
    session.auth = HTTPDigestAuth(username, password)
    session.headers.update(REQUEST_HEADERS)
    return session


def base_url(address: str, port: int = PORT) -> str:
    if port == 80:
        return f"http://{address}"
    return f"http://{address}:{port}"


def fetch_page(session: requests.Session, url: str, params: dict | None = None) -> str:
    """GET *url* and return the body text, raising on any non-2xx status."""
    log.debug("GET %s %s", url, params or "")
    resp = session.get(url, params=params, timeout=REQUEST_TIMEOUT)
    resp.raise_for_status()
    return resp.text


def make_soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, _BS4_PARSER)
