"""
aiseg2.extract.script
=====================
Pulls the JSON argument out of the panel's page-load callback::

    <script type="text/javascript">window.onload = init([{"nodeId":"268...
"""

import json
import re

from bs4 import BeautifulSoup

# window.onload = init([...]) – the argument is always a JSON array;
# decoding starts at its opening bracket and stops at the matching one.
_INIT_CALL_RE = re.compile(r"""window\.onload\s*=\s*init\(\s*(?=\[)""")
_DECODER = json.JSONDecoder()


def extract_init_payloads(soup: BeautifulSoup) -> list:
    """
    Return the decoded ``init(...)`` arrays of every inline script, in
    document order.  Scripts loaded via ``src`` are ignored.

    Raises ``json.JSONDecodeError`` when a matched argument is not valid JSON.
    """
    payloads = []
    for script_el in soup.find_all("script"):
        if script_el.get("src"):
            continue
        text = script_el.get_text()
        m = _INIT_CALL_RE.search(text)
        if m:
            payload, _end = _DECODER.raw_decode(text, m.end())
            payloads.append(payload)
    return payloads
