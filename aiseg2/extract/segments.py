"""
aiseg2.extract.segments
=======================
Decoders for the air-environment room tiles.

The panel renders each reading as a row of ``<div>`` glyphs whose CSS class
names the digit they show::

    <div class="num_ond">
      <div class="num no2"></div><div class="num no3"></div>
      <div class="num_dot"></div><div class="num no5"></div>
    </div>
"""

import re
from typing import Sequence

from bs4 import Tag

_DIGIT_CLASS_RE = re.compile(r"num no([0-9])")
_DOT_CLASS = "num_dot"
# The parser re-serialises <br> as <br/>
_BR_RE = re.compile(r"<br\s*/?>", re.IGNORECASE)


def _class_string(el: Tag) -> str:
    classes = el.get("class") or []
    if isinstance(classes, str):
        return classes
    return " ".join(classes)


def parse_display_name(elements: Sequence[Tag]) -> str:
    """Inner markup of the first element with every ``<br>`` removed."""
    if len(elements) < 1:
        return ""
    return _BR_RE.sub("", elements[0].decode_contents())


def parse_segment_digits(elements: Sequence[Tag]) -> str:
    """
    Rebuild the value shown by the first element's digit glyphs.

    Glyphs are read in document order; the decimal point lands wherever its
    glyph appears.  Returns ``""`` when no glyph matches.
    """
    if len(elements) < 1:
        return ""
    value = ""
    for div in elements[0].find_all("div"):
        class_name = _class_string(div)
        m = _DIGIT_CLASS_RE.search(class_name)
        if m:
            value += m.group(1)
        if class_name == _DOT_CLASS:
            value += "."
    return value
