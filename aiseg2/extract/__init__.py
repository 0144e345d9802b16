"""
aiseg2.extract
==============
Pure parsing helpers for the AiSEG2 panel markup.

* ``script``   – JSON payloads embedded in inline ``<script>`` blocks
* ``segments`` – room names and digit-glyph displays
"""

from .script import extract_init_payloads
from .segments import parse_display_name, parse_segment_digits

__all__ = [
    "extract_init_payloads",
    "parse_display_name",
    "parse_segment_digits",
]
