"""Script stripping for untrusted SVG text.

Runs on the input before parsing and on the output before it is returned.
"""

from __future__ import annotations

import re

# Full element, opening tag through matching close tag
_SCRIPT_ELEMENT_RE = re.compile(r"<\s*script\b[^>]*(?<!/)>.*?<\s*/\s*script\s*>", re.DOTALL | re.IGNORECASE)
_SCRIPT_SELFCLOSE_RE = re.compile(r"<\s*script\b[^>]*/\s*>", re.IGNORECASE)
# Anything left over: unterminated elements, "<scripts>", fragments glued together by earlier removals
_SCRIPT_DANGLING_RE = re.compile(r"<script[^>]*>?", re.IGNORECASE)
_SCRIPT_PROBE_RE = re.compile(r"<\s*script", re.IGNORECASE)


def sanitize(svg_text: object) -> str:
    """Remove every script element from SVG source text.

    Non-string input returns "". The result never contains ``<script`` and
    ``sanitize(sanitize(x)) == sanitize(x)``.
    """
    if not isinstance(svg_text, str):
        return ""

    result = svg_text
    while _SCRIPT_PROBE_RE.search(result):
        before = result
        result = _SCRIPT_ELEMENT_RE.sub("", result)
        result = _SCRIPT_SELFCLOSE_RE.sub("", result)
        if result == before:
            result = _SCRIPT_DANGLING_RE.sub("", result)
            if result == before:
                # "< script" with whitespace that the dangling pattern does not cover
                result = _SCRIPT_PROBE_RE.sub("", result)
    return result
