"""Parsing of Accept-Language values into language tags."""

from __future__ import annotations

import logging
import math
import re

logger = logging.getLogger(__name__)

CHINESE = "zh"

_MAX_DASHES = 1000
_SUBTAG = re.compile(r"^[A-Za-z0-9]{1,8}$")
_LANGUAGE = re.compile(r"^[A-Za-z]{2,8}$")
_FLOAT = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
_FALLBACK = {
    "english": "en",
    "deutsch": "de",
    "italian": "it",
    "french": "fr",
    "*": "und",
}


def _canonical_tag(text: str) -> str:
    parts = text.replace("_", "-").split("-")
    if not _LANGUAGE.match(parts[0]) or not all(_SUBTAG.match(p) for p in parts[1:]):
        raise ValueError(f"language: tag is not well-formed: {text!r}")
    out = [parts[0].lower()]
    for index, part in enumerate(parts[1:], start=1):
        if index == 1 and len(part) == 4 and part.isalpha():
            out.append(part.title())
        elif index <= 2 and (
            (len(part) == 2 and part.isalpha()) or (len(part) == 3 and part.isdigit())
        ):
            out.append(part.upper())
        else:
            out.append(part.lower())
    return "-".join(out)


def _parse_weight(weight: str) -> float:
    weight = weight.strip()
    for marker in ("q", "="):
        if not weight.startswith(marker):
            raise ValueError("language: invalid weight")
        weight = weight[1:].strip()
    if not _FLOAT.match(weight):
        raise ValueError("language: invalid weight")
    value = float(weight)
    if math.isnan(value):
        raise ValueError("language: invalid weight")
    return value


def _parse_accept_language(value: str) -> list[str]:
    if value.count("-") > _MAX_DASHES:
        raise ValueError("language: tag list exceeds max length")
    weighted: list[tuple[str, float]] = []
    for entry in value.split(","):
        entry = entry.strip()
        if not entry:
            continue
        tag_text, _, weight_text = entry.partition(";")
        tag_text = tag_text.strip()
        try:
            tag = _canonical_tag(tag_text)
        except ValueError:
            if tag_text not in _FALLBACK:
                raise
            tag = _FALLBACK[tag_text]
        weight = 1.0
        if weight_text.strip():
            weight = _parse_weight(weight_text)
            if weight <= 0:
                continue
        weighted.append((tag, weight))
    weighted.sort(key=lambda item: item[1], reverse=True)
    return [tag for tag, _ in weighted]


def parse_tags(lang: str) -> list[str]:
    """Return the language tags of an Accept-Language value, best first.

    An unparsable value yields ``["zh"]``.
    """
    try:
        return _parse_accept_language(lang)
    except ValueError as exc:
        logger.error("parse accept-language failed: %s", exc)
        return [CHINESE]