"""Message translation from JSON locale files, selected by Accept-Language."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterator
from dataclasses import dataclass
from http import HTTPStatus
from pathlib import Path
from typing import Any

from .errors import ApiError, CodeError, StatusError, is_grpc_error
from .langtags import CHINESE, _canonical_tag, parse_tags
from .reqctx import Context

logger = logging.getLogger(__name__)

LANG_CTX_KEY = "lang"

_RESERVED_KEYS = frozenset(
    (
        "id",
        "description",
        "hash",
        "leftdelim",
        "rightdelim",
        "zero",
        "one",
        "two",
        "few",
        "many",
        "other",
    )
)


class _MessageNotFoundError(LookupError):
    """Raised when a message id has no translation for a language."""


@dataclass
class I18nConf:
    """Translator configuration; ``dir`` overrides the default locale directory."""

    dir: str = ""


def _is_message(value: dict[str, Any]) -> bool:
    return any(
        key.lower() in _RESERVED_KEYS and isinstance(item, str) for key, item in value.items()
    )


def _message_text(value: dict[str, Any]) -> str:
    for key, item in value.items():
        if key.lower() == "other" and isinstance(item, str):
            return item
    return ""


def _flatten(prefix: str, data: dict[str, Any], out: dict[str, str]) -> None:
    for key, value in data.items():
        full = f"{prefix}.{key}" if prefix else str(key)
        if value is None or isinstance(value, str):
            out[full] = value or ""
        elif isinstance(value, dict):
            if _is_message(value):
                out[full] = _message_text(value)
            else:
                _flatten(full, value, out)
        else:
            raise ValueError(f"unsupported message value for {full!r}")


def _parse_messages(content: str) -> dict[str, str]:
    if not content.strip():
        return {}
    data = json.loads(content)
    messages: dict[str, str] = {}
    if isinstance(data, dict):
        _flatten("", data, messages)
    elif isinstance(data, list):
        for item in data:
            if not isinstance(item, dict) or not isinstance(item.get("id"), str):
                raise ValueError("message list entries need a string id")
            messages[item["id"]] = _message_text(item)
    else:
        raise ValueError("message file must hold an object or a list")
    return messages


class _Bundle:
    """Messages per language tag, with a default language."""

    def __init__(self, default_language: str) -> None:
        self.default_language = default_language
        self._messages: dict[str, dict[str, str]] = {default_language: {}}

    def load_message_file(self, path: str | os.PathLike[str]) -> None:
        name = os.path.basename(os.fspath(path))
        stem, ext = os.path.splitext(name)
        if ext.lower() != ".json":
            raise ValueError(f"no unmarshaler registered for {ext.lstrip('.') or name!r}")
        try:
            tag = _canonical_tag(stem.rsplit(".", 1)[-1])
        except ValueError as exc:
            raise ValueError(f"no language found in {name!r}") from exc
        with open(path, encoding="utf-8") as handle:
            messages = _parse_messages(handle.read())
        self._messages.setdefault(tag, {}).update(messages)

    def match(self, lang: str) -> str:
        if lang in self._messages:
            return lang
        base = lang.split("-", 1)[0]
        if base in self._messages:
            return base
        for tag in self._messages:
            if tag.split("-", 1)[0] == base:
                return tag
        return self.default_language

    def lookup(self, tag: str, msg_id: str) -> str:
        try:
            return self._messages[tag][msg_id]
        except KeyError:
            raise _MessageNotFoundError(
                f"message {msg_id!r} not found in language {tag!r}"
            ) from None


class _Localizer:
    """Looks messages up in a bundle for one language."""

    def __init__(self, bundle: _Bundle, lang: str) -> None:
        self._bundle = bundle
        self.lang = lang

    def localize(self, msg_id: str) -> str:
        return self._bundle.lookup(self._bundle.match(self.lang), msg_id)


def _ctx_lang(ctx: Context) -> str:
    lang = ctx.value(LANG_CTX_KEY)
    if not isinstance(lang, str):
        raise TypeError("the context carries no language")
    return lang


def _localize(localizer: _Localizer, msg_id: str) -> str | None:
    try:
        return localizer.localize(msg_id)
    except _MessageNotFoundError:
        return None


class Translator:
    """Translates message ids into the language of a request."""

    def __init__(self, default_language: str = CHINESE) -> None:
        self._bundle = _Bundle(default_language)
        self._localizers: dict[str, _Localizer] = {}
        self.supported_languages: list[str] = []

    def add_bundle_from_file(self, path: str | os.PathLike[str]) -> None:
        """Load the messages of a JSON locale file named after its language."""
        self._bundle.load_message_file(path)

    def add_language_support(self, lang: str) -> None:
        """Make ``lang`` selectable by :meth:`match_localizer`."""
        self.supported_languages.append(lang)
        self._localizers[lang] = _Localizer(self._bundle, lang)

    def match_localizer(self, lang: str) -> _Localizer:
        """Return the localizer of the best supported tag in ``lang``, else Chinese."""
        for tag in parse_tags(lang):
            if tag in self._localizers:
                return self._localizers[tag]
        try:
            return self._localizers[CHINESE]
        except KeyError:
            raise KeyError(f"no localizer for {lang!r} and no Chinese fallback") from None

    def trans(self, ctx: Context, msg_id: str) -> str:
        """Return the translation of ``msg_id``, or ``msg_id`` when there is none."""
        message = _localize(self.match_localizer(_ctx_lang(ctx)), msg_id)
        return message or msg_id

    def trans_error(self, ctx: Context, err: BaseException) -> Exception:
        """Return a copy of ``err`` with its message translated."""
        lang = _ctx_lang(ctx)
        if is_grpc_error(err):
            text = str(err)
            message = _localize(self.match_localizer(lang), text.split("desc = ")[1])
            return StatusError(err.code, message or text)
        if isinstance(err, CodeError):
            message = _localize(self.match_localizer(lang), str(err))
            return CodeError(err.code, message or str(err))
        if isinstance(err, ApiError):
            message = _localize(self.match_localizer(lang), str(err))
            return ApiError(err.code, str(err) if message is None else message)
        return ApiError(HTTPStatus.INTERNAL_SERVER_ERROR, str(err))


def _walk_files(root: Path) -> Iterator[Path]:
    if not root.is_dir():
        yield root
        return
    for entry in sorted(root.iterdir(), key=lambda item: item.name):
        if entry.is_dir():
            yield from _walk_files(entry)
        else:
            yield entry


def new_translator(conf: I18nConf, default_dir: str | os.PathLike[str]) -> Translator:
    """Return a translator loaded from ``conf.dir``, or ``default_dir`` when it is empty."""
    root = Path(conf.dir or default_dir)
    if not root.exists():
        raise FileNotFoundError(f"wrong directory path: {conf.dir}")

    trans = Translator()
    for path in _walk_files(root):
        language_name = path.name.removesuffix(".json")
        tags = parse_tags(language_name)
        if not tags:
            raise ValueError(f"no language found in {str(path)!r}")
        trans.add_language_support(tags[0])
        try:
            trans.add_bundle_from_file(path)
        except (OSError, ValueError) as exc:
            raise ValueError(
                f"failed to load files from {path} for i18n, please check the "
                f"configuration, error: {exc}"
            ) from exc
    return trans