import json
from http import HTTPStatus

import pytest

from admincommon.enums import ErrorCode
from admincommon.errors import ApiError, CodeError, StatusError
from admincommon.i18n import I18nConf, Translator, new_translator
from admincommon.reqctx import Context


def _write(path, data):
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")


@pytest.fixture
def locale_dir(tmp_path):
    root = tmp_path / "locale"
    root.mkdir()
    _write(root / "zh.json", {"common": {"success": "成功", "empty": ""}})
    _write(root / "ja.json", {"common": {"success": "操作が成功しました"}})
    _write(root / "en.json", {"common": {"success": "Successfully"}})
    return root


def _ctx(lang):
    return Context().with_value("lang", lang)


@pytest.fixture
def trans(locale_dir):
    return new_translator(I18nConf(dir=""), locale_dir)


@pytest.mark.parametrize(
    "lang, expected",
    [("zh", "成功"), ("ja", "操作が成功しました"), ("en", "Successfully")],
)
def test_translator(trans, lang, expected):
    assert trans.trans(_ctx(lang), "common.success") == expected


def test_unknown_language_falls_back_to_chinese(trans):
    assert trans.trans(_ctx("fr"), "common.success") == "成功"


def test_accept_language_weights(trans):
    assert trans.trans(_ctx("de,ja;q=0.9,en;q=0.8"), "common.success") == "操作が成功しました"


def test_missing_message_returns_id(trans):
    assert trans.trans(_ctx("en"), "common.unknown") == "common.unknown"


def test_empty_message_returns_id(trans):
    assert trans.trans(_ctx("zh"), "common.empty") == "common.empty"


def test_supported_languages_in_walk_order(trans):
    assert trans.supported_languages == ["en", "ja", "zh"]


def test_conf_dir_overrides_default(tmp_path, locale_dir):
    other = tmp_path / "other"
    other.mkdir()
    _write(other / "en.json", {"common": {"success": "Done"}})
    translator = new_translator(I18nConf(dir=str(other)), locale_dir)
    assert translator.trans(_ctx("en"), "common.success") == "Done"


def test_message_object_form(tmp_path):
    _write(tmp_path / "en.json", {"common": {"success": {"description": "d", "other": "Okay"}}})
    translator = new_translator(I18nConf(), tmp_path)
    assert translator.trans(_ctx("en"), "common.success") == "Okay"


def test_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        new_translator(I18nConf(dir=str(tmp_path / "nope")), tmp_path)


def test_bad_json_raises(tmp_path):
    (tmp_path / "en.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError, match="failed to load files"):
        new_translator(I18nConf(), tmp_path)


def test_context_without_language_raises(trans):
    with pytest.raises(TypeError):
        trans.trans(Context(), "common.success")


def test_match_localizer_without_chinese_raises(tmp_path):
    _write(tmp_path / "en.json", {"common": {"success": "Successfully"}})
    translator = new_translator(I18nConf(), tmp_path)
    with pytest.raises(KeyError):
        translator.match_localizer("fr")


def test_manual_translator(locale_dir):
    translator = Translator()
    translator.add_language_support("en")
    translator.add_bundle_from_file(locale_dir / "en.json")
    assert translator.trans(_ctx("en"), "common.success") == "Successfully"


def test_trans_error_grpc(trans):
    result = trans.trans_error(_ctx("en"), StatusError(ErrorCode.NOT_FOUND, "common.success"))
    assert isinstance(result, StatusError)
    assert result.code == ErrorCode.NOT_FOUND
    assert result.message == "Successfully"


def test_trans_error_grpc_untranslated_keeps_full_text(trans):
    err = StatusError(ErrorCode.INTERNAL, "common.unknown")
    result = trans.trans_error(_ctx("en"), err)
    assert result.message == str(err)


def test_trans_error_code_error(trans):
    result = trans.trans_error(_ctx("ja"), CodeError(7, "common.success"))
    assert isinstance(result, CodeError)
    assert (result.code, result.msg) == (7, "操作が成功しました")


def test_trans_error_api_error_untranslated(trans):
    result = trans.trans_error(_ctx("en"), ApiError(400, "common.unknown"))
    assert isinstance(result, ApiError)
    assert (result.code, result.msg) == (400, "common.unknown")


def test_trans_error_other_error(trans):
    result = trans.trans_error(_ctx("en"), ValueError("boom"))
    assert isinstance(result, ApiError)
    assert result.code == HTTPStatus.INTERNAL_SERVER_ERROR
    assert result.msg == "boom"