"""Tests for payload models and API edge cases."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from exaroton.api.envelope import decode_envelope
from exaroton.api.exceptions import ExarotonDecodeError, ExarotonValidationError
from exaroton.api.models import (
    Account,
    FileInfoData,
    PlayerInfo,
    ServerData,
    ServerStatus,
    StartOptions,
)

VALID_CODES = [0, 1, 2, 3, 4, 5, 6, 7, 8, 10]


class TestServerStatus:
    @pytest.mark.parametrize("code", VALID_CODES)
    def test_valid_codes_decode(self, code):
        assert ServerStatus.from_code(code).value == code

    def test_valid_codes_are_distinct(self):
        assert len({ServerStatus.from_code(c) for c in VALID_CODES}) == 10

    @pytest.mark.parametrize("code", [9, -1, 11, 100])
    def test_invalid_codes_raise(self, code):
        with pytest.raises(ExarotonValidationError):
            ServerStatus.from_code(code)

    def test_non_int_raises(self):
        with pytest.raises(ExarotonValidationError):
            ServerStatus.from_code("1")

    def test_preparing_is_ten(self):
        assert ServerStatus.PREPARING == 10

    def test_str_is_capitalized_name(self):
        assert str(ServerStatus.ONLINE) == "Online"


class TestServerData:
    def test_decodes_status(self, sample_server_data):
        server = ServerData.model_validate(sample_server_data)
        assert server.status is ServerStatus.ONLINE

    def test_invalid_status_fails_validation(self, sample_server_data):
        sample_server_data["status"] = 9
        with pytest.raises(ValidationError):
            ServerData.model_validate(sample_server_data)

    def test_invalid_status_in_envelope_is_decode_error(self, sample_server_data):
        sample_server_data["status"] = 9
        body = {"success": True, "error": None, "data": sample_server_data}
        with pytest.raises(ExarotonDecodeError):
            decode_envelope(json.dumps(body), ServerData)

    def test_optional_fields_absent(self, sample_server_data):
        for key in ("host", "port", "software"):
            sample_server_data[key] = None
        server = ServerData.model_validate(sample_server_data)
        assert server.host is None
        assert server.port is None
        assert server.software is None

    def test_is_frozen(self, sample_server_data):
        server = ServerData.model_validate(sample_server_data)
        with pytest.raises(ValidationError):
            server.name = "other"

    def test_ignores_unknown_fields(self, sample_server_data):
        sample_server_data["unknownField"] = 1
        assert ServerData.model_validate(sample_server_data).id == "tgkm731xO7GiHt76"


class TestPlayerInfo:
    def test_list_alias(self):
        info = PlayerInfo.model_validate({"max": 10, "count": 1, "list": ["alice"]})
        assert info.names == ["alice"]

    def test_null_list_rejected(self):
        with pytest.raises(ValidationError):
            PlayerInfo.model_validate({"max": 10, "count": 0, "list": None})


class TestFileInfoData:
    def test_camel_case_fields(self, sample_file_data):
        info = FileInfoData.model_validate(sample_file_data)
        assert info.is_directory is True
        assert info.is_text_file is False

    def test_path_is_normalized(self, sample_file_data):
        info = FileInfoData.model_validate(sample_file_data)
        assert info.path == "configs"

    def test_children_none_is_distinct_from_empty(self, sample_file_data):
        info = FileInfoData.model_validate(sample_file_data)
        assert info.children[0].children is None

        sample_file_data["children"] = []
        empty = FileInfoData.model_validate(sample_file_data)
        assert empty.children == []


class TestAccount:
    def test_credits_float(self):
        account = Account.model_validate(
            {"name": "Steve", "email": "steve@example.com", "verified": True, "credits": 42.5}
        )
        assert account.credits == 42.5


class TestRequestBodies:
    def test_start_options_use_wire_name(self):
        assert StartOptions(use_own_credits=True).model_dump(by_alias=True) == {
            "useOwnCredits": True
        }


class TestRequiredFields:
    """Fields the API always sends must not be filled in when missing."""

    @staticmethod
    def _envelope(data) -> str:
        return json.dumps({"success": True, "error": None, "data": data})

    @pytest.mark.parametrize(
        "missing",
        ["isDirectory", "isReadable", "isWritable", "isTextFile", "isConfigFile", "isLog", "size"],
    )
    def test_file_info_missing_field(self, sample_file_data, missing):
        child = dict(sample_file_data["children"][0])
        del child[missing]
        with pytest.raises(ExarotonDecodeError):
            decode_envelope(self._envelope(child), FileInfoData)

    def test_file_info_with_only_path_and_name(self):
        with pytest.raises(ExarotonDecodeError):
            decode_envelope(self._envelope({"path": "/world", "name": "world"}), FileInfoData)

    def test_server_missing_shared(self, sample_server_data):
        del sample_server_data["shared"]
        with pytest.raises(ExarotonDecodeError):
            decode_envelope(self._envelope(sample_server_data), ServerData)

    def test_server_null_player_list(self, sample_server_data):
        sample_server_data["players"]["list"] = None
        with pytest.raises(ExarotonDecodeError):
            decode_envelope(self._envelope(sample_server_data), ServerData)

    def test_optional_fields_may_be_missing(self, sample_server_data, sample_file_data):
        for key in ("host", "port", "software"):
            del sample_server_data[key]
        server = decode_envelope(self._envelope(sample_server_data), ServerData).data
        assert server.software is None

        child = dict(sample_file_data["children"][0])
        del child["children"]
        info = decode_envelope(self._envelope(child), FileInfoData).data
        assert info.children is None
