import json
from typing import List

import pytest

from starr.application.exceptions import DecodeError
from starr.infrastructure.api_models import DelayProfile, Tag
from starr.infrastructure.codec import (
    FORM_CONTENT_TYPE,
    JSON_CONTENT_TYPE,
    decode_body,
    decode_error_message,
    encode_body,
)


class TestEncodeBody:
    def test_no_body(self):
        assert encode_body(None) == (None, None)

    def test_model_uses_wire_names_and_skips_unset(self):
        payload, content_type = encode_body(DelayProfile(id=10, usenet_delay=5, tags=[]))
        assert content_type == JSON_CONTENT_TYPE
        assert json.loads(payload) == {"id": 10, "usenetDelay": 5, "tags": []}

    def test_list_of_models(self):
        payload, _ = encode_body([Tag(label="a"), Tag(id=2, label="b")])
        assert json.loads(payload) == [{"label": "a"}, {"id": 2, "label": "b"}]

    def test_form(self):
        payload, content_type = encode_body({"id": 7}, form=True)
        assert payload == b"id=7"
        assert content_type == FORM_CONTENT_TYPE

    def test_raw_bytes_pass_through(self):
        assert encode_body(b"{}") == (b"{}", JSON_CONTENT_TYPE)


class TestDecodeBody:
    def test_list_of_models(self):
        tags = decode_body(b'[{"id": 1, "label": "x", "extra": true}]', List[Tag])
        assert tags[0].id == 1
        assert tags[0].label == "x"
        assert tags[0].model_extra == {"extra": True}

    def test_mismatch_raises_decode_error(self):
        with pytest.raises(DecodeError) as info:
            decode_body(b'{"id": "not a number"}', Tag, "http://h/api/v3/tag/1")
        assert info.value.url == "http://h/api/v3/tag/1"

    def test_invalid_json_raises_decode_error(self):
        with pytest.raises(DecodeError):
            decode_body(b"<html>", Tag)


class TestDecodeErrorMessage:
    def test_message_envelope(self):
        assert decode_error_message(b'{"message": "NotFound"}') == "NotFound"

    def test_validation_list(self):
        data = b'[{"propertyName": "Path", "errorMessage": "Path is required"}]'
        assert decode_error_message(data) == "Path: Path is required"

    def test_anything_else(self):
        assert decode_error_message(b"oops") == ""
        assert decode_error_message(b"{}") == ""
