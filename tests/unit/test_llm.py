import json

import pytest
from unittest.mock import MagicMock
from openai import OpenAIError

from pdfrenamer.errors import (
    ExtractionError,
    FieldDecodeError,
    TranscriptionError,
)
from pdfrenamer.llm import LLMClient, ResponseParser
from pdfrenamer.prompts import TRANSCRIBE_PAGE_V1


def _completion(content):
    response = MagicMock()
    response.choices = [MagicMock()]
    response.choices[0].message.content = content
    return response


def test_parse_fields_valid():
    assert ResponseParser.parse_fields('{"Title": "Invoice", "Date": "2024"}') == {
        "Title": "Invoice",
        "Date": "2024",
    }


def test_parse_fields_null_becomes_empty():
    assert ResponseParser.parse_fields('{"Title": null}') == {"Title": ""}


@pytest.mark.parametrize(
    "payload",
    ["not json", '["Invoice"]', '{"Title": 5}', '{"Title": {"a": "b"}}', ""],
)
def test_parse_fields_rejects_bad_payloads(payload):
    with pytest.raises(FieldDecodeError, match="failed to unmarshal JSON payload"):
        ResponseParser.parse_fields(payload)


def test_transcribe_page_sends_inline_jpeg():
    client = MagicMock()
    client.chat.completions.create.return_value = _completion("# Page")
    llm = LLMClient(client=client)

    assert llm.transcribe_page("QUJD", "vision-model", page=0) == "# Page"

    _, kwargs = client.chat.completions.create.call_args
    assert kwargs["model"] == "vision-model"
    system, user = kwargs["messages"]
    assert system == {"role": "system", "content": TRANSCRIBE_PAGE_V1}
    image_part = user["content"][0]
    assert image_part["type"] == "image_url"
    assert image_part["image_url"]["url"] == "data:image/jpeg;base64,QUJD"


def test_transcribe_page_none_content_is_empty():
    client = MagicMock()
    client.chat.completions.create.return_value = _completion(None)

    assert LLMClient(client=client).transcribe_page("QUJD", "m", page=0) == ""


def test_transcribe_page_failure_names_page():
    client = MagicMock()
    client.chat.completions.create.side_effect = OpenAIError("connection refused")

    with pytest.raises(TranscriptionError, match="image #3") as e:
        LLMClient(client=client).transcribe_page("QUJD", "m", page=3)
    assert e.value.page == 3


def test_transcribe_page_empty_choices():
    client = MagicMock()
    response = MagicMock()
    response.choices = []
    client.chat.completions.create.return_value = response

    with pytest.raises(TranscriptionError, match="empty response"):
        LLMClient(client=client).transcribe_page("QUJD", "m", page=0)


def test_extract_fields_requests_json_object():
    client = MagicMock()
    payload = json.dumps({"Title": "Invoice"})
    client.chat.completions.create.return_value = _completion(payload)
    llm = LLMClient(client=client)

    result = llm.extract_fields("# Invoice", "text-model", "use ISO dates", "{{.Title}}.pdf")

    assert result == payload
    _, kwargs = client.chat.completions.create.call_args
    assert kwargs["model"] == "text-model"
    assert kwargs["response_format"] == {"type": "json_object"}
    system, user = kwargs["messages"]
    assert "use ISO dates" in system["content"]
    assert '"{{.Title}}.pdf"' in system["content"]
    assert user == {"role": "user", "content": "# Invoice"}


def test_extract_fields_failure():
    client = MagicMock()
    client.chat.completions.create.side_effect = OpenAIError("timeout")

    with pytest.raises(ExtractionError, match="failed to extract information"):
        LLMClient(client=client).extract_fields("md", "m", "", "{{.Title}}.pdf")
