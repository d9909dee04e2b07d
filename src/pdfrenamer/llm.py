"""
Chat completion client for page transcription and field extraction
"""

import json
from typing import Dict, Optional

from openai import OpenAI, OpenAIError

from .errors import (
    ExtractionError,
    FieldDecodeError,
    PDFRenamerError,
    TranscriptionError,
)
from .prompts import TRANSCRIBE_PAGE_V1, build_extraction_prompt


class ResponseParser:
    """Utility class for parsing LLM responses"""

    @staticmethod
    def message_content(response) -> str:
        """Return the first choice's text, or raise ValueError when there is none"""
        choices = getattr(response, "choices", None)
        if not choices:
            raise ValueError("empty response from model")
        content = choices[0].message.content
        return content if content is not None else ""

    @staticmethod
    def parse_fields(payload: str) -> Dict[str, str]:
        """Decode a flat JSON object of string values"""
        try:
            data = json.loads(payload)
        except ValueError as e:
            raise FieldDecodeError(f"failed to unmarshal JSON payload: {e}") from e

        if not isinstance(data, dict):
            raise FieldDecodeError(
                f"failed to unmarshal JSON payload: expected object, got {type(data).__name__}"
            )

        fields = {}
        for key, value in data.items():
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise FieldDecodeError(
                    f"failed to unmarshal JSON payload: value for {key!r} is "
                    f"{type(value).__name__}, not string"
                )
            fields[key] = value
        return fields


class LLMClient:
    """OpenAI-compatible chat client used for both pipeline model calls"""

    def __init__(
        self,
        endpoint: Optional[str] = None,
        api_key: Optional[str] = None,
        client: Optional[OpenAI] = None,
    ):
        self.endpoint = endpoint
        if client is None:
            try:
                client = OpenAI(base_url=endpoint or None, api_key=api_key or None)
            except OpenAIError as e:
                raise PDFRenamerError(f"failed to create OpenAI client: {e}") from e
        self.client = client
        self.response_parser = ResponseParser()

    def transcribe_page(self, image_base64: str, model: str, page: int) -> str:
        """Convert one JPEG page image to markdown"""
        try:
            response = self.client.chat.completions.create(
                model=model,
                messages=[
                    {"role": "system", "content": TRANSCRIBE_PAGE_V1},
                    {
                        "role": "user",
                        "content": [
                            {
                                "type": "image_url",
                                "image_url": {
                                    "url": f"data:image/jpeg;base64,{image_base64}",
                                    "detail": "auto",
                                },
                            }
                        ],
                    },
                ],
            )
            return self.response_parser.message_content(response)
        except (OpenAIError, ValueError) as e:
            raise TranscriptionError(
                f"failed to convert image #{page} to markdown: {e}", page=page
            ) from e

    def extract_fields(
        self, markdown: str, model: str, prompt: str, filename_format: str
    ) -> str:
        """Ask the text model for the template's fields; returns the raw JSON text"""
        try:
            response = self.client.chat.completions.create(
                model=model,
                messages=[
                    {
                        "role": "system",
                        "content": build_extraction_prompt(prompt, filename_format),
                    },
                    {"role": "user", "content": markdown},
                ],
                response_format={"type": "json_object"},
            )
            return self.response_parser.message_content(response)
        except (OpenAIError, ValueError) as e:
            raise ExtractionError(
                f"failed to extract information from markdown: {e}"
            ) from e

    def close(self):
        """Cleanup resources"""
        self.client.close()
