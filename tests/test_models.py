# SPDX-License-Identifier: Apache-2.0
"""Tests for wire data models."""

from __future__ import annotations

import dataclasses
import json

import pytest

from cloud_translator.core.models import (
    BatchTranslateInputConfig,
    BatchTranslateOutputConfig,
    BatchTranslateTextRequest,
    DetectLanguageRequest,
    DetectLanguageResponse,
    GcsDestination,
    GcsSource,
    GetSupportedLanguagesParams,
    Glossary,
    ListGlossariesResponse,
    ListOperationsParams,
    ListOperationsResponse,
    MimeType,
    Operation,
    Status,
    SupportedLanguages,
    TranslateTextGlossaryConfig,
    TranslateTextRequest,
    TranslateTextResponse,
)


class TestDetectLanguage:
    """Tests for language detection models."""

    def test_request_omits_unset_fields(self) -> None:
        """Only the content should be sent when nothing else is set."""
        request = DetectLanguageRequest(content="我是谁是我")
        assert request.to_dict() == {"content": "我是谁是我"}
        assert "null" not in json.dumps(request.to_dict())

    def test_request_with_all_fields(self) -> None:
        """Optional fields should use camelCase keys and enum values."""
        request = DetectLanguageRequest(
            content="hello",
            model="projects/p/locations/global/models/language-detection/default",
            mime_type=MimeType.PLAIN,
            labels={"team": "i18n"},
        )
        data = request.to_dict()
        assert data["mimeType"] == "text/plain"
        assert data["labels"] == {"team": "i18n"}
        assert DetectLanguageRequest.from_dict(data) == request

    def test_response_decoding(self) -> None:
        """Detected languages should keep code and confidence."""
        response = DetectLanguageResponse.from_dict(
            {"languages": [{"languageCode": "zh", "confidence": 0.98}]}
        )
        assert len(response.languages) == 1
        assert response.languages[0].language_code == "zh"
        assert response.languages[0].confidence == 0.98

    def test_response_without_languages(self) -> None:
        """An omitted repeated field should decode to an empty list."""
        assert DetectLanguageResponse.from_dict({}).languages == []


class TestSupportedLanguages:
    """Tests for supported language models."""

    def test_params_omit_unset_fields(self) -> None:
        """Empty params should encode to an empty dictionary."""
        assert GetSupportedLanguagesParams().to_dict() == {}
        assert GetSupportedLanguagesParams(display_language_code="en").to_dict() == {
            "displayLanguageCode": "en"
        }

    def test_source_and_target_codes(self) -> None:
        """Convenience properties should filter by support flags."""
        languages = SupportedLanguages.from_dict(
            {
                "languages": [
                    {"languageCode": "en", "supportSource": True, "supportTarget": True},
                    {"languageCode": "zh-TW", "supportTarget": True, "displayName": "Chinese"},
                ]
            }
        )
        assert languages.source_codes == ["en"]
        assert languages.target_codes == ["en", "zh-TW"]
        assert languages.languages[1].display_name == "Chinese"
        assert languages.languages[1].support_source is False


class TestTranslateText:
    """Tests for text translation models."""

    def test_request_without_source_language(self) -> None:
        """The source language should be absent, not null, when unset."""
        request = TranslateTextRequest(contents=["player"], target_language_code="zh")
        assert request.to_dict() == {"contents": ["player"], "targetLanguageCode": "zh"}

    def test_request_with_glossary_round_trip(self) -> None:
        """Nested glossary config should survive a wire round trip."""
        request = TranslateTextRequest(
            contents=["player"],
            target_language_code="zh",
            source_language_code="en",
            mime_type=MimeType.HTML,
            glossary_config=TranslateTextGlossaryConfig(
                glossary="projects/p/locations/us-central1/glossaries/g",
                ignore_case=True,
            ),
        )
        data = json.loads(json.dumps(request.to_dict()))
        assert data["glossaryConfig"] == {
            "glossary": "projects/p/locations/us-central1/glossaries/g",
            "ignoreCase": True,
        }
        assert TranslateTextRequest.from_dict(data) == request

    def test_glossary_config_without_ignore_case(self) -> None:
        """ignoreCase should be omitted when unset."""
        config = TranslateTextGlossaryConfig(glossary="g")
        assert config.to_dict() == {"glossary": "g"}

    def test_response_with_detected_language(self) -> None:
        """Detected source language should be decoded per translation."""
        response = TranslateTextResponse.from_dict(
            {"translations": [{"translatedText": "播放器", "detectedLanguageCode": "en"}]}
        )
        assert len(response.translations) == 1
        assert response.translations[0].translated_text == "播放器"
        assert response.translations[0].detected_language_code == "en"
        assert response.glossary_translations is None

    def test_response_with_glossary_translations(self) -> None:
        """Glossary translations should decode with their glossary config."""
        response = TranslateTextResponse.from_dict(
            {
                "translations": [{"translatedText": "播放器"}],
                "glossaryTranslations": [
                    {"translatedText": "玩家", "glossaryConfig": {"glossary": "g"}}
                ],
            }
        )
        assert response.glossary_translations is not None
        assert response.glossary_translations[0].translated_text == "玩家"
        assert response.glossary_translations[0].glossary_config == (
            TranslateTextGlossaryConfig(glossary="g")
        )


class TestBatchTranslateText:
    """Tests for batch translation models."""

    def _request(self) -> BatchTranslateTextRequest:
        return BatchTranslateTextRequest(
            source_language_code="en",
            target_language_codes=["zh"],
            input_configs=[
                BatchTranslateInputConfig(
                    gcs_source=GcsSource(input_uri="gs://in/test.tsv"),
                    mime_type=MimeType.PLAIN,
                )
            ],
            output_config=BatchTranslateOutputConfig(
                gcs_destination=GcsDestination(output_uri_prefix="gs://out/")
            ),
            glossaries={"zh": TranslateTextGlossaryConfig(glossary="g", ignore_case=True)},
        )

    def test_request_wire_form(self) -> None:
        """Nested configs should use the API's field names."""
        data = self._request().to_dict()
        assert data == {
            "sourceLanguageCode": "en",
            "targetLanguageCodes": ["zh"],
            "inputConfigs": [
                {"mimeType": "text/plain", "gcsSource": {"inputUri": "gs://in/test.tsv"}}
            ],
            "outputConfig": {"gcsDestination": {"outputUriPrefix": "gs://out/"}},
            "glossaries": {"zh": {"glossary": "g", "ignoreCase": True}},
        }

    def test_request_round_trip(self) -> None:
        """A decoded request should equal the original."""
        request = self._request()
        assert BatchTranslateTextRequest.from_dict(request.to_dict()) == request


class TestOperation:
    """Tests for Operation and Status."""

    def test_running_operation(self) -> None:
        """Missing done should stay None (not reported)."""
        operation = Operation.from_dict(
            {"name": "projects/p/locations/l/operations/op-1", "metadata": {"state": "RUNNING"}}
        )
        assert operation.done is None
        assert operation.metadata == {"state": "RUNNING"}
        assert operation.error is None
        assert operation.response is None

    def test_failed_operation(self) -> None:
        """The error should decode into a Status."""
        operation = Operation.from_dict(
            {
                "name": "op",
                "done": True,
                "error": {"code": 5, "message": "Glossary not found", "details": [{"a": 1}]},
            }
        )
        assert operation.done is True
        assert operation.error == Status(code=5, message="Glossary not found", details=[{"a": 1}])

    def test_succeeded_operation_round_trip(self) -> None:
        """An untyped response payload should be kept verbatim."""
        data = {
            "name": "op",
            "done": True,
            "response": {"@type": "type.googleapis.com/Glossary", "entryCount": "3"},
        }
        operation = Operation.from_dict(data)
        assert operation.response == data["response"]
        assert operation.to_dict() == data

    def test_status_is_immutable(self) -> None:
        """Status should not be mutable once received."""
        status = Status(code=3, message="bad")
        with pytest.raises(dataclasses.FrozenInstanceError):
            status.code = 4  # type: ignore[misc]

    def test_status_without_message(self) -> None:
        """A status without message should decode with an empty message."""
        assert Status.from_dict({"code": 1}) == Status(code=1, message="")

    def test_list_params(self) -> None:
        """Only set list parameters should be encoded."""
        assert ListOperationsParams(page_size=10).to_dict() == {"pageSize": 10}

    def test_empty_list_response(self) -> None:
        """An empty page should decode without operations or next token."""
        response = ListOperationsResponse.from_dict({})
        assert response.operations == []
        assert response.next_page_token is None

    def test_list_response_empty_token(self) -> None:
        """An empty next page token means there are no more pages."""
        response = ListOperationsResponse.from_dict(
            {"operations": [{"name": "op"}], "nextPageToken": ""}
        )
        assert [op.name for op in response.operations] == ["op"]
        assert response.next_page_token is None


class TestGlossary:
    """Tests for glossary models."""

    def test_for_language_pair(self) -> None:
        """A new glossary should carry only creatable fields."""
        glossary = Glossary.for_language_pair(
            "projects/p/locations/l/glossaries/test", "gs://bucket/test.tsv", "en", "zh"
        )
        assert glossary.to_dict() == {
            "name": "projects/p/locations/l/glossaries/test",
            "inputConfig": {"gcsSource": {"inputUri": "gs://bucket/test.tsv"}},
            "languagePair": {"sourceLanguageCode": "en", "targetLanguageCode": "zh"},
        }

    def test_for_language_codes(self) -> None:
        """An equivalent-term-sets glossary should use languageCodesSet."""
        glossary = Glossary.for_language_codes("g", "gs://b/t.csv", ["en", "zh", "ja"])
        data = glossary.to_dict()
        assert data["languageCodesSet"] == {"languageCodes": ["en", "zh", "ja"]}
        assert "languagePair" not in data

    def test_server_fields(self) -> None:
        """entryCount arrives as a string and should decode to an int."""
        data = {
            "name": "g",
            "inputConfig": {"gcsSource": {"inputUri": "gs://b/t.tsv"}},
            "languagePair": {"sourceLanguageCode": "en", "targetLanguageCode": "zh"},
            "entryCount": "42",
            "submitTime": "2024-01-01T00:00:00Z",
            "endTime": "2024-01-01T00:01:00Z",
        }
        glossary = Glossary.from_dict(data)
        assert glossary.entry_count == 42
        assert glossary.to_dict() == data

    def test_list_response(self) -> None:
        """Glossary pages should decode glossaries and the next token."""
        response = ListGlossariesResponse.from_dict(
            {
                "glossaries": [
                    {"name": "g", "inputConfig": {"gcsSource": {"inputUri": "gs://b/t.tsv"}}}
                ],
                "nextPageToken": "next",
            }
        )
        assert response.glossaries[0].name == "g"
        assert response.next_page_token == "next"
