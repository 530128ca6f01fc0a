# SPDX-License-Identifier: Apache-2.0
"""Data models mirroring the Translation API v3beta1 JSON schema.

Every model converts to and from its wire form with ``to_dict`` and
``from_dict``. Wire keys are camelCase. Optional fields that are ``None`` are
omitted from ``to_dict`` output, never written as ``null``. Repeated fields
that the server leaves out when empty decode to an empty list.

Untyped payloads (operation metadata and response, status details) are kept
as plain JSON values.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


def _compact(data: dict[str, Any]) -> dict[str, Any]:
    """Drop keys whose value is None."""
    return {key: value for key, value in data.items() if value is not None}


def _optional_int(value: Any) -> Optional[int]:
    # int64 fields arrive as JSON strings
    return None if value is None else int(value)


class MimeType(str, Enum):
    """Format of the source text."""

    PLAIN = "text/plain"
    HTML = "text/html"


def _optional_mime(value: Any) -> Optional[MimeType]:
    return None if value is None else MimeType(value)


# ---------------------------------------------------------------------------
# Language detection
# ---------------------------------------------------------------------------


@dataclass
class DetectLanguageRequest:
    """Request body for ``locations.detectLanguage``.

    Attributes:
        content: The text whose language should be detected.
        model: Language detection model resource name. Server default if None.
        mime_type: Format of ``content``. Server treats None as text/html.
        labels: User-defined metadata labels.
    """

    content: str
    model: Optional[str] = None
    mime_type: Optional[MimeType] = None
    labels: Optional[dict[str, str]] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to wire dictionary."""
        return _compact(
            {
                "model": self.model,
                "mimeType": self.mime_type.value if self.mime_type else None,
                "labels": self.labels,
                "content": self.content,
            }
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DetectLanguageRequest:
        """Create from wire dictionary."""
        return cls(
            content=data["content"],
            model=data.get("model"),
            mime_type=_optional_mime(data.get("mimeType")),
            labels=data.get("labels"),
        )


@dataclass
class DetectedLanguage:
    """One candidate language with its detection confidence."""

    language_code: str
    confidence: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to wire dictionary."""
        return {"languageCode": self.language_code, "confidence": self.confidence}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DetectedLanguage:
        """Create from wire dictionary."""
        return cls(
            language_code=data["languageCode"],
            confidence=float(data["confidence"]),
        )


@dataclass
class DetectLanguageResponse:
    """Detected languages, most probable first."""

    languages: list[DetectedLanguage] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to wire dictionary."""
        return {"languages": [lang.to_dict() for lang in self.languages]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DetectLanguageResponse:
        """Create from wire dictionary."""
        return cls(
            languages=[DetectedLanguage.from_dict(d) for d in data.get("languages", [])]
        )


# ---------------------------------------------------------------------------
# Supported languages
# ---------------------------------------------------------------------------


@dataclass
class GetSupportedLanguagesParams:
    """Query parameters for ``locations.getSupportedLanguages``.

    Attributes:
        display_language_code: Language used for localized display names.
            Display names are omitted from the response when None.
        model: Model whose supported languages should be listed.
    """

    display_language_code: Optional[str] = None
    model: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to wire dictionary."""
        return _compact(
            {
                "displayLanguageCode": self.display_language_code,
                "model": self.model,
            }
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GetSupportedLanguagesParams:
        """Create from wire dictionary."""
        return cls(
            display_language_code=data.get("displayLanguageCode"),
            model=data.get("model"),
        )


@dataclass
class SupportedLanguage:
    """A language the API can translate from and/or to."""

    language_code: str
    support_source: bool = False
    support_target: bool = False
    display_name: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to wire dictionary."""
        return _compact(
            {
                "languageCode": self.language_code,
                "displayName": self.display_name,
                "supportSource": self.support_source,
                "supportTarget": self.support_target,
            }
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SupportedLanguage:
        """Create from wire dictionary."""
        return cls(
            language_code=data["languageCode"],
            support_source=bool(data.get("supportSource", False)),
            support_target=bool(data.get("supportTarget", False)),
            display_name=data.get("displayName"),
        )


@dataclass
class SupportedLanguages:
    """Response of ``locations.getSupportedLanguages``."""

    languages: list[SupportedLanguage] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to wire dictionary."""
        return {"languages": [lang.to_dict() for lang in self.languages]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SupportedLanguages:
        """Create from wire dictionary."""
        return cls(
            languages=[SupportedLanguage.from_dict(d) for d in data.get("languages", [])]
        )

    @property
    def source_codes(self) -> list[str]:
        """Language codes usable as a translation source."""
        return [lang.language_code for lang in self.languages if lang.support_source]

    @property
    def target_codes(self) -> list[str]:
        """Language codes usable as a translation target."""
        return [lang.language_code for lang in self.languages if lang.support_target]


# ---------------------------------------------------------------------------
# Text translation
# ---------------------------------------------------------------------------


@dataclass
class TranslateTextGlossaryConfig:
    """Glossary to apply to a translation.

    Attributes:
        glossary: Glossary resource name
            (``projects/*/locations/*/glossaries/*``).
        ignore_case: Case-insensitive matching. Server default is False.
    """

    glossary: str
    ignore_case: Optional[bool] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to wire dictionary."""
        return _compact({"glossary": self.glossary, "ignoreCase": self.ignore_case})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TranslateTextGlossaryConfig:
        """Create from wire dictionary."""
        return cls(glossary=data["glossary"], ignore_case=data.get("ignoreCase"))


@dataclass
class TranslateTextRequest:
    """Request body for ``locations.translateText``.

    Attributes:
        contents: Texts to translate. Keep the total under 30k codepoints;
            use batch translation for larger inputs.
        target_language_code: BCP-47 code of the target language.
        source_language_code: BCP-47 code of the input. The server detects it
            when None and reports it per translation.
        mime_type: Format of the contents.
        model: Translation model resource name.
        glossary_config: Glossary to apply. Must live in the same location
            as the model.
        labels: User-defined metadata labels.
    """

    contents: list[str]
    target_language_code: str
    source_language_code: Optional[str] = None
    mime_type: Optional[MimeType] = None
    model: Optional[str] = None
    glossary_config: Optional[TranslateTextGlossaryConfig] = None
    labels: Optional[dict[str, str]] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to wire dictionary."""
        return _compact(
            {
                "contents": list(self.contents),
                "mimeType": self.mime_type.value if self.mime_type else None,
                "sourceLanguageCode": self.source_language_code,
                "targetLanguageCode": self.target_language_code,
                "model": self.model,
                "glossaryConfig": (
                    self.glossary_config.to_dict() if self.glossary_config else None
                ),
                "labels": self.labels,
            }
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TranslateTextRequest:
        """Create from wire dictionary."""
        glossary_config = data.get("glossaryConfig")
        return cls(
            contents=list(data["contents"]),
            target_language_code=data["targetLanguageCode"],
            source_language_code=data.get("sourceLanguageCode"),
            mime_type=_optional_mime(data.get("mimeType")),
            model=data.get("model"),
            glossary_config=(
                TranslateTextGlossaryConfig.from_dict(glossary_config)
                if glossary_config is not None
                else None
            ),
            labels=data.get("labels"),
        )


@dataclass
class Translation:
    """A single translated text.

    ``detected_language_code`` is only set when the request had no source
    language. ``model`` echoes the requested model, if any.
    """

    translated_text: str
    model: Optional[str] = None
    detected_language_code: Optional[str] = None
    glossary_config: Optional[TranslateTextGlossaryConfig] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to wire dictionary."""
        return _compact(
            {
                "translatedText": self.translated_text,
                "model": self.model,
                "detectedLanguageCode": self.detected_language_code,
                "glossaryConfig": (
                    self.glossary_config.to_dict() if self.glossary_config else None
                ),
            }
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Translation:
        """Create from wire dictionary."""
        glossary_config = data.get("glossaryConfig")
        return cls(
            translated_text=data["translatedText"],
            model=data.get("model"),
            detected_language_code=data.get("detectedLanguageCode"),
            glossary_config=(
                TranslateTextGlossaryConfig.from_dict(glossary_config)
                if glossary_config is not None
                else None
            ),
        )


@dataclass
class TranslateTextResponse:
    """Response of ``locations.translateText``.

    Both lists have the same length as the request contents.
    ``glossary_translations`` is only present when a glossary was requested.
    """

    translations: list[Translation] = field(default_factory=list)
    glossary_translations: Optional[list[Translation]] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to wire dictionary."""
        return _compact(
            {
                "translations": [t.to_dict() for t in self.translations],
                "glossaryTranslations": (
                    [t.to_dict() for t in self.glossary_translations]
                    if self.glossary_translations is not None
                    else None
                ),
            }
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TranslateTextResponse:
        """Create from wire dictionary."""
        glossary_translations = data.get("glossaryTranslations")
        return cls(
            translations=[Translation.from_dict(t) for t in data.get("translations", [])],
            glossary_translations=(
                [Translation.from_dict(t) for t in glossary_translations]
                if glossary_translations is not None
                else None
            ),
        )


# ---------------------------------------------------------------------------
# Batch translation
# ---------------------------------------------------------------------------


@dataclass
class GcsSource:
    """Cloud Storage input location (file or wildcard)."""

    input_uri: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to wire dictionary."""
        return {"inputUri": self.input_uri}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GcsSource:
        """Create from wire dictionary."""
        return cls(input_uri=data["inputUri"])


@dataclass
class GcsDestination:
    """Cloud Storage output prefix. Must end with ``/``."""

    output_uri_prefix: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to wire dictionary."""
        return {"outputUriPrefix": self.output_uri_prefix}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GcsDestination:
        """Create from wire dictionary."""
        return cls(output_uri_prefix=data["outputUriPrefix"])


@dataclass
class BatchTranslateInputConfig:
    """One batch input: a .tsv, .txt or .html source in Cloud Storage."""

    gcs_source: GcsSource
    mime_type: Optional[MimeType] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to wire dictionary."""
        return _compact(
            {
                "mimeType": self.mime_type.value if self.mime_type else None,
                "gcsSource": self.gcs_source.to_dict(),
            }
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BatchTranslateInputConfig:
        """Create from wire dictionary."""
        return cls(
            gcs_source=GcsSource.from_dict(data["gcsSource"]),
            mime_type=_optional_mime(data.get("mimeType")),
        )


@dataclass
class BatchTranslateOutputConfig:
    """Where batch translation results and the index file are written."""

    gcs_destination: GcsDestination

    def to_dict(self) -> dict[str, Any]:
        """Convert to wire dictionary."""
        return {"gcsDestination": self.gcs_destination.to_dict()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BatchTranslateOutputConfig:
        """Create from wire dictionary."""
        return cls(gcs_destination=GcsDestination.from_dict(data["gcsDestination"]))


@dataclass
class BatchTranslateTextRequest:
    """Request body for ``locations.batchTranslateText``.

    Attributes:
        source_language_code: BCP-47 code of all inputs.
        target_language_codes: Up to 10 target languages.
        input_configs: Inputs. At most 1000 files and 100M codepoints total.
        output_config: Output location.
        models: Model per target language code.
        glossaries: Glossary per target language code.
        labels: User-defined metadata labels.
    """

    source_language_code: str
    target_language_codes: list[str]
    input_configs: list[BatchTranslateInputConfig]
    output_config: BatchTranslateOutputConfig
    models: Optional[dict[str, str]] = None
    glossaries: Optional[dict[str, TranslateTextGlossaryConfig]] = None
    labels: Optional[dict[str, str]] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to wire dictionary."""
        return _compact(
            {
                "sourceLanguageCode": self.source_language_code,
                "targetLanguageCodes": list(self.target_language_codes),
                "models": self.models,
                "inputConfigs": [c.to_dict() for c in self.input_configs],
                "outputConfig": self.output_config.to_dict(),
                "glossaries": (
                    {lang: g.to_dict() for lang, g in self.glossaries.items()}
                    if self.glossaries is not None
                    else None
                ),
                "labels": self.labels,
            }
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BatchTranslateTextRequest:
        """Create from wire dictionary."""
        glossaries = data.get("glossaries")
        return cls(
            source_language_code=data["sourceLanguageCode"],
            target_language_codes=list(data["targetLanguageCodes"]),
            input_configs=[
                BatchTranslateInputConfig.from_dict(c) for c in data["inputConfigs"]
            ],
            output_config=BatchTranslateOutputConfig.from_dict(data["outputConfig"]),
            models=data.get("models"),
            glossaries=(
                {
                    lang: TranslateTextGlossaryConfig.from_dict(g)
                    for lang, g in glossaries.items()
                }
                if glossaries is not None
                else None
            ),
            labels=data.get("labels"),
        )


# ---------------------------------------------------------------------------
# Long-running operations
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Status:
    """Failure outcome attached to a finished operation.

    Attributes:
        code: Canonical error code (``google.rpc.Code`` number).
        message: Developer-facing error message.
        details: Untyped detail payloads.
    """

    code: int
    message: str = ""
    details: Optional[list[Any]] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to wire dictionary."""
        return _compact(
            {"code": self.code, "message": self.message, "details": self.details}
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Status:
        """Create from wire dictionary."""
        details = data.get("details")
        return cls(
            code=int(data.get("code", 0)),
            message=data.get("message", ""),
            details=list(details) if details is not None else None,
        )


@dataclass(frozen=True)
class Operation:
    """Handle to a long-running server-side task.

    ``done`` is tri-state: None (not reported), False, or True. A finished
    operation carries exactly one of ``response`` or ``error``. Instances are
    snapshots; fetch or wait again to observe progress.

    Attributes:
        name: Opaque resource name, used for wait/get/cancel/delete.
        metadata: Untyped progress payload.
        done: Whether the operation has finished.
        error: Failure status, when finished unsuccessfully.
        response: Untyped success payload, when finished successfully.
    """

    name: str
    metadata: Any = None
    done: Optional[bool] = None
    error: Optional[Status] = None
    response: Any = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to wire dictionary."""
        return _compact(
            {
                "name": self.name,
                "metadata": self.metadata,
                "done": self.done,
                "error": self.error.to_dict() if self.error else None,
                "response": self.response,
            }
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Operation:
        """Create from wire dictionary."""
        error = data.get("error")
        done = data.get("done")
        return cls(
            name=data["name"],
            metadata=data.get("metadata"),
            done=bool(done) if done is not None else None,
            error=Status.from_dict(error) if error is not None else None,
            response=data.get("response"),
        )


@dataclass
class WaitOperationRequest:
    """Request body for ``operations.wait``.

    Attributes:
        timeout: Maximum server-side wait as a duration string ("1s", "0.5s").
    """

    timeout: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to wire dictionary."""
        return _compact({"timeout": self.timeout})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> WaitOperationRequest:
        """Create from wire dictionary."""
        return cls(timeout=data.get("timeout"))


@dataclass
class ListOperationsParams:
    """Query parameters for ``operations.list``."""

    filter: Optional[str] = None
    page_size: Optional[int] = None
    page_token: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to wire dictionary."""
        return _compact(
            {
                "filter": self.filter,
                "pageSize": self.page_size,
                "pageToken": self.page_token,
            }
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ListOperationsParams:
        """Create from wire dictionary."""
        return cls(
            filter=data.get("filter"),
            page_size=_optional_int(data.get("pageSize")),
            page_token=data.get("pageToken"),
        )


@dataclass
class ListOperationsResponse:
    """One page of operations."""

    operations: list[Operation] = field(default_factory=list)
    next_page_token: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to wire dictionary."""
        return _compact(
            {
                "operations": [op.to_dict() for op in self.operations],
                "nextPageToken": self.next_page_token,
            }
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ListOperationsResponse:
        """Create from wire dictionary."""
        return cls(
            operations=[Operation.from_dict(op) for op in data.get("operations", [])],
            next_page_token=data.get("nextPageToken") or None,
        )


# ---------------------------------------------------------------------------
# Glossaries
# ---------------------------------------------------------------------------


@dataclass
class LanguageCodePair:
    """Source/target pair of a unidirectional glossary."""

    source_language_code: str
    target_language_code: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to wire dictionary."""
        return {
            "sourceLanguageCode": self.source_language_code,
            "targetLanguageCode": self.target_language_code,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LanguageCodePair:
        """Create from wire dictionary."""
        return cls(
            source_language_code=data["sourceLanguageCode"],
            target_language_code=data["targetLanguageCode"],
        )


@dataclass
class LanguageCodesSet:
    """Language set of an equivalent-term-sets glossary."""

    language_codes: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to wire dictionary."""
        return {"languageCodes": list(self.language_codes)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LanguageCodesSet:
        """Create from wire dictionary."""
        return cls(language_codes=list(data.get("languageCodes", [])))


@dataclass
class GlossaryInputConfig:
    """Cloud Storage source of the glossary terms."""

    gcs_source: GcsSource

    def to_dict(self) -> dict[str, Any]:
        """Convert to wire dictionary."""
        return {"gcsSource": self.gcs_source.to_dict()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GlossaryInputConfig:
        """Create from wire dictionary."""
        return cls(gcs_source=GcsSource.from_dict(data["gcsSource"]))


@dataclass
class Glossary:
    """A glossary resource.

    ``entry_count``, ``submit_time`` and ``end_time`` are set by the server
    and should be left as None when creating a glossary. Exactly one of
    ``language_pair`` or ``language_codes_set`` describes the glossary kind.
    """

    name: str
    input_config: GlossaryInputConfig
    language_pair: Optional[LanguageCodePair] = None
    language_codes_set: Optional[LanguageCodesSet] = None
    entry_count: Optional[int] = None
    submit_time: Optional[str] = None
    end_time: Optional[str] = None

    @classmethod
    def for_language_pair(
        cls,
        name: str,
        input_uri: str,
        source_language_code: str,
        target_language_code: str,
    ) -> Glossary:
        """Build a unidirectional glossary ready to be created."""
        return cls(
            name=name,
            input_config=GlossaryInputConfig(gcs_source=GcsSource(input_uri=input_uri)),
            language_pair=LanguageCodePair(
                source_language_code=source_language_code,
                target_language_code=target_language_code,
            ),
        )

    @classmethod
    def for_language_codes(
        cls,
        name: str,
        input_uri: str,
        language_codes: list[str],
    ) -> Glossary:
        """Build an equivalent-term-sets glossary ready to be created."""
        return cls(
            name=name,
            input_config=GlossaryInputConfig(gcs_source=GcsSource(input_uri=input_uri)),
            language_codes_set=LanguageCodesSet(language_codes=list(language_codes)),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to wire dictionary."""
        return _compact(
            {
                "name": self.name,
                "inputConfig": self.input_config.to_dict(),
                # int64 is carried as a string on the wire
                "entryCount": (
                    str(self.entry_count) if self.entry_count is not None else None
                ),
                "submitTime": self.submit_time,
                "endTime": self.end_time,
                "languagePair": self.language_pair.to_dict() if self.language_pair else None,
                "languageCodesSet": (
                    self.language_codes_set.to_dict() if self.language_codes_set else None
                ),
            }
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Glossary:
        """Create from wire dictionary."""
        language_pair = data.get("languagePair")
        language_codes_set = data.get("languageCodesSet")
        return cls(
            name=data["name"],
            input_config=GlossaryInputConfig.from_dict(data["inputConfig"]),
            language_pair=(
                LanguageCodePair.from_dict(language_pair)
                if language_pair is not None
                else None
            ),
            language_codes_set=(
                LanguageCodesSet.from_dict(language_codes_set)
                if language_codes_set is not None
                else None
            ),
            entry_count=_optional_int(data.get("entryCount")),
            submit_time=data.get("submitTime"),
            end_time=data.get("endTime"),
        )


@dataclass
class ListGlossariesParams:
    """Query parameters for ``glossaries.list``."""

    page_size: Optional[int] = None
    page_token: Optional[str] = None
    filter: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to wire dictionary."""
        return _compact(
            {
                "pageSize": self.page_size,
                "pageToken": self.page_token,
                "filter": self.filter,
            }
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ListGlossariesParams:
        """Create from wire dictionary."""
        return cls(
            page_size=_optional_int(data.get("pageSize")),
            page_token=data.get("pageToken"),
            filter=data.get("filter"),
        )


@dataclass
class ListGlossariesResponse:
    """One page of glossaries."""

    glossaries: list[Glossary] = field(default_factory=list)
    next_page_token: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to wire dictionary."""
        return _compact(
            {
                "glossaries": [g.to_dict() for g in self.glossaries],
                "nextPageToken": self.next_page_token,
            }
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ListGlossariesResponse:
        """Create from wire dictionary."""
        return cls(
            glossaries=[Glossary.from_dict(g) for g in data.get("glossaries", [])],
            next_page_token=data.get("nextPageToken") or None,
        )
