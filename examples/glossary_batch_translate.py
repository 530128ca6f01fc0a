#!/usr/bin/env python3
# SPDX-License-Identifier: Apache-2.0
"""Glossary and batch translation example.

Recreates a glossary from a TSV file in Cloud Storage, translates a short
text with it, then runs a batch translation and waits for it to finish.

Usage:
    cd examples
    python glossary_batch_translate.py

Environment variables (loaded from .env in the project root):
    PROJECT_ID: Cloud project id
    LOCATION_ID: Location (glossaries need a region such as us-central1)
    ACCESS_TOKEN: OAuth2 token, e.g. from `gcloud auth print-access-token`
    GLOSSARY_BUCKET_ID: Bucket holding test.tsv
"""

from __future__ import annotations

import asyncio
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Add src to the path for development checkouts
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

load_dotenv(PROJECT_ROOT / ".env")

from cloud_translator import (  # noqa: E402
    ClientConfig,
    ConfigurationError,
    OperationFailure,
    PollConfig,
    TranslationClient,
    glossary_path,
)
from cloud_translator.core.models import (  # noqa: E402
    BatchTranslateInputConfig,
    BatchTranslateOutputConfig,
    BatchTranslateTextRequest,
    GcsDestination,
    GcsSource,
    Glossary,
    MimeType,
    Operation,
    TranslateTextGlossaryConfig,
    TranslateTextRequest,
)

# =============================================================================
# Settings
# =============================================================================

GLOSSARY_ID = "test"
SOURCE_LANG = "en"
TARGET_LANG = "zh"

BATCH_INPUT_URI = "gs://mb_input/test.tsv"
BATCH_OUTPUT_PREFIX = "gs://mb_output/"

# Stop waiting for an operation after this many seconds
OPERATION_DEADLINE = 600.0


def report_progress(operation: Operation, attempt: int, elapsed: float) -> None:
    """Print a line per wait call."""
    print(f"  [{elapsed:6.1f}s] {operation.name} still running (wait #{attempt})")


async def main() -> None:
    """Run the example."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = ClientConfig.from_env()
    except ConfigurationError as e:
        print(f"Error: {e}")
        sys.exit(1)

    bucket = os.environ.get("GLOSSARY_BUCKET_ID")
    if not bucket:
        print("Error: GLOSSARY_BUCKET_ID environment variable is not set")
        sys.exit(1)

    poll_config = PollConfig(deadline=OPERATION_DEADLINE)
    name = glossary_path(config.project_id, config.location_id, GLOSSARY_ID)

    async with TranslationClient(config) as client:
        # Start from a clean glossary
        operation = await client.delete_glossary(name, missing_ok=True)
        if operation is not None:
            outcome = await client.wait_until_done(operation, poll_config, report_progress)
            if isinstance(outcome, OperationFailure):
                print(f"Error: glossary deletion failed: {outcome.status.message}")
                sys.exit(1)

        glossary = Glossary.for_language_pair(
            name, f"gs://{bucket}/test.tsv", SOURCE_LANG, TARGET_LANG
        )
        operation = await client.create_glossary(glossary)
        outcome = await client.wait_until_done(operation, poll_config, report_progress)
        if isinstance(outcome, OperationFailure):
            print(f"Error: glossary creation failed: {outcome.status.message}")
            sys.exit(1)

        glossary_config = TranslateTextGlossaryConfig(glossary=name, ignore_case=True)
        response = await client.translate_text(
            TranslateTextRequest(
                contents=["player"],
                source_language_code=SOURCE_LANG,
                target_language_code=TARGET_LANG,
                glossary_config=glossary_config,
            )
        )
        for translation in response.glossary_translations or response.translations:
            print(f"player -> {translation.translated_text}")

        request = BatchTranslateTextRequest(
            source_language_code=SOURCE_LANG,
            target_language_codes=[TARGET_LANG],
            input_configs=[
                BatchTranslateInputConfig(
                    gcs_source=GcsSource(input_uri=BATCH_INPUT_URI),
                    mime_type=MimeType.PLAIN,
                )
            ],
            output_config=BatchTranslateOutputConfig(
                gcs_destination=GcsDestination(output_uri_prefix=BATCH_OUTPUT_PREFIX)
            ),
            glossaries={TARGET_LANG: glossary_config},
        )
        operation = await client.batch_translate_text(request)
        outcome = await client.wait_until_done(operation, poll_config, report_progress)
        if isinstance(outcome, OperationFailure):
            print(f"Error: batch translation failed: {outcome.status.message}")
            sys.exit(1)
        print(f"Batch translation done: {outcome.response}")


if __name__ == "__main__":
    asyncio.run(main())
