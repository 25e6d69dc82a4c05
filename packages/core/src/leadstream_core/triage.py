"""Core comment triage orchestration."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Mapping, Sequence

from leadstream_core.classifiers.base import BaseClassifier
from leadstream_core.classifiers.fixed import FixedAnswerClassifier
from leadstream_core.classifiers.keyword import KeywordClassifier
from leadstream_core.config import DEFAULT_REPLY_TEMPLATE, DEFAULT_TRIGGER_WORDS, load_lead_criteria
from leadstream_core.errors import ConfigurationError
from leadstream_core.models import ClassificationResult, SourceMode, TriagedComment
from leadstream_core.sources.base import BaseSource
from leadstream_core.sources.fixture import FixtureSource, fixture_answers
from leadstream_core.sources.youtube import DEFAULT_PAGE_SIZE, YouTubeSource

logger = logging.getLogger(__name__)


@dataclass
class TriageSummary:
    """Headline numbers for one batch, for the presentation layer."""

    mode: str
    total: int
    leads: int
    triaged_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())


def resolve_mode(config: dict) -> SourceMode:
    mode = config.get("mode") or SourceMode.FIXTURE.value
    try:
        return SourceMode(mode)
    except ValueError:
        raise ValueError(f"Unknown mode: {mode!r}. Choose 'fixture' or 'remote'.")


def build_source(mode: SourceMode, config: dict, session=None) -> BaseSource:
    if mode is SourceMode.FIXTURE:
        return FixtureSource(delay=float(config.get("fixture_delay") or 0.0))
    return YouTubeSource(
        api_key=config.get("youtube_api_key"),
        channel_id=config.get("channel_id"),
        page_size=int(config.get("page_size") or DEFAULT_PAGE_SIZE),
        timeout=float(config.get("request_timeout") or 10.0),
        session=session,
    )


def build_classifier(
    mode: SourceMode,
    config: dict,
    answers: Mapping[str, ClassificationResult] | None = None,
) -> BaseClassifier:
    """Pick the classifier strategy for mode.

    An unknown classifier name, a missing lead criteria file or a missing
    provider SDK raise ConfigurationError.
    """
    if mode is SourceMode.FIXTURE:
        return FixedAnswerClassifier(answers if answers is not None else fixture_answers())

    name = config.get("classifier") or "keyword"
    try:
        return _build_remote_classifier(name, config)
    except (ImportError, FileNotFoundError) as e:
        raise ConfigurationError(f"Cannot set up the {name!r} classifier: {e}") from e


def _build_remote_classifier(name: str, config: dict) -> BaseClassifier:
    if name == "keyword":
        return KeywordClassifier(
            api_key=config.get("classifier_api_key"),
            trigger_words=config.get("trigger_words") or DEFAULT_TRIGGER_WORDS,
            reply_template=config.get("reply_template") or DEFAULT_REPLY_TEMPLATE,
        )
    if name == "anthropic":
        from leadstream_core.classifiers.anthropic import AnthropicClassifier

        return AnthropicClassifier(config.get("anthropic_api_key"), load_lead_criteria(config))
    if name == "openai":
        from leadstream_core.classifiers.openai import OpenAIClassifier

        return OpenAIClassifier(config.get("openai_api_key"), load_lead_criteria(config))
    raise ConfigurationError(f"Unknown classifier: {name!r}. Choose 'keyword', 'anthropic' or 'openai'.")


async def run_triage(
    mode: SourceMode,
    config: dict,
    *,
    source: BaseSource | None = None,
    classifier: BaseClassifier | None = None,
) -> list[TriagedComment]:
    """Fetch one batch of comments and classify every comment in it.

    The classifier is set up before anything is fetched. ConfigurationError and
    SourceFetchError propagate and no batch is returned. Classification runs
    concurrently, one in-flight call per comment, and the results are joined in
    source order. Classifiers never raise, so one bad comment cannot abort the
    batch. Each record starts with the source's initial status for its id.
    """
    classifier = classifier or build_classifier(mode, config)
    source = source or build_source(mode, config)
    raw_comments = await source.fetch_batch()

    results = await asyncio.gather(*(classifier.classify(raw.text) for raw in raw_comments))

    batch = [
        TriagedComment.from_parts(raw, result, source.initial_status(raw.external_id))
        for raw, result in zip(raw_comments, results)
    ]
    for comment in batch:
        logger.debug(
            "%s by %s: %s", comment.external_id, comment.author_name, "lead" if comment.is_lead else "general"
        )
    logger.info(
        "Triaged %d comments (%d leads) in %s mode",
        len(batch),
        sum(1 for c in batch if c.is_lead),
        mode.value,
    )
    return batch


def summarize(mode: SourceMode, batch: Sequence[TriagedComment]) -> TriageSummary:
    return TriageSummary(mode=mode.value, total=len(batch), leads=sum(1 for c in batch if c.is_lead))
