# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Slack-Summary-Bot contributors

"""Slack Summary Bot: summarize channels, threads and messages on request."""

import json
import sys
import time
from contextlib import asynccontextmanager

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import PlainTextResponse
from slack_bolt import App
from slack_bolt.adapter.fastapi import SlackRequestHandler

from summarybot_config import TypedConfig, load_typed_config, validate_startup
from summarybot_error_reporting import ErrorReporter, create_error_reporter
from summarybot_errors import SummaryBotError
from summarybot_logging import create_logger, create_uvicorn_log_config
from summarybot_slack import MessageSource, SlackMessageSource
from summarybot_summarization import Summarizer, SummarizerFactory

from summary_bot.app import __version__
from summary_bot.app.background import BackgroundRunner
from summary_bot.app.dispatcher import TriggerDispatcher
from summary_bot.app.notices import describe_error
from summary_bot.app.service import SummaryService

SERVICE_NAME = "summary-bot"
ROOT_MESSAGE = "Slack Summary Bot is running!"
DIAGNOSTIC_MESSAGES = [
    "Alice: Can we ship the release on Friday?",
    "Bob: Yes, once the changelog is updated.",
    "Alice: I'll ask support to prepare the announcement.",
]

# Configure structured JSON logging
logger = create_logger(name=SERVICE_NAME)

# Global state, populated by initialize()
bot_config: TypedConfig | None = None
summarizer: Summarizer | None = None
summary_service: SummaryService | None = None
background_runner: BackgroundRunner | None = None
slack_handler: SlackRequestHandler | None = None


@asynccontextmanager
async def lifespan(_app: FastAPI):
    yield
    if background_runner is not None:
        background_runner.shutdown(wait=True)


# Create FastAPI app
app = FastAPI(title="Slack Summary Bot", version=__version__, lifespan=lifespan)


@app.middleware("http")
async def log_request_timing(request: Request, call_next):
    start_time = time.monotonic()
    response = await call_next(request)
    logger.info(
        "HTTP request",
        method=request.method,
        path=request.url.path,
        status=response.status_code,
        duration_ms=int((time.monotonic() - start_time) * 1000),
    )
    return response


def extract_challenge(body: bytes, content_type: str | None) -> str | None:
    """Return the ``challenge`` of a ``url_verification`` request, else None."""
    if not body or "application/json" not in (content_type or ""):
        return None
    try:
        payload = json.loads(body)
    except (ValueError, UnicodeDecodeError):
        return None
    if isinstance(payload, dict) and payload.get("type") == "url_verification":
        challenge = payload.get("challenge")
        return str(challenge) if challenge is not None else ""
    return None


@app.get("/", response_class=PlainTextResponse)
def root():
    return ROOT_MESSAGE


@app.get("/health")
def health():
    """Health check endpoint."""
    stats = summary_service.get_stats() if summary_service is not None else {}

    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": __version__,
        "slack_enabled": slack_handler is not None,
        "summaries_posted": stats.get("summaries_posted", 0),
        "summary_failures": stats.get("summary_failures", 0),
        "last_processing_time_seconds": stats.get("last_processing_time_seconds", 0),
    }


@app.get("/stats")
def get_stats():
    """Get service and background runner statistics."""
    if summary_service is None or background_runner is None:
        raise HTTPException(status_code=503, detail="Service not initialized")

    stats = dict(summary_service.get_stats())
    stats["background"] = background_runner.get_stats()
    return stats


@app.get("/diagnostics/summarizer")
def diagnose_summarizer():
    """Run the configured summarizer on canned messages."""
    if bot_config is None or not bot_config.diagnostics_enabled:
        raise HTTPException(status_code=404, detail="Not Found")
    if summarizer is None:
        raise HTTPException(status_code=503, detail="Summarizer not configured")

    try:
        result = summarizer.summarize(DIAGNOSTIC_MESSAGES)
    except SummaryBotError as e:
        logger.error("Summarizer diagnostic failed", error_type=type(e).__name__, error=str(e))
        raise HTTPException(status_code=502, detail=describe_error(e))

    return {
        "status": "ok",
        "backend": result.llm_backend,
        "model": result.llm_model,
        "topic": result.topic,
        "summary": result.summary,
        "action_items": list(result.action_items),
        "latency_ms": result.latency_ms,
    }


@app.post("/")
@app.post("/slack/events")
async def slack_events(request: Request):
    """Slack webhook endpoint for commands and shortcuts."""
    body = await request.body()
    challenge = extract_challenge(body, request.headers.get("content-type"))
    if challenge is not None:
        logger.info("Answered Slack URL verification")
        return PlainTextResponse(challenge)

    if slack_handler is None:
        raise HTTPException(status_code=503, detail="Slack app not initialized")
    return await slack_handler.handle(request)


def create_summarizer(config: TypedConfig) -> Summarizer | None:
    """Build the configured summarizer, or None if its API key is missing."""
    if config.llm_backend == "openai" and not config.openai_api_key:
        logger.warning("OPENAI_API_KEY is not set; summarizer disabled")
        return None
    return SummarizerFactory.create_summarizer(
        provider=config.llm_backend,
        model=config.llm_model,
        api_key=config.openai_api_key,
        temperature=config.llm_temperature,
    )


def initialize(
    config: TypedConfig,
    source: MessageSource | None = None,
    summarizer_override: Summarizer | None = None,
    error_reporter: ErrorReporter | None = None,
) -> bool:
    """Wire the bot from configuration.

    The Slack endpoint is enabled only when the bot token, signing secret
    and a summarizer are all available.

    Returns:
        True if the Slack endpoint was enabled
    """
    global logger, bot_config, summarizer, summary_service, background_runner, slack_handler

    logger = create_logger(logger_type=config.log_type, level=config.log_level, name=SERVICE_NAME)
    logger.info("Initializing Slack Summary Bot", config=config.redacted())

    bot_config = config
    summarizer = summarizer_override or create_summarizer(config)

    if not (config.slack_bot_token and config.slack_signing_secret) or summarizer is None:
        logger.warning("Slack endpoint disabled until credentials are configured")
        return False

    logger.info("Creating Slack app...")
    bolt_app = App(
        token=config.slack_bot_token,
        signing_secret=config.slack_signing_secret,
        process_before_response=True,
        token_verification_enabled=False,
    )

    logger.info("Creating error reporter...")
    error_reporter = error_reporter or create_error_reporter(config.error_reporter_type)

    source = source or SlackMessageSource(bolt_app.client)
    background_runner = BackgroundRunner(max_workers=config.background_workers, logger=logger)
    summary_service = SummaryService(
        source=source,
        summarizer=summarizer,
        default_channel=config.default_summary_channel,
    )

    dispatcher = TriggerDispatcher(
        service=summary_service,
        runner=background_runner,
        source=source,
        error_reporter=error_reporter,
        logger=logger,
        command_name=config.summary_command,
        shortcut_callback_id=config.summary_shortcut_id,
    )
    dispatcher.register(bolt_app)

    slack_handler = SlackRequestHandler(bolt_app)
    return True


def reset() -> None:
    """Shut down and clear global state."""
    global bot_config, summarizer, summary_service, background_runner, slack_handler

    if background_runner is not None:
        background_runner.shutdown(wait=True)
    bot_config = None
    summarizer = None
    summary_service = None
    background_runner = None
    slack_handler = None


def main():
    """Main entry point for the Slack Summary Bot."""
    load_dotenv()
    logger.info(f"Starting Slack Summary Bot (version {__version__})")

    try:
        # Load configuration from schema with typed access
        config = load_typed_config("summary_bot")
        validate_startup(config, logger)
        initialize(config)

        logger.info(f"Starting HTTP server on port {config.http_port}...")

        # Configure Uvicorn with structured JSON logging
        log_config = create_uvicorn_log_config(service_name=SERVICE_NAME, log_level=config.log_level)
        uvicorn.run(app, host="0.0.0.0", port=config.http_port, log_config=log_config)

    except Exception as e:
        logger.error(f"Failed to start Slack Summary Bot: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
