import argparse
import asyncio
import sys
from pathlib import Path

import httpx

from intake.batch.exceptions import BatchFailed, NoFilesSubmitted, RateLimitExceeded
from intake.batch.messages import batch_summary, translate
from intake.batch.models import BatchOutcome, FileState, ProgressEvent
from intake.batch.orchestrator import BatchOrchestrator
from intake.batch.rate_limiter import RateLimiter
from intake.config.settings import Settings
from intake.logging.logger import Log
from intake.processor.exceptions import FileReadError
from intake.processor.file_loader import FileLoader
from intake.processor.models import CandidateFile
from intake.processor.processor import build_processor
from intake.validation.exceptions import SubmissionRejected
from intake.validation.models import SubmitterInfo


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="intake",
        description="Validate, normalize, store and deliver invoice documents.",
    )
    parser.add_argument("files", nargs="*", type=Path, help="Invoice files (PDF, JPG, PNG)")
    parser.add_argument("--full-name", default=None, help="Submitter full name")
    parser.add_argument("--email", default=None, help="Submitter email")
    parser.add_argument("--description", default="", help="Optional description")
    parser.add_argument("--lang", default=None, choices=["es", "en"], help="Message language")
    return parser


def print_progress(event: ProgressEvent) -> None:
    if event.state.is_terminal:
        marker = "ok" if event.state is FileState.SUCCEEDED else "failed"
        print(f"[{event.completed}/{event.total}] {event.file_name}: {marker}")
    else:
        print(f"[{event.completed}/{event.total}] {event.file_name}: {event.state.value}...")


def print_report(outcome: BatchOutcome, lang: str) -> None:
    for result in outcome.results:
        if result.success:
            print(f"  {result.file_name}: {result.artifact_id}")
        else:
            print(f"  {result.file_name}: {result.error_message}")
    print(batch_summary(outcome, lang))


def load_files(paths: list[Path]) -> list[CandidateFile]:
    loader = FileLoader()
    return [loader.load(path) for path in paths]


def build_http_client() -> httpx.AsyncClient:
    """Shared client without client-side timeouts.

    Delivery attempts are bounded by their own watchdog; uploads and signing
    are bounded only by the transport.
    """
    return httpx.AsyncClient(timeout=None)


async def run(args: argparse.Namespace, settings: Settings) -> int:
    lang = args.lang or settings.language
    submitter = None
    if args.full_name is not None or args.email is not None:
        submitter = SubmitterInfo(
            full_name=args.full_name or "",
            email=args.email or "",
            description=args.description,
        )

    try:
        files = load_files(args.files)
    except FileReadError as exc:
        Log.error(str(exc))
        return 2

    async with build_http_client() as client:
        try:
            processor = build_processor(settings, client)
        except ValueError as exc:
            Log.error(f"Invalid configuration: {exc}")
            return 2
        orchestrator = BatchOrchestrator(
            processor=processor,
            rate_limiter=RateLimiter(settings.rate_limit_per_minute),
            inter_file_pause_seconds=settings.inter_file_pause_seconds,
            language=lang,
        )
        try:
            outcome = await orchestrator.submit(files, submitter, on_progress=print_progress)
        except NoFilesSubmitted:
            print(translate("file-required", lang))
            return 2
        except SubmissionRejected as exc:
            for error in exc.errors:
                print(f"{error.field.value}: {translate(error.message_key, lang)}")
            return 2
        except RateLimitExceeded as exc:
            print(translate("too-many-attempts", lang, seconds=exc.retry_after_seconds))
            return 3
        except BatchFailed as exc:
            print_report(exc.outcome, lang)
            categories = {r.error_category for r in exc.outcome.results if r.error_category}
            if len(categories) == 1:
                print(translate(categories.pop(), lang))
            return 1

    print_report(outcome, lang)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point: settings -> logging -> orchestrator -> submit files."""
    args = build_parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)
    return asyncio.run(run(args, settings))


if __name__ == "__main__":
    sys.exit(main())
