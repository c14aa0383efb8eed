"""Command-line interface for EVPulse."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .core.config import settings
from .core.constants import LoggingConstants
from .core.models import DimensionFamily, ParseResult
from .core.scoring import family_labels
from .reporting.strategic_report import generate_strategic_report, report_to_markdown
from .services.document_store import DocumentStore
from .utils.data_prep import build_dashboard_payload, export_to_json
from .utils.ingestion import parse_dataset_file

logger = logging.getLogger(__name__)


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=LoggingConstants.LOG_FORMAT,
    )


def load_dataset(path: str) -> ParseResult:
    """Read a dataset file from disk and parse it."""
    content = Path(path).read_text(encoding="utf-8")
    return parse_dataset_file(content, Path(path).name)


def _ingest_or_report(path: str) -> Optional[ParseResult]:
    result = load_dataset(path)
    if not result.success:
        print(f"Ingestion failed: {result.error}")
        return None
    return result


def _store_rows(result: ParseResult) -> DocumentStore:
    store = DocumentStore()
    store.upload_batch(
        [row.text for row in result.rows],
        author="dataset",
        progress_callback=lambda done, total: logger.debug(f"Uploaded {done}/{total} documents"),
    )
    return store


def cmd_ingest(args) -> int:
    """Ingest command."""
    result = _ingest_or_report(args.file)
    if result is None:
        return 1

    print(f"Parsed {result.valid_count} rows from {args.file} ({result.skipped_count} skipped)")
    if result.diagnostics and result.diagnostics.recovery_applied_count:
        print(f"Recovered text from another column in {result.diagnostics.recovery_applied_count} rows")

    if result.rows:
        sample = result.rows[0]
        print("\nSample row:")
        print(f"Text: {sample.text[:100]}")
        print(f"Intention: {sample.intention_level.value} ({sample.intention_score}/100)")
    return 0


def cmd_analyze(args) -> int:
    """Analyze command."""
    result = _ingest_or_report(args.file)
    if result is None:
        return 1

    store = _store_rows(result)
    documents = store.get_all_documents()
    payload = build_dashboard_payload(documents, result.rows)

    if args.out:
        export_to_json(payload, args.out)
        print(f"Results exported to {args.out}")

    print(f"\nAnalysis Summary for {args.file}:")
    print(f"Documents: {len(documents)}")
    print(f"Average intention score: {payload['summary']['average_intention_score']}/100")

    print("\nEmotion distribution:")
    for emotion, count in payload["emotion_distribution"].items():
        print(f"  {emotion}: {count}")

    intention = payload["intention_distribution"]
    print(f"\nPurchase intention: high {intention['high']}, medium {intention['medium']}, low {intention['low']}")

    if payload["brand_mentions"]:
        print("\nTop brands:")
        for i, (brand, mentions) in enumerate(list(payload["brand_mentions"].items())[:5], 1):
            print(f"  {i}. {brand}: {mentions} mentions")

    print("\nUTAUT2 constructs:")
    labels = family_labels(DimensionFamily.UTAUT2)
    for label, row in zip(labels, payload["psycho_social_matrix"]["data"]):
        print(f"  {label}: {', '.join(str(value) for value in row)}")
    return 0


def cmd_report(args) -> int:
    """Report command."""
    result = _ingest_or_report(args.file)
    if result is None:
        return 1

    documents = _store_rows(result).get_all_documents()
    # every ingested row carries a provided or derived intention
    report = generate_strategic_report(documents, locale=args.locale, has_purchase_intention_data=bool(result.rows))
    markdown = report_to_markdown(report)

    if args.out:
        Path(args.out).write_text(markdown, encoding="utf-8")
        print(f"Report written to {args.out}")
    else:
        print(markdown)
    return 0


def cmd_ui(args) -> int:
    """UI command."""
    from .ui import run_streamlit_app

    return run_streamlit_app()


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(description="EVPulse - Electric Motorcycle Sentiment Analytics")
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Ingest command
    ingest_parser = subparsers.add_parser('ingest', help='Parse and validate a dataset file')
    ingest_parser.add_argument('file', help='CSV, JSON or TXT dataset')

    # Analyze command
    analyze_parser = subparsers.add_parser('analyze', help='Analyze a dataset file')
    analyze_parser.add_argument('file', help='CSV, JSON or TXT dataset')
    analyze_parser.add_argument('--out', help='Output JSON file')

    # Report command
    report_parser = subparsers.add_parser('report', help='Generate the strategic recommendation report')
    report_parser.add_argument('file', help='CSV, JSON or TXT dataset')
    report_parser.add_argument('--locale', choices=['en', 'id'], default=None,
                               help='Report language (defaults to settings)')
    report_parser.add_argument('--out', help='Output Markdown file')

    # UI command
    subparsers.add_parser('ui', help='Launch web UI')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    setup_logging()

    commands = {
        'ingest': cmd_ingest,
        'analyze': cmd_analyze,
        'report': cmd_report,
        'ui': cmd_ui,
    }

    try:
        exit_code = commands[args.command](args)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        return
    except Exception as e:
        logger.error(f"Command failed: {e}")
        sys.exit(1)

    if exit_code:
        sys.exit(exit_code)
