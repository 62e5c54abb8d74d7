"""
TicketTrack - Support Quality Surveys

CLI entry point for submitting surveys and running admin reports.
"""

import argparse
import asyncio
import json
import logging
import sys

from tickettrack.insights.export import export_csv
from tickettrack.insights.metrics import compute_metrics, filter_records, recent_entries
from tickettrack.insights.summarizer import SurveySummarizer
from tickettrack.intake import SurveyIntake, ValidationError
from tickettrack.models.survey import SurveyDraft
from tickettrack.store import create_store, StoreError, UnsupportedOperationError
from tickettrack.utils.admin import AdminGate
import config.settings as settings

logger = logging.getLogger(__name__)


def setup_logging(log_level: str = "INFO"):
    """Configure logging for the entire application."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=settings.LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(settings.LOG_FILE)
        ]
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="TicketTrack - Support Quality Surveys",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Rate ticket 1001
  python main.py submit --ticket 1001 --customer joao@empresa.com \\
                        --ease 4 --process 5 --solution 5

  # Dashboard numbers and AI summary
  python main.py metrics
  python main.py analyze

  # Export the low-rated surveys
  python main.py export --max-rating 2.5 --output output/low.csv

Note: Set GOOGLE_API_KEY before running analyze and
ADMIN_PASSWORD before running delete, clear or reset.
        """
    )

    parser.add_argument(
        "--backend",
        default=settings.STORE_BACKEND,
        choices=["local", "remote"],
        help=f"Store backend (default: {settings.STORE_BACKEND})"
    )
    parser.add_argument(
        "--store-path",
        default=settings.LOCAL_STORE_PATH,
        help="JSON file for the local backend"
    )
    parser.add_argument(
        "--api-url",
        default=settings.REMOTE_API_URL,
        help="Collection URL for the remote backend"
    )
    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {settings.LOG_LEVEL})"
    )

    commands = parser.add_subparsers(dest="command", required=True)

    submit = commands.add_parser("submit", help="Submit a survey for a ticket")
    submit.add_argument("--ticket", required=True, help="Ticket number (digits only)")
    submit.add_argument("--customer", required=True, help="Customer email or name")
    submit.add_argument("--ease", type=int, required=True, help="Ease of opening (1-5)")
    submit.add_argument("--process", type=int, required=True, help="Routing and scheduling (1-5)")
    submit.add_argument("--solution", type=int, required=True, help="Technical resolution (1-5)")
    submit.add_argument("--comment", default="", help="Optional comment")

    for name, help_text in (("list", "List survey records"), ("export", "Export records as CSV")):
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("--search", help="Filter by ticket, customer or comment text")
        sub.add_argument("--min-rating", type=float, help="Minimum average rating")
        sub.add_argument("--max-rating", type=float, help="Maximum average rating")
        if name == "export":
            sub.add_argument("--output", required=True, help="CSV file to write")

    check = commands.add_parser("check", help="Check whether a ticket was already rated")
    check.add_argument("ticket", help="Ticket number")

    delete = commands.add_parser("delete", help="Delete one record by id")
    delete.add_argument("record_id", help="Record id")
    delete.add_argument("--password", required=True, help="Admin password")

    for name, help_text in (("clear", "Delete every record"), ("reset", "Restore the sample seed data")):
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("--password", required=True, help="Admin password")

    commands.add_parser("metrics", help="Show dashboard metrics and recent entries")
    commands.add_parser("analyze", help="Generate an AI summary of recent surveys")

    return parser


async def run_command(args: argparse.Namespace) -> int:
    """Execute one CLI command. Returns the process exit code."""
    store = create_store(
        backend=args.backend,
        local_path=args.store_path,
        api_url=args.api_url,
        clear_path=settings.REMOTE_CLEAR_PATH,
        timeout_seconds=settings.REMOTE_TIMEOUT_SECONDS,
        latency_seconds=settings.STORE_LATENCY_SECONDS
    )
    gate = AdminGate(settings.ADMIN_PASSWORD)

    if args.command == "submit":
        draft = SurveyDraft(
            ticket_id=args.ticket,
            customer_id=args.customer,
            ease_rating=args.ease,
            process_rating=args.process,
            solution_rating=args.solution,
            comment=args.comment
        )
        record = await SurveyIntake(store).submit(draft)
        print(f"✅ Survey saved for ticket {record.ticket_id} (id: {record.id})")
        return 0

    if args.command == "check":
        exists = await store.exists_by_ticket_id(args.ticket)
        print(f"Ticket {args.ticket.strip()}: {'already rated' if exists else 'not rated yet'}")
        return 0

    if args.command in ("list", "export"):
        records = filter_records(
            await store.list_all(),
            search=args.search,
            min_rating=args.min_rating,
            max_rating=args.max_rating
        )
        if args.command == "export":
            export_csv(records, path=args.output)
            print(f"Exported {len(records)} records to {args.output}")
            return 0

        for r in records:
            print(
                f"{r.id}  #{r.ticket_id:<8} {r.customer_id:<28} "
                f"{r.ease_rating}/{r.process_rating}/{r.solution_rating}  {r.timestamp}  {r.comment}"
            )
        print(f"{len(records)} records")
        return 0

    if args.command == "delete":
        gate.require(args.password, "delete")
        removed = await store.remove_by_id(args.record_id)
        if not removed:
            print(f"No record with id {args.record_id}")
            return 1
        print(f"Deleted record {args.record_id}")
        return 0

    if args.command == "clear":
        gate.require(args.password, "clear")
        if not store.supports_clear:
            print(f"Clearing is not configured for the {store.backend_name} backend")
            return 1
        await store.clear_all()
        print("All records deleted")
        return 0

    if args.command == "reset":
        gate.require(args.password, "reset")
        records = await store.reset_to_seed()
        print(f"Store reset to {len(records)} sample records")
        return 0

    if args.command == "metrics":
        records = await store.list_all()
        metrics = compute_metrics(records, trend_window=settings.TREND_WINDOW)
        print(json.dumps(metrics.to_dict(), indent=2))
        print()
        print("Recent entries:")
        for r in recent_entries(records, limit=settings.RECENT_ENTRIES_LIMIT):
            print(f"  #{r.ticket_id} {r.customer_id}: {r.comment or '-'}")
        return 0

    if args.command == "analyze":
        if not settings.GOOGLE_API_KEY:
            logger.error("GOOGLE_API_KEY environment variable not set.")
            return 1
        summarizer = SurveySummarizer(
            api_key=settings.GOOGLE_API_KEY,
            model_name=settings.SUMMARY_MODEL,
            temperature=settings.LLM_TEMPERATURE,
            window=settings.SUMMARY_WINDOW,
            max_attempts=settings.SUMMARY_MAX_ATTEMPTS
        )
        result = await summarizer.analyze(await store.list_all())
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return 0

    raise ValueError(f"Unknown command: {args.command}")


def main():
    """Main CLI entry point."""
    args = build_parser().parse_args()
    setup_logging(args.log_level)

    try:
        exit_code = asyncio.run(run_command(args))

    except ValidationError as e:
        print(f"❌ Invalid submission ({e.field}): {e}")
        exit_code = 1

    except UnsupportedOperationError as e:
        print(f"❌ Not configured: {e}")
        exit_code = 1

    except StoreError as e:
        logger.error(f"Store operation failed: {e}")
        print(f"❌ Store error: {e}")
        exit_code = 1

    except PermissionError as e:
        print(f"❌ {e}")
        exit_code = 1

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        exit_code = 1

    except Exception as e:
        logger.error(f"Command failed: {e}", exc_info=True)
        print(f"\n❌ Command failed: {e}")
        print(f"Check {settings.LOG_FILE} for details")
        exit_code = 1

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
