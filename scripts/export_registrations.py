#!/usr/bin/env python3
"""
Export the team-grouped registration report to a PDF file.

Uses the same settings (.env / environment) as the API server.

Examples:
    python scripts/export_registrations.py
    python scripts/export_registrations.py --event "Treasure Hunt" --output-dir exports/
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from api.settings import get_settings  # noqa: E402
from festadmin.errors import StoreError  # noqa: E402
from festadmin.logging_config import configure_logging, get_logger  # noqa: E402
from festadmin.report import build_report, render_pdf  # noqa: E402
from festadmin.repository import RegistrationRepository  # noqa: E402
from festadmin.store import StoreConnector  # noqa: E402

logger = get_logger(__name__)


def export(event: str | None, output_dir: Path) -> Path:
    """Fetch registrations, render the report and write it to output_dir.

    Raises:
        StoreError: If the store cannot be reached or queried
    """
    settings = get_settings()
    connector = StoreConnector(
        url=settings.pocketbase_url,
        collection=settings.registrations_collection,
        admin_email=settings.pocketbase_admin_email,
        admin_password=settings.pocketbase_admin_password,
    )
    repository = RegistrationRepository(connector)

    registrations = repository.list_by_event(event) if event else repository.list_all()
    report = build_report(registrations, event)

    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / report.filename
    path.write_bytes(render_pdf(report, subtitle=settings.fest_name))

    logger.info(f"Wrote {len(registrations)} registrations to {path}")
    return path


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Export fest registrations to a printable PDF report")
    parser.add_argument("--event", help="Exact event name to export (default: all events)")
    parser.add_argument("--output-dir", type=Path, default=Path("."), help="Directory for the PDF (default: .)")

    args = parser.parse_args()
    configure_logging(source="export")

    try:
        path = export(args.event, args.output_dir)
    except StoreError as e:
        logger.error(f"Export failed: {e}")
        sys.exit(1)

    print(path)


if __name__ == "__main__":
    main()
