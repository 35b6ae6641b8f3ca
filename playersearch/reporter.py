"""Report generation for search results (CSV, HTML, summary)."""

import csv
import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from playersearch import Player, SearchReport

log = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).resolve().parent / 'templates'

CSV_COLUMNS = [
    'ID',
    'First_Name',
    'Last_Name',
    'Display_Name',
]


def _player_to_row(player: Player) -> dict:
    """Convert a Player to a flat dict for CSV/HTML output."""
    return {
        'ID': player.player_id,
        'First_Name': player.first_name,
        'Last_Name': player.last_name,
        'Display_Name': player.display_name,
    }


def _mode(report: SearchReport) -> str:
    return 'fuzzy' if report.use_fuzzy_fallback else 'exakt'


def write_csv_report(report: SearchReport, output_path: Path) -> None:
    """Write the matching players as a CSV report.

    Uses UTF-8 with BOM (utf-8-sig) and semicolon delimiter for
    compatibility with German Excel.

    Args:
        report: Search result to write.
        output_path: Path for the output CSV file.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w', newline='', encoding='utf-8-sig') as f:
        writer = csv.DictWriter(f, fieldnames=CSV_COLUMNS, delimiter=';')
        writer.writeheader()
        for player in report.matches:
            writer.writerow(_player_to_row(player))

    log.info(
        "CSV-Report geschrieben: %s (%d Zeilen)",
        output_path, len(report.matches),
    )


def write_html_report(report: SearchReport, output_path: Path) -> None:
    """Write the matching players as an HTML report using Jinja2.

    Args:
        report: Search result to write.
        output_path: Path for the output HTML file.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    env = Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=True,
    )
    template = env.get_template('report.html')

    html = template.render(
        query=report.query,
        mode=_mode(report),
        total=report.total,
        rows=[_player_to_row(p) for p in report.matches],
        columns=CSV_COLUMNS,
    )

    output_path.write_text(html, encoding='utf-8')
    log.info("HTML-Report geschrieben: %s", output_path)


def print_summary(report: SearchReport) -> None:
    """Print a summary of the search result to stdout."""
    print(f"\n=== Suche: {report.query!r} ({_mode(report)}) ===")
    print(f"Spieler im Kader:          {report.total:>5}")
    print(f"Treffer:                   {len(report.matches):>5}")
    print("---")
    for player in report.matches:
        print(f"  - {player.display_name}")
    print()
