"""player-search – CLI-Tool zur unscharfen Namenssuche im Spielerkader."""

import argparse
import logging
import sys
from pathlib import Path

from playersearch import Player, SearchReport
from playersearch.matching import filter_players
from playersearch.naming import join_names, short_display_name
from playersearch.reader import read_players
from playersearch.reporter import print_summary, write_csv_report, write_html_report

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        description='Unscharfe Namenssuche in einer Kader-CSV.',
        prog='search.py',
    )
    parser.add_argument(
        '--roster', required=True, type=Path,
        help='Pfad zur Kader-CSV-Datei (tab-getrennt)',
    )
    parser.add_argument(
        '--query', default='',
        help='Suchbegriff (leer = alle Spieler)',
    )
    parser.add_argument(
        '--exact', action='store_true',
        help='Nur exakte Teilstring-Suche, ohne Levenshtein-Fallback',
    )
    parser.add_argument(
        '--output', type=Path,
        help='Pfad fuer die Report-Ausgabe (CSV)',
    )
    parser.add_argument(
        '--html', action='store_true',
        help='Zusaetzlich einen HTML-Report erzeugen',
    )
    parser.add_argument(
        '--summary', action='store_true',
        help='Zusammenfassung auf stdout ausgeben',
    )
    parser.add_argument(
        '--short-names', action='store_true',
        help='Treffer als Ansage mit eindeutigen Kurznamen ausgeben (A, B et C)',
    )
    parser.add_argument(
        '--verbose', action='store_true',
        help='Debug-Ausgaben aktivieren',
    )
    return parser


def run_search(
    roster_path: Path,
    query: str,
    use_fuzzy_fallback: bool = True,
) -> tuple[list[Player], SearchReport]:
    """Read a roster and filter it with a query.

    Returns:
        The full roster and the search report.
    """
    players = read_players(roster_path)
    matches = filter_players(players, query, use_fuzzy_fallback)
    report = SearchReport(
        query=query,
        use_fuzzy_fallback=use_fuzzy_fallback,
        total=len(players),
        matches=matches,
    )
    return players, report


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(levelname)s: %(message)s',
    )

    if args.html and not args.output:
        parser.error('--output ist erforderlich bei Verwendung von --html.')

    try:
        players, report = run_search(args.roster, args.query, not args.exact)
    except (OSError, ValueError) as exc:
        log.error("Kader konnte nicht gelesen werden: %s", exc)
        return 1

    if args.output:
        write_csv_report(report, args.output)
        if args.html:
            write_html_report(report, args.output.with_suffix('.html'))

    if args.summary:
        print_summary(report)

    if args.short_names:
        if report.matches:
            print(join_names(
                [short_display_name(p, players) for p in report.matches]
            ))
    elif not args.output and not args.summary:
        for player in report.matches:
            print(player.display_name)

    return 0


if __name__ == '__main__':
    sys.exit(main())
