"""Roster CSV reader with automatic encoding detection and field normalization."""

import csv
import io
import logging
import re
from pathlib import Path

from playersearch import Player

log = logging.getLogger(__name__)

# Matches any sequence of whitespace (including Unicode whitespace like U+2006)
_WHITESPACE_RE = re.compile(r'\s+')

REQUIRED_COLUMNS = {'ID', 'First Name', 'Last Name'}


def detect_encoding(path: Path) -> str:
    """Detect file encoding by checking for BOM bytes.

    Args:
        path: Path to the CSV file.

    Returns:
        Encoding string suitable for open().
    """
    with open(path, 'rb') as f:
        bom = f.read(2)
    if bom == b'\xff\xfe':
        return 'utf-16-le'
    return 'utf-8-sig'


def normalize_whitespace(value: str) -> str:
    """Collapse whitespace runs into a single space and strip the ends."""
    return _WHITESPACE_RE.sub(' ', value).strip()


def read_players(path: str | Path) -> list[Player]:
    """Read roster entries from a tab-separated CSV file.

    Handles UTF-16LE (with BOM) and UTF-8 encoded files automatically.
    Fields are trimmed and whitespace-normalized. The optional ``Name``
    column overrides the displayed label. Rows without a name, without an
    ID or repeating an earlier ID are skipped with a warning.

    Args:
        path: Path to the CSV file.

    Returns:
        List of Player objects, in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is empty or required columns are missing.
    """
    path = Path(path)
    encoding = detect_encoding(path)

    with open(path, 'r', encoding=encoding) as f:
        content = f.read()

    # Strip BOM if present
    content = content.lstrip('\ufeff')

    reader = csv.DictReader(io.StringIO(content), delimiter='\t')

    if reader.fieldnames is None:
        raise ValueError(f"Datei {path} ist leer oder hat keine Header-Zeile.")
    actual_cols = {normalize_whitespace(c) for c in reader.fieldnames}
    missing = REQUIRED_COLUMNS - actual_cols
    if missing:
        raise ValueError(
            f"Fehlende Spalten in {path}: {', '.join(sorted(missing))}"
        )

    players: list[Player] = []
    seen_ids: set[str] = set()
    for row_num, row in enumerate(reader, start=2):
        # Short rows yield None values; extra cells land under the None key
        cleaned = {normalize_whitespace(k): normalize_whitespace(v or '')
                   for k, v in row.items() if k is not None}
        player = Player(
            player_id=cleaned.get('ID', ''),
            first_name=cleaned.get('First Name', ''),
            last_name=cleaned.get('Last Name', ''),
            name=cleaned.get('Name', ''),
        )
        if not (player.first_name or player.last_name or player.name):
            log.warning("Zeile %d in %s uebersprungen: kein Name", row_num, path)
            continue
        if not player.player_id:
            log.warning("Zeile %d in %s uebersprungen: keine ID", row_num, path)
            continue
        if player.player_id in seen_ids:
            log.warning(
                "Zeile %d in %s uebersprungen: doppelte ID %s",
                row_num, path, player.player_id,
            )
            continue
        seen_ids.add(player.player_id)
        players.append(player)

    log.info("%d Spieler gelesen aus %s", len(players), path)
    return players
