"""Shared test fixtures."""

from pathlib import Path

import pytest

from playersearch.reader import read_players


ROSTER_ROWS = [
    ('ID', 'First Name', 'Last Name', 'Name'),
    ('1', 'Théo', 'Dupont', ''),
    ('2', 'Theo', 'Martin', ''),
    ('3', 'Téo', 'Durand', ''),
    ('4', 'Jean', 'Dupont', ''),
    ('5', 'Léa', 'Petit', ''),
    ('F1', '', '', 'Retard entraînement'),
]


def write_roster(path: Path, rows, encoding: str = 'utf-8') -> Path:
    """Write rows as a tab-separated roster file."""
    content = ''.join('\t'.join(row) + '\n' for row in rows)
    if encoding == 'utf-16-le':
        path.write_bytes(b'\xff\xfe' + content.encode('utf-16-le'))
    else:
        path.write_text(content, encoding=encoding)
    return path


@pytest.fixture(scope='session')
def roster_file(tmp_path_factory) -> Path:
    """Path to a small roster CSV with accented homonyms."""
    path = tmp_path_factory.mktemp('data') / 'roster.csv'
    return write_roster(path, ROSTER_ROWS)


@pytest.fixture(scope='session')
def roster_players(roster_file):
    """All entries from the roster fixture."""
    return read_players(roster_file)
