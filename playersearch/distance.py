"""Levenshtein edit distance."""


def edit_distance(a: str, b: str) -> int:
    """Compute the Levenshtein distance between two strings.

    Counts the minimum number of single-character insertions, deletions
    and substitutions turning ``a`` into ``b``. Characters are compared
    case-insensitively. Uses the full dynamic-programming table, which is
    fine for name tokens.

    Args:
        a: First string.
        b: Second string.

    Returns:
        Non-negative edit distance.
    """
    table = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i in range(len(a) + 1):
        table[i][0] = i
    for j in range(len(b) + 1):
        table[0][j] = j

    for i in range(1, len(a) + 1):
        ch_a = a[i - 1].lower()
        for j in range(1, len(b) + 1):
            cost = 0 if ch_a == b[j - 1].lower() else 1
            table[i][j] = min(
                table[i - 1][j] + 1,         # deletion
                table[i][j - 1] + 1,         # insertion
                table[i - 1][j - 1] + cost,  # substitution
            )

    return table[len(a)][len(b)]
