"""Levenshtein edit distance.

Two entry points:

- ``levenshtein`` computes the exact distance with the classic dynamic
  programming grid.
- ``bounded_levenshtein`` computes the same distance but gives up as soon as
  the result provably cannot fall below a bound, which lets the matcher skip
  candidates that cannot beat the current winner.
"""


def levenshtein(a: str, b: str) -> int:
    """Minimum number of single-character insertions, deletions and
    substitutions needed to turn ``a`` into ``b``.

    Args:
        a: First string.
        b: Second string.

    Returns:
        Non-negative edit distance.
    """
    if not a:
        return len(b)
    if not b:
        return len(a)

    # matrix[i][j] is the distance between b[:i] and a[:j]
    matrix = [[i] + [0] * len(a) for i in range(len(b) + 1)]
    matrix[0] = list(range(len(a) + 1))

    for i in range(1, len(b) + 1):
        for j in range(1, len(a) + 1):
            if b[i - 1] == a[j - 1]:
                matrix[i][j] = matrix[i - 1][j - 1]
            else:
                matrix[i][j] = 1 + min(
                    matrix[i - 1][j - 1],  # substitution
                    matrix[i][j - 1],  # insertion
                    matrix[i - 1][j],  # deletion
                )

    return matrix[len(b)][len(a)]


def bounded_levenshtein(a: str, b: str, bound: float) -> int | None:
    """Edit distance between ``a`` and ``b`` if it is strictly below ``bound``.

    The smallest value in a grid row never decreases from one row to the
    next, so once it reaches ``bound`` the final distance cannot be below it
    and the remaining rows are skipped.

    Args:
        a: First string.
        b: Second string.
        bound: Exclusive upper bound on the distance of interest.

    Returns:
        The distance, or None if it is greater than or equal to ``bound``.
    """
    if bound <= 0:
        return None
    if abs(len(a) - len(b)) >= bound:
        return None
    if not a or not b:
        distance = len(a) or len(b)
        return distance if distance < bound else None

    previous = list(range(len(a) + 1))
    for i in range(1, len(b) + 1):
        current = [i] + [0] * len(a)
        for j in range(1, len(a) + 1):
            if b[i - 1] == a[j - 1]:
                current[j] = previous[j - 1]
            else:
                current[j] = 1 + min(previous[j - 1], current[j - 1], previous[j])
        if min(current) >= bound:
            return None
        previous = current

    distance = previous[len(a)]
    return distance if distance < bound else None
