"""Edit-distance based string similarity."""

from pathlib import Path


def levenshtein_distance(first: str, second: str) -> int:
    """Minimum number of single-character edits turning ``first`` into ``second``.

    Insertions, deletions and substitutions each cost 1. The full
    ``(len(first) + 1) x (len(second) + 1)`` matrix is filled.
    """
    rows = len(first) + 1
    cols = len(second) + 1
    matrix = [[0] * cols for _ in range(rows)]

    for i in range(rows):
        matrix[i][0] = i
    for j in range(cols):
        matrix[0][j] = j

    for i in range(1, rows):
        for j in range(1, cols):
            if first[i - 1] == second[j - 1]:
                matrix[i][j] = matrix[i - 1][j - 1]
            else:
                matrix[i][j] = min(
                    matrix[i - 1][j] + 1,
                    matrix[i][j - 1] + 1,
                    matrix[i - 1][j - 1] + 1,
                )

    return matrix[rows - 1][cols - 1]


def similarity(first: str, second: str) -> float:
    """Similarity score in [0, 1], where 1 means identical strings.

    Computed as ``1 - distance / max_length``. Two empty strings are
    identical.
    """
    max_length = max(len(first), len(second))
    if max_length == 0:
        return 1.0
    return 1.0 - levenshtein_distance(first, second) / max_length


def is_name_too_similar(
    file_name: str, existing_files: list[Path], threshold: float = 0.9
) -> bool:
    """Check whether ``file_name`` nearly duplicates any existing file stem.

    Args:
        file_name: Stem of the file being considered
        existing_files: Files already collected
        threshold: Scores strictly above this count as duplicates

    Returns:
        True if some existing stem scores above the threshold
    """
    return any(
        similarity(file_name, existing.stem) > threshold
        for existing in existing_files
    )
