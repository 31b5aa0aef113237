import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence


_WHITESPACE_RE = re.compile(r"\s+")
_DASH_RE = re.compile("[\u2010-\u2015\u2212\u2e3a\u2e3b\ufe58\ufe63\uff0d]")

# Max distance between a missing and an extra entry that still pair up.
SUBSTITUTION_WINDOW = 3


class AlignmentStatus(str, Enum):
    MATCH = "match"
    SUBSTITUTION = "substitution"
    MISSING = "missing"
    EXTRA = "extra"


@dataclass(frozen=True)
class AlignmentEntry:
    typed: str
    original: str
    status: AlignmentStatus

    @property
    def is_error(self) -> bool:
        return self.status != AlignmentStatus.MATCH


def tokenize(text: str) -> List[str]:
    stripped = (text or "").strip()
    if not stripped:
        return []
    return [token for token in _WHITESPACE_RE.split(stripped) if token]


def normalize_word(word: str) -> str:
    return _DASH_RE.sub("-", word).lower()


def words_match(original: str, typed: str) -> bool:
    return normalize_word(original) == normalize_word(typed)


def build_lcs_table(original: Sequence[str], typed: Sequence[str]) -> List[List[int]]:
    """Fill the longest-common-subsequence table for two word sequences.

    ``dp[i][j]`` is the LCS length of ``original[:i]`` and ``typed[:j]``.
    Words are compared by their normalized form.
    """
    rows = len(original) + 1
    cols = len(typed) + 1
    norm_original = [normalize_word(word) for word in original]
    norm_typed = [normalize_word(word) for word in typed]
    dp = [[0] * cols for _ in range(rows)]

    for i in range(1, rows):
        for j in range(1, cols):
            if norm_original[i - 1] == norm_typed[j - 1]:
                dp[i][j] = dp[i - 1][j - 1] + 1
            else:
                dp[i][j] = max(dp[i - 1][j], dp[i][j - 1])
    return dp


def align_raw(original: Sequence[str], typed: Sequence[str]) -> List[AlignmentEntry]:
    """Backtrack the LCS table into match / extra / missing entries.

    On equal scores the typed side is consumed first, which puts the extra
    word after the missing one once the path is reversed.
    """
    dp = build_lcs_table(original, typed)
    i, j = len(original), len(typed)
    entries: List[AlignmentEntry] = []

    while i > 0 or j > 0:
        if i > 0 and j > 0 and words_match(original[i - 1], typed[j - 1]):
            entries.append(AlignmentEntry(typed[j - 1], original[i - 1], AlignmentStatus.MATCH))
            i -= 1
            j -= 1
        elif j > 0 and (i == 0 or dp[i][j - 1] >= dp[i - 1][j]):
            entries.append(AlignmentEntry(typed[j - 1], "", AlignmentStatus.EXTRA))
            j -= 1
        else:
            entries.append(AlignmentEntry("", original[i - 1], AlignmentStatus.MISSING))
            i -= 1

    entries.reverse()
    return entries


def pair_substitutions(raw: Sequence[AlignmentEntry]) -> List[AlignmentEntry]:
    """Merge nearby missing/extra entries into substitutions.

    Greedy: missing entries are visited left to right and each takes the
    closest unpaired extra within ``SUBSTITUTION_WINDOW`` positions. The first
    candidate seen wins on equal distance.
    """
    extra_indices = [idx for idx, entry in enumerate(raw) if entry.status == AlignmentStatus.EXTRA]
    missing_indices = [idx for idx, entry in enumerate(raw) if entry.status == AlignmentStatus.MISSING]

    slots: List[Optional[AlignmentEntry]] = list(raw)
    paired = set()

    for missing_idx in missing_indices:
        best_idx = None
        best_distance = None
        for extra_idx in extra_indices:
            if extra_idx in paired:
                continue
            distance = abs(extra_idx - missing_idx)
            if distance > SUBSTITUTION_WINDOW:
                continue
            if best_distance is None or distance < best_distance:
                best_idx = extra_idx
                best_distance = distance

        if best_idx is None:
            continue

        paired.add(best_idx)
        paired.add(missing_idx)
        slots[missing_idx] = AlignmentEntry(
            typed=raw[best_idx].typed,
            original=raw[missing_idx].original,
            status=AlignmentStatus.SUBSTITUTION,
        )
        slots[best_idx] = None

    return [entry for entry in slots if entry is not None]


def align(original_text: str, typed_text: str) -> List[AlignmentEntry]:
    return pair_substitutions(align_raw(tokenize(original_text), tokenize(typed_text)))
