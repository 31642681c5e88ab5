#!/usr/bin/env python3
from __future__ import annotations
import logging
import string
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from settings import settings

logger = logging.getLogger(__name__)

PUNCTUATION = frozenset(string.punctuation)
LETTERS = frozenset(string.ascii_letters)
MAX_EDIT_DISTANCE = 2
SEARCH_POLICIES = ("first", "best")


# -----------------------------
# 1) Levenshtein DP
# -----------------------------

def levenshtein_matrix(a: str, b: str) -> List[List[int]]:
    m, n = len(a), len(b)
    dp = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(m + 1):
        dp[i][0] = i
    for j in range(n + 1):
        dp[0][j] = j

    for i in range(1, m + 1):
        ai = a[i - 1]
        for j in range(1, n + 1):
            if ai == b[j - 1]:
                dp[i][j] = dp[i - 1][j - 1]
            else:
                dp[i][j] = 1 + min(
                    dp[i - 1][j],      # delete
                    dp[i][j - 1],      # insert
                    dp[i - 1][j - 1],  # substitute
                )
    return dp

def levenshtein_distance(a: str, b: str) -> int:
    return levenshtein_matrix(a, b)[-1][-1]


# ---------------------------------
# 2) Tokenizer & normalizer
# ---------------------------------

def is_punctuation(ch: str) -> bool:
    return ch in PUNCTUATION

def tokenize(text: str) -> List[str]:
    """Split on whitespace; a trailing punctuation mark becomes its own token."""
    tokens: List[str] = []
    for token in text.split():
        if is_punctuation(token[-1]) and not all(is_punctuation(c) for c in token):
            tokens.append(token[:-1])
            tokens.append(token[-1])
        else:
            tokens.append(token)
    return tokens

def normalize(token: str) -> str:
    return "".join(c.lower() for c in token if c in LETTERS)


# ---------------------------------
# 3) Dictionary & suggestion cache
# ---------------------------------

class Dictionary:
    """Set of normalized words. Grows through add(), never shrinks."""

    def __init__(self, words: Iterable[str] = ()):
        self._words: set[str] = set()
        self.update(words)

    def add(self, word: str) -> bool:
        key = normalize(word)
        if not key or key in self._words:
            return False
        self._words.add(key)
        return True

    def update(self, words: Iterable[str]) -> int:
        return sum(1 for w in words if self.add(w))

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __iter__(self) -> Iterator[str]:
        # Scans run over a snapshot so an add() mid-scan is never observed.
        return iter(tuple(self._words))

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"Dictionary({len(self._words)} words)"


def find_match(
    word: str,
    dictionary: Iterable[str],
    max_distance: int = MAX_EDIT_DISTANCE,
    policy: str = "first",
) -> Optional[str]:
    """
    Scan the dictionary for a word within max_distance of `word`.

    With policy "first" the scan stops at the first acceptable word, so
    among several acceptable words the winner depends on scan order.
    With policy "best" the closest word wins; ties keep the earliest seen.
    `word` itself is never returned; callers search only on a membership miss.
    """
    if policy not in SEARCH_POLICIES:
        raise ValueError(f"unknown search policy {policy!r}, expected one of {SEARCH_POLICIES}")

    best: Optional[str] = None
    best_distance = max_distance + 1
    for entry in dictionary:
        if entry == word:
            continue
        d = levenshtein_distance(word, entry)
        if d > max_distance:
            continue
        if policy == "first":
            return entry
        if d < best_distance:
            best, best_distance = entry, d
            if d == 1:
                break
    return best


class SuggestionCache:
    """
    Memo of misspelled word -> correction. Only found matches are stored.

    Entries are keyed by word alone, so a cache belongs to one
    max_distance/policy pair; a hit returns whatever was found under it.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, str] = {}

    def get(self, word: str) -> Optional[str]:
        return self._entries.get(word)

    def lookup_or_search(
        self,
        word: str,
        dictionary: Iterable[str],
        max_distance: int = MAX_EDIT_DISTANCE,
        policy: str = "first",
    ) -> Optional[str]:
        cached = self._entries.get(word)
        if cached is not None:
            logger.debug("cache hit: %s -> %s", word, cached)
            return cached

        logger.debug("cache miss: searching for %s", word)
        match = find_match(word, dictionary, max_distance=max_distance, policy=policy)
        if match is not None:
            self._entries[word] = match
        return match

    def purge(self) -> int:
        removed = len(self._entries)
        self._entries.clear()
        logger.info("purged %d cached suggestion(s)", removed)
        return removed

    def __contains__(self, word: object) -> bool:
        return word in self._entries

    def __len__(self) -> int:
        return len(self._entries)


# ---------------------------------
# 4) Correction engine
# ---------------------------------

def check(text: str, dictionary: Dictionary) -> List[str]:
    misspelled: List[str] = []
    for token in tokenize(text):
        word = normalize(token)
        if word and word not in dictionary:
            misspelled.append(word)
    return misspelled

def suggest(
    misspelled: Iterable[str],
    dictionary: Dictionary,
    cache: SuggestionCache,
    max_distance: int = MAX_EDIT_DISTANCE,
    policy: str = "first",
) -> List[Tuple[str, str]]:
    """Pairs (word, correction); words without a correction are left out."""
    corrections: List[Tuple[str, str]] = []
    for word in misspelled:
        match = cache.lookup_or_search(word, dictionary, max_distance=max_distance, policy=policy)
        if match is not None:
            corrections.append((word, match))
    return corrections


@dataclass
class SpellReport:
    misspelled: List[str] = field(default_factory=list)
    corrections: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def uncorrected(self) -> List[str]:
        found = {w for w, _ in self.corrections}
        return [w for w in self.misspelled if w not in found]


class SpellChecker:
    def __init__(
        self,
        dictionary: Dictionary | None = None,
        cache: SuggestionCache | None = None,
        max_distance: int | None = None,
        policy: str | None = None,
    ):
        self.dictionary = dictionary if dictionary is not None else Dictionary()
        self.cache = cache if cache is not None else SuggestionCache()
        self.max_distance = settings.max_distance if max_distance is None else max_distance
        self.policy = policy or settings.search_policy
        if self.policy not in SEARCH_POLICIES:
            raise ValueError(f"unknown search policy {self.policy!r}, expected one of {SEARCH_POLICIES}")

    def add_word(self, word: str) -> bool:
        added = self.dictionary.add(word)
        if added:
            logger.info("added %r to dictionary (%d words)", normalize(word), len(self.dictionary))
        return added

    def purge_cache(self) -> int:
        return self.cache.purge()

    def load_dictionary(self, dictionary: Dictionary) -> None:
        """Install a new dictionary; cached corrections for the old one are dropped."""
        self.dictionary = dictionary
        self.cache.purge()
        logger.info("loaded dictionary with %d words", len(dictionary))

    def is_known(self, token: str) -> bool:
        word = normalize(token)
        return not word or word in self.dictionary

    def check(self, text: str) -> List[str]:
        return check(text, self.dictionary)

    def suggest(self, misspelled: Iterable[str]) -> List[Tuple[str, str]]:
        return suggest(misspelled, self.dictionary, self.cache,
                       max_distance=self.max_distance, policy=self.policy)

    def report(self, text: str) -> SpellReport:
        misspelled = self.check(text)
        return SpellReport(misspelled, self.suggest(misspelled))

    def candidates(self, word: str, k: int = 5) -> List[Tuple[str, int]]:
        """Every dictionary word within max_distance, closest first."""
        word = normalize(word)
        scored = []
        for entry in self.dictionary:
            d = levenshtein_distance(word, entry)
            if d <= self.max_distance:
                scored.append((entry, d))
        scored.sort(key=lambda pair: (pair[1], pair[0]))
        return scored[:k]


def format_report(report: SpellReport) -> str:
    lines: List[str] = []
    if not report.misspelled:
        lines.append("No misspelled words found.")
    else:
        lines.append("Misspelled words:")
        lines.extend(report.misspelled)
    if report.corrections:
        lines.append("Corrections:")
        lines.extend(f"{word} -> {fix}" for word, fix in report.corrections)
    return "\n".join(lines)


# ---------------------------------
# 5) Rewriter
# ---------------------------------

def rewrite(tokens: List[str], replacements: Mapping[int, str] | None = None) -> str:
    """
    Join tokens with single spaces, no space before a token that starts
    with punctuation. Original spacing and newlines are not restored.
    """
    replacements = replacements or {}
    parts: List[str] = []
    for i, token in enumerate(tokens):
        token = replacements.get(i, token)
        if i > 0 and not (token and is_punctuation(token[0])):
            parts.append(" ")
        parts.append(token)
    return "".join(parts)


# ---------------------------------
# 6) Demo
# ---------------------------------
DEMO_WORDS = "the quick brown fox jumps over lazy dog alice was beginning to get very tired"

def _demo_spellchecker() -> None:
    sc = SpellChecker(Dictionary(DEMO_WORDS.split()))
    for text in ["Teh quikc brown fox", "Alcie was begining to get vrey tierd.", "zzzzzzzzzz"]:
        print(f"\nText: {text}")
        print(format_report(sc.report(text)))

if __name__ == "__main__":
    logging.basicConfig(level=settings.log_level)
    _demo_spellchecker()
