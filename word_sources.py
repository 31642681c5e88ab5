"""Ways of filling a Dictionary: word-list files, the nltk words corpus, free text."""
from __future__ import annotations
import logging
from pathlib import Path

import nltk

from spell_checker import Dictionary

logger = logging.getLogger(__name__)


def load_word_list(path: str | Path) -> Dictionary:
    """
    Read a whitespace-delimited word list.

    An unreadable file is logged and yields an empty dictionary; checking
    against it flags every word.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8", errors="ignore")
    except OSError as exc:
        logger.error("could not open dictionary %s: %s", path, exc)
        return Dictionary()

    dictionary = Dictionary(text.split())
    logger.info("loaded %d words from %s", len(dictionary), path)
    return dictionary


def load_nltk_words() -> Dictionary:
    try:
        nltk.data.find("corpora/words")
    except LookupError:
        nltk.download("words", quiet=True)
    from nltk.corpus import words

    dictionary = Dictionary(words.words())
    logger.info("loaded %d words from the nltk words corpus", len(dictionary))
    return dictionary


def dictionary_from_text(text: str) -> Dictionary:
    return Dictionary(text.split())
