"""
Interactive correction of a text or file.

The human choice is a plain callable, ``choose(token, candidates)``, that
returns 0/None to skip or a 1-based index into ``candidates``. The
Streamlit page and the tests both drive the flow through it.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple

from spell_checker import SpellChecker, normalize, rewrite, tokenize

logger = logging.getLogger(__name__)

Chooser = Callable[[str, Sequence[str]], Optional[int]]


@dataclass
class CorrectionResult:
    text: str
    applied: List[Tuple[int, str, str]] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.applied)


def candidates_for(token: str, checker: SpellChecker) -> List[str]:
    """Correction candidates for a raw token; empty when it is known or hopeless."""
    if checker.is_known(token):
        return []
    return [fix for _, fix in checker.suggest([normalize(token)])]


def correct_text(text: str, checker: SpellChecker, choose: Chooser) -> CorrectionResult:
    tokens = tokenize(text)
    replacements = {}
    applied: List[Tuple[int, str, str]] = []

    for i, token in enumerate(tokens):
        candidates = candidates_for(token, checker)
        if not candidates:
            continue
        choice = choose(token, candidates)
        if not choice:
            continue
        if not 1 <= choice <= len(candidates):
            raise ValueError(f"selection {choice} out of range 1..{len(candidates)} for {token!r}")
        replacements[i] = candidates[choice - 1]
        applied.append((i, token, replacements[i]))

    if not applied:
        return CorrectionResult(text)
    logger.info("applied %d correction(s)", len(applied))
    return CorrectionResult(rewrite(tokens, replacements), applied)


def correct_file(path: str | Path, checker: SpellChecker, choose: Chooser) -> CorrectionResult:
    """Correct a file in place; it is only rewritten when a correction was applied."""
    path = Path(path)
    result = correct_text(path.read_text(encoding="utf-8"), checker, choose)
    if result.changed:
        path.write_text(result.text, encoding="utf-8")
        logger.info("saved corrections to %s", path)
    else:
        logger.info("no corrections made to %s", path)
    return result
