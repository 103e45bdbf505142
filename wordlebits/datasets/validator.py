"""
Word-list validator.

What this module does:
- Validate the dictionary file (guess universe) and, optionally, a list of
  secrets to benchmark against.
- Enforce formatting rules (lowercase, a-z only, exact length N, one per line).
- Count duplicates and invalid lines; compute SHA-256 of the raw files.
- Check that secrets are a subset of the dictionary.
- Return a machine-readable dict (for manifests) and a one-line summary.

Dictionary.load stops at the first bad record; this module reports all of
them so a list can be fixed in one pass.

Typical use:
    from wordlebits.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists(5, "data/words_5.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

import hashlib
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple


@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str
    exists: bool
    count: int = 0             # valid words
    sha256: str = ""           # raw bytes; empty if missing
    unique_count: int = 0
    invalid_lines: int = 0
    first_invalid: List[Tuple[int, str]] = field(default_factory=list)  # (line, text), capped


@dataclass
class ValidationReport:
    N: int
    words: FileReport
    answers: Optional[FileReport]
    answers_subset_words: bool
    passed: bool
    issues: List[str]


MAX_REPORTED_INVALID = 5


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], FileReport]:
    """
    Rules:
      - one token per line, no surrounding whitespace
      - lowercase a-z, exact length N
      - blank lines are invalid (except trailing ones)
    """
    valid: List[str] = []
    rep = FileReport(path=str(path), exists=True)

    lines = path.read_text(encoding="utf-8").splitlines()
    while lines and not lines[-1].strip():
        lines.pop()

    for line_no, w in enumerate(lines, start=1):
        if len(w) == N and w.isascii() and w.isalpha() and w.islower():
            valid.append(w)
        else:
            rep.invalid_lines += 1
            if len(rep.first_invalid) < MAX_REPORTED_INVALID:
                rep.first_invalid.append((line_no, w))

    rep.count = len(valid)
    rep.unique_count = len(set(valid))
    rep.sha256 = _sha256_file(path)
    return valid, rep


def _file_issues(label: str, rep: FileReport) -> List[str]:
    issues = []
    if rep.count == 0:
        issues.append(f"{label} file contains 0 valid words")
    if rep.invalid_lines:
        issues.append(f"{label} has {rep.invalid_lines} invalid line(s), e.g. {rep.first_invalid}")
    if rep.count != rep.unique_count:
        issues.append(f"{label} contains duplicate lines")
    return issues


def validate_wordlists(N: int, words_path: str, answers_path: Optional[str] = None) -> Dict:
    """
    Validate the dictionary (and optional secrets list) for length N.

    Returns a JSON-serializable dict (ValidationReport schema). `passed` is
    strict: files exist, non-empty, no invalid lines, secrets within the
    dictionary. Duplicates are reported but do not fail validation.
    """
    issues: List[str] = []

    words_p = Path(words_path)
    if not words_p.exists():
        issues.append(f"dictionary file not found: {words_path}")
        words_rep, words = FileReport(words_path, False), []
    else:
        words, words_rep = _load_and_check(words_p, N)
        issues += _file_issues("dictionary", words_rep)

    answers_rep = None
    subset_ok = True
    if answers_path is not None:
        answers_p = Path(answers_path)
        if not answers_p.exists():
            issues.append(f"answers file not found: {answers_path}")
            answers_rep, subset_ok = FileReport(answers_path, False), False
        else:
            answers, answers_rep = _load_and_check(answers_p, N)
            issues += _file_issues("answers", answers_rep)
            missing = sorted(set(answers) - set(words))
            subset_ok = not missing
            if missing:
                issues.append(f"answers not subset of dictionary (e.g., {missing[:5]})")

    passed = (
            words_rep.exists
            and words_rep.count > 0
            and words_rep.invalid_lines == 0
            and subset_ok
            and (answers_rep is None or (answers_rep.count > 0 and answers_rep.invalid_lines == 0))
    )

    rep = ValidationReport(
        N=N,
        words=words_rep,
        answers=answers_rep,
        answers_subset_words=subset_ok,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for the console, e.g.
        N=5 | words=14855 (uniq=14855, sha=abc123def456) | OK
    """
    w = report["words"]
    parts = [
        f"N={report['N']}",
        f"words={w['count']} (uniq={w['unique_count']}, sha={(w.get('sha256') or '')[:12]})",
    ]
    a = report.get("answers")
    if a is not None:
        parts.append(f"answers={a['count']} (uniq={a['unique_count']}, sha={(a.get('sha256') or '')[:12]})")
        parts.append(f"answers⊆words={report['answers_subset_words']}")
    parts.append("OK" if report["passed"] else "FAIL")
    return " | ".join(parts)
