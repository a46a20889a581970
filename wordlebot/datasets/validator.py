"""
Word-list validator.

What this module does:
- Validate a dictionary file for a given word length N.
- Enforce formatting rules (lowercase, a–z only, exact length N, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

Typical use:
    from wordlebot.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist(5, "words.txt")
    print(pretty_summary(rep))

A list that fails validation can still be loaded: load_dictionary() cleans it.
The report exists so the user knows what was dropped.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words
    invalid_lines: int   # number of invalid lines encountered


@dataclass
class ValidationReport:
    N: int
    words: FileReport
    passed: bool
    issues: List[str]


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Load words and count lines that break the format rules.
    Blank lines and upper-case entries count as invalid.
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and w == w.lower() and w.isascii() and w.isalpha() and len(w) == N:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def validate_wordlist(N: int, path: str) -> Dict:
    """
    Validate a dictionary file of N-letter words.

    Returns
    -------
    Dict
        JSON-serializable ValidationReport; `passed` requires an existing,
        non-empty file with no invalid or duplicate lines.
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"word list not found: {path}")
        rep = ValidationReport(N=N, words=FileReport(path, False, 0, "", 0, 0),
                               passed=False, issues=issues)
        return asdict(rep)

    words, invalid = _load_and_check(p, N)
    report = FileReport(
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(set(words)),
        invalid_lines=invalid,
    )

    if report.count == 0:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if report.count != report.unique_count:
        issues.append(f"word list contains {report.count - report.unique_count} duplicate line(s)")

    passed = report.count > 0 and invalid == 0 and report.count == report.unique_count
    return asdict(ValidationReport(N=N, words=report, passed=passed, issues=issues))


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for the console.

    Example:
        N=5 | words=14855 (uniq=14855, invalid=0, sha=abc123def456) | OK
    """
    w = report["words"]
    status = "OK" if report["passed"] else "FAIL"
    sha = (w.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={w['count']} (uniq={w['unique_count']}, "
        f"invalid={w['invalid_lines']}, sha={sha}) | {status}"
    )
