#!/usr/bin/env python3
"""Safe math linting script for the pricer.

Scans the package for arithmetic that could lose precision or escape the
uint256 bound on token amounts. It should be run as part of CI to prevent
regressions.

Usage:
    python scripts/check_safe_math.py [--verbose]

Exit codes:
    0 - No issues found
    1 - Issues found (with details printed)
"""

from __future__ import annotations

import argparse
import io
import sys
import tokenize
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

# Package to scan
SCAN_DIR = "pricer"

# Directories where every operation on amounts must go through SafeInt
CHECKED_ARITHMETIC_DIRS = ("amm", "routing")

# Names that hold token amounts or reserves
AMOUNT_KEYWORDS = ("amount", "reserve")

ARITHMETIC_OPS = {"*", "+", "-"}


@dataclass
class Issue:
    """A detected unsafe math pattern."""

    file: Path
    line_num: int
    line: str
    pattern: str
    message: str
    suggestion: str | None = None


def _code_lines(source: str) -> dict[int, list[tokenize.TokenInfo]]:
    """Group code tokens by line, dropping strings, comments and docstrings."""
    lines: dict[int, list[tokenize.TokenInfo]] = {}
    skip = {
        tokenize.STRING,
        tokenize.COMMENT,
        tokenize.NL,
        tokenize.NEWLINE,
        tokenize.INDENT,
        tokenize.DEDENT,
        tokenize.ENDMARKER,
    }
    for token in tokenize.generate_tokens(io.StringIO(source).readline):
        if token.type in skip:
            continue
        lines.setdefault(token.start[0], []).append(token)
    return lines


def _calls(tokens: list[tokenize.TokenInfo], name: str) -> bool:
    """Check whether the line calls `name(...)`."""
    return any(
        tok.type == tokenize.NAME and tok.string == name and nxt.string == "("
        for tok, nxt in zip(tokens, tokens[1:], strict=False)
    )


def _binary_ops(tokens: list[tokenize.TokenInfo]) -> set[str]:
    """Operators applied between two operands, skipping unary minus and unpacking."""
    ops = set()
    for prev, tok in zip(tokens, tokens[1:], strict=False):
        if tok.type != tokenize.OP:
            continue
        if prev.type in (tokenize.NAME, tokenize.NUMBER) or prev.string in (")", "]"):
            ops.add(tok.string)
    return ops


def check_line(
    path: Path, line_num: int, original: str, tokens: list[tokenize.TokenInfo], checked: bool
) -> Iterator[Issue]:
    """Run every pattern check against one line of code."""
    ops = {tok.string for tok in tokens if tok.type == tokenize.OP}
    names = {tok.string for tok in tokens if tok.type == tokenize.NAME}

    if "/" in ops or "/=" in ops:
        yield Issue(
            file=path,
            line_num=line_num,
            line=original,
            pattern="true division",
            message="'/' produces a float",
            suggestion="Use '//' and choose the rounding direction explicitly",
        )

    if _calls(tokens, "float"):
        yield Issue(
            file=path,
            line_num=line_num,
            line=original,
            pattern="float conversion",
            message="float() loses precision above 2^53",
            suggestion="Keep amounts as int",
        )

    if "Decimal" in names:
        yield Issue(
            file=path,
            line_num=line_num,
            line=original,
            pattern="Decimal arithmetic",
            message="Decimal rounds to its context precision",
            suggestion="Use exact integer arithmetic",
        )

    if checked and _binary_ops(tokens) & ARITHMETIC_OPS and not _calls(tokens, "S"):
        touches_amount = any(kw in name.lower() for name in names for kw in AMOUNT_KEYWORDS)
        if touches_amount:
            yield Issue(
                file=path,
                line_num=line_num,
                line=original,
                pattern="unchecked arithmetic",
                message="Arithmetic on amounts without SafeInt overflow protection",
                suggestion="Wrap operands: S(a) * S(b)",
            )


def scan_file(path: Path, checked: bool = False) -> list[Issue]:
    """Scan a single file for unsafe math patterns.

    Args:
        path: Python source file
        checked: Also require SafeInt for arithmetic on amounts
    """
    source = path.read_text()
    original_lines = source.split("\n")

    issues = []
    for line_num, tokens in sorted(_code_lines(source).items()):
        original = original_lines[line_num - 1].rstrip()
        issues.extend(check_line(path, line_num, original, tokens, checked))
    return issues


def scan_package(base_dir: Path) -> list[Issue]:
    """Scan every module of the package."""
    package = base_dir / SCAN_DIR
    issues = []
    for py_file in sorted(package.rglob("*.py")):
        if "__pycache__" in py_file.parts:
            continue
        relative = py_file.relative_to(package)
        checked = relative.parts[0] in CHECKED_ARITHMETIC_DIRS
        issues.extend(scan_file(py_file, checked=checked))
    return issues


def print_report(issues: list[Issue], verbose: bool) -> None:
    """Print the audit report."""
    if not issues:
        print("No unsafe math patterns found")
        return

    print(f"\n{'=' * 70}")
    print(f"SAFE MATH AUDIT: {len(issues)} issue(s)")
    print(f"{'=' * 70}\n")
    for issue in issues:
        print(f"  {issue.file}:{issue.line_num}")
        print(f"    {issue.pattern}: {issue.message}")
        if verbose:
            print(f"    > {issue.line.strip()[:70]}")
            if issue.suggestion:
                print(f"    Suggestion: {issue.suggestion}")
        print()


def main() -> int:
    parser = argparse.ArgumentParser(description="Safe math linter for the pricer")
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args()

    issues = scan_package(Path(__file__).parent.parent)
    print_report(issues, args.verbose)
    return 1 if issues else 0


if __name__ == "__main__":
    sys.exit(main())
