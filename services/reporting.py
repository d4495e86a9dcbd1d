from __future__ import annotations

import sys
from typing import Optional, TextIO

from models.view_result import ViewResult


def format_result_count(result: ViewResult) -> str:
    noun = "member" if result.total_matches == 1 else "members"
    return f"Showing {result.total_matches} {noun} (out of {result.total_records} total)"


def format_pager(result: ViewResult) -> str:
    """Text rendition of the Previous / page numbers / Next bar."""
    prev_label = "< Previous" if result.has_previous else "  (first)"
    next_label = "Next >" if result.has_next else "(last)  "
    numbers = " ".join(f"[{n}]" if n == result.page else str(n) for n in result.page_numbers)
    return f"{prev_label}  {numbers}  {next_label}"


def print_summary(result: ViewResult, out: Optional[TextIO] = None) -> None:
    """Print one page of the directory."""
    out = out or sys.stdout
    print("=" * 60, file=out)
    print("TEAM DIRECTORY", file=out)
    print("=" * 60, file=out)
    if result.query:
        print(f"Search: {result.query}", file=out)
        print(format_result_count(result), file=out)
    if result.is_empty:
        print("No team members found", file=out)
        print("Try adjusting your search query.", file=out)
    for member in result.visible:
        print(f"- #{member.id} {member.name}, {member.title}", file=out)
        if member.skills:
            print(f"    skills: {', '.join(member.skills)}", file=out)
    print(f"Page {result.page} of {result.total_pages}", file=out)
    if result.show_pagination:
        print(format_pager(result), file=out)
    print("=" * 60, file=out)
