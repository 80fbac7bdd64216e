"""
Console report for a check run.
"""
from typing import Dict, List, Tuple

from rich.console import Console
from rich.markup import escape

from .models import CheckResult

SUCCESS_MESSAGE = "All functions passed the comment check."
FAILURE_HEADER = "The following functions failed the comment check:"


def partition(results: Dict[str, CheckResult]) -> Tuple[List[CheckResult], List[CheckResult]]:
    """Splits results into (compliant, failed), each sorted by function name."""
    ordered = [results[name] for name in sorted(results)]
    compliant = [r for r in ordered if r.has_all]
    failed = [r for r in ordered if not r.has_all]
    return compliant, failed


def format_failure(result: CheckResult) -> str:
    location = result.source_file
    if result.line:
        location = f"{location}:{result.line}"
    return f"Function {result.name} in {location}: missing {', '.join(result.missing)}"


def report(results: Dict[str, CheckResult], console: Console) -> bool:
    """
    Prints the outcome of a run.
    Returns True when every function passed. Results are not modified.
    """
    _, failed = partition(results)

    if not failed:
        console.print(f"[bold green]✓[/bold green] {SUCCESS_MESSAGE}")
        return True

    console.print(f"[bold red]{FAILURE_HEADER}[/bold red]")
    for result in failed:
        console.print(f"  [red]✗[/red] {escape(format_failure(result))}", soft_wrap=True)
    console.print(f"[dim]{len(results)} functions checked, {len(failed)} failed[/dim]")
    return False
