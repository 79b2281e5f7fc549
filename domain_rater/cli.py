import argparse
import json
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from domain_rater.analyzers.domain_analyzer import analyze_domain
from domain_rater.config import init_config
from domain_rater.logging_config import configure_logging
from domain_rater.scoring.color import score_rgb

console = Console()


def display_result(data: dict) -> None:
    color = score_rgb(data["score"])

    console.print(
        Panel(
            f"[bold]{data['domain']}[/bold]\n{data['pattern']}",
            border_style=color,
            expand=False,
        )
    )
    console.print(f"[bold {color}]Score:[/bold {color}] {data['score']} (lower scores are better)")

    if data["category_scores"]:
        table = Table(title="Component Scores", show_lines=True)
        table.add_column("Component", style="cyan", no_wrap=True)
        table.add_column("Score", justify="right", style="green")
        for name, score in data["category_scores"].items():
            table.add_row(name, str(score))
        console.print(table)

    # Messages carry tabs and brackets; print them verbatim
    for message in data["messages"]:
        console.print(Text(message.expandtabs(4)))


def main(argv=None):
    settings = init_config()

    parser = argparse.ArgumentParser(
        description="Rate how desirable (or spammy) a domain name looks",
    )
    parser.add_argument(
        "target",
        help="Domain or URL to rate, e.g. https://www.example.com/path",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output raw JSON instead of the pretty report",
    )
    parser.add_argument(
        "--raw",
        action="store_true",
        help="Print the score only",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        default=settings.log_json,
        help="Emit logs as JSON lines",
    )

    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose, log_json=args.log_json, level=settings.log_level)

    result = analyze_domain(args.target)

    # Output modes
    if args.json:
        print(json.dumps(result, indent=2))
        return

    if args.raw:
        print(result["score"])
        return

    display_result(result)


if __name__ == "__main__":
    main()
