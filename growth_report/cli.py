"""CLI entry point for growth report generation."""

import argparse
import asyncio
import json
import logging
import random
import re
import sys
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.status import Status
from rich.table import Table

from .config import FETCH_BACKEND, FETCH_TIMEOUT, LOG_LEVEL, REPORTS_DIR
from .fetchers import get_fetcher
from .main import AnalysisPipeline, AnalysisResult
from .models import AnalysisReport


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="growth-report",
        description="Generate a growth intelligence report for a merchant website.",
    )
    parser.add_argument(
        "--url",
        required=True,
        help="Website URL to analyze",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the random source for reproducible figures",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the report as JSON instead of tables",
    )
    parser.add_argument(
        "--pdf",
        type=Path,
        nargs="?",
        const="",
        default=None,
        help=f"Also export the report as PDF (default: {REPORTS_DIR}/growth_report_<domain>.pdf)",
    )
    parser.add_argument(
        "--render",
        action="store_true",
        help="Fetch the page with a headless browser (Playwright) instead of httpx",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=FETCH_TIMEOUT,
        help=f"Retrieval timeout in seconds (default: {FETCH_TIMEOUT:g})",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Debug logging",
    )
    return parser


def default_pdf_path(report: AnalysisReport) -> Path:
    slug = re.sub(r"[^a-z0-9]+", "_", report.website.domain.lower()).strip("_")
    return REPORTS_DIR / f"growth_report_{slug}.pdf"


def setup_logging(console: Console, verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else LOG_LEVEL,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def print_report(console: Console, report: AnalysisReport):
    website = report.website
    metrics = report.current_metrics

    console.print(f"\n[bold]{website.title or website.domain}[/]")
    console.print(f"[dim]{website.domain} · {report.industry} · source: {website.method}[/]")
    if website.description:
        console.print(website.description)
    console.print(
        f"\nROAS [bold]{metrics.roas}%[/]   CTR [bold]{metrics.ctr}%[/]   "
        f"CPC [bold]${metrics.cpc}[/]   CVR [bold]{metrics.cvr}%[/]"
    )
    if website.product_names:
        console.print(f"Products: {', '.join(website.product_names)}")

    recs = Table(title="Recommendations", show_lines=False)
    recs.add_column("")
    recs.add_column("Priority")
    recs.add_column("Category")
    recs.add_column("Action")
    recs.add_column("Impact", style="green")
    recs.add_column("Confidence", justify="right")
    for rec in report.recommendations:
        style = "red" if rec.priority == "High" else "yellow"
        recs.add_row(
            rec.icon, f"[{style}]{rec.priority}[/]", rec.category,
            rec.action, rec.impact, f"{rec.confidence}%",
        )
    console.print(recs)

    comps = Table(title="Competitors")
    comps.add_column("Name")
    comps.add_column("Domain", style="dim")
    comps.add_column("Revenue")
    comps.add_column("Ad spend")
    comps.add_column("ROAS", justify="right")
    comps.add_column("Share", justify="right")
    for comp in report.competitors:
        comps.add_row(
            comp.name, comp.domain, comp.estimated_revenue, comp.ad_spend,
            f"{comp.roas}%", f"{comp.market_share}%",
        )
    console.print(comps)

    market = report.market
    console.print(
        f"Market size [bold]{market.total_market_size}[/], growth [bold]{market.growth_rate}[/]. "
        f"Trends: {', '.join(market.top_trends)}"
    )

    budget = Table(title="Budget Optimization")
    budget.add_column("Channel")
    budget.add_column("Current", justify="right")
    budget.add_column("Optimized", justify="right")
    budget.add_column("ROI", justify="right")
    for b in report.budget_optimization:
        budget.add_row(b.name, f"{b.current}%", f"{b.optimized}%", f"{b.roi}x")
    console.print(budget)


def main(argv: list[str] | None = None):
    load_dotenv()
    args = build_parser().parse_args(argv)

    console = Console()
    setup_logging(console, args.verbose)

    status = Status("", console=console)
    status.start()

    def on_progress(msg: str):
        if msg:
            status.update(f"[bold cyan]{msg}[/]")

    backend = "playwright" if args.render else FETCH_BACKEND
    pipeline = AnalysisPipeline(
        fetcher=get_fetcher(backend, timeout=args.timeout),
        on_progress=on_progress,
        rng=random.Random(args.seed) if args.seed is not None else None,
    )

    try:
        result: AnalysisResult = asyncio.run(pipeline.run(args.url))
    except KeyboardInterrupt:
        status.stop()
        console.print("\n[yellow]Cancelled.[/]")
        sys.exit(1)
    status.stop()

    if result.report is None:
        console.print(f"\n[bold red]Error:[/] {result.error}\n")
        sys.exit(1)

    if result.degraded:
        console.print(f"\n[bold yellow]Warning:[/] {result.error}")

    if args.json:
        console.print_json(json.dumps(result.to_dict()))
    else:
        print_report(console, result.report)

    if args.pdf is not None:
        from .report import generate_report_pdf

        output_path = args.pdf or default_pdf_path(result.report)
        pdf_path = generate_report_pdf(result.report, output_path, warning=result.error)
        console.print(f"\n[bold green]Done![/] Report saved to [bold]{pdf_path}[/]\n")


if __name__ == "__main__":
    main()
