"""HTML template + WeasyPrint PDF export of an AnalysisReport."""

from html import escape
from pathlib import Path

from weasyprint import HTML

from .models import AnalysisReport


def _bar(value: int, maximum: int = 100) -> str:
    width = max(0, min(100, round(value * 100 / maximum))) if maximum else 0
    return f'<div class="bar"><div class="bar-fill" style="width: {width}%"></div></div>'


def render_report_html(report: AnalysisReport, warning: str | None = None) -> str:
    """
    Render the report as a standalone HTML page.

    Args:
        report: Report to render
        warning: Optional degraded-mode banner text

    Returns:
        HTML document as a string
    """
    website = report.website
    metrics = report.current_metrics
    market = report.market

    warning_html = f'<div class="warning">{escape(warning)}</div>' if warning else ""

    competitor_rows = ""
    for comp in report.competitors:
        competitor_rows += f"""
        <tr>
            <td class="name">{escape(comp.name)}<div class="muted">{escape(comp.domain)}</div></td>
            <td>{escape(comp.estimated_revenue)}</td>
            <td>{escape(comp.ad_spend)}</td>
            <td>{comp.roas}%</td>
            <td>{comp.market_share}%</td>
            <td>{escape(", ".join(comp.ad_channels))}</td>
        </tr>
        """

    recommendation_cards = ""
    for rec in report.recommendations:
        priority_class = "high" if rec.priority == "High" else "medium"
        recommendation_cards += f"""
        <div class="rec">
            <div class="rec-head">
                <span class="icon">{escape(rec.icon)}</span>
                <span class="pill {priority_class}">{escape(rec.priority)}</span>
                <span class="category">{escape(rec.category)}</span>
                <span class="confidence">{rec.confidence}% confidence</span>
            </div>
            <div class="action">{escape(rec.action)}</div>
            <div class="impact">{escape(rec.impact)}</div>
            <div class="muted">{escape(rec.reasoning)}</div>
        </div>
        """

    seasonality_rows = "".join(
        f'<tr><td class="month">{escape(p.month)}</td><td>{_bar(p.demand)}</td><td>{p.demand}</td></tr>'
        for p in market.seasonality
    )

    age_rows = "".join(
        f"<tr><td>{escape(g.age)}</td><td>{_bar(g.percentage, 50)}</td>"
        f"<td>{g.percentage}%</td><td>{g.engagement}%</td></tr>"
        for g in market.demographics.age_groups
    )

    geo_rows = "".join(
        f"<tr><td>{escape(r.region)}</td><td>{r.share}%</td><td>+{r.growth}%</td></tr>"
        for r in market.demographics.geo_distribution
    )

    budget_rows = "".join(
        f"<tr><td>{escape(b.name)}</td><td>{b.current}%</td><td>{b.optimized}%</td><td>{b.roi}x</td></tr>"
        for b in report.budget_optimization
    )

    products = ", ".join(escape(n) for n in website.product_names) or "None detected"
    trends = ", ".join(escape(t) for t in market.top_trends)

    return f"""<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<style>
    @page {{
        size: A4;
        margin: 30px;
    }}

    * {{
        margin: 0;
        padding: 0;
        box-sizing: border-box;
    }}

    body {{
        font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, 'Helvetica Neue', Arial, sans-serif;
        color: #1a1a2e;
        font-size: 13px;
    }}

    .top-bar {{
        height: 5px;
        background: linear-gradient(90deg, #4ecdc4, #3dbdb5);
        margin-bottom: 24px;
    }}

    h1 {{ font-size: 26px; margin-bottom: 4px; }}
    h2 {{ font-size: 17px; margin: 28px 0 10px 0; }}

    .muted {{ color: #6b7280; font-size: 12px; }}

    .warning {{
        margin: 12px 0;
        padding: 10px 14px;
        background: #fffbeb;
        border: 1px solid #fde68a;
        border-radius: 8px;
        color: #92400e;
    }}

    .metrics {{ display: flex; gap: 12px; margin-top: 16px; }}
    .metric {{
        flex: 1;
        background: #f0f2f5;
        border-radius: 10px;
        padding: 12px;
    }}
    .metric .value {{ font-size: 20px; font-weight: 700; }}

    table {{ width: 100%; border-collapse: collapse; }}
    th {{ text-align: left; font-size: 11px; color: #6b7280; text-transform: uppercase; padding: 6px 4px; }}
    td {{ padding: 6px 4px; border-top: 1px solid #e5e7eb; }}
    td.name {{ font-weight: 600; }}
    td.month {{ width: 40px; }}

    .bar {{ background: #e5e7eb; border-radius: 4px; height: 8px; width: 100%; }}
    .bar-fill {{ background: #4ecdc4; border-radius: 4px; height: 8px; }}

    .rec {{ border-left: 4px solid #4ecdc4; padding: 10px 14px; margin-bottom: 10px; background: #fafafa; }}
    .rec-head {{ display: flex; gap: 8px; align-items: center; margin-bottom: 4px; }}
    .pill {{ border-radius: 10px; padding: 1px 8px; font-size: 11px; font-weight: 700; }}
    .pill.high {{ background: #fee2e2; color: #991b1b; }}
    .pill.medium {{ background: #fef3c7; color: #92400e; }}
    .category {{ font-weight: 600; }}
    .confidence {{ margin-left: auto; color: #6b7280; font-size: 11px; }}
    .action {{ font-size: 14px; }}
    .impact {{ color: #059669; font-weight: 600; }}
</style>
</head>
<body>
<div class="top-bar"></div>
<h1>{escape(website.title or website.domain)}</h1>
<div class="muted">{escape(website.domain)} &middot; {escape(report.industry)} &middot; source: {escape(website.method)}</div>
<p style="margin-top: 8px">{escape(website.description)}</p>
{warning_html}

<div class="metrics">
    <div class="metric"><div class="muted">ROAS</div><div class="value">{metrics.roas}%</div></div>
    <div class="metric"><div class="muted">CTR</div><div class="value">{escape(metrics.ctr)}%</div></div>
    <div class="metric"><div class="muted">CPC</div><div class="value">${escape(metrics.cpc)}</div></div>
    <div class="metric"><div class="muted">CVR</div><div class="value">{escape(metrics.cvr)}%</div></div>
</div>

<h2>Products</h2>
<p>{products}</p>

<h2>Recommendations</h2>
{recommendation_cards}

<h2>Competitors</h2>
<table>
    <tr><th>Competitor</th><th>Revenue</th><th>Ad spend</th><th>ROAS</th><th>Share</th><th>Channels</th></tr>
    {competitor_rows}
</table>

<h2>Market</h2>
<p>Market size <strong>{escape(market.total_market_size)}</strong> growing
<strong>{escape(market.growth_rate)}</strong>. Trends: {trends}.</p>

<h2>Seasonality</h2>
<table>{seasonality_rows}</table>

<h2>Audience</h2>
<table>
    <tr><th>Age</th><th></th><th>Share</th><th>Engagement</th></tr>
    {age_rows}
</table>
<table style="margin-top: 12px">
    <tr><th>Region</th><th>Share</th><th>Growth</th></tr>
    {geo_rows}
</table>

<h2>Budget Optimization</h2>
<table>
    <tr><th>Channel</th><th>Current</th><th>Optimized</th><th>ROI</th></tr>
    {budget_rows}
</table>
</body>
</html>
"""


def generate_report_pdf(
    report: AnalysisReport,
    output_path: Path,
    warning: str | None = None,
) -> Path:
    """
    Write the report as a PDF.

    Args:
        report: Report to export
        output_path: Where to save the PDF
        warning: Optional degraded-mode banner text

    Returns:
        Path to the generated PDF
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    HTML(string=render_report_html(report, warning)).write_pdf(str(output_path))
    return output_path
