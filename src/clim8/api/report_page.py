"""Printable HTML rendering of a report document."""

from html import escape

from clim8.domain.report import FootprintSummary, ReportDocument


def render_report_html(report: ReportDocument) -> str:
    """Lay out an already assembled report as a standalone HTML page."""
    sections = [
        _summary_section(
            "Carbon Footprint Summary",
            "Your Total Carbon Footprint",
            "Your Footprint",
            "kg CO2",
            report.carbon,
        ),
        _summary_section(
            "Water Footprint Summary",
            "Your Total Water Footprint",
            "Your Usage",
            "liters",
            report.water,
        ),
        _recommendations_section(report),
        _notes_section(report),
    ]
    return _PAGE_TEMPLATE.format(
        title=escape(report.title),
        date=escape(report.generated_at.strftime("%Y-%m-%d")),
        sections="\n".join(sections),
    )


def _summary_section(
    heading: str,
    metric_title: str,
    your_label: str,
    short_unit: str,
    summary: FootprintSummary,
) -> str:
    rows = "\n".join(
        f'<div class="breakdown-item"><h4>{escape(row.label)}</h4>'
        f"<p>{row.value} {escape(short_unit)}</p>"
        f"<p>{row.percent_of_total:.1f}% of total</p></div>"
        for row in summary.breakdown
    )
    comparison = summary.comparison
    return (
        f'<div class="section"><h2>{escape(heading)}</h2>'
        f'<div class="metric"><h3>{escape(metric_title)}</h3>'
        f"<p><strong>{summary.total} {escape(summary.unit)}</strong></p>"
        '<div class="comparison">'
        f'<div class="comparison-item your"><h4>{escape(your_label)}</h4>'
        f"<p>{comparison.yours} {escape(short_unit)}</p></div>"
        '<div class="comparison-item average"><h4>Global Average</h4>'
        f"<p>{comparison.global_average:g} {escape(short_unit)}</p></div>"
        '<div class="comparison-item safe"><h4>Safe Limit</h4>'
        f"<p>{comparison.safe_limit:g} {escape(short_unit)}</p></div>"
        "</div></div>"
        f'<h3>Breakdown</h3><div class="breakdown">{rows}</div></div>'
    )


def _recommendations_section(report: ReportDocument) -> str:
    tips = "\n".join(
        f'<div class="tip"><h3>{escape(tip.title)}</h3><p>{escape(tip.body)}</p></div>'
        for tip in report.recommendations
    )
    return f'<div class="section"><h2>Personalized Recommendations</h2>{tips}</div>'


def _notes_section(report: ReportDocument) -> str:
    notes = "".join(f"<p>{escape(note)}</p>" for note in report.notes)
    return f'<div class="section"><h2>About This Report</h2>{notes}</div>'


_PAGE_TEMPLATE = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <title>{title}</title>
    <style>
      body {{ font-family: Arial, sans-serif; margin: 40px; color: #333; }}
      .header {{ text-align: center; border-bottom: 3px solid #2ecc71; }}
      .header h1, .section h2, .metric h3 {{ color: #2ecc71; }}
      .date {{ color: #666; font-size: 14px; }}
      .section {{ margin-bottom: 30px; page-break-inside: avoid; }}
      .metric {{ background: #f8f9fa; padding: 15px; border-left: 4px solid #2ecc71; }}
      .comparison, .breakdown {{ display: grid; gap: 15px; margin-top: 15px; }}
      .comparison {{ grid-template-columns: repeat(3, 1fr); }}
      .breakdown {{ grid-template-columns: repeat(auto-fit, minmax(200px, 1fr)); }}
      .comparison-item, .breakdown-item {{ text-align: center; padding: 10px; }}
      .comparison-item.your {{ background: #d4edda; }}
      .comparison-item.average {{ background: #d1ecf1; }}
      .comparison-item.safe {{ background: #f8d7da; }}
      .breakdown-item {{ background: #e8f5e8; }}
      .tip {{ background: #fff3cd; padding: 15px; margin-bottom: 15px; color: #856404; }}
      @media print {{ body {{ margin: 20px; }} }}
    </style>
  </head>
  <body>
    <div class="header">
      <h1>{title}</h1>
      <div class="date">Generated on: {date}</div>
    </div>
{sections}
  </body>
</html>
"""
