"""
Daily risk summary rendering.

Builds the subject, plain-text and HTML bodies of the coach summary.
Delivery is left to the caller.
"""

from __future__ import annotations

import datetime
from html import escape
from typing import Sequence

from app.schemas.alerts import AthleteRiskSummary, DailySummaryEmail

_CELL = "padding:4px 8px;border:1px solid #e5e7eb;"

HIGH_TITLE = "High risk (ACWR > 1.5)"
CAUTION_TITLE = "Caution (1.3 <= ACWR <= 1.5)"
NO_DATA_TITLE = "No recent training data"

FOOTER = ("This email is sent automatically. Use it as input for training plans and availability decisions; "
          "final decisions must take the athlete's actual condition into account.")


def _text_row(a: AthleteRiskSummary) -> str:
    return (f"- {a.team_name} / {a.athlete_name} : ACWR {a.latest_ratio:.2f}, "
            f"last training {a.last_training_date.isoformat()} ({a.days_since_last_training} days ago)")


def _html_table(title: str, rows: Sequence[AthleteRiskSummary]) -> str:
    if not rows:
        return ""

    trs = "\n".join(f"<tr>"
                    f'<td style="{_CELL}">{escape(a.team_name)}</td>'
                    f'<td style="{_CELL}">{escape(a.athlete_name)}</td>'
                    f'<td style="{_CELL}text-align:right;">{a.latest_ratio:.2f}</td>'
                    f'<td style="{_CELL}">{a.last_training_date.isoformat()} '
                    f"({a.days_since_last_training} days ago)</td>"
                    f"</tr>" for a in rows)

    return (f'<h3 style="margin:16px 0 8px;font-size:14px;">{escape(title)}</h3>'
            f'<table style="border-collapse:collapse;width:100%;font-size:13px;">'
            f"<thead><tr>"
            f'<th style="{_CELL}text-align:left;">Team</th>'
            f'<th style="{_CELL}text-align:left;">Athlete</th>'
            f'<th style="{_CELL}text-align:right;">Latest ACWR</th>'
            f'<th style="{_CELL}text-align:left;">Last training</th>'
            f"</tr></thead>"
            f"<tbody>{trs}</tbody></table>")


def build_daily_summary(staff_name: str, report_date: datetime.date, high: Sequence[AthleteRiskSummary],
                        caution: Sequence[AthleteRiskSummary],
                        no_data: Sequence[AthleteRiskSummary] = (), ) -> DailySummaryEmail:
    """Render the daily summary for one staff member."""
    day = report_date.isoformat()
    subject = f"[Workload] High-risk alert summary ({day})"

    lines = [f"Hello {staff_name},", f"Here is the ACWR risk summary as of {day}.", ""]
    if high:
        lines.append(f"[{HIGH_TITLE}]")
        lines.extend(_text_row(a) for a in high)
    else:
        lines.append("No high-risk athletes.")
    lines.append("")

    for title, rows in ((CAUTION_TITLE, caution), (NO_DATA_TITLE, no_data)):
        if rows:
            lines.append(f"[{title}]")
            lines.extend(_text_row(a) for a in rows)
            lines.append("")
    lines.append(FOOTER)

    high_html = _html_table(HIGH_TITLE, high) if high else "<p>No high-risk athletes.</p>"
    html = ('<div style="font-family:sans-serif;font-size:14px;line-height:1.6;">'
            f"<p>Hello {escape(staff_name)},</p>"
            f"<p>Here is the ACWR risk summary as of {day}.</p>"
            f"{high_html}"
            f"{_html_table(CAUTION_TITLE, caution)}"
            f"{_html_table(NO_DATA_TITLE, no_data)}"
            f'<p style="margin-top:16px;font-size:12px;color:#6b7280;">{escape(FOOTER)}</p>'
            "</div>")

    return DailySummaryEmail(subject=subject, text="\n".join(lines), html=html)
