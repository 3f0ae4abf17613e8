from __future__ import annotations

from flask import Blueprint, render_template

from ..services.report_service import ReportService

bp = Blueprint("reports", __name__)


@bp.get("/association")
def association():
    """Commission collected by the association, per month of rental start."""
    stats = ReportService().monthly_commission_summary()
    return render_template("reports/association.html", stats=stats)
