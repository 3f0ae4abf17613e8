from flask import Blueprint, render_template, request, redirect, url_for, flash

from ..exceptions import ValidationError
from ..services.rental_service import RentalService
from ..services.tool_service import ToolService

bp = Blueprint("rentals", __name__)


@bp.get("/rent/<tool_id>")
def rent_form(tool_id):
    """Rental form for one tool, with the commission the booking will carry."""
    tool, commission = ToolService().quote(tool_id)
    return render_template("rentals/rent.html", tool=tool, commission=commission, form={})


@bp.post("/rent/<tool_id>")
def rent_tool(tool_id):
    """Book the tool for renter_name between start_date and end_date."""
    form = request.form
    try:
        rental = RentalService().create_rental(
            tool_id=tool_id,
            renter_name=form.get("renter_name"),
            start_date=form.get("start_date"),
            end_date=form.get("end_date"),
        )
    except ValidationError as e:
        flash(e.message, "danger")
        tool, commission = ToolService().quote(tool_id)
        return render_template("rentals/rent.html", tool=tool, commission=commission, form=form), 400
    flash(f"Rental #{rental.rental_id} created", "success")
    return redirect(url_for("catalog.index"))


@bp.get("/rentals")
def list_rentals():
    """All rentals with the rented tool's name."""
    rentals = RentalService().list_rentals()
    return render_template("rentals/rentals.html", rentals=rentals)
