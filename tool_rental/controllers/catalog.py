from flask import Blueprint, render_template, request, redirect, url_for, flash

from ..exceptions import ValidationError
from ..services.tool_service import ToolService

bp = Blueprint("catalog", __name__)


@bp.get("/")
def index():
    """Tool catalogue with availability."""
    tools = ToolService().list_tools()
    return render_template("tools/index.html", tools=tools)


@bp.get("/tools/new")
def new_tool():
    return render_template("tools/new_tool.html", form={})


@bp.post("/tools")
def create_tool():
    """Add a tool from the form fields name, description, daily_rate."""
    form = request.form
    try:
        ToolService().create_tool(
            name=form.get("name"),
            description=form.get("description"),
            daily_rate=form.get("daily_rate"),
        )
    except ValidationError as e:
        flash(e.message, "danger")
        return render_template("tools/new_tool.html", form=form), 400
    flash("Tool added", "success")
    return redirect(url_for("catalog.index"))
