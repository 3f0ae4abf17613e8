from decimal import Decimal

from tool_rental.services.report_service import ReportService


def test_empty_ledger_has_no_months(store):
    assert ReportService(store).monthly_commission_summary() == []


def test_monthly_groups_ordered_and_exhaustive(store, rentals, sample_catalog):
    drill = sample_catalog["Power Drill"].tool_id
    mower = sample_catalog["Lawn Mower"].tool_id
    washer = sample_catalog["Pressure Washer"].tool_id

    rentals.create_rental(drill, "Alice", "2030-01-05", "2030-01-08")   # commission 2
    rentals.create_rental(mower, "Bob", "2030-01-20", "2030-02-02")     # commission 5
    rentals.create_rental(washer, "Carol", "2030-03-01", "2030-03-02")  # commission 5
    rentals.create_rental(drill, "Dave", "2029-12-30", "2030-01-02")    # commission 2

    summary = ReportService(store).monthly_commission_summary()

    assert [s.month for s in summary] == ["2030-03", "2030-01", "2029-12"]
    assert sum(s.rental_count for s in summary) == len(store.rentals)

    by_month = {s.month: s for s in summary}
    assert by_month["2030-01"].rental_count == 2
    assert by_month["2030-01"].total_commission == Decimal("7")
    assert by_month["2030-03"].total_commission == Decimal("5")
    assert by_month["2029-12"].rental_count == 1


def test_summary_uses_start_month_only(store, rentals, sample_catalog):
    rentals.create_rental(sample_catalog["Lawn Mower"].tool_id, "Bob", "2030-04-30", "2030-05-03")
    summary = ReportService(store).monthly_commission_summary()
    assert [(s.month, s.rental_count) for s in summary] == [("2030-04", 1)]
