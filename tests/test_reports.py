from datetime import date
from decimal import Decimal

import pytest

from mktrading.schemas import ChallanCreate, PartyCreate, PaymentCreate
from mktrading.services import ChallanService, PartyService, PaymentService, ReportService
from mktrading.services.report_service import add_months, month_window


TODAY = date(2024, 3, 15)


def _party(store, name):
    return PartyService(store).create(PartyCreate(name=name))["id"]


def _challan(store, number, party_id, amount):
    ChallanService(store).create(
        ChallanCreate(challan_number=number, party_id=party_id, amount=Decimal(amount))
    )


def _payment(store, party_id, amount, day=None):
    PaymentService(store).create(
        PaymentCreate(party_id=party_id, amount=Decimal(amount), payment_date=day)
    )


def test_add_months_crosses_year_boundaries():
    assert add_months(date(2024, 1, 1), -1) == date(2023, 12, 1)
    assert add_months(date(2023, 12, 1), 1) == date(2024, 1, 1)
    assert add_months(date(2024, 3, 1), -14) == date(2023, 1, 1)


def test_month_windows_are_half_open():
    assert month_window("current", TODAY) == (date(2024, 3, 1), date(2024, 4, 1))
    assert month_window("last", TODAY) == (date(2024, 2, 1), date(2024, 3, 1))
    assert month_window("last", date(2024, 1, 31)) == (date(2023, 12, 1), date(2024, 1, 1))
    with pytest.raises(ValueError):
        month_window("next", TODAY)


def test_outstanding_scenario(store):
    acme = _party(store, "Acme")
    _challan(store, "C100", acme, "500")
    _payment(store, acme, "200")

    assert ReportService(store).outstanding() == [
        {"party_id": acme, "party_name": "Acme", "total_challan": 500.0, "total_paid": 200.0, "outstanding": 300.0}
    ]


def test_outstanding_never_negative_and_skips_unbilled_parties(store):
    overpaid = _party(store, "Overpaid")
    _challan(store, "C1", overpaid, "100")
    _payment(store, overpaid, "150")

    big = _party(store, "Big")
    _challan(store, "C2", big, "700")
    _challan(store, "C3", big, "300")
    _payment(store, big, "250")

    small = _party(store, "Small")
    _challan(store, "C4", small, "50")

    unbilled = _party(store, "Unbilled")
    _payment(store, unbilled, "999")

    rows = ReportService(store).outstanding()

    assert [r["party_name"] for r in rows] == ["Big", "Small", "Overpaid"]
    by_name = {r["party_name"]: r for r in rows}
    assert by_name["Big"]["total_challan"] == 1000.0
    assert by_name["Big"]["outstanding"] == 750.0
    assert by_name["Small"]["total_paid"] == 0.0
    assert by_name["Small"]["outstanding"] == 50.0
    assert by_name["Overpaid"]["outstanding"] == 0.0
    for row in rows:
        assert row["outstanding"] == max(0.0, row["total_challan"] - row["total_paid"])


def test_month_boundary_payments_attributed_by_half_open_window(store):
    acme = _party(store, "Acme")
    beta = _party(store, "Beta")
    _payment(store, acme, "100", date(2024, 3, 1))     # first day of current month
    _payment(store, acme, "50", date(2024, 3, 31))
    _payment(store, acme, "70", date(2024, 2, 29))     # last day of last month
    _payment(store, beta, "300", date(2024, 2, 1))     # first day of last month
    _payment(store, beta, "900", date(2024, 1, 31))    # before both windows
    _payment(store, beta, "400", date(2024, 4, 1))     # next month start, excluded
    _payment(store, beta, "10")                        # undated, only in "all"

    reports = ReportService(store, today=TODAY)

    assert reports.current_month_payments() == [
        {"party_id": acme, "party_name": "Acme", "total_payment": 150.0}
    ]
    assert reports.last_month_payments() == [
        {"party_id": beta, "party_name": "Beta", "total_payment": 300.0},
        {"party_id": acme, "party_name": "Acme", "total_payment": 70.0},
    ]


def test_period_reports_skip_parties_without_payments(store):
    _party(store, "Idle")
    assert ReportService(store, today=TODAY).current_month_payments() == []
    assert ReportService(store, today=TODAY).last_month_payments() == []


def test_total_incoming_windows(store):
    acme = _party(store, "Acme")
    _payment(store, acme, "100", date(2024, 3, 1))
    _payment(store, acme, "70", date(2024, 2, 29))
    _payment(store, acme, "30", date(2023, 12, 1))
    _payment(store, acme, "5")

    reports = ReportService(store, today=TODAY)

    assert reports.total_incoming("current") == {"total_incoming": 100.0, "month": "current"}
    assert reports.total_incoming("last") == {"total_incoming": 70.0, "month": "last"}
    assert reports.total_incoming("all") == {"total_incoming": 205.0, "month": "all"}
    assert reports.total_incoming("bogus") == {"total_incoming": 205.0, "month": "all"}
    assert reports.total_incoming(None) == {"total_incoming": 205.0, "month": "all"}


def test_total_incoming_empty_store(store):
    assert ReportService(store).total_incoming() == {"total_incoming": 0.0, "month": "all"}
