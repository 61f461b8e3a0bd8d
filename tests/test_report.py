from datetime import date
from decimal import Decimal

from amortization.engine.schedule import amortize, yearly_summary
from amortization.report import render_amortization, render_schedule, render_summary, render_yearly


class TestRenderSummary:
    def test_loan_fields(self, five_year_loan):
        text = render_summary(five_year_loan)
        assert "Loan Amount:            $280,350.00" in text
        assert "Annual Rate:            3.5%" in text
        assert "Total Periods:          60" in text
        assert "(monthly)" in text
        assert "Start Date" not in text

    def test_dates_when_started(self, dated_loan):
        text = render_summary(dated_loan)
        assert "Start Date:             2024-01-01" in text
        assert "End Date:               2025-01-01" in text


class TestRenderSchedule:
    def test_one_line_per_payment(self, five_year_loan):
        lines = render_schedule(five_year_loan).splitlines()
        # 3 header lines + column titles + rule
        assert len(lines) == 5 + 60

    def test_final_balance_zero(self, five_year_loan):
        last = render_schedule(five_year_loan).splitlines()[-1]
        assert last.split()[0] == "60"
        assert last.endswith("$0.00")

    def test_undated_rows(self, five_year_loan):
        first = render_schedule(five_year_loan).splitlines()[5]
        assert first.split()[1] == "-"

    def test_dated_rows(self, dated_loan):
        first = render_schedule(dated_loan).splitlines()[5]
        assert "2024-02-01" in first

    def test_zero_rate_amounts(self, zero_rate_loan):
        row = render_schedule(zero_rate_loan).splitlines()[5].split()
        assert row[2:] == ["$36,000.00", "$1,000.00", "$0.00", "$1,000.00", "$35,000.00"]

    def test_beginning_balance_column(self, zero_rate_loan):
        lines = render_schedule(zero_rate_loan).splitlines()
        assert "Beginning" in lines[3]
        assert lines[-1].split()[2] == "$1,000.00"


class TestRenderAmortization:
    def test_summary_then_schedule(self, dated_loan):
        text = render_amortization(dated_loan)
        assert text.index("Periodic Payment") < text.index("Amortization Schedule")

    def test_str_renders_report(self, dated_loan):
        assert str(dated_loan) == render_amortization(dated_loan)


class TestRenderYearly:
    def test_rows(self):
        loan = amortize(Decimal("24000"), Decimal("0"), 24, start_date=date(2024, 1, 1))
        lines = render_yearly(yearly_summary(loan)).splitlines()
        assert len(lines) == 5 + 2
        assert lines[-2].split() == ["1", "$12,000.00", "$0.00", "$12,000.00", "$12,000.00"]
        assert lines[-1].split() == ["2", "$12,000.00", "$0.00", "$12,000.00", "$0.00"]
