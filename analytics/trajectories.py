# Import required modules
import numpy as np
import pandas as pd

from models import (
    AffordabilityInput,
    AffordabilityResult,
    MortgageSchedule,
    RentVsBuyResult,
)

SCHEDULE_COLUMNS = {
    "month": "Month",
    "balance": "Balance",
    "gross_paid": "Gross Paid",
    "capital_paid": "Capital Paid",
    "interest": "Interest",
    "deduction": "Deduction",
    "net_paid": "Net Paid",
}


def schedule_dataframe(schedule: MortgageSchedule) -> pd.DataFrame:
    """One row per month, in schedule order."""
    df = pd.DataFrame([row.__dict__ for row in schedule.rows], columns=list(SCHEDULE_COLUMNS))
    return df.rename(columns=SCHEDULE_COLUMNS)


def yearly_schedule_dataframe(schedule: MortgageSchedule) -> pd.DataFrame:
    """
    Schedule aggregated per year: payments summed over the 12 months, balance
    taken at the start of the year.
    """
    df = schedule_dataframe(schedule)
    df["Year"] = (df["Month"].to_numpy() - 1) // 12 + 1
    flows = ["Gross Paid", "Capital Paid", "Interest", "Deduction", "Net Paid"]
    yearly = df.groupby("Year", as_index=False).agg(
        {"Balance": "first", **{c: "sum" for c in flows}}
    )
    return yearly.rename(columns={"Balance": "Opening Balance"})


def schedule_comparison_dataframe(
    annuity: MortgageSchedule, linear: MortgageSchedule
) -> pd.DataFrame:
    """Annuity and linear payments side by side, month by month (chart data)."""
    return pd.DataFrame(
        {
            "Month": [row.month for row in annuity.rows],
            "Annuity Gross": [row.gross_paid for row in annuity.rows],
            "Annuity Capital": [row.capital_paid for row in annuity.rows],
            "Annuity Interest": [row.interest for row in annuity.rows],
            "Linear Gross": [row.gross_paid for row in linear.rows],
            "Linear Capital": [row.capital_paid for row in linear.rows],
            "Linear Interest": [row.interest for row in linear.rows],
        }
    )


def rent_vs_buy_dataframe(result: RentVsBuyResult) -> pd.DataFrame:
    df = pd.DataFrame(
        {
            "Year": [r.year for r in result.years],
            "Property Value": [r.property_value for r in result.years],
            "Remaining Loan": [r.remaining_loan for r in result.years],
            "Equity": [r.equity for r in result.years],
            "Total Rent Paid": [r.total_rent_paid for r in result.years],
            "Total Mortgage Paid": [r.total_mortgage_paid for r in result.years],
            "Net Worth Difference": [r.net_worth_difference for r in result.years],
        }
    )
    df["Advantage"] = np.where(df["Net Worth Difference"] >= 0, "Buy", "Rent")
    return df


def cost_breakdown(inputs: AffordabilityInput, res: AffordabilityResult) -> pd.DataFrame:
    """Return DataFrame with every acquisition cost; amounts add up to total_cost."""
    data = {
        "Category": [
            "Bank guarantee",
            "Transfer tax",
            "Mortgage guarantee fee",
            "Notary",
            "Valuation",
            "Financial advisor",
            "Real estate agent",
            "Structural survey",
        ],
        "Amount": [
            res.bank_guarantee,
            res.transfer_tax,
            res.guarantee_fee,
            inputs.notary,
            inputs.valuation,
            inputs.financial_advisor,
            inputs.real_estate_agent,
            inputs.structural_survey,
        ],
    }
    return pd.DataFrame(data)
