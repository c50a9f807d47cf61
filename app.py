import logging

import streamlit as st
import pandas as pd
import altair as alt

from config import DEFAULT_VALUES, INTEREST_RATES
from models import InvalidInputError, Scenario
from finance.rates import lookup_interest_rate
from analytics.analysis import calculate, breakeven_appreciation_rate
from analytics.trajectories import (
    cost_breakdown,
    rent_vs_buy_dataframe,
    schedule_comparison_dataframe,
    schedule_dataframe,
    yearly_schedule_dataframe,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("mortgage_app")

st.set_page_config(page_title="Mortgage Calculator (NL)", page_icon="🏠", layout="wide")

# ------------------------- UI LAYOUT -------------------------

st.title("🏠 Mortgage Calculator: Annuity & Linear")

left, right = st.columns([1, 3], gap="large")

with left:
    st.markdown("### Mortgage")
    defaults = DEFAULT_VALUES
    price = st.number_input("House price", min_value=0.0, value=defaults["price"], step=1000.0, format="%.0f", help="Purchase price of the property")
    savings = st.number_input("Savings", min_value=0.0, value=defaults["savings"], step=1000.0, format="%.0f", help="Own money put into the purchase")
    interest = st.number_input("Interest (annual %)", min_value=0.0, value=defaults["interest"], step=0.01, format="%.2f", help="Fixed annual mortgage rate")
    deduction = st.number_input("Tax deduction (% of interest)", min_value=0.0, max_value=100.0, value=defaults["deduction"], step=0.01, format="%.2f", help="Share of the interest returned through income tax")
    rent = st.number_input("Current monthly rent", min_value=0.0, value=defaults["rent"], step=50.0, format="%.0f")

    st.markdown("#### Costs")
    notary = st.number_input("Notary", min_value=0.0, value=defaults["notary"], step=50.0, format="%.0f")
    valuation = st.number_input("Valuation", min_value=0.0, value=defaults["valuation"], step=50.0, format="%.0f")
    financial_advisor = st.number_input("Financial advisor", min_value=0.0, value=defaults["financial_advisor"], step=50.0, format="%.0f")
    real_estate_agent = st.number_input("Real estate agent", min_value=0.0, value=defaults["real_estate_agent"], step=50.0, format="%.0f")
    structural_survey = st.number_input("Structural survey", min_value=0.0, value=defaults["structural_survey"], step=50.0, format="%.0f")

    st.markdown("#### Tax & comparison")
    is_first_time_buyer = st.checkbox("First-time buyer", value=defaults["is_first_time_buyer"], help="Starters under 35 pay no transfer tax below the price limit")
    transfer_tax_rate = st.slider("Transfer tax (%)", 0.0, 10.4, defaults["transfer_tax_rate"], 0.1)
    appreciation = st.slider("Property appreciation (annual %)", -10.0, 10.0, defaults["property_appreciation_rate"], 0.25)
    period = st.slider("Comparison period (years)", 1, 30, defaults["comparison_period_years"], 1)

    scenario = Scenario(
        price=price, interest=interest, deduction=deduction, savings=savings, rent=rent,
        notary=notary, valuation=valuation, financial_advisor=financial_advisor,
        real_estate_agent=real_estate_agent, structural_survey=structural_survey,
        is_first_time_buyer=is_first_time_buyer, transfer_tax_rate=transfer_tax_rate,
        property_appreciation_rate=appreciation, comparison_period_years=period,
    )

with right:
    try:
        res = calculate(scenario)
    except InvalidInputError as exc:
        logger.warning("rejected input %s", exc)
        st.error(f"Cannot calculate: **{exc.field}** {exc.reason}")
        st.stop()

    cur = "€"
    aff = res.affordability
    info_mortgage, info_costs, info_interest, info_rentbuy = st.tabs(["Mortgage", "Costs", "Interest", "Rent vs Buy"])

    with info_mortgage:
        m1, m2, m3, m4 = st.columns(4)
        m1.metric("Loan", f"{cur}{aff.loan:,.0f}", border=True)
        m2.metric("Loan-to-value", f"{aff.loan_to_value:.1%}", border=True)
        m3.metric("Annuity month 1 (net)", f"{cur}{res.annuity.rows[0].net_paid:,.2f}", border=True)
        m4.metric("Linear month 1 (net)", f"{cur}{res.linear.rows[0].net_paid:,.2f}", border=True)

        totals = pd.DataFrame(
            {
                "Annuity": [res.annuity.totals.total_paid_gross, res.annuity.totals.total_paid_net,
                            res.annuity.totals.total_interest_gross, res.annuity.totals.total_interest_net,
                            res.annuity.totals.total_invested_net],
                "Linear": [res.linear.totals.total_paid_gross, res.linear.totals.total_paid_net,
                           res.linear.totals.total_interest_gross, res.linear.totals.total_interest_net,
                           res.linear.totals.total_invested_net],
            },
            index=["Total paid (gross)", "Total paid (net)", "Interest (gross)", "Interest (net)", "Invested (net)"],
        )
        st.dataframe(totals.style.format("€{:,.0f}"), use_container_width=True)

    with info_costs:
        if aff.transfer_tax_exempt:
            st.success("First-time buyer: no transfer tax")
        if aff.guarantee_eligible:
            st.info(f"Mortgage guarantee available, fee {cur}{aff.guarantee_fee:,.0f}")
        cdf = cost_breakdown(scenario.to_affordability_input(), aff)
        st.dataframe(cdf.style.format({"Amount": "€{:,.2f}"}), use_container_width=True, hide_index=True)
        st.metric("Total costs", f"{cur}{aff.total_cost:,.0f}")

    with info_interest:
        rows = []
        for fixed_years in sorted(INTEREST_RATES):
            rows.append({
                "Fixed period": f"{fixed_years} years",
                "Your rate": lookup_interest_rate(fixed_years, aff.loan_to_value, aff.guarantee_eligible),
                **{("NHG" if k == "NHG" else f"≤{k:.0%}"): v for k, v in INTEREST_RATES[fixed_years].items()},
            })
        st.dataframe(pd.DataFrame(rows), use_container_width=True, hide_index=True)
        st.caption("Indicative rates. 'Your rate' is empty above 100% loan-to-value.")

    with info_rentbuy:
        rvb = res.rent_vs_buy
        final = rvb.final_year
        r1, r2, r3 = st.columns(3)
        r1.metric("Property value", f"{cur}{final.property_value:,.0f}", border=True)
        r2.metric("Your equity", f"{cur}{final.equity:,.0f}", border=True)
        r3.metric("Total rent paid", f"{cur}{final.total_rent_paid:,.0f}", border=True)

        diff = final.net_worth_difference
        if diff >= 0:
            st.success(f"**Buying ahead by {cur}{diff:,.0f}** after {period} years")
        else:
            st.error(f"**Renting ahead by {cur}{-diff:,.0f}** after {period} years")
        if rvb.break_even_year is not None:
            st.caption(f"Break-even at year {rvb.break_even_year}")

        g = breakeven_appreciation_rate(scenario)
        if g is not None:
            st.markdown(f"**Breakeven appreciation over {period}y:** {g:.2f}%")

        ydf = rent_vs_buy_dataframe(rvb)
        bar_chart = alt.Chart(ydf).mark_bar().encode(
            x=alt.X("Year:O", axis=alt.Axis(labelAngle=0)),
            y=alt.Y("Net Worth Difference:Q", axis=alt.Axis(format=",.0f")),
            color=alt.Color("Advantage:N", scale=alt.Scale(domain=["Buy", "Rent"], range=["#00C851", "#FF4444"])),
            tooltip=["Year:O", alt.Tooltip("Net Worth Difference:Q", format=",.0f")],
        ).properties(height=300)
        st.altair_chart(bar_chart, use_container_width=True)
        st.dataframe(ydf, use_container_width=True, hide_index=True)

    st.markdown("### Schedules")
    tab_annuity, tab_linear, tab_graph = st.tabs(["Annuity", "Linear", "Graph"])
    with tab_annuity:
        yearly = st.toggle("Per year", value=True, key="annuity_yearly")
        st.dataframe(yearly_schedule_dataframe(res.annuity) if yearly else schedule_dataframe(res.annuity),
                     use_container_width=True, hide_index=True)
    with tab_linear:
        yearly = st.toggle("Per year", value=True, key="linear_yearly")
        st.dataframe(yearly_schedule_dataframe(res.linear) if yearly else schedule_dataframe(res.linear),
                     use_container_width=True, hide_index=True)
    with tab_graph:
        comp = schedule_comparison_dataframe(res.annuity, res.linear)
        melted = pd.melt(comp, id_vars=["Month"], var_name="Series", value_name="Amount")
        line_chart = alt.Chart(melted).mark_line().encode(
            x=alt.X("Month:Q"),
            y=alt.Y("Amount:Q", axis=alt.Axis(format=",.0f")),
            color="Series:N",
            strokeDash=alt.condition(alt.FieldOneOfPredicate(field="Series", oneOf=["Linear Gross", "Linear Capital", "Linear Interest"]),
                                     alt.value([5, 3]), alt.value([1, 0])),
            tooltip=["Month:Q", "Series:N", alt.Tooltip("Amount:Q", format=",.2f")],
        ).properties(height=400)
        st.altair_chart(line_chart, use_container_width=True)
        st.caption("Monthly payment breakdown over 30 years. Solid lines = Annuity, dashed lines = Linear.")
