"""
Flight Lens page.

Run with: streamlit run flightlens/ui.py
(the API must be up: uvicorn flightlens.main:app)
"""
import logging

import streamlit as st

from flightlens.config import get_settings
from flightlens.client import FlightLensClient, LookupState, Status, run_lookup
from flightlens.client.report import FlightReport, reliability_band, reliability_color

logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

DISCLAIMER = (
    "**Crucial Disclaimer:** This data is *generated by a large language model for Flight Lens* "
    "and is not sourced from real-time flight tracking databases. It is illustrative and should "
    "**not** be used for actual flight planning or decision-making. Information may be inaccurate, "
    "incomplete, or entirely fictitious. When in doubt try again."
)


@st.cache_resource
def get_client() -> FlightLensClient:
    return FlightLensClient(get_settings().flightlens_api_url)


def get_state() -> LookupState:
    if "lookup" not in st.session_state:
        st.session_state.lookup = LookupState()
    return st.session_state.lookup


def on_input_change():
    state = get_state()
    state.edit(st.session_state.flight_input)
    # Show the normalized value back in the box
    st.session_state.flight_input = state.flight_number


def render_report(flight_number: str, report: FlightReport):
    st.subheader(f"Flight Lens Details for {flight_number}")
    st.markdown(
        f"**Make:** {report.make}  \n"
        f"**Model:** {report.model}  \n"
        f"**Age:** {report.age}  \n"
        f"**Registration:** {report.registration}  \n"
        f"**ICAO24:** {report.icao24}  \n"
        f"**Current Status:** {report.status}"
    )
    st.divider()
    st.markdown(
        f"**Origin Airport:** {report.origin}  \n"
        f"**Destination Airport:** {report.destination}  \n"
        f"**Scheduled Departure:** {report.scheduled_departure}  \n"
        f"**Scheduled Arrival:** {report.scheduled_arrival}"
    )
    st.divider()
    st.markdown(f"**Maintenance Summary:** {report.maintenance_history_summary}")
    st.divider()

    score = report.estimated_reliability_score
    st.markdown("#### Estimated Reliability Score")
    if score is None:
        st.markdown("N/A")
    else:
        band = reliability_band(score)
        st.markdown(f"## {score:g}/100 :{reliability_color(score)}[{band}]")
        st.progress(min(max(score / 100, 0.0), 1.0))

    st.caption(DISCLAIMER)


st.set_page_config(page_title="Flight Lens", page_icon="✈️", layout="centered")

state = get_state()

st.title("Flight Lens")
st.markdown("Enter a flight number to get aircraft details via Flight Lens.")

st.text_input(
    "Flight Number (IATA format, e.g., LH456):",
    key="flight_input",
    placeholder="e.g., LH456, UA870, BA249",
    on_change=on_input_change,
)

if st.button("Get Flight Lens Info ✨", disabled=not state.can_submit, use_container_width=True):
    with st.spinner("Generating Flight Data..."):
        run_lookup(state, get_client())

if state.status == Status.ERROR:
    message = f"**Error:** {state.error}"
    if state.hint:
        message += f"\n\n{state.hint}"
    st.error(message)

if state.status == Status.SUCCESS and state.report is not None:
    render_report(state.flight_number, state.report)
