from datetime import date, timedelta

import pandas as pd
import streamlit as st
import streamlit.components.v1 as components

from actions import calculate, generate_message
from clipboard import copy_snippet
from exceptions import InviteError
from messages import conversion_rows
from models import LANGUAGES, MeetingSpec
from timezone_service import is_valid_timezone
from utils import CONFIG_PATH, Registry, city_label, load_config

LANGUAGE_LABELS = {'es': 'Español', 'en': 'English'}

config = load_config(CONFIG_PATH)
timezones = [tz for tz in config.timezones if is_valid_timezone(tz)]
if config.base_timezone not in timezones:
    timezones.insert(0, config.base_timezone)

# Initialize session state
if "registry" not in st.session_state:
    st.session_state["registry"] = Registry.from_config(config.participants)
for key in ("error", "result", "message"):
    st.session_state.setdefault(key, None)

registry = st.session_state["registry"]

# ===== Callbacks =====

def read_spec():
    meeting_date = st.session_state.get("meeting_date")
    meeting_time = st.session_state.get("meeting_time")
    return MeetingSpec(
        title=st.session_state.get("meeting_title", ""),
        date=meeting_date.isoformat() if meeting_date else "",
        time=meeting_time.strftime("%H:%M") if meeting_time else "",
        base_timezone=st.session_state.get("base_timezone", config.base_timezone),
        language=st.session_state.get("language", config.language),
    )

def on_add_participant():
    try:
        registry.add(st.session_state.get("participant_name", ""), st.session_state.get("participant_timezone"))
        st.session_state["error"] = None
    except InviteError as e:
        st.session_state["error"] = str(e)

def on_remove_participant(participant_id):
    registry.remove(participant_id)

def on_calculate():
    try:
        st.session_state["result"] = calculate(read_spec(), registry)
        st.session_state["error"] = None
    except InviteError as e:
        st.session_state["error"] = str(e)

def on_generate():
    try:
        _, message = generate_message(read_spec(), registry)
        st.session_state["message"] = message
        st.session_state["error"] = None
    except InviteError as e:
        st.session_state["error"] = str(e)

# ===== Page =====

st.title("🌎 Meeting Time Zone Invite")

st.markdown("""
**Instructions:**
- Fill in the meeting details and the base time zone.
- Add every participant with their time zone.
- Calculate the local times or generate a message ready to share.
- To run this UI: `streamlit run ui.py`
""")

if st.session_state["error"]:
    st.error(st.session_state["error"])

# Meeting details
st.header("Meeting Details")
st.text_input("Meeting title", key="meeting_title")
date_col, time_col = st.columns(2)
date_col.date_input("Date", date.today() + timedelta(days=1), key="meeting_date")
time_col.time_input("Time", value=None, key="meeting_time")
tz_col, lang_col = st.columns(2)
tz_col.selectbox("Base time zone", timezones, index=timezones.index(config.base_timezone), key="base_timezone")
lang_col.selectbox(
    "Message language", LANGUAGES,
    index=LANGUAGES.index(config.language) if config.language in LANGUAGES else 0,
    format_func=LANGUAGE_LABELS.get, key="language",
)

# Participants
st.header("Participants")
with st.form("add_participant_form", clear_on_submit=True):
    name_col, zone_col = st.columns([3, 2])
    name_col.text_input("Participant name", key="participant_name")
    zone_col.selectbox("Time zone", timezones, key="participant_timezone")
    st.form_submit_button("➕ Add participant", on_click=on_add_participant)

for participant in registry.list():
    cols = st.columns([5, 4, 2])
    cols[0].text(participant.name)
    cols[1].text(city_label(participant.timezone))
    cols[2].button("Delete", key=f"remove_{participant.id}", on_click=on_remove_participant, args=(participant.id,))

# Actions
calc_col, gen_col = st.columns(2)
calc_col.button("🕒 Calculate times", key="calculate", on_click=on_calculate)
gen_col.button("✉️ Generate message", key="generate", on_click=on_generate)

# Results
result = st.session_state["result"]
if result is not None:
    st.header("Results")
    st.markdown(f"📍 Hora base: **{result.base_formatted}** ({result.base_city})")
    st.dataframe(pd.DataFrame(conversion_rows(result)), hide_index=True, use_container_width=True)
    card_cols = st.columns(min(len(result), 3) or 1)
    for i, conv in enumerate(result):
        with card_cols[i % len(card_cols)].container(border=True):
            st.text(conv.participant.name)
            st.caption(conv.city)
            st.markdown(conv.formatted)

message = st.session_state["message"]
if message is not None:
    st.header("Message")
    st.text_area("Generated message", message, height=400, disabled=True)
    components.html(copy_snippet(message), height=140)
