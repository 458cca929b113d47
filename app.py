import logging
import time
from collections import Counter
from typing import Dict, List, Optional

import streamlit as st
from st_keyup import st_keyup  # type: ignore

from grid_snake.actions import Direction
from grid_snake.config import GameConfig, load_config
from grid_snake.input import KeyEvent, key_to_direction
from grid_snake.renderer.texture import TextureRenderer
from grid_snake.score_store import JsonFileScoreStore
from grid_snake.session import GameSession

logging.basicConfig(level=logging.INFO)

# The text box only reports typed characters, so arrow keys are mirrored on IJKL.
TYPED_KEY_NAMES: Dict[str, str] = {
    "i": "ArrowUp",
    "k": "ArrowDown",
    "j": "ArrowLeft",
    "l": "ArrowRight",
}

st.set_page_config(layout="centered", page_title="Snake")
st.markdown(
    """
    <style>
        header, footer, #MainMenu { visibility: hidden; }
        .stMainBlockContainer {
            padding-top: 0;
            padding-bottom: 0;
        }
    </style>
""",
    unsafe_allow_html=True,
)


def set_default_session() -> None:
    if "session" not in st.session_state:
        config = load_config()
        store = JsonFileScoreStore(config.highscore_path)
        st.session_state["config"] = config
        st.session_state["session"] = GameSession.create(config, store)
        st.session_state["renderer"] = TextureRenderer()
        st.session_state["last_tick"] = time.monotonic()


def get_keyboard_direction() -> Optional[Direction]:
    value: str = (
        st_keyup(
            "control",
            label_visibility="collapsed",
            key="snake_key_input",
            placeholder="Type: IJKL to steer, s or space to stop",
        )
        or ""
    )
    prev_value: str = st.session_state.get("snake_key_input_prev", "")
    st.session_state["snake_key_input_prev"] = value
    if value == prev_value:
        return None
    new_values: List[str] = list((Counter(value) - Counter(prev_value)).elements())
    if not new_values:
        return None
    key: str = new_values[-1]
    return key_to_direction(KeyEvent(TYPED_KEY_NAMES.get(key, key)))


def direction_buttons(session: GameSession) -> None:
    _, up_col, _ = st.columns([1, 1, 1])
    with up_col:
        if st.button("⬆️", key="up_btn", use_container_width=True):
            session.enqueue(Direction.UP)
    left_col, stop_col, right_col = st.columns([1, 1, 1])
    with left_col:
        if st.button("⬅️", key="left_btn", use_container_width=True):
            session.enqueue(Direction.LEFT)
    with stop_col:
        if st.button("⏸️", key="stop_btn", use_container_width=True):
            session.enqueue(Direction.STOP)
    with right_col:
        if st.button("➡️", key="right_btn", use_container_width=True):
            session.enqueue(Direction.RIGHT)
    _, down_col, _ = st.columns([1, 1, 1])
    with down_col:
        if st.button("⬇️", key="down_btn", use_container_width=True):
            session.enqueue(Direction.DOWN)


# --------- Main App ---------
set_default_session()
config: GameConfig = st.session_state["config"]
session: GameSession = st.session_state["session"]
renderer: TextureRenderer = st.session_state["renderer"]

direction = get_keyboard_direction()
if direction is not None:
    session.enqueue(direction)


@st.fragment(run_every=config.tick_interval)
def board() -> None:
    # Full reruns also execute the fragment; only tick once per interval.
    now = time.monotonic()
    if now - st.session_state["last_tick"] >= config.tick_interval:
        st.session_state["last_tick"] = now
        session.tick()

    state = session.snapshot()
    st.image(renderer.render(state), use_container_width=True)
    score_col, high_col = st.columns([1, 1])
    with score_col:
        st.markdown(f"### Score: {state.score}")
    with high_col:
        st.markdown(f"### Highscore: {state.high_score}")
    if state.last_score is not None:
        st.caption(f"Last run: {state.last_score}")


board()
direction_buttons(session)

with st.expander("State"):
    snapshot = session.snapshot()
    st.json(
        {
            "snake": [[p.row, p.col] for p in snapshot.snake],
            "directions": [str(d) for d in snapshot.directions],
            "food": None
            if snapshot.food is None
            else [snapshot.food.row, snapshot.food.col],
            "turn": snapshot.turn,
            "runs": snapshot.runs,
        },
        expanded=1,
    )
