"""Streamlit hot-seat table for Truco Mineiro."""

from __future__ import annotations

import streamlit as st

from truco.config import configure_logging, load_settings
from truco.game import Game
from truco.service import GameService, GameView


def get_service() -> GameService:
    if "game_service" not in st.session_state:
        settings = load_settings()
        configure_logging(settings.log_level)
        st.session_state["game_service"] = GameService(Game(settings=settings))
    return st.session_state["game_service"]


def rerun() -> None:
    st.rerun()


def render_scoreboard(view: GameView) -> None:
    st.sidebar.header("Scoreboard")
    for player in view.players:
        marker = " (to play)" if player.is_turn else ""
        st.sidebar.write(f"{player.name}: {player.score}{marker}")
    st.sidebar.write(f"Hand {view.hand_number}, tricks {view.trick_points[0]} x {view.trick_points[1]}")
    if view.last_hand is not None:
        last = view.last_hand
        if last.winner_name is None:
            st.sidebar.caption(f"Hand {last.hand_number} was drawn.")
        else:
            st.sidebar.caption(f"Hand {last.hand_number}: {last.winner_name} scored {last.points}.")


def render_table(view: GameView) -> None:
    st.subheader("Table")
    if not view.trick.plays:
        st.write("No cards on the table.")
    for play in view.trick.plays:
        st.write(f"{view.players[play.player].name}: {play.label}")
    if view.trick_history:
        with st.expander("Tricks this hand"):
            for number, (lead, follow, outcome) in enumerate(view.trick_history, start=1):
                winner = outcome["winner"]
                result = "drawn" if winner is None else view.players[winner].name
                st.write(f"{number}. {lead['label']} / {follow['label']}: {result}")


def render_hand(service: GameService, view: GameView) -> None:
    player = view.players[view.current_player]
    st.subheader(f"{player.name}'s hand")
    if "start_turn" in view.available_actions:
        st.info(f"Pass the device to {player.name}.")
        if st.button("Start turn"):
            service.start_turn()
            rerun()
        return
    if not player.hand_visible:
        return
    cols = st.columns(max(len(player.hand_labels), 1))
    for index, label in enumerate(player.hand_labels):
        disabled = "play_card" not in view.available_actions
        if cols[index].button(label, key=f"card-{index}", disabled=disabled):
            service.play_card(player.seat, index)
            rerun()


def render_truco_controls(service: GameService, view: GameView) -> None:
    st.subheader(f"Bet: {view.truco.value}")
    actions = view.available_actions
    cols = st.columns(4)
    if cols[0].button("Truco!", disabled="call_truco" not in actions):
        service.call_truco()
        rerun()
    if cols[1].button("Accept", disabled="accept_truco" not in actions):
        service.accept_truco()
        rerun()
    if cols[2].button("Deny", disabled="deny_truco" not in actions):
        service.deny_truco()
        rerun()
    raise_label = f"Raise to {view.truco.next_value}" if view.truco.next_value else "Raise"
    if cols[3].button(raise_label, disabled="raise_truco" not in actions):
        service.raise_truco()
        rerun()


def main() -> None:
    st.set_page_config(page_title="Truco Mineiro", layout="wide")
    st.title("Truco Mineiro")

    service = get_service()
    view = service.view()
    render_scoreboard(view)
    if st.sidebar.button("Reset game"):
        service.reset_game()
        rerun()

    if view.match_winner is not None:
        st.success(f"{view.players[view.match_winner].name} wins the match!")
        return

    if view.last_action is not None and not view.last_action.ok:
        st.warning(view.last_action.reason)

    cols = st.columns(2)
    with cols[0]:
        render_table(view)
        render_hand(service, view)
    with cols[1]:
        render_truco_controls(service, view)
        with st.expander("Log", expanded=True):
            for entry in view.log:
                st.write(entry)


if __name__ == "__main__":
    main()
