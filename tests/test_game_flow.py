import os
from pathlib import Path

from truco.cards import Card, Rank, Suit
from truco.config import Settings
from truco.game import Game
from truco.hand import HandPhase
from truco.log import EventKind


def new_game(*hands, **settings) -> Game:
    game = Game("Ana", "Bia", seed=3, settings=Settings(**settings))
    if hands:
        game.deal_hand(hands)
    return game


def take_turn(game: Game, seat: int, index: int = 0) -> None:
    assert game.start_turn().ok
    assert game.play_card(seat, index).ok


def test_fresh_game_deals_three_cards_each():
    game = Game(seed=5, settings=Settings())
    assert [len(player.hand) for player in game.players] == [3, 3]
    assert game.deck.remaining() == 34
    assert game.current_player == 0
    assert [player.is_turn for player in game.players] == [True, False]
    assert not any(player.has_started_turn for player in game.players)
    dealt = set(game.players[0].hand) | set(game.players[1].hand)
    assert len(dealt) == 6
    assert dealt.isdisjoint(game.deck.cards)


def test_runs_without_the_developer_environment(tmp_path):
    assert Path.cwd() == tmp_path
    assert not any(f"TRUCO_{name.upper()}" in os.environ for name in Settings.model_fields)
    settings = Settings()
    assert (settings.target_score, settings.hand_size, settings.seed) == (12, 3, None)


def test_missing_names_fall_back_to_placeholders():
    game = Game(None, "  ", seed=1, settings=Settings())
    assert [player.name for player in game.players] == ["Player 1", "Player 2"]


def test_zap_beats_pica_fumo_in_first_trick():
    game = new_game(
        [Card(Rank.FOUR, Suit.CLUBS), Card(Rank.SEVEN, Suit.HEARTS), Card(Rank.THREE, Suit.SPADES)],
        [Card(Rank.SEVEN, Suit.DIAMONDS), Card(Rank.TWO, Suit.CLUBS), Card(Rank.KING, Suit.HEARTS)],
    )

    take_turn(game, 0)
    assert game.current_player == 1
    take_turn(game, 1)

    assert game.hand.trick_points == [1, 0]
    assert game.hand.last_trick_winner == 0
    assert game.current_player == 0
    assert game.trick.is_empty()
    assert game.hand.phase is HandPhase.DEALT


def test_card_played_and_trick_resolved_are_separate_events():
    game = new_game(
        [Card(Rank.FOUR, Suit.CLUBS), Card(Rank.SEVEN, Suit.HEARTS), Card(Rank.THREE, Suit.SPADES)],
        [Card(Rank.SEVEN, Suit.DIAMONDS), Card(Rank.TWO, Suit.CLUBS), Card(Rank.KING, Suit.HEARTS)],
    )
    take_turn(game, 0)
    take_turn(game, 1)

    kinds = [event.kind for event in game.log.events]
    assert kinds.count(EventKind.CARD_PLAYED) == 2
    played = kinds.index(EventKind.CARD_PLAYED)
    resolved = kinds.index(EventKind.TRICK_RESOLVED)
    assert played < resolved
    assert game.log.events[played].card == Card(Rank.FOUR, Suit.CLUBS)
    assert "played a card." in game.log.events[played].message
    assert "Ana won trick 1" in game.log.events[resolved].message


def test_hand_ends_after_two_trick_points_without_third_trick():
    game = new_game(
        [Card(Rank.FOUR, Suit.CLUBS), Card(Rank.SEVEN, Suit.HEARTS), Card(Rank.THREE, Suit.SPADES)],
        [Card(Rank.SEVEN, Suit.DIAMONDS), Card(Rank.TWO, Suit.CLUBS), Card(Rank.KING, Suit.HEARTS)],
    )
    take_turn(game, 0)
    take_turn(game, 1)
    take_turn(game, 0)
    take_turn(game, 1)

    assert game.scores() == (1, 0)
    result = game.hand_history[-1]
    assert result.winner == 0
    assert result.points == 1
    assert result.hand_number == 1

    # A new hand is already dealt.
    assert game.hand_number == 2
    assert [len(player.hand) for player in game.players] == [3, 3]
    assert game.hand.trick_count == 0
    assert game.hand.trick_points == [0, 0]
    assert game.truco.value == 1
    assert len(game.log) == 0


def test_three_tricks_level_is_a_drawn_hand():
    game = new_game(
        [Card(Rank.FIVE, Suit.CLUBS), Card(Rank.THREE, Suit.CLUBS), Card(Rank.FOUR, Suit.HEARTS)],
        [Card(Rank.FIVE, Suit.HEARTS), Card(Rank.KING, Suit.SPADES), Card(Rank.QUEEN, Suit.DIAMONDS)],
    )
    for _ in range(3):
        leader = game.current_player
        take_turn(game, leader)
        take_turn(game, 1 - leader)

    assert game.scores() == (0, 0)
    assert game.hand_history[-1].winner is None
    assert game.hand_number == 2


def test_drawn_trick_keeps_the_leader_of_that_trick():
    game = new_game(
        [Card(Rank.FOUR, Suit.SPADES), Card(Rank.SIX, Suit.CLUBS), Card(Rank.THREE, Suit.CLUBS)],
        [Card(Rank.FIVE, Suit.SPADES), Card(Rank.SIX, Suit.HEARTS), Card(Rank.TWO, Suit.DIAMONDS)],
    )
    take_turn(game, 0)
    take_turn(game, 1)
    assert game.current_player == 1

    take_turn(game, 1)
    take_turn(game, 0)
    assert game.hand.last_trick_winner == -1
    assert game.current_player == 1


def test_first_trick_drawn_seat_zero_keeps_lead():
    game = new_game(
        [Card(Rank.KING, Suit.CLUBS), Card(Rank.SIX, Suit.CLUBS), Card(Rank.THREE, Suit.CLUBS)],
        [Card(Rank.KING, Suit.HEARTS), Card(Rank.SIX, Suit.HEARTS), Card(Rank.TWO, Suit.DIAMONDS)],
    )
    take_turn(game, 0)
    take_turn(game, 1)
    assert game.hand.trick_points == [0, 0]
    assert game.current_player == 0


def test_turn_passes_only_after_the_lead_card():
    game = new_game(
        [Card(Rank.FOUR, Suit.CLUBS), Card(Rank.SEVEN, Suit.HEARTS), Card(Rank.THREE, Suit.SPADES)],
        [Card(Rank.SEVEN, Suit.DIAMONDS), Card(Rank.TWO, Suit.CLUBS), Card(Rank.KING, Suit.HEARTS)],
    )
    take_turn(game, 0)
    assert [player.is_turn for player in game.players] == [False, True]
    assert not game.players[1].has_started_turn

    # Seat 1 loses the second card; the winner (seat 0) gets the turn, not "the other seat".
    take_turn(game, 1)
    assert [player.is_turn for player in game.players] == [True, False]


def test_out_of_turn_and_bad_index_are_rejected_without_state_change():
    game = new_game(
        [Card(Rank.FOUR, Suit.CLUBS), Card(Rank.SEVEN, Suit.HEARTS), Card(Rank.THREE, Suit.SPADES)],
        [Card(Rank.SEVEN, Suit.DIAMONDS), Card(Rank.TWO, Suit.CLUBS), Card(Rank.KING, Suit.HEARTS)],
    )

    result = game.play_card(1, 0)
    assert not result.ok
    assert "not Bia's turn" in result.reason

    result = game.play_card(0, 0)
    assert not result.ok
    assert "start their turn" in result.reason

    assert game.start_turn().ok
    assert not game.start_turn().ok
    assert not game.play_card(0, 3).ok
    assert not game.play_card(0, -1).ok
    assert not game.play_card(2, 0).ok

    assert [len(player.hand) for player in game.players] == [3, 3]
    assert game.trick.is_empty()
    assert game.current_player == 0
    assert game.log.last().kind is EventKind.ACTION_REJECTED
    assert game.last_result.action == "play_card"


def test_alternating_hand_leader():
    game = Game(seed=8, settings=Settings(alternate_hand_leader=True))
    assert game.current_player == 0
    game.end_hand(None, reason="test")
    assert game.hand_number == 2
    assert game.current_player == 1


def test_reset_game_clears_scores_and_history():
    game = new_game(
        [Card(Rank.FOUR, Suit.CLUBS), Card(Rank.SEVEN, Suit.HEARTS), Card(Rank.THREE, Suit.SPADES)],
        [Card(Rank.SEVEN, Suit.DIAMONDS), Card(Rank.TWO, Suit.CLUBS), Card(Rank.KING, Suit.HEARTS)],
    )
    for seat in (0, 1, 0, 1):
        take_turn(game, seat)
    assert game.scores() == (1, 0)

    assert game.reset_game().ok
    assert game.scores() == (0, 0)
    assert game.hand_history == []
    assert game.hand_number == 1
    assert [len(player.hand) for player in game.players] == [3, 3]
    assert game.current_player == 0
