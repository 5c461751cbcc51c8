import pytest

from truco.errors import BetAtMaximum, InvalidAction, NoPendingTruco, SelfRaise, TrucoAlreadyCalled
from truco.negotiation import MAX_TRUCO_VALUE, TRUCO_LADDER, TrucoPhase, TrucoState, next_value


def test_ladder():
    assert TRUCO_LADDER == (1, 3, 6, 9, 12)
    assert next_value(1) == 3
    assert next_value(9) == 12
    assert next_value(12) is None
    with pytest.raises(ValueError):
        next_value(4)


def test_call_then_accept():
    truco = TrucoState()
    assert truco.phase is TrucoPhase.IDLE

    assert truco.call(0) == 3
    assert truco.phase is TrucoPhase.CALLED
    assert truco.caller == 0
    assert truco.pending_response

    assert truco.accept(1) == 3
    assert truco.phase is TrucoPhase.ACCEPTED
    assert not truco.pending_response


def test_call_twice_rejected():
    truco = TrucoState()
    truco.call(0)
    with pytest.raises(TrucoAlreadyCalled):
        truco.call(1)


def test_deny_concedes_value_minus_two():
    truco = TrucoState()
    truco.call(1)
    assert truco.deny(0) == (1, 1)

    raised = TrucoState()
    raised.call(0)
    raised.raise_bet(1)
    assert raised.deny(0) == (1, 4)


def test_raise_ladder_caps_at_twelve():
    truco = TrucoState()
    truco.call(0)
    assert truco.raise_bet(1) == 6
    assert truco.raise_bet(0) == 9
    assert truco.raise_bet(1) == 12

    with pytest.raises(BetAtMaximum):
        truco.raise_bet(0)
    assert truco.value == MAX_TRUCO_VALUE
    assert truco.caller == 1


def test_self_raise_rejected_and_state_unchanged():
    truco = TrucoState()
    truco.call(0)
    with pytest.raises(SelfRaise):
        truco.raise_bet(0)
    assert (truco.value, truco.caller, truco.pending_response) == (3, 0, True)


def test_accepted_bet_cannot_be_raised():
    truco = TrucoState()
    truco.call(0)
    truco.accept(1)
    assert not truco.can_raise(1)
    assert not truco.can_raise(0)
    for seat in (0, 1):
        with pytest.raises(NoPendingTruco):
            truco.raise_bet(seat)
    assert (truco.value, truco.caller, truco.pending_response) == (3, 0, False)
    assert truco.phase is TrucoPhase.ACCEPTED


def test_answers_need_a_pending_call():
    truco = TrucoState()
    with pytest.raises(NoPendingTruco):
        truco.accept(1)
    with pytest.raises(NoPendingTruco):
        truco.deny(1)
    with pytest.raises(NoPendingTruco):
        truco.raise_bet(1)

    truco.call(0)
    with pytest.raises(SelfRaise):
        truco.accept(0)
    assert issubclass(SelfRaise, InvalidAction)
