import dataclasses

import pytest

from kaalyatra.time_machine import (
    HistorySnapshot,
    TimeTraveler,
    TravelerState,
    TravelHistory,
)


def _travel(traveler, history, era_id):
    history.save(traveler)
    traveler.set_era(era_id)


# ── snapshots ───────────────────────────────────────────────


def test_snapshot_is_immutable():
    snapshot = HistorySnapshot(era_id="gupta_empire")
    with pytest.raises(dataclasses.FrozenInstanceError):
        snapshot.era_id = "maurya_empire"


def test_snapshot_is_a_copy_of_state():
    traveler = TimeTraveler()
    traveler.set_era("indus_valley")
    snapshot = traveler.save_state()
    traveler.set_era("mughal_empire")
    assert snapshot.era_id == "indus_valley"


def test_traveler_starts_unset():
    assert TimeTraveler().current_era_id is None


# ── undo ────────────────────────────────────────────────────


@pytest.mark.parametrize("start", [None, "maratha_empire"])
def test_undo_on_empty_history_is_a_no_op(start):
    traveler = TimeTraveler(TravelerState(current_era_id=start))
    history = TravelHistory()

    result = history.undo(traveler)

    assert result.restored is False
    assert result.nothing_to_undo
    assert traveler.current_era_id == start


def test_undo_on_empty_history_is_idempotent():
    traveler = TimeTraveler()
    history = TravelHistory()
    for _ in range(3):
        assert history.undo(traveler).nothing_to_undo
    assert traveler.current_era_id is None
    assert len(history) == 0


def test_one_undo_returns_to_era_before_travel():
    traveler = TimeTraveler()
    history = TravelHistory()
    _travel(traveler, history, "indus_valley")
    _travel(traveler, history, "gupta_empire")

    result = history.undo(traveler)

    assert result.restored
    assert result.era_id == "indus_valley"
    assert traveler.current_era_id == "indus_valley"


@pytest.mark.parametrize("eras", [
    ["indus_valley"],
    ["indus_valley", "gupta_empire", "mughal_empire"],
    ["maurya_empire", "maurya_empire", "maratha_empire", "indus_valley", "gupta_empire"],
])
def test_n_undos_restore_state_before_first_save(eras):
    traveler = TimeTraveler(TravelerState(current_era_id="maratha_empire"))
    history = TravelHistory()

    for era_id in eras:
        _travel(traveler, history, era_id)
    for _ in eras:
        assert history.undo(traveler).restored

    assert traveler.current_era_id == "maratha_empire"
    assert history.is_empty


def test_undo_unwinds_in_reverse_order():
    traveler = TimeTraveler()
    history = TravelHistory()
    for era_id in ["a", "b", "c"]:
        _travel(traveler, history, era_id)

    restored = [history.undo(traveler).era_id for _ in range(3)]

    assert restored == ["b", "a", None]


def test_peek_and_len():
    traveler = TimeTraveler()
    history = TravelHistory()
    assert history.peek() is None

    _travel(traveler, history, "a")
    _travel(traveler, history, "b")

    assert len(history) == 2
    assert history.peek() == HistorySnapshot(era_id="a")
