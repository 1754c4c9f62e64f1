from kaalyatra.eras import CATALOG, get_era_by_id
from kaalyatra.game_state import GameMode, GamePhase, GameState


def test_start_game_creates_profile_only_for_scholar():
    scholar = GameState()
    scholar.start_game("Asha", GameMode.SCHOLAR)
    assert scholar.profile.catalog_size == len(CATALOG)
    assert scholar.phase == GamePhase.MENU

    classic = GameState()
    classic.start_game("Asha", GameMode.CLASSIC)
    assert classic.profile is None


def test_travel_then_undo_returns_to_previous_era():
    state = GameState()
    state.start_game("Asha", GameMode.SCHOLAR)
    state.travel_to(get_era_by_id("gupta_empire"))
    state.travel_to(get_era_by_id("mughal_empire"))

    assert state.current_era.id == "mughal_empire"
    assert state.profile.era_visits == {"gupta_empire": 1, "mughal_empire": 1}

    result = state.undo_travel()

    assert result.era_id == "gupta_empire"
    assert state.current_era.id == "gupta_empire"


def test_undo_with_no_travel_reports_nothing():
    state = GameState()
    state.start_game("Asha", GameMode.CLASSIC)
    result = state.undo_travel()
    assert result.nothing_to_undo
    assert state.current_era is None
    assert state.get_events_by_type("undo")[0]["restored"] is False


def test_status_and_end():
    state = GameState()
    state.start_game("Asha", GameMode.SCHOLAR)
    state.travel_to(CATALOG[0])
    status = state.get_status()
    assert status["current_era"] == CATALOG[0].name
    assert status["history_depth"] == 1
    assert status["score"] == 0

    state.end_game()
    assert state.phase == GamePhase.ENDED
    assert state.ended_at is not None
