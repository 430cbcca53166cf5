from wordkeys.engine import GuessHistory, KeyState, TileState


def test_append_and_keyboard():
    h = GuessHistory("CRANE")
    assert len(h) == 0
    assert h.keyboard()["R"] is KeyState.UNTESTED

    h.append("TRAIN")
    assert h.guesses == ("TRAIN",)
    assert h.keyboard()["R"] is KeyState.CONFIRMED
    assert h.keyboard()["T"] is KeyState.ELIMINATED


def test_keyboard_memo_tracks_length():
    h = GuessHistory("CRANE")
    h.append("TRAIN")
    first = h.keyboard()
    assert h.keyboard() is first

    h.append("CRANE")
    second = h.keyboard()
    assert second is not first
    assert second["N"] is KeyState.CONFIRMED


def test_reset_clears_round():
    h = GuessHistory("CRANE")
    h.append("CRANE")
    h.reset()
    assert len(h) == 0
    assert h.keyboard()["C"] is KeyState.UNTESTED

    h.append("CRANE")
    h.reset("SLATE")
    h.append("CRANE")
    assert h.target == "SLATE"
    assert h.keyboard()["E"] is KeyState.CONFIRMED
    assert h.keyboard()["C"] is KeyState.ELIMINATED


def test_rows_use_duplicate_rule():
    h = GuessHistory("CRANE")
    h.append("SHEEP")
    assert h.rows()[0][3] is TileState.PRESENT

    h = GuessHistory("CRANE", budget_duplicates=True)
    h.append("SHEEP")
    assert h.rows()[0][3] is TileState.ABSENT


def test_guesses_view_is_read_only():
    h = GuessHistory("CRANE")
    h.append("TRAIN")
    assert list(h) == ["TRAIN"]
    assert isinstance(h.guesses, tuple)


def test_reset_drops_stale_keyboard():
    h = GuessHistory("CRANE")
    h.append("TRAIN")
    assert h.keyboard()["R"] is KeyState.CONFIRMED
    h.reset()
    h.append("SHEEP")
    assert h.keyboard()["R"] is KeyState.UNTESTED
    assert h.keyboard()["S"] is KeyState.ELIMINATED
