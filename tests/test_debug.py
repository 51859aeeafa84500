from tictactoe.debug import DebugLevel, DebugManager, debug


def test_level_filtering():
    debug.configure(level=DebugLevel.INFO)

    assert debug.is_enabled_for(DebugLevel.ERROR)
    assert debug.is_enabled_for(DebugLevel.INFO)
    assert not debug.is_enabled_for(DebugLevel.DEBUG)


def test_component_filtering():
    debug.configure(level=DebugLevel.TRACE, components=["bot"])

    assert debug.is_enabled_for(DebugLevel.DEBUG, "bot")
    assert not debug.is_enabled_for(DebugLevel.DEBUG, "board")
    assert debug.is_enabled_for(DebugLevel.DEBUG)


def test_disabled_and_none_level():
    debug.configure(level=DebugLevel.DEBUG, enabled=False)
    assert not debug.is_enabled_for(DebugLevel.ERROR)

    debug.configure(level=DebugLevel.NONE, enabled=True)
    assert not debug.is_enabled_for(DebugLevel.ERROR)


def test_set_from_string():
    debug.set_from_string("trace")
    assert debug.level == DebugLevel.TRACE

    debug.set_from_string("nonsense")
    assert debug.level == DebugLevel.TRACE


def test_timers():
    manager = DebugManager("tictactoe.test")
    assert manager.end_timer("missing") is None

    manager.start_timer("work")
    elapsed = manager.end_timer("work")
    assert elapsed is not None and elapsed >= 0


def test_log_file(tmp_path):
    log_file = tmp_path / "game.log"
    manager = DebugManager("tictactoe.filetest")
    manager.configure(level=DebugLevel.INFO, log_file=str(log_file))

    manager.info("hello", "board")
    manager.debug("hidden", "board")
    manager.configure(log_file="")

    content = log_file.read_text()
    assert "[board] hello" in content
    assert "hidden" not in content
