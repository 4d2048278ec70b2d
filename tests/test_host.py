"""
Tests for the frame driver and the injected clock / render sink.
"""
from wrapsnake.config import Config, LEFT
from wrapsnake.engine import Phase, SnakeEngine
from wrapsnake.host import FrameDriver, ManualClock


def make_driver(draw=None):
    eng = SnakeEngine(Config(seed=3))
    eng.initialize(600, 400, 20)
    clock = ManualClock(10.0)
    return eng, clock, FrameDriver(eng, now=clock, draw=draw)


class TestManualClock:
    def test_starts_where_told(self):
        assert ManualClock(2.5)() == 2.5

    def test_tick_moves_time(self):
        clock = ManualClock()
        assert clock.tick(0.25) == 0.25
        assert clock() == 0.25


class TestFrameDriver:
    def test_start_resets_and_primes_clock(self):
        eng, clock, driver = make_driver()
        driver.start()
        assert eng.phase is Phase.RUNNING
        assert eng.last_time == 10.0
        assert eng.steps == 0

    def test_tick_advances_with_clock(self):
        eng, clock, driver = make_driver()
        driver.start()
        eng.food = eng.grid.to_point(0, 0)
        clock.tick(0.5)
        assert driver.tick()
        assert eng.steps == 2
        assert driver.frames == 1

    def test_tick_draws_current_state(self):
        frames = []
        eng, clock, driver = make_driver(draw=lambda snake, food, score: frames.append((snake, food, score)))
        driver.start()
        clock.tick(0.25)
        driver.tick()

        assert frames == [(eng.snake, eng.food, eng.score)]

    def test_tick_reports_game_over(self):
        eng, clock, driver = make_driver()
        driver.start()
        eng.set_direction(LEFT)
        clock.tick(0.25)
        assert not driver.tick()
        assert eng.game_over

    def test_restart_after_game_over(self):
        eng, clock, driver = make_driver()
        driver.start()
        eng.set_direction(LEFT)
        clock.tick(0.25)
        driver.tick()

        driver.start()
        assert not eng.game_over
        assert driver.frames == 0
        clock.tick(0.25)
        assert driver.tick()


class TestPackageExports:
    def test_top_level_names(self):
        import wrapsnake
        from wrapsnake import engine, grid, host

        assert wrapsnake.SnakeEngine is engine.SnakeEngine
        assert wrapsnake.Grid is grid.Grid
        assert wrapsnake.FrameDriver is host.FrameDriver
        assert set(wrapsnake.__all__) >= {"SnakeEngine", "Grid", "Point", "FrameDriver", "ManualClock"}
