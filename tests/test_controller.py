import pytest

from flappy_arcade.data_models import Bird, GameState, Pipe, PipeVariant


def test_initial_state(controller):
    assert controller.state is GameState.RUNNING
    assert controller.world.score == 0
    assert controller.world.pipes == []
    assert controller.world.bird.y == 308


def test_jump_sets_velocity(controller):
    controller.world.bird.velocity = 3.2
    controller.jump()
    assert controller.world.bird.velocity == -6.0


def test_mid_air_rejump_keeps_the_run(controller):
    controller.on_spawn_tick()
    controller.world.score = 2.5
    for _ in range(3):
        controller.jump()
        controller.on_frame()
    assert controller.state is GameState.RUNNING
    assert controller.world.score == 2.5
    assert len(controller.world.pipes) == 2


def _wreck(world, score, y, n_pipes):
    world.score = score
    world.bird.y = y
    world.pipes = [Pipe(x=100.0 + i, y=-300, variant=PipeVariant.TOP, passed=True)
                   for i in range(n_pipes)]
    world.state = GameState.OVER


@pytest.mark.parametrize("score, y, n_pipes", [(0, 620, 0), (3.5, 150.2, 4), (40, 0, 12)])
def test_jump_after_game_over_resets(controller, score, y, n_pipes):
    _wreck(controller.world, score, y, n_pipes)

    controller.jump()

    world = controller.world
    assert world.state is GameState.RUNNING
    assert world.score == 0
    assert world.pipes == []
    assert world.bird.y == 308
    assert world.bird.velocity == -6.0


def test_no_restart_without_input(controller):
    controller.world.bird = Bird(y=620)
    controller.on_frame()
    assert controller.state is GameState.OVER

    for _ in range(10):
        controller.on_frame()
        controller.on_spawn_tick()
    assert controller.state is GameState.OVER
    assert controller.world.pipes == []


def test_spawn_tick_adds_pair(controller):
    controller.on_spawn_tick()
    top, bottom = controller.world.pipes
    assert top.y == pytest.approx(-256)
    assert bottom.y == pytest.approx(341)


def test_play_through_a_pair(controller):
    """Hold the bird inside the gap until the pair scrolls past."""
    controller.on_spawn_tick()
    gap_top = controller.world.pipes[0].y + 512
    controller.world.bird.y = gap_top + 30

    for _ in range(200):
        bird = controller.world.bird
        bird.y, bird.velocity = gap_top + 30, 0.0
        controller.on_frame()

    assert controller.state is GameState.RUNNING
    assert controller.world.score == 1.0


def test_state_snapshot(controller):
    controller.on_spawn_tick()
    controller.on_frame()
    assert controller.world.to_state() == {
        "score": 0.0,
        "state": "running",
        "y": 308.4,
        "v": 0.4,
        "pipes": 2,
    }
