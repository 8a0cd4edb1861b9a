from runngun.ground import Ground
from runngun.player import Player
from runngun.render import GREEN, Renderer
from runngun.utils import Position, Viewport


def make_player(offset_x=0.0, offset_y=0.0):
    viewport = Viewport(0.0, 0.0, offset_x, offset_y, 800.0, 600.0)
    return Player(20, Position(400, 100, 400, 100), viewport)


def test_hitbox_starts_at_screen_position():
    ground = Ground(30, Position(10, 20, 500, 200))
    assert ground.hitbox.x == 10.0
    assert ground.hitbox.y == 20.0
    assert ground.hitbox.hor == 30
    assert ground.hitbox.vert == 30


def test_update_moves_relative_to_camera():
    ground = Ground(30, Position(0, 0, 500, 200))
    player = make_player(offset_x=100.0, offset_y=50.0)
    ground.update(player)
    assert ground.position.x == 400
    assert ground.position.y == 150
    assert ground.hitbox.x == 500.0
    assert ground.hitbox.y == 200.0


def test_update_draws_centred_square():
    ground = Ground(30, Position(0, 0, 500, 200))
    renderer = Renderer()
    ground.update(make_player(), renderer)
    (command,) = renderer.commands
    x1, y1, x2, y2, color = command.args
    assert command.kind == "rectangle"
    assert color == GREEN
    assert (x1 + x2) / 2 == ground.position.x
    assert (y1 + y2) / 2 == ground.position.y
    assert x2 - x1 == ground.side


def test_position_copied():
    pos = Position(1, 2, 3, 4)
    ground = Ground(10, pos)
    pos.world_x = 99
    assert ground.position.world_x == 3