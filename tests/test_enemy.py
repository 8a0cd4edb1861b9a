import math

import pytest

from runngun.bullet import BULLET_LIFETIME
from runngun.enemy import ENEMY_HEALTH, PISTOL_COOLDOWN_ENEMY, NormalEnemy
from runngun.player import PLAYER_HEALTH, Player
from runngun.render import Renderer
from runngun.utils import Position, Vector2, Viewport


@pytest.fixture
def player():
    return Player(20, Position(301, 100, 301, 100), Viewport(width=800, height=600))


def test_new_enemy_defaults():
    enemy = NormalEnemy(20, Position(401, 100, 401, 100))
    assert enemy.health == ENEMY_HEALTH
    assert enemy.hitbox.hor == 20 and enemy.hitbox.vert == 20
    assert enemy.pistol.shots == []
    assert not enemy.is_dead


def test_shoot_at_aims_towards_player(player):
    enemy = NormalEnemy(20, Position(401, 100, 401, 100))
    bullet = enemy.shoot_at(player)
    assert enemy.pistol.shots[0] is bullet
    assert bullet.trajectory.x == pytest.approx(-1.0)
    assert bullet.trajectory.y == pytest.approx(0.0, abs=1e-9)


def test_shoot_at_trajectory_is_unit_length(player):
    enemy = NormalEnemy(20, Position(350, 160, 350, 160))
    bullet = enemy.shoot_at(player)
    assert math.hypot(bullet.trajectory.x, bullet.trajectory.y) == pytest.approx(1.0)


def test_check_distance_in_range_shoots_once(player):
    enemy = NormalEnemy(20, Position(401, 100, 401, 100))
    enemy.check_distance(player)
    assert len(enemy.pistol.shots) == 1
    assert enemy.pistol.timer == PISTOL_COOLDOWN_ENEMY
    enemy.check_distance(player)
    assert len(enemy.pistol.shots) == 1


def test_check_distance_out_of_range(player):
    enemy = NormalEnemy(20, Position(1301, 100, 1301, 100))
    enemy.check_distance(player)
    assert enemy.pistol.shots == []
    assert enemy.pistol.timer == 0


def test_player_bullet_hurts_enemy(player):
    enemy = NormalEnemy(20, Position(401, 100, 401, 100))
    player.pistol.shoot(enemy.position, Vector2(1.0, 0.0), 6.0)
    enemy.check_collision(player)
    assert enemy.health == ENEMY_HEALTH - 1
    assert player.pistol.shots == []


def test_enemy_bullet_hurts_player(player):
    enemy = NormalEnemy(20, Position(401, 100, 401, 100))
    enemy.pistol.shoot(player.position, Vector2(-1.0, 0.0), 6.0)
    enemy.check_collision(player)
    assert player.health == PLAYER_HEALTH - 1
    assert enemy.pistol.shots == []


def test_only_first_hit_counts(player):
    enemy = NormalEnemy(20, Position(401, 100, 401, 100))
    player.pistol.shoot(enemy.position, Vector2(1.0, 0.0), 6.0)
    player.pistol.shoot(enemy.position, Vector2(1.0, 0.0), 6.0)
    enemy.check_collision(player)
    assert enemy.health == ENEMY_HEALTH - 1
    assert len(player.pistol.shots) == 1


def test_missing_bullets_do_nothing(player):
    enemy = NormalEnemy(20, Position(1301, 400, 1301, 400))
    player.pistol.shoot(player.position, Vector2(1.0, 0.0), 6.0)
    enemy.check_collision(player)
    assert enemy.health == ENEMY_HEALTH
    assert len(player.pistol.shots) == 1


def test_dead_enemy_update_does_nothing(player):
    enemy = NormalEnemy(20, Position(1301, 100, 1000, 100))
    enemy.health = 0
    renderer = Renderer()
    enemy.update(player, renderer)
    assert renderer.commands == []
    assert enemy.position == Position(1301, 100, 1000, 100)
    assert enemy.is_dead


def test_update_places_enemy_relative_to_camera(player):
    enemy = NormalEnemy(20, Position(0, 0, 1301, 300))
    player.viewport.offset_x = 100
    renderer = Renderer()
    enemy.update(player, renderer)
    assert enemy.position.x == enemy.position.world_x - 100
    assert enemy.hitbox.x == float(enemy.position.world_x)
    assert renderer.commands[0].kind == "rectangle"


def test_update_ticks_cooldown(player):
    enemy = NormalEnemy(20, Position(1301, 300, 1301, 300))
    enemy.pistol.timer = 5
    enemy.update(player)
    assert enemy.pistol.timer == 4


def test_update_near_player_fires_and_moves_bullet(player):
    enemy = NormalEnemy(20, Position(351, 100, 351, 100))
    enemy.update(player)
    assert len(enemy.pistol.shots) == 1
    assert enemy.pistol.timer == PISTOL_COOLDOWN_ENEMY
    assert enemy.pistol.shots[0].timer_to_live == BULLET_LIFETIME - 1