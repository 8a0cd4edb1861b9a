# runngun

A small side-scrolling run-and-gun game drawn with pygame. The player runs
through a scrolling world, jumps, crouches and fires. The game objects —
player, bullets, enemies, items, ground blocks and a boss with a beam attack —
are plain classes that run without a window, drawing through a recording
`Renderer` that a pygame backend overrides.

## Installing

```
pip install .
```

## Playing

```
runngun
```

Options:

| Option            | Meaning                                              |
|-------------------|------------------------------------------------------|
| `--windowed`      | open a window instead of going full screen           |
| `--width N`       | window width with `--windowed` (default 1280)        |
| `--height N`      | window height with `--windowed` (default 720)        |
| `--assets DIR`    | directory holding `background.jpg` and `playerMove.png` (default `Assets/Sprites`) |

If the background cannot be loaded a blank surface is used; if the player
sprite cannot be loaded the player is not drawn. Either failure is reported on
standard error. The game runs at 60 frames per second with a scrolling
background and a debug overlay showing the player's state, position, hitbox,
flags, vertical velocity and the camera offset.

| Key    | Action |
|--------|--------|
| A / D  | run left / right |
| S      | crouch |
| Space  | jump; a second press in mid-air jumps again if the player holds a double-jump |
| Enter  | fire |
| W      | toggles the up button, which the player does not react to |

Each key toggles its button on press and again on release, so holding a key
keeps the button held; Space toggles on press only. The game ends when the
window is closed or the player's health reaches zero.

## What the game does not do yet

`runngun` builds the whole level — three enemies, a double-jump item and the
boss — but its main loop only advances the player. Enemies, items and the boss
are neither drawn nor updated on screen, so nothing shoots back and the boss
cannot be reached. There is no title screen, score, saving or sound. Ground
blocks exist as a class but none are placed in the level; the player simply
lands on a floor at half the viewport's width.

## Using the pieces

- `runngun.utils` — `Position` (screen `x`, `y` and `world_x`, `world_y`),
  `Viewport`, `Vector2`, the `State` and `Entity` enums, and `INV_FRAME`.
- `runngun.render` — `Renderer`, which records every drawing call in
  `commands` as `DrawCommand` values; colours `RED`, `GREEN`, `WHITE`.
- `runngun.hitbox.Hitbox` — a box centred on a point, with `overlaps(other)`
  (touching counts) and `draw(renderer, viewport)`.
- `runngun.joystick` — `Button` and `Joystick`; `toggle(button)` flips one
  button and ignores unknown ones.
- `runngun.bullet.Bullet` — lives 180 frames; `advance()` moves it one frame.
- `runngun.pistol.Pistol` — `shoot()`, `tick()` for the cooldown,
  `update_shots(viewport, renderer)` which drops expired or off-screen bullets,
  and `remove_first_hit(target)`.
- `runngun.player.Player` — raises `ValueError` if it does not fit in the
  viewport; `move()`, `shoot()`, `update(renderer)` and the state machine
  (`update_state()`, `enter_*()` and `on_*()` handlers).
- `runngun.ground.Ground` and `runngun.item.Item` with `ItemType`
  (`HEALTH` adds one health, `DOUBLE_JUMP` one double jump).
- `runngun.enemy.NormalEnemy` — fires at a player within 200 units; `is_dead`.
- `runngun.boss.Boss` with its `Power` beam; updating a boss with no health
  left raises `BossDefeated`.
- `runngun.manager.GameManager` — `spawn_enemy()`, `spawn_item()` and
  `update(renderer)`, which drops collected items and dead enemies, updates the
  rest, and updates the boss once no enemies remain.
- `runngun.game` — `PygameRenderer`, `handle_key(player, key, pressed)`,
  `build_world(screen_width, screen_height, sprite)` returning
  `(viewport, player, manager)`, and `main(argv)`.

Every `update()` accepts `renderer=None` to run the logic without drawing.

## Running the tests

```
pip install .[test]
pytest
```