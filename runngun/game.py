"""The playable game: a pygame window, keyboard input and the main loop."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import pygame

from .boss import Boss
from .item import ItemType
from .joystick import Button
from .manager import GameManager
from .player import Player
from .render import WHITE, Color, Renderer
from .utils import Position, Viewport

FPS = 60
PLAYER_SIDE = 20
BOSS_SIDE = 100
ENEMY_SIDE = 20
ITEM_SIDE = 10
PLAYER_START = (301, 100)
BOSS_X = 2501
ENEMY_XS = (1301, 1601, 2001)
ITEM_X = 501

_KEY_BUTTONS = {
    pygame.K_a: Button.LEFT,
    pygame.K_d: Button.RIGHT,
    pygame.K_w: Button.UP,
    pygame.K_s: Button.DOWN,
    pygame.K_SPACE: Button.JUMP,
    pygame.K_RETURN: Button.FIRE,
}


class PygameRenderer(Renderer):
    """Draws onto a pygame surface."""

    def __init__(self, surface: pygame.Surface, font: pygame.font.Font | None = None) -> None:
        super().__init__()
        self.surface = surface
        self.font = font

    def filled_rectangle(self, x1, y1, x2, y2, color: Color) -> None:
        """Fill the rectangle with corners (x1, y1) and (x2, y2)."""
        left, right = sorted((int(x1), int(x2)))
        top, bottom = sorted((int(y1), int(y2)))
        rect = pygame.Rect(left, top, right - left, bottom - top)
        pygame.draw.rect(self.surface, color, rect)

    def filled_circle(self, x, y, radius, color: Color) -> None:
        """Fill a circle centred on (x, y)."""
        pygame.draw.circle(self.surface, color, (int(x), int(y)), int(radius))

    def line(self, x1, y1, x2, y2, color: Color, thickness) -> None:
        """Draw a line of the given thickness."""
        pygame.draw.line(
            self.surface, color, (int(x1), int(y1)), (int(x2), int(y2)), int(thickness)
        )

    def bitmap_region(self, sprite, sx, sy, sw, sh, dx, dy) -> None:
        """Blit the region (sx, sy, sw, sh) of ``sprite`` at (dx, dy)."""
        if sprite is None:
            return
        area = pygame.Rect(int(sx), int(sy), int(sw), int(sh))
        self.surface.blit(sprite, (int(dx), int(dy)), area)

    def text(self, x, y, message, color: Color) -> None:
        """Write ``message`` with its top-left corner at (x, y)."""
        if self.font is None:
            return
        self.surface.blit(self.font.render(message, True, color), (int(x), int(y)))


def handle_key(player: Player, key: int, pressed: bool) -> None:
    """Toggle the player's button for ``key``; jump reacts to presses only."""
    button = _KEY_BUTTONS.get(key)
    if button is None:
        return
    if button == Button.JUMP and not pressed:
        return
    player.control.toggle(button)


def build_world(screen_width: int, screen_height: int, sprite=None):
    """Create the level for a screen; return ``(viewport, player, manager)``."""
    viewport = Viewport(0.0, 0.0, 0.0, 0.0, float(screen_width), float(screen_height))
    start_x, start_y = PLAYER_START
    player = Player(PLAYER_SIDE, Position(start_x, start_y, start_x, start_y), viewport, sprite)

    ground_y = screen_width // 2
    boss = Boss(BOSS_SIDE, Position(BOSS_X, ground_y, BOSS_X, ground_y))
    manager = GameManager(player, boss)

    for x in ENEMY_XS:
        manager.spawn_enemy(ENEMY_SIDE, Position(x, ground_y, x, ground_y))
    manager.spawn_item(ITEM_SIDE, Position(ITEM_X, ground_y, ITEM_X, ground_y), ItemType.DOUBLE_JUMP)

    return viewport, player, manager


def _load_image(path: Path, alpha: bool) -> pygame.Surface | None:
    try:
        image = pygame.image.load(str(path))
    except (pygame.error, FileNotFoundError) as exc:
        print(f"cannot load {path}: {exc}", file=sys.stderr)
        return None
    return image.convert_alpha() if alpha else image.convert()


def _draw_background(surface: pygame.Surface, background: pygame.Surface, width: int, x_axis: int) -> None:
    surface.blit(background, (x_axis, 0))
    surface.blit(background, (x_axis + width, 0))


def _draw_debug(renderer: Renderer, player: Player, viewport: Viewport) -> None:
    pos = player.position
    lines = [
        (10, 10, f"STATE: {int(player.state)}"),
        (10, 100, f"HEALTH: {player.health}"),
        (10, 20, f"X-pos: {pos.x}"),
        (10, 30, f"Y-pos: {pos.y}"),
        (200, 10, f"XWorld-pos: {pos.world_x}"),
        (200, 20, f"YWorld-pos: {pos.world_y}"),
        (10, 40, f"X-hitbox: {player.hitbox.x:f}"),
        (10, 50, f"Y-hitbox: {player.hitbox.y:f}"),
        (10, 60, f"isOnGround: {int(player.is_on_ground)}"),
        (10, 70, f"isLeft: {int(player.is_left)}"),
        (10, 80, f"isRight: {int(player.is_right)}"),
        (10, 90, f"velocityY: {player.velocity_y:f}"),
        (200, 30, f"Xviewport: {viewport.offset_x:f}"),
        (200, 40, f"Yviewport: {viewport.offset_y:f}"),
    ]
    for x, y, message in lines:
        renderer.text(x, y, message, WHITE)


def main(argv=None) -> int:
    """Open the game window and run until it is closed or the player dies."""
    parser = argparse.ArgumentParser(prog="runngun", description="A side-scrolling shooter.")
    parser.add_argument("--assets", type=Path, default=Path("Assets/Sprites"),
                        help="directory holding the sprites")
    parser.add_argument("--windowed", action="store_true", help="run in a window")
    parser.add_argument("--width", type=int, default=1280, help="window width")
    parser.add_argument("--height", type=int, default=720, help="window height")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        if args.windowed:
            screen = pygame.display.set_mode((args.width, args.height))
        else:
            screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        screen_w, screen_h = screen.get_size()

        background = _load_image(args.assets / "background.jpg", alpha=False)
        if background is None:
            background = pygame.Surface((screen_w, screen_h))
        sprite = _load_image(args.assets / "playerMove.png", alpha=True)
        image_w = background.get_width()

        renderer = PygameRenderer(screen, pygame.font.Font(None, 16))
        viewport, player, _manager = build_world(screen_w, screen_h, sprite)

        clock = pygame.time.Clock()
        x_axis = 0
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                    handle_key(player, event.key, event.type == pygame.KEYDOWN)
            if player.health <= 0 or not running:
                break

            x_axis -= 1
            if x_axis <= -image_w:
                x_axis = 0
            _draw_background(screen, background, image_w, x_axis)
            player.update(renderer)
            _draw_debug(renderer, player, viewport)
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())