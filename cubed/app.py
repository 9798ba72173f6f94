"""Command line entry point and interactive game loop."""

from __future__ import annotations

import os
import sys
from array import array

from cubed.model import WIN_HEIGHT, WIN_WIDTH, Player, Scene, SceneError, Vector
from cubed.movement import Key, is_movement_key, move_player, rotate_left, rotate_right
from cubed.parsing import describe_scene, parse_scene
from cubed.raycast import Frame, render


def prepare_player(player: Player) -> None:
    """Set the camera plane perpendicular to the view direction."""
    player.plan = Vector(-player.dir.y, player.dir.x)


def handle_key(scene: Scene, keycode: int) -> bool:
    """Apply a key press; return False when the game should stop."""
    if keycode == Key.ESC:
        return False
    if is_movement_key(keycode):
        print(f"keycode = {int(keycode)}")
        move_player(scene, keycode)
    elif keycode == Key.LEFT:
        print(f"keycode = {int(keycode)}")
        rotate_left(scene.player)
    elif keycode == Key.RIGHT:
        print(f"keycode = {int(keycode)}")
        rotate_right(scene.player)
    return True


def _frame_bytes(frame: Frame) -> bytes:
    opaque = array("I" if array("I").itemsize == 4 else "L", (p | 0xFF000000 for p in frame.pixels))
    if sys.byteorder == "little":
        opaque.byteswap()
    return opaque.tobytes()


def run(scene: Scene) -> None:
    """Open the game window and play until it is closed or Escape is pressed."""
    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    import pygame

    pygame.init()
    try:
        try:
            screen = pygame.display.set_mode((WIN_WIDTH, WIN_HEIGHT))
        except pygame.error as exc:
            raise RuntimeError("cannot open the game window") from exc
        pygame.display.set_caption("cubed")
        pygame.key.set_repeat(200, 30)
        keymap = {
            pygame.K_ESCAPE: Key.ESC,
            pygame.K_LEFT: Key.LEFT,
            pygame.K_RIGHT: Key.RIGHT,
            pygame.K_w: Key.W,
            pygame.K_a: Key.A,
            pygame.K_s: Key.S,
            pygame.K_d: Key.D,
        }
        frame = Frame()

        def show() -> None:
            render(scene, frame)
            image = pygame.image.frombuffer(_frame_bytes(frame), (frame.width, frame.height), "ARGB")
            screen.blit(image, (0, 0))
            pygame.display.flip()

        show()
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return
            if event.type == pygame.KEYDOWN:
                if not handle_key(scene, keymap.get(event.key, event.key)):
                    return
                show()
    finally:
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Parse the scene file given on the command line and start the game."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        sys.stderr.write("Error\ninvalid number of arguments\n")
        return 1
    path = args[0]
    try:
        scene = parse_scene(path)
    except SceneError as exc:
        sys.stderr.write(f"Error\n{exc}\n")
        return 1
    print(describe_scene(scene, path), end="")
    prepare_player(scene.player)
    try:
        run(scene)
    except (RuntimeError, SceneError):
        sys.stderr.write("Error\nproblem while launching the game\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())