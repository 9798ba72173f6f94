import math

import pytest

from cubed.app import handle_key, main, prepare_player
from cubed.model import WIN_WIDTH, Direction, Player, Scene, Texture, Vector
from cubed.movement import Key
from cubed.raycast import cast_ray

GRID = ["11111", "10001", "10N01", "10001", "11111"]


def make_scene(direction=Vector(0.0, -1.0)):
    textures = {
        d: Texture(path=f"{d.value}.xpm", width=4, height=4, data=[[0] * 4 for _ in range(4)])
        for d in Direction
    }
    player = Player(pos=Vector(2.5, 2.5), dir=direction)
    prepare_player(player)
    return Scene(textures=textures, grid=list(GRID), player=player)


def snapshot(player):
    return (player.pos, player.dir, player.plan)


@pytest.mark.parametrize(
    "direction",
    [Vector(0.0, -1.0), Vector(0.0, 1.0), Vector(1.0, 0.0), Vector(-1.0, 0.0)],
)
def test_prepare_player_plane_is_perpendicular(direction):
    player = Player(dir=direction)
    prepare_player(player)
    assert player.dir.x * player.plan.x + player.dir.y * player.plan.y == pytest.approx(0.0)
    assert math.hypot(player.plan.x, player.plan.y) == pytest.approx(1.0)


def test_prepare_player_right_edge_looks_east_when_facing_north():
    scene = make_scene()
    right = cast_ray(scene, WIN_WIDTH - 1, WIN_WIDTH)
    left = cast_ray(scene, 0, WIN_WIDTH)
    assert right.ray_dir.x > 0
    assert left.ray_dir.x < 0


def test_escape_stops_game():
    scene = make_scene()
    before = snapshot(scene.player)
    assert handle_key(scene, Key.ESC) is False
    assert snapshot(scene.player) == before


def test_movement_key_moves_and_reports(capsys):
    scene = make_scene()
    start = scene.player.pos
    assert handle_key(scene, Key.W) is True
    assert scene.player.pos != start
    assert scene.player.pos.y < start.y
    assert capsys.readouterr().out == f"keycode = {int(Key.W)}\n"


def test_left_and_right_rotate(capsys):
    scene = make_scene()
    start_dir = scene.player.dir
    assert handle_key(scene, Key.LEFT) is True
    assert scene.player.dir != start_dir
    assert math.hypot(scene.player.dir.x, scene.player.dir.y) == pytest.approx(1.0)
    assert handle_key(scene, Key.RIGHT) is True
    assert scene.player.dir.x == pytest.approx(start_dir.x, abs=1e-12)
    assert scene.player.dir.y == pytest.approx(start_dir.y)
    out = capsys.readouterr().out
    assert out == f"keycode = {int(Key.LEFT)}\nkeycode = {int(Key.RIGHT)}\n"


def test_unknown_key_changes_nothing(capsys):
    scene = make_scene()
    before = snapshot(scene.player)
    assert handle_key(scene, 0) is True
    assert snapshot(scene.player) == before
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize("argv", [[], ["a.cub", "b.cub"]])
def test_main_rejects_wrong_argument_count(argv, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().err.startswith("Error\n")


def test_main_rejects_bad_extension(capsys):
    assert main(["scene.txt"]) == 1
    err = capsys.readouterr().err
    assert err.startswith("Error\n")
    assert "extension" in err


def test_main_rejects_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.cub")]) == 1
    assert capsys.readouterr().err.startswith("Error\n")


def test_main_rejects_scene_without_header(tmp_path, capsys):
    scene_file = tmp_path / "bare.cub"
    scene_file.write_text("\n".join(GRID) + "\n")
    assert main([str(scene_file)]) == 1
    assert "missing information" in capsys.readouterr().err