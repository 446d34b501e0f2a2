import pytest

from cubed.colors import shade
from cubed.model import Player, Scene, Side, Texture
from cubed.raycast import Frame, cast_ray, fill_ceiling_and_floor, render_scene

COLORS = {
    Side.NORTH: 0x102030,
    Side.SOUTH: 0x405060,
    Side.WEST: 0x708090,
    Side.EAST: 0xA0B0C0,
}
FLOOR = 0x112233
CEILING = 0x445566
ROOM = ["11111", "10001", "10001", "10001", "11111"]


def make_scene(pov="E", rows=ROOM, x=2.5, y=2.5, width=8, height=8):
    player = Player(x=x, y=y)
    player.face(pov)
    textures = {
        side: Texture(
            path=f"{side.value}.xpm",
            width=2,
            height=2,
            char_per_pixel=1,
            color_table={"a": color},
            pixels=[[color, color], [color, color]],
        )
        for side, color in COLORS.items()
    }
    return Scene(
        rows=list(rows),
        player=player,
        pov=pov,
        textures=textures,
        floor_color=FLOOR,
        ceiling_color=CEILING,
        width=width,
        height=height,
    )


def test_frame_starts_filled():
    frame = Frame(3, 2, fill=CEILING)
    assert frame.pixels == [CEILING] * 6


def test_frame_put_get_round_trip():
    frame = Frame(4, 3)
    frame.put(3, 2, FLOOR)
    assert frame.get(3, 2) == FLOOR
    assert frame.get(2, 2) == 0


@pytest.mark.parametrize("x, y", [(-1, 0), (4, 0), (0, 3), (0, -1)])
def test_frame_rejects_outside_pixels(x, y):
    frame = Frame(4, 3)
    with pytest.raises(IndexError):
        frame.get(x, y)
    with pytest.raises(IndexError):
        frame.put(x, y, 1)


@pytest.mark.parametrize(
    "pov, face, side",
    [
        ("E", Side.EAST, 0),
        ("W", Side.WEST, 0),
        ("N", Side.NORTH, 1),
        ("S", Side.SOUTH, 1),
    ],
)
def test_center_ray_hits_facing_wall(pov, face, side):
    scene = make_scene(pov)
    hit = cast_ray(scene, scene.width // 2, scene.width)
    assert hit.face is face
    assert hit.side == side


def test_center_ray_east_distance():
    scene = make_scene("E")
    hit = cast_ray(scene, scene.width // 2, scene.width)
    assert (hit.map_x, hit.map_y) == (len(ROOM[0]) - 1, int(scene.player.y))
    assert hit.wall_dist == pytest.approx(hit.map_x - scene.player.x)


def test_center_ray_north_reaches_top_row():
    scene = make_scene("N")
    hit = cast_ray(scene, scene.width // 2, scene.width)
    assert hit.map_y == 0
    assert hit.map_x == int(scene.player.x)


def test_mirrored_columns_see_same_distance():
    scene = make_scene("E")
    left = cast_ray(scene, 1, 4)
    right = cast_ray(scene, 3, 4)
    assert left.wall_dist == pytest.approx(right.wall_dist)
    assert left.line_height == right.line_height


@pytest.mark.parametrize("pov", ["N", "S", "E", "W"])
def test_ray_bounds_stay_inside_frame(pov):
    scene = make_scene(pov)
    for column in range(scene.width):
        hit = cast_ray(scene, column, scene.width)
        assert 0 <= hit.draw_start <= hit.draw_end <= scene.height - 1
        assert 0 <= hit.tex_x < scene.textures[hit.face].width
        assert hit.wall_dist > 0


def test_ray_leaving_map_stops_at_edge():
    scene = make_scene("E", rows=["000"], x=1.5, y=0.5)
    hit = cast_ray(scene, scene.width // 2, scene.width)
    assert hit.map_x == len("000")
    assert hit.map_y == 0


def test_fill_ceiling_and_floor():
    scene = make_scene(width=5, height=6)
    frame = Frame(5, 6)
    fill_ceiling_and_floor(scene, frame)
    half = frame.height // 2
    for y in range(frame.height):
        expected = CEILING if y < half else FLOOR
        assert all(frame.get(x, y) == expected for x in range(frame.width))


def test_render_scene_rejects_mismatched_frame():
    scene = make_scene(width=8, height=8)
    with pytest.raises(ValueError):
        render_scene(scene, Frame(4, 8))


def test_render_scene_draws_unshaded_east_wall():
    scene = make_scene("E")
    frame = Frame(scene.width, scene.height)
    render_scene(scene, frame)
    column = scene.width // 2
    hit = cast_ray(scene, column, scene.width)
    assert hit.draw_start < hit.draw_end
    for y in range(scene.height):
        if hit.draw_start <= y < hit.draw_end:
            assert frame.get(column, y) == COLORS[Side.EAST]
        elif y < scene.height // 2:
            assert frame.get(column, y) == CEILING
        else:
            assert frame.get(column, y) == FLOOR


def test_render_scene_shades_north_wall():
    scene = make_scene("N")
    frame = Frame(scene.width, scene.height)
    render_scene(scene, frame)
    column = scene.width // 2
    hit = cast_ray(scene, column, scene.width)
    middle = scene.height // 2
    assert hit.draw_start <= middle < hit.draw_end
    assert frame.get(column, middle) == shade(COLORS[Side.NORTH])
    assert frame.get(column, 0) == CEILING