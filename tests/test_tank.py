import math

import pytest

from tankcombat.camera import Vec3
from tankcombat.tank import Rect, Tank

FLOOR = 200.0


def make_tank(player_type=1):
    tank = Tank(player_type)
    tank.setup(10, 10, FLOOR, FLOOR, 0.0, 100.0)
    return tank


def test_rect_overlap():
    a = Rect(0, 0, 10, 10)
    assert a.intersects(Rect(5, 5, 10, 10))
    assert Rect(5, 5, 10, 10).intersects(a)


def test_rect_touching_edges_do_not_intersect():
    a = Rect(0, 0, 10, 10)
    assert not a.intersects(Rect(10, 0, 5, 5))
    assert not a.intersects(Rect(0, 10, 5, 5))


def test_rect_disjoint_and_negative_size():
    assert not Rect(0, 0, 1, 1).intersects(Rect(5, 5, 1, 1))
    assert Rect(10, 10, -5, -5).intersects(Rect(6, 6, 1, 1))


def test_players_start_on_opposite_sides():
    right = make_tank(1)
    left = make_tank(0)
    assert right.base_pos.x > 0
    assert left.base_pos.x < 0
    assert math.isclose(right.base_pos.x, -left.base_pos.x)
    assert right.base_pos.y == 0.0


def test_setup_proportions():
    tank = make_tank()
    assert math.isclose(tank.base_depth, tank.base_width * 0.2)
    assert math.isclose(tank.cannon_depth, tank.rotator_width)
    assert tank.c_ball_life_max == 3
    assert not tank.is_shooted


def test_cannon_points_left_for_player_one():
    tank = make_tank(1)
    tip, bottom = tank.cannon_ends()
    assert tip.x < bottom.x
    assert math.isclose(tip.y, bottom.y)
    assert math.isclose((tip - bottom).length(), tank.cannon_depth)


def test_cannon_points_right_for_player_two():
    tank = make_tank(0)
    tip, bottom = tank.cannon_ends()
    assert tip.x > bottom.x
    assert tank.tip == tip and tank.bottom == bottom


@pytest.mark.parametrize("angle", [0.0, 30.0, 90.0, 215.0])
def test_cannon_length_independent_of_angle(angle):
    tank = make_tank()
    tank.rotator_angle = angle
    tip, bottom = tank.cannon_ends()
    assert math.isclose((tip - bottom).length(), tank.cannon_depth)
    assert math.isclose(tip.z, bottom.z)


def test_top_down_movement():
    tank = make_tank()
    start = tank.base_pos
    tank.is_left_pressed = True
    tank.is_up_pressed = True
    tank.update(False)
    assert math.isclose(tank.base_pos.x, start.x - tank.speed)
    assert math.isclose(tank.base_pos.y, start.y + tank.speed)


def test_first_person_moves_along_cannon():
    tank = make_tank(0)
    start = tank.base_pos
    tank.is_up_pressed = True
    tank.update(True)
    assert math.isclose(tank.base_pos.x, start.x + 1.0)
    assert math.isclose(tank.base_pos.y, start.y, abs_tol=1e-9)


def test_first_person_backwards_after_turning():
    tank = make_tank(0)
    tank.rotator_angle = 90.0
    start = tank.base_pos
    tank.is_down_pressed = True
    tank.update(True)
    assert math.isclose(tank.base_pos.x, start.x, abs_tol=1e-9)
    assert math.isclose(tank.base_pos.y, start.y - 1.0)


def test_turret_rotation():
    tank = make_tank()
    tank.is_rotate_left = True
    tank.update(False)
    tank.update(False)
    assert math.isclose(tank.rotator_angle, 2 * tank.rotate_speed)
    tank.is_rotate_left = False
    tank.is_rotate_right = True
    tank.update(False)
    assert math.isclose(tank.rotator_angle, tank.rotate_speed)


def test_tank_boundary_clamps_x():
    tank = make_tank()
    tank.base_pos = Vec3(500.0, 0.0, tank.base_pos.z)
    assert tank.tank_boundary_collision(FLOOR, FLOOR)
    assert math.isclose(tank.base_pos.x, FLOOR / 2 - tank.base_width / 2)


def test_tank_boundary_clamps_y():
    tank = make_tank()
    tank.base_pos = Vec3(0.0, -500.0, tank.base_pos.z)
    assert tank.tank_boundary_collision(FLOOR, FLOOR)
    assert math.isclose(tank.base_pos.y, -FLOOR / 2 + tank.base_height / 2)
    assert not tank.tank_boundary_collision(FLOOR, FLOOR)


def test_tank_cannot_leave_floor():
    tank = make_tank()
    tank.is_right_pressed = True
    for _ in range(500):
        tank.update(False)
    assert tank.base_pos.x <= FLOOR / 2 - tank.base_width / 2 + tank.speed


def test_shoot_launches_unit_speed_shell():
    tank = make_tank()
    tank.shoot()
    assert tank.is_shooted
    assert tank.c_ball_pos == tank.tip
    assert math.isclose(tank.c_ball_speed.length(), 1.0)
    assert tank.c_ball_speed.x < 0


def test_second_shot_is_ignored_while_in_flight():
    tank = make_tank()
    tank.shoot()
    tank.update(False)
    pos = tank.c_ball_pos
    tank.shoot()
    assert tank.c_ball_pos == pos


def test_shell_moves_by_speed_modifier():
    tank = make_tank()
    tank.shoot()
    start = tank.c_ball_pos
    tank.update(False)
    assert math.isclose((tank.c_ball_pos - start).length(), tank.c_ball_speed_mod)


def test_bullet_bounces_off_vertical_wall():
    tank = make_tank()
    tank.c_ball_pos = Vec3(FLOOR, 0.0, 0.0)
    tank.c_ball_speed = Vec3(1.0, 0.5, 0.0)
    assert tank.bullet_boundary_collision(FLOOR, FLOOR)
    assert tank.c_ball_speed == Vec3(-1.0, 0.5, 0.0)
    assert tank.c_ball_life == 1


def test_bullet_bounces_off_horizontal_wall():
    tank = make_tank()
    tank.c_ball_pos = Vec3(0.0, -FLOOR, 0.0)
    tank.c_ball_speed = Vec3(0.5, -1.0, 0.0)
    assert tank.bullet_boundary_collision(FLOOR, FLOOR)
    assert tank.c_ball_speed == Vec3(0.5, 1.0, 0.0)


def test_bullet_inside_floor_does_not_bounce():
    tank = make_tank()
    tank.c_ball_pos = Vec3(0.0, 0.0, 0.0)
    tank.c_ball_speed = Vec3(1.0, 0.0, 0.0)
    assert not tank.bullet_boundary_collision(FLOOR, FLOOR)
    assert tank.c_ball_speed == Vec3(1.0, 0.0, 0.0)
    assert tank.c_ball_life == 0


def test_shell_expires_after_max_bounces():
    tank = make_tank()
    tank.shoot()
    highest_life = 0
    for _ in range(1000):
        tank.update(False)
        highest_life = max(highest_life, tank.c_ball_life)
        if not tank.is_shooted:
            break
    assert not tank.is_shooted
    assert tank.c_ball_life == 0
    assert highest_life == tank.c_ball_life_max - 1


def test_game_over_animation_stops():
    tank = make_tank()
    tank.shoot()
    for _ in range(1000):
        tank.game_over_animation_update()
    assert not tank.is_shooted
    assert tank.game_over_rotation >= tank.game_over_max_rotation
    final = tank.game_over_rotation
    angle = tank.rotator_angle
    tank.game_over_animation_update()
    assert tank.game_over_rotation == final
    assert tank.rotator_angle == angle
    assert math.isclose(angle, final)


def test_rects_are_centred_on_positions():
    tank = make_tank()
    rect = tank.tank_rect()
    assert math.isclose(rect.x + rect.width / 2, tank.base_pos.x)
    assert math.isclose(rect.y + rect.height / 2, tank.base_pos.y)
    assert math.isclose(rect.height, tank.base_depth)
    tank.shoot()
    shell = tank.bullet_rect()
    assert math.isclose(shell.x + shell.width / 2, tank.c_ball_pos.x)
    assert math.isclose(shell.width, tank.c_ball_width)