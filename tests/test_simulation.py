import pytest

from radarsim.collision import Outline
from radarsim.parsing import PlaneSpec, TowerSpec
from radarsim.simulation import Simulation, ToggleKey


def test_toggle_flips_once_per_press():
    key = ToggleKey()
    assert key.update(True) is True
    assert key.update(True) is True
    assert key.update(False) is True
    assert key.update(True) is False


def test_toggle_release_keeps_state():
    key = ToggleKey(on=True)
    assert key.update(False) is True
    assert key.held is False


def test_default_switches():
    sim = Simulation()
    assert sim.sprites.on is True
    assert sim.hitboxes.on is False
    assert sim.is_over()


def test_from_specs_orders_last_first():
    specs = [PlaneSpec(0, 0, 100, 0, 1, 0), PlaneSpec(0, 500, 100, 500, 1, 0)]
    towers = [TowerSpec(10, 10, 5), TowerSpec(50, 50, 8)]
    sim = Simulation.from_specs(specs, towers)
    assert [plane.id for plane in sim.planes] == [1, 0]
    assert [tower.id for tower in sim.towers] == [1, 0]
    assert sim.towers[0].radius == 8


def test_active_planes_respects_delay():
    specs = [PlaneSpec(0, 0, 100, 0, 1, 0), PlaneSpec(0, 500, 100, 500, 1, 5)]
    sim = Simulation.from_specs(specs, [])
    assert [plane.id for plane in sim.active_planes(1.0)] == [0]
    assert {plane.id for plane in sim.active_planes(5.0)} == {0, 1}


def test_delayed_plane_does_not_move():
    sim = Simulation.from_specs([PlaneSpec(0, 0, 100, 0, 1, 5)], [])
    assert sim.step(0.0) == []
    assert sim.planes[0].position == (0.0, 0.0)
    assert sim.planes[0].steps == 0


def test_step_reports_position_before_move():
    sim = Simulation.from_specs([PlaneSpec(0, 0, 100, 0, 1, 0)], [])
    frame = sim.step(0.0)
    plane, position, outline = frame[0]
    assert position == (0.0, 0.0)
    assert outline is Outline.NORMAL
    assert plane.position == (1.0, 0.0)


def test_plane_lands_and_simulation_ends():
    sim = Simulation.from_specs([PlaneSpec(0, 0, 10, 0, 1, 0)], [])
    total = sim.planes[0].total_steps
    for _ in range(total - 1):
        sim.step(0.0)
        assert not sim.is_over()
    sim.step(0.0)
    assert sim.is_over()


def test_colliding_planes_both_removed():
    specs = [PlaneSpec(0, 0, 100, 0, 1, 0), PlaneSpec(5, 0, 100, 0, 1, 0)]
    sim = Simulation.from_specs(specs, [])
    frame = sim.step(0.0)
    assert [entry[2] for entry in frame] == [Outline.COLLIDING, Outline.NORMAL]
    assert all(entry[0].collided for entry in frame)
    assert sim.is_over()


def test_plane_in_tower_area_is_safe():
    sim = Simulation.from_specs([PlaneSpec(0, 0, 100, 0, 1, 0)], [TowerSpec(0, 0, 30)])
    frame = sim.step(0.0)
    assert frame[0][2] is Outline.SAFE
    assert len(sim.planes) == 1


@pytest.mark.parametrize("elapsed", [0.0, 2.5])
def test_waiting_plane_not_hit_by_active_one(elapsed):
    specs = [PlaneSpec(0, 0, 100, 0, 1, 0), PlaneSpec(5, 0, 100, 0, 1, 10)]
    sim = Simulation.from_specs(specs, [])
    frame = sim.step(elapsed)
    assert [entry[0].id for entry in frame] == [0]
    assert frame[0][2] is Outline.NORMAL
    assert len(sim.planes) == 2