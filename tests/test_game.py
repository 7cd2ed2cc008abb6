from types import SimpleNamespace

import pytest

from tilequake.game import MAX_ENTITIES, Game, create_default_world
from tilequake.matrix import Mat4
from tilequake.player import create_player
from tilequake.vector import Vec3


@pytest.fixture(scope="module")
def default_world():
    return create_default_world()


class _Context:
    def __init__(self, dt=0.0):
        self.dt = dt
        self.tick = 0
        self.quit = False
        self.fps = None

    def set_fps(self, fps):
        self.fps = fps

    def get_key(self, key):
        return False


def test_default_world_room(default_world):
    tile = default_world.get_tile(0, 0)
    assert tile.bot_height == 0.0
    assert tile.top_height == 4.0
    assert tile.wall_texture == 1
    assert default_world.get_tile(255, 255) == tile
    assert default_world.collision_layer == 1


def test_default_world_staircase(default_world):
    heights = [default_world.get_tile(5 + i, 5).bot_height for i in range(1, 5)]
    assert heights == [0.125, 0.25, 0.375, 0.5]
    assert default_world.get_tile(6, 5).top_height == 2.0
    assert default_world.get_tile(10, 5).bot_height == 0.0


def test_game_setup(default_world):
    context = _Context()
    game = Game(context, default_world)
    assert context.fps == 165
    assert len(game.entities) == MAX_ENTITIES
    assert all(entity.unused for entity in game.entities)
    assert game.view.transform_point(Vec3(4.0, 0.5, 4.0)) == Vec3(0.0, 0.0, 0.0)
    assert game.projection == Mat4.perspective(16.0 / 9.0, 3.14 / 4, 100.0, 0.2)


def test_add_entity_claims_slots_until_full(default_world):
    game = Game(_Context(), default_world)
    claimed = [game.add_entity() for _ in range(MAX_ENTITIES)]
    assert all(not entity.unused for entity in claimed)
    assert len({id(entity) for entity in claimed}) == MAX_ENTITIES
    with pytest.raises(RuntimeError):
        game.add_entity()


def test_freed_slot_is_reused(default_world):
    game = Game(_Context(), default_world)
    first = game.add_entity()
    first.unused = True
    assert game.add_entity() is first


def test_update_only_touches_active_entities(default_world):
    game = Game(_Context(dt=0.5), default_world)
    calls = []
    active = game.add_entity()
    active.on_update = lambda e, g, dt: calls.append((e, dt))
    game.entities[-1].on_update = lambda e, g, dt: calls.append((e, dt))
    game.update()
    assert calls == [(active, 0.5)]


def test_player_lands_on_floor(default_world):
    game = Game(_Context(dt=0.1), default_world)
    player = game.add_entity()
    create_player(player)
    game.update()
    assert player.position.y == pytest.approx(0.1)
    assert player.on_floor is True
    assert player.velocity.y == 0.0


def test_run_stops_when_quit_is_set(default_world):
    context = _Context()
    context.quit = True
    game = Game(context, default_world)
    game.run()
    assert all(entity.unused for entity in game.entities)
    assert context.quit is True


def test_run_context_is_plain_namespace_free():
    game = Game(_Context(), create_default_world())
    assert game.tags == [False] * 64
    assert isinstance(game.context, _Context) and game.context.fps == 165