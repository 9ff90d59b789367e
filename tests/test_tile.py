from puzzle_core.tile import Tile, has_any, has_all, RAYCAST_BLOCKING


def test_void_is_block_and_pusher_void():
    assert Tile.VOID == Tile.BLOCK_VOID | Tile.PUSHER_VOID
    assert has_all(Tile.VOID, Tile.BLOCK_VOID)
    assert has_all(Tile.VOID, Tile.PUSHER_VOID)


def test_exact_equality_differs_from_subset():
    t = Tile.GOAL | Tile.PUSH_BLOCK
    assert has_any(t, Tile.GOAL)
    assert t != Tile.GOAL
    assert not has_all(t, Tile.GOAL | Tile.STOP_BLOCK)
    assert has_any(t, Tile.GOAL | Tile.STOP_BLOCK)
    assert Tile(0) == Tile.NONE
    assert not has_any(Tile.NONE, RAYCAST_BLOCKING)


def test_bits_are_distinct():
    singles = [Tile.STOP_BLOCK, Tile.BREAK_BLOCK, Tile.PUSH_BLOCK, Tile.GOAL, Tile.BLOCK_VOID,
               Tile.PUSHER_VOID, Tile.OUT_OF_BOUNDS, Tile.GARBAGE, Tile.MARKED,
               Tile.CUSTOM1, Tile.CUSTOM2, Tile.CUSTOM3, Tile.CUSTOM4, Tile.CUSTOM5]
    acc = 0
    for t in singles:
        assert acc & t == 0
        acc |= t
    assert acc == (1 << 14) - 1
