import pygame
import pytest
from unittest.mock import patch

from dtts.savedata import SaveData
from dtts.shop import MAX_SCROLL, Shop, skin_path, tile_price

CELL = 20


@pytest.fixture
def screen():
    return pygame.Surface((CELL * 9, CELL * 14))


def make_shop(screen, tmp_path, candies=0, bought=None):
    path = tmp_path / "data"
    data = SaveData(candy_amount=candies)
    for index in bought or ():
        data.bought_skins[index] = True
    data.save(path)
    return Shop(screen, CELL, path), path


def inside(tile):
    x, y = tile.background_position
    return (x + 1, y + 1)


def test_tile_price_base_value():
    assert tile_price(0) == 100


def test_tile_price_repeats_per_column():
    assert [tile_price(i) for i in range(10)] == [tile_price(i + 10) for i in range(10)]


def test_tile_price_never_decreases_down_a_column():
    prices = [tile_price(i) for i in range(10)]
    assert prices == sorted(prices)
    assert tile_price(0) == tile_price(1)


def test_tile_price_out_of_range():
    with pytest.raises(IndexError):
        tile_price(20)


def test_skin_paths():
    assert skin_path(0) == "img/skins/bird.png"
    assert skin_path(1) == "img/skins/bird1.png"
    assert skin_path(12) == "img/skins/bird.png"


def test_skin_path_out_of_range():
    with pytest.raises(IndexError):
        skin_path(-1)


def test_tiles_follow_saved_purchases(screen, tmp_path):
    shop, _ = make_shop(screen, tmp_path, bought=[3])
    assert [tile.unlocked for tile in shop.tiles] == [i == 3 for i in range(20)]


def test_buy_skin_with_enough_candies(screen, tmp_path):
    shop, _ = make_shop(screen, tmp_path, candies=500)
    shop.buy_skin(1)
    assert shop.data.candy_amount == 500 - tile_price(1)
    assert shop.tiles[1].unlocked
    assert shop.skin_name == skin_path(1)
    assert shop.candy_text == str(500 - tile_price(1))


def test_buy_skin_without_candies_keeps_tile_locked(screen, tmp_path):
    shop, _ = make_shop(screen, tmp_path, candies=0)
    shop.buy_skin(3)
    assert shop.data.candy_amount == 0
    assert not shop.tiles[3].unlocked
    assert shop.data.bought_skins[3]
    assert shop.skin_name == skin_path(0)


def test_scroll_is_clamped(screen, tmp_path):
    shop, _ = make_shop(screen, tmp_path)
    shop.scroll(5)
    assert shop.offset == 0
    shop.scroll(-100)
    assert shop.offset == -MAX_SCROLL


def test_scroll_moves_tiles_up(screen, tmp_path):
    shop, _ = make_shop(screen, tmp_path)
    before = shop.tiles[0].background_position[1]
    shop.scroll(-1)
    assert shop.tiles[0].background_position[1] < before


def test_tiles_in_two_columns(screen, tmp_path):
    shop, _ = make_shop(screen, tmp_path)
    left = {tile.background_position[0] for tile in shop.tiles[:10]}
    right = {tile.background_position[0] for tile in shop.tiles[10:]}
    assert len(left) == 1 and len(right) == 1
    assert min(right) > min(left)
    rows = [tile.background_position[1] for tile in shop.tiles[:10]]
    assert rows == sorted(rows)


def test_click_locked_tile_buys_without_closing(screen, tmp_path):
    shop, _ = make_shop(screen, tmp_path, candies=500)
    assert shop.click(inside(shop.tiles[1])) is False
    assert shop.tiles[1].unlocked
    assert shop.click(inside(shop.tiles[1])) is True
    assert shop.skin_name == skin_path(1)


def test_click_unlocked_tile_selects(screen, tmp_path):
    shop, _ = make_shop(screen, tmp_path, bought=[2])
    assert shop.click(inside(shop.tiles[2])) is True
    assert shop.skin_name == skin_path(2)


def test_click_return_button(screen, tmp_path):
    shop, _ = make_shop(screen, tmp_path)
    left, top, width, height = shop.return_button
    assert shop.click((left + width / 2, top + height / 2)) is True


def test_click_elsewhere(screen, tmp_path):
    shop, _ = make_shop(screen, tmp_path)
    assert shop.click((0, 0)) is False


def test_open_scrolls_and_saves(screen, tmp_path):
    shop, path = make_shop(screen, tmp_path, candies=500)
    shop.buy_skin(4)
    events = [
        [pygame.event.Event(pygame.MOUSEWHEEL, x=0, y=-3)],
        [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)],
    ]
    with patch("pygame.event.get", side_effect=events):
        chosen = shop.open()
    assert shop.offset == -3
    assert chosen == skin_path(4)
    saved = SaveData.load(path)
    assert saved.candy_amount == 500 - tile_price(4)
    assert saved.skin_name == skin_path(4)
    assert saved.bought_skins[4]


def test_open_quit_marks_closed(screen, tmp_path):
    shop, _ = make_shop(screen, tmp_path)
    with patch("pygame.event.get", side_effect=[[pygame.event.Event(pygame.QUIT)]]):
        shop.open()
    assert shop.closed is True