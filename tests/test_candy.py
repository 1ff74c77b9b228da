import pygame

from dtts.candy import Candy


def make_candy():
    image = pygame.Surface((34, 34))
    image.fill((250, 120, 40))
    candy = Candy(image, (20, 20))
    candy.x, candy.y = 50, 60
    return candy


def test_bounds_follow_position_and_size():
    candy = make_candy()
    assert candy.bounds() == (50, 60, 20, 20)


def test_size_defaults_to_image():
    image = pygame.Surface((34, 12))
    assert Candy(image).size == (34, 12)


def test_hidden_candy_never_collides():
    candy = make_candy()
    assert candy.collide((50, 60, 20, 20)) is False


def test_visible_candy_is_collected_once():
    candy = make_candy()
    candy.visible = True
    assert candy.collide((55, 65, 10, 10)) is True
    assert candy.visible is False
    assert candy.collide((55, 65, 10, 10)) is False


def test_touching_edges_do_not_collide():
    candy = make_candy()
    candy.visible = True
    assert candy.collide((70, 60, 10, 10)) is False
    assert candy.visible is True


def test_draw_only_when_visible():
    candy = make_candy()
    surface = pygame.Surface((100, 100))
    surface.fill((0, 0, 0))
    candy.draw(surface)
    assert tuple(surface.get_at((55, 65)))[:3] == (0, 0, 0)
    candy.visible = True
    candy.draw(surface)
    assert tuple(surface.get_at((55, 65)))[:3] == (250, 120, 40)