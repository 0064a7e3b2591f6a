"""Unit tests for the canvas rotation stack."""

import pytest
from PIL import Image

from memepen.render.canvas import Canvas

WHITE = (255, 255, 255, 255)
RED = (255, 0, 0, 255)


@pytest.fixture
def canvas():
    return Canvas(Image.new("RGB", (100, 100), "white"))


def is_red(pixel) -> bool:
    r, g, b, _ = pixel
    return r > 200 and g < 60 and b < 60


class TestCanvas:
    """Test suite for Canvas."""

    def test_converts_background_to_rgba_copy(self):
        background = Image.new("RGB", (20, 10), "white")
        canvas = Canvas(background)
        canvas.draw().rectangle([0, 0, 5, 5], fill="red")

        assert canvas.size == (20, 10)
        assert canvas.to_image().mode == "RGBA"
        # Caller's image is untouched
        assert background.getpixel((2, 2)) == (255, 255, 255)

    def test_unrotated_draws_land_on_base(self, canvas):
        canvas.draw().rectangle([10, 10, 20, 20], fill="red")
        assert canvas.to_image().getpixel((15, 15)) == RED

    def test_push_and_pop_track_depth(self, canvas):
        assert canvas.depth == 0
        canvas.push_rotation(10, (50, 50))
        canvas.push_rotation(20, (50, 50))
        assert canvas.depth == 2
        canvas.pop_rotation()
        canvas.pop_rotation()
        assert canvas.depth == 0

    def test_pop_without_push_raises(self, canvas):
        with pytest.raises(RuntimeError):
            canvas.pop_rotation()

    def test_to_image_with_pushed_rotation_raises(self, canvas):
        canvas.push_rotation(45, (50, 50))
        with pytest.raises(RuntimeError):
            canvas.to_image()

    def test_positive_degrees_turn_clockwise(self, canvas):
        with canvas.rotated(90, (50, 50)):
            # Bar to the right of the pivot
            canvas.draw().rectangle([70, 47, 80, 53], fill="red")

        img = canvas.to_image()
        # Clockwise on screen moves "right of pivot" to "below pivot"
        assert is_red(img.getpixel((50, 75)))
        assert img.getpixel((75, 50)) == WHITE

    def test_rotation_only_applies_inside_scope(self, canvas):
        with canvas.rotated(90, (50, 50)):
            canvas.draw().rectangle([70, 47, 80, 53], fill="red")
        canvas.draw().rectangle([70, 47, 80, 53], fill="red")

        img = canvas.to_image()
        assert canvas.depth == 0
        assert is_red(img.getpixel((75, 50)))

    def test_none_degrees_draws_directly(self, canvas):
        with canvas.rotated(None, (50, 50)):
            assert canvas.depth == 0
            canvas.draw().rectangle([70, 47, 80, 53], fill="red")

        assert canvas.to_image().getpixel((75, 50)) == RED

    def test_scope_is_released_when_body_raises(self, canvas):
        with pytest.raises(ValueError):
            with canvas.rotated(30, (50, 50)):
                canvas.draw().rectangle([0, 0, 99, 99], fill="red")
                raise ValueError("draw failed")

        assert canvas.depth == 0
        # Whatever was drawn under the failed scope is discarded
        assert canvas.to_image().getpixel((50, 50)) == WHITE

    def test_discarded_pop_leaves_surface_untouched(self, canvas):
        canvas.push_rotation(15, (50, 50))
        canvas.draw().rectangle([0, 0, 99, 99], fill="red")
        canvas.pop_rotation(commit=False)

        assert canvas.to_image().getpixel((10, 10)) == WHITE
