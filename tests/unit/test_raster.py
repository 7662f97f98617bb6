import io

import numpy as np
import pytest
import PIL.Image

from identicon.config import BACKGROUND
from identicon.renderer import draw_image, render, to_array
from tests.test_utils import (
    HOYUPS_COLOR,
    HOYUPS_FILTERED_GRID,
    HOYUPS_PIXEL_MAP,
    make_image,
)

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def hoyups_image():
    return make_image(
        color=HOYUPS_COLOR, grid=HOYUPS_FILTERED_GRID, pixel_map=HOYUPS_PIXEL_MAP
    )


def test_draw_image_size_and_mode() -> None:
    canvas = draw_image(hoyups_image())
    assert canvas.size == (250, 250)
    assert canvas.mode == "RGBA"


def test_draw_image_paints_kept_cells() -> None:
    arr = to_array(hoyups_image())
    assert tuple(arr[25, 25]) == (*HOYUPS_COLOR, 255)
    # bottom-right corner pixel of cell 0
    assert tuple(arr[49, 49]) == (*HOYUPS_COLOR, 255)


def test_draw_image_leaves_dropped_cells_as_background() -> None:
    arr = to_array(hoyups_image())
    # cell 7 (value 191) sits at column 2, row 1
    assert tuple(arr[75, 125]) == BACKGROUND
    assert (arr[50:100, 100:150] == np.array(BACKGROUND, dtype=np.uint8)).all()


def test_draw_image_cells_do_not_bleed() -> None:
    # only cell 0 painted; its right and lower neighbours stay background
    image = make_image(color=(1, 2, 3), grid=[(0, 0)], pixel_map=[((0, 0), (50, 50))])
    arr = to_array(image)
    assert tuple(arr[0, 50]) == BACKGROUND
    assert tuple(arr[50, 0]) == BACKGROUND
    assert int((arr[..., :3] == (1, 2, 3)).all(axis=-1).sum()) == 50 * 50


def test_draw_image_is_left_right_symmetric() -> None:
    arr = to_array(hoyups_image())
    assert (arr == arr[:, ::-1]).all()


def test_draw_image_empty_pixel_map_is_background_only() -> None:
    image = make_image(color=(10, 20, 30), grid=[], pixel_map=[])
    arr = to_array(image)
    assert arr.shape == (250, 250, 4)
    assert (arr == np.array(BACKGROUND, dtype=np.uint8)).all()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"pixel_map": HOYUPS_PIXEL_MAP},
        {"color": HOYUPS_COLOR},
    ],
)
def test_draw_image_requires_color_and_pixel_map(kwargs) -> None:
    with pytest.raises(ValueError):
        draw_image(make_image(**kwargs))


def test_render_produces_png() -> None:
    data = render(hoyups_image())
    assert data.startswith(PNG_SIGNATURE)
    decoded = PIL.Image.open(io.BytesIO(data))
    assert decoded.format == "PNG"
    assert decoded.size == (250, 250)


def test_render_round_trips_pixels() -> None:
    image = hoyups_image()
    decoded = PIL.Image.open(io.BytesIO(render(image))).convert("RGBA")
    assert (np.asarray(decoded) == to_array(image)).all()


def test_render_is_deterministic() -> None:
    assert render(hoyups_image()) == render(hoyups_image())
