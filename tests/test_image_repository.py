import numpy as np
import pytest

from framefx.models.image import Image
from framefx.repositories.image_repository import ImageRepository
from framefx.services.image_service import ImageService


@pytest.fixture
def repository():
    return ImageRepository()


def test_save_then_load_keeps_bgr_order(repository, random_image, tmp_path):
    path = repository.save(random_image, tmp_path / "frame.png")
    loaded = repository.load(path)
    np.testing.assert_array_equal(loaded.pixels, random_image.pixels)
    assert loaded.path == path


def test_load_missing_file(repository, tmp_path):
    with pytest.raises(FileNotFoundError):
        repository.load(tmp_path / "nope.png")


def test_save_refuses_empty(repository, empty_image, tmp_path):
    with pytest.raises(ValueError):
        repository.save(empty_image, tmp_path / "empty.png")


def test_signed_images_are_saved_as_absolute_values(repository, tmp_path):
    signed = Image(pixels=np.full((3, 3, 3), -40, dtype=np.int16))
    loaded = repository.load(repository.save(signed, tmp_path / "grad.png"))
    assert np.all(loaded.pixels == 40)


def test_iter_dir_filters_extensions(repository, random_image, tmp_path):
    repository.save(random_image, tmp_path / "a.png")
    (tmp_path / "notes.txt").write_text("not an image")
    images = repository.load_dir(tmp_path)
    assert [img.path.name for img in images] == ["a.png"]


def test_to_display_takes_absolute_value():
    signed = Image(pixels=np.array([[[-300, -5, 7]]], dtype=np.int16))
    shown = ImageService().to_display(signed)
    assert shown.dtype == np.uint8
    assert shown.pixel(0, 0) == (255, 5, 7)
