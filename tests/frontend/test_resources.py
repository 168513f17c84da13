"""Tests for the die face images."""

import pytest

from src.backend.models.die import FACES
from src.backend.services.dice import FACE_IMAGES, face_image
from src.frontend.resources import DIE_FACE_ART, PIP, load_face_art


class TestDieFaceArt:
    """Test suite for the static face images."""

    def test_one_image_per_face(self):
        """Test every image id handed out by the core has an image."""
        assert set(DIE_FACE_ART) == set(FACE_IMAGES.values())

    @pytest.mark.parametrize("face", list(FACES))
    def test_pip_count(self, face):
        """Test each image shows as many pips as its face value."""
        assert load_face_art(face_image(face)).count(PIP) == face

    def test_images_distinct(self):
        """Test no two faces look the same."""
        assert len(set(DIE_FACE_ART.values())) == 6

    def test_images_rectangular(self):
        """Test all lines of an image have the same width."""
        for art in DIE_FACE_ART.values():
            lines = art.splitlines()
            assert len(lines) == 5
            assert len({len(line) for line in lines}) == 1

    def test_unknown_image(self):
        """Test unknown ids raise KeyError."""
        with pytest.raises(KeyError, match="Unknown die face image"):
            load_face_art("dice_7")
