"""Tests for the die rolling operations."""

import random
from collections import Counter

import pytest

from src.backend.models.die import FACES, DieState, InvalidFaceError
from src.backend.services.dice import (
    FACE_IMAGES,
    face_image,
    face_label,
    initialize,
    reroll,
)


class TestInitialize:
    """Tests for initialize()."""

    def test_starts_on_face_one(self):
        """Test that a new state shows face 1."""
        assert initialize().current_face == 1

    def test_returns_fresh_state_each_call(self):
        """Test that every call gives an equal, valid state."""
        assert initialize() == initialize() == DieState(current_face=1)


class TestReroll:
    """Tests for reroll()."""

    def test_uses_fixed_source(self, fixed_rng):
        """Test that the injected source decides the new face."""
        state = reroll(initialize(), fixed_rng(4))
        assert state.current_face == 4

    def test_asks_for_one_to_six(self, fixed_rng):
        """Test that the source is asked for the full face range."""
        rng = fixed_rng(2)
        reroll(initialize(), rng)
        assert rng.calls == [(1, 6)]

    def test_returns_new_state(self, fixed_rng):
        """Test that the input state is left untouched."""
        state = DieState(current_face=3)
        new_state = reroll(state, fixed_rng(5))
        assert new_state is not state
        assert state.current_face == 3
        assert new_state.current_face == 5

    def test_same_face_allowed(self, fixed_rng):
        """Test that rolling the current value again is valid."""
        state = DieState(current_face=6)
        assert reroll(state, fixed_rng(6)).current_face == 6

    @pytest.mark.parametrize("face", list(FACES))
    def test_result_always_in_range(self, face):
        """Test that rolls from any state stay in 1..6."""
        rng = random.Random(face)
        state = DieState(current_face=face)
        for _ in range(200):
            state = reroll(state, rng)
            assert state.current_face in FACES

    def test_default_source(self):
        """Test rolling without an injected source."""
        for _ in range(50):
            assert reroll(initialize()).current_face in FACES

    def test_seeded_source_is_reproducible(self):
        """Test that the same seed gives the same sequence."""

        def sequence(seed):
            rng = random.Random(seed)
            state = initialize()
            faces = []
            for _ in range(20):
                state = reroll(state, rng)
                faces.append(state.current_face)
            return faces

        assert sequence(42) == sequence(42)

    def test_not_idempotent(self):
        """Test that repeated rolls can change the value."""
        rng = random.Random(7)
        state = initialize()
        seen = {reroll(state, rng).current_face for _ in range(100)}
        assert len(seen) > 1

    def test_uniform_distribution(self):
        """Test each face comes up roughly 1/6 of the time."""
        rng = random.Random(1234)
        state = initialize()
        counts = Counter()
        rolls = 10_000
        for _ in range(rolls):
            state = reroll(state, rng)
            counts[state.current_face] += 1

        assert set(counts) == set(FACES)
        expected = rolls / 6
        for face in FACES:
            assert abs(counts[face] - expected) < expected * 0.1

    @pytest.mark.parametrize("bad_value", [0, 7])
    def test_broken_source_fails_fast(self, fixed_rng, bad_value):
        """Test that an out-of-range value from the source is a defect."""
        with pytest.raises(InvalidFaceError):
            reroll(initialize(), fixed_rng(bad_value))


class TestFaceImage:
    """Tests for the face-to-image mapping."""

    def test_known_identifiers(self):
        """Test the identifier of every face."""
        assert [face_image(face) for face in FACES] == [
            "dice_1",
            "dice_2",
            "dice_3",
            "dice_4",
            "dice_5",
            "dice_6",
        ]

    def test_pure(self):
        """Test that the mapping gives the same id for the same face."""
        for face in FACES:
            assert face_image(face) == face_image(face)

    def test_injective(self):
        """Test that no two faces share an image."""
        assert len({face_image(face) for face in FACES}) == 6

    def test_table_read_only(self):
        """Test that the mapping table cannot be modified."""
        with pytest.raises(TypeError):
            FACE_IMAGES[1] = "other"

    @pytest.mark.parametrize("face", [0, 7])
    def test_invalid_face(self, face):
        """Test that out-of-range faces are rejected."""
        with pytest.raises(InvalidFaceError):
            face_image(face)


class TestFaceLabel:
    """Tests for the accessibility label."""

    def test_label_is_face_value(self):
        """Test that the label is the face as text."""
        assert face_label(4) == "4"

    def test_invalid_face(self):
        """Test that out-of-range faces are rejected."""
        with pytest.raises(InvalidFaceError):
            face_label(0)


class TestRollScenario:
    """End-to-end roll through the core."""

    def test_roll_to_four(self, fixed_rng):
        """Test start at 1, roll a 4, map to the face-4 image."""
        state = initialize()
        assert state.current_face == 1

        state = reroll(state, fixed_rng(4))

        assert state.current_face == 4
        assert face_image(state.current_face) == "dice_4"
        assert face_label(state.current_face) == "4"
