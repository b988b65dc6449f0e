"""Unit tests for PointerModel."""

import math

import numpy as np
import pytest

from slink import InvalidInputError, InvalidModelError, PointerModel, UnknownObjectError
from slink.models import PointerRepresentationData


class TestPointerModelAccess:
    """Tests for read access and the mutation primitive."""

    def test_empty_model(self):
        """Test a new model has no entries."""
        model = PointerModel()
        assert len(model) == 0
        assert model.all_ids() == []
        assert model.root is None
        assert model.pointers.shape == (0,)
        assert model.merge_levels().shape == (0,)

    def test_append_creates_root(self):
        """Test append sets pi(id) = id and lambda(id) = inf."""
        model = PointerModel()
        index = model.append("a")

        assert index == 0
        assert model.pointer_of("a") == "a"
        assert math.isinf(model.level_of("a"))
        assert model.root == "a"

    def test_append_duplicate_raises(self):
        """Test the same id cannot be added twice."""
        model = PointerModel()
        model.append(1)
        with pytest.raises(InvalidInputError, match="already added"):
            model.append(1)
        assert len(model) == 1

    def test_append_unhashable_raises(self):
        """Test unhashable ids are rejected."""
        model = PointerModel()
        with pytest.raises(InvalidInputError, match="hashable"):
            model.append([1, 2])

    def test_set_pointer(self):
        """Test set_pointer updates pi and lambda by id."""
        model = PointerModel()
        model.append("a")
        model.append("b")
        model.set_pointer("a", "b", 2.5)

        assert model.pointer_of("a") == "b"
        assert model.level_of("a") == 2.5
        np.testing.assert_array_equal(model.pointers, [1, 1])

    def test_unknown_id_raises(self):
        """Test accessors reject ids that were never added."""
        model = PointerModel()
        model.append("a")
        with pytest.raises(UnknownObjectError):
            model.pointer_of("zzz")
        with pytest.raises(UnknownObjectError):
            model.level_of("zzz")
        assert "zzz" not in model
        assert [1] not in model

    def test_all_ids_in_addition_order(self):
        """Test ids keep the order they were added in, not sorted order."""
        model = PointerModel()
        for key in [5, 1, 3]:
            model.append(key)
        assert model.all_ids() == [5, 1, 3]
        assert list(model) == [5, 1, 3]
        assert model.index_of(3) == 2
        assert model.id_at(1) == 1

    def test_grows_past_initial_capacity(self):
        """Test the dense arrays grow and keep earlier entries."""
        model = PointerModel(capacity=2)
        for key in range(50):
            model.append(key)
            if key > 0:
                model.set_pointer(key - 1, key, float(key))

        assert len(model) == 50
        assert model.pointer_of(10) == 11
        assert model.level_of(10) == 10.0
        assert math.isinf(model.level_of(49))

    def test_views_are_read_only(self, abc_model):
        """Test pointers and levels cannot be written through."""
        with pytest.raises(ValueError):
            abc_model.pointers[0] = 0
        with pytest.raises(ValueError):
            abc_model.levels[0] = 0.0

    def test_merge_levels_sorted_and_finite(self, abc_model):
        """Test merge_levels drops the root's infinite level."""
        np.testing.assert_array_equal(abc_model.merge_levels(), [1.0, 2.0])


class TestPointerModelValidate:
    """Tests for invariant checking."""

    def test_built_model_is_valid(self, random_model):
        """Test a builder-produced model passes validation."""
        assert random_model.validate() is random_model

    def _model(self, pointers, levels):
        data = PointerRepresentationData(
            ids=list(range(len(pointers))),
            pointers=pointers,
            levels=levels,
        )
        return PointerModel.from_data(data)

    def test_backward_pointer_rejected(self):
        """Test a pointer to an earlier object is rejected."""
        with pytest.raises(InvalidModelError, match="later object"):
            self._model([0, 0, 2], [1.0, 2.0, None])

    def test_out_of_range_pointer_rejected(self):
        """Test a pointer outside the model is rejected."""
        with pytest.raises(InvalidModelError, match="outside"):
            self._model([5, 2, 2], [1.0, 2.0, None])

    def test_non_monotone_levels_rejected(self):
        """Test lambda(id) > lambda(pi(id)) is rejected."""
        with pytest.raises(InvalidModelError, match="exceeds"):
            self._model([1, 2, 2], [3.0, 2.0, None])

    def test_finite_root_rejected(self):
        """Test the last object must have an infinite level."""
        with pytest.raises(InvalidModelError, match="infinite"):
            self._model([1, 1], [1.0, 4.0])

    def test_duplicate_ids_rejected(self):
        """Test persisted data with repeated ids is rejected."""
        data = PointerRepresentationData(ids=[1, 1], pointers=[1, 1], levels=[1.0, None])
        with pytest.raises(InvalidModelError, match="ids"):
            PointerModel.from_data(data)


class TestPointerModelOutput:
    """Tests for the text dump and data conversion."""

    def test_to_text(self, abc_model):
        """Test one P/L line per object."""
        assert abc_model.to_text() == (
            "P(A) = B   L(A) = 1.0\n"
            "P(B) = C   L(B) = 2.0\n"
            "P(C) = C   L(C) = inf\n"
        )
        assert str(abc_model) == abc_model.to_text()

    def test_to_text_sorts_ids(self):
        """Test lines are ordered by id, not by addition order."""
        model = PointerModel()
        model.append(2)
        model.append(1)
        model.set_pointer(2, 1, 0.5)
        assert model.to_text().splitlines() == [
            "P(1) = 1   L(1) = inf",
            "P(2) = 1   L(2) = 0.5",
        ]

    def test_to_text_mixed_ids_uses_addition_order(self):
        """Test ids that cannot be compared keep addition order."""
        model = PointerModel()
        model.append("x")
        model.append(1)
        lines = model.to_text().splitlines()
        assert lines[0].startswith("P(x)")
        assert lines[1].startswith("P(1)")

    def test_data_round_trip(self, abc_model):
        """Test to_data encodes inf as None and from_data restores the model."""
        data = abc_model.to_data(metric="table")
        assert data.levels == [1.0, 2.0, None]
        assert data.pointers == [1, 2, 2]
        assert data.metric == "table"
        assert PointerModel.from_data(data) == abc_model

    def test_to_data_converts_numpy_ids(self):
        """Test numpy integer ids become plain ints."""
        model = PointerModel()
        model.append(np.int64(7))
        data = model.to_data()
        assert data.ids == [7]
        assert type(data.ids[0]) is int

    def test_repr(self, abc_model):
        """Test __repr__ method."""
        assert repr(abc_model) == "PointerModel(n=3)"
