"""Tests for SQLAlchemy model inspection."""

from __future__ import annotations

import pytest

from dbquery_graphql.query.inspection import is_persistable_model, model_key
from tests.fixtures import OrderLine, TagType, User, UserType


@pytest.mark.unit
class TestModelInspection:
    def test_mapped_models(self):
        assert is_persistable_model(User) is True
        assert is_persistable_model(OrderLine) is True

    @pytest.mark.parametrize("cls", [UserType, TagType, dict, int, "User", None])
    def test_not_mapped(self, cls):
        assert is_persistable_model(cls) is False
        assert model_key(cls) == ""

    def test_table_is_not_a_model(self):
        assert is_persistable_model(User.__table__) is False

    def test_single_key(self):
        assert model_key(User) == "id"

    def test_composite_key_uses_attribute_names(self):
        """``line_no`` is stored in column ``line_number``."""
        assert model_key(OrderLine) == "order_id,line_no"
