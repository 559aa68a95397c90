"""識別子のテスト."""
import uuid

import pytest

from budget_manager.domain.identifiers import CategoryId, ExpenseId, ProvisionId


class TestIdentifiers:
    """CategoryId / ExpenseId / ProvisionId のテスト."""

    @pytest.mark.parametrize("id_class", [CategoryId, ExpenseId, ProvisionId])
    def test_generateはUUIDを生成する(self, id_class) -> None:
        generated = id_class.generate()
        assert str(uuid.UUID(generated.value)) == generated.value

    @pytest.mark.parametrize("id_class", [CategoryId, ExpenseId, ProvisionId])
    def test_空文字はエラー(self, id_class) -> None:
        with pytest.raises(ValueError, match="cannot be empty"):
            id_class("")

    def test_同じ値なら等価(self) -> None:
        assert CategoryId("abc") == CategoryId("abc")
        assert str(ProvisionId("xyz")) == "xyz"
