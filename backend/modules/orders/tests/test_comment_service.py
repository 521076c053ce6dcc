import pytest

from core.exceptions import NotFoundError, ValidationError
from modules.orders.services.comment_service import CommentService


@pytest.fixture
def comment_service(store):
    return CommentService(store)


class TestCommentService:

    def test_add_and_list_newest_first(self, comment_service, sample_order):
        comment_service.add_comment(sample_order.id, "cashier", "extra hot")
        comment_service.add_comment(sample_order.id, "master", "out of oat milk")

        comments = comment_service.list_comments(sample_order.id)

        assert [c.text for c in comments] == ["out of oat milk", "extra hot"]

    @pytest.mark.parametrize("author", ["", "barista", "Cashier"])
    def test_unknown_author(self, comment_service, sample_order, author):
        with pytest.raises(ValidationError):
            comment_service.add_comment(sample_order.id, author, "hello")

    def test_empty_text(self, comment_service, sample_order):
        with pytest.raises(ValidationError):
            comment_service.add_comment(sample_order.id, "serve", "  ")

    def test_unknown_order(self, comment_service):
        with pytest.raises(NotFoundError):
            comment_service.add_comment("missing", "cashier", "hello")
        with pytest.raises(NotFoundError):
            comment_service.list_comments("missing")
