"""Unit tests for ReplyService."""

from uuid import uuid4

import pytest

from qna.domain.error import NotFoundError, ValidationError
from qna.domain.repository import AnswerRepository, QuestionRepository, ReplyRepository
from qna.domain.service import ReplyService
from qna.domain.value import AnswerId, ReplyId, UserId
from tests.conftest import at, make_answer, make_question, make_reply
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _saved_answer(env):
    question_repo = await env.get(QuestionRepository)
    answer_repo = await env.get(AnswerRepository)
    question = await question_repo.save(make_question(UserId(uuid4())))
    return await answer_repo.save(make_answer(question.id, UserId(uuid4())))


class TestCreateReply:
    """Tests for create_reply method."""

    @pytest.mark.asyncio
    async def test_create_top_level_reply(self, unit_env):
        # Arrange
        reply_service = await unit_env.get(ReplyService)
        answer = await _saved_answer(unit_env)
        author_id = UserId(uuid4())

        # Act
        reply = await reply_service.create_reply(answer.id, author_id, "  Thanks!  ")

        # Assert
        assert reply.answer_id == answer.id
        assert reply.author_id == author_id
        assert reply.content == "Thanks!"
        assert reply.is_top_level
        assert reply.vote_count == 0

    @pytest.mark.asyncio
    async def test_create_nested_reply(self, unit_env):
        # Arrange
        reply_service = await unit_env.get(ReplyService)
        answer = await _saved_answer(unit_env)
        parent = await reply_service.create_reply(answer.id, UserId(uuid4()), "Parent")

        # Act
        child = await reply_service.create_reply(
            answer.id, UserId(uuid4()), "Child", parent_reply_id=parent.id
        )

        # Assert
        assert child.parent_reply_id == parent.id
        assert await reply_service.get_depth(child) == 1
        assert await reply_service.get_depth(parent) == 0

    @pytest.mark.asyncio
    async def test_empty_content_rejected(self, unit_env):
        # Arrange
        reply_service = await unit_env.get(ReplyService)
        answer = await _saved_answer(unit_env)

        # Act & Assert
        with pytest.raises(ValidationError, match="Content is required"):
            await reply_service.create_reply(answer.id, UserId(uuid4()), "   ")

    @pytest.mark.asyncio
    async def test_missing_answer_raises_not_found(self, unit_env):
        reply_service = await unit_env.get(ReplyService)

        with pytest.raises(NotFoundError, match="Answer not found"):
            await reply_service.create_reply(AnswerId(uuid4()), UserId(uuid4()), "Hello")

    @pytest.mark.asyncio
    async def test_missing_parent_raises_not_found(self, unit_env):
        # Arrange
        reply_service = await unit_env.get(ReplyService)
        answer = await _saved_answer(unit_env)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Reply not found"):
            await reply_service.create_reply(
                answer.id, UserId(uuid4()), "Hello", parent_reply_id=ReplyId(uuid4())
            )

    @pytest.mark.asyncio
    async def test_parent_from_another_answer_rejected(self, unit_env):
        # Arrange
        reply_service = await unit_env.get(ReplyService)
        answer = await _saved_answer(unit_env)
        other_answer = await _saved_answer(unit_env)
        foreign_parent = await reply_service.create_reply(
            other_answer.id, UserId(uuid4()), "Elsewhere"
        )

        # Act & Assert
        with pytest.raises(ValidationError, match="does not belong"):
            await reply_service.create_reply(
                answer.id, UserId(uuid4()), "Hello", parent_reply_id=foreign_parent.id
            )


class TestListReplies:
    """Tests for list_replies method."""

    @pytest.mark.asyncio
    async def test_top_level_only_newest_first(self, unit_env):
        # Arrange
        reply_service = await unit_env.get(ReplyService)
        reply_repo = await unit_env.get(ReplyRepository)
        answer = await _saved_answer(unit_env)
        older = await reply_repo.save(make_reply(answer.id, UserId(uuid4()), created_at=at(1)))
        newer = await reply_repo.save(make_reply(answer.id, UserId(uuid4()), created_at=at(2)))
        await reply_repo.save(
            make_reply(answer.id, UserId(uuid4()), parent_reply_id=older.id, created_at=at(3))
        )

        # Act
        replies = await reply_service.list_replies(answer.id)

        # Assert
        assert [r.id for r in replies] == [newer.id, older.id]

    @pytest.mark.asyncio
    async def test_children_of_a_parent(self, unit_env):
        # Arrange
        reply_service = await unit_env.get(ReplyService)
        reply_repo = await unit_env.get(ReplyRepository)
        answer = await _saved_answer(unit_env)
        parent = await reply_repo.save(make_reply(answer.id, UserId(uuid4()), created_at=at(1)))
        first = await reply_repo.save(
            make_reply(answer.id, UserId(uuid4()), parent_reply_id=parent.id, created_at=at(2))
        )
        second = await reply_repo.save(
            make_reply(answer.id, UserId(uuid4()), parent_reply_id=parent.id, created_at=at(3))
        )

        # Act
        replies = await reply_service.list_replies(answer.id, parent_reply_id=parent.id)

        # Assert
        assert [r.id for r in replies] == [second.id, first.id]

    @pytest.mark.asyncio
    async def test_replies_are_scoped_to_answer(self, unit_env):
        # Arrange
        reply_service = await unit_env.get(ReplyService)
        answer = await _saved_answer(unit_env)
        other_answer = await _saved_answer(unit_env)
        await reply_service.create_reply(other_answer.id, UserId(uuid4()), "Elsewhere")

        # Act
        replies = await reply_service.list_replies(answer.id)

        # Assert
        assert replies == []

    @pytest.mark.asyncio
    async def test_missing_answer_raises_not_found(self, unit_env):
        reply_service = await unit_env.get(ReplyService)

        with pytest.raises(NotFoundError):
            await reply_service.list_replies(AnswerId(uuid4()))


class TestReplyTree:
    """Tests for get_reply_tree method."""

    @pytest.mark.asyncio
    async def test_builds_nested_tree(self, unit_env):
        """Two roots, one with a two-level chain beneath it."""
        # Arrange
        reply_service = await unit_env.get(ReplyService)
        reply_repo = await unit_env.get(ReplyRepository)
        answer = await _saved_answer(unit_env)
        author = UserId(uuid4())
        root_a = await reply_repo.save(make_reply(answer.id, author, created_at=at(1)))
        root_b = await reply_repo.save(make_reply(answer.id, author, created_at=at(2)))
        child = await reply_repo.save(
            make_reply(answer.id, author, parent_reply_id=root_a.id, created_at=at(3))
        )
        grandchild = await reply_repo.save(
            make_reply(answer.id, author, parent_reply_id=child.id, created_at=at(4))
        )

        # Act
        roots = await reply_service.get_reply_tree(answer.id)

        # Assert - roots newest first
        assert [n.reply.id for n in roots] == [root_b.id, root_a.id]
        node_a = roots[1]
        assert node_a.depth == 0
        assert [n.reply.id for n in node_a.children] == [child.id]
        assert node_a.children[0].depth == 1
        assert [n.reply.id for n in node_a.children[0].children] == [grandchild.id]
        assert node_a.children[0].children[0].depth == 2
        assert roots[0].children == []

    @pytest.mark.asyncio
    async def test_empty_tree(self, unit_env):
        reply_service = await unit_env.get(ReplyService)
        answer = await _saved_answer(unit_env)

        assert await reply_service.get_reply_tree(answer.id) == []

    @pytest.mark.asyncio
    async def test_orphaned_reply_surfaces_at_top_level(self, unit_env):
        # Arrange
        reply_service = await unit_env.get(ReplyService)
        reply_repo = await unit_env.get(ReplyRepository)
        answer = await _saved_answer(unit_env)
        orphan = await reply_repo.save(
            make_reply(answer.id, UserId(uuid4()), parent_reply_id=ReplyId(uuid4()))
        )

        # Act
        roots = await reply_service.get_reply_tree(answer.id)

        # Assert
        assert [n.reply.id for n in roots] == [orphan.id]

    @pytest.mark.asyncio
    async def test_deep_chain_beyond_recursion_limit(self, unit_env):
        """A single chain deeper than the interpreter's recursion limit."""
        # Arrange
        reply_service = await unit_env.get(ReplyService)
        reply_repo = await unit_env.get(ReplyRepository)
        answer = await _saved_answer(unit_env)
        author = UserId(uuid4())
        parent_id = None
        for i in range(1500):
            reply = await reply_repo.save(
                make_reply(answer.id, author, parent_reply_id=parent_id, created_at=at(i))
            )
            parent_id = reply.id

        # Act
        roots = await reply_service.get_reply_tree(answer.id)

        # Assert
        assert len(roots) == 1
        node = roots[0]
        while node.children:
            assert len(node.children) == 1
            node = node.children[0]
        assert node.depth == 1499
        assert node.reply.id == parent_id
