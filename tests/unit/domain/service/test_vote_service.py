"""Unit tests for VoteService."""

from uuid import uuid4

import pytest

from qna.domain.error import NotFoundError, ValidationError
from qna.domain.model import Comment
from qna.domain.repository import (
    AnswerRepository,
    CommentRepository,
    QuestionRepository,
    ReplyRepository,
    VoteRepository,
)
from qna.domain.service import VoteService
from qna.domain.value import CommentId, UserId, VotableType, VoteType
from tests.conftest import make_answer, make_question, make_reply
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


async def _saved_question(env):
    question_repo = await env.get(QuestionRepository)
    return await question_repo.save(make_question(UserId(uuid4())))


class TestQuestionVotes:
    """Toggle behaviour on questions."""

    @pytest.mark.asyncio
    async def test_upvote_from_neutral(self, unit_env):
        """Upvoting with no prior vote adds the user to upvotes."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        question = await _saved_question(unit_env)
        user_id = UserId(uuid4())

        # Act
        state = await vote_service.apply_vote(VotableType.QUESTION, question.id, user_id, "up")

        # Assert
        assert state.upvotes == {user_id}
        assert state.downvotes == frozenset()
        assert state.vote_count == 1

    @pytest.mark.asyncio
    async def test_upvote_twice_removes_vote(self, unit_env):
        """Voting the same direction again retracts it."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        question = await _saved_question(unit_env)
        user_id = UserId(uuid4())
        await vote_service.apply_vote(VotableType.QUESTION, question.id, user_id, "up")

        # Act
        state = await vote_service.apply_vote(VotableType.QUESTION, question.id, user_id, "up")

        # Assert
        assert state.upvotes == frozenset()
        assert state.vote_count == 0
        stored = await vote_repo.find_state(VotableType.QUESTION, question.id)
        assert stored.user_vote(user_id) is None

    @pytest.mark.asyncio
    async def test_downvote_switches_existing_upvote(self, unit_env):
        """Voting the opposite direction moves the user across."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        question = await _saved_question(unit_env)
        user_id = UserId(uuid4())
        await vote_service.apply_vote(VotableType.QUESTION, question.id, user_id, "up")

        # Act
        state = await vote_service.apply_vote(VotableType.QUESTION, question.id, user_id, "down")

        # Assert
        assert user_id not in state.upvotes
        assert state.downvotes == {user_id}
        assert state.vote_count == -1

    @pytest.mark.asyncio
    async def test_votes_from_several_users_accumulate(self, unit_env):
        """Each voter owns one row; counts derive from all of them."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        question = await _saved_question(unit_env)
        up_voters = [UserId(uuid4()) for _ in range(3)]
        down_voter = UserId(uuid4())

        # Act
        for voter in up_voters:
            await vote_service.apply_vote(VotableType.QUESTION, question.id, voter, VoteType.UP)
        state = await vote_service.apply_vote(
            VotableType.QUESTION, question.id, down_voter, VoteType.DOWN
        )

        # Assert
        assert state.upvotes == set(up_voters)
        assert state.downvotes == {down_voter}
        assert state.vote_count == 2

    @pytest.mark.asyncio
    async def test_user_never_in_both_sets(self, unit_env):
        """Any click sequence keeps the two sets disjoint."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        question = await _saved_question(unit_env)
        user_id = UserId(uuid4())

        # Act & Assert
        for direction in ["up", "down", "down", "up", "down", "up", "up"]:
            state = await vote_service.apply_vote(
                VotableType.QUESTION, question.id, user_id, direction
            )
            assert not state.upvotes & state.downvotes
            assert state.vote_count == len(state.upvotes) - len(state.downvotes)


class TestVotableTypes:
    """The same toggle applies to every votable type."""

    @pytest.mark.asyncio
    async def test_answer_vote(self, unit_env):
        # Arrange
        vote_service = await unit_env.get(VoteService)
        answer_repo = await unit_env.get(AnswerRepository)
        question = await _saved_question(unit_env)
        answer = await answer_repo.save(make_answer(question.id, UserId(uuid4())))
        user_id = UserId(uuid4())

        # Act
        state = await vote_service.apply_vote(VotableType.ANSWER, answer.id, user_id, "down")

        # Assert
        assert state.downvotes == {user_id}
        assert state.vote_count == -1

    @pytest.mark.asyncio
    async def test_reply_vote(self, unit_env):
        # Arrange
        vote_service = await unit_env.get(VoteService)
        answer_repo = await unit_env.get(AnswerRepository)
        reply_repo = await unit_env.get(ReplyRepository)
        question = await _saved_question(unit_env)
        answer = await answer_repo.save(make_answer(question.id, UserId(uuid4())))
        reply = await reply_repo.save(make_reply(answer.id, UserId(uuid4())))
        user_id = UserId(uuid4())

        # Act
        await vote_service.apply_vote(VotableType.REPLY, reply.id, user_id, "up")
        state = await vote_service.apply_vote(VotableType.REPLY, reply.id, user_id, "up")

        # Assert
        assert state.vote_count == 0

    @pytest.mark.asyncio
    async def test_comment_like_and_dislike(self, unit_env):
        # Arrange
        vote_service = await unit_env.get(VoteService)
        comment_repo = await unit_env.get(CommentRepository)
        question = await _saved_question(unit_env)
        comment = await comment_repo.save(
            Comment(
                id=CommentId(uuid4()),
                author_id=UserId(uuid4()),
                content="Nice question",
                question_id=question.id,
            )
        )
        liker, disliker = UserId(uuid4()), UserId(uuid4())

        # Act
        await vote_service.apply_vote(VotableType.COMMENT, comment.id, liker, "up")
        state = await vote_service.apply_vote(VotableType.COMMENT, comment.id, disliker, "down")

        # Assert
        assert state.upvotes == {liker}
        assert state.downvotes == {disliker}
        assert state.vote_count == 0

    @pytest.mark.asyncio
    async def test_votes_are_scoped_per_type(self, unit_env):
        """A vote on a question does not show up on an answer."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        answer_repo = await unit_env.get(AnswerRepository)
        question = await _saved_question(unit_env)
        answer = await answer_repo.save(make_answer(question.id, UserId(uuid4())))
        user_id = UserId(uuid4())

        # Act
        await vote_service.apply_vote(VotableType.QUESTION, question.id, user_id, "up")
        answer_state = await vote_service.get_state(VotableType.ANSWER, answer.id)

        # Assert
        assert answer_state.vote_count == 0


class TestVoteErrors:
    @pytest.mark.asyncio
    async def test_invalid_vote_type_raises_validation_error(self, unit_env):
        # Arrange
        vote_service = await unit_env.get(VoteService)
        question = await _saved_question(unit_env)

        # Act & Assert
        with pytest.raises(ValidationError, match="Invalid vote type"):
            await vote_service.apply_vote(
                VotableType.QUESTION, question.id, UserId(uuid4()), "sideways"
            )

    @pytest.mark.asyncio
    async def test_invalid_vote_type_leaves_state_unchanged(self, unit_env):
        # Arrange
        vote_service = await unit_env.get(VoteService)
        question = await _saved_question(unit_env)
        user_id = UserId(uuid4())
        await vote_service.apply_vote(VotableType.QUESTION, question.id, user_id, "up")

        # Act
        with pytest.raises(ValidationError):
            await vote_service.apply_vote(VotableType.QUESTION, question.id, user_id, "")

        # Assert
        state = await vote_service.get_state(VotableType.QUESTION, question.id)
        assert state.upvotes == {user_id}

    @pytest.mark.asyncio
    async def test_vote_on_missing_item_raises_not_found(self, unit_env):
        # Arrange
        vote_service = await unit_env.get(VoteService)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Answer not found"):
            await vote_service.apply_vote(
                VotableType.ANSWER, uuid4(), UserId(uuid4()), "up"
            )
