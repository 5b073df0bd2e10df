"""Shared in-memory store for the test repositories.

One instance lives for the whole container (APP scope) so that state
written in one request is visible to the next, like a real database.
"""

from dataclasses import dataclass, field
from uuid import UUID

from qna.domain.model import Answer, Comment, Question, Reply, User, Vote
from qna.domain.value import AnswerId, CommentId, QuestionId, ReplyId, UserId, VotableType


@dataclass
class InMemoryDatabase:
    """Tables of the in-memory store, keyed by primary key."""

    users: dict[UserId, User] = field(default_factory=dict)
    questions: dict[QuestionId, Question] = field(default_factory=dict)
    answers: dict[AnswerId, Answer] = field(default_factory=dict)
    replies: dict[ReplyId, Reply] = field(default_factory=dict)
    comments: dict[CommentId, Comment] = field(default_factory=dict)
    # Unique on (user_id, votable_type, votable_id)
    votes: dict[tuple[UserId, VotableType, UUID], Vote] = field(default_factory=dict)

    def cascade_answers(self, answer_ids: set[AnswerId]) -> None:
        """Drop replies and comments of deleted answers (ON DELETE CASCADE)."""
        for rid in [rid for rid, r in self.replies.items() if r.answer_id in answer_ids]:
            del self.replies[rid]
        for cid in [cid for cid, c in self.comments.items() if c.answer_id in answer_ids]:
            del self.comments[cid]

    def cascade_question(self, question_id: QuestionId) -> None:
        """Drop answers and comments of a deleted question (ON DELETE CASCADE)."""
        answer_ids = {aid for aid, a in self.answers.items() if a.question_id == question_id}
        for aid in answer_ids:
            del self.answers[aid]
        self.cascade_answers(answer_ids)
        for cid in [cid for cid, c in self.comments.items() if c.question_id == question_id]:
            del self.comments[cid]
