"""Mock persistence providers for testing."""

from dishka import Scope, provide

from qna.domain.repository import (
    AnswerRepository,
    CommentRepository,
    QuestionRepository,
    ReplyRepository,
    UserRepository,
    VoteRepository,
)
from qna.persistence.repository.inmemory import (
    InMemoryAnswerRepository,
    InMemoryCommentRepository,
    InMemoryDatabase,
    InMemoryQuestionRepository,
    InMemoryReplyRepository,
    InMemoryUserRepository,
    InMemoryVoteRepository,
)
from qna.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The store is APP-scoped so requests against one container share data,
    while each test builds its own container and starts empty.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_database(self) -> InMemoryDatabase:
        """Provide the shared in-memory store."""
        return InMemoryDatabase()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, db: InMemoryDatabase) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository(db)

    @provide(scope=Scope.REQUEST)
    def get_question_repository(self, db: InMemoryDatabase) -> QuestionRepository:
        """Provide in-memory question repository."""
        return InMemoryQuestionRepository(db)

    @provide(scope=Scope.REQUEST)
    def get_answer_repository(self, db: InMemoryDatabase) -> AnswerRepository:
        """Provide in-memory answer repository."""
        return InMemoryAnswerRepository(db)

    @provide(scope=Scope.REQUEST)
    def get_reply_repository(self, db: InMemoryDatabase) -> ReplyRepository:
        """Provide in-memory reply repository."""
        return InMemoryReplyRepository(db)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, db: InMemoryDatabase) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository(db)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, db: InMemoryDatabase) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository(db)
