"""Domain layer DI providers."""

from dishka import Scope, provide

from qna.config import AuthSettings
from qna.domain.repository import (
    AnswerRepository,
    CommentRepository,
    QuestionRepository,
    ReplyRepository,
    UserRepository,
    VoteRepository,
)
from qna.domain.service import (
    AggregationService,
    AnswerService,
    CommentService,
    JWTService,
    QuestionService,
    ReplyService,
    UserService,
    VoteService,
)
from qna.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        comment_repository: CommentRepository,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            question_repository=question_repository,
            answer_repository=answer_repository,
            comment_repository=comment_repository,
        )

    @provide
    def get_question_service(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        reply_repository: ReplyRepository,
        comment_repository: CommentRepository,
        vote_repository: VoteRepository,
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(
            question_repository=question_repository,
            answer_repository=answer_repository,
            reply_repository=reply_repository,
            comment_repository=comment_repository,
            vote_repository=vote_repository,
        )

    @provide
    def get_answer_service(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
    ) -> AnswerService:
        """Provide answer domain service."""
        return AnswerService(
            answer_repository=answer_repository,
            question_repository=question_repository,
        )

    @provide
    def get_reply_service(
        self,
        reply_repository: ReplyRepository,
        answer_repository: AnswerRepository,
    ) -> ReplyService:
        """Provide reply domain service."""
        return ReplyService(
            reply_repository=reply_repository,
            answer_repository=answer_repository,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            question_repository=question_repository,
            answer_repository=answer_repository,
        )

    @provide
    def get_aggregation_service(
        self,
        vote_repository: VoteRepository,
        answer_repository: AnswerRepository,
    ) -> AggregationService:
        """Provide aggregation domain service."""
        return AggregationService(
            vote_repository=vote_repository,
            answer_repository=answer_repository,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        reply_repository: ReplyRepository,
        comment_repository: CommentRepository,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            question_repository=question_repository,
            answer_repository=answer_repository,
            reply_repository=reply_repository,
            comment_repository=comment_repository,
        )
