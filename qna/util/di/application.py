"""Application layer DI providers."""

from dishka import Scope, provide

from qna.application.usecase.answer import (
    AcceptAnswerUseCase,
    CreateAnswerUseCase,
    ListAnswersUseCase,
)
from qna.application.usecase.comment import CreateCommentUseCase, ListCommentsUseCase
from qna.application.usecase.question import (
    CreateQuestionUseCase,
    DeleteQuestionUseCase,
    GetQuestionUseCase,
    ListQuestionsUseCase,
    UpdateQuestionUseCase,
)
from qna.application.usecase.reply import (
    CreateReplyUseCase,
    GetReplyTreeUseCase,
    ListRepliesUseCase,
)
from qna.application.usecase.user import GetUserProfileUseCase
from qna.application.usecase.vote import CastVoteUseCase
from qna.config import ListingSettings
from qna.domain.service import (
    AggregationService,
    AnswerService,
    CommentService,
    QuestionService,
    ReplyService,
    UserService,
    VoteService,
)
from qna.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Question use cases
    @provide(scope=Scope.REQUEST)
    def get_create_question_use_case(
        self, question_service: QuestionService, user_service: UserService
    ) -> CreateQuestionUseCase:
        """Provide create question use case."""
        return CreateQuestionUseCase(
            question_service=question_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_questions_use_case(
        self,
        question_service: QuestionService,
        aggregation_service: AggregationService,
        user_service: UserService,
        listing_settings: ListingSettings,
    ) -> ListQuestionsUseCase:
        """Provide list questions use case."""
        return ListQuestionsUseCase(
            question_service=question_service,
            aggregation_service=aggregation_service,
            user_service=user_service,
            listing_settings=listing_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_question_use_case(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        aggregation_service: AggregationService,
        user_service: UserService,
    ) -> GetQuestionUseCase:
        """Provide get question use case."""
        return GetQuestionUseCase(
            question_service=question_service,
            answer_service=answer_service,
            aggregation_service=aggregation_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_question_use_case(
        self,
        question_service: QuestionService,
        aggregation_service: AggregationService,
        user_service: UserService,
    ) -> UpdateQuestionUseCase:
        """Provide update question use case."""
        return UpdateQuestionUseCase(
            question_service=question_service,
            aggregation_service=aggregation_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_question_use_case(
        self, question_service: QuestionService
    ) -> DeleteQuestionUseCase:
        """Provide delete question use case."""
        return DeleteQuestionUseCase(question_service=question_service)

    # Answer use cases
    @provide(scope=Scope.REQUEST)
    def get_create_answer_use_case(
        self, answer_service: AnswerService, user_service: UserService
    ) -> CreateAnswerUseCase:
        """Provide create answer use case."""
        return CreateAnswerUseCase(answer_service=answer_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_list_answers_use_case(
        self,
        answer_service: AnswerService,
        aggregation_service: AggregationService,
        user_service: UserService,
    ) -> ListAnswersUseCase:
        """Provide list answers use case."""
        return ListAnswersUseCase(
            answer_service=answer_service,
            aggregation_service=aggregation_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_accept_answer_use_case(
        self,
        answer_service: AnswerService,
        aggregation_service: AggregationService,
        user_service: UserService,
    ) -> AcceptAnswerUseCase:
        """Provide accept answer use case."""
        return AcceptAnswerUseCase(
            answer_service=answer_service,
            aggregation_service=aggregation_service,
            user_service=user_service,
        )

    # Reply use cases
    @provide(scope=Scope.REQUEST)
    def get_list_replies_use_case(
        self,
        reply_service: ReplyService,
        aggregation_service: AggregationService,
        user_service: UserService,
    ) -> ListRepliesUseCase:
        """Provide list replies use case."""
        return ListRepliesUseCase(
            reply_service=reply_service,
            aggregation_service=aggregation_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_create_reply_use_case(
        self, reply_service: ReplyService, user_service: UserService
    ) -> CreateReplyUseCase:
        """Provide create reply use case."""
        return CreateReplyUseCase(reply_service=reply_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_reply_tree_use_case(
        self,
        reply_service: ReplyService,
        aggregation_service: AggregationService,
        user_service: UserService,
    ) -> GetReplyTreeUseCase:
        """Provide reply tree use case."""
        return GetReplyTreeUseCase(
            reply_service=reply_service,
            aggregation_service=aggregation_service,
            user_service=user_service,
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_comments_use_case(
        self,
        comment_service: CommentService,
        aggregation_service: AggregationService,
        user_service: UserService,
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(
            comment_service=comment_service,
            aggregation_service=aggregation_service,
            user_service=user_service,
        )

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_user_profile_use_case(
        self, user_service: UserService, listing_settings: ListingSettings
    ) -> GetUserProfileUseCase:
        """Provide get user profile use case."""
        return GetUserProfileUseCase(
            user_service=user_service, listing_settings=listing_settings
        )
