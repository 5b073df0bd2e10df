"""List questions use case."""

import math
from typing import Optional

import logfire
from pydantic import BaseModel, Field

from qna.application.usecase.common import QuestionItem
from qna.config import ListingSettings
from qna.domain.service import AggregationService, QuestionService, UserService
from qna.domain.value import QuestionSortOrder, VotableType


class ListQuestionsRequest(BaseModel):
    """List questions request."""

    page: int = Field(default=1, ge=1)
    limit: Optional[int] = Field(default=None, ge=1)
    sort: QuestionSortOrder = QuestionSortOrder.LATEST
    subject: Optional[str] = None  # Filter by tag
    search: Optional[str] = None


class ListQuestionsResponse(BaseModel):
    """List questions response."""

    questions: list[QuestionItem]
    total_pages: int
    current_page: int
    total: int


class ListQuestionsUseCase:
    """Use case for the paginated question listing."""

    def __init__(
        self,
        question_service: QuestionService,
        aggregation_service: AggregationService,
        user_service: UserService,
        listing_settings: ListingSettings,
    ) -> None:
        """Initialize list questions use case.

        Args:
            question_service: Question domain service
            aggregation_service: Vote sets and answer counts
            user_service: Author display fields
            listing_settings: Page size defaults and limits
        """
        self.question_service = question_service
        self.aggregation_service = aggregation_service
        self.user_service = user_service
        self.listing_settings = listing_settings

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        """Execute list questions flow.

        Args:
            request: Filters and pagination

        Returns:
            One page of questions with answer counts merged in
        """
        limit = min(
            request.limit or self.listing_settings.default_page_size,
            self.listing_settings.max_page_size,
        )

        with logfire.span(
            "list_questions.execute",
            page=request.page,
            limit=limit,
            sort=request.sort.value,
        ):
            questions, total = await self.question_service.list_questions(
                sort=request.sort,
                subject=request.subject,
                search=request.search,
                page=request.page,
                limit=limit,
            )

            questions = await self.aggregation_service.attach_votes(
                VotableType.QUESTION, questions
            )
            counts = await self.aggregation_service.answer_counts([q.id for q in questions])
            authors = await self.user_service.get_authors([q.author_id for q in questions])

            return ListQuestionsResponse(
                questions=[
                    QuestionItem.build(q, authors[q.author_id], counts.get(q.id, 0))
                    for q in questions
                ],
                total_pages=math.ceil(total / limit),
                current_page=request.page,
                total=total,
            )
