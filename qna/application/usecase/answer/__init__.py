"""Answer use cases."""

from .accept_answer import AcceptAnswerRequest, AcceptAnswerUseCase
from .create_answer import CreateAnswerRequest, CreateAnswerUseCase
from .list_answers import ListAnswersRequest, ListAnswersResponse, ListAnswersUseCase

__all__ = [
    "AcceptAnswerRequest",
    "AcceptAnswerUseCase",
    "CreateAnswerRequest",
    "CreateAnswerUseCase",
    "ListAnswersRequest",
    "ListAnswersResponse",
    "ListAnswersUseCase",
]
