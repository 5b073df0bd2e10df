"""Reply domain service.

Replies form an unbounded-depth tree under an answer, keyed by
(answer_id, parent_reply_id).
"""

from collections import defaultdict
from dataclasses import dataclass
from typing import Optional
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from qna.domain.error import NotFoundError, ValidationError
from qna.domain.model import Reply
from qna.domain.repository import AnswerRepository, ReplyRepository
from qna.domain.value import AnswerId, ReplyId, UserId

from .base import Service


@dataclass
class ReplyTreeNode:
    """Node in the reply tree of an answer."""

    reply: Reply
    depth: int
    children: list["ReplyTreeNode"]


class ReplyService(Service):
    """Domain service for reply operations."""

    def __init__(
        self,
        reply_repository: ReplyRepository,
        answer_repository: AnswerRepository,
    ) -> None:
        """Initialize reply service.

        Args:
            reply_repository: Reply repository
            answer_repository: Answer repository
        """
        self.reply_repository = reply_repository
        self.answer_repository = answer_repository

    async def _require_answer(self, answer_id: AnswerId) -> None:
        answer = await self.answer_repository.find_by_id(answer_id)
        if answer is None:
            logfire.warn("Answer not found", answer_id=str(answer_id))
            raise NotFoundError("Answer", str(answer_id))

    async def list_replies(
        self,
        answer_id: AnswerId,
        parent_reply_id: Optional[ReplyId] = None,
    ) -> list[Reply]:
        """List one level of replies under an answer.

        Args:
            answer_id: Answer ID
            parent_reply_id: None for top-level replies, otherwise the
                reply whose direct children are listed

        Returns:
            Replies newest first

        Raises:
            NotFoundError: If the answer does not exist
        """
        with logfire.span(
            "reply_service.list_replies",
            answer_id=str(answer_id),
            parent_reply_id=str(parent_reply_id) if parent_reply_id else None,
        ):
            await self._require_answer(answer_id)
            replies = await self.reply_repository.find_by_answer(answer_id, parent_reply_id)
            logfire.info("Replies listed", answer_id=str(answer_id), count=len(replies))
            return replies

    async def create_reply(
        self,
        answer_id: AnswerId,
        author_id: UserId,
        content: str,
        parent_reply_id: Optional[ReplyId] = None,
    ) -> Reply:
        """Create a reply to an answer or to another reply.

        Args:
            answer_id: Answer ID
            author_id: Author user ID
            content: Reply text
            parent_reply_id: Parent reply for nested replies (None for top-level)

        Returns:
            Created reply

        Raises:
            ValidationError: If content is empty or the parent belongs to
                another answer
            NotFoundError: If the answer or parent reply does not exist
        """
        with logfire.span(
            "reply_service.create_reply",
            answer_id=str(answer_id),
            author_id=str(author_id),
            parent_reply_id=str(parent_reply_id) if parent_reply_id else None,
        ):
            content = content.strip()
            if not content:
                raise ValidationError("Content is required")

            await self._require_answer(answer_id)

            if parent_reply_id is not None:
                parent = await self.reply_repository.find_by_id(parent_reply_id)
                if parent is None:
                    logfire.warn("Parent reply not found", parent_reply_id=str(parent_reply_id))
                    raise NotFoundError("Reply", str(parent_reply_id))
                if parent.answer_id != answer_id:
                    logfire.warn(
                        "Parent reply does not belong to answer",
                        parent_reply_id=str(parent_reply_id),
                        parent_answer_id=str(parent.answer_id),
                        target_answer_id=str(answer_id),
                    )
                    raise ValidationError("Parent reply does not belong to this answer")

            try:
                reply = Reply(
                    id=ReplyId(uuid4()),
                    answer_id=answer_id,
                    author_id=author_id,
                    content=content,
                    parent_reply_id=parent_reply_id,
                )
            except PydanticValidationError as e:
                raise ValidationError.from_pydantic(e)

            saved = await self.reply_repository.save(reply)
            logfire.info(
                "Reply created",
                reply_id=str(saved.id),
                answer_id=str(answer_id),
                top_level=saved.is_top_level,
            )
            return saved

    async def get_depth(self, reply: Reply) -> int:
        """Number of ancestors above a reply (0 for top-level)."""
        depth = 0
        seen = {reply.id}
        parent_id = reply.parent_reply_id
        while parent_id is not None and parent_id not in seen:
            parent = await self.reply_repository.find_by_id(parent_id)
            if parent is None:
                break
            seen.add(parent.id)
            depth += 1
            parent_id = parent.parent_reply_id
        return depth

    async def get_reply_tree(self, answer_id: AnswerId) -> list[ReplyTreeNode]:
        """Build the full reply forest of an answer.

        All replies are loaded with one query and linked through
        parent_reply_id. Siblings stay newest first at every level.

        Raises:
            NotFoundError: If the answer does not exist
        """
        with logfire.span("reply_service.get_reply_tree", answer_id=str(answer_id)):
            await self._require_answer(answer_id)
            replies = await self.reply_repository.find_all_by_answer(answer_id)

            known = {r.id for r in replies}
            children: dict[Optional[ReplyId], list[Reply]] = defaultdict(list)
            for reply in replies:
                # Orphans (parent gone) surface at the top level
                parent = reply.parent_reply_id if reply.parent_reply_id in known else None
                children[parent].append(reply)

            roots = [ReplyTreeNode(reply=r, depth=0, children=[]) for r in children.get(None, [])]
            stack = list(roots)
            while stack:
                node = stack.pop()
                for child in children.get(node.reply.id, []):
                    child_node = ReplyTreeNode(reply=child, depth=node.depth + 1, children=[])
                    node.children.append(child_node)
                    stack.append(child_node)

            logfire.info("Reply tree built", answer_id=str(answer_id), count=len(replies))
            return roots
