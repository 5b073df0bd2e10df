"""Get reply tree use case."""

from uuid import UUID

from pydantic import BaseModel

from qna.application.usecase.common import ReplyItem
from qna.domain.service import AggregationService, ReplyService, ReplyTreeNode, UserService
from qna.domain.value import AnswerId, VotableType


class ReplyTreeItem(ReplyItem):
    """Reply with its nested children."""

    depth: int
    children: list["ReplyTreeItem"]


class GetReplyTreeRequest(BaseModel):
    answer_id: str  # UUID string


class GetReplyTreeResponse(BaseModel):
    answer_id: str
    replies: list[ReplyTreeItem]
    total: int


class GetReplyTreeUseCase:
    """Use case for loading every reply of an answer as a nested tree."""

    def __init__(
        self,
        reply_service: ReplyService,
        aggregation_service: AggregationService,
        user_service: UserService,
    ) -> None:
        self.reply_service = reply_service
        self.aggregation_service = aggregation_service
        self.user_service = user_service

    async def execute(self, request: GetReplyTreeRequest) -> GetReplyTreeResponse:
        """Execute get reply tree flow.

        Raises:
            NotFoundError: If the answer does not exist
        """
        answer_id = AnswerId(UUID(request.answer_id))
        roots = await self.reply_service.get_reply_tree(answer_id)

        nodes: list[ReplyTreeNode] = []
        stack = list(roots)
        while stack:
            node = stack.pop()
            nodes.append(node)
            stack.extend(node.children)

        replies = await self.aggregation_service.attach_votes(
            VotableType.REPLY, [n.reply for n in nodes]
        )
        voted = {r.id: r for r in replies}
        authors = await self.user_service.get_authors([r.author_id for r in replies])

        def to_item(node: ReplyTreeNode) -> ReplyTreeItem:
            reply = voted[node.reply.id]
            item = ReplyItem.build(reply, authors[reply.author_id])
            return ReplyTreeItem(**item.model_dump(), depth=node.depth, children=[])

        # Link children after construction, without recursion
        root_items = [to_item(root) for root in roots]
        pending = list(zip(roots, root_items))
        while pending:
            node, item = pending.pop()
            for child in node.children:
                child_item = to_item(child)
                item.children.append(child_item)
                pending.append((child, child_item))

        return GetReplyTreeResponse(
            answer_id=str(answer_id),
            replies=root_items,
            total=len(nodes),
        )
