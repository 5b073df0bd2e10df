"""Reply entity.

Replies hang off an answer and nest through parent_reply_id with
unlimited depth.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from qna.domain.model.common import VotableModel
from qna.domain.value import AnswerId, ReplyId, UserId


class Reply(VotableModel):
    """Reply to an answer or to another reply.

    - parent_reply_id: Direct parent reply (None for top-level)
    """

    id: ReplyId
    answer_id: AnswerId
    author_id: UserId
    content: str = Field(min_length=1)
    parent_reply_id: Optional[ReplyId] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_top_level(self) -> bool:
        return self.parent_reply_id is None
