# story_social/models/comment.py
from dataclasses import dataclass, field
from typing import Any, Dict, List

@dataclass
class Comment:
    """
    Story comment document node. `replies` holds nested comments of any depth.
    """
    comment_id: str
    comment_text: str = ""
    posted_by: Dict[str, Any] = field(default_factory=dict)  # {'id', ...}
    posted_date: str = ""
    liked_by: List[str] = field(default_factory=list)
    replies: List["Comment"] = field(default_factory=list)
