"""
Community feedback hooks.

These are simulated: nothing leaves the process. A real implementation would
call an external service with the same inputs and outputs.
"""

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping

logger = logging.getLogger(__name__)

VOTE_DIRECTIONS = ("up", "down")

TOP_REQUESTED_FEATURES: List[Dict[str, Any]] = [
    {"name": "CSS Anchor Positioning", "votes": 234, "status": "experimental"},
    {"name": "Array.prototype.groupBy()", "votes": 187, "status": "stage3"},
    {"name": "CSS View Transitions", "votes": 156, "status": "limited"},
]


@dataclass(frozen=True)
class FeatureRequestReceipt:
    id: str
    name: str
    submitted_at: str


@dataclass(frozen=True)
class VoteAck:
    feature_id: str
    direction: str
    accepted: bool = True


class CommunityClient:
    """Simulated community platform client."""

    def submit_feature_request(self, fields: Mapping[str, Any]) -> FeatureRequestReceipt:
        name = str(fields.get("name") or "").strip()
        if not name:
            raise ValueError("Feature request needs a name")
        receipt = FeatureRequestReceipt(
            id=uuid.uuid4().hex,
            name=name,
            submitted_at=datetime.now(timezone.utc).isoformat(),
        )
        logger.info("Feature request %s submitted for %r", receipt.id, name)
        return receipt

    def vote_on_feature(self, feature_id: str, direction: str) -> VoteAck:
        if direction not in VOTE_DIRECTIONS:
            raise ValueError(f'Vote must be "up" or "down", got {direction!r}')
        logger.info("Vote %s recorded for feature %s", direction, feature_id)
        return VoteAck(feature_id=feature_id, direction=direction)

    def top_requested_features(self) -> List[Dict[str, Any]]:
        return [dict(item) for item in TOP_REQUESTED_FEATURES]
