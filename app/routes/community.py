"""Community routes (simulated feedback hooks)."""

from typing import List

from fastapi import APIRouter, HTTPException

from ..schemas import FeatureRequestIn, FeatureRequestReceiptOut, RequestedFeatureOut, VoteAckOut, VoteIn

from baseline_checker.community import CommunityClient

router = APIRouter(prefix="/community")
community = CommunityClient()


@router.post("/requests", response_model=FeatureRequestReceiptOut)
def submit_request(req: FeatureRequestIn) -> FeatureRequestReceiptOut:
    try:
        receipt = community.submit_feature_request(req.model_dump())
    except ValueError as e:
        raise HTTPException(400, str(e)) from e
    return FeatureRequestReceiptOut(id=receipt.id, name=receipt.name, submitted_at=receipt.submitted_at)


@router.post("/votes", response_model=VoteAckOut)
def vote(req: VoteIn) -> VoteAckOut:
    try:
        ack = community.vote_on_feature(req.feature_id, req.direction)
    except ValueError as e:
        raise HTTPException(400, str(e)) from e
    return VoteAckOut(feature_id=ack.feature_id, direction=ack.direction, accepted=ack.accepted)


@router.get("/top", response_model=List[RequestedFeatureOut])
def top_requested() -> List[RequestedFeatureOut]:
    return [RequestedFeatureOut(**item) for item in community.top_requested_features()]
