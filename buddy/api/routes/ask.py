"""Ask endpoint: one question through the tool-calling agent."""

import logging

from fastapi import APIRouter, Depends

from buddy.agent.orchestrator import Orchestrator
from buddy.api.dependencies import get_agent
from buddy.api.schemas import AskRequest, AskResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ask", tags=["ask"])


@router.post("", response_model=AskResponse)
async def ask(
    request: AskRequest,
    agent: Orchestrator = Depends(get_agent),
) -> AskResponse:
    """Answer a question.

    The agent never raises; provider failures come back as an apology in
    ``answer`` with status 200.
    """
    answer = await agent.handle_message(request.user_id, request.question)
    return AskResponse(answer=answer)
