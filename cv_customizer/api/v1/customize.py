from fastapi import APIRouter, Depends, Request

from cv_customizer.ai.factory import get_ai_client
from cv_customizer.ai.types import AIClient
from cv_customizer.core.rate_limit import rate_limit
from cv_customizer.schemas.customize import CustomizeRequest, CustomizeResponse, ErrorResponse
from cv_customizer.services.customize_service import customize

router = APIRouter()


@router.post(
    "/customize",
    response_model=CustomizeResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
    summary="Tailor a resume and write a cover letter for a job description.",
)
@rate_limit()
async def customize_resume(
    request: Request,
    payload: CustomizeRequest,
    client: AIClient = Depends(get_ai_client),
):
    _ = request
    result = await customize(payload.current_resume, payload.job_description, client)
    return CustomizeResponse(tailored_resume=result.tailored_resume, cover_letter=result.cover_letter)
