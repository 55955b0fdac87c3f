from fastapi import APIRouter
from fastapi.responses import Response

from cv_customizer.schemas.customize import ErrorResponse, ExportRequest
from cv_customizer.services.export_service import ExportedFile, export_pdf, export_text

router = APIRouter()


def _attachment(exported: ExportedFile) -> Response:
    return Response(
        content=exported.content,
        media_type=exported.media_type,
        headers={"Content-Disposition": f'attachment; filename="{exported.filename}"'},
    )


@router.post("/export/txt", responses={400: {"model": ErrorResponse}})
def export_txt(payload: ExportRequest):
    return _attachment(export_text(payload.text, payload.filename))


@router.post("/export/pdf", responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}})
def export_pdf_document(payload: ExportRequest):
    return _attachment(export_pdf(payload.text, payload.filename))
