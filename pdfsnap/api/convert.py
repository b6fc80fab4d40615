from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Response, status

from pdfsnap.services.controller import ConverterController, get_controller
from pdfsnap.services.conversion_service import ConversionError

router = APIRouter(prefix="/convert", tags=["Conversion"])


def _toast_error(controller: ConverterController, status_code: int) -> HTTPException:
    toast = controller.notifier.current
    return HTTPException(
        status_code=status_code,
        detail={
            "message": toast.text if toast else "",
            "toast": toast.model_dump(mode="json") if toast else None,
        },
    )


@router.post("", summary="Convert the staged image into a one-page PDF")
async def convert(controller: ConverterController = Depends(get_controller)) -> dict:
    try:
        result = await controller.orchestrator.convert()
    except ConversionError as exc:
        raise _toast_error(controller, status.HTTP_422_UNPROCESSABLE_ENTITY) from exc

    if result is None:
        raise _toast_error(controller, status.HTTP_409_CONFLICT)

    return {
        "status": "ok",
        "message": controller.notifier.current.text,
        "result": result.model_dump(mode="json"),
        "toast": controller.notifier.current.model_dump(mode="json"),
    }


@router.get("/download/{token}", summary="Download a generated PDF once")
async def download(token: str, controller: ConverterController = Depends(get_controller)) -> Response:
    document = controller.downloads.pop(token)
    disposition = f"attachment; filename*=UTF-8''{quote(document.filename)}"
    return Response(
        content=document.data,
        media_type="application/pdf",
        headers={"Content-Disposition": disposition},
    )
