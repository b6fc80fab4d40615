from typing import List

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from pdfsnap.models import CandidateFile
from pdfsnap.services.controller import ConverterController, get_controller

router = APIRouter(prefix="/intake", tags=["Intake"])


async def _candidate(upload: UploadFile) -> CandidateFile:
    content = await upload.read()
    return CandidateFile(
        media_type=(upload.content_type or "").lower(),
        name=upload.filename or "",
        content=content,
        size=len(content),
    )


def _response(controller: ConverterController, accepted: bool = True) -> dict:
    state = controller.state()
    toast = state.toast.model_dump(mode="json") if state.toast else None
    if not accepted:
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail={"message": toast["text"] if toast else "", "toast": toast},
        )
    return {"status": "ok", "workspace": state.model_dump(mode="json"), "toast": toast}


@router.get("/state", summary="Current staged file, busy flag and toast")
async def get_state(controller: ConverterController = Depends(get_controller)) -> dict:
    return {"status": "ok", "workspace": controller.state().model_dump(mode="json")}


@router.post("/browse", summary="Stage an image chosen through the file picker")
async def browse(
    file: UploadFile = File(...),
    controller: ConverterController = Depends(get_controller),
) -> dict:
    accepted = controller.intake.select_file(await _candidate(file))
    return _response(controller, accepted)


@router.post("/drop", summary="Stage the first image of a drag-and-drop gesture")
async def drop(
    files: List[UploadFile] = File(...),
    controller: ConverterController = Depends(get_controller),
) -> dict:
    candidates = [await _candidate(upload) for upload in files[:1]]
    accepted = controller.intake.drop(candidates)
    return _response(controller, accepted)


@router.delete("", summary="Remove the staged image")
async def clear(controller: ConverterController = Depends(get_controller)) -> dict:
    controller.intake.clear()
    return _response(controller)
