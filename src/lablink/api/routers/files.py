"""File upload validation endpoint."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from fastapi.responses import JSONResponse

from ...config.constants import DEFAULT_ATTACHMENT_CATEGORY
from ...platform.files.core.entities.upload_task import UploadStage, UploadTask
from ...utils.validation import is_valid_uuid
from ..auth import AuthenticatedUser
from ..dependencies import get_client_ip, get_current_user, get_services
from ..services import ServiceContainer

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Files"])


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.post("/validate-file-upload")
async def validate_file_upload(
    request: Request,
    file: Optional[UploadFile] = File(None),
    order_id: Optional[str] = Form(None, alias="orderId"),
    category: Optional[str] = Form(None),
    user: AuthenticatedUser = Depends(get_current_user),
    services: ServiceContainer = Depends(get_services),
):
    """Validate an upload server side and store it when it passes.

    Rejected files are recorded as security alerts before the 400
    response is returned.
    """
    if file is None:
        return _error(400, "No file provided")

    try:
        content = await file.read()
        filename = file.filename or ""
        mime_type = file.content_type or ""

        validation = services.file_validator.validate(content, filename, mime_type)

        if not validation.valid:
            await services.security_alerts.report_malicious_upload(
                user_id=user.id,
                email=user.email,
                file_name=filename,
                file_size=len(content),
                mime_type=mime_type,
                errors=validation.errors,
                order_id=order_id,
                ip_address=get_client_ip(request),
                user_agent=request.headers.get("user-agent"),
            )
            return JSONResponse(
                status_code=400,
                content={
                    "valid": False,
                    "errors": validation.errors,
                    "warnings": validation.warnings,
                },
            )

        if not order_id or not is_valid_uuid(order_id):
            return _error(400, "A valid orderId is required")

        task = UploadTask.create(
            content=content,
            filename=filename,
            content_type=mime_type,
            order_id=order_id,
            user_id=user.id,
            category=category or DEFAULT_ATTACHMENT_CATEGORY,
        )
        result = await services.upload_command.execute(task)
    except Exception as e:
        logger.error(f"Validation error: {e}")
        return _error(500, "File validation failed")

    if not result.success:
        logger.error(f"Upload of {filename!r} failed at {result.failed_stage}: {result.error}")
        if result.failed_stage == UploadStage.METADATA:
            return _error(500, "Failed to save file metadata")
        return _error(500, "Failed to upload file")

    return {
        "valid": True,
        "warnings": validation.warnings,
        "filePath": result.file_path,
        "metadata": validation.metadata.to_dict(),
    }
