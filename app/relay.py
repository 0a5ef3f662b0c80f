"""
Upload Relay

Standalone single-route server: accepts a multipart submission, saves the
resume to the local upload directory and echoes the fields back as JSON.
It is not wired to the landing page.
"""

import shutil
from pathlib import Path
from typing import Optional

from fastapi import Depends, FastAPI, Form, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile as StarletteUploadFile

from app.config import RelayConfig, get_relay_config
from app.schemas.relay import RelayData, RelayErrorResponse, RelayResponse
from app.utils.datetime_utils import epoch_millis
from app.utils.logger import get_logger, setup_logging

setup_logging()
logger = get_logger(__name__)

app = FastAPI(
    title="ResumeEdge Upload Relay",
    description="Receives form submissions and stores resumes on local disk",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


def save_upload(upload: StarletteUploadFile, upload_dir: Path) -> str:
    """
    Write ``upload`` to ``upload_dir`` as ``<epoch-millis>-<original name>``.

    Returns:
        The stored file name
    """
    upload_dir.mkdir(parents=True, exist_ok=True)
    stored_name = f"{epoch_millis()}-{Path(upload.filename).name}"
    with open(upload_dir / stored_name, "wb") as out:
        shutil.copyfileobj(upload.file, out)
    return stored_name


@app.on_event("startup")
async def ensure_upload_dir():
    relay_config = get_relay_config()
    relay_config.upload_dir.mkdir(parents=True, exist_ok=True)
    logger.info(f"[Relay] Storing uploads in {relay_config.upload_dir}")


@app.post(
    "/webhook",
    response_model=RelayResponse,
    responses={500: {"model": RelayErrorResponse}},
)
async def receive_webhook(
    request: Request,
    name: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    linkedinUrl: Optional[str] = Form(None),
    relay_config: RelayConfig = Depends(get_relay_config),
):
    try:
        # Read the resume part by hand: a plain text "resume" field means no file
        form = await request.form()
        resume = form.get("resume")

        resume_file = None
        if isinstance(resume, StarletteUploadFile) and resume.filename:
            resume_file = await run_in_threadpool(save_upload, resume, relay_config.upload_dir)

        logger.info(
            "[Relay] Received webhook data: %s",
            {
                "name": name,
                "email": email,
                "linkedinUrl": linkedinUrl,
                "resumeFile": resume_file or "No file uploaded",
            },
        )

        return RelayResponse(
            message="Webhook received successfully",
            data=RelayData(
                name=name,
                email=email,
                linkedinUrl=linkedinUrl,
                resumeFile=resume_file,
            ),
        )
    except Exception as e:
        logger.error(f"[Relay] Webhook error: {e}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=RelayErrorResponse(error="Internal server error", message=str(e)).model_dump(),
        )
