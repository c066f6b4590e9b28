"""HTTP boundary: upload a batch for analysis, download a retained resume."""

import asyncio

from fastapi import FastAPI, File, Form, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse, PlainTextResponse, Response

from resume_screener.batch.coordinator import (
    BatchCoordinator,
    BatchValidationError,
    build_coordinator,
    validate_batch,
)
from resume_screener.config.settings import Settings
from resume_screener.logging.logger import Log
from resume_screener.processor.models import FailureOutcome, FileOutcome, UploadedDocument
from resume_screener.storage.exceptions import InvalidHandleError
from resume_screener.storage.local_store import LocalFileStore

INTERNAL_ERROR_MESSAGE = (
    "Internal server error occurred during resume analysis. Please try again."
)
NOT_FOUND_MESSAGE = "File not found or invalid filename."


def create_app(
    settings: Settings,
    coordinator: BatchCoordinator | None = None,
) -> FastAPI:
    """Build the FastAPI application around a single coordinator instance."""
    if coordinator is None:
        coordinator = build_coordinator(settings)
    store = coordinator.store

    app = FastAPI(title="Resume Screener")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/analyze")
    async def analyze(
        job_description: str = Form("", alias="jobDescription"),
        resumes: list[UploadFile] | None = File(None),
    ) -> Response:
        uploads = resumes or []
        try:
            validate_batch(uploads, job_description)
        except BatchValidationError as exc:
            return JSONResponse(status_code=400, content={"error": str(exc)})

        # a part that cannot be stored fails alone; the rest still go to the coordinator
        slots: list[FileOutcome | UploadedDocument] = [
            await _store_upload(store, upload) for upload in uploads
        ]
        documents = [slot for slot in slots if isinstance(slot, UploadedDocument)]

        try:
            analyzed = iter(
                await coordinator.analyze_batch(documents, job_description) if documents else []
            )
        except Exception as exc:
            Log.error(f"Error in /analyze endpoint: {exc}")
            return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR_MESSAGE})
        outcomes = [
            next(analyzed) if isinstance(slot, UploadedDocument) else slot for slot in slots
        ]
        return JSONResponse(content=[outcome.to_payload() for outcome in outcomes])

    @app.get("/download/{handle}")
    async def download(handle: str) -> Response:
        try:
            path = store.path_for(handle)
        except InvalidHandleError:
            Log.warning("Rejected download handle", handle=handle)
            return PlainTextResponse(NOT_FOUND_MESSAGE, status_code=404)
        if not path.is_file():
            return PlainTextResponse(NOT_FOUND_MESSAGE, status_code=404)
        return FileResponse(path, filename=handle)

    return app


async def _store_upload(
    store: LocalFileStore, upload: UploadFile
) -> UploadedDocument | FailureOutcome:
    filename = upload.filename or "upload"
    try:
        content = await upload.read()
        handle = await asyncio.to_thread(store.create, filename, content)
    except Exception as exc:
        Log.error(f"Failed to store upload: {exc}", filename=filename)
        return FailureOutcome(filename=filename, error=f"Failed to process this resume: {exc}")
    Log.debug(f"Stored upload as {handle}", filename=filename)
    return UploadedDocument.from_upload(handle=handle, filename=filename)
