import logging

from fastapi import FastAPI, UploadFile, File, Form, HTTPException, Response
from pydantic import ValidationError

from .convert import RecordConverter
from .errors import ConversionFailure
from .models import ConversionErrorDetail, ConverterConfig, HealthResponse

logger = logging.getLogger(__name__)

app = FastAPI(
    title="csv-to-json",
    description="Field-mapped CSV record to JSON record conversion",
    version="0.1.0",
)

@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}

@app.post("/convert", responses={422: {"description": "Invalid options or unconvertible record"}})
async def convert_record(file: UploadFile = File(...), config: str = Form(...)):
    try:
        options = ConverterConfig.model_validate_json(config)
    except ValidationError as e:
        raise HTTPException(
            status_code=422,
            detail=ConversionErrorDetail(error="invalid converter options", cause=str(e)).model_dump(),
        )

    converter = RecordConverter(options)
    raw = await file.read()

    try:
        converted = converter.convert(raw)
    except ConversionFailure as e:
        logger.warning("Rejected record from %s: %s (%r)", file.filename, e.message, e.cause)
        raise HTTPException(
            status_code=422,
            detail=ConversionErrorDetail(
                error=e.message,
                cause=type(e.cause).__name__ if e.cause else None,
            ).model_dump(),
        )

    return Response(content=converted, media_type="application/json")
