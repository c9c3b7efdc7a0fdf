# app/routers/invoices.py

"""
Invoice OCR routes.

Reads supplier invoices into inventory records matched against the
parts catalog.
"""

import logging
from typing import Optional
from fastapi import APIRouter, File, UploadFile

from app.config import get_settings
from app.core.errors import InputValidationError
from app.core.invoice_extraction import parse_model_output
from app.core.line_items import map_invoice
from app.data.parts_catalog import catalog_names
from app.database import list_custom_part_names
from app.integrations import claude

settings = get_settings()
logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/invoice-ocr")
async def read_invoice(
    files: Optional[list[UploadFile]] = File(None),
    file: Optional[UploadFile] = File(None),
):
    """
    Extract line items from invoice images.

    Accepts several pages as `files` or a single `file`.
    """
    uploads = [f for f in files or [] if f.filename] or ([file] if file else [])
    if not uploads:
        raise InputValidationError(
            "No files provided",
            details="Send the invoice pages as 'files' or a single 'file'.",
        )

    unsupported = [
        f.filename for f in uploads
        if (f.content_type or "") not in claude.SUPPORTED_IMAGE_TYPES
    ]
    if unsupported:
        raise InputValidationError(
            "Only image files are supported. Convert PDFs to images client-side.",
            details="Unsupported: " + ", ".join(str(name) for name in unsupported),
            troubleshooting=["Upload JPEG, PNG, GIF or WebP images"],
        )

    images = [(f.content_type, await f.read()) for f in uploads]
    output_text = await claude.extract_invoice(images)
    invoice = parse_model_output(output_text)

    custom_names = await list_custom_part_names(settings.custom_parts_limit)
    candidates = catalog_names(settings.catalog_language, custom_names)

    result = map_invoice(invoice, candidates, settings.catalog_match_threshold)
    matched = sum(1 for item in result.items if item.item_name != item.description)
    logger.info(
        f"Invoice {result.invoice_date or '<no date>'}: {len(result.items)} items, "
        f"{matched} renamed to catalog parts"
    )

    return result.model_dump()
