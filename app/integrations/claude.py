# app/integrations/claude.py

"""
Claude AI integration.

Uses Anthropic's Claude API to:
1. Read invoice images into the line-item JSON contract
2. Explain bank verification mismatches in plain language
"""

import base64
import logging
from anthropic import Anthropic, APIError

from app.config import get_settings
from app.core.errors import InvoiceOcrError
from app.models import VerificationReport

settings = get_settings()
logger = logging.getLogger(__name__)

# Initialize client
client = Anthropic(api_key=settings.anthropic_api_key)

SUPPORTED_IMAGE_TYPES = {"image/jpeg", "image/png", "image/gif", "image/webp"}

OCR_PROMPT = """You are an invoice data extraction expert. Analyze this Portuguese invoice document and extract all line items with their details.

IMPORTANT: The invoice is in Portuguese. Extract the data exactly as shown.

Return ONLY a valid JSON object with this exact structure (no markdown, no code blocks, just raw JSON):
{
  "invoice_date": "YYYY-MM-DD",
  "items": [
    {
      "description": "Full item description as shown on invoice",
      "quantity": <number>,
      "unit_price": <number - final price per unit without currency symbols (tax-inclusive if IVA applies)>,
      "total": <number - final line total without currency symbols (tax-inclusive if IVA applies)>,
      "iva_rate": <number - IVA rate percentage for this line, e.g. 14>,
      "iva_amount": <number - IVA amount for this line without currency symbols>,
      "total_excl_tax": <number - line total excluding IVA (after discounts)>,
      "total_incl_tax": <number - line total including IVA (after discounts)>
    }
  ]
}

Rules:
1. Extract ALL items from the invoice, not just a few
2. For "invoice_date", use the date shown on the invoice in YYYY-MM-DD format
3. For prices, remove any currency symbols (Kz, AKZ, AOA, $, etc.) and thousand separators
4. If quantity is not explicitly shown, assume 1
5. If unit_price or total contains decimals like "85,000.00" or "85.000,00", convert to number 85000
6. Ignore any crossed-out or cancelled items
7. Discounts: if the invoice shows an overall discount (e.g., "Desconto") and line totals do not already reflect it, distribute the discount proportionally across line items by their pre-discount line totals, then set each item's "total" and "unit_price" to the discounted values. Always keep quantity unchanged.
8. IVA (tax): if the invoice includes IVA (often shown as "I.V.A." or "IVA" with a rate like 14%), compute IVA per line item based on the discounted line base (total_excl_tax). Set iva_rate and iva_amount for each line. Then set total_incl_tax = total_excl_tax + iva_amount.
9. If the invoice already has per-line totals, determine whether they are tax-inclusive. If totals are tax-exclusive but IVA is shown separately, add IVA to compute the final total. If totals already include IVA, still compute iva_amount and keep total_incl_tax equal to the shown total.
10. Ensure unit_price * quantity equals the FINAL total for the line (tax-inclusive). Adjust unit_price accordingly.
11. If you cannot determine a value, use 0 for numbers or empty string for text

Extract the invoice data now:"""


def extract_response_text(response) -> str:
    """Join the text blocks of a Messages API response."""
    chunks = [
        block.text
        for block in getattr(response, "content", None) or []
        if getattr(block, "type", None) == "text" and getattr(block, "text", None)
    ]
    return "\n".join(chunks).strip()


async def extract_invoice(images: list[tuple[str, bytes]]) -> str:
    """
    Send invoice pages to the vision model.

    `images` is a list of (media_type, raw bytes). Returns the model's
    raw text, expected to be the invoice JSON.
    """
    content: list[dict] = [
        {
            "type": "image",
            "source": {
                "type": "base64",
                "media_type": media_type,
                "data": base64.b64encode(data).decode("ascii"),
            },
        }
        for media_type, data in images
    ]
    content.append({"type": "text", "text": OCR_PROMPT})

    logger.info(f"Sending {len(images)} invoice page(s) to {settings.ocr_model}")

    try:
        response = client.messages.create(
            model=settings.ocr_model,
            max_tokens=settings.ocr_max_tokens,
            messages=[{"role": "user", "content": content}],
        )
    except APIError as e:
        logger.error(f"Claude API error: {e}")
        raise InvoiceOcrError(
            "Vision model request failed",
            details=str(e),
            troubleshooting=["Retry in a few seconds", "Check the Anthropic API key and model name"],
        ) from e

    return extract_response_text(response)


async def explain_mismatch(report: VerificationReport) -> str:
    """
    Explain a mismatch verdict in plain language for the finance team.

    Falls back to the deterministic details text.
    """
    result = report.result
    if not settings.enable_ai_explanations:
        return result.details

    prompt = f"""You are a financial reconciliation assistant for a bus transport company in Angola.
Bank deposits were compared against the net revenue of the daily operational reports.

Explain the result in plain English for the finance team. Be concise (2-3 sentences max).
Be specific and suggest what to check first. Don't repeat all the numbers.

BANK: {report.revenue.bank.value}
PERIOD: {result.date_range}
NET REVENUE (reports): {result.total_net_revenue:,.2f} {settings.currency}
  - gross revenue: {report.revenue.gross_revenue:,.2f}
  - expenses: {report.revenue.total_expenses:,.2f}
  - reports included: {report.revenue.included_reports}, excluded: {report.revenue.excluded_reports}
  - included reports without expenses: {report.revenue.reports_missing_expenses}
  - reports without a vehicle plate: {report.revenue.reports_without_plate}
ACCOUNT 001 (Fecho TPA settlements): {result.account_001_total:,.2f} in {len(report.account_001.transactions)} transactions
ACCOUNT 002 (cash Depósito): {result.account_002_total:,.2f} in {len(report.account_002.transactions)} transactions
SKIPPED STATEMENT LINES: {len(report.account_001.warnings) + len(report.account_002.warnings)}
DIFFERENCE (bank - revenue): {result.difference:,.2f} {settings.currency}

SYSTEM EXPLANATION: {result.details}"""

    try:
        response = client.messages.create(
            model=settings.explanation_model,
            max_tokens=200,
            messages=[{"role": "user", "content": prompt}],
        )
        return extract_response_text(response) or result.details
    except Exception as e:
        logger.warning(f"Claude API error: {e}")
        return result.details
