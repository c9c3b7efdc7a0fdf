# app/models/invoice.py

from pydantic import BaseModel, Field


class ExtractedLineItem(BaseModel):
    """A line item as returned by the OCR model, after coercion."""

    description: str = ""
    quantity: float = 1
    unit_price: float = 0
    total: float = 0
    iva_rate: float = 0
    iva_amount: float = 0
    total_excl_tax: float = 0
    total_incl_tax: float = 0


class ExtractedInvoice(BaseModel):
    invoice_date: str = ""
    items: list[ExtractedLineItem] = Field(default_factory=list)


class CatalogMatch(BaseModel):
    """Best catalog candidate for a description."""

    name: str
    score: float = Field(ge=0, le=1)


class InventoryMappedItem(BaseModel):
    """Inventory record ready to be saved."""

    date: str
    item_name: str
    description: str
    quantity: float
    amount_unit: float
    total_cost: float


class InvoiceMappingResult(BaseModel):
    invoice_date: str
    items: list[InventoryMappedItem] = Field(default_factory=list)
