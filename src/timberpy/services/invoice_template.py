"""Reusable invoice terms and notes."""

from timberpy.models import InvoiceTemplateRequest, InvoiceTemplateUpdate
from timberpy.services.base import ResourceService


class InvoiceTemplateService(
    ResourceService[InvoiceTemplateRequest, InvoiceTemplateUpdate]
):
    """Service for invoice templates.

    Example:
        await client.invoice_template.create(
            InvoiceTemplateRequest(
                terms=[TemplateEntry(name="Terms", content="Net 30")],
                notes=[TemplateEntry(name="Notes", content="Thank you")],
            )
        )
    """

    path = "/customer/invoice-template"
