"""Payments received against invoices."""

from timberpy.models import InvoicePaymentData, InvoicePaymentUpdate
from timberpy.services.base import ResourceService


class InvoicePaymentService(
    ResourceService[InvoicePaymentData, InvoicePaymentUpdate]
):
    """Service for invoice payments.

    Example:
        await client.invoice_payment.create(
            InvoicePaymentData(
                invoice="invoice_id",
                amount=250.0,
                payment_date="2025-04-01",
                payment_method="bank_transfer",
            )
        )
    """

    path = "/customer/invoice-payment"
