"""Payments settling bills."""

from timberpy.models import BillPaymentData, BillPaymentUpdate
from timberpy.services.base import ResourceService


class BillPaymentService(ResourceService[BillPaymentData, BillPaymentUpdate]):
    """Service for bill payments."""

    path = "/customer/bill-payment"
