"""Payments made to vendors."""

from timberpy.models import VendorPaymentData, VendorPaymentUpdate
from timberpy.services.base import ResourceService


class VendorPaymentService(ResourceService[VendorPaymentData, VendorPaymentUpdate]):
    """Service for vendor payments."""

    path = "/customer/vendor-payment"
