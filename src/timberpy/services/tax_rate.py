"""Tax rates applied to invoice and expense lines."""

from timberpy.models import TaxRateData, TaxRateUpdate
from timberpy.services.base import ResourceService


class TaxRateService(ResourceService[TaxRateData, TaxRateUpdate]):
    """Service for tax rates."""

    path = "/customer/tax-rate"
