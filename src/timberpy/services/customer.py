"""Customers billed on invoices."""

from timberpy.models import CustomerData, CustomerUpdate
from timberpy.services.base import ResourceService


class CustomerService(ResourceService[CustomerData, CustomerUpdate]):
    """Service for customers.

    Example:
        response = await client.customer.list(page=1, limit=10, search="acme")
        customers = response.json()
    """

    path = "/customer/customer"
