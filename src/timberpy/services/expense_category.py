"""Expense categories."""

from timberpy.models import ExpenseCategoryData, ExpenseCategoryUpdate
from timberpy.services.base import ResourceService


class ExpenseCategoryService(
    ResourceService[ExpenseCategoryData, ExpenseCategoryUpdate]
):
    """Service for expense categories.

    Example:
        await client.expense_category.create(
            ExpenseCategoryData(name="Travel", description="Flights and hotels")
        )
    """

    path = "/customer/expense-category"
