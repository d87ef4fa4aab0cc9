"""Salary records."""

from timberpy.models import SalaryData, SalaryUpdate
from timberpy.services.base import ResourceService


class SalaryService(ResourceService[SalaryData, SalaryUpdate]):
    """Service for salaries paid to employees."""

    path = "/customer/salary"
