"""Employees."""

from timberpy.models import EmployeeData, EmployeeUpdate
from timberpy.services.base import ResourceService


class EmployeeService(ResourceService[EmployeeData, EmployeeUpdate]):
    """Service for employees.

    Example:
        response = await client.employee.get("employee_id")
        employee = response.json()
    """

    path = "/customer/employee"
