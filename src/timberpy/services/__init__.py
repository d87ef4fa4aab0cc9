"""Resource services exposed by TimberClient."""

from timberpy.services.auth import AuthService
from timberpy.services.bank_statement import BankStatementService
from timberpy.services.base import BaseService, ResourceService
from timberpy.services.bill_payment import BillPaymentService
from timberpy.services.cheque import ChequeService
from timberpy.services.company import CompanyService
from timberpy.services.customer import CustomerService
from timberpy.services.employee import EmployeeService
from timberpy.services.expense import ExpenseService
from timberpy.services.expense_category import ExpenseCategoryService
from timberpy.services.invoice import InvoiceService
from timberpy.services.invoice_item import InvoiceItemService
from timberpy.services.invoice_number import InvoiceNumberService
from timberpy.services.invoice_payment import InvoicePaymentService
from timberpy.services.invoice_template import InvoiceTemplateService
from timberpy.services.raw_expense import RawExpenseService
from timberpy.services.salary import SalaryService
from timberpy.services.tax_rate import TaxRateService
from timberpy.services.vendor_payment import VendorPaymentService

__all__ = [
    "AuthService",
    "BankStatementService",
    "BaseService",
    "BillPaymentService",
    "ChequeService",
    "CompanyService",
    "CustomerService",
    "EmployeeService",
    "ExpenseCategoryService",
    "ExpenseService",
    "InvoiceItemService",
    "InvoiceNumberService",
    "InvoicePaymentService",
    "InvoiceService",
    "InvoiceTemplateService",
    "RawExpenseService",
    "ResourceService",
    "SalaryService",
    "TaxRateService",
    "VendorPaymentService",
]
