"""Request models for the Timber API.

Responses are returned untouched as ``httpx.Response`` objects, so only
request bodies are modelled here.
"""

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path
from typing import Annotated, Any, Literal

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, PlainSerializer

from timberpy.forms import format_timestamp


def _check_file(value: Any) -> Any:
    if value is None or isinstance(value, (str, bytes, bytearray, Path)):
        return value
    if hasattr(value, "read"):
        return value
    raise ValueError("expected bytes, a path, a file reference or a binary file object")


def _serialize_date(value: datetime | date | str) -> str:
    if isinstance(value, date):
        return format_timestamp(value)
    return value


# A file to upload: raw bytes, a pathlib.Path, an open binary handle, or a
# string reference (URL or server-side id) sent as a plain text field.
FileInput = Annotated[Any, AfterValidator(_check_file)]

# Dates and datetimes are sent as UTC timestamps; strings pass through.
DateInput = Annotated[
    datetime | date | str, PlainSerializer(_serialize_date, return_type=str)
]


class TimberModel(BaseModel):
    """Base for request models."""

    model_config = ConfigDict(extra="forbid")


class OpenModel(TimberModel):
    """Base for payloads whose full field set is not pinned down.

    Unknown keyword arguments are kept and sent alongside declared fields.
    """

    model_config = ConfigDict(extra="allow")


# Registration


class RegisterCompany(TimberModel):
    name: str
    email: str
    language: Literal["English", "Arabic"]
    currency: str
    tax_number: str
    address: str
    city: str
    state: str
    zip_code: str | None = None
    country: str
    financial_start_date: str
    license_expiry: str
    license_issue_date: str
    sector: list[str]
    user_role: str
    business_years: str
    size: str
    current_method: str
    purpose: str
    country_code: str
    mobile: str
    logo: str | None = None
    license: str
    license_number: str
    license_authority: str
    trn: str


class RegisterUserRequest(TimberModel):
    """Payload registering a user and their first company."""

    name: str
    email: str
    partner: str
    plan: str
    domains: list[str]
    company: RegisterCompany


# Invoices


class InvoiceCustomer(TimberModel):
    customer_id: str | None = None
    name: str
    email: str
    trn: str | None = None
    country_code: str
    mobile: str
    address: str


class InvoiceBiller(TimberModel):
    biller_id: str | None = None
    name: str
    email: str
    country_code: str
    mobile: str
    address: str
    trn: str | None = None


class NewInvoiceItem(TimberModel):
    id: str
    title: str
    quantity: float
    rate: float
    vat: float
    discount: float
    total: float


class InvoiceData(TimberModel):
    """Invoice creation payload, sent as multipart form data."""

    mode: Literal["create", "edit"] = "create"
    payment_method: str
    title: str
    company: str
    is_title_changed: bool = Field(default=False, serialization_alias="isTitleChanged")
    customer: InvoiceCustomer
    biller: InvoiceBiller
    invoice_number: str
    invoice_date: DateInput
    due_date: DateInput | None = None
    currency: str
    items: list[NewInvoiceItem]
    terms: str | None = None
    notes: str | None = None
    sub_total: float
    vat_total: float
    discount_total: float
    shipping: float = 0
    total: float
    amount_paid: float = 0
    amount_due: float
    logo: FileInput | None = None
    place_of_supply: str | None = None
    wafeq: bool = False
    zoho: bool = False


class InvoiceUpdate(TimberModel):
    """Partial invoice update; unset fields are not sent."""

    mode: Literal["create", "edit"] | None = None
    payment_method: str | None = None
    title: str | None = None
    company: str | None = None
    is_title_changed: bool | None = Field(default=None, serialization_alias="isTitleChanged")
    customer: InvoiceCustomer | None = None
    biller: InvoiceBiller | None = None
    invoice_number: str | None = None
    invoice_date: DateInput | None = None
    due_date: DateInput | None = None
    currency: str | None = None
    items: list[NewInvoiceItem] | None = None
    terms: str | None = None
    notes: str | None = None
    sub_total: float | None = None
    vat_total: float | None = None
    discount_total: float | None = None
    shipping: float | None = None
    total: float | None = None
    amount_paid: float | None = None
    amount_due: float | None = None
    logo: FileInput | None = None
    place_of_supply: str | None = None
    wafeq: bool | None = None
    zoho: bool | None = None


class InvoicePaymentData(OpenModel):
    invoice: str
    amount: float
    payment_date: DateInput | None = None
    payment_method: str | None = None
    currency: str | None = None
    reference: str | None = None
    notes: str | None = None


class InvoicePaymentUpdate(OpenModel):
    invoice: str | None = None
    amount: float | None = None
    payment_date: DateInput | None = None
    payment_method: str | None = None
    currency: str | None = None
    reference: str | None = None
    notes: str | None = None


class InvoiceItemRequest(TimberModel):
    title: str
    rate: float
    discount: float = 0
    vat: float = 0


class InvoiceItemUpdate(TimberModel):
    title: str | None = None
    rate: float | None = None
    discount: float | None = None
    vat: float | None = None


class InvoiceNumberUpdate(TimberModel):
    """Numbering settings; every field is optional for PATCH semantics."""

    enabled: bool | None = None
    next_number: int | None = None
    sequence_length: int | None = None
    prefix: str | None = None


class TemplateEntry(TimberModel):
    name: str
    content: str


class InvoiceTemplateRequest(TimberModel):
    terms: list[TemplateEntry] = Field(default_factory=list)
    notes: list[TemplateEntry] = Field(default_factory=list)
    type: Literal["terms", "notes"] | None = None


class InvoiceTemplateUpdate(TimberModel):
    terms: list[TemplateEntry] | None = None
    notes: list[TemplateEntry] | None = None
    type: Literal["terms", "notes"] | None = None


# Expenses and payments


class ExpenseLineItem(OpenModel):
    title: str
    amount: float
    vat: float = 0
    category: str | None = None


class ExpenseData(OpenModel):
    """Expense payload; ``file`` is an optional receipt."""

    title: str
    category: str | None = None
    amount: float
    vat: float = 0
    total: float | None = None
    currency: str | None = None
    expense_date: DateInput | None = None
    payment_method: str | None = None
    vendor: str | None = None
    description: str | None = None
    items: list[ExpenseLineItem] | None = None
    file: FileInput | None = None


class ExpenseUpdate(OpenModel):
    title: str | None = None
    category: str | None = None
    amount: float | None = None
    vat: float | None = None
    total: float | None = None
    currency: str | None = None
    expense_date: DateInput | None = None
    payment_method: str | None = None
    vendor: str | None = None
    description: str | None = None
    items: list[ExpenseLineItem] | None = None
    file: FileInput | None = None


class RawExpenseData(OpenModel):
    """Receipt uploaded for server-side extraction."""

    file: FileInput
    notes: str | None = None


class ExpenseCategoryData(OpenModel):
    name: str
    description: str | None = None


class ExpenseCategoryUpdate(OpenModel):
    name: str | None = None
    description: str | None = None


class VendorPaymentData(OpenModel):
    vendor: str
    amount: float
    payment_date: DateInput | None = None
    payment_method: str | None = None
    currency: str | None = None
    reference: str | None = None
    notes: str | None = None


class VendorPaymentUpdate(OpenModel):
    vendor: str | None = None
    amount: float | None = None
    payment_date: DateInput | None = None
    payment_method: str | None = None
    currency: str | None = None
    reference: str | None = None
    notes: str | None = None


class BillPaymentData(OpenModel):
    bill: str
    amount: float
    payment_date: DateInput | None = None
    payment_method: str | None = None
    currency: str | None = None
    reference: str | None = None
    notes: str | None = None


class BillPaymentUpdate(OpenModel):
    bill: str | None = None
    amount: float | None = None
    payment_date: DateInput | None = None
    payment_method: str | None = None
    currency: str | None = None
    reference: str | None = None
    notes: str | None = None


# Contacts, tax and payroll


class CustomerData(OpenModel):
    name: str
    email: str | None = None
    country_code: str | None = None
    mobile: str | None = None
    address: str | None = None
    city: str | None = None
    country: str | None = None
    trn: str | None = None


class CustomerUpdate(OpenModel):
    name: str | None = None
    email: str | None = None
    country_code: str | None = None
    mobile: str | None = None
    address: str | None = None
    city: str | None = None
    country: str | None = None
    trn: str | None = None


class TaxRateData(OpenModel):
    name: str
    rate: float
    description: str | None = None


class TaxRateUpdate(OpenModel):
    name: str | None = None
    rate: float | None = None
    description: str | None = None


class EmployeeData(OpenModel):
    name: str
    email: str | None = None
    designation: str | None = None
    department: str | None = None
    country_code: str | None = None
    mobile: str | None = None
    joining_date: DateInput | None = None
    salary: float | None = None


class EmployeeUpdate(OpenModel):
    name: str | None = None
    email: str | None = None
    designation: str | None = None
    department: str | None = None
    country_code: str | None = None
    mobile: str | None = None
    joining_date: DateInput | None = None
    salary: float | None = None


class SalaryData(OpenModel):
    employee: str
    amount: float
    currency: str | None = None
    pay_date: DateInput | None = None
    period: str | None = None
    payment_method: str | None = None
    notes: str | None = None


class SalaryUpdate(OpenModel):
    employee: str | None = None
    amount: float | None = None
    currency: str | None = None
    pay_date: DateInput | None = None
    period: str | None = None
    payment_method: str | None = None
    notes: str | None = None


# Reconciliation


class ChequeData(TimberModel):
    """Scanned cheque upload."""

    file: FileInput
    company: str | None = None


class BankStatementData(TimberModel):
    """Bank statement upload."""

    file: FileInput


# Company


class CompanyData(TimberModel):
    """Company creation payload, sent as multipart form data."""

    name: str
    currency: str
    language: str
    address: str
    city: str
    state: str
    zip_code: str | None = None
    country: str
    email: str
    country_code: str
    mobile: str
    tax_number: str
    financial_start_date: DateInput
    license_expiry: DateInput
    license_issue_date: DateInput
    sector: list[str] = Field(default_factory=list)
    user_role: str
    business_years: str
    size: str
    current_method: str
    purpose: str
    license: list[FileInput]
    license_number: str
    license_authority: str
    trn: str


class CompanyUpdate(TimberModel):
    name: str | None = None
    currency: str | None = None
    language: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    country: str | None = None
    email: str | None = None
    country_code: str | None = None
    mobile: str | None = None
    tax_number: str | None = None
    financial_start_date: DateInput | None = None
    license_expiry: DateInput | None = None
    license_issue_date: DateInput | None = None
    sector: list[str] | None = None
    user_role: str | None = None
    business_years: str | None = None
    size: str | None = None
    current_method: str | None = None
    purpose: str | None = None
    license: list[FileInput] | None = None
    license_number: str | None = None
    license_authority: str | None = None
    trn: str | None = None
