# Services Package
from mktrading.services.user_service import UserService
from mktrading.services.party_service import PartyService
from mktrading.services.challan_service import ChallanService
from mktrading.services.hr_service import EmployeeService, SalaryService
from mktrading.services.expense_service import OfficeExpenseService
from mktrading.services.payment_service import PaymentService
from mktrading.services.report_service import ReportService

__all__ = [
    'UserService',
    'PartyService',
    'ChallanService',
    'EmployeeService',
    'SalaryService',
    'OfficeExpenseService',
    'PaymentService',
    'ReportService',
]
