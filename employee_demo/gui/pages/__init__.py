from .add_employee import AddEmployeePage
from .employee_list import EmployeeListPage

__all__ = ["AddEmployeePage", "EmployeeListPage"]
