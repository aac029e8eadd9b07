from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from .auth.credentials import PasswordHasher, TokenService
from .auth.gate import AccessGate
from .common.datetime_utils import now_utc
from .companies.json_company_repository import JsonCompanyRepository
from .companies.service import CompanyService
from .departments.json_department_repository import JsonDepartmentRepository
from .departments.service import DepartmentService
from .employees.export import EmployeeExporter
from .employees.json_employee_repository import JsonEmployeeRepository
from .employees.query import EmployeeQueryService
from .employees.service import EmployeeService
from .settings import DirectoryConfig
from .storage.snapshot import JsonSnapshotStore
from .users.json_user_repository import JsonUserRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    config: DirectoryConfig
    store: JsonSnapshotStore

    hasher: PasswordHasher
    tokens: TokenService
    gate: AccessGate

    users_repo: JsonUserRepository
    companies_repo: JsonCompanyRepository
    departments_repo: JsonDepartmentRepository
    employees_repo: JsonEmployeeRepository

    auth_service: AuthService
    company_service: CompanyService
    department_service: DepartmentService
    employee_service: EmployeeService
    employee_query: EmployeeQueryService
    employee_exporter: EmployeeExporter


def build_container(*, config: DirectoryConfig, clock: Callable[[], datetime] = now_utc) -> Container:
    store = JsonSnapshotStore(config.data_path)

    hasher = PasswordHasher(config.password_hash_method)
    tokens = TokenService(config.secret_key, ttl=config.token_ttl, clock=clock)
    gate = AccessGate(tokens)

    users_repo = JsonUserRepository(store)
    companies_repo = JsonCompanyRepository(store)
    departments_repo = JsonDepartmentRepository(store)
    employees_repo = JsonEmployeeRepository(store)

    employee_query = EmployeeQueryService(store)

    return Container(
        config=config,
        store=store,
        hasher=hasher,
        tokens=tokens,
        gate=gate,
        users_repo=users_repo,
        companies_repo=companies_repo,
        departments_repo=departments_repo,
        employees_repo=employees_repo,
        auth_service=AuthService(users_repo, hasher, tokens),
        company_service=CompanyService(companies_repo),
        department_service=DepartmentService(departments_repo),
        employee_service=EmployeeService(employees_repo),
        employee_query=employee_query,
        employee_exporter=EmployeeExporter(employee_query, clock=clock),
    )
