"""Spreadsheet export of the employee list.

Produces bytes and a suggested filename only; HTTP delivery is the
controller's job.
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Iterable, Optional

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from ..common.datetime_utils import format_iso_date, now_utc
from .model import EnrichedEmployee
from .query import EmployeeQueryService

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

SHEET_TITLE = "Сотрудники"
HEADERS = ("ФИО", "Должность", "Отдел", "Компания", "Телефон", "Email")
COLUMN_WIDTHS = (25, 20, 15, 18, 18, 30)

NO_DEPARTMENT_LABEL = "Не указан"
NO_COMPANY_LABEL = "Не указана"
UNKNOWN_COMPANY_FILENAME = "Компания"
ALL_COMPANIES_FILENAME = "Все_компании"

HEADER_FONT = Font(bold=True, color="FFFFFF")
HEADER_FILL = PatternFill(fill_type="solid", start_color="4472C4", end_color="4472C4")
HEADER_ALIGNMENT = Alignment(horizontal="center", vertical="center")


@dataclass(frozen=True)
class ExportFile:
    filename: str
    content: bytes
    mimetype: str = XLSX_MIMETYPE


def project_row(item: EnrichedEmployee) -> tuple:
    employee = item.employee
    return (
        employee.full_name,
        employee.position,
        item.department_name or NO_DEPARTMENT_LABEL,
        item.company_name or NO_COMPANY_LABEL,
        employee.phone,
        employee.email,
    )


def build_workbook(items: Iterable[EnrichedEmployee]) -> bytes:
    wb = Workbook()
    ws = wb.active
    ws.title = SHEET_TITLE

    ws.append(list(HEADERS))
    for cell in ws[1]:
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
        cell.alignment = HEADER_ALIGNMENT

    for item in items:
        ws.append(list(project_row(item)))

    for index, width in enumerate(COLUMN_WIDTHS, start=1):
        ws.column_dimensions[get_column_letter(index)].width = width

    buffer = io.BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


def export_filename(company_id: Optional[str], company_name: Optional[str], day: datetime) -> str:
    if not company_id:
        label = ALL_COMPANIES_FILENAME
    else:
        label = company_name or UNKNOWN_COMPANY_FILENAME
    return f"{SHEET_TITLE}_{label}_{format_iso_date(day)}.xlsx"


class EmployeeExporter:
    def __init__(self, query: EmployeeQueryService, *, clock: Callable[[], datetime] = now_utc):
        self._query = query
        self._clock = clock

    def export(self, company_id: Optional[str] = None) -> ExportFile:
        scope = self._query.company_scope(company_id)
        return ExportFile(
            filename=export_filename(scope.company_id, scope.company_name, self._clock()),
            content=build_workbook(scope.employees),
        )
