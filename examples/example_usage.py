"""Example: using the service layer without Flask.

Controllers are a thin layer; the directory rules live in the services.
"""

import tempfile
from pathlib import Path

from src.employee_directory.employee_directory.container import build_container
from src.employee_directory.employee_directory.settings import DirectoryConfig


def main():
    data_path = Path(tempfile.mkdtemp()) / "data.json"
    container = build_container(config=DirectoryConfig(secret_key="example", data_path=data_path))

    acme = container.company_service.create("Acme")
    sales = container.department_service.create("Sales")
    container.employee_service.create(
        {
            "fullName": "Ivan Petrov",
            "position": "Manager",
            "companyId": acme.company_id,
            "departmentId": sales.dept_id,
            "phone": "+1234567890",
            "email": "ivan@acme.test",
        }
    )

    for item in container.employee_query.list_employees(company_id=acme.company_id):
        print(item.to_dict())

    export = container.employee_exporter.export(acme.company_id)
    print(export.filename, len(export.content), "bytes")


if __name__ == "__main__":
    main()
