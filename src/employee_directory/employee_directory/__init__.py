"""Employee Directory package.

Organized by feature modules (companies, departments, employees, users)
with a thin Flask controller layer over service/repository layers backed by
a single JSON snapshot file.
"""
