"""Employees module — Employee model, schemas, validation and services."""

from employee_api.employees.models import Employee

__all__ = ["Employee"]
