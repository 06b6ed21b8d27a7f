"""Exceptions métier levées par les services."""


class StudentManagementError(Exception):
    """Exception de base des services."""


class DuplicateEmailError(StudentManagementError):
    """Un autre élève utilise déjà cet email."""


class DepartmentNotFoundError(StudentManagementError):
    """Le département référencé n'existe pas."""


class DuplicateDepartmentError(StudentManagementError):
    """Un département porte déjà ce nom."""
