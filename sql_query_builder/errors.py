"""Errors"""


class UndefinedStatementKindError(Exception):
    """Statement kind (select/insert/update/delete) is not defined before build."""


UndefinedStatementKind = UndefinedStatementKindError
