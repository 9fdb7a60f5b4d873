"""Persistence layer for employee data."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from hr_api.domain.entities import Employee, Role
from hr_api.infrastructure.models import EmployeeModel


class EmployeeRepository:
    """Provide CRUD operations for employee entities.

    Reads return the joined employee and role projection. The stored password
    hash is only loaded when explicitly requested.
    """

    SEARCHABLE_FIELDS = frozenset(
        {"id", "name", "email", "commutes_by_allowance", "role_id"}
    )

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> Sequence[Employee]:
        query = (
            self.session.query(EmployeeModel)
            .options(joinedload(EmployeeModel.role))
            .order_by(EmployeeModel.id)
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, employee_id: int) -> Employee | None:
        model = self._get_model(id=employee_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str, *, with_password: bool = False) -> Employee | None:
        model = self._get_model(email=email)
        if model is None:
            return None
        return self._to_entity(model, with_password=with_password)

    def find_by_field(self, field: str, value: Any) -> Sequence[Employee]:
        """Return the employees whose ``field`` equals ``value``.

        Only the columns listed in :attr:`SEARCHABLE_FIELDS` may be queried.
        """

        if field not in self.SEARCHABLE_FIELDS:
            msg = f"Invalid search field for employee: {field}"
            raise ValueError(msg)
        query = (
            self.session.query(EmployeeModel)
            .options(joinedload(EmployeeModel.role))
            .filter_by(**{field: value})
        )
        return [self._to_entity(model) for model in query.all()]

    def count_by_role(self, role_id: int) -> int:
        return self.session.query(EmployeeModel).filter_by(role_id=role_id).count()

    def create(self, employee: Employee) -> Employee:
        if not employee.password:
            msg = "Employee password hash is required"
            raise ValueError(msg)

        model = EmployeeModel()
        self._apply_entity_to_model(model, employee)
        model.password = employee.password
        self.session.add(model)
        self._commit()
        self.session.refresh(model)
        if model.role is None:
            self.session.refresh(model, attribute_names=["role"])
        return self._to_entity(model)

    def update(self, employee: Employee) -> Employee | None:
        """Persist ``employee``. The hash is only replaced when one is given."""

        model = self._get_model(id=employee.id)
        if model is None:
            return None
        self._apply_entity_to_model(model, employee)
        if employee.password:
            model.password = employee.password
        self.session.add(model)
        self._commit()
        self.session.refresh(model)
        if model.role is None:
            self.session.refresh(model, attribute_names=["role"])
        return self._to_entity(model)

    def delete(self, employee_id: int) -> bool:
        affected = (
            self.session.query(EmployeeModel)
            .filter_by(id=employee_id)
            .delete(synchronize_session=False)
        )
        self._commit()
        return affected > 0

    def _get_model(self, **filters) -> EmployeeModel | None:
        query = self.session.query(EmployeeModel).options(joinedload(EmployeeModel.role))
        return query.filter_by(**filters).first()

    def _commit(self) -> None:
        try:
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise

    @staticmethod
    def _apply_entity_to_model(model: EmployeeModel, employee: Employee) -> None:
        model.role_id = employee.role.id
        model.name = employee.name
        model.email = employee.email
        model.commutes_by_allowance = employee.commutes_by_allowance

    @staticmethod
    def _to_entity(model: EmployeeModel, *, with_password: bool = False) -> Employee:
        if model.role is None:
            msg = "Employee role is not set"
            raise ValueError(msg)
        return Employee(
            id=model.id,
            name=model.name,
            email=model.email,
            commutes_by_allowance=model.commutes_by_allowance,
            role=Role(id=model.role.id, name=model.role.name),
            password=model.password if with_password else None,
        )


__all__ = ["EmployeeRepository"]
