"""Persistence layer for roles data."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from hr_api.domain.entities import Role
from hr_api.infrastructure.models import RoleModel


class RoleRepository:
    """Provide CRUD operations for role entities."""

    SEARCHABLE_FIELDS = frozenset({"id", "name"})

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> Sequence[Role]:
        query = self.session.query(RoleModel).order_by(RoleModel.id)
        return [self._to_entity(model) for model in query.all()]

    def get(self, role_id: int) -> Role | None:
        model = self.session.query(RoleModel).filter_by(id=role_id).first()
        return self._to_entity(model) if model else None

    def get_by_name(self, name: str) -> Role | None:
        model = self.session.query(RoleModel).filter_by(name=name).first()
        return self._to_entity(model) if model else None

    def find_by_field(self, field: str, value: Any) -> Sequence[Role]:
        """Return the roles whose ``field`` equals ``value``.

        Only the columns listed in :attr:`SEARCHABLE_FIELDS` may be queried.
        """

        if field not in self.SEARCHABLE_FIELDS:
            msg = f"Invalid search field for role: {field}"
            raise ValueError(msg)
        query = self.session.query(RoleModel).filter_by(**{field: value})
        return [self._to_entity(model) for model in query.all()]

    def create(self, role: Role) -> Role:
        model = RoleModel(name=role.name)
        self.session.add(model)
        self._commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, role: Role) -> bool:
        """Rename the stored role. Returns ``False`` when no row matched."""

        affected = (
            self.session.query(RoleModel)
            .filter_by(id=role.id)
            .update({RoleModel.name: role.name}, synchronize_session=False)
        )
        self._commit()
        return affected > 0

    def delete(self, role_id: int) -> bool:
        affected = (
            self.session.query(RoleModel)
            .filter_by(id=role_id)
            .delete(synchronize_session=False)
        )
        self._commit()
        return affected > 0

    def _commit(self) -> None:
        try:
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise

    @staticmethod
    def _to_entity(model: RoleModel) -> Role:
        return Role(id=model.id, name=model.name)


__all__ = ["RoleRepository"]
