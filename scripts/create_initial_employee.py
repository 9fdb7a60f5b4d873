"""Utility script to create the first role and employee in the database."""

from __future__ import annotations

import argparse
from getpass import getpass

from sqlalchemy.exc import SQLAlchemyError

from hr_api.application.use_cases.employees import create_employee
from hr_api.application.use_cases.roles import create_role
from hr_api.config import get_settings
from hr_api.context import build_context
from hr_api.domain.exceptions import DomainError
from hr_api.infrastructure.database import initialize_database
from hr_api.infrastructure.repositories import RoleRepository


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for employee creation."""

    parser = argparse.ArgumentParser(
        description="Create an initial employee for the HR management API.",
    )
    parser.add_argument(
        "--name",
        default="Administrator",
        help="Full name of the employee (default: Administrator)",
    )
    parser.add_argument(
        "--email",
        default="admin@example.com",
        help="Employee email address (default: admin@example.com)",
    )
    parser.add_argument(
        "--role",
        default="Administrator",
        help="Role to assign; it is created when missing (default: Administrator)",
    )
    parser.add_argument(
        "--password",
        default=None,
        help="Employee password. Prompted interactively when omitted.",
    )
    parser.add_argument(
        "--commutes-by-allowance",
        action="store_true",
        help="Mark the employee as receiving a commuting allowance.",
    )
    return parser.parse_args()


def main() -> None:
    """Create the role (if needed) and the employee from the arguments."""

    args = parse_args()

    password = args.password or getpass("Employee password: ")
    if not password:
        raise SystemExit("No password was provided.")

    context = build_context(get_settings())
    initialize_database(context.engine)

    session = context.session_factory()
    try:
        role = RoleRepository(session).get_by_name(args.role.strip())
        if role is None:
            role = create_role(session, name=args.role)
        employee = create_employee(
            session,
            name=args.name,
            email=args.email,
            password=password,
            commutes_by_allowance=int(args.commutes_by_allowance),
            role_id=role.id,
        )
    except DomainError as exc:
        session.rollback()
        raise SystemExit(f"Could not create the employee: {exc.message} {exc.detail or ''}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Error while saving the employee: {exc}") from exc
    else:
        print(
            "Employee created:\n"
            f"  ID: {employee.id}\n"
            f"  Name: {employee.name}\n"
            f"  Email: {employee.email}\n"
            f"  Role: {employee.role.name}"
        )
    finally:
        session.close()
        context.engine.dispose()


if __name__ == "__main__":
    main()
