"""
Bootstrap an employee account with an explicit permission set.

Registration over HTTP only grants the default permission; this script is the
administrative path for granting anything else (e.g. processDeposit).

    python init_employee.py --employee-id E001 --name "Branch Lead" \
        --email lead@example.com --password s3cret! --permission processDeposit
"""
import argparse
import asyncio
import logging

from carddesk.core.config import get_settings
from carddesk.core.container import ApplicationContainer
from carddesk.core.logging import setup_logging
from carddesk.modules.employees import (
    KNOWN_PERMISSIONS,
    EmployeeCreateInput,
    EmployeeService,
)

logger = logging.getLogger("init_employee")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--employee-id", required=True)
    parser.add_argument("--name", required=True)
    parser.add_argument("--email", required=True)
    parser.add_argument("--password", required=True)
    parser.add_argument(
        "--permission",
        action="append",
        default=[],
        choices=sorted(KNOWN_PERMISSIONS),
        help="extra permission to grant; may be repeated",
    )
    return parser.parse_args()


async def create_employee(args: argparse.Namespace) -> None:
    settings = get_settings()
    setup_logging(settings.logging)
    container = ApplicationContainer.from_settings(settings)
    await container.startup()

    try:
        async with container.session_factory() as db:
            service = EmployeeService.with_session(db, settings)
            employee = await service.get_by_employee_id(args.employee_id)
            if employee is None:
                employee = await service.register(
                    EmployeeCreateInput(
                        employee_id=args.employee_id,
                        name=args.name,
                        email=args.email,
                        password=args.password,
                    )
                )
            else:
                logger.info("Employee %s already exists, only granting permissions", args.employee_id)
            if args.permission:
                employee = await service.grant_permissions(employee.employee_id, args.permission)
            await db.commit()
    finally:
        await container.shutdown()

    logger.info("Employee %s ready with permissions %s", employee.employee_id, sorted(employee.permissions))


if __name__ == "__main__":
    asyncio.run(create_employee(parse_args()))
