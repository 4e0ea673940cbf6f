"""Reference data for an empty database.

Usage:
    python -m employee_api.seed     # create tables and seed if empty
"""

from __future__ import annotations

import asyncio
import logging
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.benefits.models import BenefitType, EmployeeBenefit
from employee_api.employees.models import Employee

logger = logging.getLogger(__name__)


def reference_employees() -> list[Employee]:
    """Build the reference employees (unsaved) with their benefits."""
    john = Employee(
        first_name="John",
        last_name="Doe",
        social_security_number="123-45-6789",
        address1="123 Main St",
        city="Anytown",
        state="NY",
        zip_code="12345",
        phone_number="555-123-4567",
        email="john.doe@company.com",
    )
    john.benefits = [
        EmployeeBenefit(
            benefit_type=BenefitType.Health,
            description="Medical plan",
            cost=Decimal("100.00"),
        ),
        EmployeeBenefit(
            benefit_type=BenefitType.Dental,
            description="Dental plan",
            cost=Decimal("50.00"),
        ),
    ]
    jane = Employee(
        first_name="Jane",
        last_name="Doe",
        social_security_number="987-65-4321",
        address1="456 Elm St",
        address2="Apt 2",
        city="Somewhere",
        state="CA",
        zip_code="67890",
        phone_number="555-987-6543",
        email="jane.doe@company.com",
    )
    return [john, jane]


async def seed_database(session: AsyncSession) -> bool:
    """Insert the reference employees if the store is empty.

    Returns True when rows were inserted.
    """
    count = (await session.execute(select(func.count(Employee.id)))).scalar_one()
    if count:
        logger.debug("Skipping seed: %d employees already present", count)
        return False

    employees = reference_employees()
    session.add_all(employees)
    await session.flush()
    logger.info("Seeded %d reference employees", len(employees))
    return True


async def _main() -> None:
    from employee_api.common.log_config import configure_logging
    from employee_api.config import settings
    from employee_api.database import async_session_factory, init_models

    configure_logging(settings.LOG_LEVEL)
    await init_models()
    async with async_session_factory() as session:
        await seed_database(session)
        await session.commit()


if __name__ == "__main__":
    asyncio.run(_main())
