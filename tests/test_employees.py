"""Tests for the employee credential store and login."""

import pytest

from carddesk.core.config import SecuritySettings
from carddesk.core.exceptions import InvalidCredentialsError
from carddesk.core.security import decode_access_token
from carddesk.modules.auth import AuthService
from carddesk.modules.employees import (
    PROCESS_DEPOSIT,
    PROCESS_WITHDRAWAL,
    EmployeeAlreadyExistsError,
    EmployeeCreateInput,
    EmployeeNotFoundError,
    EmployeeService,
    UnknownPermissionError,
)

SECURITY = SecuritySettings(secret_key="employee-tests-secret-key", bcrypt_rounds=4)


def alice(**overrides) -> EmployeeCreateInput:
    fields = {"employee_id": "E001", "name": "Alice", "email": "alice@example.com", "password": "secret123"}
    fields.update(overrides)
    return EmployeeCreateInput(**fields)


@pytest.fixture
def service(employee_repo) -> EmployeeService:
    return EmployeeService(employee_repo, bcrypt_rounds=4)


class TestRegistration:
    @pytest.mark.asyncio
    async def test_register_hashes_password_and_grants_default_permission(self, service):
        employee = await service.register(alice())

        assert employee.password_hash != "secret123"
        assert employee.permissions == frozenset({PROCESS_WITHDRAWAL})
        assert "secret123" not in repr(employee)

    @pytest.mark.asyncio
    async def test_duplicate_employee_id_rejected(self, service):
        await service.register(alice())
        with pytest.raises(EmployeeAlreadyExistsError):
            await service.register(alice(email="other@example.com"))

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected_case_insensitively(self, service):
        await service.register(alice())
        with pytest.raises(EmployeeAlreadyExistsError):
            await service.register(alice(employee_id="E002", email="ALICE@example.com"))

    @pytest.mark.asyncio
    async def test_find_by_identifier_and_email(self, service):
        await service.register(alice())

        assert (await service.find_by_employee_id("E001")).email == "alice@example.com"
        assert (await service.find_by_email(" Alice@Example.com ")).employee_id == "E001"
        with pytest.raises(EmployeeNotFoundError):
            await service.find_by_employee_id("missing")
        with pytest.raises(EmployeeNotFoundError):
            await service.find_by_email("missing@example.com")


class TestPermissions:
    @pytest.mark.asyncio
    async def test_grant_adds_to_existing_permissions(self, service):
        await service.register(alice())
        employee = await service.grant_permissions("E001", [PROCESS_DEPOSIT])
        assert employee.permissions == frozenset({PROCESS_WITHDRAWAL, PROCESS_DEPOSIT})

    @pytest.mark.asyncio
    async def test_unknown_permission_rejected(self, service):
        await service.register(alice())
        with pytest.raises(UnknownPermissionError):
            await service.grant_permissions("E001", ["launchMissiles"])


class TestLogin:
    @pytest.mark.asyncio
    async def test_login_issues_verifiable_token(self, service):
        await service.register(alice())
        auth = AuthService(service, SECURITY)

        issued = await auth.login("alice@example.com", "secret123")
        claims = auth.verify(issued.token)

        assert claims.employee_id == "E001"
        assert claims.has_permission(PROCESS_WITHDRAWAL)
        assert decode_access_token(SECURITY, issued.token) == claims

    @pytest.mark.asyncio
    async def test_wrong_password_and_unknown_email_fail_identically(self, service):
        await service.register(alice())
        auth = AuthService(service, SECURITY)

        with pytest.raises(InvalidCredentialsError) as wrong_password:
            await auth.login("alice@example.com", "not-the-password")
        with pytest.raises(InvalidCredentialsError) as unknown_email:
            await auth.login("nobody@example.com", "secret123")

        assert wrong_password.value.message == unknown_email.value.message == "Invalid credentials"


class TestSqlRepository:
    @pytest.mark.asyncio
    async def test_unique_constraint_reports_duplicate(self, container):
        async with container.session_factory() as db:
            service = EmployeeService.with_session(db, container.settings)
            await service.register(alice())
            await db.commit()

        async with container.session_factory() as db:
            service = EmployeeService.with_session(db, container.settings)
            with pytest.raises(EmployeeAlreadyExistsError):
                await service.register(alice(employee_id="E002"))

        async with container.session_factory() as db:
            service = EmployeeService.with_session(db, container.settings)
            employee = await service.find_by_employee_id("E001")
            assert employee.permissions == frozenset({PROCESS_WITHDRAWAL})
            assert await service.get_by_employee_id("E002") is None
