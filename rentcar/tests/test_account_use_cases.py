from __future__ import annotations

import pytest

from rentcar.application.services.password_hashing import HmacPasswordHasher
from rentcar.application.services.session_tokens import JwtSessionTokenIssuer
from rentcar.application.use_cases.accounts.get_account import GetAccountUseCase
from rentcar.application.use_cases.accounts.login_account import LoginAccountUseCase
from rentcar.application.use_cases.accounts.register_account import RegisterAccountUseCase
from rentcar.domain.accounts.entities import Account
from rentcar.domain.accounts.exceptions import (
    AccountAlreadyExistsError,
    UserNotFoundError,
    WrongPasswordError,
)
from rentcar.shared.config import TokenConfig
from rentcar.shared.errors import InternalError

PHONE = "+15551234567"


@pytest.fixture()
def issuer(token_config: TokenConfig) -> JwtSessionTokenIssuer:
    return JwtSessionTokenIssuer(token_config)


@pytest.fixture()
def register(accounts, dispatcher) -> RegisterAccountUseCase:
    return RegisterAccountUseCase(
        accounts=accounts, password_hasher=HmacPasswordHasher(), notifications=dispatcher
    )


@pytest.fixture()
def login(accounts, issuer: JwtSessionTokenIssuer) -> LoginAccountUseCase:
    return LoginAccountUseCase(
        accounts=accounts, password_hasher=HmacPasswordHasher(), tokens=issuer
    )


def test_register_then_login_scenario(
    register: RegisterAccountUseCase,
    login: LoginAccountUseCase,
    issuer: JwtSessionTokenIssuer,
    dispatcher,
) -> None:
    account = register.execute(PHONE, "Ann", "Lee", "a@x.com", "secret1")

    assert account.role == "User"
    assert account.phone_number == PHONE
    assert dispatcher.sent == [("a@x.com", "Ann", "Lee")]

    token = login.execute(PHONE, "secret1")
    assert issuer.verify(token).subject == PHONE

    with pytest.raises(WrongPasswordError):
        login.execute(PHONE, "wrong")

    with pytest.raises(UserNotFoundError):
        login.execute("+19999999999", "x")


def test_register_never_stores_plaintext(register: RegisterAccountUseCase, accounts) -> None:
    register.execute(PHONE, "Ann", "Lee", "a@x.com", "secret1")

    stored = accounts.find_by_phone(PHONE)
    assert b"secret1" not in stored.password_hash
    assert b"secret1" not in stored.password_salt
    assert "secret1" not in repr(stored)


def test_duplicate_registration_conflicts(
    register: RegisterAccountUseCase, accounts, dispatcher
) -> None:
    register.execute(PHONE, "Ann", "Lee", "a@x.com", "secret1")

    with pytest.raises(AccountAlreadyExistsError) as exc_info:
        register.execute(PHONE, "Bob", "Ray", "b@x.com", "other")

    assert exc_info.value.code == "account_already_exists"
    assert len(accounts._accounts) == 1
    assert accounts.find_by_phone(PHONE).first_name == "Ann"
    assert len(dispatcher.sent) == 1


def test_register_survives_dispatch_failure(accounts) -> None:
    class ExplodingDispatcher:
        def dispatch_registration_notice(self, email, first_name, last_name) -> None:
            raise RuntimeError("thread pool exhausted")

    use_case = RegisterAccountUseCase(
        accounts=accounts,
        password_hasher=HmacPasswordHasher(),
        notifications=ExplodingDispatcher(),
    )

    account = use_case.execute(PHONE, "Ann", "Lee", "a@x.com", "secret1")

    assert accounts.find_by_phone(PHONE) == account


def test_login_masks_unexpected_failures(issuer: JwtSessionTokenIssuer) -> None:
    class BrokenAccounts:
        def find_by_phone(self, phone_number: str) -> Account | None:
            raise ConnectionError("db host 10.0.0.5 unreachable")

        def add(self, account: Account) -> Account:  # pragma: no cover
            return account

    use_case = LoginAccountUseCase(
        accounts=BrokenAccounts(), password_hasher=HmacPasswordHasher(), tokens=issuer
    )

    with pytest.raises(InternalError) as exc_info:
        use_case.execute(PHONE, "secret1")

    assert exc_info.value.to_dict() == {"error": "internal_error"}
    assert isinstance(exc_info.value.__cause__, ConnectionError)


def test_login_masks_corrupt_credentials(
    register: RegisterAccountUseCase, login: LoginAccountUseCase, accounts
) -> None:
    account = register.execute(PHONE, "Ann", "Lee", "a@x.com", "secret1")
    accounts._accounts[PHONE] = Account(
        phone_number=account.phone_number,
        first_name=account.first_name,
        last_name=account.last_name,
        email=account.email,
        password_hash=account.password_hash[:10],
        password_salt=account.password_salt,
    )

    with pytest.raises(InternalError):
        login.execute(PHONE, "secret1")


def test_login_masks_issuer_failure(register: RegisterAccountUseCase, accounts) -> None:
    class BrokenIssuer:
        def issue(self, subject, *, now=None) -> str:
            raise ValueError("signing key rejected")

        def verify(self, token, *, now=None):  # pragma: no cover
            raise NotImplementedError

    register.execute(PHONE, "Ann", "Lee", "a@x.com", "secret1")
    use_case = LoginAccountUseCase(
        accounts=accounts, password_hasher=HmacPasswordHasher(), tokens=BrokenIssuer()
    )

    with pytest.raises(InternalError):
        use_case.execute(PHONE, "secret1")


def test_get_account(register: RegisterAccountUseCase, accounts) -> None:
    register.execute(PHONE, "Ann", "Lee", "a@x.com", "secret1")
    use_case = GetAccountUseCase(accounts=accounts)

    assert use_case.execute(PHONE).email == "a@x.com"
    with pytest.raises(UserNotFoundError):
        use_case.execute("+19999999999")
