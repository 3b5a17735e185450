import pytest

from ..core.errors import AmountOverflowError, InsufficientFundsError, NegativeAmountError
from ..core.money import MAX_BALANCE, format_cents
from ..domain import Account


@pytest.fixture
def account() -> Account:
    return Account(1, "Giorgi")


def test_new_account_starts_empty(account: Account) -> None:
    assert account.id == 1
    assert account.holder == "Giorgi"
    assert account.balance == 0


def test_deposit_then_withdraw(account: Account) -> None:
    assert account.deposit(50_000) == 50_000
    assert account.withdraw(25_000) == 25_000
    assert account.balance == 25_000
    assert account.summary() == "Account 1 (Giorgi) has a balance of $250.00"


@pytest.mark.parametrize("first, second", [(0, 0), (1, 99), (12_345, 67_890), (10**12, 10**12)])
def test_split_deposits_match_single_deposit(first: int, second: int) -> None:
    split = Account(1, "A")
    split.deposit(first)
    split.deposit(second)

    single = Account(2, "B")
    single.deposit(first + second)

    assert split.balance == single.balance


@pytest.mark.parametrize("amount", [101, 10_000, MAX_BALANCE])
def test_overdraw_fails_and_keeps_balance(account: Account, amount: int) -> None:
    account.deposit(100)

    with pytest.raises(InsufficientFundsError, match="Insufficient funds"):
        account.withdraw(amount)
    assert account.balance == 100


def test_withdraw_entire_balance(account: Account) -> None:
    account.deposit(700)
    assert account.withdraw(700) == 0


@pytest.mark.parametrize("operation", ["deposit", "withdraw"])
@pytest.mark.parametrize("amount", [-1, -5, -(10**20)])
def test_negative_amount_rejected(account: Account, operation: str, amount: int) -> None:
    account.deposit(500)

    with pytest.raises(NegativeAmountError, match="Amount cannot be negative"):
        getattr(account, operation)(amount)
    assert account.balance == 500


def test_deposit_past_maximum_overflows(account: Account) -> None:
    account.deposit(MAX_BALANCE - 10)

    with pytest.raises(AmountOverflowError, match="Amount overflow"):
        account.deposit(11)
    assert account.balance == MAX_BALANCE - 10

    assert account.deposit(10) == MAX_BALANCE


@pytest.mark.parametrize("amount", [1.5, "100", None, True])
def test_non_integer_amount_rejected(account: Account, amount: object) -> None:
    with pytest.raises(TypeError):
        account.deposit(amount)  # type: ignore[arg-type]
    assert account.balance == 0


@pytest.mark.parametrize("account_id", [0, -3])
def test_non_positive_id_rejected(account_id: int) -> None:
    with pytest.raises(ValueError, match="positive"):
        Account(account_id, "Nobody")


def test_empty_holder_rejected() -> None:
    with pytest.raises(ValueError):
        Account(1, "")


def test_identity_is_read_only(account: Account) -> None:
    with pytest.raises(AttributeError):
        account.id = 2  # type: ignore[misc]
    with pytest.raises(AttributeError):
        account.balance = 10**6  # type: ignore[misc]


def test_str_matches_summary(account: Account) -> None:
    account.deposit(5)
    assert str(account) == account.summary() == "Account 1 (Giorgi) has a balance of $0.05"


@pytest.mark.parametrize(
    "cents, rendered",
    [
        (0, "$0.00"),
        (5, "$0.05"),
        (15_000, "$150.00"),
        (55_000, "$550.00"),
        (123_456_789, "$1234567.89"),
        (MAX_BALANCE, "$92233720368547758.07"),
    ],
)
def test_format_cents(cents: int, rendered: str) -> None:
    assert format_cents(cents) == rendered


@pytest.mark.parametrize("holder", [123, None, b"Giorgi"])
def test_non_string_holder_rejected(holder: object) -> None:
    with pytest.raises(TypeError, match="holder"):
        Account(1, holder)  # type: ignore[arg-type]
