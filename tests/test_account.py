import io
from datetime import date, datetime

import pytest

from kingdomcable.account import (
    Account,
    Console,
    IbanError,
    PasscodeError,
    ValidationError,
    Wallet,
    current_date,
    validate_iban,
    validate_passcode,
)

GOOD_IBAN = "IE12ABCD12345678901234"


def make_console(text):
    out = io.StringIO()
    return Console(io.StringIO(text), out), out


@pytest.mark.parametrize("code", ["1234", "0000", "9876"])
def test_valid_passcodes(code):
    assert validate_passcode(code) is True


@pytest.mark.parametrize("code", ["", "123", "12345", "12a4", "abcd", " 123"])
def test_invalid_passcodes(code):
    assert validate_passcode(code) is False


@pytest.mark.parametrize("iban", [GOOD_IBAN, "ie12abcd12345678901234", "iE00zzzz00000000000000"])
def test_valid_ibans(iban):
    assert validate_iban(iban) is True


@pytest.mark.parametrize(
    "iban",
    [
        "",
        GOOD_IBAN[:-1],
        GOOD_IBAN + "5",
        "GB12ABCD12345678901234",
        "IEX2ABCD12345678901234",
        "IE12AB1D12345678901234",
        "IE12ABCD1234567890123X",
    ],
)
def test_invalid_ibans(iban):
    assert validate_iban(iban) is False


def test_current_date_format():
    text = current_date()
    assert len(text) == 10
    assert text[2] == "/" and text[5] == "/"
    parsed = datetime.strptime(text, "%d/%m/%Y").date()
    assert abs((parsed - date.today()).days) <= 1


def test_default_account_state():
    account = Account()
    assert account.balance == 123.45
    assert account.kids_mode == "OFF"
    assert account.passcode == ""
    assert account.has_internet is False and account.has_tv is False
    assert account.is_package is False
    assert account.subscription_date == current_date()


def test_wallet_is_shared_between_accounts():
    wallet = Wallet(100.0)
    first = Account(wallet)
    second = Account(wallet)
    assert first.deduct_payment(30.0) is True
    assert second.balance == pytest.approx(70.0)
    second.balance = 5.0
    assert first.balance == 5.0


def test_deduct_fails_when_funds_short():
    wallet = Wallet(10.0)
    assert wallet.deduct(10.5) is False
    assert wallet.amount == 10.0
    assert wallet.deduct(10.0) is True
    assert wallet.amount == 0.0


def test_set_passcode_stores_value():
    account = Account()
    account.set_passcode("4321", "4321")
    assert account.passcode == "4321"


def test_set_passcode_rejects_bad_format():
    account = Account(passcode="1111")
    with pytest.raises(PasscodeError):
        account.set_passcode("12", "12")
    assert account.passcode == "1111"


def test_set_passcode_rejects_mismatch():
    account = Account()
    with pytest.raises(PasscodeError, match="do not match"):
        account.set_passcode("1234", "4321")
    assert account.passcode == ""


def test_set_iban():
    account = Account()
    account.set_iban(GOOD_IBAN)
    assert account.iban == GOOD_IBAN
    with pytest.raises(IbanError) as info:
        account.set_iban("not-an-iban")
    assert isinstance(info.value, ValidationError)
    assert "Must start with 'IE'" in info.value.box()
    assert account.iban == GOOD_IBAN


def test_setup_passcode_success():
    console, out = make_console("1234\n1234\n")
    account = Account()
    assert account.setup_passcode(console) is True
    assert account.passcode == "1234"
    assert "PASSCODE SET SUCCESSFULLY" in out.getvalue()


def test_setup_passcode_failure_reports_error():
    console, out = make_console("12 12\n")
    account = Account()
    assert account.setup_passcode(console) is False
    assert account.passcode == ""
    assert "Passcode must be exactly 4 digits" in out.getvalue()


def test_change_passcode_wrong_current():
    console, out = make_console("9999\n")
    account = Account(passcode="1234")
    assert account.change_passcode(console) is False
    assert account.passcode == "1234"
    assert "Incorrect passcode! Access denied." in out.getvalue()


def test_change_passcode_success():
    console, _ = make_console("1234\n5678\n5678\n")
    account = Account(passcode="1234")
    assert account.change_passcode(console) is True
    assert account.passcode == "5678"


def test_change_passcode_mismatch():
    console, out = make_console("1234\n5678\n8765\n")
    account = Account(passcode="1234")
    assert account.change_passcode(console) is False
    assert account.passcode == "1234"
    assert "Passcodes do not match" in out.getvalue()


def test_console_ask_reads_words():
    console, out = make_console("first second\nthird\n")
    assert console.ask("> ") == "first"
    assert console.ask("") == "second"
    assert console.ask("") == "third"
    assert out.getvalue() == "> "
    with pytest.raises(EOFError):
        console.ask("")


def test_console_ask_yes_consumes_one_character():
    console, _ = make_console("yN\nn\n")
    assert console.ask_yes("?") is True
    assert console.ask_yes("?") is False
    assert console.ask_yes("?") is False


def test_console_discard_line():
    console, _ = make_console("a b c\nd\n")
    assert console.ask("") == "a"
    console.discard_line()
    assert console.ask("") == "d"