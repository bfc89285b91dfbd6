import io

import pytest

from kingdomcable.account import Console, Wallet
from kingdomcable.internet import InternetAccount


def make(inputs="", amount=123.45, passcode="1234"):
    out = io.StringIO()
    console = Console(io.StringIO(inputs), out)
    account = InternetAccount(Wallet(amount), passcode=passcode)
    return account, console, out


def test_new_account_defaults():
    account, _, _ = make()
    assert account.internet_package == ""
    assert account.internet_cost == 0.0
    assert account.has_internet is False
    assert account.kids_mode == "OFF"


def test_setup_regular_sets_plan_and_charges():
    account, console, out = make()
    account.setup_regular(console)
    assert account.internet_package == "REGULAR"
    assert account.download_speed == 15.6
    assert account.upload_speed == 2.97
    assert account.internet_cost == 35.0
    assert account.has_internet is True
    assert account.balance == pytest.approx(123.45 - 35.0)
    assert "REGULAR INTERNET ACTIVATED!" in out.getvalue()


def test_setup_premium_with_discount():
    account, console, out = make()
    account.discount_percentage = 0.9
    account.setup_premium(console)
    assert account.internet_package == "PREMIUM"
    assert account.internet_cost == pytest.approx(50.0 * 0.9)
    assert account.balance == pytest.approx(123.45 - 50.0 * 0.9)
    assert "(10% discount)" in out.getvalue()


def test_setup_with_short_funds_keeps_balance():
    account, console, _ = make(amount=10.0)
    account.setup_premium(console)
    assert account.has_internet is True
    assert account.balance == 10.0


def test_choose_plan_retries_on_invalid_choice():
    account, console, out = make("9\nabc\n2\n")
    assert account.choose_plan(console) == "PREMIUM"
    assert out.getvalue().count("Invalid choice! Please select 1-3.") == 2
    assert account.internet_package == "PREMIUM"


def test_choose_plan_back_leaves_account_untouched():
    account, console, _ = make("3\n")
    assert account.setup_account(console) is None
    assert account.internet_package == ""
    assert account.balance == 123.45


def test_render_details_shows_values():
    account, console, _ = make()
    account.setup_regular(console)
    text = account.render_details()
    assert "INTERNET ACCOUNT DETAILS" in text
    assert "| Package: REGULAR" in text
    assert "Download Speed: 15.6" in text
    assert "Upload Speed: 2.97" in text
    assert "(10% discount)" not in text


def test_toggle_kids_mode_with_correct_passcode():
    account, console, out = make("Y\n1234\n")
    assert account.toggle_kids_mode(console) is True
    assert account.kids_mode == "ON"
    assert "SETTING CHANGED SUCCESSFULLY" in out.getvalue()


def test_toggle_kids_mode_back_off():
    account, console, _ = make("y 1234\n")
    account.kids_mode = "ON"
    assert account.toggle_kids_mode(console) is True
    assert account.kids_mode == "OFF"


def test_toggle_kids_mode_wrong_passcode():
    account, console, out = make("Y\n9999\n")
    assert account.toggle_kids_mode(console) is False
    assert account.kids_mode == "OFF"
    assert "ACCESS DENIED! Incorrect passcode." in out.getvalue()


def test_toggle_kids_mode_declined():
    account, console, _ = make("N\n")
    assert account.toggle_kids_mode(console) is False
    assert account.kids_mode == "OFF"


def test_upgrade_from_regular():
    account, console, out = make("Y\n", amount=100.0)
    account.internet_package = "REGULAR"
    assert account.upgrade_downgrade(console) is True
    assert account.internet_package == "PREMIUM"
    assert account.internet_cost == 50.0
    assert account.download_speed == 23.9
    assert account.balance == pytest.approx(100.0 - 15.0)
    assert "UPGRADE COMPLETE!" in out.getvalue()


def test_upgrade_fails_without_funds():
    account, console, out = make("Y\n", amount=5.0)
    account.internet_package = "REGULAR"
    assert account.upgrade_downgrade(console) is False
    assert account.internet_package == "REGULAR"
    assert account.balance == 5.0
    assert "TRANSACTION FAILED!" in out.getvalue()


def test_downgrade_from_premium_is_free():
    account, console, out = make("Y\n", amount=20.0)
    account.internet_package = "PREMIUM"
    assert account.upgrade_downgrade(console) is True
    assert account.internet_package == "REGULAR"
    assert account.internet_cost == 35.0
    assert account.upload_speed == 2.97
    assert account.balance == 20.0
    assert "DOWNGRADE COMPLETE!" in out.getvalue()


def test_upgrade_declined():
    account, console, _ = make("n\n")
    account.internet_package = "REGULAR"
    assert account.upgrade_downgrade(console) is False
    assert account.internet_package == "REGULAR"


def test_show_menu_view_details_then_back():
    account, console, out = make("1\n5\n")
    account.show_menu(console)
    assert "INTERNET ACCOUNT DETAILS" in out.getvalue()


def test_show_menu_rejects_bad_input():
    account, console, out = make("abc\n7\n5\n")
    account.show_menu(console)
    assert out.getvalue().count("Invalid choice! Please select 1-5.") == 2


def test_show_menu_failed_passcode_change():
    account, console, out = make("4\n0000\n5\n")
    account.show_menu(console)
    assert "Passcode change failed." in out.getvalue()
    assert account.passcode == "1234"


def test_show_menu_changes_passcode():
    account, console, _ = make("4\n1234\n4321\n4321\n5\n")
    account.show_menu(console)
    assert account.passcode == "4321"


def test_show_menu_runs_out_of_input():
    account, console, _ = make("")
    with pytest.raises(EOFError):
        account.show_menu(console)


def test_shared_wallet_is_charged():
    wallet = Wallet(200.0)
    account = InternetAccount(wallet)
    console = Console(io.StringIO(""), io.StringIO())
    account.setup_regular(console)
    assert wallet.amount == account.balance
    assert wallet.amount < 200.0