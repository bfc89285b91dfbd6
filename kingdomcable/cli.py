"""Main menu of the cable service: sign-up flows, login and the entry point."""

from __future__ import annotations

import argparse

from .account import Console, IbanError, Wallet
from .internet import PACKAGE_DISCOUNT, InternetAccount
from .tv import TVAccount

_WELCOME = "=== WELCOME TO KINGDOM CABLE SERVICE ===\n"
_GOODBYE = "Thank you for using Kingdom Cable Service!\n"

_MAIN_MENU = (
    "\n=== MAIN MENU ===\n"
    "1. Set up Internet Account\n"
    "2. Set up TV Account\n"
    "3. Set up Package Account (Internet + TV, 10% discount)\n"
    "4. Already have account (login)\n"
    "5. Exit\n"
)

_LOGIN_MENU = (
    "\nChoose the account to login:\n"
    "1. Internet Account\n"
    "2. TV Account\n"
    "3. Change Passcode\n"
    "4. Back to Main Menu\n"
)


class CableService:
    """An internet and a TV account that share one wallet, driven by a menu."""

    def __init__(self, wallet: Wallet | None = None) -> None:
        self.wallet = wallet if wallet is not None else Wallet()
        self.internet = InternetAccount(self.wallet)
        self.tv = TVAccount(self.wallet)

    def setup_internet(self, console: Console) -> bool:
        """Sign up for internet; report whether the flow got to plan selection."""
        if self.internet.has_internet:
            console.say("You already have an Internet account. Please login (option 4).\n")
            return False
        if not self.tv.passcode:
            self.internet.setup_passcode(console)
            if not self.internet.passcode:
                return False
        if not self.tv.iban:
            iban = console.ask("Enter Irish IBAN: ")
            try:
                self.internet.set_iban(iban)
            except IbanError as error:
                console.say(error.box())
                console.say("Invalid IBAN.\n")
                return False
        self.internet.setup_account(console)
        console.say("Internet account setup complete!\n")
        return True

    def setup_tv(self, console: Console) -> bool:
        """Sign up for TV, discounted when internet is held; report completion."""
        if self.tv.has_tv:
            console.say("You already have a TV account. Please login (option 4).\n")
            return False
        if not self.internet.passcode:
            self.tv.setup_passcode(console)
            if not self.tv.passcode:
                return False
        if not self.internet.iban:
            iban = console.ask("Enter Irish IBAN: ")
            try:
                self.tv.set_iban(iban)
            except IbanError as error:
                console.say(error.box())
                console.say("Invalid IBAN.\n")
                return False
        if self.internet.has_internet:
            self.tv.discount_percentage = PACKAGE_DISCOUNT
        self.tv.setup_tv(console)
        console.say("TV account setup complete!\n")
        return True

    def setup_package(self, console: Console) -> bool:
        """Sign up for internet and then TV; False when an IBAN is rejected."""
        if self.internet.has_internet:
            console.say(
                "Sorry, you already have Internet account, "
                "you need to login into your account!\n"
            )
        else:
            if self.tv.iban == "":
                iban = console.ask("Enter Irish IBAN: " + self.internet.iban)
                try:
                    self.internet.set_iban(iban)
                except IbanError as error:
                    console.say(error.box())
                    console.say("Your IBAN is not valid\n")
                    return False
            if self.tv.passcode == "":
                self.internet.setup_passcode(console)
            self.internet.setup_account(console)

        if self.tv.has_tv:
            console.say(
                "Sorry, you already have TV account, "
                "you need to login into your account!\n"
            )
            return True
        if self.internet.passcode == "":
            iban = console.ask("Enter Irish IBAN: " + self.internet.passcode)
            try:
                self.tv.set_iban(iban)
            except IbanError as error:
                console.say(error.box())
                console.say("Your IBAN is not valid\n")
                return False
        if self.internet.passcode == "":
            self.tv.setup_passcode(console)
        self.tv.setup_tv(console)
        return True

    def login(self, console: Console) -> bool:
        """Check a passcode and offer the account menus; report whether it matched."""
        console.say("=== LOGIN ===\n")
        entered = console.ask("Enter your passcode: ")
        console.say("\n")

        has_internet = self.internet.passcode != ""
        has_tv = self.tv.passcode != ""
        valid = (has_internet and entered == self.internet.passcode) or (
            has_tv and entered == self.tv.passcode
        )

        if not valid:
            if has_internet or has_tv:
                console.say("Incorrect passcode! Please try again.\n")
            else:
                console.say("No accounts detected! Please set up an account first.\n")
            return False

        while True:
            console.say(_LOGIN_MENU)
            choice = console.ask("Enter choice (1-4): ")
            console.discard_line()
            if choice == "1" and self.internet.internet_package != "":
                self.internet.show_menu(console)
                return True
            if choice == "2" and self.tv.tv_package != "":
                self.tv.show_menu(console)
                return True
            if choice == "3":
                changed = False
                if has_internet:
                    changed = self.internet.change_passcode(console)
                elif has_tv:
                    changed = self.tv.change_passcode(console)
                if not changed:
                    console.say("Passcode change failed. Please try again.\n")
                    continue
                return True
            if choice == "4":
                console.say("Returning to main menu...\n")
                return True
            console.say("Invalid choice! Please try again.\n")

    def run(self, console: Console) -> None:
        """Show the main menu until the user exits."""
        console.say(_WELCOME)
        actions = {
            1: self.setup_internet,
            2: self.setup_tv,
            3: self.setup_package,
            4: self.login,
        }
        while True:
            console.say(_MAIN_MENU)
            reply = console.ask("Enter choice (1-5): ")
            console.discard_line()
            try:
                choice = int(reply)
            except ValueError:
                console.say("Invalid input. Please enter a number.\n")
                continue
            if choice == 5:
                console.say(_GOODBYE)
                return
            action = actions.get(choice)
            if action is None:
                console.say("Invalid choice. Please try again.\n")
            else:
                action(console)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive cable service on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="kingdomcable",
        description="Interactive sign-up and management of internet and TV accounts.",
    )
    parser.parse_args(argv)
    console = Console()
    try:
        CableService().run(console)
    except (EOFError, KeyboardInterrupt):
        console.say("\n")
    return 0