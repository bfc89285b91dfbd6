"""Shared account state, input validation and console interaction."""

from __future__ import annotations

import sys
from collections import deque
from dataclasses import dataclass
from datetime import datetime
from typing import TextIO

DEFAULT_BALANCE = 123.45
IBAN_LENGTH = 22
_BOX_WIDTH = 42


def _box(title: str, lines: tuple[str, ...] = ()) -> str:
    """Render a framed message box in the style used across the console."""
    rule = "-" * (_BOX_WIDTH + 2)
    parts = [f"\n{rule}", f"\n|{title.center(_BOX_WIDTH)}|", f"\n|{'-' * _BOX_WIDTH}|"]
    parts.extend(f"\n| {line.ljust(_BOX_WIDTH - 1)}|" for line in lines)
    if lines:
        parts.append(f"\n|{'-' * _BOX_WIDTH}|")
    parts.append("\n")
    return "".join(parts)


class ValidationError(ValueError):
    """Raised when a value supplied for an account is not acceptable."""

    def __init__(self, message: str, *details: str) -> None:
        super().__init__(message)
        self.lines = (message, *details)

    def box(self) -> str:
        """Return the error framed for display on the console."""
        return _box("VALIDATION ERROR", self.lines)


class PasscodeError(ValidationError):
    """Raised when a new passcode is malformed or not confirmed."""


class IbanError(ValidationError):
    """Raised when an IBAN is not in the Irish format."""


@dataclass
class Wallet:
    """A balance that several accounts draw from."""

    amount: float = DEFAULT_BALANCE

    def deduct(self, amount: float) -> bool:
        """Take ``amount`` off the balance if it is covered; report success."""
        if self.amount >= amount:
            self.amount -= amount
            return True
        return False


class Console:
    """Reads whitespace-separated answers and writes text to a pair of streams."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._pending: deque[str] = deque()

    def say(self, text: str) -> None:
        """Write ``text`` exactly as given."""
        self._stdout.write(text)
        self._stdout.flush()

    def _next_token(self) -> str:
        while not self._pending:
            line = self._stdin.readline()
            if not line:
                raise EOFError("no more input")
            self._pending.extend(line.split())
        return self._pending.popleft()

    def ask(self, prompt: str) -> str:
        """Show ``prompt`` and return the next word of input."""
        self.say(prompt)
        return self._next_token()

    def ask_yes(self, prompt: str) -> bool:
        """Show ``prompt``, read one character and tell whether it is Y or y."""
        self.say(prompt)
        token = self._next_token()
        if len(token) > 1:
            self._pending.appendleft(token[1:])
        return token[0].upper() == "Y"

    def discard_line(self) -> None:
        """Drop whatever is left of the current input line."""
        self._pending.clear()


def validate_passcode(code: str) -> bool:
    """A passcode is exactly four ASCII digits."""
    return len(code) == 4 and all(ch in "0123456789" for ch in code)


def _is_ascii_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_ascii_alpha(ch: str) -> bool:
    return "a" <= ch <= "z" or "A" <= ch <= "Z"


def validate_iban(iban: str) -> bool:
    """Check the Irish layout: IE, two digits, four letters, fourteen digits."""
    if len(iban) != IBAN_LENGTH:
        return False
    if iban[:2].upper() != "IE":
        return False
    if not all(_is_ascii_digit(ch) for ch in iban[2:4]):
        return False
    if not all(_is_ascii_alpha(ch) for ch in iban[4:8]):
        return False
    return all(_is_ascii_digit(ch) for ch in iban[8:])


def current_date() -> str:
    """Today's local date as DD/MM/YYYY."""
    return datetime.now().strftime("%d/%m/%Y")


class Account:
    """State common to every service account: credentials, flags and funds."""

    def __init__(
        self,
        wallet: Wallet | None = None,
        passcode: str = "",
        iban: str = "",
        kids_mode: str = "OFF",
        has_internet: bool = False,
        has_tv: bool = False,
    ) -> None:
        self.wallet = wallet if wallet is not None else Wallet()
        self.passcode = passcode
        self.iban = iban
        self.kids_mode = kids_mode
        self.has_internet = has_internet
        self.has_tv = has_tv
        self.is_package = False
        self.subscription_date = current_date()

    @property
    def balance(self) -> float:
        """The amount held in the shared wallet."""
        return self.wallet.amount

    @balance.setter
    def balance(self, amount: float) -> None:
        self.wallet.amount = amount

    def set_passcode(self, new_passcode: str, confirm_passcode: str) -> None:
        """Store a new passcode after checking its format and confirmation."""
        if not validate_passcode(new_passcode):
            raise PasscodeError("Passcode must be exactly 4 digits")
        if new_passcode != confirm_passcode:
            raise PasscodeError("Passcodes do not match")
        self.passcode = new_passcode

    def set_iban(self, iban: str) -> None:
        """Store an IBAN after checking it is in the Irish format."""
        if not validate_iban(iban):
            raise IbanError(
                "Invalid Irish IBAN format:",
                "* Must be 22 characters",
                "* Must start with 'IE'",
                "* Format: IEkk BBBB SSSS SSCC CCCC CC",
            )
        self.iban = iban

    def deduct_payment(self, amount: float) -> bool:
        """Charge ``amount`` to the wallet; False when funds are short."""
        return self.wallet.deduct(amount)

    def setup_passcode(self, console: Console) -> bool:
        """Ask for a new passcode twice and store it; report success."""
        console.say(_box("PASSCODE SETUP"))
        new_passcode = console.ask("\n* Enter new passcode (4 digits): ")
        confirm_passcode = console.ask("* Confirm passcode: ")
        try:
            self.set_passcode(new_passcode, confirm_passcode)
        except PasscodeError as error:
            console.say(error.box())
            return False
        console.say(_box("PASSCODE SET SUCCESSFULLY"))
        return True

    def change_passcode(self, console: Console) -> bool:
        """Verify the current passcode, then ask for and store a new one."""
        console.say(_box("CHANGE PASSCODE"))
        current = console.ask("\n* Enter current passcode: ")
        if current != self.passcode:
            console.say(_box("SECURITY ALERT", ("Incorrect passcode! Access denied.",)))
            return False
        new_passcode = console.ask("* Enter new passcode (4 digits): ")
        confirm_passcode = console.ask("* Confirm new passcode: ")
        try:
            self.set_passcode(new_passcode, confirm_passcode)
        except PasscodeError as error:
            console.say(error.box())
            return False
        console.say(_box("PASSCODE CHANGED SUCCESSFULLY"))
        return True