"""Internet service account: plans, parental controls and its menu."""

from __future__ import annotations

from .account import Account, Console, Wallet

REGULAR = "REGULAR"
PREMIUM = "PREMIUM"

REGULAR_DOWNLOAD = 15.6
REGULAR_UPLOAD = 2.97
REGULAR_COST = 35.0

PREMIUM_DOWNLOAD = 23.9
PREMIUM_UPLOAD = 3.8
PREMIUM_COST = 50.0

PACKAGE_DISCOUNT = 0.9

_PLANS_MENU = (
    "\n+============================================+"
    "\n|           INTERNET SERVICE PLANS         |"
    "\n+--------------------------------------------+"
    "\n| 1. REGULAR Package                      |"
    "\n|    -> 15.6 Mbps Download                |"
    "\n|    -> 2.97 Mbps Upload                  |"
    "\n|    -> $35/month                         |"
    "\n|                                          |"
    "\n| 2. PREMIUM Package                      |"
    "\n|    -> 23.9 Mbps Download                |"
    "\n|    -> 3.8 Mbps Upload                   |"
    "\n|    -> $50/month                         |"
    "\n|                                          |"
    "\n| 3. Back to Previous Menu                |"
    "\n+============================================+"
)

_ACCOUNT_MENU = (
    "\n--------------------------------------------"
    "\n|       INTERNET ACCOUNT MANAGEMENT        |"
    "\n|------------------------------------------|"
    "\n| 1. View Account Details                  |"
    "\n| 2. Toggle Kids Restrictions              |"
    "\n| 3. Upgrade/Downgrade Subscription        |"
    "\n| 4. Change Passcode                       |"
    "\n| 5. Back to Main Menu                     |"
    "\n-------------------------------------------|"
)


def _num(value: float) -> str:
    """Format a number the way a default-configured output stream does."""
    return f"{value:g}"


def _parse_choice(reply: str) -> int:
    try:
        return int(reply)
    except ValueError:
        return 0


class InternetAccount(Account):
    """An account holding one internet plan, charged to a shared wallet."""

    def __init__(
        self,
        wallet: Wallet | None = None,
        passcode: str = "",
        iban: str = "",
        kids_mode: str = "OFF",
    ) -> None:
        super().__init__(wallet, passcode, iban, kids_mode, False, False)
        self.internet_package = ""
        self.download_speed = 0.0
        self.upload_speed = 0.0
        self.internet_cost = 0.0
        self.discount_percentage = 1.0

    def render_details(self) -> str:
        """Return the framed summary of this account."""
        if self.discount_percentage == PACKAGE_DISCOUNT:
            cost_line = f"\n| Monthly Cost: ${_num(self.internet_cost):<19} (10% discount) |"
        else:
            cost_line = f"\n| Monthly Cost: ${_num(self.internet_cost):<30} |"
        return "".join(
            (
                "\n+============================================+",
                "\n|        INTERNET ACCOUNT DETAILS         |",
                "\n+--------------------------------------------+",
                f"\n| Package: {self.internet_package:<30} |",
                f"\n| Download Speed: {_num(self.download_speed):<20} Mbps |",
                f"\n| Upload Speed: {_num(self.upload_speed):<22} Mbps |",
                cost_line,
                f"\n| Kids Restrictions: {self.kids_mode:<22} |",
                f"\n| Subscription Date: {self.subscription_date:<22} |",
                f"\n| Balance: ${_num(self.balance):<31} |",
                "\n+============================================+\n",
            )
        )

    def choose_plan(self, console: Console) -> str | None:
        """Offer the plans until a valid choice; return the plan taken, if any."""
        while True:
            console.say(_PLANS_MENU)
            choice = _parse_choice(console.ask("\n\n* Enter your choice (1-3): "))
            if choice == 1:
                self.setup_regular(console)
                return REGULAR
            if choice == 2:
                self.setup_premium(console)
                return PREMIUM
            if choice == 3:
                return None
            console.say("\n! Invalid choice! Please select 1-3.\n")
            console.discard_line()

    def _apply_plan(self, package: str, download: float, upload: float, cost: float) -> None:
        self.internet_package = package
        self.download_speed = download
        self.upload_speed = upload
        self.internet_cost = cost

    def setup_regular(self, console: Console) -> None:
        """Activate the regular plan and charge its monthly cost."""
        self._apply_plan(
            REGULAR, REGULAR_DOWNLOAD, REGULAR_UPLOAD, REGULAR_COST * self.discount_percentage
        )
        self.has_internet = True
        self.deduct_payment(REGULAR_COST * self.discount_percentage)
        console.say(
            "\n+--------------------------------------------+"
            "\n|      REGULAR INTERNET ACTIVATED!         |"
            "\n+--------------------------------------------+"
            "\n| [OK] Service successfully configured     |"
            f"\n| --> Monthly cost: ${_num(self.internet_cost):<22} |"
            "\n+--------------------------------------------+\n"
        )
        console.say(self.render_details())

    def setup_premium(self, console: Console) -> None:
        """Activate the premium plan and charge its monthly cost."""
        self._apply_plan(
            PREMIUM, PREMIUM_DOWNLOAD, PREMIUM_UPLOAD, PREMIUM_COST * self.discount_percentage
        )
        self.has_internet = True
        self.deduct_payment(PREMIUM_COST * self.discount_percentage)
        console.say(
            "\n=============================================="
            "\n|      PREMIUM INTERNET ACTIVATED!         |"
            "\n|--------------------------------------------|"
            "\n| * Service successfully configured        |"
            f"\n| > Monthly cost: ${_num(self.internet_cost):<24} |"
            "\n==============================================\n"
        )
        console.say(self.render_details())

    def toggle_kids_mode(self, console: Console) -> bool:
        """Flip parental controls after passcode verification; report a change."""
        console.say(
            "\n+============================================+"
            "\n|       PARENTAL CONTROL SETTINGS         |"
            "\n+--------------------------------------------+"
            f"\n| Current Status: {self.kids_mode:<25} |"
            "\n+============================================+\n"
        )
        action = "ENABLE" if self.kids_mode == "OFF" else "DISABLE"
        if not console.ask_yes(f"\n* Would you like to {action} parental controls? (Y/N): "):
            return False
        console.say(
            "\n----------------------------------------"
            "\n|   SECURITY VERIFICATION REQUIRED     |"
            "\n----------------------------------------"
        )
        entered = console.ask("\n* Enter your passcode: ")
        if entered != self.passcode:
            console.say("\n! ACCESS DENIED! Incorrect passcode.\n")
            return False
        self.kids_mode = "ON" if self.kids_mode == "OFF" else "OFF"
        console.say(
            "\n+============================================+"
            "\n|        SETTING CHANGED SUCCESSFULLY      |"
            "\n+--------------------------------------------+"
            f"\n| New Status: {self.kids_mode:<28} |"
            "\n+============================================+\n"
        )
        console.say(self.render_details())
        return True

    def upgrade_downgrade(self, console: Console) -> bool:
        """Move between plans on request; report whether the plan changed."""
        is_regular = self.internet_package == REGULAR
        current = "REGULAR ($35)" if is_regular else "PREMIUM ($50)"
        console.say(
            "\n+============================================+"
            "\n|       SUBSCRIPTION MANAGEMENT           |"
            "\n+--------------------------------------------+"
            f"\n| Current Package: {current:<23} |"
            "\n+============================================+\n"
        )
        action = "UPGRADE to PREMIUM" if is_regular else "DOWNGRADE to REGULAR"
        if not console.ask_yes(f"\n* Would you like to {action}? (Y/N): "):
            return False
        if is_regular:
            if not self.deduct_payment(PREMIUM_COST - REGULAR_COST):
                console.say(
                    "\n TRANSACTION FAILED!"
                    f"\n* Needed: $50 | Available: ${_num(self.balance)}\n"
                )
                return False
            self._apply_plan(PREMIUM, PREMIUM_DOWNLOAD, PREMIUM_UPLOAD, PREMIUM_COST)
            console.say(
                "\n+============================================+"
                "\n|       UPGRADE COMPLETE!                    |"
                "\n+--------------------------------------------+"
                "\n| > Now subscribed to PREMIUM Internet       |"
                f"\n| > New balance: ${_num(self.balance):<26} |"
                "\n+============================================+\n"
            )
            return True
        self._apply_plan(REGULAR, REGULAR_DOWNLOAD, REGULAR_UPLOAD, REGULAR_COST)
        console.say(
            "\n+--------------------------------------------+"
            "\n|       DOWNGRADE COMPLETE!                  |"
            "\n+--------------------------------------------+"
            "\n| > Now subscribed to REGULAR Internet       |"
            "\n+--------------------------------------------+\n"
        )
        return True

    def setup_account(self, console: Console) -> str | None:
        """Let a new customer pick a plan."""
        return self.choose_plan(console)

    def show_menu(self, console: Console) -> None:
        """Run the account management menu until the user goes back."""
        while True:
            console.say(_ACCOUNT_MENU)
            reply = console.ask("\n\n* Enter your choice (1-5): ")
            choice = _parse_choice(reply)
            if choice == 0:
                console.discard_line()
            if choice == 1:
                console.say(self.render_details())
            elif choice == 2:
                self.toggle_kids_mode(console)
            elif choice == 3:
                self.upgrade_downgrade(console)
            elif choice == 4:
                if not self.change_passcode(console):
                    console.say("\n! Passcode change failed.\n")
            elif choice == 5:
                return
            else:
                console.say("\n! Invalid choice! Please select 1-5.\n")