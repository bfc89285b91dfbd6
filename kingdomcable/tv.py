"""TV service account: packages, channel extras and its menu."""

from __future__ import annotations

from .account import Account, Console, Wallet

REGULAR = "REGULAR"
PREMIUM = "PREMIUM"

REGULAR_CHANNELS = 100
REGULAR_COST = 25.0

PREMIUM_CHANNELS = 200
PREMIUM_COST = 40.0

UNLOCK_FEE = 10.0
PAY_PER_VIEW_FEE = 10.0
SPORTS_FEE = 20.0
UPGRADE_FEE = 15.0

PACKAGE_DISCOUNT = 0.9

_PACKAGES_MENU = (
    "\n+============================================+"
    "\n|           TV SERVICE PACKAGES            |"
    "\n+--------------------------------------------+"
    "\n| 1. REGULAR Package                      |"
    "\n|    -> 100 Channels                       |"
    "\n|    -> $25/month                          |"
    "\n|                                          |"
    "\n| 2. PREMIUM Package                      |"
    "\n|    -> 200 Channels                       |"
    "\n|    -> Includes Sports                    |"
    "\n|    -> $40/month                          |"
    "\n+============================================+"
)

_ACCOUNT_MENU = (
    "\n+============================================+"
    "\n|            TV ACCOUNT MENU              |"
    "\n+--------------------------------------------+"
    "\n| 1. View Account Details                 |"
    "\n| 2. Toggle Channel Lock                 |"
    "\n| 3. Upgrade/Downgrade Package           |"
    "\n| 4. Toggle Pay Per View                 |"
    "\n| 5. Toggle Sports Channels              |"
    "\n| 6. Change Passcode                     |"
    "\n| 7. Exit to Main Menu                   |"
    "\n+============================================+"
)


def _num(value: float) -> str:
    """Format a number the way a default-configured output stream does."""
    return f"{value:g}"


def _parse_choice(reply: str) -> int:
    try:
        return int(reply)
    except ValueError:
        return 0


class TVAccount(Account):
    """An account holding one TV package, charged to a shared wallet."""

    def __init__(
        self,
        wallet: Wallet | None = None,
        passcode: str = "",
        iban: str = "",
        kids_mode: str = "OFF",
    ) -> None:
        super().__init__(wallet, passcode, iban, kids_mode, False, False)
        self.tv_package = ""
        self.channel_count = 0
        self.sports_channels = False
        self.pay_per_view = False
        self.channels_locked = True
        self.tv_cost = 0.0
        self.discount_percentage = 1.0

    def set_package(self, package: str) -> None:
        """Switch to ``package`` and refresh the details it implies."""
        self.tv_package = package
        self.update_package_details()

    def update_package_details(self) -> None:
        """Reset channels, sports, cost and lock to the package's defaults."""
        if self.tv_package == REGULAR:
            self.channel_count = REGULAR_CHANNELS
            self.sports_channels = False
            self.tv_cost = REGULAR_COST * self.discount_percentage
            self.channels_locked = True
        elif self.tv_package == PREMIUM:
            self.channel_count = PREMIUM_CHANNELS
            self.sports_channels = True
            self.tv_cost = PREMIUM_COST * self.discount_percentage
            self.channels_locked = True

    def render_details(self) -> str:
        """Return the framed summary of this account."""
        if self.discount_percentage == PACKAGE_DISCOUNT:
            cost_line = f"\n| Monthly Cost: ${_num(self.tv_cost):<19} (10% discount) |"
        else:
            cost_line = f"\n| Monthly Cost: ${_num(self.tv_cost):<30}|"
        lock_state = "locked" if self.channels_locked else "unlocked"
        if self.tv_package == REGULAR:
            ranges = f"1-89 unlocked, 90-100 {lock_state}) |"
        else:
            ranges = f"1-179 unlocked, 180-200 {lock_state}) |"
        sports = "ON" if self.sports_channels else "OFF"
        pay_per_view = "ON" if self.pay_per_view else "OFF"
        return "".join(
            (
                "\n-------------------------------------------",
                "\n|            TV ACCOUNT DETAILS           |",
                "\n|-----------------------------------------|",
                f"\n| Package: {self.tv_package:<30}|",
                cost_line,
                f"\n| Available Channels: {self.channel_count:<17} (",
                ranges,
                f"\n| Sports Channels: {sports:<21}|",
                f"\n| Pay Per View: {pay_per_view:<24}|",
                f"\n| Kids Restrictions: {self.kids_mode:<19}|",
                f"\n| Subscription Date: {self.subscription_date:<19}|",
                f"\n| Balance: ${_num(self.balance):<31}|",
                "\n|------------------------------------------|\n",
            )
        )

    def setup_tv(self, console: Console) -> str:
        """Offer the packages until one is chosen, charge it and activate TV."""
        while True:
            console.say(_PACKAGES_MENU)
            choice = console.ask("\n\n* Enter your choice (1-2): ")
            if choice == "1":
                self.set_package(REGULAR)
                self.deduct_payment(REGULAR_COST * self.discount_percentage)
                break
            if choice == "2":
                self.set_package(PREMIUM)
                self.deduct_payment(PREMIUM_COST * self.discount_percentage)
                break
            console.say("\n! Invalid choice! Please select 1 or 2.\n")
            console.discard_line()

        self.has_tv = True
        configured = f"{self.tv_package} package configured"
        console.say(
            "\n+============================================+"
            "\n|       TV SERVICE ACTIVATED!             |"
            "\n+--------------------------------------------+"
            f"\n| [OK] {configured:<34} |"
            f"\n| --> Monthly cost: ${_num(self.tv_cost):<22} |"
            "\n+============================================+\n"
        )
        console.say(self.render_details())
        return self.tv_package

    def toggle_channel_lock(self, console: Console) -> bool:
        """Lock channels, or unlock them for a fee; report a change."""
        status = "LOCKED" if self.channels_locked else "UNLOCKED"
        console.say(
            "\n+--------------------------------------------+"
            "\n|         CHANNEL LOCK SETTINGS           |"
            "\n+--------------------------------------------+"
            f"\n| Current Status: {status:<23} |"
            "\n+--------------------------------------------+\n"
        )
        action = "UNLOCK" if self.channels_locked else "LOCK"
        if not console.ask_yes(f"\n* Would you like to {action} channels? (Y/N): "):
            return False
        changed = False
        if self.channels_locked:
            confirmed = console.ask_yes("\n! This will cost $10. Confirm? (Y/N): ")
            if confirmed and self.deduct_payment(UNLOCK_FEE):
                self.channels_locked = False
                changed = True
                console.say("\n* Channels successfully UNLOCKED!\n")
        else:
            self.channels_locked = True
            changed = True
            console.say("\n* Channels successfully LOCKED!\n")
        console.say(self.render_details())
        return changed

    def toggle_pay_per_view(self, console: Console) -> bool:
        """Activate pay per view for a fee; report whether it was activated."""
        if self.pay_per_view:
            console.say("\n! Pay Per View is already ACTIVE.\n")
            return False
        if console.ask_yes("\n* Activate Pay Per View for $10? (Y/N): ") and self.deduct_payment(
            PAY_PER_VIEW_FEE
        ):
            self.pay_per_view = True
            console.say("\n* Pay Per View successfully ACTIVATED!\n")
            console.say(self.render_details())
            return True
        return False

    def toggle_sports_channels(self, console: Console) -> bool:
        """Activate sports channels for a fee; report whether they were activated."""
        if self.sports_channels:
            console.say("\n! Sports channels are already ACTIVE.\n")
            return False
        if console.ask_yes("\n* Activate Sports Channels for $20? (Y/N): ") and self.deduct_payment(
            SPORTS_FEE
        ):
            self.sports_channels = True
            console.say("\n* Sports Channels successfully ACTIVATED!\n")
            console.say(self.render_details())
            return True
        return False

    def upgrade_downgrade(self, console: Console) -> bool:
        """Move between packages on request; report whether the package changed."""
        is_regular = self.tv_package == REGULAR
        current = "REGULAR ($25)" if is_regular else "PREMIUM ($40)"
        console.say(
            "\n+--------------------------------------------+"
            "\n|       PACKAGE UPGRADE/DOWNGRADE         |"
            "\n+--------------------------------------------+"
            f"\n| Current Package: {current:<23} |"
            "\n+--------------------------------------------+\n"
        )
        action = "UPGRADE to PREMIUM" if is_regular else "DOWNGRADE to REGULAR"
        if not console.ask_yes(f"\n* Would you like to {action}? (Y/N): "):
            return False
        changed = False
        if is_regular:
            if self.deduct_payment(UPGRADE_FEE):
                self.set_package(PREMIUM)
                changed = True
                console.say(
                    "\n+--------------------------------------------+"
                    "\n|       UPGRADE COMPLETE!                 |"
                    "\n+--------------------------------------------+"
                    "\n| [OK] Now subscribed to PREMIUM TV       |"
                    f"\n| --> New balance: ${_num(self.balance):<24} |"
                    "\n+--------------------------------------------+\n"
                )
            else:
                console.say(
                    "\n! TRANSACTION FAILED!"
                    f"\n* Needed: $15 | Available: ${_num(self.balance)}\n"
                )
        else:
            self.set_package(REGULAR)
            changed = True
            console.say(
                "\n+--------------------------------------------+"
                "\n|       DOWNGRADE COMPLETE!               |"
                "\n+--------------------------------------------+"
                "\n| [OK] Now subscribed to REGULAR TV       |"
                "\n+--------------------------------------------+\n"
            )
        console.say(self.render_details())
        return changed

    def show_menu(self, console: Console) -> None:
        """Run the account management menu until the user exits."""
        actions = {
            2: self.toggle_channel_lock,
            3: self.upgrade_downgrade,
            4: self.toggle_pay_per_view,
            5: self.toggle_sports_channels,
            6: self.change_passcode,
        }
        while True:
            console.say(_ACCOUNT_MENU)
            choice = _parse_choice(console.ask("\n\n* Enter your choice (1-7): "))
            if choice == 0:
                console.discard_line()
            if choice == 1:
                console.say(self.render_details())
            elif choice in actions:
                actions[choice](console)
            elif choice == 7:
                return
            else:
                console.say("\n! Invalid choice! Please select 1-7.\n")