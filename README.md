# kingdomcable

An interactive console for a small cable provider. From it you can set up an
Internet plan, a TV package, or both together with a 10% discount. Later you
can log in with a passcode to manage what you signed up for. One balance is
shared by every service and starts at $123.45.

## Installation

```
pip install .
```

## Running

```
kingdomcable
```

The main menu offers these choices:

1. Set up an Internet account (REGULAR $35 or PREMIUM $50)
2. Set up a TV account (REGULAR $25 with 100 channels, or PREMIUM $40 with 200 channels and sports)
3. Set up a package account (Internet and TV, 10% discount)
4. Log in with your passcode to manage your accounts or change the passcode
5. Exit

Setting up a new account asks for two things:

- a four-digit passcode, entered twice
- an Irish IBAN, which must be 22 characters long: `IE`, two digits, four letters, then fourteen digits

After you log in you can do the following:

- Internet: view details, toggle kids restrictions, upgrade or downgrade the plan, change the passcode.
- TV: view details, lock or unlock channels ($10 to unlock), add Pay Per View ($10) or sports channels ($20), upgrade ($15) or downgrade the package, change the passcode.

## Using it from Python

The accounts can be driven from code. Input and output go through a
`Console`, and one `Wallet` holds the balance:

```python
from kingdomcable.account import Console, Wallet
from kingdomcable.internet import InternetAccount
from kingdomcable.tv import TVAccount

wallet = Wallet()
internet = InternetAccount(wallet)
tv = TVAccount(wallet)

tv.set_package("PREMIUM")
print(tv.render_details())
```

`kingdomcable.cli.CableService` runs the whole menu loop. Call its `run` method
with a `Console`.

## Tests

```
pip install .[test]
pytest
```