import io

from patternkit.atm import ATM, DEFAULT_PIN, Account, Card, main


def scripted(lines):
    feed = iter(lines)
    out = io.StringIO()
    return ATM(read=lambda: next(feed), output=out), out


def test_default_pin():
    card = Card()
    assert card.check_pin(DEFAULT_PIN)
    assert not card.check_pin("4321")


def test_set_pin_rejects_same_pin():
    card = Card()
    assert card.set_pin(DEFAULT_PIN) is False
    assert card.set_pin("4321") is True
    assert card.check_pin("4321")
    assert not card.check_pin(DEFAULT_PIN)


def test_insert_twice_fails():
    card = Card()
    assert card.insert() is True
    assert card.insert() is False
    card.remove()
    assert card.insert() is True


def test_withdraw_and_deposit():
    card = Card(100)
    card.deposit(20)
    assert card.balance == 120
    assert card.withdraw(200) is False
    assert card.balance == 120
    card.insert()
    assert card.withdraw(20) is True
    assert card.balance == 100
    assert card.inserted is False


def test_account_add_card():
    account = Account("alice")
    card = account.add_card(30)
    assert account.cards == [card]
    assert card.balance == 30


def test_session_deposit_and_balance():
    atm, out = scripted([DEFAULT_PIN, "2", "50", "3", "5"])
    account = atm.create_account("alice")
    card = atm.create_card(account)
    atm.insert_card(card)
    text = out.getvalue()
    assert "Amount deposited" in text
    assert "Balance: 50" in text
    assert text.rstrip().endswith("Thanks for Choosing Us")
    assert card.balance == 50
    assert card.inserted is False


def test_session_wrong_pin():
    atm, out = scripted(["0000"])
    card = Card(10)
    atm.insert_card(card)
    assert "Invalid pin" in out.getvalue()
    assert card.inserted is False
    assert card.balance == 10


def test_session_insufficient_balance():
    atm, out = scripted([DEFAULT_PIN, "1", "10", "5"])
    card = Card(0)
    atm.insert_card(card)
    assert "Insufficient balance" in out.getvalue()
    assert card.balance == 0


def test_session_withdraw():
    atm, out = scripted([DEFAULT_PIN, "1", "40", "5"])
    card = Card(100)
    atm.insert_card(card)
    assert "Amount withdrawn" in out.getvalue()
    assert card.balance == 100 - 40


def test_session_change_pin():
    atm, out = scripted([DEFAULT_PIN, "4", "4321", "5"])
    card = Card()
    atm.insert_card(card)
    assert "Pin changed" in out.getvalue()
    assert card.check_pin("4321")


def test_session_invalid_option_ends():
    atm, out = scripted([DEFAULT_PIN, "9"])
    card = Card()
    atm.insert_card(card)
    text = out.getvalue()
    assert "Invalid option" in text
    assert "Thanks for Choosing Us" in text


def test_card_already_inserted():
    atm, out = scripted([])
    card = Card()
    card.insert()
    atm.insert_card(card)
    assert "Card already inserted" in out.getvalue()
    assert card.inserted is True


def test_second_atm_reports_in_use():
    scripted([])
    _, out = scripted([])
    assert "ATM already in use" in out.getvalue()


def test_main_runs_session(monkeypatch, capsys):
    feed = iter([DEFAULT_PIN, "3", "5"])
    monkeypatch.setattr("builtins.input", lambda *args: next(feed))
    assert main(["--balance", "20"]) == 0
    assert "Balance: 20" in capsys.readouterr().out