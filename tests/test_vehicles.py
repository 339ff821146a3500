from patternkit.vehicles import (
    DriveStrategy,
    NormalDrive,
    OffRoad,
    Passenger,
    Sports,
    SportsDrive,
    Vehicle,
)


def test_passenger_drives_normally():
    assert Passenger().perform_drive() == "Driving with normal strategy."


def test_sports_uses_sports_mode():
    assert Sports().perform_drive() == "Driving with sports mode."


def test_offroad_shares_sports_strategy():
    assert OffRoad().perform_drive() == Sports().perform_drive()
    assert isinstance(OffRoad().drive_strategy, SportsDrive)


def test_vehicle_uses_given_strategy():
    class Eco(DriveStrategy):
        message = "eco"

    assert Vehicle(Eco()).perform_drive() == "eco"


def test_strategy_can_be_swapped():
    car = Passenger()
    car.drive_strategy = SportsDrive()
    assert car.perform_drive() == SportsDrive().drive()
    assert car.perform_drive() != NormalDrive().drive()