from enum import StrEnum


class ReservationType(StrEnum):
    HOTEL = "Hotel"
    FLIGHT = "Flight"
    CAR_RENTAL = "CarRental"


class RoomType(StrEnum):
    STANDARD = "Standard"
    DELUXE = "Deluxe"


class MealPlan(StrEnum):
    BREAKFAST = "Breakfast"
    HALF_BOARD = "Half Board"
    ALL_INCLUSIVE = "All Inclusive"


class CarType(StrEnum):
    ECONOMY = "Economy"
    COMPACT = "Compact"
    SUV = "SUV"
