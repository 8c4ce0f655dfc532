from tripwise.schemas.trip import (
    ActivityKind, BudgetLevel, Coordinates, SlotChoice, TimeOfDay, TravelStyle,
    TripRequest, TripType, WeatherCondition, WEATHER_CONDITIONS,
)
from tripwise.schemas.itinerary import (
    POI, Activity, DayPlan, Destination, DirectionsEstimate, Location,
    ModeEstimate, Notification, PriceTiers, StylePools, TaxiEstimate,
)

__all__ = [
    "ActivityKind", "BudgetLevel", "Coordinates", "SlotChoice", "TimeOfDay",
    "TravelStyle", "TripRequest", "TripType", "WeatherCondition", "WEATHER_CONDITIONS",
    "POI", "Activity", "DayPlan", "Destination", "DirectionsEstimate", "Location",
    "ModeEstimate", "Notification", "PriceTiers", "StylePools", "TaxiEstimate",
]
