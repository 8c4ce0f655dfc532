"""
TripWise itinerary core.

Plans day/night activities for a multi-day trip, keeps them consistent with a
simulated weather forecast, and estimates travel options between points.
"""

__version__ = "1.0.0"
