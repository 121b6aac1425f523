"""Domain layer - core booking logic and interfaces.

This layer contains:
- Domain entities (flights, itineraries, orders, customers)
- Payment, itinerary, observer and aircraft interfaces
- The booking error taxonomy
"""
