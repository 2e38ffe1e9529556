"""Delivery bounded context — Couriers, Storage Places and Orders.

Decides whether a courier can carry an order, which storage place the order
goes into, how long delivery takes and how the courier advances on the grid.
Both aggregates are plain CQRS aggregates coordinated by the application
layer; neither holds a reference to the other beyond an identifier.
"""

from protean.domain import Domain

from delivery.utils.logging import configure_logging

# Configure logging for the application
configure_logging()

# Domain Composition Root
delivery = Domain(name="delivery")
