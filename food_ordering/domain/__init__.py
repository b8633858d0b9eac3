"""
Domain layer - Core business entities and domain logic.

This layer contains the clients, orders and deliveries of the food ordering
service together with the outcome types returned by the services,
independent of any web or persistence concerns.
"""
