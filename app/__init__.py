"""FastDelivery calculator service.

Delivery cost calculation over validated, immutable domain value objects.
"""
