"""Domain layer for HouseBroker."""
