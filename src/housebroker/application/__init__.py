"""Application layer for HouseBroker."""
