"""HouseBroker REST API."""
