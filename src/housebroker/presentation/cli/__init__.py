"""HouseBroker command line interface."""
