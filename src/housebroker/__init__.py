"""HouseBroker - real-estate listing platform backend.

The ``housebroker`` package holds the commission domain, its persistence
and the HTTP API. Identity concerns (users, roles, tokens) live in
``housebroker_identity``; configuration lives in ``housebroker_config``.
"""
